"""
Fixed-width unsigned integers.

Python integers are unbounded, so a width here is only the range
``[0, 2**bits - 1]`` that values are checked against. The square root of
a ``bits``-wide value always fits in ``bits // 2`` bits.
"""

import math
import operator

from .errors import out_of_range

SUPPORTED_WIDTHS = (8, 16, 32, 64, 128)
DEFAULT_WIDTH = 64

width_aliases = {f"u{bits}": bits for bits in SUPPORTED_WIDTHS}


def parse_width(width) -> int:
    """Accept ``32`` or ``"u32"`` (or ``"32"``) and return the bit count."""
    error = ValueError(
        f"Unsupported integer width: {width!r}, should be one of: "
        + ", ".join(f"u{bits}" for bits in SUPPORTED_WIDTHS)
    )
    if isinstance(width, bool):
        raise error
    if isinstance(width, str):
        key = width.strip().lower()
        if key in width_aliases:
            return width_aliases[key]
        if not key.isdigit():
            raise error
        width = int(key)
    # 64.0 == 64, so floats have to be turned away before the lookup
    try:
        width = operator.index(width)
    except TypeError:
        raise error from None
    if width not in SUPPORTED_WIDTHS:
        raise error
    return width


def max_value(width) -> int:
    return (1 << parse_width(width)) - 1


def max_root(width) -> int:
    # isqrt(2**bits - 1) == 2**(bits // 2) - 1 for even bit counts
    return (1 << (parse_width(width) // 2)) - 1


def max_closest_root(width) -> int:
    """Largest round-to-nearest root of a ``width``-wide value."""
    n = max_value(width)
    return (1 + math.isqrt(4 * n)) // 2


def check_value(x, maximum=None, what: str = "value") -> int:
    """
    Return ``x`` as a plain int if it lies in ``[0, maximum]``.

    Anything usable as an index is accepted (numpy integer scalars included);
    floats, bools and out-of-range values raise :class:`OutOfRangeError`.
    A ``maximum`` of ``None`` only bounds the value below.
    """
    if isinstance(x, bool):
        raise out_of_range(x, maximum, what)
    try:
        n = operator.index(x)
    except TypeError:
        raise out_of_range(x, maximum, what) from None
    if n < 0 or (maximum is not None and n > maximum):
        raise out_of_range(n, maximum, what)
    return n
