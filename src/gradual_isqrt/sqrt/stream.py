import numpy as np

from ..tracker import GradualSqrtTracker
from ..widths import DEFAULT_WIDTH, check_value, max_root, max_value, parse_width
from . import closest
from .full import isqrt_closest

_uint_dtypes = [(8, np.uint8), (16, np.uint16), (32, np.uint32), (64, np.uint64)]


def root_dtype(width=DEFAULT_WIDTH, rounding: str = "floor"):
    """
    Smallest unsigned numpy dtype holding every root of a ``width``-wide value.

    Rounded roots can reach ``2**(bits // 2)``, one bit more than floor roots.
    Roots wider than 64 bits fall back to ``object``.
    """
    bits = parse_width(width) // 2
    if rounding == "closest":
        bits += 1
    for dtype_bits, dtype in _uint_dtypes:
        if bits <= dtype_bits:
            return np.dtype(dtype)
    return np.dtype(object)


def _floor_roots(values, width, init):
    tracker = None
    if init is not None:
        init = check_value(init, max_root(width), "initial root")
        tracker = GradualSqrtTracker(init * init, width=width)
    for n in values:
        if tracker is None:
            tracker = GradualSqrtTracker(n, width=width)
            yield tracker.root()
        else:
            yield tracker.set(n)


def _closest_roots(values, width, init):
    # A jump of at most bits * (2s + 1) moves a rounded root by O(bits) steps;
    # anything larger restarts the walk from a full computation.
    bits = parse_width(width)
    maximum = max_value(width)
    to_isqrt = None
    if init is not None:
        to_isqrt = closest.isqrt_gradually_changing_from(init, width=width)
        last, root = init * init, init
    for n in values:
        n = check_value(n, maximum)
        if to_isqrt is None or abs(n - last) > bits * (2 * root + 1):
            to_isqrt = closest.isqrt_gradually_changing_from(
                isqrt_closest(n), width=width
            )
        root = to_isqrt(n)
        last = n
        yield root


rounding_map = {
    "floor": _floor_roots,
    "closest": _closest_roots,
}


def isqrt_stream(values, width=DEFAULT_WIDTH, rounding: str = "floor", init=None):
    """
    Square roots of a gradually changing sequence, as a numpy array.

    Large jumps anywhere in the sequence, including a first value far from
    ``init``, fall back to a full computation instead of a long walk.

    :param values: iterable of integers (a numpy integer array works too).
    :param width: value width, e.g. ``16`` or ``"u16"``.
    :param rounding: ``"floor"`` or ``"closest"``.
    :param init: root to start the walk from; ``None`` starts at the root of
        the first value.
    """
    if rounding not in rounding_map:
        raise ValueError(
            f"Unknown rounding: {rounding}, should be one of: "
            + ", ".join(rounding_map)
        )
    roots = list(rounding_map[rounding](values, width, init))
    return np.array(roots, dtype=root_dtype(width, rounding))
