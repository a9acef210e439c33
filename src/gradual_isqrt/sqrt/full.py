"""
From-scratch integer square roots.

Every function returns ``floor(sqrt(n))`` for an integer ``n >= 0`` and
rejects anything else with :class:`~gradual_isqrt.errors.OutOfRangeError`.
They are the fallback used by the gradual tracker when a jump is too large
to walk, and the reference the gradual paths are checked against.
"""

import math

from ..widths import check_value


def find_msb(x: int, width: int) -> int:
    """
    Index of the most significant set bit of ``x`` within ``width`` bits.

    A zero input reports ``width - 1``, matching the hardware range reduction
    that treats zero as already normalised.
    """
    for i in range(width - 1, -1, -1):
        if (1 << i) <= x:
            return i
    return width - 1


def _upper_bound(n: int) -> int:
    # 2**ceil(bits / 2) is strictly greater than sqrt(n)
    return 1 << ((n.bit_length() + 1) // 2)


def isqrt_newton(n: int) -> int:
    """Newton's iteration on integers, starting from a power of two above the root."""
    n = check_value(n, what="isqrt operand")
    if n < 2:
        return n
    x = _upper_bound(n)
    while True:
        y = (x + n // x) // 2
        if y >= x:
            return x
        x = y


def isqrt_bisect(n: int) -> int:
    """Binary search over candidate roots, keeping ``lo**2 <= n < hi**2``."""
    n = check_value(n, what="isqrt operand")
    lo, hi = 0, _upper_bound(n)
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if mid * mid <= n:
            lo = mid
        else:
            hi = mid
    return lo


def isqrt_bitwise(n: int, width: int = None) -> int:
    """Digit-by-digit method: shifts, adds and compares only."""
    n = check_value(n, what="isqrt operand")
    if n == 0:
        return 0
    if width is None or width < n.bit_length():
        width = n.bit_length()
    # highest power of four not above n
    bit = 1 << (find_msb(n, width) & ~1)
    res = 0
    while bit:
        if n >= res + bit:
            n -= res + bit
            res = (res >> 1) + bit
        else:
            res >>= 1
        bit >>= 2
    return res


def isqrt_builtin(n: int) -> int:
    n = check_value(n, what="isqrt operand")
    return math.isqrt(n)


def isqrt_closest(n: int) -> int:
    """Square root rounded to the nearest integer (exact halves cannot occur)."""
    n = check_value(n, what="isqrt operand")
    return (1 + math.isqrt(4 * n)) // 2


isqrt_map = {
    "newton": isqrt_newton,
    "bisect": isqrt_bisect,
    "bitwise": isqrt_bitwise,
    "builtin": isqrt_builtin,
}


def get_isqrt(name: str):
    if callable(name):
        return name
    if name not in isqrt_map:
        raise ValueError(
            f"Unknown full isqrt algorithm: {name}, should be one of: "
            + ", ".join(isqrt_map)
        )
    return isqrt_map[name]
