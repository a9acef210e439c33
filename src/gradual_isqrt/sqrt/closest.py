"""
Gradual square roots rounded to the nearest integer.

Same scheme as :mod:`gradual_isqrt.sqrt.floor`, but the bracket of values
sharing the root ``s`` is ``[s*s - s + 1, s*s + s]``:

    s   lo   hi
    0    0    0
    1    1    2
    2    3    6
    3    7   12
    4   13   20

Going down, ``s = 0`` is special-cased to the single value 0. Going up, the
bracket of the largest root is cut off at the width's maximum.
"""

from ..widths import DEFAULT_WIDTH, check_value, max_closest_root, max_value


def _bracket(sqrt: int, maximum: int):
    if sqrt == 0:
        return 0, 0
    return sqrt * sqrt - sqrt + 1, min(sqrt * sqrt + sqrt, maximum)


def isqrt_gradually_changing_from(init: int = 0, width=DEFAULT_WIDTH):
    """
    Return ``f(n) -> round(sqrt(n))`` starting from the root ``init``.

    >>> to_isqrt = isqrt_gradually_changing_from(0, width=16)
    >>> [to_isqrt(n) for n in [*range(10), *reversed(range(10))]]
    [0, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 2, 2, 2, 2, 1, 1, 0]
    """
    maximum = max_value(width)
    sqrt = check_value(init, max_closest_root(width), "initial root")
    lo, hi = _bracket(sqrt, maximum)

    def to_isqrt(n: int) -> int:
        nonlocal sqrt, lo, hi
        n = check_value(n, maximum)
        if n > hi:
            while n > hi:
                sqrt += 1
                lo = hi + 1
                hi = min(hi + 2 * sqrt, maximum)
        else:
            while n < lo:
                sqrt -= 1
                hi = lo - 1
                lo = hi - 2 * sqrt + 1 if sqrt else 0
        return sqrt

    return to_isqrt


def isqrt_gradually_ascending_from(init: int = 0, width=DEFAULT_WIDTH):
    """
    >>> to_isqrt = isqrt_gradually_ascending_from(0, width=16)
    >>> [to_isqrt(n) for n in range(17)]
    [0, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 4, 4]
    """
    maximum = max_value(width)
    sqrt = check_value(init, max_closest_root(width), "initial root")
    _, hi = _bracket(sqrt, maximum)

    def to_isqrt(n: int) -> int:
        nonlocal sqrt, hi
        n = check_value(n, maximum)
        while n > hi:
            sqrt += 1
            hi += 2 * sqrt
        return sqrt

    return to_isqrt


def isqrt_gradually_descending_from(init: int = 0, width=DEFAULT_WIDTH):
    """
    >>> to_isqrt = isqrt_gradually_descending_from(4, width=16)
    >>> [to_isqrt(n) for n in reversed(range(10))]
    [3, 3, 3, 2, 2, 2, 2, 1, 1, 0]
    """
    maximum = max_value(width)
    sqrt = check_value(init, max_closest_root(width), "initial root")
    lo, _ = _bracket(sqrt, maximum)

    def to_isqrt(n: int) -> int:
        nonlocal sqrt, lo
        n = check_value(n, maximum)
        while n < lo:
            sqrt -= 1
            lo = lo - 2 * sqrt if sqrt else 0
        return sqrt

    return to_isqrt
