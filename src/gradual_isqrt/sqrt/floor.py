"""
Gradual floor square roots.

Each factory returns a function that remembers the last root it produced
together with the bracket of values that share it, ``[s*s, (s+1)**2 - 1]``.
A new input inside the bracket costs one comparison; an input outside moves
the root one step at a time, updating the bracket with additions only:

    s   lo   hi
    0    0    0
    1    1    3
    2    4    8
    3    9   15

For example, after 133 (root 11, bracket ending at 143) an input of 136 is
answered immediately, and 145 takes a single step to 12. Large jumps still
give the right answer, they just take ``|delta s|`` steps to get there; use
:class:`~gradual_isqrt.tracker.GradualSqrtTracker` when jumps can be large.
"""

from ..widths import DEFAULT_WIDTH, check_value, max_root, max_value


def isqrt_gradually_changing_from(init: int = 0, width=DEFAULT_WIDTH):
    """
    Return ``f(n) -> floor(sqrt(n))`` starting from the root ``init``.

    >>> to_isqrt = isqrt_gradually_changing_from(0, width=16)
    >>> [to_isqrt(n) for n in [*range(10), *reversed(range(10))]]
    [0, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 2, 2, 2, 2, 2, 1, 1, 1, 0]
    """
    maximum = max_value(width)
    sqrt = check_value(init, max_root(width), "initial root")
    lo = sqrt * sqrt
    hi = lo + 2 * sqrt

    def to_isqrt(n: int) -> int:
        nonlocal sqrt, lo, hi
        n = check_value(n, maximum)
        if n > hi:
            while n > hi:
                sqrt += 1
                lo = hi + 1
                hi = lo + 2 * sqrt
        else:
            while n < lo:
                sqrt -= 1
                hi = lo - 1
                lo = hi - 2 * sqrt
        return sqrt

    return to_isqrt


def isqrt_gradually_ascending_from(init: int = 0, width=DEFAULT_WIDTH):
    """
    Like :func:`isqrt_gradually_changing_from` for non-decreasing inputs.

    A smaller input than before returns the previous root again.

    >>> to_isqrt = isqrt_gradually_ascending_from(0, width=16)
    >>> [to_isqrt(n) for n in range(17)]
    [0, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 3, 4]
    """
    maximum = max_value(width)
    sqrt = check_value(init, max_root(width), "initial root")
    hi = sqrt * (sqrt + 2)

    def to_isqrt(n: int) -> int:
        nonlocal sqrt, hi
        n = check_value(n, maximum)
        while n > hi:
            sqrt += 1
            hi += 2 * sqrt + 1
        return sqrt

    return to_isqrt


def isqrt_gradually_descending_from(init: int = 0, width=DEFAULT_WIDTH):
    """
    Like :func:`isqrt_gradually_changing_from` for non-increasing inputs.

    A larger input than before returns the previous root again.

    >>> to_isqrt = isqrt_gradually_descending_from(5, width=16)
    >>> [to_isqrt(n) for n in reversed(range(10))]
    [3, 2, 2, 2, 2, 2, 1, 1, 1, 0]
    """
    maximum = max_value(width)
    sqrt = check_value(init, max_root(width), "initial root")
    lo = sqrt * sqrt

    def to_isqrt(n: int) -> int:
        nonlocal sqrt, lo
        n = check_value(n, maximum)
        while n < lo:
            sqrt -= 1
            lo -= 2 * sqrt + 1
        return sqrt

    return to_isqrt
