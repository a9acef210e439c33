#!/usr/bin/env python3
import random

import pytest

from gradual_isqrt.errors import OutOfRangeError
from gradual_isqrt.sqrt import closest
from gradual_isqrt.sqrt.full import isqrt_closest


def test_closest_ascending_u16():
    to_isqrt = closest.isqrt_gradually_ascending_from(0, width=16)
    result = [to_isqrt(n) for n in range(17)]
    # n:        0  1  2  3  4  5  6  7  8  9 10 11 12 13 14 15 16
    expected = [0, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 4, 4]
    assert result == expected


def test_closest_descending_u16():
    to_isqrt = closest.isqrt_gradually_descending_from(4, width=16)
    result = [to_isqrt(n) for n in reversed(range(10))]
    assert result == [3, 3, 3, 2, 2, 2, 2, 1, 1, 0]


def test_closest_changing_u16():
    to_isqrt = closest.isqrt_gradually_changing_from(0, width=16)
    result = [to_isqrt(n) for n in [*range(10), *reversed(range(10))]]
    assert result == [0, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 2, 2, 2, 2, 1, 1, 0]


def test_closest_top_of_u8():
    to_isqrt = closest.isqrt_gradually_changing_from(0, width=8)
    # sqrt(255) ~ 15.97 rounds up past the floor root's width
    assert to_isqrt(255) == 16
    assert to_isqrt(240) == 15
    assert to_isqrt(241) == 16
    assert to_isqrt(0) == 0


def test_closest_random_walk():
    rng = random.Random(7)
    to_isqrt = closest.isqrt_gradually_changing_from(0, width=32)
    n = 0
    for _ in range(5000):
        n = min(max(n + rng.randint(-300, 1000), 0), 2**32 - 1)
        assert to_isqrt(n) == isqrt_closest(n)


def test_closest_range_checks():
    to_isqrt = closest.isqrt_gradually_changing_from(16, width=8)
    assert to_isqrt(250) == 16
    with pytest.raises(OutOfRangeError):
        to_isqrt(256)
    with pytest.raises(OutOfRangeError):
        closest.isqrt_gradually_ascending_from(17, width=8)


@pytest.mark.large
def test_entire_closest_range_u16():
    to_isqrt = closest.isqrt_gradually_changing_from(0, width=16)
    for n in [*range(2**16), *reversed(range(2**16))]:
        assert to_isqrt(n) == isqrt_closest(n)
