#!/usr/bin/env python3
import math
import random

import pytest

from gradual_isqrt.errors import OutOfRangeError
from gradual_isqrt.sqrt.floor import (
    isqrt_gradually_ascending_from,
    isqrt_gradually_changing_from,
    isqrt_gradually_descending_from,
)


def test_ascending_u16():
    to_isqrt = isqrt_gradually_ascending_from(0, width=16)
    result = [to_isqrt(n) for n in range(17)]
    # n:        0  1  2  3  4  5  6  7  8  9 10 11 12 13 14 15 16
    expected = [0, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 3, 4]
    assert result == expected


def test_scaled_ascending_u32():
    # scaling the input by 4**k adds k bits of precision to the root
    to_isqrt = isqrt_gradually_ascending_from(0, width=32)
    result = [to_isqrt(1024 * n) for n in range(10)]
    assert result == [0, 32, 45, 55, 64, 71, 78, 84, 90, 96]


def test_ascending_ignores_smaller_values():
    to_isqrt = isqrt_gradually_ascending_from(0, width=16)
    assert to_isqrt(50) == 7
    assert to_isqrt(3) == 7


def test_descending_u16():
    to_isqrt = isqrt_gradually_descending_from(5, width=16)
    result = [to_isqrt(n) for n in reversed(range(10))]
    assert result == [3, 2, 2, 2, 2, 2, 1, 1, 1, 0]


def test_descending_ignores_larger_values():
    to_isqrt = isqrt_gradually_descending_from(5, width=16)
    assert to_isqrt(10) == 3
    assert to_isqrt(1000) == 3


def test_changing_u16():
    to_isqrt = isqrt_gradually_changing_from(0, width=16)
    result = [to_isqrt(n) for n in [*range(10), *reversed(range(10))]]
    assert result == [0, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 2, 2, 2, 2, 2, 1, 1, 1, 0]


def test_changing_random_walk_u64():
    rng = random.Random(42)
    to_isqrt = isqrt_gradually_changing_from(1000, width=64)
    n = 1000 * 1000
    for _ in range(5000):
        n = min(max(n + rng.randint(-5000, 5000), 0), 2**64 - 1)
        assert to_isqrt(n) == math.isqrt(n)


def test_changing_large_jumps_stay_correct():
    to_isqrt = isqrt_gradually_changing_from(0, width=32)
    for n in (2**32 - 1, 0, 123456789, 5, 2**31):
        assert to_isqrt(n) == math.isqrt(n)


@pytest.mark.parametrize(
    "factory",
    [
        isqrt_gradually_changing_from,
        isqrt_gradually_ascending_from,
        isqrt_gradually_descending_from,
    ],
)
def test_range_checks(factory):
    to_isqrt = factory(15, width=8)
    assert to_isqrt(255) == 15
    for bad in (-1, 256, 1.0):
        with pytest.raises(OutOfRangeError):
            to_isqrt(bad)
    with pytest.raises(OutOfRangeError):
        factory(16, width=8)
    with pytest.raises(OutOfRangeError):
        factory(-1, width=8)


@pytest.mark.large
def test_entire_ascending_range_u16():
    to_isqrt = isqrt_gradually_ascending_from(0, width=16)
    for n in range(2**16):
        t = to_isqrt(n)
        assert t * t <= n
        assert (t + 1) * (t + 1) > n


@pytest.mark.large
def test_entire_descending_range_u16():
    to_isqrt = isqrt_gradually_descending_from(255, width=16)
    for n in reversed(range(2**16)):
        t = to_isqrt(n)
        assert t * t <= n < (t + 1) * (t + 1)


if __name__ == "__main__":
    test_ascending_u16()
    test_changing_u16()
