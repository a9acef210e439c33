#!/usr/bin/env python3
import logging

import pytest

from gradual_isqrt import GradualSqrtTracker
from gradual_isqrt.tools import get_logger, report_tracker_stats, root_logger, set_logging_verbosity
from gradual_isqrt.tools.report import HEADERS


def test_report_tracker_stats(caplog):
    caplog.set_level(logging.INFO, logger="gradual_isqrt")
    walking = GradualSqrtTracker(100, width=32)
    walking.add(21)
    jumping = GradualSqrtTracker(0, width=16)
    jumping.set(65535)
    with pytest.raises(OverflowError):
        jumping.add(1)

    rows = report_tracker_stats({"walking": walking, "jumping": jumping})
    assert rows == [
        ["walking", "u32", 121, 11, 1, 1, 1, 0],
        ["jumping", "u16", 65535, 255, 1, 0, 2, 1],
    ]
    assert len(rows[0]) == len(HEADERS)
    assert "Recomputes" in caplog.text
    assert "walking" in caplog.text


def test_report_accepts_single_tracker_and_list():
    tracker = GradualSqrtTracker(9)
    assert report_tracker_stats(tracker)[0][:4] == ["0", "u64", 9, 3]
    rows = report_tracker_stats([tracker, GradualSqrtTracker(4)])
    assert [row[0] for row in rows] == ["0", "1"]


def test_set_logging_verbosity():
    for level, expected in [("debug", logging.DEBUG), ("ERROR", logging.ERROR), ("info", logging.INFO)]:
        set_logging_verbosity(level)
        assert root_logger.level == expected
    with pytest.raises(ValueError):
        set_logging_verbosity("loud")


def test_get_logger():
    assert get_logger("tracker") is logging.getLogger("gradual_isqrt.tracker")
    assert get_logger("gradual_isqrt.sqrt.full").name == "gradual_isqrt.sqrt.full"


def test_tracker_logs_recomputes(caplog):
    caplog.set_level(logging.DEBUG, logger="gradual_isqrt")
    tracker = GradualSqrtTracker(0, full_sqrt="bitwise")
    tracker.set(2**60)
    assert "Recomputed isqrt(1152921504606846976) = 1073741824 with bitwise" in caplog.text
    with pytest.raises(OverflowError):
        tracker.add(2**64)
    assert "Rejected update" in caplog.text
