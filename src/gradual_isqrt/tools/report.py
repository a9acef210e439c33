import logging

from tabulate import tabulate

logger = logging.getLogger(__name__)

HEADERS = ["Name", "Width", "n", "s", "Updates", "Steps", "Recomputes", "Errors"]


def report_tracker_stats(trackers) -> list:
    """
    Log a table of tracker statistics and return its rows.

    :param trackers: a single tracker, a list of trackers, or a dict
        mapping names to trackers.
    :return: one row per tracker, in ``HEADERS`` order.
    """
    if isinstance(trackers, dict):
        named = list(trackers.items())
    elif isinstance(trackers, (list, tuple)):
        named = [(str(i), t) for i, t in enumerate(trackers)]
    else:
        named = [("0", trackers)]

    rows = []
    for name, tracker in named:
        stats = tracker.stats
        rows.append(
            [
                name,
                f"u{tracker.width}",
                tracker.value(),
                tracker.root(),
                stats["updates"],
                stats["steps"],
                stats["recomputes"],
                stats["errors"],
            ]
        )
    logger.info("Gradual isqrt tracker statistics")
    logger.info("\n" + tabulate(rows, headers=HEADERS, disable_numparse=True))
    return rows
