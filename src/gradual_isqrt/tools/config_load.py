import logging
from pathlib import Path

import toml

from ..tracker import GradualSqrtTracker
from .logger import set_logging_verbosity

logger = logging.getLogger(__name__)

TRACKER_KEYS = ("initial", "width", "full_sqrt", "step_limit")


def convert_str_na_to_none(d):
    """
    Since toml does not support None, we use "NA" to represent None.
    """
    if isinstance(d, dict):
        return {k: convert_str_na_to_none(v) for k, v in d.items()}
    if isinstance(d, (list, tuple)):
        return type(d)(convert_str_na_to_none(v) for v in d)
    return None if d == "NA" else d


def convert_none_to_str_na(d):
    """
    The reverse of :func:`convert_str_na_to_none`; without it a key whose value
    is None would go missing from the toml file.
    """
    if isinstance(d, dict):
        return {k: convert_none_to_str_na(v) for k, v in d.items()}
    if isinstance(d, (list, tuple)):
        return type(d)(convert_none_to_str_na(v) for v in d)
    return "NA" if d is None else d


def _check_toml_path(config_path):
    config_path = Path(config_path)
    if config_path.suffix != ".toml":
        raise ValueError(f"expected .toml configuration file, got {config_path}")
    return config_path


def load_config(config_path):
    """Load from a toml config file and convert "NA" to None."""
    with open(_check_toml_path(config_path), "r") as f:
        config = toml.load(f)
    return convert_str_na_to_none(config)


def save_config(config, config_path):
    """Convert None to "NA" and save to a toml config file."""
    with open(_check_toml_path(config_path), "w") as f:
        toml.dump(convert_none_to_str_na(config), f)


def tracker_from_config(config):
    """
    Build a :class:`~gradual_isqrt.tracker.GradualSqrtTracker` from a config.

    ``config`` is a dict or a path to a toml file shaped like::

        [tracker]
        width = "u32"
        initial = 0
        full_sqrt = "newton"
        step_limit = "NA"    # NA keeps the default

        [logging]
        level = "info"

    Missing or "NA" keys fall back to the constructor defaults; unknown keys
    in ``[tracker]`` are rejected.
    """
    if not isinstance(config, dict):
        config = load_config(config)
    else:
        config = convert_str_na_to_none(config)

    level = config.get("logging", {}).get("level")
    if level is not None:
        set_logging_verbosity(level)

    section = config.get("tracker", {})
    unknown = sorted(set(section) - set(TRACKER_KEYS))
    if unknown:
        raise ValueError(
            f"Unknown tracker option(s): {', '.join(unknown)}, should be among: "
            + ", ".join(TRACKER_KEYS)
        )
    kwargs = {k: v for k, v in section.items() if v is not None}
    logger.debug(f"Creating tracker from config: {kwargs}")
    return GradualSqrtTracker(**kwargs)
