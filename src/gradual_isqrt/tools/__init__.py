from .config_load import (
    load_config,
    save_config,
    tracker_from_config,
    convert_none_to_str_na,
    convert_str_na_to_none,
)
from .logger import root_logger, set_logging_verbosity, get_logger
from .report import report_tracker_stats
