from .errors import (
    GradualIsqrtError,
    OutOfRangeError,
    IsqrtOverflowError,
    IsqrtUnderflowError,
)
from .widths import SUPPORTED_WIDTHS, DEFAULT_WIDTH, parse_width, max_value, max_root

from . import sqrt
from .sqrt import isqrt_map, get_isqrt, isqrt_stream
from .sqrt.floor import (
    isqrt_gradually_changing_from,
    isqrt_gradually_ascending_from,
    isqrt_gradually_descending_from,
)

from .tracker import GradualSqrtTracker

from .tools import (
    tracker_from_config,
    report_tracker_stats,
    set_logging_verbosity,
    get_logger,
)
