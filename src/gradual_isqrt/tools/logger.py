import logging

from colorlog import ColoredFormatter

PACKAGE_LOGGER_NAME = "gradual_isqrt"

formatter = ColoredFormatter(
    "%(log_color)s%(levelname)-8s%(reset)s %(purple)s%(name)s%(reset)s %(blue)s%(message)s",
    reset=True,
    log_colors={
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "red,bg_white",
    },
    style="%",
)

root_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

# Importing twice (e.g. via importlib.reload) must not duplicate output
if not any(getattr(h, "_gradual_isqrt", False) for h in root_logger.handlers):
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    handler._gradual_isqrt = True
    root_logger.addHandler(handler)


def set_logging_verbosity(level: str = "info"):
    """Set the level of every logger under ``gradual_isqrt``."""
    level = level.lower()
    match level:
        case "debug":
            root_logger.setLevel(logging.DEBUG)
        case "info":
            root_logger.setLevel(logging.INFO)
        case "warning":
            root_logger.setLevel(logging.WARNING)
        case "error":
            root_logger.setLevel(logging.ERROR)
        case "critical":
            root_logger.setLevel(logging.CRITICAL)
        case _:
            raise ValueError(
                f"Unknown logging level: {level}, should be one of: debug, info, warning, error, critical"
            )
    root_logger.debug(f"Logging level set to {level}")


def get_logger(name: str):
    """Child of the package logger; a fully qualified module name is accepted too."""
    prefix = PACKAGE_LOGGER_NAME + "."
    if name.startswith(prefix):
        name = name[len(prefix) :]
    return root_logger.getChild(name)
