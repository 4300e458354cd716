import logging
import sys
from typing import Callable, Dict

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

LOGGER_NAME = "piece_sorter"

# Names accepted in config.yaml (logging.level) and resolved from --debug/--trace
LEVELS: Dict[str, int] = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _max_level_filter(max_level: int) -> Callable[[logging.LogRecord], bool]:
    def _filter(record: logging.LogRecord) -> bool:
        return record.levelno <= max_level
    return _filter


def _build_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    fmt = logging.Formatter("[%(levelname)s] %(message)s")

    # Report lines on stdout; warnings (invalid sequence) and errors on stderr
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(fmt)
    stdout_handler.addFilter(_max_level_filter(logging.INFO))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(fmt)
    stderr_handler.setLevel(logging.WARNING)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    logger.propagate = False
    return logger


_LOGGER = _build_logger()


def get_logger() -> logging.Logger:
    return _LOGGER


def set_log_level(level: str) -> int:
    """Apply a level name; unknown or empty names fall back to info."""
    resolved = LEVELS.get(str(level or "").strip().lower(), logging.INFO)
    _LOGGER.setLevel(resolved)
    return resolved


def log_trace(message: str) -> None:
    _LOGGER.log(TRACE_LEVEL, message)


def log_debug(message: str) -> None:
    _LOGGER.debug(message)


def log_info(message: str) -> None:
    _LOGGER.info(message)


def log_warn(message: str) -> None:
    _LOGGER.warning(message)


def log_error(message: str) -> None:
    _LOGGER.error(message)
