"""Logging setup shared by the library and the console front end."""

import logging
import sys

LOGGER_NAME = "textscan"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_console_handler: logging.Handler | None = None
_file_handler: logging.Handler | None = None


def get_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


def enable_console_logging(verbose: bool = False, stream=None) -> logging.Handler:
    """Attach (or retune) the stderr handler used for warnings."""
    global _console_handler
    logger = get_logger()
    level = logging.DEBUG if verbose else logging.WARNING
    if verbose:
        logger.setLevel(logging.DEBUG)
    if _console_handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)
        _console_handler = handler
    _console_handler.setLevel(level)
    return _console_handler


def enable_file_logging(path: str) -> logging.Handler:
    global _file_handler
    logger = get_logger()
    if _file_handler is not None:
        return _file_handler
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    _file_handler = handler
    logger.info("Logging enabled.")
    return handler


def disable_logging() -> None:
    """Detach and close every handler installed by this module."""
    global _console_handler, _file_handler
    logger = get_logger()
    for handler in (_file_handler, _console_handler):
        if handler is None:
            continue
        logger.removeHandler(handler)
        try:
            handler.close()
        except OSError:
            pass
    _console_handler = None
    _file_handler = None
    logger.setLevel(logging.NOTSET)


def log_exception(msg: str, exc: BaseException) -> None:
    get_logger().error("%s: %s", msg, exc, exc_info=True)
