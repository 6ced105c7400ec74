import logging
import sys
from typing import Optional

COLOR_GRAY = 0
COLOR_RED = 1
COLOR_GREEN = 2
COLOR_YELLOW = 3
COLOR_BLUE = 4
COLOR_VIOLET = 5
COLOR_CYAN = 6
COLOR_WHITE = 7

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("graphsynth")
logger.addHandler(logging.NullHandler())
logger.setLevel(logging.INFO)

_console_enabled = True
_handlers = []


def setup(level: str = "INFO", log_file: Optional[str] = None, console: bool = True) -> None:
    """Configures the package logger.

    `level` applies to the colored console helpers below and to the optional
    file. Records below INFO (the library's debug detail) go to stderr when
    the console is enabled. Calling setup again replaces earlier handlers."""
    global _console_enabled
    _console_enabled = console

    for handler in _handlers:
        logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    logger.setLevel(level.upper())
    if console:
        debug_handler = logging.StreamHandler(sys.stderr)
        debug_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        debug_handler.addFilter(lambda record: record.levelno < logging.INFO)
        _handlers.append(debug_handler)
    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _handlers.append(file_handler)
    for handler in _handlers:
        logger.addHandler(handler)


def _log(level, color, *args):
    if _console_enabled and logger.isEnabledFor(level):
        print("\033[1;3{}m~~".format(color), *args, "~~\033[0m")


def log(msg):
    if _console_enabled and logger.isEnabledFor(logging.INFO):
        print(str(msg))
    logger.info(msg=msg)


def init(*args):
    _log(logging.INFO, COLOR_BLUE, *args)
    logger.info(*args)


def info(*args):
    _log(logging.INFO, COLOR_WHITE, *args)
    logger.info(*args)


def success(*args):
    _log(logging.INFO, COLOR_GREEN, *args)
    logger.info(*args)


def warning(*args):
    _log(logging.WARNING, COLOR_YELLOW, *args)
    logger.warning(*args)


def error(*args):
    _log(logging.CRITICAL, COLOR_RED, *args)
    logger.critical(*args)


def summary(*args):
    _log(logging.INFO, COLOR_CYAN, *args)
    logger.info(*args)
