"""
logging_utils.py
----------------

Logging setup for scripts built on infline, the demo among them.

The library modules only create module loggers under the "infline" namespace
(`logging.getLogger(__name__)`) and never install handlers. An application
that wants to see solver and tracker activity calls `configure_logging` once:

    >>> from infline.logging_utils import configure_logging
    >>> log_path = configure_logging(logging.DEBUG, log_dir="logs")

Console output is colorized per level; the file copy is plain text and
rotates at `MAX_LOG_BYTES`.
"""

__all__ = ["configure_logging", "ColorFormatter", "PACKAGE_LOGGER"]

import os
import time
import logging
from typing import Optional, Union
from logging.handlers import RotatingFileHandler
from pathlib import Path

from colorama import Fore, Style, just_fix_windows_console

PathLike = Union[str, os.PathLike]

PACKAGE_LOGGER = "infline"
MAX_LOG_BYTES = 5_000_000
LOG_BACKUPS = 5
DATEFMT = "%H:%M:%S"
PLAIN_FMT = "[%(asctime)s] [%(levelname)-5s] [%(name)s] %(message)s"


class ColorFormatter(logging.Formatter):
    """Console formatter coloring the level name."""
    COLORS = {
        "DEBUG":    Fore.CYAN,
        "INFO":     Fore.GREEN,
        "WARNING":  Fore.YELLOW,
        "ERROR":    Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        message = (
            f"[{self.formatTime(record, self.datefmt)}] "
            f"[{color}{record.levelname:<5s}{Style.RESET_ALL}] "
            f"[{record.name}] "
            f"{record.getMessage()}"
        )
        if record.exc_info:
            # Tracebacks from tracker callbacks would otherwise be dropped.
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def configure_logging(level: Optional[int] = logging.INFO,
                      log_dir: Optional[PathLike] = "logs",
                      name: Optional[str] = PACKAGE_LOGGER,
                      run_prefix: Optional[str] = "run",
                      console: bool = True) -> Path:
    """
    Route logger `name` (the whole infline package by default) to a rotating
    log file and, unless `console` is False, to a colorized stderr stream.

    Handlers previously installed on that logger are closed and replaced, so
    repeated calls do not duplicate output. Propagation to the root logger is
    left untouched.

    Returns:
        Path: The log file of this run.
    """
    just_fix_windows_console()
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y-%m-%d_%H%M%S")
    log_path = log_dir / f"{run_prefix}_PID{os.getpid()}_{ts}.log"

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    if console:
        ch = logging.StreamHandler()
        ch.setFormatter(ColorFormatter(datefmt=DATEFMT))
        logger.addHandler(ch)

    fh = RotatingFileHandler(log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS)
    fh.setFormatter(logging.Formatter(PLAIN_FMT, DATEFMT))
    logger.addHandler(fh)

    logger.info(f"Logging for {name!r} at {logging.getLevelName(level)}; file {log_path}")
    return log_path
