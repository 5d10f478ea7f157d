"""Package logger for identcase.

The conversion functions never log; the example runner and the CLI do,
through the ``logger`` defined here.  Records go to stderr so that
stdout carries only command output.

:func:`set_level` applies ``[logging].level`` or ``--log-level``;
:func:`configure_file_logging` adds a per-run log file when
``[logging].file_logging`` or ``--log-file`` is set.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_DIR = "data/logs"

logger = logging.getLogger("identcase")
logger.setLevel(logging.INFO)

handler = logging.StreamHandler(sys.stderr)
handler.setLevel(logging.INFO)
handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
logger.addHandler(handler)


def set_level(level: int) -> None:
    """Set the level of the logger and its stderr handler together."""
    logger.setLevel(level)
    handler.setLevel(level)


def configure_file_logging(
    log_dir: str = DEFAULT_LOG_DIR,
    *,
    level: int = logging.INFO,
) -> logging.FileHandler:
    """Attach a file handler writing to ``<log_dir>/identcase_<timestamp>.log``.

    The directory is created if needed.  The handler is returned so the
    caller can detach and close it when the run ends.
    """
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")

    file_handler = logging.FileHandler(directory / f"identcase_{stamp}.log", encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))

    # the logger level gates records before any handler sees them
    if level < logger.level:
        logger.setLevel(level)

    logger.addHandler(file_handler)
    return file_handler


__all__ = ["configure_file_logging", "logger", "set_level"]
