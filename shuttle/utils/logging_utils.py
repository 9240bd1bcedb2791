"""Logging setup for shuttle.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

The CLI calls ``setup_logging()`` once. Output goes to a rotating file rather
than the terminal so log lines never paint over the TUI.

Note: This module builds its path inline instead of importing
SHUTTLE_CONFIG_DIR so it can be used before configuration is loaded.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2


def get_log_file() -> Path:
    return Path.home() / ".config" / "shuttle" / "shuttle.log"


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure file logging.

    The root logger is set to WARNING to avoid noise from third-party libs
    (httpx logs every request at INFO). shuttle.* loggers are set to INFO,
    or DEBUG when verbose.

    Returns:
        The ``shuttle`` package logger
    """
    shuttle_logger = logging.getLogger("shuttle")
    shuttle_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    try:
        log_file = log_file or get_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)

        root = logging.getLogger()
        if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
            handler = RotatingFileHandler(
                log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
            )
            handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            root.addHandler(handler)
        root.setLevel(logging.WARNING)
    except OSError as e:
        # We can't log this failure since logging is what's failing
        print(f"Warning: logging setup failed: {e}", file=sys.stderr)

    return shuttle_logger
