"""
Logger setup for audit runs.

Library modules log under their module names and never add handlers; the
command configures the root logger here. Only handlers installed by
setup_logger are replaced or closed, so handlers owned by the embedding
program (or by pytest) stay attached.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_OWNED = "_pixel_audit_handler"


def close_logger(name: str) -> None:
    """Detach and close the handlers setup_logger attached to this logger."""
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if getattr(handler, _OWNED, False):
            logger.removeHandler(handler)
            handler.close()


def setup_logger(name: str, log_file: Optional[Path] = None, level=logging.INFO) -> logging.Logger:
    """
    Setup logger for an audit run.

    Args:
        name: Logger name ("" for the root logger)
        log_file: Optional path to also write the log to
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Drop handlers from a previous setup of the same logger
    close_logger(name)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode="w"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)

    return logger
