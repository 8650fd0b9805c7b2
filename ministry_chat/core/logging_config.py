"""
Gateway logging setup.

Every record uses one line format:

    timestamp | level | module:line | message

The console follows the configured level. When a log directory is
configured, a per-day file receives everything from DEBUG up.
"""
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Clients whose DEBUG output drowns the gateway's own records
QUIET_LOGGERS = ("httpx", "httpcore", "urllib3", "google.auth", "grpc")

_logging_configured = False


def log_file_for(log_dir: Path, day: Optional[date] = None) -> Path:
    """Path of the gateway log file for a given day (today by default)."""
    day = day or date.today()
    return log_dir / f"gateway_{day:%Y%m%d}.log"


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure the root logger once per process.

    Args:
        log_level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the daily log file, created if missing.
            None keeps logging on the console only.

    Returns:
        The root logger
    """
    global _logging_configured

    root_logger = logging.getLogger()
    if _logging_configured:
        return root_logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.addHandler(console_handler)

    log_file = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_file_for(log_dir)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(logging.DEBUG)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logging_configured = True
    root_logger.debug(f"Logging configured: level={log_level}, file={log_file or 'none'}")
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Logger named after the calling module (pass __name__)."""
    return logging.getLogger(name)
