"""Logging setup for the Shipi MCP server."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def setup_logger(
    name: str,
    log_dir: Path,
    log_filename: str,
    level: int = logging.INFO,
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> logging.Logger:
    """Create a logger writing to stderr and, when possible, a rotating file.

    stdout carries the MCP stdio protocol, so the console handler is bound
    to stderr. An unusable log directory leaves the logger on stderr only.

    Args:
        name: Logger name (e.g. "shipi")
        log_dir: Directory for log files (created if not exists)
        log_filename: Log file name (e.g. "shipi.log")
        level: Logging level
        max_bytes: Max size per log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / log_filename,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    except OSError as exc:
        logger.warning("File logging disabled, cannot write to %s: %s", log_dir, exc)
    else:
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
