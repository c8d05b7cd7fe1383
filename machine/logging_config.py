"""
Structured logging configuration for the machine CLI.

Provides JSON-formatted logs with a run_id for correlating everything a
single CLI invocation logs.

Environment Variables:
    MACHINE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    MACHINE_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from machine.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, run_id="run-42")
    logger.info("Replaying events", extra={"events": 3})
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger


def setup_logging() -> None:
    """
    Configure root logger with structured logging.

    Reads configuration from environment variables:
    - MACHINE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - MACHINE_LOG_FORMAT: json, text (default: json)

    Logs go to stderr so command output on stdout stays machine-readable.
    """
    level = resolve_level(os.getenv("MACHINE_LOG_LEVEL", "INFO"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(RunIDFilter())
    handler.setFormatter(_build_formatter(os.getenv("MACHINE_LOG_FORMAT", "json").lower()))
    root_logger.addHandler(handler)


def resolve_level(name: str) -> int:
    """
    Map a level name ("debug", "WARNING") or number ("10") to a logging level.

    Unknown names resolve to INFO.
    """
    name = name.strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(run_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    return logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s [run_id=%(run_id)s]",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def get_logger(name: str, run_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional run_id for correlation.

    Args:
        name: Logger name (typically __name__)
        run_id: Identifier of the current CLI run

    Returns:
        LoggerAdapter with run_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"run_id": run_id or "N/A"})


class RunIDFilter(logging.Filter):
    """
    Logging filter that adds run_id to all log records.

    Ensures all records have a run_id field, even if not logged through
    get_logger().
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "run_id"):
            record.run_id = "N/A"  # type: ignore
        return True
