"""
bootstrap/entrypoints.py - Logging setup and engine construction.
"""

from __future__ import annotations
from typing import Callable, Optional
import json
import logging
import os
import sys

from mooring.catenary.engine import CatenaryEngine

from .config import DEFAULT_LOG_FORMAT, MooringConfig, get_config

logger = logging.getLogger("bootstrap.entrypoints")


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(
    level: str = "INFO",
    log_file: str = None,
    json_format: bool = False,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        fmt: Format string for plain-text logs
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(fmt)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Repeated calls reconfigure existing handlers instead of stacking new ones
    console_handler = _find_handler(
        root_logger,
        lambda h: type(h) is logging.StreamHandler and h.stream is sys.stdout,
    )
    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stdout)
        root_logger.addHandler(console_handler)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    if log_file:
        path = os.path.abspath(log_file)
        file_handler = _find_handler(
            root_logger,
            lambda h: isinstance(h, logging.FileHandler) and h.baseFilename == path,
        )
        if file_handler is None:
            file_handler = logging.FileHandler(log_file)
            root_logger.addHandler(file_handler)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)


def _find_handler(
    root_logger: logging.Logger,
    matches: Callable[[logging.Handler], bool],
) -> Optional[logging.Handler]:
    for handler in root_logger.handlers:
        if matches(handler):
            return handler
    return None


def create_engine(
    config: Optional[MooringConfig] = None,
    configure_logging: bool = False,
) -> CatenaryEngine:
    """
    Build a CatenaryEngine from application configuration.

    Args:
        config: Configuration (loaded via get_config() if None)
        configure_logging: Also install logging handlers from config

    Returns:
        Configured CatenaryEngine
    """
    config = config or get_config()

    if configure_logging:
        setup_logging(
            level=config.logging.level,
            log_file=config.logging.log_file,
            json_format=config.logging.json_logs,
            fmt=config.logging.format,
        )

    engine = CatenaryEngine(config.engine)
    logger.info(
        f"Engine ready: model={engine.model.name}, "
        f"profile={config.engine.curve_profile.value}, "
        f"samples={config.engine.sample_count}"
    )
    return engine
