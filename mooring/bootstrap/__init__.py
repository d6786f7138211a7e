"""
bootstrap/ - Configuration loading, logging setup and engine construction.
"""

from .config import (
    MooringConfig,
    LoggingConfig,
    load_config,
    get_config,
)

from .entrypoints import (
    JSONFormatter,
    setup_logging,
    create_engine,
)

__all__ = [
    "MooringConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "JSONFormatter",
    "setup_logging",
    "create_engine",
]
