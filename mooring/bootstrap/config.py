"""
bootstrap/config.py - Application configuration

Loads engine and logging configuration from environment variables,
a JSON file, or defaults. The result is handed to CatenaryEngine
explicitly; the engine does not consult this module itself.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

from mooring.catenary.config import EngineConfig

logger = logging.getLogger("bootstrap.config")


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("MOORING_LOG_LEVEL", "INFO"),
            format=os.getenv("MOORING_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("MOORING_LOG_FILE"),
            json_logs=os.getenv("MOORING_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class MooringConfig:
    """Root configuration."""

    environment: str = "development"
    debug: bool = False
    version: str = "1.0.0"

    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "MooringConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("MOORING_ENVIRONMENT", "development"),
            debug=os.getenv("MOORING_DEBUG", "false").lower() == "true",
            engine=EngineConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "MooringConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "MooringConfig":
        """Create config from dictionary, overriding environment values."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        if "engine" in data:
            engine_values = config.engine.to_dict()
            for key, value in data["engine"].items():
                if key in engine_values:
                    engine_values[key] = value
                else:
                    logger.warning(f"Ignoring unknown engine option: {key}")
            # Rebuild so __post_init__ validates the merged values
            config.engine = EngineConfig(**engine_values)

        if "logging" in data:
            for key, value in data["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "engine": self.engine.to_dict(),
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[MooringConfig] = None


def load_config(filepath: str = None) -> MooringConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        MooringConfig instance
    """
    global _config

    if filepath:
        _config = MooringConfig.from_file(filepath)
    else:
        default_paths = [
            "./mooring.json",
            "./config/mooring.json",
            os.path.expanduser("~/.mooring/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = MooringConfig.from_file(path)
                return _config

        _config = MooringConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> MooringConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
