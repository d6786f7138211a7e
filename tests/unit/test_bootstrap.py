"""
Unit tests for mooring/bootstrap (configuration and logging setup).
"""

import json
import logging

import pytest

from mooring.bootstrap import config as config_module
from mooring.bootstrap.config import LoggingConfig, MooringConfig, get_config, load_config
from mooring.bootstrap.entrypoints import JSONFormatter, create_engine, setup_logging
from mooring.catenary.config import EngineConfig
from mooring.core.enums import CurveProfile


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "MOORING_SAMPLE_COUNT",
        "MOORING_MIN_SAFETY_FACTOR",
        "MOORING_CURVE_PROFILE",
        "MOORING_GEOMETRY_MODEL",
        "MOORING_SAFETY_RULE_SET",
        "MOORING_LOG_LEVEL",
        "MOORING_ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_config", None)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestEngineConfigFromEnv:

    def test_defaults(self, clean_env):
        config = EngineConfig.from_env()
        assert config.sample_count == 100
        assert config.min_safety_factor == 1.67
        assert config.curve_profile == CurveProfile.LEGACY_COSINE
        assert config.geometry_model == "simplified"
        assert config.safety_rule_set is None

    def test_overrides(self, clean_env):
        clean_env.setenv("MOORING_SAMPLE_COUNT", "20")
        clean_env.setenv("MOORING_CURVE_PROFILE", "anchored_cosine")
        clean_env.setenv("MOORING_SAFETY_RULE_SET", "dnv")
        config = EngineConfig.from_env()
        assert config.sample_count == 20
        assert config.curve_profile == CurveProfile.ANCHORED_COSINE
        assert config.safety_rule_set == "dnv"


class TestMooringConfig:

    def test_from_env(self, clean_env):
        clean_env.setenv("MOORING_ENVIRONMENT", "production")
        clean_env.setenv("MOORING_LOG_LEVEL", "DEBUG")
        config = MooringConfig.from_env()
        assert config.environment == "production"
        assert config.logging.level == "DEBUG"

    def test_from_file(self, clean_env, tmp_path):
        path = tmp_path / "mooring.json"
        path.write_text(json.dumps({
            "environment": "test",
            "engine": {"sample_count": 50, "curve_profile": "legacy_hyperbolic"},
            "logging": {"level": "WARNING"},
        }))
        config = MooringConfig.from_file(str(path))
        assert config.environment == "test"
        assert config.engine.sample_count == 50
        assert config.engine.curve_profile == CurveProfile.LEGACY_HYPERBOLIC
        assert config.logging.level == "WARNING"

    def test_file_values_validated(self, clean_env, tmp_path):
        path = tmp_path / "mooring.json"
        path.write_text(json.dumps({"engine": {"sample_count": 0}}))
        with pytest.raises(ValueError):
            MooringConfig.from_file(str(path))

    def test_missing_file_falls_back(self, clean_env, tmp_path):
        config = MooringConfig.from_file(str(tmp_path / "absent.json"))
        assert config.engine.sample_count == 100

    def test_to_dict(self, clean_env):
        data = MooringConfig().to_dict()
        assert data["engine"]["curve_profile"] == "legacy_cosine"
        assert data["logging"]["level"] == "INFO"

    def test_load_and_get(self, clean_env, tmp_path):
        path = tmp_path / "mooring.json"
        path.write_text(json.dumps({"environment": "staging"}))
        loaded = load_config(str(path))
        assert get_config() is loaded
        assert loaded.environment == "staging"


class TestEntrypoints:

    def test_create_engine(self, clean_env):
        config = MooringConfig(engine=EngineConfig(sample_count=8))
        engine = create_engine(config)
        assert engine.config.sample_count == 8

    def test_setup_logging_adds_handlers(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "mooring.log"
        before = len(restore_root_logger.handlers)
        setup_logging("DEBUG", log_file=str(log_file))
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == before + 2

    def test_setup_logging_repeated_calls_reuse_handlers(self, restore_root_logger, tmp_path):
        log_file = str(tmp_path / "mooring.log")
        setup_logging("INFO", log_file=log_file)
        count = len(restore_root_logger.handlers)
        setup_logging("DEBUG", log_file=log_file, json_format=True)
        assert len(restore_root_logger.handlers) == count
        assert restore_root_logger.level == logging.DEBUG
        assert all(
            isinstance(h.formatter, JSONFormatter)
            for h in restore_root_logger.handlers
            if isinstance(h, logging.FileHandler)
        )

    def test_create_engine_twice_does_not_duplicate_output(self, clean_env, restore_root_logger):
        config = MooringConfig(logging=LoggingConfig(level="INFO"))
        create_engine(config, configure_logging=True)
        count = len(restore_root_logger.handlers)
        create_engine(config, configure_logging=True)
        assert len(restore_root_logger.handlers) == count

    def test_create_engine_configures_logging(self, clean_env, restore_root_logger):
        config = MooringConfig(logging=LoggingConfig(level="WARNING", json_logs=True))
        create_engine(config, configure_logging=True)
        assert restore_root_logger.level == logging.WARNING
        assert any(isinstance(h.formatter, JSONFormatter) for h in restore_root_logger.handlers)

    def test_json_formatter(self):
        record = logging.LogRecord("mooring.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "mooring.test"
