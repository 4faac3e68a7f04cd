"""Tests for settings loading and saving."""

import json
import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from promptboost.core.config import (
    CONFIG_FILE_NAME,
    DEFAULT_CONTEXT_TEMPLATE,
    Settings,
    load_settings,
    resolve_config_path,
    save_settings,
)
from promptboost.core.exceptions import ConfigurationError
from promptboost.core.logging_setup import setup_logging


class TestSettings:
    """Tests for Settings defaults and sources."""

    def test_defaults(self, settings):
        assert settings.enabled_enhancers == []
        assert settings.default_context_depth == 3
        assert settings.default_example_count == 2
        assert settings.context_template == DEFAULT_CONTEXT_TEMPLATE
        assert settings.log_level == "info"
        assert settings.log_to_file is False
        assert settings.log_file_path == "./logs/prompt-boost.log"

    def test_file_keys(self):
        settings = Settings(**{"defaultExampleCount": 4, "logLevel": "debug"})
        assert settings.default_example_count == 4
        assert settings.log_level == "debug"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("PB_DEFAULT_CONTEXT_DEPTH", "5")
        monkeypatch.setenv("PB_ENABLED_ENHANCERS", '["context"]')
        settings = Settings()
        assert settings.default_context_depth == 5
        assert settings.enabled_enhancers == ["context"]

    def test_frozen(self, settings):
        with pytest.raises(PydanticValidationError):
            settings.default_example_count = 5

    def test_depth_bounds(self):
        with pytest.raises(PydanticValidationError):
            Settings(default_context_depth=9)

    def test_to_file_dict(self, settings):
        data = settings.to_file_dict()
        assert data["enabledEnhancers"] == []
        assert data["defaultContextDepth"] == 3
        assert data["logFilePath"] == "./logs/prompt-boost.log"
        assert "default_context_depth" not in data


class TestResolveConfigPath:
    """Tests for configuration file lookup."""

    def test_explicit_path(self, tmp_path):
        assert resolve_config_path(tmp_path / "a.json") == tmp_path / "a.json"

    def test_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PB_CONFIG_FILE", str(tmp_path / "env.json"))
        assert resolve_config_path() == tmp_path / "env.json"

    def test_working_directory(self, tmp_path):
        assert resolve_config_path() == tmp_path / CONFIG_FILE_NAME


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file(self):
        assert load_settings() == Settings()

    def test_valid_file(self, tmp_path):
        (tmp_path / CONFIG_FILE_NAME).write_text(json.dumps({
            "enabledEnhancers": ["example"],
            "defaultExampleCount": 3,
            "unrelated": True,
        }))
        settings = load_settings()
        assert settings.enabled_enhancers == ["example"]
        assert settings.default_example_count == 3
        assert settings.default_context_depth == 3

    @pytest.mark.parametrize("content", [
        "{not json",
        "[1, 2, 3]",
        '{"defaultContextDepth": 42}',
        '{"logLevel": "verbose"}',
    ])
    def test_malformed_file_falls_back(self, tmp_path, caplog, content):
        """Test a broken file warns and yields defaults."""
        path = tmp_path / "broken.json"
        path.write_text(content)
        with caplog.at_level(logging.WARNING, logger="promptboost"):
            settings = load_settings(path)
        assert settings == Settings()
        assert "Error loading config file, using default configuration" in caplog.text


class TestLoadSettingsEnvironment:
    """Tests for invalid PB_* variables during load_settings."""

    def test_bad_env_with_malformed_file(self, tmp_path, monkeypatch, caplog):
        """Test a broken file and a broken variable still yield defaults."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        monkeypatch.setenv("PB_LOG_LEVEL", "warning")
        with caplog.at_level(logging.WARNING, logger="promptboost"):
            settings = load_settings(path)
        assert settings.log_level == "info"
        assert "Error loading config file" in caplog.text
        assert "Ignoring invalid PB_* environment variables" in caplog.text

    def test_unparseable_env_list(self, monkeypatch, caplog):
        monkeypatch.setenv("PB_ENABLED_ENHANCERS", "context")
        with caplog.at_level(logging.WARNING, logger="promptboost"):
            settings = load_settings()
        assert settings.enabled_enhancers == []
        assert "Ignoring invalid PB_* environment variables" in caplog.text

    def test_bad_env_keeps_valid_file(self, tmp_path, monkeypatch, caplog):
        """Test the file is not blamed for an environment error."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"defaultExampleCount": 5}))
        monkeypatch.setenv("PB_DEFAULT_CONTEXT_DEPTH", "99")
        with caplog.at_level(logging.WARNING, logger="promptboost"):
            settings = load_settings(path)
        assert settings.default_example_count == 5
        assert settings.default_context_depth == 3
        assert "Error loading config file" not in caplog.text

    def test_file_beats_valid_env(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logLevel": "error"}))
        monkeypatch.setenv("PB_LOG_LEVEL", "debug")
        monkeypatch.setenv("PB_DEFAULT_EXAMPLE_COUNT", "4")
        settings = load_settings(path)
        assert settings.log_level == "error"
        assert settings.default_example_count == 4


class TestSaveSettings:
    """Tests for save_settings."""

    def test_round_trip(self, tmp_path, settings):
        path = tmp_path / "nested" / "config.json"
        saved = save_settings(settings, path, default_example_count=5)
        assert saved.default_example_count == 5
        assert json.loads(path.read_text())["defaultExampleCount"] == 5
        assert load_settings(path) == saved

    def test_unknown_key(self, tmp_path, settings):
        with pytest.raises(ConfigurationError) as exc:
            save_settings(settings, tmp_path / "c.json", colour="blue")
        assert exc.value.config_key == "colour"

    def test_invalid_value(self, tmp_path, settings):
        with pytest.raises(ConfigurationError):
            save_settings(settings, tmp_path / "c.json", default_context_depth=0)
        assert not (tmp_path / "c.json").exists()


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_levels(self):
        logger = setup_logging(Settings(log_level="warn"))
        assert logger.name == "promptboost"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_no_duplicate_handlers(self):
        setup_logging(Settings())
        logger = setup_logging(Settings())
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "pb.log"
        logger = setup_logging(Settings(log_to_file=True, log_file_path=str(log_file)))
        logger.info("hello from the test")
        for handler in logger.handlers:
            handler.flush()
        assert log_file.exists()
        assert "hello from the test" in log_file.read_text()
