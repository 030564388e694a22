"""Unit tests for configuration helpers."""

import pytest
from pydantic import ValidationError

from emitkit.config import settings
from emitkit.config.settings import EmitterConfig, load_config_from_env


def test_log_level_reads_environment(monkeypatch):
    """The default log level is sourced from environment variables."""
    monkeypatch.setenv("EMITKIT_LOG_LEVEL", "debug")

    assert settings.log_level() == "DEBUG"
    assert EmitterConfig().log_level == "DEBUG"


def test_defaults(monkeypatch):
    """Without environment overrides the defaults are INFO and JSON logs."""
    monkeypatch.delenv("EMITKIT_LOG_LEVEL", raising=False)
    config = EmitterConfig()

    assert config.log_level == "INFO"
    assert config.json_logs is True
    assert config.include_traceback is True
    assert config.logger_name == "emitkit.core.reporting"


def test_invalid_log_level_rejected():
    """Unknown level names fail validation."""
    with pytest.raises(ValidationError):
        EmitterConfig(log_level="LOUD")


def test_save_and_load_roundtrip(tmp_path):
    """A saved configuration loads back unchanged."""
    path = tmp_path / "conf" / "emitkit.yaml"
    original = EmitterConfig(log_level="warning", json_logs=False, logger_name="app.events")

    original.save(path)
    loaded = EmitterConfig.load(path)

    assert loaded == original
    assert loaded.log_level == "WARNING"


def test_load_missing_file(tmp_path):
    """A missing file is reported rather than silently defaulted."""
    with pytest.raises(FileNotFoundError):
        EmitterConfig.load(tmp_path / "missing.yaml")


def test_load_empty_file(tmp_path):
    """Empty YAML is treated as invalid."""
    path = tmp_path / "empty.yaml"
    path.write_text("")

    with pytest.raises(ValueError):
        EmitterConfig.load(path)


def test_load_config_from_env(monkeypatch, tmp_path):
    """The env var points at the YAML file; unset means defaults."""
    monkeypatch.delenv("EMITKIT_CONFIG", raising=False)
    assert load_config_from_env() == EmitterConfig()

    path = tmp_path / "emitkit.yaml"
    path.write_text("include_traceback: false\n")
    monkeypatch.setenv("EMITKIT_CONFIG", str(path))

    assert load_config_from_env().include_traceback is False
