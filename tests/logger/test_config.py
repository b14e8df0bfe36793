"""Tests for logging settings."""

from pathlib import Path

from tentacle.logger.config import load_log_settings


def test_defaults(tmp_path):
    console_level, file_level, log_path = load_log_settings()
    assert console_level == "WARNING"
    assert file_level == "INFO"
    assert log_path == tmp_path / "logs" / "tentacle.log"


def test_level_override(monkeypatch):
    monkeypatch.setenv("TENTACLE_LOG_LEVEL", "debug")
    assert load_log_settings()[0] == "DEBUG"


def test_unknown_level_ignored(monkeypatch):
    monkeypatch.setenv("TENTACLE_LOG_LEVEL", "LOUD")
    assert load_log_settings()[0] == "WARNING"


def test_home_cache_without_override(monkeypatch):
    monkeypatch.delenv("TENTACLE_LOG_DIR")
    _, _, log_path = load_log_settings()
    assert log_path == (
        Path.home() / ".cache" / "tentacle" / "logs" / "tentacle.log"
    )
