"""Tests for settings and logging setup."""

import logging
from pathlib import Path

from fitness_planner.config import PROJECT_ROOT, Settings, get_settings
from fitness_planner.logging_config import configure_logging


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FITNESS_PLANNER_DB_PATH", raising=False)
        monkeypatch.delenv("FITNESS_PLANNER_HISTORY_WINDOW_DAYS", raising=False)
        settings = Settings(_env_file=None)

        assert settings.db_path == PROJECT_ROOT / "fitness_planner.db"
        assert settings.history_window_days == 28

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FITNESS_PLANNER_DB_PATH", str(tmp_path / "planner.db"))
        monkeypatch.setenv("FITNESS_PLANNER_LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)

        assert settings.db_path == Path(tmp_path / "planner.db")
        assert settings.log_level == "DEBUG"

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Test logging setup."""

    def test_explicit_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("debug")

        assert calls[0]["level"] == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("chatty")

        assert calls[0]["level"] == logging.INFO
