"""Tests for settings and logging configuration."""

import pytest
import structlog
from structlog.testing import capture_logs

from gitsync.config.logging import configure_logging
from gitsync.config.settings import Settings, get_settings


@pytest.mark.unit
class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.config_file == ".gitsync.json"
        assert settings.base_dir is None
        assert settings.git_executable == "git"
        assert settings.git_timeout is None

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITSYNC_CONFIG_FILE", "sync.json")
        monkeypatch.setenv("GITSYNC_GIT_TIMEOUT", "30")
        settings = Settings()
        assert settings.config_file == "sync.json"
        assert settings.git_timeout == 30.0

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_filters_below_level(self) -> None:
        configure_logging(log_level="WARNING")
        with capture_logs() as logs:
            logger = structlog.get_logger("test")
            logger.info("hidden")
            logger.warning("shown")
        assert [entry["event"] for entry in logs] == ["shown"]

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging(log_level="chatty", json_logs=True)
        with capture_logs() as logs:
            structlog.get_logger("test").info("shown")
        assert logs[0]["event"] == "shown"
