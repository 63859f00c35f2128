"""Unit tests for Settings."""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from cli.settings import SENTINEL_DIR_NAME, Settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove xeon variables from the environment."""
    for name in ("XEON_HOME", "XEON_LOG_LEVEL", "XEON_NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        settings = Settings.from_env(load_env_file=False)

        assert settings.home_dir == Path.home()
        assert settings.log_level == "WARNING"
        assert settings.color is True

    def test_from_env(self, clean_env, tmp_path):
        clean_env.setenv("XEON_HOME", str(tmp_path))
        clean_env.setenv("XEON_LOG_LEVEL", "debug")
        clean_env.setenv("XEON_NO_COLOR", "1")

        settings = Settings.from_env(load_env_file=False)

        assert settings.home_dir == tmp_path
        assert settings.log_level == "DEBUG"
        assert settings.color is False

    def test_env_file_is_loaded(self, clean_env, workspace):
        (workspace / ".env").write_text("XEON_LOG_LEVEL=INFO\n")

        try:
            settings = Settings.from_env()
        finally:
            os.environ.pop("XEON_LOG_LEVEL", None)

        assert settings.log_level == "INFO"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(log_level="chatty")

    def test_sentinel_dir(self, tmp_path):
        settings = Settings(home_dir=tmp_path)

        assert settings.sentinel_dir == tmp_path / SENTINEL_DIR_NAME

    def test_sentinel_dir_without_home(self):
        assert Settings(home_dir=None).sentinel_dir is None
