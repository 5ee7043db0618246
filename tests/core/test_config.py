"""Tests for settings loaded from the environment."""

import logging

import pytest

from src.core import config
from src.core.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("SHOW_CODE_SNIPPETS", "SNIPPET_CONTEXT_LINES", "CACHE_SNIPPET_FILES", "LOG_LEVEL", "VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.show_code_snippets is True
        assert settings.snippet_context_lines == 8
        assert settings.cache_snippet_files is True
        assert settings.log_level == "WARNING"

    def test_reads_environment(self, clean_env):
        clean_env.setenv("SHOW_CODE_SNIPPETS", "false")
        clean_env.setenv("SNIPPET_CONTEXT_LINES", "4")
        settings = Settings(_env_file=None)
        assert settings.show_code_snippets is False
        assert settings.snippet_context_lines == 4

    def test_reads_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SNIPPET_CONTEXT_LINES=12\n")
        assert Settings(_env_file=env_file).snippet_context_lines == 12

    def test_validate_accepts_defaults(self, clean_env):
        assert Settings(_env_file=None).validate_settings() is True

    def test_validate_rejects_negative_radius(self, clean_env):
        clean_env.setenv("SNIPPET_CONTEXT_LINES", "-1")
        with pytest.raises(ValueError, match="SNIPPET_CONTEXT_LINES"):
            Settings(_env_file=None).validate_settings()

    def test_validate_rejects_unknown_log_level(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValueError, match="Unknown log level"):
            Settings(_env_file=None).validate_settings()


class TestConfigureLogging:
    """Tests for CLI logging setup."""

    def test_verbose_forces_debug(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        config.configure_logging("ERROR", verbose=True)
        assert calls["level"] == logging.DEBUG

    def test_explicit_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        monkeypatch.setattr(config.settings, "verbose", False)
        config.configure_logging("error")
        assert calls["level"] == logging.ERROR
