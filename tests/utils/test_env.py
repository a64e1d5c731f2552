"""Tests for environment helper utilities."""

import importlib
import logging

import pytest


def _reload_env():
    # Reload module to clear lru_cache
    import utils.env
    return importlib.reload(utils.env)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("EASEL_ENV", "EASEL_DEV_MODE", "EASEL_LOG_LEVEL", "EASEL_PERF_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    yield
    _reload_env()


class TestIsDevMode:
    """Tests for is_dev_mode function."""

    def test_returns_false_when_no_env_vars(self):
        assert _reload_env().is_dev_mode() is False

    @pytest.mark.parametrize("value", ["dev", "development", "1", "true", "yes", " DEV "])
    def test_truthy_easel_env(self, monkeypatch, value):
        monkeypatch.setenv("EASEL_ENV", value)
        assert _reload_env().is_dev_mode() is True

    @pytest.mark.parametrize("value", ["dev", "True"])
    def test_truthy_easel_dev_mode(self, monkeypatch, value):
        monkeypatch.setenv("EASEL_DEV_MODE", value)
        assert _reload_env().is_dev_mode() is True

    @pytest.mark.parametrize("value", ["prod", "0", "false", "no", ""])
    def test_non_dev_values(self, monkeypatch, value):
        monkeypatch.setenv("EASEL_ENV", value)
        assert _reload_env().is_dev_mode() is False

    def test_easel_env_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("EASEL_ENV", "dev")
        monkeypatch.setenv("EASEL_DEV_MODE", "false")
        assert _reload_env().is_dev_mode() is True


class TestLogLevel:
    """Tests for get_log_level and is_perf_debug."""

    def test_info_by_default(self):
        assert _reload_env().get_log_level() == logging.INFO

    def test_debug_in_dev_mode(self, monkeypatch):
        monkeypatch.setenv("EASEL_ENV", "dev")
        assert _reload_env().get_log_level() == logging.DEBUG

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("EASEL_ENV", "dev")
        monkeypatch.setenv("EASEL_LOG_LEVEL", "warning")
        assert _reload_env().get_log_level() == logging.WARNING

    def test_unknown_level_ignored(self, monkeypatch):
        monkeypatch.setenv("EASEL_LOG_LEVEL", "chatty")
        assert _reload_env().get_log_level() == logging.INFO

    def test_perf_debug(self, monkeypatch):
        env = _reload_env()
        assert env.is_perf_debug() is False
        monkeypatch.setenv("EASEL_PERF_DEBUG", "1")
        assert env.is_perf_debug() is True
