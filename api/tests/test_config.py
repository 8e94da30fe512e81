"""Tests for environment-driven settings."""

import pytest

from app.config import Settings, load_settings


def test_defaults(monkeypatch):
    """Unset variables fall back to the defaults."""
    for name in ("MORTGAGE_API_HOST", "MORTGAGE_API_PORT", "MORTGAGE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == Settings(host="0.0.0.0", port=3000, log_level="INFO")


def test_environment_overrides(monkeypatch):
    """Host, port and log level come from the environment."""
    monkeypatch.setenv("MORTGAGE_API_HOST", "127.0.0.1")
    monkeypatch.setenv("MORTGAGE_API_PORT", "8080")
    monkeypatch.setenv("MORTGAGE_LOG_LEVEL", "debug")
    assert load_settings() == Settings(host="127.0.0.1", port=8080, log_level="DEBUG")


def test_invalid_port(monkeypatch):
    """A non-numeric port is a configuration error."""
    monkeypatch.setenv("MORTGAGE_API_PORT", "http")
    with pytest.raises(ValueError, match="MORTGAGE_API_PORT"):
        load_settings()


def test_importing_app_does_not_read_settings(monkeypatch):
    """Settings and logging are applied by the server entry point, not on import."""
    import importlib
    import logging

    import app.main

    monkeypatch.setenv("MORTGAGE_API_PORT", "http")
    root_level = logging.getLogger().level
    module = importlib.reload(app.main)
    assert module.app.title == "Mortgage API"
    assert logging.getLogger().level == root_level
