"""Tests for environment-driven configuration."""

import importlib
import logging

from make_theme import config


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MAKE_THEME_DEBUG", "yes")
    monkeypatch.setenv("MAKE_THEME_DEFAULT_VIEW", "page")
    monkeypatch.setenv("MAKE_THEME_POSTMETA_DATABASE", str(tmp_path / "meta.db"))
    try:
        reloaded = importlib.reload(config)
        assert reloaded.DEBUG is True
        assert reloaded.DEFAULT_VIEW == "page"
        assert reloaded.POSTMETA_DATABASE == tmp_path / "meta.db"
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_defaults(monkeypatch):
    for name in ("MAKE_THEME_DEBUG", "MAKE_THEME_DEFAULT_VIEW", "MAKE_THEME_THEMEMOD_PATH"):
        monkeypatch.delenv(name, raising=False)
    try:
        reloaded = importlib.reload(config)
        assert reloaded.DEBUG is False
        assert reloaded.DEFAULT_VIEW == "post"
        assert reloaded.THEMEMOD_PATH == ""
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_configure_logging_accepts_level_names():
    config.configure_logging("WARNING")
    assert logging.getLogger().handlers
