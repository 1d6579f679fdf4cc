"""Shared fixtures for the registry tests."""

import pytest

from make_theme.compatibility.reporter import CompatibilityReporter
from make_theme.definitions.registry import DefinitionRegistry
from make_theme.errors.collector import ErrorCollector
from make_theme.hooks.registry import HookRegistry
from make_theme.settings.store import StoreSettings
from make_theme.storage.memory import MemoryStore
from make_theme.views.registry import ViewRegistry


class WidgetRegistry(DefinitionRegistry):
    """Minimal concrete registry with two required properties."""

    required_properties = ("default", "sanitize")
    label = "widget"
    loaded_action = "make_widget_loaded"


class ExampleSettings(StoreSettings):
    """Store-backed settings type used across the resolver tests."""

    type = "example"


@pytest.fixture
def errors():
    return ErrorCollector(debug=False)


@pytest.fixture
def hooks():
    return HookRegistry()


@pytest.fixture
def compatibility(errors):
    return CompatibilityReporter(errors)


@pytest.fixture
def widgets(errors, hooks):
    return WidgetRegistry(errors, hooks)


@pytest.fixture
def empty_views(errors, compatibility, hooks):
    """View registry without the built-in views."""
    return ViewRegistry(errors, compatibility, hooks, definitions_file=None)


@pytest.fixture
def views(errors, compatibility, hooks):
    """View registry with the built-in views."""
    return ViewRegistry(errors, compatibility, hooks)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def settings(errors, hooks, store):
    return ExampleSettings(errors, hooks, store=store)
