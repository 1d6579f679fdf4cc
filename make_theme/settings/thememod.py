"""Theme mod settings - site-wide theme options."""

from pathlib import Path
from typing import Optional

from make_theme import config
from make_theme.callbacks.registry import CallbackRegistry
from make_theme.errors.collector import ErrorCollector
from make_theme.hooks.registry import HookRegistry
from make_theme.storage.base import SettingsStore
from make_theme.storage.memory import MemoryStore
from make_theme.storage.yaml_file import YamlFileStore

from .store import StoreSettings

DEFINITIONS_FILE = Path(__file__).parent / "definitions" / "thememod.yaml"


def default_thememod_store() -> SettingsStore:
    """YAML file store when MAKE_THEME_THEMEMOD_PATH is set, memory otherwise."""
    if config.THEMEMOD_PATH:
        return YamlFileStore(Path(config.THEMEMOD_PATH))
    return MemoryStore()


class ThemeModSettings(StoreSettings):
    """Theme options stored site-wide.

    Values equal to their default are not stored.
    """

    type = "thememod"
    delete_defaults = True

    def __init__(
        self,
        errors: ErrorCollector,
        hooks: HookRegistry,
        store: Optional[SettingsStore] = None,
        sanitizers: Optional[CallbackRegistry] = None,
        definitions_file: Optional[Path] = DEFINITIONS_FILE,
    ):
        super().__init__(
            errors,
            hooks,
            store=store if store is not None else default_thememod_store(),
            sanitizers=sanitizers,
            definitions_file=definitions_file,
        )
