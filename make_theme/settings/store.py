"""Settings whose raw values live in a SettingsStore."""

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from make_theme.callbacks.registry import CallbackRegistry
from make_theme.callbacks.sanitizers import choice
from make_theme.errors.collector import ErrorCollector
from make_theme.hooks.registry import HookRegistry
from make_theme.storage.base import SettingsStore
from make_theme.storage.memory import MemoryStore

from .base import SettingsBase, strict_equals

logger = logging.getLogger(__name__)


class StoreSettings(SettingsBase):
    """Settings backed by a raw key/value store.

    When ``delete_defaults`` is on, setting a value equal to the default
    removes the stored value instead of writing it.
    """

    delete_defaults = False

    def __init__(
        self,
        errors: ErrorCollector,
        hooks: HookRegistry,
        store: Optional[SettingsStore] = None,
        sanitizers: Optional[CallbackRegistry] = None,
        definitions_file: Optional[Path] = None,
    ):
        super().__init__(errors, hooks, sanitizers, definitions_file)
        self.store = store if store is not None else MemoryStore()
        self.hooks.add_filter(
            self._hook("sanitize_callback_parameters"),
            self._prepare_choice_parameters,
            accepted_args=3,
        )

    def _prepare_choice_parameters(
        self, parameters: list, callback: Callable, setting_id: str
    ) -> list:
        """Feed the 'choice' sanitizer the setting's choices and default."""
        if callback is not choice or len(parameters) != 1:
            return parameters

        setting = self.get(setting_id)
        if setting is None or "choices" not in setting:
            return parameters

        return [*parameters, list(setting["choices"]), setting["default"]]

    def get_raw_value(self, setting_id: str) -> Any:
        return self.store.read(setting_id)

    def set_value(self, setting_id: str, value: Any) -> bool:
        """Sanitize and store a value.

        Fails for unknown settings and for values the sanitizer rejects.
        """
        if not self.setting_exists(setting_id):
            logger.warning(f"Cannot set unknown {self.type} setting: {setting_id}")
            return False

        sanitized_value = self.sanitize_value(value, setting_id)
        if sanitized_value is self.undefined:
            return False

        if self.delete_defaults and strict_equals(
            sanitized_value, self.get_default(setting_id)
        ):
            if self.store.contains(setting_id):
                return self.store.delete(setting_id)
            return True

        return self.store.write(setting_id, sanitized_value)

    def unset_value(self, setting_id: str) -> bool:
        """Remove the stored value so the default applies again."""
        if not self.setting_exists(setting_id):
            logger.warning(f"Cannot unset unknown {self.type} setting: {setting_id}")
            return False

        if self.store.contains(setting_id):
            return self.store.delete(setting_id)
        return True
