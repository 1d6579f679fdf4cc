"""Settings base - defining settings and resolving their values.

This is an abstract class. Extending classes must define:
- set_value
- unset_value
- get_raw_value

and should set ``type`` (e.g. 'thememod'), which namespaces their hooks:
- make_settings_{type}_loaded
- make_settings_{type}_default_value
- make_settings_{type}_current_value
- make_settings_{type}_sanitize_callback
- make_settings_{type}_sanitize_callback_parameters
- make_settings_{type}_sanitized_value
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from make_theme.callbacks.registry import CallbackRegistry
from make_theme.callbacks.sanitizers import BUILTIN_SANITIZERS
from make_theme.definitions.registry import ALL, DefinitionRegistry
from make_theme.errors.collector import ErrorCollector
from make_theme.errors.schemas import ErrorCode
from make_theme.hooks.registry import HookRegistry
from make_theme.undefined import UNDEFINED

logger = logging.getLogger(__name__)


def strict_equals(a: Any, b: Any) -> bool:
    """Equality that also requires identical types (so 1 != True != 1.0)."""
    return type(a) is type(b) and a == b


class SettingsBase(DefinitionRegistry, ABC):
    """Defines settings and manages their values."""

    type: str = ""
    required_properties = ("default", "sanitize")
    label = "setting"

    # Returned for anything that isn't there
    undefined = UNDEFINED

    def __init__(
        self,
        errors: ErrorCollector,
        hooks: HookRegistry,
        sanitizers: Optional[CallbackRegistry] = None,
        definitions_file: Optional[Path] = None,
    ):
        super().__init__(errors, hooks, definitions_file)
        self.sanitizers = sanitizers or CallbackRegistry(BUILTIN_SANITIZERS)

    @property
    def error_source(self) -> str:
        return f"settings_{self.type}"

    @property
    def loaded_action(self) -> str:
        return f"make_settings_{self.type}_loaded"

    def _hook(self, name: str) -> str:
        return f"make_settings_{self.type}_{name}"

    # ── Definitions ─────────────────────────────────────

    def add_settings(
        self,
        settings: dict[str, dict[str, Any]],
        default_props: Optional[dict[str, Any]] = None,
        overwrite: bool = False,
    ) -> bool:
        """Add or update setting definitions.

        Example:
            settings.add_settings(
                {"social-twitter": {"default": "", "sanitize": "url"}},
            )

        Args:
            settings: Setting ID -> properties
            default_props: Properties merged under each definition
            overwrite: Merge over existing definitions instead of failing

        Returns:
            True if every setting was added or updated
        """
        results = [
            self.add(setting_id, props, overwrite=overwrite, default_props=default_props)
            for setting_id, props in settings.items()
        ]
        return all(results)

    def remove_settings(self, setting_ids: str | Iterable[str]) -> bool:
        """Remove setting definitions, or all of them with 'all'."""
        if setting_ids == ALL:
            self._definitions.clear()
            return True

        if isinstance(setting_ids, str):
            setting_ids = [setting_ids]

        results = [self.remove(setting_id) for setting_id in setting_ids]
        return all(results)

    def get_settings(self, property: str = ALL) -> dict[str, Any]:
        """Get setting definitions, or a specific property of each one."""
        return self.query(property)

    def setting_exists(self, setting_id: str, property: str = ALL) -> bool:
        """Check if a setting exists, optionally one having a given property."""
        return self.exists(setting_id, property)

    def get_setting(self, setting_id: str) -> Any:
        """Get a setting definition, or undefined."""
        setting = self.get(setting_id)
        return self.undefined if setting is None else setting

    # ── Storage (extending classes) ─────────────────────

    @abstractmethod
    def set_value(self, setting_id: str, value: Any) -> bool:
        """Store a new value. Must sanitize with sanitize_value() first."""

    @abstractmethod
    def unset_value(self, setting_id: str) -> bool:
        """Remove the stored value."""

    @abstractmethod
    def get_raw_value(self, setting_id: str) -> Any:
        """Get the stored value unaltered, or undefined if nothing is stored."""

    # ── Values ──────────────────────────────────────────

    def get_value(self, setting_id: str, context: str = "") -> Any:
        """Get the sanitized current value, or the default if nothing usable is stored.

        Only the undefined sentinel triggers the default. Stored falsy values
        like 0 or "" are sanitized and returned.
        """
        value = self.undefined

        if self.setting_exists(setting_id):
            raw_value = self.get_raw_value(setting_id)

            if raw_value is not self.undefined:
                value = self.sanitize_value(raw_value, setting_id, context)

            if value is self.undefined:
                value = self.get_default(setting_id)

        return self.hooks.apply_filters(
            self._hook("current_value"), value, setting_id, context
        )

    def get_default(self, setting_id: str) -> Any:
        """Get the default value of a setting."""
        default_value = self.undefined

        if self.setting_exists(setting_id, "default"):
            default_value = self.get_setting(setting_id)["default"]

        return self.hooks.apply_filters(
            self._hook("default_value"), default_value, setting_id
        )

    def is_default(self, setting_id: str, value: Any = None) -> bool:
        """Check whether a value (or the current value) equals the default."""
        current_value = self.get_value(setting_id) if value is None else value
        return strict_equals(current_value, self.get_default(setting_id))

    # ── Sanitizing ──────────────────────────────────────

    def get_sanitize_callback(self, setting_id: str, context: str = "") -> Any:
        """Get the sanitize callback reference for a setting.

        A 'sanitize_<context>' property takes precedence over 'sanitize'.
        """
        callback = self.undefined

        if self.setting_exists(setting_id):
            setting = self.get_setting(setting_id)

            if context and f"sanitize_{context}" in setting:
                callback = setting[f"sanitize_{context}"]
            elif "sanitize" in setting:
                callback = setting["sanitize"]

        return self.hooks.apply_filters(
            self._hook("sanitize_callback"), callback, setting_id, context
        )

    def has_sanitize_callback(self, setting_id: str, context: str) -> bool:
        """Check for a context-specific sanitize callback."""
        if not self.setting_exists(setting_id):
            return False
        return f"sanitize_{context}" in self.get_setting(setting_id)

    def sanitize_value(self, value: Any, setting_id: str, context: str = "") -> Any:
        """Sanitize a value with the setting's callback for the context.

        Reports an invalid_callback error, and returns undefined, when the
        callback doesn't resolve to a callable.
        """
        sanitized_value = self.undefined

        if self.setting_exists(setting_id):
            ref = self.get_sanitize_callback(setting_id, context)
            callback: Optional[Callable] = None
            if ref is not self.undefined:
                callback = self.sanitizers.resolve(ref)

            if callback is not None:
                # Extra positional parameters can be appended after the value
                parameters = self.hooks.apply_filters(
                    self._hook("sanitize_callback_parameters"),
                    [value],
                    callback,
                    setting_id,
                )
                sanitized_value = callback(*parameters)
            else:
                self.errors.add_error(
                    ErrorCode.INVALID_CALLBACK,
                    f'The sanitize callback ({ref!r}) for "{setting_id}" is not valid.',
                    source=self.error_source,
                )

        return self.hooks.apply_filters(
            self._hook("sanitized_value"), sanitized_value, setting_id, context
        )
