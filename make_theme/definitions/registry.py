"""Base definition registry.

Shared pattern for every registry in the package:
- In-memory dict keyed by a sanitized definition key
- Lazy loading with _loaded guard, triggered by the first read
- Built-in definitions from an optional YAML file
- A "loaded" action fired once loading finishes
- add/remove report failures to the error collector and return False
"""

import copy
import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from make_theme.callbacks.sanitizers import sanitize_key
from make_theme.errors.collector import ErrorCollector
from make_theme.errors.schemas import ErrorCode
from make_theme.hooks.registry import HookRegistry

logger = logging.getLogger(__name__)

ALL = "all"


def copy_properties(value: Any) -> Any:
    """Copy nested dicts, lists, tuples and sets. Callables and scalars are shared.

    Bound-method callbacks keep pointing at their original instance.
    """
    if isinstance(value, dict):
        return {k: copy_properties(v) for k, v in value.items()}
    if isinstance(value, list):
        return [copy_properties(v) for v in value]
    if isinstance(value, tuple):
        return tuple(copy_properties(v) for v in value)
    if isinstance(value, set):
        return {copy_properties(v) for v in value}
    if callable(value):
        return value
    return copy.deepcopy(value)


def merge_properties(old: dict, new: dict) -> dict:
    """Merge new properties over old ones.

    New values win. Keys only present in ``old`` are kept. Nested dicts are
    merged the same way.
    """
    merged = dict(old)
    for key, value in new.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_properties(merged[key], value)
        else:
            merged[key] = value
    return merged


class DefinitionRegistry:
    """Registry of named definitions, each a dict of properties.

    Subclasses set ``required_properties``, the ``label`` used in error
    messages, and ``loaded_action``.
    """

    required_properties: tuple[str, ...] = ()
    label: str = "definition"
    loaded_action: str = "make_definitions_loaded"

    def __init__(
        self,
        errors: ErrorCollector,
        hooks: HookRegistry,
        definitions_file: Optional[Path] = None,
    ):
        self.errors = errors
        self.hooks = hooks
        self.definitions_file = definitions_file
        self._definitions: dict[str, dict[str, Any]] = {}
        self._loaded = False

    @property
    def error_source(self) -> str:
        return self.label

    # ── Loading ─────────────────────────────────────────

    def load(self) -> None:
        """Load built-in definitions, then fire the loaded action."""
        if self._loaded:
            return

        self._load_definitions()

        # Set before the action so callbacks can read without re-entering load()
        self._loaded = True
        logger.info(f"Loaded {len(self._definitions)} {self.label} definitions")

        self.hooks.do_action(self.loaded_action, self)

    def is_loaded(self) -> bool:
        """Check if the load routine has been run."""
        return self._loaded

    def _load_definitions(self) -> None:
        """Add the built-in definitions from the definitions file, if any."""
        for key, properties in self._read_definitions_file().items():
            if self._load_definition(key, properties):
                logger.debug(f"Loaded {self.label}: {key}")

    def _load_definition(self, key: str, properties: dict[str, Any]) -> bool:
        return self.add(key, properties)

    def _read_definitions_file(self) -> dict[str, dict[str, Any]]:
        if self.definitions_file is None:
            return {}

        if not self.definitions_file.exists():
            logger.warning(f"{self.label.capitalize()} definitions file not found: {self.definitions_file}")
            return {}

        try:
            with open(self.definitions_file, "r") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load {self.label} definitions from {self.definitions_file}: {e}")
            return {}

        if not isinstance(data, dict):
            return {}
        return {
            str(k): dict(v or {})
            for k, v in data.items()
            if not str(k).startswith("_") and (v is None or isinstance(v, dict))
        }

    # ── Mutation ────────────────────────────────────────

    def has_required_properties(self, properties: dict[str, Any]) -> bool:
        """Check that every required property name is present as a key."""
        return all(name in properties for name in self.required_properties)

    def add(
        self,
        key: str,
        properties: Optional[dict[str, Any]] = None,
        overwrite: bool = False,
        default_props: Optional[dict[str, Any]] = None,
    ) -> bool:
        """Add or update a definition.

        Returns False, and reports an error, when the key already exists and
        overwrite is off, when required properties are missing, or when the
        subclass rejects the candidate. The registry is unchanged on failure.
        """
        key = sanitize_key(key)
        properties = copy_properties(dict(properties or {}))

        if default_props:
            properties = {**copy_properties(default_props), **properties}

        existing = self._definitions.get(key)

        if existing is not None and overwrite:
            candidate = merge_properties(existing, properties)
        elif existing is not None:
            self.errors.add_error(
                ErrorCode.ALREADY_EXISTS,
                f'The "{key}" {self.label} can\'t be added because it already exists.',
                source=self.error_source,
            )
            return False
        elif not self.has_required_properties(properties):
            missing = [p for p in self.required_properties if p not in properties]
            self.errors.add_error(
                ErrorCode.MISSING_REQUIRED_PROPERTIES,
                f'The "{key}" {self.label} can\'t be added because it is missing '
                f"required properties: {', '.join(missing)}.",
                source=self.error_source,
            )
            return False
        else:
            candidate = properties

        if not self._validate(key, candidate):
            return False

        self._definitions[key] = candidate
        return True

    def _validate(self, key: str, properties: dict[str, Any]) -> bool:
        """Extra validation for a candidate definition. Subclasses report their own errors."""
        return True

    def remove(self, key: str) -> bool:
        """Remove a definition, reporting an error if it doesn't exist."""
        if key not in self._definitions:
            self.errors.add_error(
                ErrorCode.CANNOT_REMOVE_MISSING,
                f'The "{key}" {self.label} can\'t be removed because it doesn\'t exist.',
                source=self.error_source,
            )
            return False

        del self._definitions[key]
        return True

    # ── Queries ─────────────────────────────────────────

    def query(self, property: str = ALL) -> dict[str, Any]:
        """Get all definitions, or one property of each definition.

        Definitions that don't have the property are omitted.
        """
        self.load()

        if property == ALL:
            return {k: copy_properties(v) for k, v in self._definitions.items()}

        return {
            k: copy_properties(v[property])
            for k, v in self._definitions.items()
            if property in v
        }

    def exists(self, key: str, property: str = ALL) -> bool:
        """Check if a definition exists, optionally one having a given property."""
        return key in self.query(property)

    def get(self, key: str) -> Optional[dict[str, Any]]:
        """Get a single definition by key."""
        return self.query().get(key)

    def list_keys(self) -> list[str]:
        """List all definition keys."""
        self.load()
        return list(self._definitions.keys())

    def count(self) -> int:
        """Get total number of definitions."""
        self.load()
        return len(self._definitions)
