"""YAML file store - one mapping of key -> value in a single file.

The whole file is read lazily on first access and rewritten on every
change, the same way operationalizations are saved.
"""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from make_theme.undefined import UNDEFINED

from .base import SettingsStore

logger = logging.getLogger(__name__)


class YamlFileStore(SettingsStore):
    """Store backed by a YAML mapping on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._data: dict[str, Any] = {}
        self._loaded = False

    def load(self) -> None:
        """Read the file into memory. A missing file is an empty store."""
        if self._loaded:
            return

        if self.path.exists():
            try:
                with open(self.path, "r") as f:
                    data = yaml.safe_load(f)
                if isinstance(data, dict):
                    self._data = data
                elif data is not None:
                    logger.warning(f"Ignoring non-mapping YAML in {self.path}")
            except (OSError, yaml.YAMLError) as e:
                logger.error(f"Failed to read settings from {self.path}: {e}")

        self._loaded = True

    def _save(self) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                yaml.safe_dump(
                    self._data,
                    f,
                    default_flow_style=False,
                    allow_unicode=True,
                    sort_keys=False,
                )
            return True
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to write settings to {self.path}: {e}")
            return False

    def read(self, key: str) -> Any:
        self.load()
        if key not in self._data:
            return UNDEFINED
        return copy.deepcopy(self._data[key])

    def write(self, key: str, value: Any) -> bool:
        self.load()
        previous = self._data.get(key, UNDEFINED)
        self._data[key] = copy.deepcopy(value)

        if not self._save():
            if previous is UNDEFINED:
                self._data.pop(key, None)
            else:
                self._data[key] = previous
            return False

        logger.info(f"Saved setting: {key} -> {self.path}")
        return True

    def delete(self, key: str) -> bool:
        self.load()
        if key not in self._data:
            return False

        previous = self._data.pop(key)
        if not self._save():
            self._data[key] = previous
            return False

        logger.info(f"Deleted setting: {key}")
        return True
