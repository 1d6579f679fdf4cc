"""In-memory store, for tests and process-scoped settings."""

import copy
from typing import Any, Optional

from make_theme.undefined import UNDEFINED

from .base import SettingsStore


class MemoryStore(SettingsStore):
    """Dict-backed store."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._data: dict[str, Any] = dict(initial or {})

    def read(self, key: str) -> Any:
        if key not in self._data:
            return UNDEFINED
        return copy.deepcopy(self._data[key])

    def write(self, key: str, value: Any) -> bool:
        self._data[key] = copy.deepcopy(value)
        return True

    def delete(self, key: str) -> bool:
        return self._data.pop(key, UNDEFINED) is not UNDEFINED
