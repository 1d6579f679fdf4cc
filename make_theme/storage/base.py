"""Storage backend interface."""

from abc import ABC, abstractmethod
from typing import Any

from make_theme.undefined import UNDEFINED


class SettingsStore(ABC):
    """Raw key/value store behind a settings type."""

    @abstractmethod
    def read(self, key: str) -> Any:
        """Return the stored value, or UNDEFINED."""

    @abstractmethod
    def write(self, key: str, value: Any) -> bool:
        """Store a value. Returns True on success."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a stored value. Returns True if something was deleted."""

    def contains(self, key: str) -> bool:
        return self.read(key) is not UNDEFINED
