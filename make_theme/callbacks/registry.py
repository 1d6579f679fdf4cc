"""Callback registry - resolves callback references to callables.

Definitions reference callbacks either directly (any callable) or by the
name they were registered under. Anything else does not resolve.
"""

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class CallbackRegistry:
    """Registry of named callables."""

    def __init__(self, callbacks: Optional[dict[str, Callable]] = None):
        self._callbacks: dict[str, Callable] = {}
        for name, callback in (callbacks or {}).items():
            self.register(name, callback)

    def register(self, name: str, callback: Callable) -> None:
        """Register a callable under a name, replacing any previous one."""
        if not callable(callback):
            raise TypeError(f"Callback '{name}' is not callable: {callback!r}")
        self._callbacks[name] = callback
        logger.debug(f"Registered callback: {name}")

    def unregister(self, name: str) -> bool:
        """Remove a named callback."""
        return self._callbacks.pop(name, None) is not None

    def get(self, name: str) -> Optional[Callable]:
        """Get a callable by name."""
        return self._callbacks.get(name)

    def resolve(self, ref: Any) -> Optional[Callable]:
        """Resolve a reference (callable or registered name) to a callable."""
        if callable(ref):
            return ref
        if isinstance(ref, str) and ref:
            return self._callbacks.get(ref)
        return None

    def is_callable(self, ref: Any) -> bool:
        """Check whether a reference resolves to a callable."""
        return self.resolve(ref) is not None

    def list_names(self) -> list[str]:
        """List registered callback names."""
        return sorted(self._callbacks.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._callbacks
