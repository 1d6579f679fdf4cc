"""Hook registry - ordered callbacks invoked synchronously at named points."""

import logging
from typing import Any, Callable, NamedTuple, Optional

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10


class _Hook(NamedTuple):
    priority: int
    callback: Callable
    accepted_args: Optional[int]


class HookRegistry:
    """Registry of filter and action callbacks keyed by hook name.

    Callbacks run in ascending priority; callbacks with the same priority
    run in registration order. ``accepted_args`` limits how many of the
    hook's arguments a callback receives (None passes them all).
    """

    def __init__(self):
        self._hooks: dict[str, list[_Hook]] = {}
        self._action_counts: dict[str, int] = {}
        self._running: list[str] = []

    # ── Registration ────────────────────────────────────

    def add_filter(
        self,
        tag: str,
        callback: Callable,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: Optional[int] = None,
    ) -> None:
        """Register a callback for a hook."""
        if not callable(callback):
            raise TypeError(f"Hook callback for '{tag}' is not callable: {callback!r}")
        self._hooks.setdefault(tag, []).append(_Hook(priority, callback, accepted_args))
        logger.debug(f"Added hook callback to {tag} at priority {priority}")

    def add_action(
        self,
        tag: str,
        callback: Callable,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: Optional[int] = None,
    ) -> None:
        """Register a callback for an action."""
        self.add_filter(tag, callback, priority, accepted_args)

    def remove_filter(
        self, tag: str, callback: Callable, priority: Optional[int] = None
    ) -> bool:
        """Remove a callback from a hook. Returns True if anything was removed."""
        hooks = self._hooks.get(tag, [])
        kept = [
            h for h in hooks
            if not (h.callback == callback and (priority is None or h.priority == priority))
        ]
        if len(kept) == len(hooks):
            return False
        if kept:
            self._hooks[tag] = kept
        else:
            self._hooks.pop(tag, None)
        return True

    remove_action = remove_filter

    def has_filter(self, tag: str, callback: Optional[Callable] = None) -> bool:
        """Check if a hook has callbacks, or a specific callback."""
        hooks = self._hooks.get(tag, [])
        if callback is None:
            return bool(hooks)
        return any(h.callback == callback for h in hooks)

    has_action = has_filter

    def _sorted(self, tag: str) -> list[_Hook]:
        # sorted() is stable, so equal priorities keep registration order
        return sorted(self._hooks.get(tag, []), key=lambda h: h.priority)

    @staticmethod
    def _args_for(hook: _Hook, args: tuple) -> tuple:
        if hook.accepted_args is None:
            return args
        return args[: max(hook.accepted_args, 0)]

    # ── Invocation ──────────────────────────────────────

    def apply_filters(self, tag: str, value: Any, *args: Any) -> Any:
        """Pass a value through every callback registered for a filter."""
        hooks = self._sorted(tag)
        if not hooks:
            return value

        self._running.append(tag)
        try:
            for hook in hooks:
                value = hook.callback(*self._args_for(hook, (value, *args)))
        finally:
            self._running.pop()
        return value

    def do_action(self, tag: str, *args: Any) -> None:
        """Fire an action, invoking every registered callback."""
        self._action_counts[tag] = self._action_counts.get(tag, 0) + 1

        self._running.append(tag)
        try:
            for hook in self._sorted(tag):
                hook.callback(*self._args_for(hook, args))
        finally:
            self._running.pop()

    # ── Introspection ───────────────────────────────────

    def did_action(self, tag: str) -> int:
        """Number of times an action has fired."""
        return self._action_counts.get(tag, 0)

    def doing_action(self, tag: Optional[str] = None) -> bool:
        """Check whether any hook, or a specific one, is currently running."""
        if tag is None:
            return bool(self._running)
        return tag in self._running

    doing_filter = doing_action

    def current_action(self) -> Optional[str]:
        """Name of the innermost hook currently running."""
        return self._running[-1] if self._running else None

    current_filter = current_action
