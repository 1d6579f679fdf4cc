"""View registry - loads and serves view definitions.

Follows the base definition registry pattern:
- Built-in views from definitions/views.yaml
- Lazy loading with _loaded guard
- Callbacks resolved through a predicate registry and validated on add
- get_current_view() for picking the view that matches the current query
"""

import logging
import re
import string
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import ValidationError

from make_theme import config
from make_theme.callbacks.registry import CallbackRegistry
from make_theme.callbacks.sanitizers import absint, sanitize_key
from make_theme.compatibility.reporter import CompatibilityReporter
from make_theme.definitions.registry import DefinitionRegistry
from make_theme.errors.collector import ErrorCollector
from make_theme.errors.schemas import ErrorCode
from make_theme.hooks.registry import HookRegistry

from .conditionals import ConditionalTags
from .schemas import QueryContext, ViewDefinition, ViewSummary

logger = logging.getLogger(__name__)

DEFINITIONS_FILE = Path(__file__).parent / "definitions" / "views.yaml"

# The query has been routed once this action has fired
LIFECYCLE_ACTION = "template_redirect"

DEPRECATED_VIEW_FILTER = "make_get_view"


def _default_label(view_id: str) -> str:
    return string.capwords(re.sub(r"[-_]+", " ", view_id))


def _callback_name(callback: Any) -> str:
    if isinstance(callback, str):
        return callback
    return getattr(callback, "__qualname__", repr(callback))


class ViewRegistry(DefinitionRegistry):
    """Registry of view definitions."""

    required_properties = ("label", "callback", "priority")
    label = "view"
    loaded_action = "make_view_loaded"

    def __init__(
        self,
        errors: ErrorCollector,
        compatibility: CompatibilityReporter,
        hooks: HookRegistry,
        predicates: Optional[CallbackRegistry] = None,
        definitions_file: Optional[Path] = DEFINITIONS_FILE,
        default_view: Optional[str] = None,
        context: Optional[QueryContext] = None,
    ):
        super().__init__(errors, hooks, definitions_file)
        self.compatibility = compatibility
        self.default_view = default_view or config.DEFAULT_VIEW
        self.context = context or QueryContext()
        self.conditionals = ConditionalTags(lambda: self.context)

        # Built-ins are bound to this registry's context, so they stay local.
        # Names registered in the shared predicates take precedence.
        self.predicates = predicates or CallbackRegistry()
        self._builtin_predicates = CallbackRegistry(self.conditionals.as_dict())

    def set_query_context(self, context: QueryContext) -> None:
        """Replace the query context the built-in predicates read."""
        self.context = context

    def _load_definition(self, key: str, properties: dict[str, Any]) -> bool:
        try:
            view = ViewDefinition.model_validate(properties)
        except ValidationError as e:
            logger.error(f"Invalid view definition {key}: {e}")
            return False
        return self.add_view(key, view.model_dump(exclude_none=True))

    # ── Mutation ────────────────────────────────────────

    def add_view(
        self,
        view_id: str,
        args: Optional[dict[str, Any]] = None,
        overwrite: bool = False,
    ) -> bool:
        """Add or update a view definition.

        Example:
            registry.add_view(
                "page",
                {"label": "Page", "callback": is_page, "priority": 10},
                overwrite=True,
            )
        """
        key = sanitize_key(view_id)

        # Defaults only fill in brand new views
        defaults = None
        if key not in self._definitions:
            defaults = {
                "label": _default_label(key),
                "callback": "",
                "priority": 10,
            }

        return self.add(view_id, args, overwrite=overwrite, default_props=defaults)

    def _validate(self, key: str, properties: dict[str, Any]) -> bool:
        callback = properties.get("callback")
        if self._resolve_predicate(callback) is not None:
            return True

        self.errors.add_error(
            ErrorCode.INVALID_CALLBACK,
            f'The view callback ({_callback_name(callback)!r}) for "{key}" is not valid.',
            source=self.error_source,
        )
        return False

    def remove_view(self, view_id: str) -> bool:
        """Remove a view definition, if it exists."""
        return self.remove(view_id)

    # ── Queries ─────────────────────────────────────────

    def get_views(self, property: str = "all") -> dict[str, Any]:
        """Get complete view definitions, or a specific property of each one."""
        return self.query(property)

    def get_sorted_views(self) -> dict[str, dict[str, Any]]:
        """Get view definitions sorted by ascending priority.

        Views with the same priority keep their insertion order.
        """
        return dict(
            sorted(
                self.get_views().items(),
                key=lambda item: absint(item[1]["priority"]),
            )
        )

    def view_exists(self, view_id: str) -> bool:
        """Check if a particular view exists."""
        return self.exists(view_id)

    def get_view_label(self, view_id: str) -> str:
        """Get the label for a view, or an empty string."""
        return self.get_views().get(view_id, {}).get("label", "")

    def list_summaries(self) -> list[ViewSummary]:
        """List view summaries in evaluation order."""
        return [
            ViewSummary(
                view_key=view_id,
                label=str(args["label"]),
                priority=absint(args["priority"]),
                callback=_callback_name(args["callback"]),
            )
            for view_id, args in self.get_sorted_views().items()
        ]

    def get_predicate(self, view_id: str) -> Optional[Callable[[], Any]]:
        """Resolve the display predicate of a view."""
        view = self.get(view_id)
        if view is None:
            return None
        return self._resolve_predicate(view["callback"])

    def _resolve_predicate(self, ref: Any) -> Optional[Callable[[], Any]]:
        return self.predicates.resolve(ref) or self._builtin_predicates.resolve(ref)

    # ── Current view ────────────────────────────────────

    def get_current_view(self) -> str:
        """Determine the current view from the predicates of each view.

        Every predicate runs in priority order and the last one returning
        True wins, so higher priorities override lower ones. Falls back to
        the default view.
        """
        if not self.hooks.did_action(LIFECYCLE_ACTION):
            self.compatibility.doing_it_wrong(
                "get_current_view",
                f"View cannot be accurately determined until after the "
                f"{LIFECYCLE_ACTION} action has run.",
                "1.7.0",
            )

        view = self.default_view

        for view_id in self.get_sorted_views():
            predicate = self.get_predicate(view_id)
            if predicate is not None and predicate() is True:
                view = view_id

        if self.hooks.has_filter(DEPRECATED_VIEW_FILTER):
            self.compatibility.deprecated_hook(
                DEPRECATED_VIEW_FILTER,
                "1.7.0",
                "To add or modify theme views, use ViewRegistry.add_view() instead.",
            )
            view = self.hooks.apply_filters(
                DEPRECATED_VIEW_FILTER, view, self.context.parent_post_type
            )

        logger.debug(f"Current view: {view}")
        return view

    def is_current_view(self, view_id: str) -> bool:
        """Check if a view is the current one."""
        return view_id == self.get_current_view()
