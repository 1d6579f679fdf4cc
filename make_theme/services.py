"""Default wiring of the registries.

Nothing here is global: each call builds a fresh set of collaborators that
share one error collector and one hook registry.
"""

import logging
from typing import Optional

from make_theme.compatibility.reporter import CompatibilityReporter
from make_theme.errors.collector import ErrorCollector
from make_theme.hooks.registry import HookRegistry
from make_theme.settings.thememod import ThemeModSettings
from make_theme.storage.base import SettingsStore
from make_theme.views.registry import ViewRegistry
from make_theme.views.schemas import QueryContext

logger = logging.getLogger(__name__)


class ThemeServices:
    """The shared collaborators for one request or process."""

    def __init__(
        self,
        thememod_store: Optional[SettingsStore] = None,
        context: Optional[QueryContext] = None,
        debug: Optional[bool] = None,
    ):
        self.errors = ErrorCollector(debug=debug)
        self.hooks = HookRegistry()
        self.compatibility = CompatibilityReporter(self.errors)
        self.views = ViewRegistry(
            self.errors,
            self.compatibility,
            self.hooks,
            context=context,
        )
        self.thememod = ThemeModSettings(
            self.errors,
            self.hooks,
            store=thememod_store,
        )

    def load(self) -> None:
        """Load every registry."""
        self.views.load()
        self.thememod.load()
        logger.info(
            f"Loaded {self.views.count()} views and {self.thememod.count()} theme mod settings"
        )

    def route(self, context: QueryContext) -> str:
        """Set the query context, fire the routing action, and return the current view."""
        self.views.set_query_context(context)
        self.hooks.do_action("template_redirect")
        return self.views.get_current_view()
