"""Post meta settings - per-post custom fields."""

import logging
from pathlib import Path
from typing import Any, Optional

from make_theme import config
from make_theme.callbacks.registry import CallbackRegistry
from make_theme.errors.collector import ErrorCollector
from make_theme.hooks.registry import HookRegistry
from make_theme.storage.base import SettingsStore
from make_theme.storage.sqlite import SqliteMetaStore

from .store import StoreSettings

logger = logging.getLogger(__name__)


class PostMetaSettings(StoreSettings):
    """Settings stored as meta on one post at a time.

    Definitions are shared; ``set_object()`` switches which post's values
    are read and written. With no post selected nothing is stored and
    every value resolves to its default.
    """

    type = "postmeta"

    def __init__(
        self,
        errors: ErrorCollector,
        hooks: HookRegistry,
        object_id: Optional[int] = None,
        database_path: Optional[Path] = None,
        sanitizers: Optional[CallbackRegistry] = None,
        definitions_file: Optional[Path] = None,
    ):
        self.database_path = Path(database_path or config.POSTMETA_DATABASE)
        self.object_id: Optional[int] = None
        super().__init__(
            errors,
            hooks,
            store=None,
            sanitizers=sanitizers,
            definitions_file=definitions_file,
        )
        self.store: Optional[SettingsStore] = None
        if object_id is not None:
            self.set_object(object_id)

    def set_object(self, object_id: int) -> None:
        """Select the post whose meta is read and written."""
        self.object_id = int(object_id)
        self.store = SqliteMetaStore(self.object_id, self.database_path)

    def get_raw_value(self, setting_id: str) -> Any:
        if self.store is None:
            return self.undefined
        return super().get_raw_value(setting_id)

    def set_value(self, setting_id: str, value: Any) -> bool:
        if self.store is None:
            logger.warning(f"No post selected, cannot set {setting_id}")
            return False
        return super().set_value(setting_id, value)

    def unset_value(self, setting_id: str) -> bool:
        if self.store is None:
            logger.warning(f"No post selected, cannot unset {setting_id}")
            return False
        return super().unset_value(setting_id)
