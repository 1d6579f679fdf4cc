"""SQLite meta store - per-object custom fields.

Values live in a single ``meta`` table keyed by (object_id, meta_key) and
are stored as JSON text. Connections are opened per call.
"""

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Optional

from make_theme import config
from make_theme.undefined import UNDEFINED

from .base import SettingsStore

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS meta (
    object_id INTEGER NOT NULL,
    meta_key TEXT NOT NULL,
    meta_value TEXT NOT NULL,
    PRIMARY KEY (object_id, meta_key)
)
"""


def _json_dumps(data: Any) -> str:
    """Serialize data to JSON string for storage."""
    return json.dumps(data, ensure_ascii=False, default=str)


def _json_loads(text: str) -> Any:
    """Deserialize JSON string from storage."""
    return json.loads(text)


class SqliteMetaStore(SettingsStore):
    """Store bound to one object's rows in the meta table."""

    def __init__(self, object_id: int, database_path: Optional[Path] = None):
        self.object_id = int(object_id)
        self.database_path = Path(database_path or config.POSTMETA_DATABASE)
        self._initialized = False

    @contextmanager
    def get_connection(self):
        """Get a database connection, creating the table on first use.

        Usage:
            with store.get_connection() as conn:
                conn.execute(...)
                conn.commit()
        """
        conn = sqlite3.connect(str(self.database_path))
        conn.row_factory = sqlite3.Row
        try:
            if not self._initialized:
                conn.execute(SCHEMA)
                conn.commit()
                self._initialized = True
            yield conn
        finally:
            conn.close()

    def read(self, key: str) -> Any:
        try:
            with self.get_connection() as conn:
                row = conn.execute(
                    "SELECT meta_value FROM meta WHERE object_id = ? AND meta_key = ?",
                    (self.object_id, key),
                ).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to read meta {key} for object {self.object_id}: {e}")
            return UNDEFINED

        if row is None:
            return UNDEFINED
        return _json_loads(row["meta_value"])

    def write(self, key: str, value: Any) -> bool:
        try:
            with self.get_connection() as conn:
                conn.execute(
                    "INSERT OR REPLACE INTO meta (object_id, meta_key, meta_value) "
                    "VALUES (?, ?, ?)",
                    (self.object_id, key, _json_dumps(value)),
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to write meta {key} for object {self.object_id}: {e}")
            return False

        logger.info(f"Saved meta: {key} for object {self.object_id}")
        return True

    def delete(self, key: str) -> bool:
        try:
            with self.get_connection() as conn:
                cursor = conn.execute(
                    "DELETE FROM meta WHERE object_id = ? AND meta_key = ?",
                    (self.object_id, key),
                )
                deleted = cursor.rowcount > 0
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to delete meta {key} for object {self.object_id}: {e}")
            return False

        return deleted

    def keys(self) -> list[str]:
        """List meta keys stored for this object."""
        with self.get_connection() as conn:
            rows = conn.execute(
                "SELECT meta_key FROM meta WHERE object_id = ? ORDER BY meta_key",
                (self.object_id,),
            ).fetchall()
        return [row["meta_key"] for row in rows]
