"""Runtime configuration read from environment variables.

Values are read once at import time, the same way the executor reads its
database URL. Tests and embedding code can pass explicit values to the
constructors instead of relying on these.
"""

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVEL = os.environ.get("MAKE_THEME_LOG_LEVEL", "INFO").upper()

DEBUG = os.environ.get("MAKE_THEME_DEBUG", "").lower() in ("1", "true", "yes")

# Empty path keeps theme mods in memory for the life of the process
THEMEMOD_PATH = os.environ.get("MAKE_THEME_THEMEMOD_PATH", "")

POSTMETA_DATABASE = Path(
    os.environ.get("MAKE_THEME_POSTMETA_DATABASE", "postmeta.db")
)

DEFAULT_VIEW = os.environ.get("MAKE_THEME_DEFAULT_VIEW", "post")


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for applications embedding the registries."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL), logging.INFO),
        format=LOG_FORMAT,
    )
