"""Compatibility reporter.

Logs a warning and records a notice when code calls something in the wrong
order or relies on a deprecated hook. Reporting never changes the caller's
control flow.
"""

import logging

from make_theme.errors.collector import ErrorCollector
from make_theme.errors.schemas import ErrorCode

from .schemas import MisuseNotice

logger = logging.getLogger(__name__)


class CompatibilityReporter:
    """Advisory reporter backed by the shared error collector."""

    def __init__(self, errors: ErrorCollector):
        self.errors = errors
        self._notices: list[MisuseNotice] = []

    def doing_it_wrong(self, function_name: str, message: str, version: str) -> None:
        """Report a function being called at the wrong time."""
        notice = MisuseNotice(
            kind="doing_it_wrong",
            name=function_name,
            message=message,
            version=version,
        )
        self._notices.append(notice)
        logger.warning(
            f"{function_name} was called incorrectly. {message} "
            f"(This message was added in version {version}.)"
        )
        self.errors.add_error(
            ErrorCode.MISUSE_CALLED_TOO_EARLY,
            f"{function_name} was called incorrectly. {message}",
            source="compatibility",
        )

    def deprecated_hook(self, hook: str, version: str, replacement: str = "") -> None:
        """Report a deprecated hook that still has callbacks attached.

        ``replacement`` tells callers what to use instead.
        """
        notice = MisuseNotice(
            kind="deprecated_hook",
            name=hook,
            message=replacement,
            version=version,
            replacement=replacement or None,
        )
        self._notices.append(notice)
        logger.warning(
            f"The {hook} hook is deprecated since version {version}. {replacement}".rstrip()
        )
        self.errors.add_error(
            ErrorCode.DEPRECATED_HOOK,
            f"The {hook} hook is deprecated since version {version}. {replacement}".rstrip(),
            source="compatibility",
        )

    def get_notices(self) -> list[MisuseNotice]:
        """Get all notices reported so far."""
        return list(self._notices)
