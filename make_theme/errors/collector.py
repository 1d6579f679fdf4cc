"""Error collector - accumulates errors instead of raising them.

Registries report validation failures here and return False. Callers that
care inspect the collected records afterwards.
"""

import logging
from typing import Optional

from make_theme import config

from .schemas import ErrorCode, ErrorRecord

logger = logging.getLogger(__name__)


def _split_code(code: ErrorCode | str) -> tuple[ErrorCode, Optional[str]]:
    """Map a code to its ErrorCode member. Unknown strings become OTHER."""
    try:
        return ErrorCode(code), None
    except ValueError:
        return ErrorCode.OTHER, str(code)


class ErrorCollector:
    """Append-only collection of error records."""

    def __init__(self, debug: Optional[bool] = None):
        self.debug = config.DEBUG if debug is None else debug
        self._errors: list[ErrorRecord] = []

    def add_error(self, code: ErrorCode | str, message: str, source: str = "") -> ErrorRecord:
        """Record an error and return the stored record."""
        error_code, custom_code = _split_code(code)
        record = ErrorRecord(
            code=error_code, custom_code=custom_code, message=message, source=source
        )
        self._errors.append(record)

        level = logging.ERROR if self.debug else logging.WARNING
        logger.log(level, f"[{record.custom_code or record.code.value}] {message}")
        return record

    def has_errors(self, code: Optional[ErrorCode | str] = None) -> bool:
        """Check for any errors, or errors with a specific code."""
        return bool(self.get_errors(code))

    def get_errors(self, code: Optional[ErrorCode | str] = None) -> list[ErrorRecord]:
        """Get recorded errors, optionally filtered by code."""
        if code is None:
            return list(self._errors)
        error_code, custom_code = _split_code(code)
        return [
            e for e in self._errors
            if e.code == error_code and e.custom_code == custom_code
        ]

    def get_codes(self) -> list[ErrorCode]:
        """Get the distinct error codes in the order first seen."""
        codes: list[ErrorCode] = []
        for e in self._errors:
            if e.code not in codes:
                codes.append(e.code)
        return codes

    def get_messages(self, code: Optional[ErrorCode | str] = None) -> list[str]:
        """Get error messages, optionally filtered by code."""
        return [e.message for e in self.get_errors(code)]

    def count(self) -> int:
        """Get total number of recorded errors."""
        return len(self._errors)

    def clear(self) -> None:
        """Drop all recorded errors."""
        self._errors.clear()
