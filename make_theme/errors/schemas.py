"""Error record schemas."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Categories of non-fatal failures."""

    ALREADY_EXISTS = "already_exists"
    MISSING_REQUIRED_PROPERTIES = "missing_required_properties"
    INVALID_CALLBACK = "invalid_callback"
    CANNOT_REMOVE_MISSING = "cannot_remove_missing"
    MISUSE_CALLED_TOO_EARLY = "misuse_called_too_early"
    DEPRECATED_HOOK = "deprecated_hook"
    OTHER = "other"


class ErrorRecord(BaseModel):
    """A single reported error."""

    code: ErrorCode
    custom_code: Optional[str] = Field(
        default=None,
        description="Caller-supplied code that is not an ErrorCode member (code is OTHER)",
    )
    message: str
    source: str = Field(
        default="",
        description="Component that reported the error (e.g. 'view', 'settings_thememod')",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
