"""Compatibility notice schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class MisuseNotice(BaseModel):
    """An advisory notice about a function or hook being used incorrectly."""

    kind: str = Field(
        ...,
        description="'doing_it_wrong' or 'deprecated_hook'",
    )
    name: str = Field(..., description="Function or hook name")
    message: str = ""
    version: str = Field(default="", description="Version that introduced the rule")
    replacement: Optional[str] = None
