"""View schemas - query context, file-based definitions, and summaries."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class QueryContext(BaseModel):
    """What the current request is showing.

    The built-in view predicates read these flags. Applications fill them in
    once the request has been routed.
    """

    is_home: bool = Field(default=False, description="Blog posts index")
    is_archive: bool = Field(default=False, description="Category, tag, date or author archive")
    is_search: bool = Field(default=False, description="Search results")
    is_page: bool = Field(default=False, description="Single page")
    is_singular: bool = Field(default=False, description="Any single post object")
    is_attachment: bool = Field(default=False, description="Single attachment")
    post_type: Optional[str] = Field(
        default=None,
        description="Post type of the queried object",
    )
    parent_post_type: Optional[str] = Field(
        default=None,
        description="Post type of the queried object's parent (attachments)",
    )
    public_post_types: list[str] = Field(
        default_factory=list,
        description="Public, non built-in post types",
    )


class ViewDefinition(BaseModel):
    """A view as declared in a definitions file.

    Callbacks in files are names resolved through the predicate registry.
    """

    model_config = ConfigDict(extra="allow")

    label: Optional[str] = None
    callback: str = ""
    priority: int = 10


class ViewSummary(BaseModel):
    """Lightweight view listing entry."""

    view_key: str
    label: str
    priority: int
    callback: str = Field(
        default="",
        description="Callback name, or the qualified name of a callable",
    )
