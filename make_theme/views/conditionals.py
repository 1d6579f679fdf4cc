"""Built-in view predicates evaluated against a QueryContext."""

from typing import Callable

from .schemas import QueryContext


class ConditionalTags:
    """Zero-argument predicates bound to a query context provider."""

    def __init__(self, get_context: Callable[[], QueryContext]):
        self._get_context = get_context

    @property
    def context(self) -> QueryContext:
        return self._get_context()

    def is_home(self) -> bool:
        return self.context.is_home

    def is_archive(self) -> bool:
        return self.context.is_archive

    def is_search(self) -> bool:
        return self.context.is_search

    def callback_page(self) -> bool:
        """Pages, and attachments whose parent is a page."""
        ctx = self.context
        return ctx.is_page or (ctx.is_attachment and ctx.parent_post_type == "page")

    def callback_post(self) -> bool:
        """Posts and public custom post types, and attachments of either.

        Attachments count only when their parent is one of those post types.
        """
        ctx = self.context
        post_types = [*ctx.public_post_types, "post"]

        if ctx.is_attachment:
            return ctx.parent_post_type in post_types
        return ctx.is_singular and ctx.post_type in post_types

    def as_dict(self) -> dict[str, Callable[[], bool]]:
        return {
            "is_home": self.is_home,
            "is_archive": self.is_archive,
            "is_search": self.is_search,
            "callback_page": self.callback_page,
            "callback_post": self.callback_post,
        }
