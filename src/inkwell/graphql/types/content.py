"""
Content (post) GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import Content as ContentRecord

if TYPE_CHECKING:
    from .annotation import Annotation
    from .author import Author


@strawberry.type
class Content:
    """Post type for GraphQL API."""

    id: strawberry.ID
    title: str
    body: str
    published: bool
    record: strawberry.Private[ContentRecord]

    @classmethod
    def from_record(cls, record: ContentRecord) -> "Content":
        return cls(
            id=strawberry.ID(record.id),
            title=record.title,
            body=record.body,
            published=record.published,
            record=record,
        )

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """Get the author of this post."""
        from ..resolvers.content import resolve_content_author

        return await resolve_content_author(self, info)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Annotation", strawberry.lazy(".annotation")]]:
        """Get comments on this post."""
        from ..resolvers.content import resolve_content_comments

        return await resolve_content_comments(self, info)
