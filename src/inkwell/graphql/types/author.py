"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import Author as AuthorRecord

if TYPE_CHECKING:
    from .annotation import Annotation
    from .content import Content


@strawberry.type
class Author:
    """Author type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str
    age: int | None
    record: strawberry.Private[AuthorRecord]

    @classmethod
    def from_record(cls, record: AuthorRecord) -> "Author":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            email=record.email,
            age=record.age,
            record=record,
        )

    @strawberry.field
    async def posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Content", strawberry.lazy(".content")]]:
        """Get posts written by this author."""
        from ..resolvers.author import resolve_author_posts

        return await resolve_author_posts(self, info)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Annotation", strawberry.lazy(".annotation")]]:
        """Get comments written by this author."""
        from ..resolvers.author import resolve_author_comments

        return await resolve_author_comments(self, info)
