"""
Annotation (comment) GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import Annotation as AnnotationRecord

if TYPE_CHECKING:
    from .author import Author
    from .content import Content


@strawberry.type
class Annotation:
    """Comment type for GraphQL API."""

    id: strawberry.ID
    text: str
    record: strawberry.Private[AnnotationRecord]

    @classmethod
    def from_record(cls, record: AnnotationRecord) -> "Annotation":
        return cls(id=strawberry.ID(record.id), text=record.text, record=record)

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """Get the author of this comment."""
        from ..resolvers.annotation import resolve_annotation_author

        return await resolve_annotation_author(self, info)

    @strawberry.field
    async def post(
        self, info: strawberry.Info
    ) -> Annotated["Content", strawberry.lazy(".content")] | None:
        """Get the post this comment belongs to."""
        from ..resolvers.annotation import resolve_annotation_post

        return await resolve_annotation_post(self, info)
