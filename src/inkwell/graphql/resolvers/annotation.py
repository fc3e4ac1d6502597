from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...resolution import dispatch
from ..errors import client_errors

if TYPE_CHECKING:
    from ..types.annotation import Annotation
    from ..types.author import Author
    from ..types.content import Content


# Query resolvers
async def resolve_annotations(info: strawberry.Info, query: str | None) -> list[Annotation]:
    """
    Resolve comments matching ``query``.

    A missing query argument lists every comment.
    """
    from ..types.annotation import Annotation as AnnotationType

    records = dispatch.resolve("Query", "annotations", None, {"query": query}, info.context)
    return [AnnotationType.from_record(record) for record in records]


# Field resolvers
async def resolve_annotation_author(
    annotation: Annotation, info: strawberry.Info
) -> Author | None:
    from ..types.author import Author as AuthorType

    record = dispatch.resolve("Annotation", "author", annotation.record, {}, info.context)
    if record is None:
        return None
    return AuthorType.from_record(record)


async def resolve_annotation_post(
    annotation: Annotation, info: strawberry.Info
) -> Content | None:
    from ..types.content import Content as ContentType

    record = dispatch.resolve("Annotation", "post", annotation.record, {}, info.context)
    if record is None:
        return None
    return ContentType.from_record(record)


# Mutation resolvers
async def create_annotation(
    info: strawberry.Info, text: str, author_id: str, content_id: str
) -> Annotation:
    from ..types.annotation import Annotation as AnnotationType

    with client_errors():
        record = dispatch.resolve(
            "Mutation",
            "createAnnotation",
            None,
            {"text": text, "authorId": author_id, "contentId": content_id},
            info.context,
        )
    return AnnotationType.from_record(record)
