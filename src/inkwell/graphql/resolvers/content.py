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
async def resolve_contents(info: strawberry.Info, query: str | None) -> list[Content]:
    from ..types.content import Content as ContentType

    records = dispatch.resolve("Query", "contents", None, {"query": query}, info.context)
    return [ContentType.from_record(record) for record in records]


async def resolve_single_post(info: strawberry.Info) -> Content:
    from ..types.content import Content as ContentType

    return ContentType.from_record(
        dispatch.resolve("Query", "singlePost", None, {}, info.context)
    )


# Field resolvers
async def resolve_content_author(content: Content, info: strawberry.Info) -> Author | None:
    """
    Resolve the author of a post.

    A dangling author reference resolves to null instead of failing the request.
    """
    from ..types.author import Author as AuthorType

    record = dispatch.resolve("Content", "author", content.record, {}, info.context)
    if record is None:
        return None
    return AuthorType.from_record(record)


async def resolve_content_comments(content: Content, info: strawberry.Info) -> list[Annotation]:
    from ..types.annotation import Annotation as AnnotationType

    records = dispatch.resolve("Content", "comments", content.record, {}, info.context)
    return [AnnotationType.from_record(record) for record in records]


# Mutation resolvers
async def create_content(
    info: strawberry.Info, title: str, body: str, published: bool, author_id: str
) -> Content:
    from ..types.content import Content as ContentType

    with client_errors():
        record = dispatch.resolve(
            "Mutation",
            "createContent",
            None,
            {"title": title, "body": body, "published": published, "authorId": author_id},
            info.context,
        )
    return ContentType.from_record(record)
