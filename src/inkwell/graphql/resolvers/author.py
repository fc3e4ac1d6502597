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
async def resolve_authors(info: strawberry.Info, query: str | None) -> list[Author]:
    from ..types.author import Author as AuthorType

    records = dispatch.resolve("Query", "authors", None, {"query": query}, info.context)
    return [AuthorType.from_record(record) for record in records]


async def resolve_me(info: strawberry.Info) -> Author:
    from ..types.author import Author as AuthorType

    return AuthorType.from_record(dispatch.resolve("Query", "me", None, {}, info.context))


# Field resolvers
async def resolve_author_posts(author: Author, info: strawberry.Info) -> list[Content]:
    from ..types.content import Content as ContentType

    records = dispatch.resolve("Author", "posts", author.record, {}, info.context)
    return [ContentType.from_record(record) for record in records]


async def resolve_author_comments(author: Author, info: strawberry.Info) -> list[Annotation]:
    from ..types.annotation import Annotation as AnnotationType

    records = dispatch.resolve("Author", "comments", author.record, {}, info.context)
    return [AnnotationType.from_record(record) for record in records]


# Mutation resolvers
async def create_author(
    info: strawberry.Info, name: str, email: str, age: int | None
) -> Author:
    from ..types.author import Author as AuthorType

    with client_errors():
        record = dispatch.resolve(
            "Mutation",
            "createAuthor",
            None,
            {"name": name, "email": email, "age": age},
            info.context,
        )
    return AuthorType.from_record(record)
