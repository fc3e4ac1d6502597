"""
Root GraphQL mutation definitions

Mutation fields are nullable: a rejected write resolves to null with an entry
in ``errors`` and leaves the other fields of the request intact.
"""

import strawberry

from ..types.annotation import Annotation
from ..types.author import Author
from ..types.content import Content


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createAuthor")
    async def create_author(
        self, info: strawberry.Info, name: str, email: str, age: int | None = None
    ) -> Author | None:
        """Create a new author. Emails are unique."""
        from ..resolvers.author import create_author

        return await create_author(info, name, email, age)

    @strawberry.mutation(name="createContent")
    async def create_content(
        self,
        info: strawberry.Info,
        title: str,
        body: str,
        published: bool,
        author_id: strawberry.ID,
    ) -> Content | None:
        """Create a new post for an existing author."""
        from ..resolvers.content import create_content

        return await create_content(info, title, body, published, author_id)

    @strawberry.mutation(name="createAnnotation")
    async def create_annotation(
        self,
        info: strawberry.Info,
        text: str,
        author_id: strawberry.ID,
        content_id: strawberry.ID,
    ) -> Annotation | None:
        """Comment on a published post."""
        from ..resolvers.annotation import create_annotation

        return await create_annotation(info, text, author_id, content_id)
