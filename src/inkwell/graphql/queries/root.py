"""
Root GraphQL query definitions
"""

import strawberry

from ..types.annotation import Annotation
from ..types.author import Author
from ..types.content import Content


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def authors(self, info: strawberry.Info, query: str | None = None) -> list[Author]:
        """List authors whose name contains the query text."""
        from ..resolvers.author import resolve_authors

        return await resolve_authors(info, query)

    @strawberry.field
    async def contents(self, info: strawberry.Info, query: str | None = None) -> list[Content]:
        """List posts whose title or body contains the query text."""
        from ..resolvers.content import resolve_contents

        return await resolve_contents(info, query)

    @strawberry.field
    async def annotations(
        self, info: strawberry.Info, query: str | None = None
    ) -> list[Annotation]:
        """List comments whose text contains the query text."""
        from ..resolvers.annotation import resolve_annotations

        return await resolve_annotations(info, query)

    @strawberry.field
    async def me(self, info: strawberry.Info) -> Author:
        """Fixed placeholder author, not backed by the store."""
        from ..resolvers.author import resolve_me

        return await resolve_me(info)

    @strawberry.field(name="singlePost")
    async def single_post(self, info: strawberry.Info) -> Content:
        """Fixed placeholder post, not backed by the store."""
        from ..resolvers.content import resolve_single_post

        return await resolve_single_post(info)
