"""Resolver package for the GraphQL schema.

Each module adapts the framework-neutral resolvers in ``inkwell.resolution``
to Strawberry: it forwards ``info.context`` as the resolver context and wraps
the returned records in the GraphQL types.
"""
