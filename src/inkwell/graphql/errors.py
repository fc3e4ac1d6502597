"""
Translation of domain errors into GraphQL field errors
"""

from collections.abc import Iterator
from contextlib import contextmanager

from graphql import GraphQLError

from ..errors import InkwellError


@contextmanager
def client_errors() -> Iterator[None]:
    """
    Re-raise business-rule violations as GraphQL errors.

    The error kind goes into ``extensions.code`` so clients can tell an
    ``EMAIL_TAKEN`` from an ``AUTHOR_NOT_FOUND`` without parsing messages.
    Anything that is not an ``InkwellError`` propagates unchanged.
    """
    try:
        yield
    except InkwellError as e:
        raise GraphQLError(
            e.message,
            original_error=e,
            extensions={"code": e.kind.value, **e.details},
        ) from e
