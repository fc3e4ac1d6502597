"""
Field dispatch: the resolver table behind the GraphQL schema.

Every resolver has the shape ``(parent, arguments, context) -> value`` where
``parent`` is None for root fields and ``context["store"]`` is the
``EntityStore`` serving the request. Resolvers touch nothing but the store,
and only the ``Mutation`` resolvers write to it.
"""

from collections.abc import Callable
from typing import Any

from . import relationships
from .errors import UnknownFieldError
from .filters import filter_entities
from .logging import get_logger
from .store import Author, Content, EntityKind, EntityStore
from .validation import create_annotation, create_author, create_content

logger = get_logger(__name__)

Resolver = Callable[[Any, dict[str, Any], dict[str, Any]], Any]


class FieldDispatch:
    """
    Registry of resolvers keyed by (type name, field name).
    """

    def __init__(self):
        self._resolvers: dict[tuple[str, str], Resolver] = {}

    def register(self, type_name: str, field_name: str, resolver: Resolver) -> None:
        """
        Register a resolver for one field.

        Raises:
            ValueError: If the field already has a resolver
        """
        key = (type_name, field_name)
        if key in self._resolvers:
            raise ValueError(f"Resolver for {type_name}.{field_name} is already registered")
        self._resolvers[key] = resolver

    def resolver(self, type_name: str, field_name: str) -> Callable[[Resolver], Resolver]:
        """Decorator form of ``register``."""

        def decorator(fn: Resolver) -> Resolver:
            self.register(type_name, field_name, fn)
            return fn

        return decorator

    def get(self, type_name: str, field_name: str) -> Resolver | None:
        return self._resolvers.get((type_name, field_name))

    def list_fields(self) -> list[tuple[str, str]]:
        return sorted(self._resolvers)

    def resolve(
        self,
        type_name: str,
        field_name: str,
        parent: Any,
        arguments: dict[str, Any],
        context: dict[str, Any],
    ) -> Any:
        """
        Invoke the resolver registered for ``type_name.field_name``.

        Raises:
            UnknownFieldError: If no resolver is registered for the field
        """
        resolver = self.get(type_name, field_name)
        if resolver is None:
            raise UnknownFieldError(type_name, field_name)
        return resolver(parent, arguments, context)


dispatch = FieldDispatch()


def get_store(context: dict[str, Any]) -> EntityStore:
    store = context.get("store")
    if store is None:
        raise RuntimeError("Entity store not found in resolver context")
    return store


# Placeholder roots, fixed values not backed by the store
PLACEHOLDER_ME = Author(id="123098", name="Mike", email="mike@example.com")
PLACEHOLDER_POST = Content(
    id="092", title="GraphQL 101", body="", published=False, author_id=""
)


# Query resolvers
@dispatch.resolver("Query", "authors")
def resolve_authors(parent, arguments, context):
    return filter_entities(get_store(context), EntityKind.AUTHOR, arguments.get("query"))


@dispatch.resolver("Query", "contents")
def resolve_contents(parent, arguments, context):
    return filter_entities(get_store(context), EntityKind.CONTENT, arguments.get("query"))


@dispatch.resolver("Query", "annotations")
def resolve_annotations(parent, arguments, context):
    return filter_entities(get_store(context), EntityKind.ANNOTATION, arguments.get("query"))


@dispatch.resolver("Query", "me")
def resolve_me(parent, arguments, context):
    return PLACEHOLDER_ME


@dispatch.resolver("Query", "singlePost")
def resolve_single_post(parent, arguments, context):
    return PLACEHOLDER_POST


# Mutation resolvers
@dispatch.resolver("Mutation", "createAuthor")
def resolve_create_author(parent, arguments, context):
    return create_author(
        get_store(context),
        name=arguments["name"],
        email=arguments["email"],
        age=arguments.get("age"),
    )


@dispatch.resolver("Mutation", "createContent")
def resolve_create_content(parent, arguments, context):
    return create_content(
        get_store(context),
        title=arguments["title"],
        body=arguments["body"],
        published=arguments["published"],
        author_id=arguments["authorId"],
    )


@dispatch.resolver("Mutation", "createAnnotation")
def resolve_create_annotation(parent, arguments, context):
    return create_annotation(
        get_store(context),
        text=arguments["text"],
        author_id=arguments["authorId"],
        content_id=arguments["contentId"],
    )


# Relationship resolvers
def _relation_resolver(relation: str) -> Resolver:
    def resolve(parent, arguments, context):
        return relationships.resolve_relation(get_store(context), parent, relation)

    return resolve


for _type_name, _relation in (
    ("Author", "posts"),
    ("Author", "comments"),
    ("Content", "author"),
    ("Content", "comments"),
    ("Annotation", "author"),
    ("Annotation", "post"),
):
    dispatch.register(_type_name, _relation, _relation_resolver(_relation))
