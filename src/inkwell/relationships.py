"""
Relationship resolution by foreign-key lookup
"""

from collections.abc import Callable
from typing import Any

from .errors import UnknownRelationError
from .logging import get_logger
from .store import Annotation, Author, Content, EntityKind, EntityStore, Record

logger = get_logger(__name__)


def _dangling(parent: Record, relation: str, missing_id: str) -> None:
    logger.warning(
        "Dangling reference",
        parent_type=type(parent).__name__,
        parent_id=parent.id,
        relation=relation,
        missing_id=missing_id,
    )


def content_author(store: EntityStore, content: Content) -> Author | None:
    # Placeholder posts carry no author
    if not content.author_id:
        return None
    author = store.find_by_id(EntityKind.AUTHOR, content.author_id)
    if author is None:
        _dangling(content, "author", content.author_id)
    return author


def content_comments(store: EntityStore, content: Content) -> list[Annotation]:
    return list(store.find_by_foreign_key(EntityKind.ANNOTATION, "content_id", content.id))


def author_posts(store: EntityStore, author: Author) -> list[Content]:
    return list(store.find_by_foreign_key(EntityKind.CONTENT, "author_id", author.id))


def author_comments(store: EntityStore, author: Author) -> list[Annotation]:
    return list(store.find_by_foreign_key(EntityKind.ANNOTATION, "author_id", author.id))


def annotation_author(store: EntityStore, annotation: Annotation) -> Author | None:
    author = store.find_by_id(EntityKind.AUTHOR, annotation.author_id)
    if author is None:
        _dangling(annotation, "author", annotation.author_id)
    return author


def annotation_post(store: EntityStore, annotation: Annotation) -> Content | None:
    content = store.find_by_id(EntityKind.CONTENT, annotation.content_id)
    if content is None:
        _dangling(annotation, "post", annotation.content_id)
    return content


RELATIONS: dict[tuple[type, str], Callable[[EntityStore, Any], Any]] = {
    (Author, "posts"): author_posts,
    (Author, "comments"): author_comments,
    (Content, "author"): content_author,
    (Content, "comments"): content_comments,
    (Annotation, "author"): annotation_author,
    (Annotation, "post"): annotation_post,
}


def resolve_relation(store: EntityStore, parent: Record, relation: str) -> Any:
    """
    Resolve ``relation`` for ``parent``.

    One-to-many relations return a list, empty when nothing matches. One-to-one
    relations return None for a dangling reference.

    Raises:
        UnknownRelationError: If the parent type has no such relation
    """
    resolver = RELATIONS.get((type(parent), relation))
    if resolver is None:
        raise UnknownRelationError(f"{type(parent).__name__} has no relation '{relation}'")
    return resolver(store, parent)
