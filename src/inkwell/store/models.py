"""
Record types held by the entity store
"""

from dataclasses import dataclass
from enum import Enum


class EntityKind(Enum):
    """The three collections owned by the store."""

    AUTHOR = "author"
    CONTENT = "content"
    ANNOTATION = "annotation"


@dataclass(frozen=True, slots=True)
class Author:
    id: str
    name: str
    email: str
    age: int | None = None


@dataclass(frozen=True, slots=True)
class Content:
    """A post. ``author_id`` references ``Author.id``."""

    id: str
    title: str
    body: str
    published: bool
    author_id: str


@dataclass(frozen=True, slots=True)
class Annotation:
    """A comment on a published post."""

    id: str
    text: str
    author_id: str
    content_id: str


Record = Author | Content | Annotation

RECORD_TYPES: dict[EntityKind, type] = {
    EntityKind.AUTHOR: Author,
    EntityKind.CONTENT: Content,
    EntityKind.ANNOTATION: Annotation,
}
