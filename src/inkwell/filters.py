"""
Free-text filters for the root list queries
"""

from collections.abc import Callable

from .store import Annotation, Author, Content, EntityKind, EntityStore, Record

Predicate = Callable[[Record], bool]


def _contains(haystack: str, needle: str) -> bool:
    return needle in haystack.casefold()


def _match_author(needle: str) -> Predicate:
    def predicate(author: Author) -> bool:
        return _contains(author.name, needle)

    return predicate


def _match_content(needle: str) -> Predicate:
    def predicate(content: Content) -> bool:
        return _contains(content.title, needle) or _contains(content.body, needle)

    return predicate


def _match_annotation(needle: str) -> Predicate:
    def predicate(annotation: Annotation) -> bool:
        return _contains(annotation.text, needle)

    return predicate


_MATCHERS: dict[EntityKind, Callable[[str], Predicate]] = {
    EntityKind.AUTHOR: _match_author,
    EntityKind.CONTENT: _match_content,
    EntityKind.ANNOTATION: _match_annotation,
}


def match_all(record: Record) -> bool:
    return True


def build_predicate(kind: EntityKind, query: str | None) -> Predicate:
    """
    Build the filter for a list query.

    An absent or empty query matches every record, for every kind. Otherwise
    matching is case-insensitive substring containment: authors by name,
    content by title or body, annotations by text.
    """
    if not query:
        return match_all
    return _MATCHERS[kind](query.casefold())


def filter_entities(store: EntityStore, kind: EntityKind, query: str | None) -> list[Record]:
    """Return the records of ``kind`` matching ``query``, in insertion order."""
    predicate = build_predicate(kind, query)
    return [record for record in store.all(kind) if predicate(record)]
