"""
Mutation validation and entity creation.

Each ``create_*`` function validates its input against the current store
contents and appends the new record in one critical section, so a rejected
write leaves every collection untouched and two concurrent writes cannot both
pass the same uniqueness check.
"""

from __future__ import annotations

from .errors import (
    AuthorNotFoundError,
    EmailTakenError,
    InkwellError,
    InvalidInputError,
    InvalidPostReferenceError,
)
from .logging import get_logger
from .store import Annotation, Author, Content, EntityKind, EntityStore

logger = get_logger(__name__)


def _require_text(field: str, value: str) -> None:
    if not value or not value.strip():
        raise InvalidInputError(f"{field} must not be blank", field=field)


def validate_create_author(store: EntityStore, name: str, email: str, age: int | None) -> None:
    """
    Check that a new author can be created.

    Raises:
        InvalidInputError: If name or email is blank, or age is negative
        EmailTakenError: If another author already uses this email
    """
    _require_text("name", name)
    _require_text("email", email)
    if age is not None and age < 0:
        raise InvalidInputError("age must not be negative", field="age")

    if store.find_author_by_email(email) is not None:
        raise EmailTakenError("Email taken", email=email)


def validate_create_content(store: EntityStore, title: str, author_id: str) -> None:
    """
    Check that a new post can be created.

    Raises:
        InvalidInputError: If title is blank
        AuthorNotFoundError: If author_id does not reference an existing author
    """
    _require_text("title", title)

    if store.find_by_id(EntityKind.AUTHOR, author_id) is None:
        raise AuthorNotFoundError("Author not found", author_id=author_id)


def validate_create_annotation(
    store: EntityStore, text: str, author_id: str, content_id: str
) -> None:
    """
    Check that a new comment can be created.

    The author must exist and the post must exist and be published.

    Raises:
        InvalidInputError: If text is blank
        AuthorNotFoundError: If author_id does not reference an existing author
        InvalidPostReferenceError: If content_id is missing or unpublished
    """
    _require_text("text", text)

    if store.find_by_id(EntityKind.AUTHOR, author_id) is None:
        raise AuthorNotFoundError("Author not found", author_id=author_id)

    content = store.find_by_id(EntityKind.CONTENT, content_id)
    if content is None or not content.published:
        raise InvalidPostReferenceError(
            "Post does not exist or is not published", content_id=content_id
        )


def _rejected(operation: str, error: InkwellError) -> None:
    logger.info(
        "Mutation rejected",
        operation=operation,
        kind=error.kind.value,
        reason=error.message,
        **error.details,
    )


def create_author(store: EntityStore, name: str, email: str, age: int | None = None) -> Author:
    with store.lock:
        try:
            validate_create_author(store, name, email, age)
        except InkwellError as e:
            _rejected("createAuthor", e)
            raise

        author = Author(id=store.generate_id(), name=name, email=email, age=age)
        store.add(EntityKind.AUTHOR, author)

    logger.info("Author created", author_id=author.id)
    return author


def create_content(
    store: EntityStore, title: str, body: str, published: bool, author_id: str
) -> Content:
    with store.lock:
        try:
            validate_create_content(store, title, author_id)
        except InkwellError as e:
            _rejected("createContent", e)
            raise

        content = Content(
            id=store.generate_id(),
            title=title,
            body=body,
            published=published,
            author_id=author_id,
        )
        store.add(EntityKind.CONTENT, content)

    logger.info("Content created", content_id=content.id, author_id=author_id)
    return content


def create_annotation(store: EntityStore, text: str, author_id: str, content_id: str) -> Annotation:
    with store.lock:
        try:
            validate_create_annotation(store, text, author_id, content_id)
        except InkwellError as e:
            _rejected("createAnnotation", e)
            raise

        annotation = Annotation(
            id=store.generate_id(),
            text=text,
            author_id=author_id,
            content_id=content_id,
        )
        store.add(EntityKind.ANNOTATION, annotation)

    logger.info(
        "Annotation created",
        annotation_id=annotation.id,
        author_id=author_id,
        content_id=content_id,
    )
    return annotation
