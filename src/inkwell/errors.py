"""
Error kinds raised by the resolution engine
"""

from enum import Enum


class ErrorKind(Enum):
    """Client-visible error classification."""

    EMAIL_TAKEN = "EMAIL_TAKEN"
    AUTHOR_NOT_FOUND = "AUTHOR_NOT_FOUND"
    INVALID_POST_REFERENCE = "INVALID_POST_REFERENCE"
    NOT_FOUND = "NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"


class InkwellError(Exception):
    """Base class for business-rule violations reported back to the client."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, **details: str | None):
        super().__init__(message)
        self.message = message
        self.details = {key: value for key, value in details.items() if value is not None}


class EmailTakenError(InkwellError):
    """Raised when an author is created with an email already in use."""

    kind = ErrorKind.EMAIL_TAKEN


class AuthorNotFoundError(InkwellError):
    """Raised when a write references an author id that does not exist."""

    kind = ErrorKind.AUTHOR_NOT_FOUND


class InvalidPostReferenceError(InkwellError):
    """Raised when a comment references missing or unpublished content."""

    kind = ErrorKind.INVALID_POST_REFERENCE


class InvalidInputError(InkwellError):
    """Raised when a required argument is blank or out of range."""

    kind = ErrorKind.INVALID_INPUT


class UnknownFieldError(LookupError):
    """Raised when no resolver is registered for a (type, field) pair."""

    def __init__(self, type_name: str, field_name: str):
        super().__init__(f"No resolver registered for {type_name}.{field_name}")
        self.type_name = type_name
        self.field_name = field_name


class UnknownRelationError(LookupError):
    """Raised when a relation name is not defined for the parent record type."""
