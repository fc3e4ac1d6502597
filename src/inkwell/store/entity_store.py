"""
In-memory entity store owning the author, content and annotation collections
"""

import threading
import uuid
from collections import defaultdict

from ..logging import get_logger
from .models import RECORD_TYPES, Author, EntityKind, Record

logger = get_logger(__name__)

# Foreign-key fields indexed on add, per collection
FOREIGN_KEYS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.AUTHOR: (),
    EntityKind.CONTENT: ("author_id",),
    EntityKind.ANNOTATION: ("author_id", "content_id"),
}


class EntityStore:
    """
    Append-only owner of all entity collections.

    Reads return snapshots or transient references; nothing outside the store
    holds a collection. Every access goes through ``lock`` so the store is safe
    to share between worker threads. Callers that must check-then-add (the
    mutation validators) hold ``lock`` across both steps.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self._collections: dict[EntityKind, list[Record]] = {kind: [] for kind in EntityKind}
        self._by_id: dict[EntityKind, dict[str, Record]] = {kind: {} for kind in EntityKind}
        self._by_foreign_key: dict[tuple[EntityKind, str], dict[str, list[Record]]] = {
            (kind, field): defaultdict(list)
            for kind, fields in FOREIGN_KEYS.items()
            for field in fields
        }
        self._authors_by_email: dict[str, Author] = {}

    def add(self, kind: EntityKind, record: Record) -> Record:
        """
        Append a fully-constructed record to the collection for ``kind``.

        No business validation happens here; see ``inkwell.validation``.

        Raises:
            TypeError: If the record type does not belong to ``kind``
        """
        if not isinstance(record, RECORD_TYPES[kind]):
            raise TypeError(
                f"Cannot add {type(record).__name__} to the {kind.value} collection"
            )

        with self.lock:
            self._collections[kind].append(record)
            self._by_id[kind][record.id] = record
            for field in FOREIGN_KEYS[kind]:
                self._by_foreign_key[(kind, field)][getattr(record, field)].append(record)
            if isinstance(record, Author):
                self._authors_by_email[record.email] = record

        logger.debug("Entity added", kind=kind.value, entity_id=record.id)
        return record

    def all(self, kind: EntityKind) -> tuple[Record, ...]:
        """Return the whole collection in insertion order."""
        with self.lock:
            return tuple(self._collections[kind])

    def find_by_id(self, kind: EntityKind, id: str) -> Record | None:
        with self.lock:
            return self._by_id[kind].get(id)

    def find_by_foreign_key(self, kind: EntityKind, field: str, value: str) -> tuple[Record, ...]:
        """
        Return every record of ``kind`` whose ``field`` equals ``value``.

        Results keep insertion order.

        Raises:
            KeyError: If ``field`` is not an indexed foreign key of ``kind``
        """
        index_key = (kind, field)
        if index_key not in self._by_foreign_key:
            raise KeyError(f"{field} is not a foreign key of {kind.value}")

        with self.lock:
            return tuple(self._by_foreign_key[index_key].get(value, ()))

    def find_author_by_email(self, email: str) -> Author | None:
        with self.lock:
            return self._authors_by_email.get(email)

    def count(self, kind: EntityKind) -> int:
        with self.lock:
            return len(self._collections[kind])

    def counts(self) -> dict[str, int]:
        """Collection sizes keyed by kind name."""
        with self.lock:
            return {kind.value: len(records) for kind, records in self._collections.items()}

    @staticmethod
    def generate_id() -> str:
        """Generate a random 128-bit identifier, independent of collection size."""
        return str(uuid.uuid4())
