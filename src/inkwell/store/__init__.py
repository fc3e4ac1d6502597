"""
Entity storage package
"""

from .entity_store import EntityStore
from .models import Annotation, Author, Content, EntityKind, Record

__all__ = ["Annotation", "Author", "Content", "EntityKind", "EntityStore", "Record"]
