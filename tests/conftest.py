"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from unittest.mock import MagicMock

import pytest
import strawberry

# Keep app construction deterministic: tests seed their own stores
os.environ.setdefault("INKWELL_SEED_DEMO_DATA", "false")
os.environ.setdefault("INKWELL_DEBUG", "false")

from inkwell.store import EntityStore  # noqa: E402
from inkwell.validation import create_annotation, create_author, create_content  # noqa: E402


@pytest.fixture
def store() -> EntityStore:
    """Empty entity store, one per test."""
    return EntityStore()


@pytest.fixture
def populated_store(store: EntityStore) -> EntityStore:
    """Store with two authors, three posts and two comments.

    Andrew wrote "GraphQL 101" (published) and "GraphQL 201" (draft); Sarah
    wrote "Programming Music" (draft, empty body). Both comments are on
    "GraphQL 101".
    """
    andrew = create_author(store, "Andrew", "andrew@example.com", 27)
    sarah = create_author(store, "Sarah", "sarah@example.com")
    intro = create_content(
        store, "GraphQL 101", "This is how to use GraphQL...", True, andrew.id
    )
    create_content(store, "GraphQL 201", "This is an advanced GraphQL post...", False, andrew.id)
    create_content(store, "Programming Music", "", False, sarah.id)
    create_annotation(store, "This worked well for me. Thanks!", sarah.id, intro.id)
    create_annotation(store, "Glad you enjoyed it.", andrew.id, intro.id)
    return store


@pytest.fixture
def context(populated_store: EntityStore) -> dict:
    """Resolver context backed by the populated store."""
    return {"request": None, "store": populated_store}


@pytest.fixture
def mock_info(context: dict):
    """Create a mock GraphQL info object carrying the resolver context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = context
    return info
