"""
Unit tests for relationship resolution
"""

from unittest.mock import patch

import pytest

from inkwell import relationships
from inkwell.errors import UnknownRelationError
from inkwell.resolution import PLACEHOLDER_POST
from inkwell.store import Annotation, Author, Content, EntityKind
from inkwell.validation import create_author


@pytest.fixture
def records(populated_store):
    store = populated_store
    andrew, sarah = store.all(EntityKind.AUTHOR)
    intro, advanced, music = store.all(EntityKind.CONTENT)
    thanks, glad = store.all(EntityKind.ANNOTATION)
    return {
        "andrew": andrew,
        "sarah": sarah,
        "intro": intro,
        "advanced": advanced,
        "music": music,
        "thanks": thanks,
        "glad": glad,
    }


def test_content_author_joins_on_author_id(populated_store):
    for content in populated_store.all(EntityKind.CONTENT):
        author = relationships.content_author(populated_store, content)
        assert author.id == content.author_id


def test_content_comments(populated_store, records):
    comments = relationships.content_comments(populated_store, records["intro"])

    assert comments == [records["thanks"], records["glad"]]


def test_content_without_comments(populated_store, records):
    assert relationships.content_comments(populated_store, records["advanced"]) == []


def test_author_posts(populated_store, records):
    posts = relationships.author_posts(populated_store, records["andrew"])

    assert posts == [records["intro"], records["advanced"]]


def test_author_without_posts_gets_empty_list(populated_store):
    mike = create_author(populated_store, "Mike", "mike@example.com")

    posts = relationships.author_posts(populated_store, mike)

    assert posts == []
    assert posts is not None


def test_author_comments(populated_store, records):
    assert relationships.author_comments(populated_store, records["sarah"]) == [records["thanks"]]


def test_annotation_author_and_post(populated_store, records):
    glad = records["glad"]

    assert relationships.annotation_author(populated_store, glad) == records["andrew"]
    assert relationships.annotation_post(populated_store, glad) == records["intro"]


class TestDanglingReferences:
    """Records added straight to the store bypass validation."""

    def test_content_author_missing_returns_none(self, store):
        orphan = store.add(EntityKind.CONTENT, Content("c1", "Orphan", "", True, "ghost"))

        with patch.object(relationships, "logger") as mock_logger:
            assert relationships.content_author(store, orphan) is None

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.kwargs["missing_id"] == "ghost"

    def test_authorless_placeholder_post_is_not_dangling(self, store):
        with patch.object(relationships, "logger") as mock_logger:
            author = relationships.content_author(store, PLACEHOLDER_POST)

        assert author is None
        mock_logger.warning.assert_not_called()

    def test_annotation_refs_missing_return_none(self, store):
        orphan = store.add(EntityKind.ANNOTATION, Annotation("n1", "hi", "ghost", "gone"))

        assert relationships.annotation_author(store, orphan) is None
        assert relationships.annotation_post(store, orphan) is None


class TestResolveRelation:
    def test_dispatches_on_parent_type(self, populated_store, records):
        result = relationships.resolve_relation(populated_store, records["thanks"], "post")

        assert result == records["intro"]

    def test_same_name_differs_by_parent_type(self, populated_store, records):
        by_author = relationships.resolve_relation(populated_store, records["sarah"], "comments")
        by_post = relationships.resolve_relation(populated_store, records["intro"], "comments")

        assert by_author == [records["thanks"]]
        assert by_post == [records["thanks"], records["glad"]]

    def test_unknown_relation(self, populated_store):
        author = Author(id="x", name="X", email="x@x.io")

        with pytest.raises(UnknownRelationError):
            relationships.resolve_relation(populated_store, author, "post")
