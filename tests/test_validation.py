"""
Unit tests for mutation validation and entity creation
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from inkwell.errors import (
    AuthorNotFoundError,
    EmailTakenError,
    ErrorKind,
    InkwellError,
    InvalidInputError,
    InvalidPostReferenceError,
)
from inkwell.store import EntityKind
from inkwell.validation import (
    create_annotation,
    create_author,
    create_content,
    validate_create_annotation,
    validate_create_author,
    validate_create_content,
)


class TestCreateAuthor:
    def test_creates_author_with_generated_id(self, store):
        author = create_author(store, "Andrew", "andrew@example.com", 27)

        assert author.id
        assert author.age == 27
        assert store.find_by_id(EntityKind.AUTHOR, author.id) == author

    def test_age_is_optional(self, store):
        assert create_author(store, "Sarah", "sarah@example.com").age is None

    def test_duplicate_email_is_rejected(self, store):
        create_author(store, "Andrew", "andrew@example.com")

        with pytest.raises(EmailTakenError) as exc_info:
            create_author(store, "Andy", "andrew@example.com")

        assert exc_info.value.kind is ErrorKind.EMAIL_TAKEN
        emails = [a.email for a in store.all(EntityKind.AUTHOR)]
        assert emails.count("andrew@example.com") == 1

    def test_email_uniqueness_holds_across_store(self, populated_store):
        create_author(populated_store, "Mike", "mike@example.com")

        authors = populated_store.all(EntityKind.AUTHOR)
        for a in authors:
            for b in authors:
                if a.email == b.email:
                    assert a.id == b.id

    @pytest.mark.parametrize(
        "name, email, age",
        [("", "a@x.io", None), ("   ", "a@x.io", None), ("A", "", None), ("A", "a@x.io", -1)],
    )
    def test_invalid_input(self, store, name, email, age):
        with pytest.raises(InvalidInputError):
            validate_create_author(store, name, email, age)

    def test_concurrent_duplicate_emails(self, store):
        def attempt(n):
            try:
                return create_author(store, f"Writer {n}", "same@example.com")
            except EmailTakenError:
                return None

        with ThreadPoolExecutor(max_workers=8) as pool:
            created = [a for a in pool.map(attempt, range(50)) if a is not None]

        assert len(created) == 1
        assert store.count(EntityKind.AUTHOR) == 1


class TestCreateContent:
    def test_creates_content_for_existing_author(self, store):
        author = create_author(store, "Andrew", "andrew@example.com")

        content = create_content(store, "GraphQL 101", "", True, author.id)

        assert content.author_id == author.id
        assert store.all(EntityKind.CONTENT) == (content,)

    def test_missing_author(self, store):
        with pytest.raises(AuthorNotFoundError) as exc_info:
            create_content(store, "Lost", "", True, "nobody")

        assert exc_info.value.details == {"author_id": "nobody"}
        assert store.count(EntityKind.CONTENT) == 0

    def test_blank_title(self, populated_store):
        author = populated_store.all(EntityKind.AUTHOR)[0]

        with pytest.raises(InvalidInputError):
            validate_create_content(populated_store, " ", author.id)


class TestCreateAnnotation:
    @pytest.fixture
    def refs(self, populated_store):
        andrew = populated_store.all(EntityKind.AUTHOR)[0]
        published, draft, _ = populated_store.all(EntityKind.CONTENT)
        return andrew, published, draft

    def test_comment_on_published_post(self, populated_store, refs):
        andrew, published, _ = refs

        comment = create_annotation(populated_store, "Nice", andrew.id, published.id)

        assert comment.content_id == published.id
        assert populated_store.all(EntityKind.ANNOTATION)[-1] == comment

    def test_missing_post_is_rejected_without_partial_write(self, populated_store, refs):
        andrew, _, _ = refs
        before = populated_store.all(EntityKind.ANNOTATION)

        with pytest.raises(InvalidPostReferenceError):
            create_annotation(populated_store, "Hello?", andrew.id, "no-such-post")

        assert populated_store.all(EntityKind.ANNOTATION) == before

    def test_unpublished_post_is_rejected(self, populated_store, refs):
        andrew, _, draft = refs

        with pytest.raises(InvalidPostReferenceError):
            validate_create_annotation(populated_store, "Early", andrew.id, draft.id)

    def test_missing_author_is_rejected(self, populated_store, refs):
        _, published, _ = refs

        with pytest.raises(AuthorNotFoundError):
            create_annotation(populated_store, "Anon", "ghost", published.id)

    def test_errors_share_base_class(self, populated_store, refs):
        _, published, _ = refs

        with pytest.raises(InkwellError):
            create_annotation(populated_store, "Anon", "ghost", published.id)

    def test_every_comment_references_published_post(self, populated_store):
        for comment in populated_store.all(EntityKind.ANNOTATION):
            post = populated_store.find_by_id(EntityKind.CONTENT, comment.content_id)
            assert post.published
