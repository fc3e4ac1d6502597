"""
Demo data loaded into a fresh store at startup
"""

from ..logging import get_logger
from ..validation import create_annotation, create_author, create_content
from .entity_store import EntityStore

logger = get_logger(__name__)

DEMO_AUTHORS = [
    {"name": "Andrew", "email": "andrew@example.com", "age": 27},
    {"name": "Sarah", "email": "sarah@example.com"},
    {"name": "Mike", "email": "mike@example.com"},
]

# (title, body, published, author email)
DEMO_POSTS = [
    ("GraphQL 101", "This is how to use GraphQL...", True, "andrew@example.com"),
    ("GraphQL 201", "This is an advanced GraphQL post...", False, "andrew@example.com"),
    ("Programming Music", "", False, "sarah@example.com"),
]

# (text, author email, post title); only published posts accept comments
DEMO_COMMENTS = [
    ("This worked well for me. Thanks!", "sarah@example.com", "GraphQL 101"),
    ("Glad you enjoyed it.", "mike@example.com", "GraphQL 101"),
    ("This did no work.", "andrew@example.com", "GraphQL 101"),
    ("Nevermind. I got it to work.", "andrew@example.com", "GraphQL 101"),
]


def seed_demo_data(store: EntityStore) -> dict[str, int]:
    """
    Populate ``store`` with the demo authors, posts and comments.

    Records go through the regular create functions, so the seed obeys the
    same integrity rules as client writes.

    Returns:
        Collection sizes after seeding
    """
    authors = {
        spec["email"]: create_author(store, spec["name"], spec["email"], spec.get("age"))
        for spec in DEMO_AUTHORS
    }

    posts = {}
    for title, body, published, email in DEMO_POSTS:
        posts[title] = create_content(store, title, body, published, authors[email].id)

    for text, email, title in DEMO_COMMENTS:
        create_annotation(store, text, authors[email].id, posts[title].id)

    counts = store.counts()
    logger.info("Demo data seeded", **counts)
    return counts
