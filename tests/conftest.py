"""
Shared fixtures for post workflow tests.

Each fixture hands back a fresh Post already driven into one lifecycle stage
through the public API only.
"""

import pytest

from postflow import Post

INITIAL_CONTENT = "Hello from published post"
ADDITION = "\nSome more additions"


@pytest.fixture
def draft_post():
    return Post()


@pytest.fixture
def in_review_post():
    post = Post()
    post.add_content(INITIAL_CONTENT)
    return post


@pytest.fixture
def published_post():
    post = Post()
    post.add_content(INITIAL_CONTENT)
    post.review_content(True)
    return post


@pytest.fixture(params=["draft", "in_review", "published"])
def any_post(request):
    """A post in each of the three lifecycle stages."""
    return request.getfixturevalue(f"{request.param}_post")
