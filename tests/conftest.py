"""
Shared test fixtures for the comment-guard test suite.
"""
import pytest


# ==========================================================================
# Identifiers
# ==========================================================================

@pytest.fixture
def valid_id():
    return "507f1f77bcf86cd799439011"


@pytest.fixture
def other_valid_id():
    return "65a1b2c3d4e5f60718293a4b"


# ==========================================================================
# Authors
# ==========================================================================

@pytest.fixture
def valid_author():
    return {"name": "Bob", "email": "bob@x.com"}


@pytest.fixture
def messy_author():
    """Valid author with whitespace and mixed case to be normalised."""
    return {"name": "  Jane Doe-Smith  ", "email": "Jane.Doe@Example.COM"}


# ==========================================================================
# Comment bodies
# ==========================================================================

@pytest.fixture
def clean_comment():
    return "Great write-up, thanks for sharing the benchmark numbers."


@pytest.fixture
def spam_comment():
    return "Buy cheap pills at http://x.io NOW!!!!!! Visit http://y.io for a free prize"


@pytest.fixture
def new_comment_payload(clean_comment, valid_author, valid_id):
    return {
        "content": f"  {clean_comment}  ",
        "author": dict(valid_author),
        "parentId": valid_id,
    }
