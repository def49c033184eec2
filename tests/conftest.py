"""Pytest fixtures for the reader catalog tests."""

import pytest

from reader_catalog.catalog import store
from reader_catalog.catalog.schemas import Book


@pytest.fixture
def books():
    """A small catalog covering every dimension."""
    return [
        Book(
            title="The Hound of the Baskervilles",
            author="Arthur Conan Doyle",
            description="A spectral hound on the moor.",
            date="1902",
            tags="temporal/20c, regional/europe, genre/fiction/mystery",
        ),
        Book(
            title="Pride and Prejudice",
            author="Jane Austen",
            date="1813",
            tags="temporal/19c, regional/europe, genre/fiction/romance-novel",
        ),
        Book(
            title="On the Origin of Species",
            author="Charles Darwin",
            description="Evolution by natural selection.",
            tags="temporal/19c, discipline/biology, genre/nonfiction/science",
        ),
        Book(
            title="Untagged Pamphlet",
            author="Anonymous",
        ),
    ]


@pytest.fixture
def vocabulary():
    return [
        "temporal/20c",
        "temporal/19c",
        "regional/europe",
        "discipline/biology",
        "genre/fiction/mystery",
        "genre/fiction/romance-novel",
        "genre/nonfiction/science",
    ]


@pytest.fixture(autouse=True)
def clear_store_cache():
    """Make sure no test sees a snapshot loaded by another."""
    store.reset_cache()
    yield
    store.reset_cache()
