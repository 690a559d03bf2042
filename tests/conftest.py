"""Test fixtures for boolsearch tests."""

from datetime import date

import pytest

from boolsearch.document import Document
from boolsearch.search.indexer import InvertedIndex


@pytest.fixture
def clean_env(monkeypatch):
    """Clean environment variables for testing."""
    env_vars = [
        "BOOLSEARCH_SNIPPET_MAX_LENGTH",
        "BOOLSEARCH_SNIPPET_CONTEXT_BEFORE",
        "BOOLSEARCH_SNIPPET_CONTEXT_AFTER",
        "BOOLSEARCH_ELLIPSIS",
        "BOOLSEARCH_TERM_WEIGHT",
        "BOOLSEARCH_PHRASE_BONUS",
        "BOOLSEARCH_LOG_LEVEL",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def java_doc():
    return Document(1, "Java", "java search engine", date(2024, 1, 10))


@pytest.fixture
def python_doc():
    return Document(2, "Python", "python scripting", date(2024, 3, 5))


@pytest.fixture
def corpus():
    """Small collection with overlapping terms and distinct dates."""
    return [
        Document(
            1,
            "Intro to Java",
            "Java is a popular language. This search engine is written in Java.",
            date(2023, 5, 1),
        ),
        Document(
            2,
            "Python Scripting",
            "Python is great for scripting and quick search tools.",
            date(2024, 2, 14),
        ),
        Document(
            3,
            "Search Engines 101",
            "A search engine builds an inverted index over documents.",
            date(2024, 9, 30),
        ),
        Document(
            4,
            "Cooking",
            "Recipes for pasta and bread. Nothing about programming here.",
            date(2022, 11, 20),
        ),
    ]


@pytest.fixture
def corpus_index(corpus):
    return InvertedIndex.build(corpus)
