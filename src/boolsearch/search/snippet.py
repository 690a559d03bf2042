"""
Snippet Generation for Search Results

Cuts a fixed window of content around the first occurrence of one query
term or phrase.
"""

from boolsearch.document import ELLIPSIS, Document
from boolsearch.search.query import extract_phrases, extract_terms


def choose_snippet_term(raw_query: str) -> str:
    """
    Pick the text to center the snippet on.

    Preference: first quoted phrase, then first non-operator term, then the
    whole query (trimmed, lowercased).
    """
    phrases = extract_phrases(raw_query)
    if phrases:
        return phrases[0].lower()

    terms = extract_terms(raw_query)
    if terms:
        return terms[0]

    return raw_query.strip().lower()


def generate_snippet(
    document: Document,
    query_term: str,
    max_length: int = 120,
    before: int = 30,
    after: int = 70,
    ellipsis: str = ELLIPSIS,
) -> str:
    """
    Generate a display snippet for a document.

    Args:
        document: Matched document
        query_term: Term or phrase to center on (see choose_snippet_term)
        max_length: Length of the leading excerpt when the term is absent
        before: Characters of context before the match
        after: Characters of context after the match
        ellipsis: Marker for cut sides

    Returns:
        Snippet text
    """
    return document.create_snippet(
        query_term.lower(),
        max_length,
        before=before,
        after=after,
        ellipsis=ellipsis,
    )
