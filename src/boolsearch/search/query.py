"""
Boolean Query Processing

Query syntax:
- Plain terms: java search engine (same as java AND search AND engine)
- Operators: AND, OR, NOT (case-insensitive, separate tokens)
- Exact phrases: "search engine" (substring match against content)

NOT binds to the next operand only. AND and OR are applied left to right
with no precedence and no grouping.
"""

from collections.abc import Iterable, Sequence

from boolsearch.analyzer import analyzer
from boolsearch.document import Document
from boolsearch.search.indexer import InvertedIndex

QUOTE = '"'
AND = "AND"
OR = "OR"
NOT = "NOT"
OPERATORS = frozenset({AND, OR, NOT})

_OPERATOR_WORDS = frozenset(op.lower() for op in OPERATORS)


def tokenize(raw: str) -> list[str]:
    """
    Split a query into tokens, keeping quoted phrases together.

    Example:
        'java AND "search engine" NOT python'
        -> ['java', 'AND', 'search engine', 'NOT', 'python']

    An unterminated quote runs to the end of input and is flushed as the
    final token. An empty phrase ("") produces no token.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False

    for ch in raw:
        if ch == QUOTE:
            in_quotes = not in_quotes
            if not in_quotes and current:
                tokens.append("".join(current))
                current.clear()
            continue

        if in_quotes:
            current.append(ch)
        elif ch.isspace():
            if current:
                tokens.append("".join(current))
                current.clear()
        else:
            current.append(ch)

    if current:
        tokens.append("".join(current))

    return tokens


def extract_phrases(raw: str) -> list[str]:
    """
    Return the text between matching quote pairs, in order of appearance.

    Unlike tokenize(), an unterminated trailing quote yields nothing here.
    """
    phrases: list[str] = []
    current: list[str] = []
    in_quotes = False

    for ch in raw:
        if ch == QUOTE:
            in_quotes = not in_quotes
            if not in_quotes and current:
                phrases.append("".join(current))
                current.clear()
        elif in_quotes:
            current.append(ch)

    return phrases


def extract_terms(raw: str) -> list[str]:
    """
    Return the non-operator terms of a query, lowercased, in order.

    Quotes, punctuation and operator words are dropped; duplicates are kept.
    """
    return [t for t in analyzer.terms(raw) if t not in _OPERATOR_WORDS]


def is_phrase(token: str) -> bool:
    return any(ch.isspace() for ch in token)


def resolve_token(
    token: str,
    all_docs: Iterable[Document],
    index: InvertedIndex,
) -> set[Document]:
    """
    Get the documents matching a single term or phrase token.

    Phrases are resolved by scanning every document, since the index has no
    positions. Terms go through the inverted index.
    """
    if is_phrase(token):
        phrase_lower = token.lower()
        return {doc for doc in all_docs if doc.contains_phrase(phrase_lower)}
    return index.documents_for(token)


def evaluate(
    tokens: Sequence[str],
    all_docs: Sequence[Document],
    index: InvertedIndex,
) -> set[Document]:
    """
    Evaluate a token sequence into the set of matching documents.

    Args:
        tokens: Output of tokenize()
        all_docs: Full collection (used for NOT and phrase scans)
        index: Inverted index built from all_docs

    Returns:
        Matching documents; empty when the query has no operand
    """
    result: set[Document] | None = None
    pending_op = AND
    negate_next = False

    for token in tokens:
        upper = token.upper()

        if upper in (AND, OR):
            pending_op = upper
            continue
        if upper == NOT:
            negate_next = True
            continue

        term_docs = resolve_token(token, all_docs, index)

        if negate_next:
            term_docs = set(all_docs) - term_docs
            negate_next = False

        if result is None:
            # The first operand initializes, whatever operator preceded it
            result = term_docs
        elif pending_op == OR:
            result |= term_docs
        else:
            result &= term_docs

    if result is None:
        return set()
    return result
