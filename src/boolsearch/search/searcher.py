"""
Boolean Search Engine

Holds a fixed document collection, builds the inverted index once, and
answers queries: evaluate -> score -> snippet -> sort.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from boolsearch.core.config import SearchSettings, settings as default_settings
from boolsearch.document import Document, DocumentRecord
from boolsearch.exceptions import DocumentValidationError, DuplicateDocumentError
from boolsearch.search.indexer import InvertedIndex
from boolsearch.search.query import evaluate, tokenize
from boolsearch.search.scoring import RelevanceScorer, ScoringConfig
from boolsearch.search.snippet import choose_snippet_term, generate_snippet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """A single search result."""

    document: Document
    score: float
    snippet: str


def by_relevance(result: SearchResult) -> float:
    """Sort key: score descending."""
    return -result.score


def by_relevance_then_date(result: SearchResult) -> tuple[float, int]:
    """Sort key: score descending, then newest first."""
    return (-result.score, -result.document.date.toordinal())


class SearchEngine:
    """
    Boolean search over an immutable in-memory collection.

    The index is derived from the collection at construction and never
    changes afterwards, so searches share no mutable state.
    """

    def __init__(
        self,
        documents: Iterable[Document],
        scoring_config: ScoringConfig | None = None,
        settings: SearchSettings | None = None,
    ):
        """
        Initialize search engine.

        Args:
            documents: Document collection (ids must be unique)
            scoring_config: Scoring weights (defaults from settings)
            settings: Snippet and scoring settings

        Raises:
            DuplicateDocumentError: If two documents share an id
        """
        self.settings = settings or default_settings
        self._documents = tuple(documents)

        seen: set[int] = set()
        for doc in self._documents:
            if doc.id in seen:
                raise DuplicateDocumentError(doc.id)
            seen.add(doc.id)

        self._index = InvertedIndex.build(self._documents)
        self.scorer = RelevanceScorer(
            scoring_config
            or ScoringConfig(
                term_weight=self.settings.term_weight,
                phrase_bonus=self.settings.phrase_bonus,
            )
        )

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        **kwargs: Any,
    ) -> "SearchEngine":
        """
        Build an engine from raw records (dicts with id, title, content, date).

        Raises:
            DocumentValidationError: If a record fails validation
        """
        documents = []
        for position, record in enumerate(records):
            try:
                documents.append(DocumentRecord.model_validate(record).to_document())
            except ValidationError as e:
                raise DocumentValidationError(
                    f"Invalid document record at position {position}: {e}"
                ) from e
        return cls(documents, **kwargs)

    @property
    def documents(self) -> tuple[Document, ...]:
        return self._documents

    @property
    def index(self) -> InvertedIndex:
        return self._index

    def evaluate(self, query: str) -> set[Document]:
        """Return the set of documents matching a boolean query."""
        tokens = tokenize(query)
        matched = evaluate(tokens, self._documents, self._index)
        logger.debug(f"Query {query!r}: tokens={tokens}, matched={len(matched)}")
        return matched

    def search(self, query: str, sort_by_date: bool = False) -> list[SearchResult]:
        """
        Search documents with the full query syntax.

        Args:
            query: User query (terms, "phrases", AND/OR/NOT)
            sort_by_date: If True, equal scores are ordered newest first

        Returns:
            All matching documents as results, highest score first
        """
        matched = self.evaluate(query)
        if not matched:
            return []

        snippet_term = choose_snippet_term(query)
        cfg = self.settings

        results = [
            SearchResult(
                document=doc,
                score=self.scorer.score(doc, query),
                snippet=generate_snippet(
                    doc,
                    snippet_term,
                    cfg.snippet_max_length,
                    before=cfg.snippet_context_before,
                    after=cfg.snippet_context_after,
                    ellipsis=cfg.ellipsis,
                ),
            )
            for doc in matched
        ]

        key = by_relevance_then_date if sort_by_date else by_relevance
        return sorted(results, key=key)
