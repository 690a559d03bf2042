"""
Inverted Index

Maps normalized terms to the documents containing them. Built once from a
document collection and read-only afterwards.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from boolsearch.analyzer import analyzer
from boolsearch.document import Document

logger = logging.getLogger(__name__)


class InvertedIndex:
    """
    Term -> documents mapping.

    Every term key maps to a non-empty posting set; a term missing from the
    mapping matches no document. There is no add or delete API.
    """

    def __init__(self, postings: Mapping[str, frozenset[Document]]):
        self._postings = MappingProxyType(dict(postings))

    @classmethod
    def build(cls, documents: Iterable[Document]) -> "InvertedIndex":
        """
        Build the index from a document collection.

        Args:
            documents: Documents to index (shared, not copied)

        Returns:
            A read-only InvertedIndex
        """
        postings: dict[str, set[Document]] = {}
        doc_count = 0

        for doc in documents:
            doc_count += 1
            for term in set(analyzer.terms(doc.content)):
                postings.setdefault(term, set()).add(doc)

        index = cls({term: frozenset(docs) for term, docs in postings.items()})
        logger.info(f"Built inverted index: {doc_count} documents, {len(index)} terms")
        return index

    def documents_for(self, term: str) -> set[Document]:
        """Return a copy of the posting set for a term (empty if absent)."""
        return set(self._postings.get(analyzer.normalize(term), ()))

    def document_frequency(self, term: str) -> int:
        return len(self._postings.get(analyzer.normalize(term), ()))

    def terms(self) -> Iterator[str]:
        return iter(self._postings)

    def __contains__(self, term: object) -> bool:
        if not isinstance(term, str):
            return False
        return analyzer.normalize(term) in self._postings

    def __len__(self) -> int:
        return len(self._postings)
