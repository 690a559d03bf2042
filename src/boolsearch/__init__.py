"""In-memory boolean search over a fixed document collection."""

from boolsearch.document import Document, DocumentRecord
from boolsearch.exceptions import (
    BoolSearchError,
    DocumentValidationError,
    DuplicateDocumentError,
)
from boolsearch.search import SearchEngine, SearchResult

__all__ = [
    "Document",
    "DocumentRecord",
    "BoolSearchError",
    "DocumentValidationError",
    "DuplicateDocumentError",
    "SearchEngine",
    "SearchResult",
]
