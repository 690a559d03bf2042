"""Exception hierarchy for boolsearch.

Query evaluation never raises; these cover building an engine from a
document source.
"""


class BoolSearchError(Exception):
    """Base class for all boolsearch exceptions."""


class DuplicateDocumentError(BoolSearchError, ValueError):
    """Raised when two documents in one collection share an id."""

    def __init__(self, doc_id: int):
        super().__init__(f"Duplicate document id: {doc_id}")
        self.doc_id = doc_id


class DocumentValidationError(BoolSearchError):
    """Raised when a raw document record fails validation."""
