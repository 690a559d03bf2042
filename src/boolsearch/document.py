"""
Searchable Documents

Immutable document records plus the pydantic schema used to validate raw
input from a document source.
"""

import re
from dataclasses import dataclass, field
from datetime import date as Date

from pydantic import BaseModel, Field

ELLIPSIS = "..."


@dataclass(frozen=True, eq=False)
class Document:
    """A single searchable document. Identity is the id."""

    id: int
    title: str
    content: str = field(repr=False)
    date: Date
    content_lower: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "content_lower", self.content.lower())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def contains_term(self, term_lower: str) -> bool:
        """Substring test; no word-boundary check ("cat" is in "category")."""
        return term_lower in self.content_lower

    def contains_phrase(self, phrase_lower: str) -> bool:
        return phrase_lower in self.content_lower

    def create_snippet(
        self,
        query_lower: str,
        max_length: int,
        before: int = 30,
        after: int = 70,
        ellipsis: str = ELLIPSIS,
    ) -> str:
        """
        Cut a short excerpt around the first occurrence of the query.

        Args:
            query_lower: Lowercased phrase or term to locate
            max_length: Length of the leading excerpt when the query is absent
            before: Characters kept before the match
            after: Characters kept after the end of the match
            ellipsis: Marker added where the excerpt was cut

        Returns:
            The excerpt, with markers on the cut sides
        """
        if max_length < 0:
            raise ValueError(f"max_length must be non-negative, got {max_length}")

        text = self.content
        span = self._find_span(query_lower)
        if span is None:
            if len(text) <= max_length:
                return text
            return text[:max_length] + ellipsis

        match_start, match_end = span
        start = max(0, match_start - before)
        end = min(len(text), match_end + after)

        snippet = text[start:end]
        if start > 0:
            snippet = ellipsis + snippet
        if end < len(text):
            snippet = snippet + ellipsis
        return snippet

    def _find_span(self, query_lower: str) -> tuple[int, int] | None:
        """Offsets of the first case-insensitive match in the original content."""
        # lower() can change length (e.g. "İ"), so content_lower offsets only
        # line up with content when the lengths agree
        if len(self.content_lower) == len(self.content):
            index = self.content_lower.find(query_lower)
            if index < 0:
                return None
            return index, index + len(query_lower)

        match = re.compile(re.escape(query_lower), re.IGNORECASE).search(self.content)
        if match is None:
            return None
        return match.start(), match.end()


class DocumentRecord(BaseModel):
    """Raw document as supplied by a document source"""

    id: int = Field(..., ge=0, description="Unique document id")
    title: str = Field(default="", description="Display title")
    content: str = Field(..., description="Searchable text")
    date: Date = Field(..., description="Publication date (ISO format accepted)")

    def to_document(self) -> Document:
        return Document(
            id=self.id,
            title=self.title,
            content=self.content,
            date=self.date,
        )
