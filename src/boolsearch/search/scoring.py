"""
Relevance Scoring

Simple additive score:
    score(q, d) = term_weight * |{t in terms(q) : t in d}|
                + phrase_bonus * |{p in phrases(q) : p in d}|

Terms and phrases are distinct sets and matching is plain substring
containment on the lowercased content. This is a count, not tf-idf.
"""

from dataclasses import dataclass

from boolsearch.document import Document
from boolsearch.search.query import extract_phrases, extract_terms


@dataclass
class ScoringConfig:
    """Scoring weights."""

    term_weight: float = 1.0  # Per distinct query term found
    phrase_bonus: float = 2.0  # Per distinct quoted phrase found


class RelevanceScorer:
    def __init__(self, config: ScoringConfig | None = None):
        self.config = config or ScoringConfig()

    def score(self, document: Document, raw_query: str) -> float:
        """
        Score a matched document against the original query string.

        Args:
            document: Document to score
            raw_query: Query as typed, including quotes and operators

        Returns:
            Score (higher is better)
        """
        terms = set(extract_terms(raw_query))
        phrases = {p.lower() for p in extract_phrases(raw_query)}

        score = 0.0
        for term in terms:
            if document.contains_term(term):
                score += self.config.term_weight

        for phrase in phrases:
            if document.contains_phrase(phrase):
                score += self.config.phrase_bonus

        return score
