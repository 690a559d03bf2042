"""
Term Analyzer (Shared Kernel)

Normalizes text into index terms. Used by both the inverted index and the
relevance scorer so the two agree on what a term is.
"""

import re

_NON_TERM = re.compile(r"[^a-z0-9]+")


class TermAnalyzer:
    def terms(self, text: str) -> list[str]:
        """
        Split text into lowercase alphanumeric terms.

        Any run of characters outside [a-z0-9] (after lowercasing) is a
        separator, so punctuation and quote marks never reach the index.
        """
        if not text:
            return []
        return [t for t in _NON_TERM.split(text.lower()) if t]

    def normalize(self, term: str) -> str:
        return term.lower()


# Global instance
analyzer = TermAnalyzer()
