"""Boolean query pipeline: index, evaluator, scorer, snippets."""

from boolsearch.search.indexer import InvertedIndex
from boolsearch.search.query import evaluate, tokenize
from boolsearch.search.scoring import RelevanceScorer, ScoringConfig
from boolsearch.search.searcher import SearchEngine, SearchResult
from boolsearch.search.snippet import choose_snippet_term, generate_snippet

__all__ = [
    "InvertedIndex",
    "evaluate",
    "tokenize",
    "RelevanceScorer",
    "ScoringConfig",
    "SearchEngine",
    "SearchResult",
    "choose_snippet_term",
    "generate_snippet",
]
