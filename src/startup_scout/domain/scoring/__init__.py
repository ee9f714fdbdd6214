# scoring/__init__.py

from .relevance import (
    ScoringWeights,
    calculate_relevance_score,
    extract_query_terms,
    sort_by_relevance,
)

__all__ = [
    "ScoringWeights",
    "calculate_relevance_score",
    "extract_query_terms",
    "sort_by_relevance",
]
