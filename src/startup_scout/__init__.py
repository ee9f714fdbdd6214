# startup_scout/__init__.py

from .adapters import (
    RetryOptions,
    RetryResult,
    RetryTask,
    execute_with_retry,
    with_retry,
)
from .domain import (
    aggregate_startups,
    calculate_relevance_score,
    calculate_similarity,
    deduplicate_startups,
    filter_by_query,
    matches_filters,
    normalize_name,
    parse_query,
    sort_by_relevance,
)
from .schemas import AggregationResult, ParsedQuery, StartupData

__all__ = [
    "aggregate_startups",
    "calculate_relevance_score",
    "calculate_similarity",
    "deduplicate_startups",
    "execute_with_retry",
    "filter_by_query",
    "matches_filters",
    "normalize_name",
    "parse_query",
    "sort_by_relevance",
    "with_retry",
    "AggregationResult",
    "ParsedQuery",
    "RetryOptions",
    "RetryResult",
    "RetryTask",
    "StartupData",
]
