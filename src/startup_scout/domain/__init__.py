# domain/__init__.py

from .deduplication import calculate_similarity, deduplicate_startups, normalize_name
from .pipeline import PipelineConfig, Source, aggregate_startups, load_config
from .query import filter_by_query, matches_filters, parse_query
from .scoring import calculate_relevance_score, sort_by_relevance

__all__ = [
    "aggregate_startups",
    "calculate_relevance_score",
    "calculate_similarity",
    "deduplicate_startups",
    "filter_by_query",
    "load_config",
    "matches_filters",
    "normalize_name",
    "parse_query",
    "PipelineConfig",
    "Source",
    "sort_by_relevance",
]
