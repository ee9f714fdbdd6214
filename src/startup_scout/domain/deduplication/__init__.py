# deduplication/__init__.py

from .dedup import DEFAULT_SIMILARITY_THRESHOLD, deduplicate_startups, merge_startups
from .normalise import normalize_name
from .similarity import calculate_similarity

__all__ = [
    "DEFAULT_SIMILARITY_THRESHOLD",
    "calculate_similarity",
    "deduplicate_startups",
    "merge_startups",
    "normalize_name",
]
