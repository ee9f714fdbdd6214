# query/__init__.py

from .filters import filter_by_query, matches_filters
from .parser import parse_query

__all__ = [
    "filter_by_query",
    "matches_filters",
    "parse_query",
]
