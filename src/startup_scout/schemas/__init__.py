# schemas/__init__.py

from .query import DEFAULT_TIMEFRAME_DAYS, Intent, ParsedQuery
from .startup import StartupData
from .summary import AggregationResult, AggregationSummary, SourceSummary

__all__ = [
    # startup
    "StartupData",
    # query
    "DEFAULT_TIMEFRAME_DAYS",
    "Intent",
    "ParsedQuery",
    # summary
    "AggregationResult",
    "AggregationSummary",
    "SourceSummary",
]
