# pipeline/__init__.py

from .aggregate import DEFAULT_SOURCES, MAX_DAYS_BACK, Source, aggregate_startups
from .config import PipelineConfig, load_config

__all__ = [
    "DEFAULT_SOURCES",
    "MAX_DAYS_BACK",
    "PipelineConfig",
    "Source",
    "aggregate_startups",
    "load_config",
]
