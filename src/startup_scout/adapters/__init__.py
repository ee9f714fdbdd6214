# adapters/__init__.py

from .data_sources import (
    fetch_lobsters_launches,
    fetch_reddit_posts,
    fetch_show_hn,
    search_repositories,
)
from .data_sources._utils import (
    RetryOptions,
    RetryResult,
    RetryTask,
    execute_with_retry,
    with_retry,
)

__all__ = [
    # data sources
    "fetch_lobsters_launches",
    "fetch_reddit_posts",
    "fetch_show_hn",
    "search_repositories",
    # retry
    "RetryOptions",
    "RetryResult",
    "RetryTask",
    "execute_with_retry",
    "with_retry",
]
