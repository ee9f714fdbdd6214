# data_sources/__init__.py

from .github import search_repositories
from .hackernews import fetch_show_hn
from .lobsters import fetch_lobsters_launches
from .reddit import fetch_reddit_posts

__all__ = [
    "fetch_lobsters_launches",
    "fetch_reddit_posts",
    "fetch_show_hn",
    "search_repositories",
]
