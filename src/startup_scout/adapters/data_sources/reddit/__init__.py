# reddit/__init__.py

from .api import fetch_reddit_posts

__all__ = ["fetch_reddit_posts"]
