# hackernews/__init__.py

from .api import fetch_show_hn

__all__ = ["fetch_show_hn"]
