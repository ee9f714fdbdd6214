# github/__init__.py

from .api import search_repositories

__all__ = ["search_repositories"]
