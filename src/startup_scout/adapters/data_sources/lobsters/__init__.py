# lobsters/__init__.py

from .api import fetch_lobsters_launches

__all__ = ["fetch_lobsters_launches"]
