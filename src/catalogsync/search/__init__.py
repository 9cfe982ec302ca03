"""Search index target (Algolia)."""

from .index import SearchIndex

__all__ = ["SearchIndex"]
