"""Exceptions raised by catalogsync."""

from __future__ import annotations


class CatalogSyncError(Exception):
    """Base class for sync failures that stop a run."""


class CatalogFetchError(CatalogSyncError):
    """Transport-level failure talking to the catalog API."""

    def __init__(self, message: str, cursor: str | None = None):
        super().__init__(message)
        self.cursor = cursor


class IndexSyncError(CatalogSyncError):
    """Upsert of a record batch into the search index failed."""

    def __init__(self, message: str, index_name: str = "", record_count: int = 0):
        super().__init__(message)
        self.index_name = index_name
        self.record_count = record_count
