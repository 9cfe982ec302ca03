"""
catalogsync - Shopify catalog to Algolia search index sync.

Exports active products and their variants page by page and upserts
one search record per variant.

Usage:
    from catalogsync import run_sync

    result = await run_sync("DE", "de", "products_de", batch_size=100)
"""

__version__ = "0.1.0"

from .config import SyncConfig, get_config
from .exceptions import CatalogFetchError, CatalogSyncError, IndexSyncError
from .sync import BatchResult, SyncMode, SyncOrchestrator, SyncResult, run_sync
from .transform import SearchRecord, to_search_records

__all__ = [
    "__version__",
    # Config
    "SyncConfig",
    "get_config",
    # Errors
    "CatalogSyncError",
    "CatalogFetchError",
    "IndexSyncError",
    # Sync
    "SyncOrchestrator",
    "SyncMode",
    "SyncResult",
    "BatchResult",
    "run_sync",
    # Records
    "SearchRecord",
    "to_search_records",
]
