"""
Sync drivers.

Components:
- orchestrator: sequential pagination driver and parallel batch scheduler
- types: BatchResult, SyncResult, SyncMode
"""

from .orchestrator import SyncOrchestrator, run_sync
from .types import BatchResult, SyncMode, SyncResult

__all__ = [
    "SyncOrchestrator",
    "run_sync",
    "BatchResult",
    "SyncMode",
    "SyncResult",
]
