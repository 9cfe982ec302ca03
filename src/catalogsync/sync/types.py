"""Result types for sync runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class SyncMode(str, Enum):
    """How pages are driven through fetch, transform and sync."""

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


@dataclass(frozen=True)
class BatchResult:
    """Outcome of one fetch-transform-sync pipeline."""

    has_next_page: bool
    cursor: Optional[str]
    record_count: int
    fetched: bool = True  # False when the API returned no data


@dataclass
class SyncResult:
    """Run state and outcome of one sync invocation."""

    mode: SyncMode
    country: str
    locale: str
    index_name: str
    batch_size: int

    total_synced: int = 0
    pages: int = 0  # fetches that returned data
    rounds: int = 0  # parallel mode only
    cursor: Optional[str] = None
    has_next_page: bool = True

    success: bool = True
    errors: List[str] = field(default_factory=list)

    started_at: Optional[str] = None
    finished_at: Optional[str] = None
    elapsed_seconds: float = 0.0

    def fail(self, message: str) -> None:
        self.success = False
        self.errors.append(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "mode": self.mode.value,
            "country": self.country,
            "locale": self.locale,
            "index_name": self.index_name,
            "batch_size": self.batch_size,
            "total_synced": self.total_synced,
            "pages": self.pages,
            "rounds": self.rounds,
            "success": self.success,
            "errors": self.errors,
            "started_at": self.started_at,
            "finished_at": self.finished_at,
            "elapsed_seconds": self.elapsed_seconds,
        }
