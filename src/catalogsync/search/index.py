"""
Algolia index writer.

One SearchClient is built at startup and reused for every batch of a run.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from algoliasearch.search.client import SearchClient

from ..config import SearchConfig
from ..exceptions import IndexSyncError
from ..transform import SearchRecord

logger = logging.getLogger(__name__)


class SearchIndex:
    """Upserts search records into a single named index."""

    def __init__(
        self,
        config: SearchConfig,
        index_name: str,
        client: Optional[SearchClient] = None,
    ):
        self.index_name = index_name
        self._client = client or SearchClient(config.app_id, config.admin_api_key)

    async def save_records(self, records: Sequence[SearchRecord]) -> int:
        """Save all records, replacing existing objects with the same objectID.

        The batch is accepted as a whole or the call raises.

        Returns:
            Number of records sent
        """
        if not records:
            return 0

        logger.info(f"Syncing {len(records)} records to index {self.index_name}")
        try:
            await self._client.save_objects(
                index_name=self.index_name,
                objects=[record.to_dict() for record in records],
            )
        except Exception as e:
            logger.error(f"Error syncing to index {self.index_name}: {e}")
            raise IndexSyncError(
                f"Error syncing {len(records)} records to {self.index_name}: {e}",
                index_name=self.index_name,
                record_count=len(records),
            ) from e

        logger.info(f"Synced {len(records)} records to index {self.index_name}")
        return len(records)

    async def close(self):
        """Close the search client transport."""
        await self._client.close()

    async def __aenter__(self) -> "SearchIndex":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
