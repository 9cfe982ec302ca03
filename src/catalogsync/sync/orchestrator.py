"""
Sync Orchestrator.

Drives the Fetch -> Transform -> Index flow over the paginated catalog.

Two modes:
- sequential: one page at a time, strictly in page order
- parallel: rounds of N concurrent pipelines, every pipeline in a round
  starting from the cursor captured at round start. The pipelines of a
  round therefore request the same page and upsert the same records;
  upserts by objectID make the repeats harmless.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Optional

from ..catalog.client import CatalogClient
from ..config import DEFAULT_PARALLEL_BATCHES, MAX_BATCH_SIZE, SyncConfig, get_config
from ..exceptions import CatalogSyncError
from ..search.index import SearchIndex
from ..transform import to_search_records
from .types import BatchResult, SyncMode, SyncResult

logger = logging.getLogger(__name__)


class SyncOrchestrator:
    """
    Moves catalog pages into the search index.

    The catalog client and search index are created once by the caller
    and shared by every fetch and sync call of the run.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        index: SearchIndex,
        country: str,
        locale: str,
        batch_size: int,
        parallel_batches: int = DEFAULT_PARALLEL_BATCHES,
    ):
        if not 1 <= batch_size <= MAX_BATCH_SIZE:
            raise ValueError(
                f"batch_size must be between 1 and {MAX_BATCH_SIZE}, got {batch_size}"
            )
        if parallel_batches < 1:
            raise ValueError("parallel_batches must be at least 1")

        self.catalog = catalog
        self.index = index
        self.country = country
        self.locale = locale
        self.batch_size = batch_size
        self.parallel_batches = parallel_batches

    async def run(self, mode: SyncMode = SyncMode.SEQUENTIAL) -> SyncResult:
        """Run a full resync in the given mode.

        Returns:
            SyncResult with totals, timing and any errors
        """
        result = SyncResult(
            mode=mode,
            country=self.country,
            locale=self.locale,
            index_name=self.index.index_name,
            batch_size=self.batch_size,
            started_at=datetime.now(timezone.utc).isoformat(),
        )
        logger.info(
            f"Starting {mode.value} sync: country={self.country} "
            f"locale={self.locale} index={self.index.index_name} "
            f"batch_size={self.batch_size}"
        )

        start = time.perf_counter()
        if mode == SyncMode.PARALLEL:
            await self._run_parallel(result)
        else:
            await self._run_sequential(result)

        result.elapsed_seconds = time.perf_counter() - start
        result.finished_at = datetime.now(timezone.utc).isoformat()
        logger.info(f"Sync complete: {result.total_synced} records synced")
        return result

    async def run_sequential(self) -> SyncResult:
        return await self.run(SyncMode.SEQUENTIAL)

    async def run_parallel(self) -> SyncResult:
        return await self.run(SyncMode.PARALLEL)

    async def _run_sequential(self, result: SyncResult) -> None:
        """Fetch, transform and sync one page at a time until no cursor remains."""
        while result.has_next_page:
            try:
                page = await self.catalog.fetch_products(
                    self.country, self.locale, self.batch_size, result.cursor
                )
            except CatalogSyncError as e:
                logger.error(f"Aborting sync, fetch failed at cursor {result.cursor}")
                result.fail(f"Fetch error: {e}")
                result.has_next_page = False
                break

            if page is None:
                logger.warning("No data returned, stopping sync")
                result.has_next_page = False
                break

            result.pages += 1

            records = to_search_records(page)
            if records:
                try:
                    await self.index.save_records(records)
                except CatalogSyncError as e:
                    logger.error(f"Aborting sync, index write failed: {e}")
                    result.fail(f"Sync error: {e}")
                    result.has_next_page = False
                    break

            result.total_synced += len(records)
            logger.info(f"Total synced so far: {result.total_synced}")

            next_cursor = page.end_cursor
            result.has_next_page = page.has_next_page and next_cursor is not None
            if result.has_next_page:
                result.cursor = next_cursor

    async def process_batch(self, cursor: Optional[str]) -> BatchResult:
        """Fetch, transform and sync the page after `cursor`.

        Raises whatever the fetch or the index write raised.
        """
        try:
            page = await self.catalog.fetch_products(
                self.country, self.locale, self.batch_size, cursor
            )
            if page is None:
                return BatchResult(
                    has_next_page=False, cursor=None, record_count=0, fetched=False
                )

            records = to_search_records(page)
            if records:
                await self.index.save_records(records)

            new_cursor = page.end_cursor
            return BatchResult(
                has_next_page=page.has_next_page and new_cursor is not None,
                cursor=new_cursor,
                record_count=len(records),
            )
        except Exception as e:
            logger.error(f"Error processing batch with cursor {cursor}: {e}")
            raise

    async def _run_parallel(self, result: SyncResult) -> None:
        """Run rounds of concurrent pipelines until no pipeline reports more pages."""
        width = self.parallel_batches

        while result.has_next_page:
            cursor = result.cursor
            result.rounds += 1
            logger.info(
                f"Starting {width} new batches with {self.batch_size} products "
                f"(round {result.rounds}, cursor={cursor})"
            )

            tasks = [
                asyncio.create_task(self.process_batch(cursor)) for _ in range(width)
            ]
            try:
                batch_results = await asyncio.gather(*tasks)
            except CatalogSyncError as e:
                logger.error(f"Error in one of the batch processes: {e}")
                result.fail(f"Round {result.rounds} failed: {e}")
                result.has_next_page = False
                break
            finally:
                # Siblings are never cancelled, wait for them to settle.
                await asyncio.gather(*tasks, return_exceptions=True)

            result.pages += sum(1 for batch in batch_results if batch.fetched)
            result.has_next_page = False
            for batch in batch_results:
                result.total_synced += batch.record_count
                if batch.has_next_page:
                    result.has_next_page = True
                    result.cursor = batch.cursor

            logger.info(
                f"Round {result.rounds} done, total synced so far: {result.total_synced}"
            )


async def run_sync(
    country: str,
    locale: str,
    index_name: str,
    batch_size: int,
    parallel: bool = False,
    parallel_batches: Optional[int] = None,
    config: Optional[SyncConfig] = None,
) -> SyncResult:
    """Run a sync with clients built from config.

    CLI entry point.
    """
    config = config or get_config()
    mode = SyncMode.PARALLEL if parallel else SyncMode.SEQUENTIAL

    catalog = CatalogClient(config.catalog)
    try:
        index = SearchIndex(config.search, index_name)
        try:
            orchestrator = SyncOrchestrator(
                catalog,
                index,
                country=country,
                locale=locale,
                batch_size=min(batch_size, MAX_BATCH_SIZE),
                parallel_batches=(
                    config.parallel_batches
                    if parallel_batches is None
                    else parallel_batches
                ),
            )
            return await orchestrator.run(mode)
        finally:
            await index.close()
    finally:
        await catalog.close()
