"""
Shared fixtures: catalog payload builders and in-memory doubles.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

import pytest

from catalogsync.catalog.types import ProductsPage


def make_variant(
    variant_id: str,
    price: Optional[str] = None,
    compare_at: Optional[str] = None,
    base_price: str = "99.00",
) -> dict[str, Any]:
    """Variant node payload; contextual pricing only when a price is given."""
    node: dict[str, Any] = {"id": variant_id, "title": "Default", "price": base_price}
    if price is not None or compare_at is not None:
        node["contextualPricing"] = {
            "price": {"amount": price, "currencyCode": "EUR"} if price else None,
            "compareAtPrice": (
                {"amount": compare_at, "currencyCode": "EUR"} if compare_at else None
            ),
        }
    return {"node": node}


def make_product(
    product_id: str,
    title: str,
    variants: list[dict[str, Any]],
    translations: Optional[list[dict[str, str]]] = None,
    cursor: Optional[str] = None,
) -> dict[str, Any]:
    """Product edge payload."""
    return {
        "cursor": cursor or f"cursor-{product_id}",
        "node": {
            "id": product_id,
            "title": title,
            "status": "ACTIVE",
            "publishedInContext": True,
            "translations": translations or [],
            "variants": {"edges": variants},
        },
    }


def make_page(edges: list[dict[str, Any]], has_next_page: bool = False) -> ProductsPage:
    return ProductsPage.model_validate(
        {"edges": edges, "pageInfo": {"hasNextPage": has_next_page}}
    )


def simple_page(
    cursor: str,
    has_next_page: bool,
    variant_ids: tuple[str, ...] = ("v1", "v2"),
) -> ProductsPage:
    """One product whose edge carries `cursor`, with the given variants."""
    product = make_product(
        f"p-{cursor}",
        "Shirt",
        [make_variant(v, price="10.00") for v in variant_ids],
        cursor=cursor,
    )
    return make_page([product], has_next_page=has_next_page)


class FakeCatalog:
    """Serves queued pages (or raises queued exceptions) in call order."""

    def __init__(self, pages: list, yield_first: bool = False):
        self.pages = list(pages)
        self.calls: list[Optional[str]] = []
        self.yield_first = yield_first

    async def fetch_products(self, country, locale, batch_size, cursor=None):
        self.calls.append(cursor)
        item = self.pages.pop(0)
        if self.yield_first and not isinstance(item, Exception):
            await asyncio.sleep(0)
        if isinstance(item, Exception):
            raise item
        return item


class FakeIndex:
    """Records every saved batch."""

    def __init__(self, index_name: str = "products_test", fail_on_call: int = 0):
        self.index_name = index_name
        self.batches: list[list] = []
        self.fail_on_call = fail_on_call
        self._calls = 0

    async def save_records(self, records):
        self._calls += 1
        if self.fail_on_call and self._calls == self.fail_on_call:
            from catalogsync.exceptions import IndexSyncError

            raise IndexSyncError("index unavailable", index_name=self.index_name)
        self.batches.append(list(records))
        return len(records)

    @property
    def saved_ids(self) -> list[str]:
        return [r.object_id for batch in self.batches for r in batch]


@pytest.fixture
def fake_index():
    return FakeIndex()
