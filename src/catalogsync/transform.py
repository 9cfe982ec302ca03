"""Flatten product pages into search records, one per variant."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .catalog.types import Money, ProductNode, ProductsPage


class SearchRecord(BaseModel):
    """A single variant as stored in the search index."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    object_id: str = Field(alias="objectID")
    title: str
    price: float = 0
    compare_at_price: float = Field(default=0, alias="compareAtPrice")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the index field names (objectID, compareAtPrice)."""
        return self.model_dump(by_alias=True)


def resolve_title(product: ProductNode) -> str:
    """Localized title if the product has one, else its own title."""
    for translation in product.translations:
        if translation.key == "title":
            return translation.value or product.title
    return product.title


def _amount(money: Optional[Money]) -> float:
    if money is None or not money.amount:
        return 0
    return money.amount


def to_search_records(page: ProductsPage) -> List[SearchRecord]:
    """Build search records for every variant on the page, in edge order."""
    records = []
    for edge in page.edges:
        product = edge.node
        title = resolve_title(product)
        for variant_edge in product.variants.edges:
            variant = variant_edge.node
            pricing = variant.contextual_pricing
            records.append(
                SearchRecord(
                    object_id=variant.id,
                    title=title,
                    price=_amount(pricing.price if pricing else None),
                    compare_at_price=_amount(
                        pricing.compare_at_price if pricing else None
                    ),
                )
            )
    return records
