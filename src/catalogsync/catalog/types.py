"""Models for the products page returned by the catalog API.

Every optional field has a default so partial payloads load the same way
optional chaining would read them. Unknown fields are ignored.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class Money(_Payload):
    amount: Optional[float] = None
    currency_code: Optional[str] = Field(default=None, alias="currencyCode")


class ContextualPricing(_Payload):
    price: Optional[Money] = None
    compare_at_price: Optional[Money] = Field(default=None, alias="compareAtPrice")


class VariantNode(_Payload):
    id: str
    title: str = ""
    price: Optional[str] = None
    contextual_pricing: Optional[ContextualPricing] = Field(
        default=None, alias="contextualPricing"
    )


class VariantEdge(_Payload):
    node: VariantNode


class VariantConnection(_Payload):
    edges: List[VariantEdge] = Field(default_factory=list)


class Translation(_Payload):
    key: str
    value: Optional[str] = None


class ProductNode(_Payload):
    id: str
    title: str = ""
    status: Optional[str] = None
    published_in_context: Optional[bool] = Field(
        default=None, alias="publishedInContext"
    )
    translations: List[Translation] = Field(default_factory=list)
    variants: VariantConnection = Field(default_factory=VariantConnection)


class ProductEdge(_Payload):
    cursor: str
    node: ProductNode


class PageInfo(_Payload):
    has_next_page: bool = Field(default=False, alias="hasNextPage")


class ProductsPage(_Payload):
    """One page of product edges plus the continuation flag."""

    edges: List[ProductEdge] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")

    @property
    def has_next_page(self) -> bool:
        return self.page_info.has_next_page

    @property
    def end_cursor(self) -> Optional[str]:
        """Cursor of the last edge, None for an empty page."""
        if not self.edges:
            return None
        return self.edges[-1].cursor
