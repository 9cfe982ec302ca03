"""
Catalog source: Shopify Admin GraphQL products connection.

Components:
- query: parameterized products query builder
- types: page / product / variant models
- client: async page fetcher
"""

from .client import CatalogClient
from .query import PRODUCTS_QUERY, build_products_query
from .types import ProductsPage, ProductEdge, ProductNode, VariantNode

__all__ = [
    "CatalogClient",
    "PRODUCTS_QUERY",
    "build_products_query",
    "ProductsPage",
    "ProductEdge",
    "ProductNode",
    "VariantNode",
]
