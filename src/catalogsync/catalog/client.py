"""
Shopify Admin GraphQL client.

Fetches one page of active products per call. No retries: transport
failures raise CatalogFetchError, GraphQL errors in a 200 response
are logged and reported as "no data" (None).
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ..config import CatalogConfig
from ..exceptions import CatalogFetchError
from .query import build_products_query
from .types import ProductsPage

logger = logging.getLogger(__name__)


class CatalogClient:
    """Async client for the products connection of the Admin API."""

    def __init__(
        self,
        config: CatalogConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self._http = http_client or httpx.AsyncClient(timeout=config.timeout)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "X-Shopify-Access-Token": self.config.access_token,
            "Content-Type": "application/json",
        }

    async def fetch_products(
        self,
        country: str,
        locale: str,
        batch_size: int,
        cursor: Optional[str] = None,
    ) -> Optional[ProductsPage]:
        """Fetch one page of products starting after `cursor`.

        Returns:
            The page, or None when the API answered with GraphQL errors
            or without a products payload.

        Raises:
            CatalogFetchError: on connection errors, timeouts or non-2xx status
        """
        query, variables = build_products_query(country, locale, batch_size, cursor)
        logger.info(f"Fetching products (cursor={cursor})")

        try:
            response = await self._http.post(
                self.config.graphql_url,
                json={"query": query, "variables": variables},
                headers=self.headers,
            )
            response.raise_for_status()
            body: dict[str, Any] = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Catalog API returned {e.response.status_code}: {e.response.text}"
            )
            raise CatalogFetchError(
                f"Catalog API returned {e.response.status_code}", cursor=cursor
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching products: {e}")
            raise CatalogFetchError(f"Error fetching products: {e}", cursor=cursor) from e

        if body.get("errors"):
            logger.error(f"Catalog API returned errors: {body['errors']}")
            return None

        products = (body.get("data") or {}).get("products")
        if products is None:
            logger.error("Catalog API response has no products payload")
            return None

        try:
            page = ProductsPage.model_validate(products)
        except ValidationError as e:
            logger.error(f"Malformed products payload: {e}")
            raise CatalogFetchError(
                f"Malformed products payload: {e}", cursor=cursor
            ) from e

        logger.info(
            f"Fetched {len(page.edges)} products (has_next_page={page.has_next_page})"
        )
        return page

    async def close(self):
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
