"""GraphQL query for paginated active products with country pricing."""

from __future__ import annotations

from typing import Any, Optional

from ..config import MAX_BATCH_SIZE

PRODUCTS_QUERY = """
query ActiveProducts(
  $first: Int!
  $after: String
  $country: CountryCode!
  $locale: String!
) {
  products(first: $first, after: $after, query: "status:active") {
    edges {
      cursor
      node {
        id
        title
        status
        publishedInContext(context: { country: $country })
        translations(locale: $locale) {
          key
          value
        }
        variants(first: $first) {
          edges {
            node {
              id
              title
              price
              contextualPricing(context: { country: $country }) {
                price {
                  amount
                  currencyCode
                }
                compareAtPrice {
                  amount
                  currencyCode
                }
              }
            }
          }
        }
      }
    }
    pageInfo {
      hasNextPage
    }
  }
}
"""


def build_products_query(
    country: str,
    locale: str,
    batch_size: int,
    cursor: Optional[str] = None,
) -> tuple[str, dict[str, Any]]:
    """Build the products query and its variables.

    Values travel as GraphQL variables, never spliced into the document.
    Country and locale are forwarded verbatim; the API rejects bad ones.

    Args:
        country: ISO country code for contextual pricing (e.g. "DE")
        locale: Translation locale (e.g. "de")
        batch_size: Products per page and variants per product (1..250)
        cursor: Continuation cursor, None to start from the beginning

    Returns:
        (query, variables) ready to POST as a GraphQL request body
    """
    if not 1 <= batch_size <= MAX_BATCH_SIZE:
        raise ValueError(
            f"batch_size must be between 1 and {MAX_BATCH_SIZE}, got {batch_size}"
        )

    variables = {
        "first": batch_size,
        "after": cursor,
        "country": country,
        "locale": locale,
    }
    return PRODUCTS_QUERY, variables
