"""
Configuration for catalogsync.

Uses Pydantic for validation and environment loading.
Credentials are read as-is; a missing value shows up as an
authentication failure from the respective API on first use.
"""

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings

MAX_BATCH_SIZE = 250
DEFAULT_PARALLEL_BATCHES = 5


class CatalogConfig(BaseModel):
    """Connection settings for the Shopify Admin GraphQL API."""

    store: str = Field(default="", description="Store domain, e.g. shop.myshopify.com")
    access_token: str = Field(default="", description="Admin API access token")
    api_version: str = Field(default="2024-07", description="Admin API version")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")

    @property
    def graphql_url(self) -> str:
        return f"https://{self.store}/admin/api/{self.api_version}/graphql.json"


class SearchConfig(BaseModel):
    """Credentials for the Algolia search index."""

    app_id: str = Field(default="", description="Algolia application ID")
    admin_api_key: str = Field(default="", description="Algolia admin API key")


class SyncConfig(BaseSettings):
    """Master configuration for catalogsync.

    Loads from environment variables (exact names, no prefix).
    """

    model_config = ConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    parallel_batches: int = Field(
        default=DEFAULT_PARALLEL_BATCHES,
        description="Concurrent pipelines per round in parallel mode",
    )

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)

    @classmethod
    def from_env(cls) -> "SyncConfig":
        """Load configuration from environment variables."""
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            parallel_batches=int(
                os.getenv("PARALLEL_BATCHES", str(DEFAULT_PARALLEL_BATCHES))
            ),
            catalog=CatalogConfig(
                store=os.getenv("SHOPIFY_STORE", ""),
                access_token=os.getenv("SHOPIFY_ACCESS_TOKEN", ""),
                api_version=os.getenv("SHOPIFY_API_VERSION", "2024-07"),
                timeout=float(os.getenv("SHOPIFY_TIMEOUT", "30.0")),
            ),
            search=SearchConfig(
                app_id=os.getenv("ALGOLIA_APP_ID", ""),
                admin_api_key=os.getenv("ALGOLIA_ADMIN_API_KEY", ""),
            ),
        )


@lru_cache(maxsize=1)
def get_config() -> SyncConfig:
    """Process-wide configuration, loaded once."""
    return SyncConfig.from_env()
