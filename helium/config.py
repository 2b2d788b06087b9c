"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables or Key Vault (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Store connection values are optional here; resolve_store_config()
      (infrastructure/secrets.py) decides whether startup may proceed
    - StoreConfig is only ever constructed fully populated

Design Decisions:
    - Defaults provided for all non-secret settings
    - Environment names follow the deployment manifests (COSMOSDB_URL, DATABASE_NAME, ...)
"""

from dataclasses import dataclass
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Cosmos DB
    cosmosdb_url: str | None = None
    cosmosdb_key: str | None = None
    database_name: str | None = None
    database_collection: str | None = None

    # Key Vault (optional; falls back to COSMOSDB_KEY)
    key_vault_url: str | None = None
    tenant_id: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    cosmosdb_key_secret_name: str = "cosmosDBkey"

    # API
    port: int = 3000
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@dataclass(frozen=True)
class StoreConfig:
    """Resolved document store connection values."""
    url: str
    key: str
    database: str
    collection: str


@lru_cache
def get_settings() -> Settings:
    return Settings()
