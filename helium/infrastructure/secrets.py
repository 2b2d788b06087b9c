"""Secret Resolution — Key Vault first, process environment second, fail fast last.

Invariants:
    - CLIENT_ID without CLIENT_SECRET is fatal (half-configured service principal)
    - COSMOSDB_URL, DATABASE_NAME and DATABASE_COLLECTION are mandatory
    - Key Vault is consulted only when TENANT_ID and KEY_VAULT_URL are both set
    - Any Key Vault failure is logged and falls back to COSMOSDB_KEY
    - Returns a fully populated StoreConfig or raises StartupConfigMissingError

Design Decisions:
    - ClientSecretCredential when CLIENT_ID is set, DefaultAzureCredential otherwise
      (managed identity on the host)
    - Vault provider factory injectable: tests substitute a fake vault
"""

import logging
from collections.abc import Callable
from typing import Protocol

from azure.identity.aio import ClientSecretCredential, DefaultAzureCredential
from azure.keyvault.secrets.aio import SecretClient

from helium.config import Settings, StoreConfig
from helium.core.errors import StartupConfigMissingError

logger = logging.getLogger(__name__)


class SecretProvider(Protocol):
    async def get_secret(self, name: str) -> str | None: ...


class KeyVaultSecretProvider:
    """Reads secrets from Azure Key Vault."""

    def __init__(
        self,
        vault_url: str,
        tenant_id: str,
        client_id: str | None = None,
        client_secret: str | None = None,
    ):
        self.vault_url = vault_url
        self.tenant_id = tenant_id
        self.client_id = client_id
        self.client_secret = client_secret

    def _credential(self):
        if self.client_id:
            return ClientSecretCredential(
                self.tenant_id, self.client_id, self.client_secret,
            )
        return DefaultAzureCredential()

    async def get_secret(self, name: str) -> str | None:
        async with self._credential() as credential:
            async with SecretClient(vault_url=self.vault_url, credential=credential) as client:
                secret = await client.get_secret(name)
        return secret.value


def _default_vault_factory(settings: Settings) -> SecretProvider:
    return KeyVaultSecretProvider(
        settings.key_vault_url,
        settings.tenant_id,
        settings.client_id,
        settings.client_secret,
    )


def _require(value: str | None, setting: str) -> str:
    if not value:
        logger.error(f"No {setting} env var set")
        raise StartupConfigMissingError(setting)
    return value


async def resolve_store_config(
    settings: Settings,
    vault_factory: Callable[[Settings], SecretProvider] = _default_vault_factory,
) -> StoreConfig:
    """Resolve every mandatory store setting before the app starts serving."""
    if settings.client_id and not settings.client_secret:
        logger.error("CLIENT_ID env var set, but not CLIENT_SECRET")
        raise StartupConfigMissingError(
            "CLIENT_SECRET", "CLIENT_ID env var set, but not CLIENT_SECRET",
        )

    url = _require(settings.cosmosdb_url, "COSMOSDB_URL")
    database = _require(settings.database_name, "DATABASE_NAME")
    collection = _require(settings.database_collection, "DATABASE_COLLECTION")

    key = None
    if settings.tenant_id and settings.key_vault_url:
        try:
            vault = vault_factory(settings)
            key = await vault.get_secret(settings.cosmosdb_key_secret_name)
        except Exception as e:
            logger.warning(
                f"Failed to get secrets from KeyVault ({e}). "
                "Falling back to env vars for secrets",
            )
    else:
        logger.info("Unable to use KeyVault, falling back to env vars for secrets")

    if not key:
        key = settings.cosmosdb_key
    if not key:
        logger.error("Failed to get COSMOSDB_KEY")
        raise StartupConfigMissingError("COSMOSDB_KEY")

    return StoreConfig(url=url, key=key, database=database, collection=collection)
