"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real Cosmos account or Key Vault
os.environ.setdefault("COSMOSDB_URL", "https://test.documents.azure.com:443/")
os.environ.setdefault("COSMOSDB_KEY", "test-key")
os.environ.setdefault("DATABASE_NAME", "imdb")
os.environ.setdefault("DATABASE_COLLECTION", "movies")
os.environ.setdefault("LOG_FORMAT", "text")
