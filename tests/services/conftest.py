"""Service test fixtures — in-memory store + FastAPI test client.

Invariants:
    - Every test gets a fresh InMemoryDocumentStore and RecordingTelemetry
    - Store, telemetry and store config dependencies overridden on the app
    - Lifespan is not run: no Cosmos client, no Key Vault
"""

import pytest
from httpx import ASGITransport, AsyncClient

from helium.api.dependencies import get_document_store, get_store_config, get_telemetry
from helium.config import StoreConfig
from helium.main import app
from tests.services.fake_store import InMemoryDocumentStore, RecordingTelemetry

TEST_CONFIG = StoreConfig(
    url="https://test.documents.azure.com:443/",
    key="test-key",
    database="imdb",
    collection="movies",
)

DUNE = {
    "id": "tt0087182",
    "movieId": "tt0087182",
    "partitionKey": "2",
    "type": "Movie",
    "title": "Dune",
    "year": 1984,
    "runtime": 137,
    "rating": 6.3,
    "votes": 140000,
    "genres": ["Action", "Adventure", "Sci-Fi"],
    "roles": [],
    "textSearch": "dune 1984",
}

STAR_WARS = {
    "id": "tt0076759",
    "movieId": "tt0076759",
    "partitionKey": "9",
    "type": "Movie",
    "title": "Star Wars",
    "year": 1977,
    "runtime": 121,
    "rating": 8.6,
    "votes": 1300000,
    "genres": ["Action", "Adventure", "Fantasy"],
    "roles": [],
    "textSearch": "star wars 1977",
}

MARK_HAMILL = {
    "id": "nm0000434",
    "actorId": "nm0000434",
    "partitionKey": "4",
    "type": "Actor",
    "name": "Mark Hamill",
    "birthYear": 1951,
    "deathYear": None,
    "profession": ["actor", "soundtrack"],
    "movies": ["tt0076759"],
    "textSearch": "mark hamill",
}

# Actor whose search text mentions a movie title
DUNE_FAN = {
    "id": "nm9999990",
    "actorId": "nm9999990",
    "partitionKey": "0",
    "type": "Actor",
    "name": "Dune Fan",
    "birthYear": 1980,
    "deathYear": None,
    "profession": ["actor"],
    "movies": [],
    "textSearch": "dune fan",
}

GENRES = [
    {"id": "Action", "type": "Genre", "partitionKey": "0"},
    {"id": "Adventure", "type": "Genre", "partitionKey": "0"},
    {"id": "Sci-Fi", "type": "Genre", "partitionKey": "0"},
]


@pytest.fixture
def store():
    return InMemoryDocumentStore(
        [DUNE, STAR_WARS, MARK_HAMILL, DUNE_FAN, *GENRES],
    )


@pytest.fixture
def telemetry():
    return RecordingTelemetry()


@pytest.fixture
async def client(store, telemetry):
    """FastAPI test client with store, telemetry and config overridden."""
    app.dependency_overrides[get_document_store] = lambda: store
    app.dependency_overrides[get_telemetry] = lambda: telemetry
    app.dependency_overrides[get_store_config] = lambda: TEST_CONFIG

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
