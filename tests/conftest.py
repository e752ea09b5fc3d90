"""Pytest fixtures for the cats API.

The cataas client and the store are replaced through FastAPI's
``dependency_overrides`` so the suite never touches the network or
the on-disk store. The store is cleared after each test.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from catsapi.cats.cataas_service import CataasClient
from catsapi.cats.dependencies import get_cat_repository, get_cataas_client
from catsapi.cats.schemas import Cat, CataasResponse
from catsapi.cats.store import InMemoryCatRepository
from catsapi.errors import EnrichmentUnavailable
from catsapi.main import create_app


CAT_URL = "https://x/y"


class FixedCataasClient(CataasClient):
    """Always returns the same picture and counts calls."""

    def __init__(self, url: str = CAT_URL):
        self.response = CataasResponse(tags=["cute", "orange"], url=url)
        self.calls = 0

    def fetch_random_image(self) -> CataasResponse:
        self.calls += 1
        return self.response


class FailingCataasClient(CataasClient):
    def __init__(self):
        self.calls = 0

    def fetch_random_image(self) -> CataasResponse:
        self.calls += 1
        raise EnrichmentUnavailable("cataas is unreachable: connection refused")


@pytest.fixture(scope="session")
def shared_repository() -> InMemoryCatRepository:
    return InMemoryCatRepository()


@pytest.fixture
def repository(shared_repository):
    """One store for the whole session, emptied after every test."""
    yield shared_repository
    shared_repository.clear()


@pytest.fixture
def cataas_client() -> FixedCataasClient:
    return FixedCataasClient()


@pytest.fixture
def failing_cataas_client() -> FailingCataasClient:
    return FailingCataasClient()


def _client(repository, cataas_client) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_cat_repository] = lambda: repository
    app.dependency_overrides[get_cataas_client] = lambda: cataas_client
    return TestClient(app)


@pytest.fixture
def client(repository, cataas_client):
    with _client(repository, cataas_client) as test_client:
        yield test_client


@pytest.fixture
def failing_client(repository, failing_cataas_client):
    with _client(repository, failing_cataas_client) as test_client:
        yield test_client


@pytest.fixture
def whiskers() -> Cat:
    return Cat(
        id="aldsknfkle",
        name="Whiskers",
        age=4,
        image_url="https://cataas.com/cat/ngfJ6lSzEdJQ9GO8",
        created_at=datetime(2021, 1, 1, tzinfo=timezone.utc),
    )
