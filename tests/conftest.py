import pytest
from fastapi.testclient import TestClient

from ecoroute.config import Settings
from ecoroute.main import create_app
from ecoroute.persistence.memory import InMemoryStore
from ecoroute.persistence.seed import seed_sample_data


@pytest.fixture
def test_settings() -> Settings:
    return Settings(google_maps_api_key=None, seed_sample_data=True, log_level="DEBUG")


@pytest.fixture
def store() -> InMemoryStore:
    store = InMemoryStore()
    seed_sample_data(store)
    return store


@pytest.fixture
def api_client(test_settings: Settings, store: InMemoryStore) -> TestClient:
    app = create_app(config=test_settings, store=store, directions_client=None)
    return TestClient(app)
