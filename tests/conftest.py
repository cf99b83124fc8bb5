import pytest

from fakes import FakeCosmosClient


@pytest.fixture
def fake_client() -> FakeCosmosClient:
    return FakeCosmosClient()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings tests independent of the developer's shell."""
    for name in (
        "APP_ENVIRONMENT",
        "COSMOS_DB__ACCOUNT__ENDPOINT",
        "COSMOS_DB__ACCOUNT__MASTER_KEY",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
