from typing import Any

import pytest
from pydantic import SecretStr

from shopping_mcp.core.domain.cart import CartStore
from shopping_mcp.infrastructure.configuration import (
    GoogleSearchSettings,
    ServerSettings,
    Settings,
)

SEARCH_URL = "https://search.example.com/customsearch/v1"


def make_search_settings(**overrides: Any) -> GoogleSearchSettings:
    defaults: dict[str, Any] = {
        "GOOGLE_API_KEY": SecretStr("test-api-key"),
        "GOOGLE_SEARCH_ENGINE_ID": "test-cx",
        "GOOGLE_SEARCH_BASE_URL": SEARCH_URL,
        "SEARCH_TIMEOUT_SECONDS": 2.0,
        "_env_file": None,
    }
    defaults.update(overrides)
    return GoogleSearchSettings(**defaults)


@pytest.fixture
def search_settings_factory():
    return make_search_settings


@pytest.fixture
def search_settings() -> GoogleSearchSettings:
    return make_search_settings()


@pytest.fixture
def settings(search_settings: GoogleSearchSettings) -> Settings:
    return Settings(
        search=search_settings,
        server=ServerSettings(MCP_SERVER_NAME="test-shopping-server", _env_file=None),
        _env_file=None,
    )


@pytest.fixture
def cart_store() -> CartStore:
    return CartStore()


@pytest.fixture
def search_url() -> str:
    return SEARCH_URL
