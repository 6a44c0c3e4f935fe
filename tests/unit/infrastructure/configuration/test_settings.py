"""Unit tests: environment-driven settings."""

import pytest
from pydantic import ValidationError

from shopping_mcp.core.exceptions import ConfigurationError
from shopping_mcp.infrastructure.configuration import GoogleSearchSettings, ServerSettings, Settings

_ENV_VARS = (
    "GOOGLE_API_KEY",
    "GOOGLE_SEARCH_ENGINE_ID",
    "GOOGLE_SEARCH_BASE_URL",
    "SEARCH_TIMEOUT_SECONDS",
    "SEARCH_MAX_RESULTS",
    "SEARCH_MAX_ATTEMPTS",
    "MCP_SERVER_NAME",
    "MCP_SERVER_VERSION",
    "MCP_HOST",
    "MCP_PORT",
    "MCP_TRANSPORT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestGoogleSearchSettings:
    def test_defaults(self) -> None:
        settings = GoogleSearchSettings(_env_file=None)

        assert settings.api_key is None
        assert settings.search_engine_id == ""
        assert settings.base_url == "https://www.googleapis.com/customsearch/v1"
        assert settings.max_results == 10
        assert settings.max_attempts == 1
        assert settings.is_configured() is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_API_KEY", "k-123")
        monkeypatch.setenv("GOOGLE_SEARCH_ENGINE_ID", "cx-1")
        monkeypatch.setenv("SEARCH_TIMEOUT_SECONDS", "3.5")

        settings = GoogleSearchSettings(_env_file=None)

        assert settings.api_key is not None
        assert settings.api_key.get_secret_value() == "k-123"
        assert settings.search_engine_id == "cx-1"
        assert settings.timeout_seconds == 3.5
        assert settings.is_configured() is True

    def test_api_key_is_not_printed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_API_KEY", "k-123")
        assert "k-123" not in repr(GoogleSearchSettings(_env_file=None))

    @pytest.mark.parametrize(
        "env",
        [
            {"GOOGLE_SEARCH_ENGINE_ID": "cx-1"},
            {"GOOGLE_API_KEY": "k-123"},
            {"GOOGLE_API_KEY": "", "GOOGLE_SEARCH_ENGINE_ID": "cx-1"},
        ],
    )
    def test_validate_credentials_requires_both(self, monkeypatch: pytest.MonkeyPatch, env: dict[str, str]) -> None:
        for name, value in env.items():
            monkeypatch.setenv(name, value)

        with pytest.raises(ConfigurationError, match="Google API key or Search Engine ID not configured"):
            GoogleSearchSettings(_env_file=None).validate_credentials()

    def test_max_results_cannot_exceed_api_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCH_MAX_RESULTS", "50")

        with pytest.raises(ValidationError):
            GoogleSearchSettings(_env_file=None)


class TestServerSettings:
    def test_log_level_is_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", " debug ")
        assert ServerSettings(_env_file=None).log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["verbose", "trace", ""])
    def test_unknown_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("LOG_LEVEL", value)

        with pytest.raises(ValidationError):
            ServerSettings(_env_file=None)

    def test_defaults(self) -> None:
        settings = ServerSettings(_env_file=None)

        assert settings.name == "shopping-server"
        assert settings.version == "1.0.0"
        assert settings.host == "localhost"
        assert settings.port == 8080
        assert settings.transport == "streamable-http"

    def test_transport_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_TRANSPORT", "stdio")
        monkeypatch.setenv("MCP_PORT", "9090")

        settings = ServerSettings(_env_file=None)

        assert settings.transport == "stdio"
        assert settings.port == 9090

    def test_unknown_transport_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_TRANSPORT", "carrier-pigeon")

        with pytest.raises(ValidationError):
            ServerSettings(_env_file=None)


class TestSettings:
    def test_combines_sections(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_SEARCH_ENGINE_ID", "cx-9")
        monkeypatch.setenv("MCP_SERVER_NAME", "custom")

        settings = Settings(_env_file=None)

        assert settings.search.search_engine_id == "cx-9"
        assert settings.server.name == "custom"

    @pytest.mark.parametrize("name", ["SERVER", "SEARCH", "server", "search"])
    def test_unrelated_host_variables_are_ignored(self, monkeypatch: pytest.MonkeyPatch, name: str) -> None:
        monkeypatch.setenv(name, "prod-01")
        monkeypatch.setenv("MCP_PORT", "9191")

        settings = Settings(_env_file=None)

        assert settings.server.port == 9191
        assert settings.search.max_results == 10
