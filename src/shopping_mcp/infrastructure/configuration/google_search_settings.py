from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from shopping_mcp.core.exceptions import ConfigurationError

DEFAULT_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"


class GoogleSearchSettings(BaseSettings):
    """Settings for the Google Custom Search JSON API."""

    api_key: SecretStr | None = Field(default=None, alias="GOOGLE_API_KEY")
    search_engine_id: str = Field(default="", alias="GOOGLE_SEARCH_ENGINE_ID")
    base_url: str = Field(default=DEFAULT_SEARCH_URL, alias="GOOGLE_SEARCH_BASE_URL")

    timeout_seconds: float = Field(default=10.0, gt=0, alias="SEARCH_TIMEOUT_SECONDS")
    max_results: int = Field(default=10, ge=1, le=10, alias="SEARCH_MAX_RESULTS")
    # 1 attempt means no retries.
    max_attempts: int = Field(default=1, ge=1, alias="SEARCH_MAX_ATTEMPTS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_key.get_secret_value() and self.search_engine_id)

    def validate_credentials(self) -> None:
        if not self.is_configured():
            raise ConfigurationError("Google API key or Search Engine ID not configured")
