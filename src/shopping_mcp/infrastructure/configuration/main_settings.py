from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from shopping_mcp.infrastructure.configuration.google_search_settings import (
    GoogleSearchSettings,
)
from shopping_mcp.infrastructure.configuration.server_settings import ServerSettings


class Settings(BaseSettings):
    """
    Master configuration combining all sub-settings.
    Each section reads its own variables from the environment and `.env`;
    the section names themselves (`search`, `server`) are never read from it.
    """

    search: GoogleSearchSettings = Field(default_factory=GoogleSearchSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)
