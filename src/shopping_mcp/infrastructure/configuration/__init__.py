from shopping_mcp.infrastructure.configuration.google_search_settings import (
    GoogleSearchSettings,
)
from shopping_mcp.infrastructure.configuration.main_settings import Settings
from shopping_mcp.infrastructure.configuration.server_settings import ServerSettings

__all__ = ["GoogleSearchSettings", "ServerSettings", "Settings"]
