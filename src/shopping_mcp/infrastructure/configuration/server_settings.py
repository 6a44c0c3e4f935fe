from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

McpTransport = Literal["streamable-http", "sse", "stdio"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ServerSettings(BaseSettings):
    """Settings for the MCP transport the server listens on."""

    name: str = Field(default="shopping-server", alias="MCP_SERVER_NAME")
    version: str = Field(default="1.0.0", alias="MCP_SERVER_VERSION")
    host: str = Field(default="localhost", alias="MCP_HOST")
    port: int = Field(default=8080, alias="MCP_PORT")
    transport: McpTransport = Field(default="streamable-http", alias="MCP_TRANSPORT")
    log_level: LogLevel = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value
