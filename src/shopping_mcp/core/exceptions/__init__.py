from shopping_mcp.core.exceptions.configuration_error import ConfigurationError
from shopping_mcp.core.exceptions.provider_error import ProviderError
from shopping_mcp.core.exceptions.shopping_error import ShoppingError
from shopping_mcp.core.exceptions.tool_argument_error import ToolArgumentError

__all__ = [
    "ConfigurationError",
    "ProviderError",
    "ShoppingError",
    "ToolArgumentError",
]
