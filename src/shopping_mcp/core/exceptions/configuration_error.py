from shopping_mcp.core.exceptions.shopping_error import ShoppingError


class ConfigurationError(ShoppingError):
    """Raised when required configuration (e.g. search credentials) is missing."""
