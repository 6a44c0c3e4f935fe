from shopping_mcp.core.exceptions.shopping_error import ShoppingError


class ToolArgumentError(ShoppingError):
    """Raised when a tool invocation carries missing or wrong-typed arguments."""
