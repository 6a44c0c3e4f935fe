from shopping_mcp.infrastructure.entrypoints.mcp_server.server_factory import create_server
from shopping_mcp.infrastructure.entrypoints.mcp_server.tool_handlers import (
    ShoppingToolHandlers,
    ToolResponse,
)

__all__ = ["ShoppingToolHandlers", "ToolResponse", "create_server"]
