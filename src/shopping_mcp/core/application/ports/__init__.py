from shopping_mcp.core.application.ports.search_port import SearchPort

__all__ = ["SearchPort"]
