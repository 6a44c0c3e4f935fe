"""MCP server exposing product search and an in-memory shopping cart."""
