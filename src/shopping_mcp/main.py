import sys

from pydantic import ValidationError

from shopping_mcp.infrastructure.configuration import Settings
from shopping_mcp.infrastructure.entrypoints.mcp_server import create_server
from shopping_mcp.infrastructure.observability import configure_logging, configure_tracing, get_logger
from shopping_mcp.infrastructure.observability.tracing_setup import tracing_requested

logger = get_logger("main")


def main() -> None:
    """Run the shopping MCP server on the configured transport."""
    try:
        settings = Settings()
    except ValidationError as exc:
        configure_logging()
        logger.error("Invalid configuration", error_details=str(exc))
        sys.exit(1)

    configure_logging(settings.server.log_level)
    if tracing_requested():
        configure_tracing()

    if not settings.search.is_configured():
        logger.warning("Search credentials not configured; search_products will report errors")

    server = create_server(settings)
    logger.info(
        "Starting MCP server",
        version=settings.server.version,
        transport=settings.server.transport,
        host=settings.server.host,
        port=settings.server.port,
    )
    try:
        server.run(transport=settings.server.transport)
    except Exception:
        logger.exception("MCP server stopped with an error")
        sys.exit(1)


if __name__ == "__main__":
    main()
