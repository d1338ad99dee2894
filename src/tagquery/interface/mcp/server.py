"""MCP server factory for tag queries."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .tools import register_tools

SERVER_NAME = "tag-query"


def create_server() -> FastMCP:
    """Build and return a configured FastMCP server with the tag tools registered."""
    server = FastMCP(SERVER_NAME)
    register_tools(server)
    return server


def main() -> None:
    from ...config.runtime import get_settings
    from ..observability import configure_logging

    configure_logging(get_settings().log_level)
    create_server().run(transport="stdio")


if __name__ == "__main__":
    main()
