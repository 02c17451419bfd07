"""EAGLE import MCP server: entry point."""

from __future__ import annotations

from fastmcp import FastMCP

from .logging_config import create_logger, setup_logging
from .tools import install_tools

logger = create_logger(__name__)


def create_server() -> FastMCP:
    """Create and configure the EAGLE import MCP server."""
    mcp = FastMCP("eagle-mcp")
    count = install_tools(mcp)
    logger.debug("Registered %d tool(s)", count)
    return mcp


def main() -> None:
    """CLI entry point."""
    setup_logging()
    server = create_server()
    server.run()


if __name__ == "__main__":
    main()
