"""FastMCP server initialization for the to-do lists."""

from mcp.server.fastmcp import FastMCP

from todo_mcp.config import get_settings
from todo_mcp.logging_setup import setup_logging

# Initialize the MCP server
mcp = FastMCP("todo_mcp")


def run() -> None:
    """Run the MCP server."""
    setup_logging(get_settings().log_level.upper())

    # Register tools and hydrate the lists before serving.
    import todo_mcp.tools  # noqa: F401
    from todo_mcp.session import get_session

    get_session()
    mcp.run()


if __name__ == "__main__":
    run()
