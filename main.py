# =============================================================================
# main.py  —  Entry Point for the Cat Database MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#   (or, once installed: cat-database-server)
#
# WHAT HAPPENS:
#   1. Importing tools.mcp_server loads .env (so CAT_SERVER_LOG_LEVEL and
#      CAT_SERVER_NAME can live there), configures logging, builds the cat
#      dataset and registers the four tools
#   2. FastMCP serves MCP over stdin/stdout until the client disconnects
#
# Everything this process prints goes to STDERR.  STDOUT belongs to MCP.
# =============================================================================

import logging

from tools.mcp_server import SERVER_NAME, mcp, router

logger = logging.getLogger("cat_database")


def main() -> None:
    """Start the cat database server on the stdio transport."""
    logger.info(f"Starting {SERVER_NAME} with {len(router.dataset)} cats")
    logger.info("Serving MCP over stdio")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
