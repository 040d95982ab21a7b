# =============================================================================
# tools/__init__.py
# =============================================================================
# This package turns the core/ queries into MCP tools.
#
# ARCHITECTURAL ROLE:
#   - router.py      validates tool names and arguments, calls core/, and
#                    builds the {"result"} / {"error"} response envelope.
#                    It knows nothing about MCP.
#   - mcp_server.py  registers one FastMCP tool per router tool, plus
#                    logging.  It knows nothing about cats.
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT filter or search (that's core/queries.py)
#   - They do NOT own data (that's core/cat_store.py)
# =============================================================================
