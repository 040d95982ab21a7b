# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the four cat-database tools over MCP.  Each tool is a thin
#   wrapper: it logs the call, hands the arguments to the CatToolRouter,
#   logs the envelope and returns it.  No query logic lives here.
#
# HOW IT WORKS (the flow):
#   1. An MCP client calls a tool by name (e.g., "get_cat_by_id")
#   2. RouterValidation checks the name and arguments with the router;
#      a bad call is rejected here, before FastMCP parses any argument
#   3. FastMCP routes the call to the decorated function, which calls
#      router.call() to run the query
#   4. The client receives {"result": ...}, or an error result (isError)
#      whose text is the JSON envelope {"error": {"kind", "message"}}
#
# TOOL NAMING CONVENTIONS:
#   - list_* / get_* → read-only retrieval (idempotent, safe to retry)
#   - search_*       → query with a filter (idempotent, safe to retry)
#   Every tool is read-only.  The dataset cannot be changed over MCP.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server
#   b) Via main.py: python main.py  (or the cat-database-server script)
#   Either way FastMCP speaks MCP over stdin/stdout.
# =============================================================================

import json
import logging
import os
import sys
from typing import Annotated

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from pydantic import Field

from core.cat_store import load_seed_dataset
from tools.router import TOOL_SPECS, CatToolRouter, ToolName, ToolRouterError

load_dotenv()

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because MCP uses STDOUT as its transport.  Anything we
# printed to stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response JSON
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=os.getenv("CAT_SERVER_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger("cat_database")


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, envelope: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    if "error" in envelope:
        error = envelope["error"]
        _log_status(f"{error['kind']}: {error['message']}")
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(envelope, separators=(',', ':'))}{_RESET}")
    return envelope


def _run(tool: ToolName, **arguments) -> dict:
    _log_request(tool.value, **arguments)
    envelope = _log_response(tool.value, router.call(tool.value, arguments))
    if "error" in envelope:
        raise ToolError(json.dumps(envelope))
    return envelope


# =============================================================================
# Create the router and the FastMCP server instance
# =============================================================================
# The dataset is built exactly once, here, and lives for the whole process.
# =============================================================================
SERVER_NAME = os.getenv("CAT_SERVER_NAME", "cat-database-server")

SERVER_INSTRUCTIONS = (
    "A Cat Database MCP Server that provides tools to query cat data. "
    "Use the available tools to list all cats, get specific cat information "
    "by ID, search by breed, or filter for indoor cats only."
)

router = CatToolRouter(load_seed_dataset())


# =============================================================================
# Argument validation at the MCP boundary
# =============================================================================
# FastMCP would otherwise coerce arguments itself ("2" → 2, True → 1) and
# reject bad ones with its own message.  Running the router's validate()
# first means every rejected call, including an unknown tool name, reaches
# the client as the same {"error": {"kind", "message"}} envelope.
# =============================================================================
class RouterValidation(Middleware):
    """Reject tool calls the router would reject, before FastMCP parses them."""

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        params = context.message
        try:
            router.validate(params.name, params.arguments)
        except ToolRouterError as exc:
            _log_request(params.name, **dict(params.arguments or {}))
            _log_status(f"{exc.kind}: {exc}")
            raise ToolError(exc.to_json()) from exc
        return await call_next(context)


mcp = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS)
mcp.add_middleware(RouterValidation())


# =============================================================================
# TOOLS
# =============================================================================
# Names, descriptions and argument schemas all come from TOOL_SPECS, so what
# clients see in tools/list is what the router enforces.
# =============================================================================
_ID = TOOL_SPECS[ToolName.GET_CAT_BY_ID].properties["id"]
_BREED = TOOL_SPECS[ToolName.SEARCH_BY_BREED].properties["breed"]


def _register(tool: ToolName):
    spec = TOOL_SPECS[tool]
    return mcp.tool(name=spec.name.value, description=spec.description)


@_register(ToolName.LIST_ALL_CATS)
def list_all_cats() -> dict:
    return _run(ToolName.LIST_ALL_CATS)


@_register(ToolName.GET_CAT_BY_ID)
def get_cat_by_id(
    id: Annotated[int, Field(strict=True, ge=_ID["minimum"], description=_ID["description"])],
) -> dict:
    """Raises ToolError carrying a not_found envelope for unknown ids."""
    return _run(ToolName.GET_CAT_BY_ID, id=id)


@_register(ToolName.SEARCH_BY_BREED)
def search_by_breed(
    breed: Annotated[str, Field(strict=True, description=_BREED["description"])],
) -> dict:
    return _run(ToolName.SEARCH_BY_BREED, breed=breed)


@_register(ToolName.GET_INDOOR_CATS)
def get_indoor_cats() -> dict:
    return _run(ToolName.GET_INDOOR_CATS)


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
