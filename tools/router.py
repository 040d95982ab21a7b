# =============================================================================
# tools/router.py  —  Tool Router (name → validated call → response envelope)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Sits between the loosely-typed world of an incoming tool call
#   ({"tool_name": ..., "arguments": {...}}) and the typed query functions
#   in core/queries.py.
#
# THE FLOW FOR ONE REQUEST:
#   1. Received:          a tool name string and an optional arguments dict
#   2. Validated:         the name must be one of the four ToolName values
#   3. Argument-checked:  required arguments present and of the right type,
#                         no arguments the tool does not declare
#   4. Dispatched:        the matching core query runs
#   5. Responded:         {"result": ...} or {"error": {"kind", "message"}}
#
# Steps 2-3 are CatToolRouter.validate(); the MCP server runs it on every
# call before FastMCP touches the arguments, so the rules below are the
# only argument rules a client ever meets.
#
# ERRORS:
#   Steps 2-5 signal problems by raising a ToolRouterError subclass.
#   CatToolRouter.call() turns those into the error envelope, so nothing a
#   client sends can crash the server.  Anything that is not a
#   ToolRouterError is a bug and is allowed to propagate.
# =============================================================================

import json
from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from core.cat_store import CatDataset
from core.models import Cat
from core import queries


# =============================================================================
# Error taxonomy
# =============================================================================
class ToolRouterError(Exception):
    """Base class for every error a client can provoke."""

    kind = "tool_error"

    def to_envelope(self) -> dict:
        return {"error": {"kind": self.kind, "message": str(self)}}

    def to_json(self) -> str:
        return json.dumps(self.to_envelope())


class UnknownToolError(ToolRouterError):
    """The tool name is not one the server exposes."""

    kind = "unknown_tool"


class InvalidArgumentsError(ToolRouterError):
    """An argument is missing, has the wrong type, or is not expected."""

    kind = "invalid_arguments"


class CatNotFoundError(ToolRouterError):
    """get_cat_by_id was asked for an id no cat has."""

    kind = "not_found"


# =============================================================================
# The closed set of tools
# =============================================================================
# TOOL_SPECS is the single source of every tool's name, description and
# argument schema.  tools/mcp_server.py registers its FastMCP tools from it.
# =============================================================================
class ToolName(str, Enum):
    LIST_ALL_CATS = "list_all_cats"
    GET_CAT_BY_ID = "get_cat_by_id"
    SEARCH_BY_BREED = "search_by_breed"
    GET_INDOOR_CATS = "get_indoor_cats"


@dataclass(frozen=True)
class ToolSpec:
    """Everything a client needs to know about one tool."""

    name: ToolName
    description: str
    properties: dict = field(default_factory=dict)
    required: tuple[str, ...] = ()

    @property
    def input_schema(self) -> dict:
        return {
            "type": "object",
            "properties": dict(self.properties),
            "required": list(self.required),
            "additionalProperties": False,
        }

    def describe(self) -> dict:
        return {
            "name": self.name.value,
            "description": self.description,
            "input_schema": self.input_schema,
        }


TOOL_SPECS: dict[ToolName, ToolSpec] = {
    ToolName.LIST_ALL_CATS: ToolSpec(
        name=ToolName.LIST_ALL_CATS,
        description=(
            "Get a list of all cats. Returns {\"result\": [cat, ...]}; each cat has "
            "id, name, age, breed, color, is_indoor and favorite_toy."
        ),
    ),
    ToolName.GET_CAT_BY_ID: ToolSpec(
        name=ToolName.GET_CAT_BY_ID,
        description=(
            "Get information about a specific cat by ID. Returns {\"result\": cat}, "
            "or a not_found error if no cat has this ID."
        ),
        properties={"id": {"type": "integer", "minimum": 0, "description": "Cat ID"}},
        required=("id",),
    ),
    ToolName.SEARCH_BY_BREED: ToolSpec(
        name=ToolName.SEARCH_BY_BREED,
        description=(
            "Search for cats by breed (case-insensitive substring match; an empty "
            "string matches every cat). Returns {\"result\": [cat, ...]}, possibly empty."
        ),
        properties={"breed": {"type": "string", "description": "Breed to search for"}},
        required=("breed",),
    ),
    ToolName.GET_INDOOR_CATS: ToolSpec(
        name=ToolName.GET_INDOOR_CATS,
        description="Get only indoor cats. Returns {\"result\": [cat, ...]}.",
    ),
}


# =============================================================================
# Argument checking
# =============================================================================
def _require_int(arguments: Mapping[str, Any], key: str) -> int:
    if key not in arguments:
        raise InvalidArgumentsError(f"'{key}' is required: expected a non-negative integer")
    value = arguments[key]
    # bool is a subclass of int; True is not a cat id.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentsError(
            f"'{key}' must be a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise InvalidArgumentsError(f"'{key}' must be a non-negative integer, got {value}")
    return value


def _require_str(arguments: Mapping[str, Any], key: str) -> str:
    if key not in arguments:
        raise InvalidArgumentsError(f"'{key}' is required: expected a string")
    value = arguments[key]
    if not isinstance(value, str):
        raise InvalidArgumentsError(
            f"'{key}' must be a string, got {type(value).__name__} {value!r}"
        )
    return value


_ARGUMENT_CHECKS: dict[ToolName, Callable[[Mapping[str, Any]], dict]] = {
    ToolName.LIST_ALL_CATS: lambda arguments: {},
    ToolName.GET_CAT_BY_ID: lambda arguments: {"cat_id": _require_int(arguments, "id")},
    ToolName.SEARCH_BY_BREED: lambda arguments: {"breed": _require_str(arguments, "breed")},
    ToolName.GET_INDOOR_CATS: lambda arguments: {},
}


def _serialize(cats: list[Cat]) -> list[dict]:
    return [asdict(cat) for cat in cats]


# =============================================================================
# The router
# =============================================================================
class CatToolRouter:
    """Dispatch tool calls by name onto the query engine.

    The router holds a reference to one CatDataset and never changes it.
    It keeps no per-request state, so concurrent calls are safe.
    """

    def __init__(self, dataset: CatDataset) -> None:
        self._dataset = dataset
        self._handlers: dict[ToolName, Callable[..., dict | list[dict]]] = {
            ToolName.LIST_ALL_CATS: self._list_all_cats,
            ToolName.GET_CAT_BY_ID: self._get_cat_by_id,
            ToolName.SEARCH_BY_BREED: self._search_by_breed,
            ToolName.GET_INDOOR_CATS: self._get_indoor_cats,
        }

    @property
    def dataset(self) -> CatDataset:
        return self._dataset

    def list_tools(self) -> list[dict]:
        """The tool catalogue, in declaration order."""
        return [spec.describe() for spec in TOOL_SPECS.values()]

    def call(self, tool_name: str, arguments: Mapping[str, Any] | None = None) -> dict:
        """Run one tool call and return its response envelope.

        Returns {"result": payload} on success and
        {"error": {"kind": ..., "message": ...}} for unknown tools, bad
        arguments and unknown cat ids.
        """
        try:
            return {"result": self.dispatch(tool_name, arguments)}
        except ToolRouterError as exc:
            return exc.to_envelope()

    def dispatch(
        self, tool_name: str, arguments: Mapping[str, Any] | None = None
    ) -> dict | list[dict]:
        """Like call(), but raises ToolRouterError instead of wrapping it."""
        tool, checked = self.validate(tool_name, arguments)
        return self._handlers[tool](**checked)

    def validate(
        self, tool_name: str, arguments: Mapping[str, Any] | None = None
    ) -> tuple[ToolName, dict]:
        """Resolve the tool and check its arguments without running it.

        Returns the tool and its checked arguments as handler keywords.
        Raises UnknownToolError or InvalidArgumentsError.
        """
        tool = self._resolve(tool_name)
        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, Mapping):
            raise InvalidArgumentsError(
                f"Arguments for '{tool.value}' must be an object, got {type(arguments).__name__}"
            )
        unexpected = sorted(str(key) for key in arguments if key not in TOOL_SPECS[tool].properties)
        if unexpected:
            raise InvalidArgumentsError(
                f"Unexpected argument(s) for '{tool.value}': {', '.join(unexpected)}"
            )
        return tool, _ARGUMENT_CHECKS[tool](arguments)

    @staticmethod
    def _resolve(tool_name: str) -> ToolName:
        try:
            return ToolName(tool_name)
        except ValueError:
            known = ", ".join(name.value for name in ToolName)
            raise UnknownToolError(f"Unknown tool: {tool_name!r} (available: {known})") from None

    # --- handlers: checked arguments in, JSON-ready payload out ---

    def _list_all_cats(self) -> list[dict]:
        return _serialize(queries.list_all(self._dataset))

    def _get_cat_by_id(self, cat_id: int) -> dict:
        cat = queries.get_by_id(self._dataset, cat_id)
        if cat is None:
            raise CatNotFoundError(f"Cat with ID {cat_id} not found")
        return asdict(cat)

    def _search_by_breed(self, breed: str) -> list[dict]:
        return _serialize(queries.search_by_breed(self._dataset, breed))

    def _get_indoor_cats(self) -> list[dict]:
        return _serialize(queries.get_indoor(self._dataset))
