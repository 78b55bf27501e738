"""
Tool catalog for the Figma MCP server.

Each tool is one ``ToolDefinition``: the MCP ``Tool`` advertised by
``tools/list``, the argument record its handler receives, and the handler
itself. Arguments are checked against the tool's ``inputSchema`` and turned
into the record in a single step (``validate_arguments``), so handlers never
see raw JSON.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, ErrorData, Tool

from figma_mcp.figma_client import FigmaClient

# ---------------------------------------------------------------------------
# Argument records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ListFilesArgs:
    project_id: Optional[str] = None
    team_id: Optional[str] = None


@dataclass(frozen=True)
class FileKeyArgs:
    file_key: str


@dataclass(frozen=True)
class FileInfoArgs:
    file_key: str
    depth: Optional[int] = None
    node_id: Optional[str] = None


@dataclass(frozen=True)
class FileNodesArgs:
    file_key: str
    ids: Tuple[str, ...]


Handler = Callable[[FigmaClient, Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDefinition:
    tool: Tool
    args_type: type
    handler: Handler
    # Oversized output is reported as a protocol error with a hint instead of a tool error.
    guard_size: bool = False

    @property
    def name(self) -> str:
        return self.tool.name


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

async def _list_files(client: FigmaClient, args: ListFilesArgs) -> Any:
    return await client.list_files(project_id=args.project_id, team_id=args.team_id)


async def _get_file_versions(client: FigmaClient, args: FileKeyArgs) -> Any:
    return await client.get_file_versions(args.file_key)


async def _get_file_comments(client: FigmaClient, args: FileKeyArgs) -> Any:
    return await client.get_file_comments(args.file_key)


async def _get_file_info(client: FigmaClient, args: FileInfoArgs) -> Any:
    return await client.get_file_info(args.file_key, depth=args.depth, node_id=args.node_id)


async def _get_components(client: FigmaClient, args: FileKeyArgs) -> Any:
    return await client.get_components(args.file_key)


async def _get_styles(client: FigmaClient, args: FileKeyArgs) -> Any:
    return await client.get_styles(args.file_key)


async def _get_file_nodes(client: FigmaClient, args: FileNodesArgs) -> Any:
    return await client.get_file_nodes(args.file_key, list(args.ids))


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

_FILE_KEY = {"type": "string", "description": "Figma file key"}


def _file_key_only(name: str, description: str, handler: Handler) -> ToolDefinition:
    return ToolDefinition(
        tool=Tool(
            name=name,
            description=description,
            inputSchema={
                "type": "object",
                "properties": {"file_key": _FILE_KEY},
                "required": ["file_key"],
            },
        ),
        args_type=FileKeyArgs,
        handler=handler,
    )


CATALOG: Tuple[ToolDefinition, ...] = (
    ToolDefinition(
        tool=Tool(
            name="list_files",
            description="List files in a project or team",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_id": {
                        "type": "string",
                        "description": "Project ID to list files from",
                    },
                    "team_id": {
                        "type": "string",
                        "description": "Team ID to list files from",
                    },
                },
            },
        ),
        args_type=ListFilesArgs,
        handler=_list_files,
    ),
    _file_key_only(
        "get_file_versions",
        "Get version history of a Figma file",
        _get_file_versions,
    ),
    _file_key_only(
        "get_file_comments",
        "Get comments on a Figma file",
        _get_file_comments,
    ),
    ToolDefinition(
        tool=Tool(
            name="get_file_info",
            description="Get Figma file information",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_key": _FILE_KEY,
                    "depth": {
                        "type": "number",
                        "description": "Maximum depth to traverse the node tree (1-4 recommended)",
                        "minimum": 1,
                        "multipleOf": 1,
                    },
                    "node_id": {
                        "type": "string",
                        "description": "ID of a specific node to fetch",
                    },
                },
                "required": ["file_key"],
            },
        ),
        args_type=FileInfoArgs,
        handler=_get_file_info,
        guard_size=True,
    ),
    _file_key_only(
        "get_components",
        "Get components from a Figma file",
        _get_components,
    ),
    _file_key_only(
        "get_styles",
        "Get styles from a Figma file",
        _get_styles,
    ),
    ToolDefinition(
        tool=Tool(
            name="get_file_nodes",
            description="Get specific nodes from a Figma file",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_key": _FILE_KEY,
                    "ids": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Array of node IDs to retrieve",
                    },
                },
                "required": ["file_key", "ids"],
            },
        ),
        args_type=FileNodesArgs,
        handler=_get_file_nodes,
    ),
)

TOOLS_BY_NAME: Dict[str, ToolDefinition] = {d.name: d for d in CATALOG}


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _invalid(message: str) -> McpError:
    return McpError(ErrorData(code=INVALID_PARAMS, message=message))


def _is_type(value: Any, json_type: str) -> bool:
    if json_type == "string":
        return isinstance(value, str)
    if json_type == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if json_type == "array":
        return isinstance(value, list)
    if json_type == "object":
        return isinstance(value, dict)
    if json_type == "boolean":
        return isinstance(value, bool)
    return True


def _check_value(name: str, value: Any, schema: Dict[str, Any]) -> Any:
    json_type = schema.get("type")
    if json_type and not _is_type(value, json_type):
        raise _invalid(f"{name} must be a {json_type}")

    if json_type == "number" and schema.get("multipleOf") == 1:
        if value % 1:
            raise _invalid(f"{name} must be an integer")
        value = int(value)

    if json_type == "number" and "minimum" in schema and value < schema["minimum"]:
        raise _invalid(f"{name} must be >= {schema['minimum']}")

    if json_type == "array":
        item_type = (schema.get("items") or {}).get("type")
        if item_type:
            for item in value:
                if not _is_type(item, item_type):
                    raise _invalid(f"{name} must contain only {item_type} values")
        return tuple(value)

    return value


def validate_arguments(definition: ToolDefinition, arguments: Optional[Dict[str, Any]]) -> Any:
    """Check *arguments* against the tool's schema and build its argument record.

    Raises ``McpError`` with ``INVALID_PARAMS`` naming the offending field.
    Arguments the schema does not declare are ignored.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise _invalid("arguments must be an object")

    schema = definition.tool.inputSchema
    properties: Dict[str, Any] = schema.get("properties", {})
    required: List[str] = schema.get("required", [])

    for name in required:
        prop = properties.get(name, {})
        value = arguments.get(name)
        if prop.get("type") == "array":
            if not isinstance(value, list) or not value:
                raise _invalid(f"{name} array is required and must not be empty")
        elif value is None or value == "":
            raise _invalid(f"{name} is required")

    fields: Dict[str, Any] = {}
    for name, prop in properties.items():
        value = arguments.get(name)
        if value is None:
            continue
        fields[name] = _check_value(name, value, prop)

    return definition.args_type(**fields)
