"""
Routes ``tools/call`` requests to the Figma client and shapes the replies.

Two kinds of failure leave this module. Problems with the request itself
(unknown tool, bad arguments, a file too large to return) are raised as
``McpError`` and reach the client as JSON-RPC errors. Failures of the Figma
call are returned as an ``isError`` result so the agent can read them.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    METHOD_NOT_FOUND,
    CallToolResult,
    ErrorData,
    TextContent,
    Tool,
)

from figma_mcp.figma_client import FigmaClient
from figma_mcp.tools import CATALOG, TOOLS_BY_NAME, ToolDefinition, validate_arguments

logger = logging.getLogger("figma_mcp.dispatcher")

DEFAULT_MAX_RESPONSE_BYTES = 50 * 1024 * 1024


# ---------------------------------------------------------------------------
# Result helpers
# ---------------------------------------------------------------------------

def ok(text: str) -> CallToolResult:
    """Wrap serialized output in a single-entry result."""
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def err(msg: str) -> CallToolResult:
    """Wrap a failure message in a result flagged ``isError``."""
    return CallToolResult(content=[TextContent(type="text", text=msg)], isError=True)


def to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


class ResponseTooLarge(Exception):
    pass


class ToolDispatcher:
    """Validates and executes catalog tools against one ``FigmaClient``.

    Holds no per-call state, so concurrent calls need no locking.
    """

    def __init__(
        self,
        client: FigmaClient,
        max_response_bytes: int = DEFAULT_MAX_RESPONSE_BYTES,
    ) -> None:
        self._client = client
        self._max_response_bytes = max_response_bytes

    def list_tools(self) -> List[Tool]:
        return [definition.tool for definition in CATALOG]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        logger.info("Tool request: %s arguments=%s", name, arguments)

        definition = TOOLS_BY_NAME.get(name)
        if definition is None:
            logger.error("Unknown tool requested: %s", name)
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

        try:
            args = validate_arguments(definition, arguments)
        except McpError as exc:
            logger.error("Invalid arguments for %s (arguments=%s): %s", name, arguments, exc.error.message)
            raise

        try:
            payload = await definition.handler(self._client, args)
            text = self._serialize(definition, payload)
        except ResponseTooLarge as exc:
            logger.error("Response for %s (arguments=%s) too large: %s", name, arguments, exc)
            raise McpError(
                ErrorData(
                    code=INTERNAL_ERROR,
                    message=f"Response size too large. {self._size_hint(args)}",
                )
            ) from exc
        except McpError:
            raise
        except Exception as exc:
            logger.error(
                "Figma API error in %s (arguments=%s): %s: %s",
                name,
                arguments,
                type(exc).__name__,
                exc,
            )
            return err(f"Figma API error: {exc}")

        logger.debug("%s succeeded (%.2f MB)", name, len(text.encode("utf-8")) / (1024 * 1024))
        return ok(text)

    def _serialize(self, definition: ToolDefinition, payload: Any) -> str:
        if not definition.guard_size:
            return to_json(payload)

        try:
            text = to_json(payload)
        except (TypeError, ValueError, RecursionError) as exc:
            raise ResponseTooLarge(f"serialization failed: {exc}") from exc

        size = len(text.encode("utf-8"))
        if size > self._max_response_bytes:
            raise ResponseTooLarge(f"{size} bytes exceeds limit of {self._max_response_bytes}")
        return text

    @staticmethod
    def _size_hint(args: Any) -> str:
        if getattr(args, "node_id", None):
            return "Try requesting a child node instead."
        return "Try using a smaller depth value or specifying a node_id."
