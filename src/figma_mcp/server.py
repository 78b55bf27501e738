#!/usr/bin/env python3
"""
MCP server exposing the Figma REST API as read-only tools over stdio.

Usage:
    figma-mcp-server [--config=<path>] [--log-level=INFO] [--max-response-bytes=N]

The access token is read from ``mcpServers.figma.env.FIGMA_ACCESS_TOKEN`` in
the config file, or from the ``FIGMA_ACCESS_TOKEN`` environment variable.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Sequence

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool

from figma_mcp import __version__
from figma_mcp.config import (
    ConfigError,
    load_access_token,
    load_max_response_bytes,
    mask_token,
)
from figma_mcp.dispatcher import DEFAULT_MAX_RESPONSE_BYTES, ToolDispatcher
from figma_mcp.figma_client import FigmaClient

SERVER_NAME = "figma-mcp-server"

logger = logging.getLogger("figma_mcp")


# ---------------------------------------------------------------------------
# Logging: ALL output goes to stderr to avoid polluting the MCP stdio transport
# ---------------------------------------------------------------------------

def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Figma MCP server")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to an MCP host config JSON holding mcpServers.figma.env.FIGMA_ACCESS_TOKEN",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level written to stderr (default: INFO)",
    )
    parser.add_argument(
        "--max-response-bytes",
        type=int,
        default=None,
        help="Largest get_file_info response returned before asking for a smaller query",
    )
    # parse_known_args so that arguments added by MCP hosts don't cause errors
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        logger.debug("Ignoring unknown arguments: %s", unknown)
    return args


# ---------------------------------------------------------------------------
# MCP server instance
# ---------------------------------------------------------------------------

def create_server(dispatcher: ToolDispatcher) -> Server:
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return dispatcher.list_tools()

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await dispatcher.call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(result)

    # Installed directly: the call_tool() decorator turns McpError into an isError result,
    # but unknown tools and bad arguments must reach the client as JSON-RPC errors.
    server.request_handlers[types.CallToolRequest] = call_tool

    return server


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

async def serve(access_token: str, max_response_bytes: int = DEFAULT_MAX_RESPONSE_BYTES) -> None:
    async with FigmaClient(access_token) as client:
        dispatcher = ToolDispatcher(client, max_response_bytes=max_response_bytes)
        server = create_server(dispatcher)

        async with stdio_server() as (read_stream, write_stream):
            logger.info("Figma MCP server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        access_token = load_access_token(args.config)
        max_response_bytes = load_max_response_bytes(
            args.max_response_bytes, DEFAULT_MAX_RESPONSE_BYTES
        )
    except ConfigError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    logger.info("Access token found: %s", mask_token(access_token))

    try:
        asyncio.run(serve(access_token, max_response_bytes))
    except KeyboardInterrupt:
        logger.info("Shutting down server")


if __name__ == "__main__":
    main()
