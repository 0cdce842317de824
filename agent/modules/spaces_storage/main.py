"""Spaces storage module — MCP server on stdio."""

from __future__ import annotations

import asyncio
import logging
import sys

import structlog
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from modules.spaces_storage.client import SpacesClient
from modules.spaces_storage.tools import StorageTools
from shared.config import Settings, load_settings
from shared.schemas.tools import ErrorKind, ToolCall

SERVER_NAME = "do-storage-server"
SERVER_VERSION = "0.1.0"

ERROR_CODES = {
    ErrorKind.INVALID_PARAMS: types.INVALID_PARAMS,
    ErrorKind.METHOD_NOT_FOUND: types.METHOD_NOT_FOUND,
    ErrorKind.INTERNAL_ERROR: types.INTERNAL_ERROR,
}

logger = structlog.get_logger()


def configure_logging(level: str = "info") -> None:
    """Render JSON log lines to stderr; stdout carries the protocol."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def create_server(tools: StorageTools) -> Server:
    """Build the MCP server exposing ``tools``."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=t.name, description=t.description, inputSchema=t.input_schema())
            for t in tools.list_tools()
        ]

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await tools.execute(
            ToolCall(tool_name=req.params.name, arguments=req.params.arguments or {})
        )
        if not result.success:
            raise McpError(types.ErrorData(code=ERROR_CODES[result.error_kind], message=result.error))
        return types.ServerResult(
            types.CallToolResult(content=[types.TextContent(type="text", text=result.result)])
        )

    # Registered without the call_tool() decorator, which would turn failures
    # into isError results; callers get JSON-RPC errors with the mapped code.
    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def serve(settings: Settings) -> None:
    tools = StorageTools(SpacesClient.from_settings(settings))
    server = create_server(tools)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("server_running", transport="stdio", bucket=settings.do_spaces_bucket)
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("server_stopped", reason="interrupt")
        return
    logger.info("server_stopped", reason="eof")


if __name__ == "__main__":
    main()
