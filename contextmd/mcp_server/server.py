"""MCP server exposing background-context retrieval tools over stdio."""

import asyncio
import json
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from contextmd.service.context_service import ContextService
from contextmd.service.factory import create_context_service

logger = logging.getLogger(__name__)

SERVER_NAME = "contextmd"

TOOLS = [
    Tool(
        name="query_context",
        description="Return excerpts of the user's background document relevant to a message.",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "The user's chat message"},
            },
            "required": ["query"],
        },
    ),
    Tool(
        name="refresh_context",
        description="Reload the background document from disk.",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="context_stats",
        description="Report whether background context is available and how it is chunked.",
        inputSchema={"type": "object", "properties": {}},
    ),
]


async def handle_query_context(service: ContextService, arguments: dict) -> list[TextContent]:
    query = arguments.get("query")
    if not isinstance(query, str):
        return [TextContent(type="text", text=json.dumps({"error": "invalid_query"}))]

    prompt = service.query_context(query)
    if prompt is None:
        return [TextContent(type="text", text=json.dumps({"error": "no_context"}))]
    return [TextContent(type="text", text=prompt)]


async def handle_refresh_context(service: ContextService, arguments: dict) -> list[TextContent]:
    available = service.refresh()
    return [TextContent(type="text", text=json.dumps({"available": available}))]


async def handle_context_stats(service: ContextService, arguments: dict) -> list[TextContent]:
    payload = service.stats().to_dict()
    payload["path"] = service.context_file_path
    return [TextContent(type="text", text=json.dumps(payload))]


HANDLERS = {
    "query_context": handle_query_context,
    "refresh_context": handle_refresh_context,
    "context_stats": handle_context_stats,
}


async def dispatch(service: ContextService, name: str, arguments: dict | None) -> list[TextContent]:
    handler = HANDLERS.get(name)
    if handler is None:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]
    return await handler(service, arguments or {})


def create_server(service: ContextService) -> Server:
    """Build an MCP server bound to ``service``."""
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return TOOLS

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        return await dispatch(service, name, arguments)

    return server


async def main():
    service = create_context_service()
    service.initialize()
    server = create_server(service)
    logger.info("Serving context from %s", service.context_file_path)
    try:
        async with stdio_server() as (read, write):
            await server.run(read, write, server.create_initialization_options())
    finally:
        service.cleanup()


if __name__ == "__main__":
    asyncio.run(main())
