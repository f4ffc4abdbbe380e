"""MCP server exposing the app publishing tools over stdio."""

from __future__ import annotations

import logging

from claude_agent_sdk import create_sdk_mcp_server

from app_publisher.config import Settings
from app_publisher.tools import create_tools

log = logging.getLogger("app_publisher.server")

SERVER_NAME = "app-publisher"
SERVER_VERSION = "0.1.0"


def create_app_publisher_server(settings: Settings):
    """Bundle every tool into an in-process SDK MCP server config.

    The returned config can be passed straight to a Claude Agent SDK client,
    or its ``instance`` served over stdio with :func:`serve`.
    """
    tools = create_tools(settings)
    log.debug("Registering %d tools", len(tools))
    return create_sdk_mcp_server(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        tools=tools,
    )


async def serve(settings: Settings) -> None:
    """Run the server on stdin/stdout until the client disconnects."""
    from mcp.server.stdio import stdio_server

    server = create_app_publisher_server(settings)["instance"]
    log.info("Starting %s %s on stdio", SERVER_NAME, SERVER_VERSION)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
