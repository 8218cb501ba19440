"""
MCP server for testdoc.

Exposes the doc-test pipeline as two tools over stdio:
- extract_doc_examples: list the @example blocks found under some paths
- run_doc_tests: run them and return a report plus JSON results

stdout carries the protocol, so logging goes to stderr.
"""


from __future__ import annotations

import asyncio
import logging
import sys

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent

from . import __version__
from .handlers.core import HANDLERS, TOOLS

logger = logging.getLogger(__name__)

server = Server("testdoc")


# =============================================================================
# Tool Router
# =============================================================================

@server.list_tools()
async def list_tools():
    """List the doc-test tools."""
    return TOOLS


@server.call_tool()
async def call_tool(name: str, arguments: dict | None) -> list[TextContent]:
    """Dispatch a tool call to its handler."""
    logger.info(f"Tool called: {name}")

    handler = HANDLERS.get(name)
    if handler is None:
        logger.warning(f"Unknown tool requested: {name}")
        return [TextContent(type="text", text=f"Unknown tool: {name}")]

    # Clients may omit arguments entirely
    return await handler(arguments or {})


# =============================================================================
# Entry Point
# =============================================================================

async def run_server():
    """Serve over stdio until the client disconnects."""
    logger.info(f"Starting testdoc MCP server v{__version__}")
    logger.info(f"Registered tools: {[t.name for t in TOOLS]}")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Entry point for the testdoc-mcp script."""
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
