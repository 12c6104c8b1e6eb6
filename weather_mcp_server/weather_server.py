"""
MCP Server for Weather Tools

Exposes the tools discovered by ToolRegistry via Model Context Protocol (MCP)
over stdio. ToolDispatcher holds the list/call logic; the handlers registered
on the low-level mcp Server only translate between it and MCP types.
"""

import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

# MCP Server Imports
from mcp import types as mcp_types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.models import InitializationOptions
import mcp.server.stdio

from . import __version__
from .config import configure_logging, get_server_name
from .errors import ToolNotFoundError, ToolNotInstantiatedError
from .tool_base import ToolResult
from .tool_registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Translates list/call requests into registry lookups."""

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def list_tools(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "tools": [tool.get_tool_config() for tool in self.registry.get_tools_sync().values()]
        }

    async def call_tool(
        self, name: str, arguments: Optional[Dict[str, Any]]
    ) -> ToolResult:
        """
        Run a tool by name.

        Args:
            name: Registered tool name
            arguments: Tool arguments; None is rejected

        Returns:
            The tool's handle_request result, unchanged

        Raises:
            ToolNotFoundError: If the name is unknown or arguments are missing
            ToolNotInstantiatedError: If the name maps to no instance
        """
        tools = self.registry.get_tools_sync()

        # The mcp server passes `arguments or {}`, so None only arrives from direct callers
        if name not in tools or arguments is None:
            error = ToolNotFoundError(name)
            logger.error(str(error))
            raise error

        tool = tools[name]
        if not tool:
            error = ToolNotInstantiatedError(name)
            logger.error(str(error))
            raise error

        logger.info(f"Calling tool '{name}'")
        return await tool.handle_request({"params": arguments})


# --- Tool registry and dispatcher ---
registry = ToolRegistry()
dispatcher = ToolDispatcher(registry)

# --- MCP Server Setup ---
app = Server(get_server_name())


@app.list_tools()
async def list_mcp_tools() -> List[mcp_types.Tool]:
    """
    MCP handler to list all available weather tools.

    Returns:
        List of MCP Tool schemas
    """
    return [
        mcp_types.Tool(
            name=config["name"],
            description=config["description"],
            inputSchema=config["inputSchema"],
        )
        for config in dispatcher.list_tools()["tools"]
    ]


# Input validation happens in the tools so the model gets a readable message
@app.call_tool(validate_input=False)
async def call_mcp_tool(name: str, arguments: Dict[str, Any]) -> List[mcp_types.TextContent]:
    """
    MCP handler to execute a weather tool call.

    Args:
        name: Tool name to execute
        arguments: Dictionary of arguments for the tool

    Returns:
        List of MCP TextContent blocks with the tool result
    """
    result = await dispatcher.call_tool(name, arguments)
    return [
        mcp_types.TextContent(
            type="text", text=block["text"], annotations=block.get("annotations")
        )
        for block in result["content"]
    ]


# --- MCP Server Runner ---
async def run_mcp_stdio_server():
    """
    Loads the tools and runs the MCP server over standard input/output.
    """
    await registry.load_tools()

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.info(
            f"MCP Server running on stdio with tools: {', '.join(registry.get_tools_sync())}"
        )
        await app.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=app.name,
                server_version=__version__,
                capabilities=app.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )
        logger.info("MCP Stdio Server: Run loop finished or client disconnected.")


def main():
    """
    Main entry point for the Weather MCP Server.
    """
    configure_logging()
    logger.info("Launching Weather MCP Server via stdio...")
    try:
        asyncio.run(run_mcp_stdio_server())
    except KeyboardInterrupt:
        logger.info("Weather MCP Server stopped by user.")
    except Exception:
        logger.exception("Fatal error while running Weather MCP Server")
        sys.exit(1)
    finally:
        logger.info("Weather MCP Server process exiting.")


if __name__ == "__main__":
    main()
