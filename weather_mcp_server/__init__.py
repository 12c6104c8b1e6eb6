"""
Weather MCP Server

Exposes National Weather Service lookups (current conditions, daily and
hourly forecast, grid point resolution, ZIP code geocoding) as MCP tools for
LLM clients.

Modules:
    - tool_base: Tool contract and BaseTool request pipeline
    - tool_registry: discovery and name-keyed registry of tools
    - weather_server: dispatcher and MCP stdio server
    - tools: the weather tool implementations
    - errors: error hierarchy
    - config: environment configuration and logging setup
    - http: aiohttp-backed fetch injected into tools
"""

__version__ = "0.1.0"

from .errors import (
    ConfigurationError,
    DuplicateToolError,
    ToolDispatchError,
    ToolNotFoundError,
    ToolNotInstantiatedError,
    ToolsNotLoadedError,
    ToolValidationError,
    UpstreamServiceError,
    WeatherServerError,
)
from .tool_base import BaseTool, Tool
from .tool_registry import ToolRegistry

__all__ = [
    "BaseTool",
    "ConfigurationError",
    "DuplicateToolError",
    "Tool",
    "ToolDispatchError",
    "ToolNotFoundError",
    "ToolNotInstantiatedError",
    "ToolRegistry",
    "ToolValidationError",
    "ToolsNotLoadedError",
    "UpstreamServiceError",
    "WeatherServerError",
]
