"""
Error types for the Weather MCP Server.

Only ToolValidationError is recovered locally (by BaseTool.handle_request) and
turned into a text response for the calling model. Every other error here is
left to propagate to the MCP server, which reports it as a failed tool call.
"""

from typing import Optional


class WeatherServerError(Exception):
    """Base class for all errors raised by this package."""


class ToolValidationError(WeatherServerError):
    """
    Caller-supplied tool input was invalid.

    The message is returned verbatim to the model, so it should name the
    offending field and ask for a corrected value.
    """


class ConfigurationError(WeatherServerError):
    """A required environment setting is missing."""


class UpstreamServiceError(WeatherServerError):
    """A weather provider returned an error status or an unexpected payload."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ToolsNotLoadedError(WeatherServerError):
    """The tool registry was read before load_tools() completed."""


class DuplicateToolError(WeatherServerError):
    """Two tool implementations registered under the same name."""


class ToolDispatchError(WeatherServerError):
    """Base class for failures looking up or invoking a tool by name."""

    def __init__(self, message: str, tool_name: str):
        super().__init__(message)
        self.tool_name = tool_name


class ToolNotFoundError(ToolDispatchError):
    def __init__(self, tool_name: str):
        super().__init__(
            f'Tool "{tool_name}" not found or no arguments provided.', tool_name
        )


class ToolNotInstantiatedError(ToolDispatchError):
    def __init__(self, tool_name: str):
        super().__init__(f'Tool "{tool_name}" not instantiated.', tool_name)
