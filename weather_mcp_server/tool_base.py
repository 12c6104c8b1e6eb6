"""
Tool contract and base template.

Tool declares what every MCP tool exposes. BaseTool supplies the uniform
request pipeline (validate, run the workflow, turn validation errors into a
text response) and the HTTP helpers shared by the weather tools. Concrete
tools only provide identity, schema, validation and workflow.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from . import config
from .errors import ToolValidationError, UpstreamServiceError
from .http import Fetch, aiohttp_fetch

logger = logging.getLogger(__name__)

ToolParams = Dict[str, Any]
ToolResult = Dict[str, List[Dict[str, Any]]]


def text_result(text: str, annotations: Optional[Dict[str, Any]] = None) -> ToolResult:
    """Wrap text in the single-block result shape returned by every tool."""
    block: Dict[str, Any] = {"type": "text", "text": text}
    if annotations is not None:
        block["annotations"] = annotations
    return {"content": [block]}


class Tool(ABC):
    """Capability set the registry and dispatcher rely on."""

    @abstractmethod
    def get_name(self) -> str:
        """Stable identifier; registry key and protocol-visible tool name."""
        raise NotImplementedError("Method 'get_name()' must be implemented.")

    @abstractmethod
    def get_description(self) -> str:
        """Usage guidance for the calling model."""
        raise NotImplementedError("Method 'get_description()' must be implemented.")

    @abstractmethod
    def get_input_schema(self) -> Dict[str, Any]:
        """JSON schema of the tool arguments."""
        raise NotImplementedError("Method 'get_input_schema()' must be implemented.")

    @abstractmethod
    def validate_with_defaults(self, params: ToolParams) -> ToolParams:
        """
        Apply defaults and check every argument.

        Args:
            params: Raw arguments from the caller

        Returns:
            Normalized arguments

        Raises:
            ToolValidationError: If an argument is missing or invalid
        """
        raise NotImplementedError(
            "Method 'validate_with_defaults(params)' must be implemented."
        )

    @abstractmethod
    async def process_tool_workflow(self, params: ToolParams) -> ToolResult:
        """Run the tool on already validated arguments."""
        raise NotImplementedError(
            "Method 'process_tool_workflow(params)' must be implemented."
        )

    @abstractmethod
    async def handle_request(self, request: Dict[str, Any]) -> ToolResult:
        """Entry point used by the dispatcher: {"params": {...}} in, result out."""
        raise NotImplementedError("Method 'handle_request(request)' must be implemented.")

    def get_tool_config(self) -> Dict[str, Any]:
        """Tool description advertised by list_tools."""
        return {
            "name": self.get_name(),
            "description": self.get_description(),
            "inputSchema": self.get_input_schema(),
        }


class BaseTool(Tool):
    """
    Default request pipeline for tools.

    Args:
        fetch: Async HTTP GET used for every outbound call. Defaults to
            aiohttp_fetch; tests pass a fake.
    """

    def __init__(self, fetch: Optional[Fetch] = None):
        self.fetch = fetch or aiohttp_fetch

    async def handle_request(self, request: Dict[str, Any]) -> ToolResult:
        try:
            params = self.validate_with_defaults(request.get("params") or {})
        except ToolValidationError as e:
            logger.warning(f"Tool '{self.get_name()}' input validation failed: {e}")
            return text_result(str(e))
        return await self.process_tool_workflow(params)

    def get_user_agent_header_text(self) -> str:
        """
        User-Agent value for outbound requests.

        Raises:
            ConfigurationError: If APP_NAME or APP_EMAIL is not configured.
                Raised before any request is sent.
        """
        return config.get_user_agent()

    async def fetch_json(self, url: str, description: str) -> Any:
        """
        GET a URL with the User-Agent header and return the decoded body.

        Args:
            url: Absolute URL to fetch
            description: What is fetched, used in the error message

        Raises:
            UpstreamServiceError: If the response status is not a success
        """
        headers = {"User-Agent": self.get_user_agent_header_text()}
        logger.debug(f"Fetching {description} from {url}")
        response = await self.fetch(url, headers=headers)
        if not response.ok:
            raise UpstreamServiceError(
                f"Error fetching {description}: {response.status}",
                status=response.status,
            )
        return response.payload
