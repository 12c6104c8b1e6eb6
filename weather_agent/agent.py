"""
ADK agent answering weather questions through the Weather MCP Server.

The agent starts the server as a subprocess and talks to it over stdio via an
MCPToolset, so the model sees exactly the tools advertised by list_tools.
"""

import logging
import os
import shlex
import sys
from typing import List

from google.adk.agents import LlmAgent
from google.adk.agents.callback_context import CallbackContext
from google.adk.models import LlmRequest, LlmResponse
from google.adk.tools.mcp_tool.mcp_toolset import (
    MCPToolset,
    StdioConnectionParams,
    StdioServerParameters,
)

from weather_mcp_server.config import get_app_email, get_app_name

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"
SERVER_TIMEOUT_SECONDS = 15


def log_query_to_model(callback_context: CallbackContext, llm_request: LlmRequest):
    if llm_request.contents and llm_request.contents[-1].role == "user":
        for part in llm_request.contents[-1].parts or []:
            if part.text:
                logger.info("[query to %s]: %s", callback_context.agent_name, part.text)


def log_model_response(callback_context: CallbackContext, llm_response: LlmResponse):
    if llm_response.content and llm_response.content.parts:
        for part in llm_response.content.parts:
            if part.text:
                logger.info("[response from %s]: %s", callback_context.agent_name, part.text)
            elif part.function_call:
                logger.info(
                    "[function call from %s]: %s",
                    callback_context.agent_name,
                    part.function_call.name,
                )


def get_server_command() -> List[str]:
    """Command line that launches the MCP server, from WEATHER_SERVER_COMMAND if set."""
    command = os.getenv("WEATHER_SERVER_COMMAND")
    if command:
        return shlex.split(command)
    return [sys.executable, "-m", "weather_mcp_server.weather_server"]


def build_weather_toolset() -> MCPToolset:
    command, *args = get_server_command()
    # The server needs APP_NAME/APP_EMAIL for its User-Agent header
    env = {
        key: value
        for key, value in (("APP_NAME", get_app_name()), ("APP_EMAIL", get_app_email()))
        if value
    }
    return MCPToolset(
        connection_params=StdioConnectionParams(
            server_params=StdioServerParameters(command=command, args=args, env=env or None),
            timeout=SERVER_TIMEOUT_SECONDS,
        ),
    )


root_agent = LlmAgent(
    model=os.getenv("MODEL") or DEFAULT_MODEL,
    name="weather_agent",
    description="Answers questions about current weather and forecasts in the United States.",
    instruction="""You are a weather assistant for locations in the United States.

## HOW TO FIND WEATHER DATA
1. If the user gives a ZIP code, use 'zipcode-to-geocode' to get coordinates
2. Use 'get-grid-point-url' with the coordinates to get a grid point URL
3. Use 'current-weather', 'daily-forecast-weather' or 'hourly-forecast-weather'
   with that grid point URL

## RULES
- Never invent a ZIP code, coordinates or grid point URL. Ask the user instead.
- If a tool answers that an input is invalid, ask the user for a corrected value.
- Summarize the data in plain language; do not output raw JSON.
""",
    before_model_callback=log_query_to_model,
    after_model_callback=log_model_response,
    tools=[build_weather_toolset()],
)
