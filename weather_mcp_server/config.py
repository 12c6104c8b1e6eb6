"""
Environment configuration for the Weather MCP Server.

Values are read from the process environment at call time. A local .env file
is loaded once on import through python-dotenv, without overriding variables
that are already set.
"""

import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

# Load environment variables
load_dotenv()

DEFAULT_APP_NAME = "weather-mcp-server"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0


def get_app_name() -> Optional[str]:
    return os.getenv("APP_NAME") or None


def get_app_email() -> Optional[str]:
    return os.getenv("APP_EMAIL") or None


def get_server_name() -> str:
    """Name advertised by the MCP server during the handshake."""
    return get_app_name() or DEFAULT_APP_NAME


def get_user_agent() -> str:
    """
    Build the User-Agent value required by api.weather.gov.

    Returns:
        "<APP_NAME> (<APP_EMAIL>)"

    Raises:
        ConfigurationError: If APP_NAME or APP_EMAIL is not set.
    """
    app_name = get_app_name()
    app_email = get_app_email()
    missing = [
        name
        for name, value in (("APP_NAME", app_name), ("APP_EMAIL", app_email))
        if not value
    ]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variable(s): {', '.join(missing)}. "
            "Set them to identify this application to the weather API."
        )
    return f"{app_name} ({app_email})"


def get_http_timeout() -> float:
    """Total deadline in seconds applied to every outbound HTTP request."""
    raw = os.getenv("WEATHER_HTTP_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_HTTP_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(
            f"WEATHER_HTTP_TIMEOUT_SECONDS must be a number, got {raw!r}"
        ) from None
    if timeout <= 0:
        raise ConfigurationError(
            f"WEATHER_HTTP_TIMEOUT_SECONDS must be positive, got {raw!r}"
        )
    return timeout


def get_log_level() -> str:
    return (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def configure_logging() -> None:
    """
    Configure root logging on stderr.

    stdout carries the MCP stdio stream, so log records must never go there.
    """
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
