"""Resolve latitude/longitude to a National Weather Service grid point URL."""

from textwrap import dedent
from typing import Any, Dict

from ..errors import ToolValidationError, UpstreamServiceError
from ..tool_base import BaseTool, ToolParams, ToolResult, text_result
from .common import is_number, require_properties

POINTS_URL = "https://api.weather.gov/points/{latitude},{longitude}"


class GridPointUrl(BaseTool):
    def get_name(self) -> str:
        return "get-grid-point-url"

    def get_description(self) -> str:
        return dedent(
            """
            Generate a URL for a specific grid point using latitude and longitude. This URL can be used to access weather data for that grid point.
            System Prompt:
            - Always ask the user for the 'latitude' and 'longitude' parameters if they are not provided. Avoid inferring or making up values.
            - If the parameters are not valid coordinates, ask the user to provide valid latitude and longitude values.
            Parameters:
            - 'latitude': a valid latitude coordinate (between -90 and 90).
            - 'longitude': a valid longitude coordinate (between -180 and 180).
            """
        ).strip()

    def get_input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "latitude": {"type": "number"},
                "longitude": {"type": "number"},
            },
            "required": ["latitude", "longitude"],
        }

    def validate_with_defaults(self, params: ToolParams) -> ToolParams:
        latitude = params.get("latitude")
        longitude = params.get("longitude")

        if not (
            is_number(latitude)
            and -90 <= latitude <= 90
            and is_number(longitude)
            and -180 <= longitude <= 180
        ):
            raise ToolValidationError(
                f"Invalid coordinates: Latitude {latitude}, Longitude {longitude}. "
                "Ask user for valid coordinates."
            )

        return {"latitude": latitude, "longitude": longitude}

    async def process_tool_workflow(self, params: ToolParams) -> ToolResult:
        latitude = params["latitude"]
        longitude = params["longitude"]

        grid_point_url = await self.get_grid_point_url(latitude, longitude)

        return text_result(
            f"URL to access weather data for grid point at "
            f"Latitude {latitude}, Longitude {longitude}: {grid_point_url}"
        )

    async def get_grid_point_url(self, latitude: float, longitude: float) -> str:
        point_data = await self.fetch_json(
            POINTS_URL.format(latitude=latitude, longitude=longitude), "point data"
        )
        grid_point_url = require_properties(point_data, "point").get("forecastGridData")
        if not grid_point_url:
            raise UpstreamServiceError("Missing 'forecastGridData' in point response")
        return grid_point_url
