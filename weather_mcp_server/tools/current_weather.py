"""Current observed weather for a National Weather Service grid point."""

import json
import logging
from textwrap import dedent
from typing import Any, Dict

from ..errors import UpstreamServiceError
from ..tool_base import BaseTool, ToolParams, ToolResult, text_result
from .common import require_properties, validate_grid_point_url

logger = logging.getLogger(__name__)

OBSERVATION_STATIONS_URL = "{grid_point_url}/stations?limit=1"
LATEST_OBSERVATION_URL = "https://api.weather.gov/stations/{station_id}/observations/latest"

# Observation fields reported as {"value": ..., "unit": ...}
MEASUREMENTS = (
    "temperature",
    "windSpeed",
    "windDirection",
    "visibility",
    "precipitationLastHour",
    "relativeHumidity",
)


class CurrentWeather(BaseTool):
    def get_name(self) -> str:
        return "current-weather"

    def get_description(self) -> str:
        return dedent(
            """
            Get the current weather for a specific location using a grid point URL.
            System Prompt:
            - Always ask the user for the 'gridPointUrl' parameter if it is not provided. Avoid inferring or making up values.
            - If the parameter is not a valid grid point URL, ask the user to provide a valid grid point URL.
            - Use 'daily-forecast-weather' tool if user wants the weather forecast instead of the current weather.
            - Use 'hourly-forecast-weather' tool if user wants the hourly (explicitly stated) forecast instead of the current weather.
            Parameters:
            - 'gridPointUrl': a valid grid point URL from the National Weather Service API. If not provided, it will be requested from the user.
            """
        ).strip()

    def get_input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "gridPointUrl": {"type": "string"},
            },
            "required": ["gridPointUrl"],
        }

    def validate_with_defaults(self, params: ToolParams) -> ToolParams:
        return {"gridPointUrl": validate_grid_point_url(params.get("gridPointUrl"))}

    async def process_tool_workflow(self, params: ToolParams) -> ToolResult:
        weather = await self.get_current_weather(params["gridPointUrl"])
        return text_result(json.dumps(weather))

    async def get_current_weather(self, grid_point_url: str) -> Dict[str, Any]:
        """
        Fetch the latest observation from the station closest to a grid point.

        Args:
            grid_point_url: Validated api.weather.gov grid point URL

        Returns:
            Measurements with units, text description and observation timestamp
        """
        stations_data = await self.fetch_json(
            OBSERVATION_STATIONS_URL.format(grid_point_url=grid_point_url), "stations"
        )
        features = stations_data.get("features") if isinstance(stations_data, dict) else None
        if not isinstance(features, list) or not features:
            raise UpstreamServiceError("No observation stations found in the response")

        station = features[0] if isinstance(features[0], dict) else {}
        station_id = (station.get("properties") or {}).get("stationIdentifier")
        if not station_id:
            raise UpstreamServiceError(
                f"No valid stationIdentifier found in the response: {station_id}"
            )
        logger.info(f"Using observation station {station_id} for {grid_point_url}")

        observations_data = await self.fetch_json(
            LATEST_OBSERVATION_URL.format(station_id=station_id), "observations"
        )
        observation = require_properties(observations_data, "observations")

        weather: Dict[str, Any] = {}
        for field in MEASUREMENTS:
            measurement = observation.get(field)
            if not isinstance(measurement, dict):
                raise UpstreamServiceError(f"Missing '{field}' in observations response")
            weather[field] = {
                "value": measurement.get("value"),
                "unit": measurement.get("unitCode"),
            }
        # No precipitation is reported as null
        weather["precipitationLastHour"]["value"] = (
            weather["precipitationLastHour"]["value"] or 0
        )
        weather["textDescription"] = observation.get("textDescription")
        weather["timestamp"] = observation.get("timestamp")
        return weather
