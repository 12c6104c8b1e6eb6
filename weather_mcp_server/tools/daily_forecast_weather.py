"""Daily (day and night) forecast for a National Weather Service grid point."""

import json
from textwrap import dedent
from typing import Any, Dict, List

from ..tool_base import BaseTool, ToolParams, ToolResult, text_result
from .common import (
    format_precipitation_probability,
    require_properties,
    validate_grid_point_url,
)

FORECAST_URL = "{grid_point_url}/forecast?units=us"


class DailyForecastWeather(BaseTool):
    def get_name(self) -> str:
        return "daily-forecast-weather"

    def get_description(self) -> str:
        return dedent(
            """
            Get the daily weather forecast (including break down for day and night) for a specific grid point using a grid point URL.
            The weather forecast data can be used to provide detailed weather information for the next seven days.
            System Prompt:
            - Always ask the user for the 'gridPointUrl' parameter if it is not provided. Avoid inferring or making up values.
            - If the parameter is not a valid grid point URL, ask the user to provide a valid grid point URL.
            - Use 'current-weather' tool if user wants the current weather instead of the forecast.
            - This tool provides a daily forecast, which includes both day and night weather conditions.
            - This tool is specifically designed to provide a daily forecast, not an hourly forecast.
            - This tool is the default forecast tool unless the user specifies explicitly they want an hourly forecast.
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
        forecast = await self.get_forecast_daily(params["gridPointUrl"])
        return text_result(json.dumps(forecast), annotations={"includeInContext": False})

    async def get_forecast_daily(self, grid_point_url: str) -> List[Dict[str, Any]]:
        forecast_data = await self.fetch_json(
            FORECAST_URL.format(grid_point_url=grid_point_url), "forecast data"
        )
        periods = require_properties(forecast_data, "forecast").get("periods") or []

        return [
            {
                "name": half_day.get("name"),
                "valid": {
                    "startTime": half_day.get("startTime"),
                    "endTime": half_day.get("endTime"),
                },
                "isDaytime": half_day.get("isDaytime"),
                "shortForecast": half_day.get("shortForecast"),
                "temperature": half_day.get("temperature"),
                "temperatureUnit": half_day.get("temperatureUnit"),
                "probabilityOfPrecipitation": format_precipitation_probability(
                    half_day.get("probabilityOfPrecipitation")
                ),
                "windSpeed": half_day.get("windSpeed"),
                "windDirection": half_day.get("windDirection"),
            }
            for half_day in periods
        ]
