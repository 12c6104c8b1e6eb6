"""Hourly forecast for a National Weather Service grid point."""

import json
from textwrap import dedent
from typing import Any, Dict, List

from ..errors import ToolValidationError
from ..tool_base import BaseTool, ToolParams, ToolResult, text_result
from .common import (
    format_precipitation_probability,
    is_number,
    require_properties,
    validate_grid_point_url,
)

FORECAST_HOURLY_URL = "{grid_point_url}/forecast/hourly?units=us"

DEFAULT_FORECAST_HOURS = 24
MIN_FORECAST_HOURS = 1
# api.weather.gov publishes 6.5 days of hourly periods
MAX_FORECAST_HOURS = 156


class HourlyForecastWeather(BaseTool):
    def get_name(self) -> str:
        return "hourly-forecast-weather"

    def get_description(self) -> str:
        return dedent(
            """
            Get the hourly weather forecast for a specific grid point using a grid point URL.
            The weather forecast data can be used to provide detailed weather information for up to the next 6.5 days, but is limited by default to the next 24 hours
            System Prompt:
            - Always ask the user for the 'gridPointUrl' parameter if it is not provided. Avoid inferring or making up values.
            - If the parameter is not a valid grid point URL, ask the user to provide a valid grid point URL.
            - Use 'current-weather' tool if user wants the current weather instead of the forecast.
            - This tool provides an hourly forecast, which includes detailed weather conditions for each hour.
            - This tool is specifically designed to provide an hourly forecast, not a daily forecast.
            - Avoid using this tool for daily forecasts, as it is intended for hourly weather data.
            - Avoid using this tool unless the user explicitly requests an hourly forecast. For unspecified forecasts, use the 'daily-forecast-weather' tool instead.
            Parameters:
            - 'gridPointUrl': a valid grid point URL from the National Weather Service API. If not provided, it will be requested from the user.
            - 'forecastHours': the number of hours to forecast, default is 24 hours. Valid range is from 1 to 156 hours and the value must be a whole number. Omit it to use the default; 0 is not accepted.
            """
        ).strip()

    def get_input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "gridPointUrl": {"type": "string"},
                "forecastHours": {
                    "type": "number",
                    "default": DEFAULT_FORECAST_HOURS,
                    "minimum": MIN_FORECAST_HOURS,
                    "maximum": MAX_FORECAST_HOURS,
                },
            },
            "required": ["gridPointUrl"],
        }

    def validate_with_defaults(self, params: ToolParams) -> ToolParams:
        grid_point_url = validate_grid_point_url(params.get("gridPointUrl"))

        forecast_hours = params.get("forecastHours")
        if forecast_hours is None:
            return {"gridPointUrl": grid_point_url, "forecastHours": DEFAULT_FORECAST_HOURS}
        if (
            not is_number(forecast_hours)
            or not MIN_FORECAST_HOURS <= forecast_hours <= MAX_FORECAST_HOURS
            or forecast_hours != int(forecast_hours)
        ):
            raise ToolValidationError(
                f'Invalid forecast hours value "{forecast_hours}". '
                f"Use a whole number of hours from {MIN_FORECAST_HOURS} to {MAX_FORECAST_HOURS}. "
                "Ask user for a valid forecast hours value."
            )

        return {"gridPointUrl": grid_point_url, "forecastHours": int(forecast_hours)}

    async def process_tool_workflow(self, params: ToolParams) -> ToolResult:
        forecast = await self.get_forecast_hourly(
            params["gridPointUrl"], params["forecastHours"]
        )
        return text_result(json.dumps(forecast), annotations={"includeInContext": False})

    async def get_forecast_hourly(
        self, grid_point_url: str, forecast_hours: int
    ) -> List[Dict[str, Any]]:
        forecast_data = await self.fetch_json(
            FORECAST_HOURLY_URL.format(grid_point_url=grid_point_url), "forecast data"
        )
        periods = require_properties(forecast_data, "forecast").get("periods") or []

        return [
            {
                "valid": {
                    "startTime": hour.get("startTime"),
                    "endTime": hour.get("endTime"),
                },
                "isDaytime": hour.get("isDaytime"),
                "shortForecast": hour.get("shortForecast"),
                "temperature": hour.get("temperature"),
                "temperatureUnit": hour.get("temperatureUnit"),
                "probabilityOfPrecipitation": format_precipitation_probability(
                    hour.get("probabilityOfPrecipitation")
                ),
                "windSpeed": hour.get("windSpeed"),
                "windDirection": hour.get("windDirection"),
            }
            for hour in periods[:forecast_hours]
        ]
