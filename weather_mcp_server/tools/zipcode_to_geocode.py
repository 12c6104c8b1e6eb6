"""Convert a US ZIP code to latitude/longitude via api.zippopotam.us."""

import re
from textwrap import dedent
from typing import Any, Dict, Tuple

from ..errors import ToolValidationError, UpstreamServiceError
from ..tool_base import BaseTool, ToolParams, ToolResult, text_result

ZIPCODE_URL = "https://api.zippopotam.us/us/{zipcode}"
ZIPCODE_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")


class ZipcodeToGeocode(BaseTool):
    def get_name(self) -> str:
        return "zipcode-to-geocode"

    def get_description(self) -> str:
        return dedent(
            """
            Convert a US ZIP code to geographic coordinates (latitude and longitude).
            System Prompt:
            - Always ask the user for the 'zipcode' parameter if it is not provided. Avoid inferring or making up values.
            - If the parameter is not a valid ZIP code, ask the user to provide a valid ZIP code.
            Parameters:
            - 'zipcode': a valid US ZIP code. If not provided, it will be requested from the user.
            """
        ).strip()

    def get_input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "zipcode": {"type": "string"},
            },
            "required": ["zipcode"],
        }

    def validate_with_defaults(self, params: ToolParams) -> ToolParams:
        zipcode = params.get("zipcode")

        if not isinstance(zipcode, str) or not ZIPCODE_PATTERN.fullmatch(zipcode):
            raise ToolValidationError(
                f'Invalid US Zip code "{zipcode}". Ask user for a valid US Zip code.'
            )

        return {"zipcode": zipcode}

    async def process_tool_workflow(self, params: ToolParams) -> ToolResult:
        zipcode = params["zipcode"]

        latitude, longitude = await self.zipcode_to_geocode(zipcode)

        return text_result(
            f"Coordinates for ZIP code {zipcode}: Latitude {latitude}, Longitude {longitude}."
        )

    async def zipcode_to_geocode(self, zipcode: str) -> Tuple[str, str]:
        """
        Look up the first place registered for a ZIP code.

        Returns:
            (latitude, longitude) as the strings the API reports
        """
        headers = {"User-Agent": self.get_user_agent_header_text()}
        response = await self.fetch(ZIPCODE_URL.format(zipcode=zipcode), headers=headers)

        if not response.ok:
            raise UpstreamServiceError(
                f"Failed to fetch data for zipcode {zipcode}", status=response.status
            )

        places = response.payload.get("places") if isinstance(response.payload, dict) else None
        if not isinstance(places, list) or not places:
            raise UpstreamServiceError(f"No places found for zipcode {zipcode}")

        place = places[0] if isinstance(places[0], dict) else {}
        latitude = place.get("latitude")
        longitude = place.get("longitude")
        if latitude is None or longitude is None:
            raise UpstreamServiceError(f"Missing coordinates for zipcode {zipcode}")
        return latitude, longitude
