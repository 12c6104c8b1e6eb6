"""Validation and formatting helpers shared by the weather tools."""

import re
from typing import Any, Dict, Optional

from ..errors import ToolValidationError, UpstreamServiceError

GRID_POINT_URL_PATTERN = re.compile(
    r"^https://api\.weather\.gov/gridpoints/[A-Z]{3}/\d+,\d+$"
)


def is_number(value: Any) -> bool:
    # bool is a subclass of int but never a valid coordinate or count
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_grid_point_url(value: Any) -> str:
    if not isinstance(value, str) or not GRID_POINT_URL_PATTERN.fullmatch(value):
        raise ToolValidationError(
            f'Invalid grid point URL "{value}". Ask user for a valid grid point URL.'
        )
    return value


def require_properties(payload: Any, description: str) -> Dict[str, Any]:
    """Return payload["properties"], failing if the response lacks it."""
    properties = payload.get("properties") if isinstance(payload, dict) else None
    if not isinstance(properties, dict):
        raise UpstreamServiceError(f"Missing 'properties' in {description} response")
    return properties


def format_precipitation_probability(probability: Optional[Dict[str, Any]]) -> str:
    """Render a quantitative value such as {"unitCode": "wmoUnit:percent", "value": 20} as "20 %"."""
    probability = probability or {}
    value = probability.get("value") or 0
    unit = probability.get("unitCode") or "percent"
    return f"{value} {'%' if 'percent' in unit else ''}".strip()
