"""
Weather tools exposed over MCP.

Every module in this package is scanned by ToolRegistry; each concrete
BaseTool subclass defined in a module is registered under its get_name().

Modules:
    - current_weather: latest station observation for a grid point
    - daily_forecast_weather: day/night forecast periods for a grid point
    - hourly_forecast_weather: hourly forecast periods for a grid point
    - grid_point_url: grid point URL for a latitude/longitude
    - zipcode_to_geocode: coordinates for a US ZIP code
    - common: validation and formatting helpers shared by the tools
"""
