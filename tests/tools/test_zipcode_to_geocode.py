import pytest

from weather_mcp_server.errors import ToolValidationError, UpstreamServiceError
from weather_mcp_server.tools.zipcode_to_geocode import ZipcodeToGeocode


def test_identity_and_schema():
    tool = ZipcodeToGeocode()

    assert tool.get_name() == "zipcode-to-geocode"
    assert tool.get_tool_config()["inputSchema"] == {
        "type": "object",
        "properties": {"zipcode": {"type": "string"}},
        "required": ["zipcode"],
    }


@pytest.mark.parametrize("zipcode", ["12345", "12345-6789"])
def test_validate_accepts_zipcodes(zipcode):
    tool = ZipcodeToGeocode()
    params = tool.validate_with_defaults({"zipcode": zipcode})

    assert params == {"zipcode": zipcode}
    assert tool.validate_with_defaults(params) == params


@pytest.mark.parametrize("zipcode", [12345, "abcde", "1234", "", "12345-67", None, "12345\n", "12345-6789\n"])
def test_validate_rejects_zipcodes(zipcode):
    with pytest.raises(ToolValidationError, match="Invalid US Zip code"):
        ZipcodeToGeocode().validate_with_defaults({"zipcode": zipcode})


@pytest.mark.asyncio
async def test_invalid_zipcode_is_returned_as_text():
    result = await ZipcodeToGeocode().handle_request({"params": {"zipcode": "1234"}})

    assert result == {
        "content": [
            {"type": "text", "text": 'Invalid US Zip code "1234". Ask user for a valid US Zip code.'}
        ]
    }


@pytest.mark.asyncio
async def test_workflow_returns_coordinates(fetch):
    fetch.queue(payload={"places": [{"latitude": "40.1", "longitude": "-75.2"}]})

    result = await ZipcodeToGeocode(fetch=fetch).handle_request({"params": {"zipcode": "12345"}})

    assert result == {
        "content": [
            {"type": "text", "text": "Coordinates for ZIP code 12345: Latitude 40.1, Longitude -75.2."}
        ]
    }
    assert fetch.urls == ["https://api.zippopotam.us/us/12345"]


@pytest.mark.asyncio
async def test_error_status(fetch):
    fetch.queue(status=404)

    with pytest.raises(UpstreamServiceError, match="Failed to fetch data for zipcode 99999"):
        await ZipcodeToGeocode(fetch=fetch).zipcode_to_geocode("99999")


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"places": []}, {"places": "not-an-array"}])
async def test_no_places(fetch, payload):
    fetch.queue(payload=payload)

    with pytest.raises(UpstreamServiceError, match="No places found for zipcode 00003"):
        await ZipcodeToGeocode(fetch=fetch).zipcode_to_geocode("00003")


@pytest.mark.asyncio
async def test_place_without_coordinates(fetch):
    fetch.queue(payload={"places": [{}]})

    with pytest.raises(UpstreamServiceError, match="Missing coordinates for zipcode 00002"):
        await ZipcodeToGeocode(fetch=fetch).zipcode_to_geocode("00002")


@pytest.mark.asyncio
async def test_zipcode_with_trailing_newline_is_not_fetched(fetch):
    result = await ZipcodeToGeocode(fetch=fetch).handle_request({"params": {"zipcode": "12345\n"}})

    assert result["content"][0]["text"].startswith("Invalid US Zip code")
    assert fetch.calls == []
