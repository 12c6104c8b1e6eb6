import pytest
from aiohttp import web
from aiohttp import test_utils

from weather_mcp_server.http import FetchResponse, aiohttp_fetch


async def points(request):
    return web.json_response(
        {"properties": {"agent": request.headers.get("User-Agent")}},
        content_type="application/geo+json",
    )


async def missing(request):
    return web.json_response({"detail": "not found"}, status=404)


@pytest.fixture
def weather_app():
    app = web.Application()
    app.router.add_get("/points", points)
    app.router.add_get("/missing", missing)
    return app


@pytest.mark.parametrize("status, ok", [(200, True), (299, True), (301, False), (500, False)])
def test_fetch_response_ok(status, ok):
    assert FetchResponse(status=status).ok is ok


@pytest.mark.asyncio
async def test_aiohttp_fetch_decodes_geo_json(weather_app):
    async with test_utils.TestServer(weather_app) as server:
        response = await aiohttp_fetch(
            str(server.make_url("/points")), headers={"User-Agent": "test (a@b.c)"}
        )

    assert response.ok
    assert response.payload == {"properties": {"agent": "test (a@b.c)"}}


@pytest.mark.asyncio
async def test_aiohttp_fetch_skips_body_on_error(weather_app):
    async with test_utils.TestServer(weather_app) as server:
        response = await aiohttp_fetch(str(server.make_url("/missing")))

    assert response.status == 404
    assert not response.ok
    assert response.payload is None
