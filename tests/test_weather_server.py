import pytest
from mcp import types as mcp_types

from weather_mcp_server import weather_server
from weather_mcp_server.errors import (
    ToolNotFoundError,
    ToolNotInstantiatedError,
    ToolsNotLoadedError,
    ToolValidationError,
    UpstreamServiceError,
)
from weather_mcp_server.tool_base import BaseTool, text_result
from weather_mcp_server.tool_registry import ToolRegistry
from weather_mcp_server.weather_server import ToolDispatcher


class EchoTool(BaseTool):
    def get_name(self):
        return "echo"

    def get_description(self):
        return "Echo 'x' back."

    def get_input_schema(self):
        return {"type": "object", "properties": {"x": {"type": "string"}}, "required": ["x"]}

    def validate_with_defaults(self, params):
        if not isinstance(params.get("x"), str):
            raise ToolValidationError("Invalid x. Ask user for a valid x.")
        return {"x": params["x"]}

    async def process_tool_workflow(self, params):
        if params["x"] == "fail":
            raise UpstreamServiceError("Error fetching echo: 500", status=500)
        return text_result(params["x"], annotations={"includeInContext": False})


class StubRegistry:
    def __init__(self, tools):
        self.tools = tools

    def get_tools_sync(self):
        return self.tools


@pytest.fixture
def dispatcher():
    return ToolDispatcher(StubRegistry({"echo": EchoTool()}))


def test_list_tools_returns_tool_configs(dispatcher):
    assert dispatcher.list_tools() == {
        "tools": [
            {
                "name": "echo",
                "description": "Echo 'x' back.",
                "inputSchema": {
                    "type": "object",
                    "properties": {"x": {"type": "string"}},
                    "required": ["x"],
                },
            }
        ]
    }


def test_list_tools_requires_loaded_registry():
    dispatcher = ToolDispatcher(ToolRegistry())

    with pytest.raises(ToolsNotLoadedError):
        dispatcher.list_tools()


@pytest.mark.asyncio
async def test_call_tool_returns_handler_result(dispatcher):
    result = await dispatcher.call_tool("echo", {"x": "hi"})

    assert result == {
        "content": [{"type": "text", "text": "hi", "annotations": {"includeInContext": False}}]
    }


@pytest.mark.asyncio
async def test_call_tool_returns_validation_message_as_text(dispatcher):
    result = await dispatcher.call_tool("echo", {"x": 12345})

    assert result == {"content": [{"type": "text", "text": "Invalid x. Ask user for a valid x."}]}


@pytest.mark.asyncio
async def test_call_tool_unknown_name(dispatcher):
    with pytest.raises(ToolNotFoundError) as excinfo:
        await dispatcher.call_tool("missing", {"x": "hi"})

    assert str(excinfo.value) == 'Tool "missing" not found or no arguments provided.'
    assert excinfo.value.tool_name == "missing"


@pytest.mark.asyncio
async def test_call_tool_without_arguments(dispatcher):
    with pytest.raises(ToolNotFoundError, match='Tool "echo" not found or no arguments provided.'):
        await dispatcher.call_tool("echo", None)


@pytest.mark.asyncio
async def test_call_tool_not_instantiated():
    dispatcher = ToolDispatcher(StubRegistry({"ghost": None}))

    with pytest.raises(ToolNotInstantiatedError, match='Tool "ghost" not instantiated.'):
        await dispatcher.call_tool("ghost", {})


@pytest.mark.asyncio
async def test_call_tool_propagates_upstream_errors(dispatcher):
    with pytest.raises(UpstreamServiceError, match="Error fetching echo: 500"):
        await dispatcher.call_tool("echo", {"x": "fail"})


@pytest.mark.asyncio
async def test_call_tool_dispatches_to_discovered_tools(fetch):
    fetch.queue(payload={"places": [{"latitude": "40.1", "longitude": "-75.2"}]})
    registry = ToolRegistry(fetch=fetch)
    await registry.load_tools()

    result = await ToolDispatcher(registry).call_tool("zipcode-to-geocode", {"zipcode": "12345"})

    assert result == {
        "content": [
            {
                "type": "text",
                "text": "Coordinates for ZIP code 12345: Latitude 40.1, Longitude -75.2.",
            }
        ]
    }


@pytest.mark.asyncio
async def test_mcp_list_tools_handler(monkeypatch, dispatcher):
    monkeypatch.setattr(weather_server, "dispatcher", dispatcher)

    tools = await weather_server.list_mcp_tools()

    assert len(tools) == 1
    assert isinstance(tools[0], mcp_types.Tool)
    assert tools[0].name == "echo"
    assert tools[0].inputSchema["required"] == ["x"]


@pytest.mark.asyncio
async def test_mcp_call_tool_handler_converts_content(monkeypatch, dispatcher):
    monkeypatch.setattr(weather_server, "dispatcher", dispatcher)

    content = await weather_server.call_mcp_tool("echo", {"x": "hi"})

    assert len(content) == 1
    assert isinstance(content[0], mcp_types.TextContent)
    assert content[0].text == "hi"


@pytest.mark.asyncio
async def test_mcp_call_tool_handler_propagates_dispatch_errors(monkeypatch, dispatcher):
    monkeypatch.setattr(weather_server, "dispatcher", dispatcher)

    with pytest.raises(ToolNotFoundError):
        await weather_server.call_mcp_tool("missing", {})


def test_main_exits_on_fatal_error(monkeypatch):
    async def broken_server():
        raise RuntimeError("transport failed")

    monkeypatch.setattr(weather_server, "run_mcp_stdio_server", broken_server)

    with pytest.raises(SystemExit) as excinfo:
        weather_server.main()
    assert excinfo.value.code == 1
