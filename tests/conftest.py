from typing import Any, Dict, List, Optional, Tuple

import pytest

from weather_mcp_server.http import FetchResponse


class FakeFetch:
    """Async fetch double returning queued responses in order."""

    def __init__(self):
        self.responses: List[FetchResponse] = []
        self.calls: List[Tuple[str, Optional[Dict[str, str]]]] = []

    def queue(self, status: int = 200, payload: Any = None) -> "FakeFetch":
        self.responses.append(FetchResponse(status=status, payload=payload))
        return self

    async def __call__(self, url: str, headers: Optional[Dict[str, str]] = None) -> FetchResponse:
        self.calls.append((url, headers))
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        return self.responses.pop(0)

    @property
    def urls(self) -> List[str]:
        return [url for url, _ in self.calls]


@pytest.fixture(autouse=True)
def app_env(monkeypatch):
    monkeypatch.setenv("APP_NAME", "weather-mcp-server")
    monkeypatch.setenv("APP_EMAIL", "some.email@net.com")


@pytest.fixture
def fetch() -> FakeFetch:
    return FakeFetch()
