"""Global test configuration and fixtures for the Places client."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from src.modules.places.http import HttpResponse, HttpxClient, RequestConfig
from src.utils.settings.places import PlacesSettings


class RecordingHttpClient:
    """In-memory ``HttpClient`` that records configs and replies with a fixed body."""

    def __init__(self, data: Any = None, status_code: int = 200, error: Exception | None = None):
        self.data = data if data is not None else {"status": "OK", "predictions": []}
        self.status_code = status_code
        self.error = error
        self.calls: list[RequestConfig] = []

    async def __call__(self, config: RequestConfig) -> HttpResponse[Any]:
        self.calls.append(config)
        if self.error is not None:
            raise self.error
        return HttpResponse(
            status_code=self.status_code,
            headers={"content-type": "application/json"},
            data=self.data,
            config=config,
        )

    @property
    def last_call(self) -> RequestConfig:
        return self.calls[-1]


@pytest.fixture
def places_settings() -> PlacesSettings:
    return PlacesSettings(
        GOOGLE_MAPS_API_KEY=None,
        PLACES_TIMEOUT=5.0,
        PLACES_USER_AGENT="places-tests/1.0",
    )


@pytest.fixture
def recording_client() -> RecordingHttpClient:
    return RecordingHttpClient()


@pytest.fixture
def recording_client_factory() -> Callable[..., RecordingHttpClient]:
    return RecordingHttpClient


@pytest.fixture
def json_handler() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """Build an httpx MockTransport handler that records requests."""

    def _build(body: Any, status_code: int = 200, seen: list | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            return httpx.Response(
                status_code,
                content=json.dumps(body).encode(),
                headers={"content-type": "application/json; charset=UTF-8"},
            )

        return handler

    return _build


@pytest_asyncio.fixture
async def httpx_client_factory(places_settings):
    """Create ``HttpxClient`` instances over a mock transport and close them after the test."""
    created: list[httpx.AsyncClient] = []

    def _build(handler, **kwargs) -> HttpxClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        created.append(client)
        return HttpxClient(client=client, settings=places_settings, **kwargs)

    yield _build

    for client in created:
        await client.aclose()
