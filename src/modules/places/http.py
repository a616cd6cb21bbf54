"""HTTP client abstraction used to execute Places requests.

Endpoint functions describe a request as a ``RequestConfig`` and hand it to
any ``HttpClient``. Two adapters are provided, over httpx and aiohttp; tests
substitute their own implementation of the same protocol.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, Protocol, TypeVar

import aiohttp
import httpx
from yarl import URL

from src.modules.places.serialize import ParamsSerializer, encode
from src.utils.settings.places import PlacesSettings, places_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RequestConfig:
    """Everything needed to issue one request.

    ``extra`` holds transport options the endpoint functions do not look at;
    adapters pass them straight to the underlying library.
    """

    url: str
    method: str = "get"
    params: Mapping[str, Any] = field(default_factory=dict)
    params_serializer: ParamsSerializer | None = None
    headers: dict[str, str] = field(default_factory=dict)
    timeout: float | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def query_string(self) -> str:
        if self.params_serializer is not None:
            return self.params_serializer(self.params)
        return encode(self.params)

    def build_url(self) -> str:
        query = self.query_string()
        if not query:
            return self.url
        separator = "&" if "?" in self.url else "?"
        return f"{self.url}{separator}{query}"


@dataclass
class HttpResponse(Generic[T]):
    status_code: int
    headers: dict[str, str]
    data: T
    config: RequestConfig


class HttpClient(Protocol):
    """Executes a described request and returns the decoded response."""

    async def __call__(self, config: RequestConfig) -> HttpResponse[Any]: ...


def _default_headers(settings: PlacesSettings) -> dict[str, str]:
    return {
        "User-Agent": settings.PLACES_USER_AGENT,
        "Accept-Encoding": settings.PLACES_ACCEPT_ENCODING,
    }


class HttpxClient:
    """``HttpClient`` backed by ``httpx.AsyncClient``.

    A client passed in is shared and left open; one created here is closed by
    ``aclose``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: PlacesSettings | None = None,
        raise_for_status: bool = True,
    ):
        self.settings = settings or places_settings
        self.timeout = self.settings.PLACES_TIMEOUT
        self.default_headers = _default_headers(self.settings)
        self.raise_for_status = raise_for_status
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient()

    async def __call__(self, config: RequestConfig) -> HttpResponse[Any]:
        headers = {**self.default_headers, **config.headers}
        timeout = config.timeout if config.timeout is not None else self.timeout

        try:
            response = await self._client.request(
                config.method.upper(),
                config.build_url(),
                headers=headers,
                timeout=timeout,
                **config.extra,
            )
            if self.raise_for_status:
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Places request to {config.url} failed: {e!r}")
            raise

        if "json" in response.headers.get("content-type", ""):
            data = response.json()
        else:
            data = response.text

        return HttpResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            data=data,
            config=config,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


class AiohttpClient:
    """``HttpClient`` backed by ``aiohttp.ClientSession``.

    The session is created on first use unless one is supplied.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        settings: PlacesSettings | None = None,
        raise_for_status: bool = True,
    ):
        self.settings = settings or places_settings
        self.timeout = self.settings.PLACES_TIMEOUT
        self.default_headers = _default_headers(self.settings)
        self.raise_for_status = raise_for_status
        self._owns_session = session is None
        self._session = session

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    async def __call__(self, config: RequestConfig) -> HttpResponse[Any]:
        session = self._get_session()
        headers = {**self.default_headers, **config.headers}
        timeout = config.timeout if config.timeout is not None else self.timeout

        try:
            # encoded=True keeps the serializer's output byte for byte
            async with session.request(
                config.method.upper(),
                URL(config.build_url(), encoded=True),
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=timeout),
                **config.extra,
            ) as response:
                if self.raise_for_status:
                    response.raise_for_status()
                if "json" in response.headers.get("Content-Type", ""):
                    data = await response.json()
                else:
                    data = await response.text()
                return HttpResponse(
                    status_code=response.status,
                    headers=dict(response.headers),
                    data=data,
                    config=config,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Places request to {config.url} failed: {e!r}")
            raise

    async def aclose(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "AiohttpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


# Shared default instance - created on first use. Its httpx pool belongs to
# the event loop that first drives it; call close_default_http_client before
# that loop ends.
_default_client: HttpxClient | None = None


def get_default_http_client() -> HttpxClient:
    """Get the process-wide default HTTP client."""
    global _default_client
    if _default_client is None:
        _default_client = HttpxClient()
    return _default_client


async def close_default_http_client() -> None:
    """Close the shared default client; the next call creates a new one."""
    global _default_client
    if _default_client is not None:
        await _default_client.aclose()
        _default_client = None
