"""Facade binding Places endpoint functions to one HTTP client."""

from src.modules.places.http import HttpClient, HttpxClient
from src.modules.places.query_autocomplete import (
    PlaceQueryAutocompleteRequest,
    PlaceQueryAutocompleteResponse,
    place_query_autocomplete,
)
from src.utils.logger import get_logger
from src.utils.settings.places import PlacesSettings, places_settings


class PlacesClient:
    """Client for the Places web service endpoints."""

    def __init__(
        self,
        http_client: HttpClient | None = None,
        settings: PlacesSettings | None = None,
    ):
        self.settings = settings or places_settings
        self.logger = get_logger(self.__class__.__name__)
        self._owns_http_client = http_client is None
        self.http_client: HttpClient = http_client or HttpxClient(
            settings=self.settings
        )

    def _with_api_key(
        self, request: PlaceQueryAutocompleteRequest
    ) -> PlaceQueryAutocompleteRequest:
        """Fill in the configured API key when the request has none."""
        api_key = self.settings.GOOGLE_MAPS_API_KEY
        if api_key is None or request.params.key is not None:
            return request
        params = request.params.model_copy(
            update={"key": api_key.get_secret_value()}
        )
        return request.model_copy(update={"params": params})

    async def place_query_autocomplete(
        self, request: PlaceQueryAutocompleteRequest
    ) -> PlaceQueryAutocompleteResponse:
        return await place_query_autocomplete(
            self._with_api_key(request), self.http_client
        )

    async def aclose(self) -> None:
        if self._owns_http_client and isinstance(self.http_client, HttpxClient):
            await self.http_client.aclose()

    async def __aenter__(self) -> "PlacesClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
