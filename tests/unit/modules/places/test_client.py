"""Tests for the PlacesClient facade."""

import pytest

from src.modules.places.client import PlacesClient
from src.modules.places.http import HttpxClient
from src.modules.places.query_autocomplete import PlaceQueryAutocompleteRequest
from src.utils.settings.places import PlacesSettings


@pytest.mark.asyncio
async def test_client_fills_in_configured_api_key(recording_client):
    settings = PlacesSettings(GOOGLE_MAPS_API_KEY="configured-key")
    client = PlacesClient(http_client=recording_client, settings=settings)
    request = PlaceQueryAutocompleteRequest(params={"input": "Paris"})

    await client.place_query_autocomplete(request)

    assert recording_client.last_call.params["key"] == "configured-key"
    # Caller's descriptor is left untouched
    assert request.params.key is None


@pytest.mark.asyncio
async def test_client_keeps_key_from_request(recording_client):
    settings = PlacesSettings(GOOGLE_MAPS_API_KEY="configured-key")
    client = PlacesClient(http_client=recording_client, settings=settings)
    request = PlaceQueryAutocompleteRequest(params={"input": "Paris", "key": "own-key"})

    await client.place_query_autocomplete(request)

    assert recording_client.last_call.params["key"] == "own-key"


@pytest.mark.asyncio
async def test_client_without_api_key_sends_none(recording_client, places_settings):
    client = PlacesClient(http_client=recording_client, settings=places_settings)

    await client.place_query_autocomplete(
        PlaceQueryAutocompleteRequest(params={"input": "Paris"})
    )

    assert "key" not in recording_client.last_call.params


@pytest.mark.asyncio
async def test_client_preserves_request_overrides(recording_client, places_settings):
    client = PlacesClient(http_client=recording_client, settings=places_settings)
    request = PlaceQueryAutocompleteRequest(
        params={"input": "Paris"}, url="http://proxy.local/qa", timeout=3
    )

    await client.place_query_autocomplete(request)

    config = recording_client.last_call
    assert config.url == "http://proxy.local/qa"
    assert config.timeout == 3


@pytest.mark.asyncio
async def test_client_closes_its_own_http_client(places_settings):
    async with PlacesClient(settings=places_settings) as client:
        assert isinstance(client.http_client, HttpxClient)

    assert client.http_client._client.is_closed
