"""Place Query Autocomplete endpoint.

Returns query predictions for text-based geographic searches, such as
"pizza near New York". See
https://developers.google.com/maps/documentation/places/web-service/query
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.modules.places.common import (
    Language,
    LatLng,
    PredictionSubstring,
    PredictionTerm,
    RequestParams,
    ResponseData,
    StructuredFormatting,
)
from src.modules.places.http import (
    HttpClient,
    HttpResponse,
    RequestConfig,
    get_default_http_client,
)
from src.modules.places.serialize import (
    ParamsSerializer,
    lat_lng_to_string,
    serializer,
)
from src.utils.logger import get_logger
from src.utils.settings.places import places_settings

logger = get_logger(__name__)

DEFAULT_URL = f"{places_settings.PLACES_BASE_URL}/queryautocomplete/json"
DEFAULT_METHOD = "get"

default_params_serializer: ParamsSerializer = serializer(
    {"location": lat_lng_to_string}
)


class PlaceQueryAutocompleteParams(RequestParams):
    """Query parameters of the endpoint.

    Values are only checked against their Python types (``offset=2.5`` is
    rejected here); ranges and semantics are left to the remote service.
    """

    # The text string on which to search
    input: str
    # Character position in input up to which text is used for matching
    offset: int | None = None
    # Point around which results are biased, sent as "lat,lng"
    location: LatLng | None = None
    # Bias distance in meters; not a hard filter
    radius: int | float | None = None
    language: Language | str | None = None


class PlaceQueryAutocompleteRequest(BaseModel):
    """Descriptor for a single query autocomplete call.

    ``url``, ``method`` and ``params_serializer`` carry the endpoint defaults
    and can be replaced one at a time. Any other field set on the descriptor
    (``follow_redirects``, ``extensions``, ...) is handed to the HTTP client
    untouched.
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    params: PlaceQueryAutocompleteParams
    url: str = DEFAULT_URL
    method: str = DEFAULT_METHOD
    params_serializer: ParamsSerializer = default_params_serializer
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float | None = None


class PlaceQueryAutocompletePrediction(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    # Human-readable name of the result
    description: str
    # Sections of the description, in order of appearance
    terms: list[PredictionTerm] = Field(default_factory=list)
    # Where the input occurs in the description, for highlighting
    matched_substrings: list[PredictionSubstring] = Field(default_factory=list)
    structured_formatting: StructuredFormatting | None = None
    place_id: str | None = None
    types: list[str] | None = None


class PlaceQueryAutocompleteResponseData(ResponseData):
    # Up to 5 entries, in the relevance order returned by the service
    predictions: list[PlaceQueryAutocompletePrediction] = Field(default_factory=list)


PlaceQueryAutocompleteResponse = HttpResponse[PlaceQueryAutocompleteResponseData]


def build_request_config(request: PlaceQueryAutocompleteRequest) -> RequestConfig:
    """Translate a request descriptor into the config an HTTP client runs."""
    params: dict[str, Any] = request.params.to_query_params()
    return RequestConfig(
        url=request.url,
        method=request.method,
        params=params,
        params_serializer=request.params_serializer,
        headers=dict(request.headers),
        timeout=request.timeout,
        extra=dict(request.model_extra or {}),
    )


async def place_query_autocomplete(
    request: PlaceQueryAutocompleteRequest,
    http_client: HttpClient | None = None,
) -> PlaceQueryAutocompleteResponse:
    """Run a query autocomplete request.

    The response body's ``status`` is not inspected: ``ZERO_RESULTS`` or
    ``INVALID_REQUEST`` come back as ordinary responses. Transport errors from
    the HTTP client propagate as raised. Bodies that are not a response
    envelope (an HTML error page, a proxy's empty object) are returned as the
    client decoded them.
    """
    http_client = http_client or get_default_http_client()
    config = build_request_config(request)

    logger.debug(
        "Dispatching query autocomplete request",
        url=config.url,
        method=config.method,
    )
    response = await http_client(config)

    if not (isinstance(response.data, Mapping) and "status" in response.data):
        return response

    return HttpResponse(
        status_code=response.status_code,
        headers=response.headers,
        data=PlaceQueryAutocompleteResponseData.model_validate(response.data),
        config=response.config,
    )
