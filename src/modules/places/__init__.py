from .client import PlacesClient
from .common import (
    Language,
    LatLng,
    LatLngLiteral,
    PredictionSubstring,
    PredictionTerm,
    RequestParams,
    ResponseData,
    Status,
    StructuredFormatting,
)
from .exceptions import PlacesApiError, raise_for_api_status
from .http import (
    AiohttpClient,
    HttpClient,
    HttpResponse,
    HttpxClient,
    RequestConfig,
    close_default_http_client,
    get_default_http_client,
)
from .query_autocomplete import (
    DEFAULT_URL,
    PlaceQueryAutocompleteParams,
    PlaceQueryAutocompletePrediction,
    PlaceQueryAutocompleteRequest,
    PlaceQueryAutocompleteResponse,
    PlaceQueryAutocompleteResponseData,
    default_params_serializer,
    place_query_autocomplete,
)
from .serialize import encode, lat_lng_to_string, serializer, to_lat_lng_literal

__all__ = [
    "PlacesClient",
    "Language",
    "LatLng",
    "LatLngLiteral",
    "PredictionSubstring",
    "PredictionTerm",
    "RequestParams",
    "ResponseData",
    "Status",
    "StructuredFormatting",
    "PlacesApiError",
    "raise_for_api_status",
    "AiohttpClient",
    "HttpClient",
    "HttpResponse",
    "HttpxClient",
    "RequestConfig",
    "close_default_http_client",
    "get_default_http_client",
    "DEFAULT_URL",
    "PlaceQueryAutocompleteParams",
    "PlaceQueryAutocompletePrediction",
    "PlaceQueryAutocompleteRequest",
    "PlaceQueryAutocompleteResponse",
    "PlaceQueryAutocompleteResponseData",
    "default_params_serializer",
    "place_query_autocomplete",
    "encode",
    "lat_lng_to_string",
    "serializer",
    "to_lat_lng_literal",
]
