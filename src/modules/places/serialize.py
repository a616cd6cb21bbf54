"""Query-string serialization for Places requests.

Coordinates are the only structured values the endpoints take; they travel as
``lat,lng`` and never as nested objects. Everything else is a scalar or a list
of scalars joined with ``|``.
"""

import math
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel

from src.modules.places.common import LatLng, LatLngLiteral

ParamsSerializer = Callable[[Mapping[str, Any]], str]

DEFAULT_ARRAY_SEPARATOR = "|"

# Left unescaped in keys and values; commas carry coordinate pairs.
_SAFE_CHARS = ","


def to_lat_lng_literal(value: Any) -> LatLngLiteral:
    """Normalise any supported coordinate shape into a ``LatLngLiteral``."""
    if isinstance(value, LatLngLiteral):
        return value
    if isinstance(value, Mapping):
        if "lat" in value and "lng" in value:
            return LatLngLiteral(lat=value["lat"], lng=value["lng"])
        if "latitude" in value and "longitude" in value:
            return LatLngLiteral(lat=value["latitude"], lng=value["longitude"])
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) == 2:
            return LatLngLiteral(lat=value[0], lng=value[1])
    raise TypeError(f"Unsupported coordinate value: {value!r}")


def format_number(value: int | float) -> str:
    """Shortest decimal form of a number; integral floats lose their ``.0``."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def lat_lng_to_string(value: LatLng) -> str:
    """Render a coordinate as ``lat,lng``. Strings are assumed preformatted."""
    if isinstance(value, str):
        return value
    literal = to_lat_lng_literal(value)
    return f"{format_number(literal.lat)},{format_number(literal.lng)}"


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _format_scalar(value.value)
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def _format_value(value: Any, array_separator: str) -> str:
    if isinstance(value, (list, tuple, set, frozenset)):
        return array_separator.join(_format_scalar(item) for item in value)
    return _format_scalar(value)


def encode(
    params: Mapping[str, Any], array_separator: str = DEFAULT_ARRAY_SEPARATOR
) -> str:
    """Encode a flat mapping into a query string.

    Keys are sorted and ``None`` values skipped.
    """
    pairs = []
    for key in sorted(params):
        value = params[key]
        if value is None:
            continue
        pairs.append(
            f"{quote(str(key), safe=_SAFE_CHARS)}="
            f"{quote(_format_value(value, array_separator), safe=_SAFE_CHARS)}"
        )
    return "&".join(pairs)


def serializer(
    formats: Mapping[str, Callable[[Any], str]],
    array_separator: str = DEFAULT_ARRAY_SEPARATOR,
) -> ParamsSerializer:
    """Build a params serializer applying ``formats[key]`` before encoding.

    Keys without a formatter pass through unchanged. The caller's mapping is
    never modified.
    """

    def serialize(params: Mapping[str, Any]) -> str:
        if isinstance(params, BaseModel):
            params = params.model_dump(exclude_none=True)
        formatted = dict(params)
        for key, format_value in formats.items():
            if formatted.get(key) is not None:
                formatted[key] = format_value(formatted[key])
        return encode(formatted, array_separator)

    return serialize
