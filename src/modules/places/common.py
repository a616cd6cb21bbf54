"""Types shared by the Places web service endpoints."""

from collections.abc import Sequence
from enum import Enum
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field


class LatLngLiteral(BaseModel):
    """A point in degrees, serialized by the API as ``lat,lng``."""

    lat: float
    lng: float


# Every shape a coordinate may arrive in; normalised by
# ``src.modules.places.serialize.to_lat_lng_literal``.
LatLng = Union[LatLngLiteral, Mapping[str, float], Sequence[float], str]


class Language(str, Enum):
    """Language codes supported by the Places API.

    Codes outside this list are still sent as plain strings and left to the
    remote service to accept or reject.
    """

    ar = "ar"
    be = "be"
    bg = "bg"
    bn = "bn"
    ca = "ca"
    cs = "cs"
    da = "da"
    de = "de"
    el = "el"
    en = "en"
    en_AU = "en-AU"
    en_GB = "en-GB"
    es = "es"
    es_419 = "es-419"
    eu = "eu"
    fa = "fa"
    fi = "fi"
    fil = "fil"
    fr = "fr"
    gl = "gl"
    gu = "gu"
    hi = "hi"
    hr = "hr"
    hu = "hu"
    id = "id"
    it = "it"
    iw = "iw"
    ja = "ja"
    kk = "kk"
    kn = "kn"
    ko = "ko"
    ky = "ky"
    lt = "lt"
    lv = "lv"
    mk = "mk"
    ml = "ml"
    mr = "mr"
    my = "my"
    nl = "nl"
    no = "no"
    pa = "pa"
    pl = "pl"
    pt = "pt"
    pt_BR = "pt-BR"
    pt_PT = "pt-PT"
    ro = "ro"
    ru = "ru"
    sk = "sk"
    sl = "sl"
    sq = "sq"
    sr = "sr"
    sv = "sv"
    ta = "ta"
    te = "te"
    th = "th"
    tl = "tl"
    tr = "tr"
    uk = "uk"
    uz = "uz"
    vi = "vi"
    zh_CN = "zh-CN"
    zh_HK = "zh-HK"
    zh_TW = "zh-TW"


class Status(str, Enum):
    """Status codes returned in the ``status`` field of a response body."""

    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    INVALID_REQUEST = "INVALID_REQUEST"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NOT_FOUND = "NOT_FOUND"
    MAX_ELEMENTS_EXCEEDED = "MAX_ELEMENTS_EXCEEDED"
    MAX_ROUTE_LENGTH_EXCEEDED = "MAX_ROUTE_LENGTH_EXCEEDED"
    MAX_WAYPOINTS_EXCEEDED = "MAX_WAYPOINTS_EXCEEDED"


class PredictionTerm(BaseModel):
    """One section of a prediction description, usually comma terminated."""

    model_config = ConfigDict(frozen=True, extra="allow")

    value: str
    offset: int


class PredictionSubstring(BaseModel):
    """Span of the description matching the caller's input."""

    model_config = ConfigDict(frozen=True, extra="allow")

    offset: int
    length: int


class StructuredFormatting(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    main_text: str
    main_text_matched_substrings: list[PredictionSubstring] = Field(
        default_factory=list
    )
    secondary_text: str | None = None
    secondary_text_matched_substrings: list[PredictionSubstring] | None = None


class ResponseData(BaseModel):
    """Fields every Places response body carries.

    ``status`` stays a plain string so that codes newer than ``Status`` are
    kept as returned.
    """

    model_config = ConfigDict(extra="allow")

    status: str
    error_message: str | None = None
    html_attributions: list[str] = Field(default_factory=list)
    next_page_token: str | None = None


class RequestParams(BaseModel):
    """Query parameters common to every request."""

    model_config = ConfigDict(extra="allow")

    key: str | None = None
    client_id: str | None = None
    # Signing secret; kept for callers that sign URLs themselves, never sent
    client_secret: str | None = None
    channel: str | None = None

    def to_query_params(self) -> dict[str, Any]:
        """Parameters to send, leaving out unset ones and the signing secret."""
        return self.model_dump(exclude_none=True, exclude={"client_secret"})
