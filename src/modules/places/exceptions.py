"""Opt-in handling of non-OK statuses in Places response bodies.

Endpoint functions return such responses as-is; callers that prefer an
exception apply ``raise_for_api_status`` to the response data.
"""

from collections.abc import Iterable

from src.modules.places.common import ResponseData, Status
from src.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ALLOWED_STATUSES = (Status.OK, Status.ZERO_RESULTS)


class PlacesApiError(Exception):
    """A Places response whose body reports a failure status."""

    def __init__(
        self,
        status: str,
        error_message: str | None = None,
        details: dict | None = None,
    ):
        self.status = status
        self.error_message = error_message
        self.details = details or {}
        super().__init__(
            f"{status}: {error_message}" if error_message else status
        )

    def to_response_dict(self) -> dict:
        """Convert exception to a plain dict, e.g. for an API error body."""
        return {
            "status": self.status,
            "error_message": self.error_message,
            "details": self.details,
        }


def raise_for_api_status(
    data: ResponseData,
    allowed: Iterable[str] = DEFAULT_ALLOWED_STATUSES,
) -> ResponseData:
    """Return ``data`` unchanged, or raise if its status is not allowed."""
    allowed_values = {getattr(status, "value", status) for status in allowed}
    if data.status in allowed_values:
        return data

    logger.warning(
        "Places response reported failure",
        status=data.status,
        error_message=data.error_message,
    )
    raise PlacesApiError(
        data.status,
        data.error_message,
        details={"html_attributions": data.html_attributions},
    )
