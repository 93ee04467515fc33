"""Exception hierarchy and API error classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from .models import ErrorEnvelope

if TYPE_CHECKING:
    from .clients.base import Response


class RackmailError(Exception):
    """Base exception for all client errors."""


class ArgError(RackmailError):
    """Raised when a caller passes an invalid argument. No request is made."""

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"{argument} is invalid because {reason}")


class DecodeError(RackmailError):
    """Raised when a successful response body does not match the expected shape."""


class ErrorResponse(RackmailError):
    """Raised for responses with a status outside 200-299.

    Always carries the method, URL and status of the failed request. The
    message and request id come from the JSON error body when there is one.
    """

    def __init__(
        self,
        response: Response,
        message: str = "",
        request_id: str | None = None,
    ) -> None:
        self.response = response
        self.http_method = response.request.method
        self.request_url = str(response.request.url)
        self.status_code = response.status_code
        self.message = message
        self.request_id = request_id
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.request_id:
            return (
                f"{self.http_method} {self.request_url}: {self.status_code} "
                f'(request "{self.request_id}") {self.message}'
            )
        return f"{self.http_method} {self.request_url}: {self.status_code} {self.message}"


async def check_response(response: Response) -> ErrorResponse | None:
    """Classify a response, returning an ErrorResponse for non-2xx statuses.

    The body is read in full for error statuses. A body that is not the JSON
    error envelope becomes the message verbatim; an empty body leaves the
    message empty.
    """
    if 200 <= response.status_code <= 299:
        return None

    data = await response.http_response.aread()
    if not data:
        return ErrorResponse(response)

    try:
        envelope = ErrorEnvelope.model_validate_json(data)
    except ValidationError:
        return ErrorResponse(response, message=data.decode("utf-8", errors="replace"))

    return ErrorResponse(response, message=envelope.message or "", request_id=envelope.request_id)
