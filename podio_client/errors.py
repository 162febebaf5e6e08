"""
Error types raised by the Podio client.

- InvalidArgumentError: caller misuse detected locally, before any request
- RemoteError (and subclasses): the service answered with a non-2xx status
- ResponseValidationError: a 2xx body did not match the expected model

Transport failures (httpx.RequestError) are not wrapped.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Type


class PodioError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(PodioError, ValueError):
    pass


class ResponseValidationError(PodioError, ValueError):
    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


class RemoteError(PodioError):
    """The service rejected the request.

    Attributes:
        status_code: HTTP status of the response.
        body: raw response text, kept for diagnostics.
        error: short error code from the JSON body, if any.
        error_description: human-readable explanation from the JSON body, if any.
    """

    def __init__(
        self,
        status_code: int,
        body: str = "",
        *,
        error: Optional[str] = None,
        error_description: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.error = error
        self.error_description = error_description
        super().__init__(self._message())

    def _message(self) -> str:
        detail = self.error_description or self.error or self.body or "no response body"
        return f"HTTP {self.status_code}: {detail}"


class BadRequest(RemoteError):
    pass


class Unauthorized(RemoteError):
    pass


class Forbidden(RemoteError):
    pass


class NotFound(RemoteError):
    pass


class Conflict(RemoteError):
    pass


class Gone(RemoteError):
    pass


class RateLimited(RemoteError):
    pass


class ServerError(RemoteError):
    pass


_STATUS_ERRORS: Dict[int, Type[RemoteError]] = {
    400: BadRequest,
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    409: Conflict,
    410: Gone,
    420: RateLimited,  # legacy rate limit status used by the service
    429: RateLimited,
}


def error_for_status(status_code: int, body: str = "", payload: Any = None) -> RemoteError:
    """Build the RemoteError subclass matching an HTTP status."""
    if status_code >= 500:
        error_type: Type[RemoteError] = ServerError
    else:
        error_type = _STATUS_ERRORS.get(status_code, RemoteError)

    error = None
    description = None
    if isinstance(payload, dict):
        error = _as_optional_str(payload.get("error"))
        description = _as_optional_str(payload.get("error_description"))

    return error_type(status_code, body, error=error, error_description=description)


def _as_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
