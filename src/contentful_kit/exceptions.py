"""Exception hierarchy for contentful-kit.

Every error raised by the SDK derives from ContentfulError. The three
failure kinds of a fetch are kept apart so callers can react to them
independently:

- TransportError: the request could not be built or sent
- APIError: the service answered with a status other than 200
- DecodeError: the body did not match the expected resource shape
"""

from typing import Any


class ContentfulError(Exception):
    """Base exception for all contentful-kit errors.

    Attributes:
        message: Human readable error message
        details: Optional structured context about the failure
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ContentfulError):
    """Raised when client configuration is missing or invalid."""


# Transport errors


class TransportError(ContentfulError):
    """Raised when a request cannot be constructed or sent.

    The underlying httpx exception is available as ``__cause__``.
    """


class ConnectionError(TransportError):
    """Raised when the API host cannot be reached."""


class TimeoutError(TransportError):
    """Raised when a request exceeds its timeout."""


# API errors


class APIError(ContentfulError):
    """Raised when the API responds with a status other than 200 OK.

    The response body is discarded and never decoded.

    Attributes:
        status_code: HTTP status code
        status: HTTP status line, e.g. "404 Not Found"
        url: Requested URL
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        status: str | None = None,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code
        self.status = status or str(status_code)
        self.url = url


class AuthenticationError(APIError):
    """Raised on 401: the access token is missing or invalid."""


class AccessDeniedError(APIError):
    """Raised on 403: the token cannot read the requested resource."""


class NotFoundError(APIError):
    """Raised on 404: the space or resource does not exist."""


class RateLimitError(APIError):
    """Raised on 429.

    Attributes:
        retry_after: Seconds to wait before the next request, if the
            service sent a usable header
    """

    def __init__(
        self,
        message: str,
        status_code: int = 429,
        status: str | None = None,
        url: str | None = None,
        retry_after: float | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code, status=status, url=url, details=details)
        self.retry_after = retry_after


class ServerError(APIError):
    """Raised on 5xx responses."""


# Decode errors


class DecodeError(ContentfulError):
    """Raised when a response body cannot be decoded into the requested model.

    Attributes:
        model: Name of the model the body was decoded into
    """

    def __init__(
        self, message: str, model: str | None = None, details: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, details=details)
        self.model = model
