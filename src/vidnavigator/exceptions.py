"""Custom exception hierarchy for vidnavigator.

All exceptions raised by the client inherit from
:class:`VidNavigatorError`.  Raw ``httpx`` exceptions must NEVER
propagate beyond the infrastructure layer — they are caught there and
re-raised as a typed subclass defined here.

Every error carries an explicit :class:`ErrorKind` so callers can
branch with ``match err.kind`` instead of chains of ``isinstance``
checks.  The class hierarchy is kept as well for ``except`` clauses.

Hierarchy
---------
VidNavigatorError
├── ConfigurationError
├── TransportError
└── APIError
    ├── BadRequestError          (400)
    ├── AuthenticationError      (401)
    ├── PaymentRequiredError     (402)
    ├── AccessDeniedError        (403)
    ├── NotFoundError            (404)
    ├── RateLimitExceededError   (429)
    └── ServerError              (5xx)
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Discriminant shared by every :class:`VidNavigatorError`."""

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    API_ERROR = "api_error"
    BAD_REQUEST = "bad_request"
    AUTHENTICATION = "authentication"
    PAYMENT_REQUIRED = "payment_required"
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    SERVER_ERROR = "server_error"


class VidNavigatorError(Exception):
    """Base exception for all vidnavigator errors.

    The four diagnostic attributes are always present so that callers
    can log any error uniformly; they are ``None`` when the failure
    happened before an HTTP response was received.
    """

    kind: ErrorKind = ErrorKind.API_ERROR

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_code: str | None = None,
        error_message: str | None = None,
        details: Any = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code: int | None = status_code
        """HTTP status code of the failed response."""

        self.error_code: str | None = error_code
        """Machine-readable code from the API error body (``error.code``)."""

        self.error_message: str | None = error_message
        """Human-readable message from the API error body (``error.message``)."""

        self.details: Any = details
        """Arbitrary payload from the API error body (``error.details``)."""

        self.hint: str | None = hint
        """Optional actionable guidance for the caller."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({str(self)!r}, kind={self.kind.value!r}, "
            f"status_code={self.status_code!r}, error_code={self.error_code!r})"
        )


# --- Local failures --------------------------------------------------------

class ConfigurationError(VidNavigatorError):
    """Raised when the client is constructed with invalid configuration."""

    kind = ErrorKind.CONFIGURATION


class TransportError(VidNavigatorError):
    """Raised when no HTTP response was received (connection failure, timeout)."""

    kind = ErrorKind.TRANSPORT


# --- Remote failures -------------------------------------------------------

class APIError(VidNavigatorError):
    """Raised for a non-2xx response without a more specific class."""

    kind = ErrorKind.API_ERROR


class BadRequestError(APIError):
    """Raised on HTTP 400 (invalid parameters)."""

    kind = ErrorKind.BAD_REQUEST


class AuthenticationError(APIError):
    """Raised on HTTP 401 (missing or invalid API key)."""

    kind = ErrorKind.AUTHENTICATION


class PaymentRequiredError(APIError):
    """Raised on HTTP 402 (usage limit reached, payment required)."""

    kind = ErrorKind.PAYMENT_REQUIRED


class AccessDeniedError(APIError):
    """Raised on HTTP 403 (insufficient permissions)."""

    kind = ErrorKind.ACCESS_DENIED


class NotFoundError(APIError):
    """Raised on HTTP 404 (requested resource does not exist)."""

    kind = ErrorKind.NOT_FOUND


class RateLimitExceededError(APIError):
    """Raised on HTTP 429 (too many requests)."""

    kind = ErrorKind.RATE_LIMIT_EXCEEDED


class ServerError(APIError):
    """Raised on any HTTP 5xx response."""

    kind = ErrorKind.SERVER_ERROR


_STATUS_ERRORS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    402: PaymentRequiredError,
    403: AccessDeniedError,
    404: NotFoundError,
    429: RateLimitExceededError,
}

_STATUS_HINTS: dict[int, str] = {
    401: "Check that the API key passed to the client is valid.",
    402: "The account usage limit has been reached; upgrade the plan.",
    429: "Too many requests; wait before calling the API again.",
}


def error_class_for_status(status_code: int) -> type[APIError]:
    """Return the :class:`APIError` subclass for an HTTP status code."""
    if status_code in _STATUS_ERRORS:
        return _STATUS_ERRORS[status_code]
    if status_code >= 500:
        return ServerError
    return APIError


def hint_for_status(status_code: int) -> str | None:
    """Return caller guidance for *status_code*, if any."""
    return _STATUS_HINTS.get(status_code)
