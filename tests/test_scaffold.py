"""Smoke tests — verify package wiring.

These tests prove that:
* The public API is importable from the package root.
* The exception hierarchy is correctly structured.
* Every error carries the right ``kind`` discriminant.
* Version is accessible.
"""

from __future__ import annotations

import pytest

import vidnavigator
from vidnavigator import __version__
from vidnavigator.exceptions import (
    AccessDeniedError,
    APIError,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    ErrorKind,
    NotFoundError,
    PaymentRequiredError,
    RateLimitExceededError,
    ServerError,
    TransportError,
    VidNavigatorError,
    error_class_for_status,
    hint_for_status,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class TestPublicAPI:
    def test_all_names_resolve(self) -> None:
        for name in vidnavigator.__all__:
            assert hasattr(vidnavigator, name), name

    def test_client_exported(self) -> None:
        assert vidnavigator.VidNavigatorClient.__name__ == "VidNavigatorClient"


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ConfigurationError,
            TransportError,
            APIError,
            BadRequestError,
            AuthenticationError,
            PaymentRequiredError,
            AccessDeniedError,
            NotFoundError,
            RateLimitExceededError,
            ServerError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[VidNavigatorError]
    ) -> None:
        assert issubclass(exc_class, VidNavigatorError)

    @pytest.mark.parametrize(
        "exc_class",
        [
            BadRequestError,
            AuthenticationError,
            PaymentRequiredError,
            AccessDeniedError,
            NotFoundError,
            RateLimitExceededError,
            ServerError,
        ],
    )
    def test_status_errors_are_api_errors(self, exc_class: type[APIError]) -> None:
        assert issubclass(exc_class, APIError)

    def test_local_errors_are_not_api_errors(self) -> None:
        assert not issubclass(ConfigurationError, APIError)
        assert not issubclass(TransportError, APIError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(VidNavigatorError, Exception)

    def test_diagnostic_fields_are_stored(self) -> None:
        err = NotFoundError(
            "boom",
            status_code=404,
            error_code="FILE_NOT_FOUND",
            error_message="no such file",
            details={"file_id": "x"},
            hint="try this",
        )
        assert str(err) == "boom"
        assert err.status_code == 404
        assert err.error_code == "FILE_NOT_FOUND"
        assert err.error_message == "no such file"
        assert err.details == {"file_id": "x"}
        assert err.hint == "try this"

    def test_diagnostic_fields_default_to_none(self) -> None:
        err = TransportError("connection refused")
        assert err.status_code is None
        assert err.error_code is None
        assert err.error_message is None
        assert err.details is None
        assert err.hint is None

    def test_repr_names_kind(self) -> None:
        err = ServerError("down", status_code=503)
        assert "ServerError" in repr(err)
        assert "server_error" in repr(err)


class TestErrorKind:
    @pytest.mark.parametrize(
        ("exc_class", "kind"),
        [
            (ConfigurationError, ErrorKind.CONFIGURATION),
            (TransportError, ErrorKind.TRANSPORT),
            (APIError, ErrorKind.API_ERROR),
            (BadRequestError, ErrorKind.BAD_REQUEST),
            (AuthenticationError, ErrorKind.AUTHENTICATION),
            (PaymentRequiredError, ErrorKind.PAYMENT_REQUIRED),
            (AccessDeniedError, ErrorKind.ACCESS_DENIED),
            (NotFoundError, ErrorKind.NOT_FOUND),
            (RateLimitExceededError, ErrorKind.RATE_LIMIT_EXCEEDED),
            (ServerError, ErrorKind.SERVER_ERROR),
        ],
    )
    def test_kind_per_class(
        self, exc_class: type[VidNavigatorError], kind: ErrorKind
    ) -> None:
        assert exc_class("x").kind is kind

    def test_kinds_are_unique(self) -> None:
        kinds = [
            cls.kind
            for cls in (
                ConfigurationError, TransportError, APIError, BadRequestError,
                AuthenticationError, PaymentRequiredError, AccessDeniedError,
                NotFoundError, RateLimitExceededError, ServerError,
            )
        ]
        assert len(set(kinds)) == len(kinds)

    def test_kind_supports_match(self) -> None:
        err: VidNavigatorError = RateLimitExceededError("slow down", status_code=429)
        match err.kind:
            case ErrorKind.RATE_LIMIT_EXCEEDED:
                outcome = "back off"
            case _:
                outcome = "other"
        assert outcome == "back off"


class TestStatusMapping:
    @pytest.mark.parametrize(
        ("status", "exc_class"),
        [
            (400, BadRequestError),
            (401, AuthenticationError),
            (402, PaymentRequiredError),
            (403, AccessDeniedError),
            (404, NotFoundError),
            (429, RateLimitExceededError),
            (500, ServerError),
            (502, ServerError),
            (599, ServerError),
            (409, APIError),
            (418, APIError),
            (302, APIError),
        ],
    )
    def test_error_class_for_status(
        self, status: int, exc_class: type[APIError]
    ) -> None:
        assert error_class_for_status(status) is exc_class

    def test_hint_for_auth_failure(self) -> None:
        assert hint_for_status(401) is not None
        assert "API key" in hint_for_status(401)  # type: ignore[operator]

    def test_no_hint_for_not_found(self) -> None:
        assert hint_for_status(404) is None
