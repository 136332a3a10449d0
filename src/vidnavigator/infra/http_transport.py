"""httpx backed implementation of :class:`~vidnavigator.core.protocols.ApiTransport`.

This module is the **only** place in the codebase that imports ``httpx``
and the only place where HTTP failures are classified.  Every ``httpx``
exception is caught here and re-raised as a typed
:class:`~vidnavigator.exceptions.VidNavigatorError` subclass — nothing
raw escapes the infrastructure boundary.
"""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import ExitStack
from os import PathLike
from pathlib import Path
from typing import Any

import httpx
from loguru import logger

from vidnavigator.config import ClientConfig
from vidnavigator.exceptions import (
    APIError,
    TransportError,
    error_class_for_status,
    hint_for_status,
)


class HttpxTransport:
    """Concrete :class:`ApiTransport` backed by ``httpx.AsyncClient``.

    Usage::

        transport = HttpxTransport(ClientConfig(api_key="..."))
        payload = await transport.execute("GET", "/usage")
        await transport.aclose()

    ``config.transport_options`` is passed straight to
    ``httpx.AsyncClient`` (``timeout``, ``proxy``, ``transport`` ...).
    Headers supplied there are merged underneath the fixed
    authentication and user-agent headers.
    """

    def __init__(self, config: ClientConfig) -> None:
        options = dict(config.transport_options)
        headers = {**dict(options.pop("headers", None) or {}), **config.default_headers}
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers=headers,
            **options,
        )

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    async def execute(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, str | PathLike[str]] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        *files* maps form field names to local paths.  Each file is opened
        here and streamed by httpx in chunks; httpx reads a plain file
        object synchronously, so those reads block the event loop.

        Raises
        ------
        APIError
            (or a subclass chosen by status code) for any non-2xx response.
        TransportError
            When the request never produced a response, or a file part
            could not be opened or read.
        """
        query = (
            {key: value for key, value in params.items() if value is not None}
            if params is not None else None
        )
        logger.debug("{} {}", method, path)

        try:
            with ExitStack() as stack:
                parts = None
                if files is not None:
                    parts = {}
                    for name, source in files.items():
                        local = Path(source)
                        parts[name] = (local.name, stack.enter_context(local.open("rb")))
                response = await self._client.request(
                    method,
                    path,
                    json=json,
                    params=query,
                    data=data,
                    files=parts,
                    headers=headers,
                )
        except httpx.RequestError as exc:
            logger.warning("{} {} failed before a response: {}", method, path, exc)
            raise TransportError(str(exc) or type(exc).__name__) from exc
        except OSError as exc:
            logger.warning("{} {} could not read upload: {}", method, path, exc)
            raise TransportError(str(exc)) from exc

        if not response.is_success:
            raise self._classify(response)

        try:
            return response.json()
        except ValueError as exc:
            raise APIError(
                "API returned a non-JSON response",
                status_code=response.status_code,
            ) from exc

    # ------------------------------------------------------------------
    # Error classification
    # ------------------------------------------------------------------

    @staticmethod
    def _error_body(response: httpx.Response) -> dict[str, Any]:
        """Extract ``{code, message, details}`` from an error response.

        Bodies that are not JSON, or not shaped like the API error
        envelope, yield an empty dict.
        """
        try:
            body = response.json()
        except ValueError:
            return {}
        if not isinstance(body, dict):
            return {}
        error = body.get("error")
        return error if isinstance(error, dict) else {}

    @classmethod
    def _classify(cls, response: httpx.Response) -> APIError:
        """Map a non-2xx response onto the matching :class:`APIError`."""
        status = response.status_code
        error = cls._error_body(response)
        error_code = error.get("code")
        error_message = error.get("message")
        fallback = f"Request failed with status code {status}"
        message = f"API request failed with status {status}: {error_message or fallback}"

        logger.warning(
            "{} {} -> {} ({})",
            response.request.method,
            response.request.url.path,
            status,
            error_code or "no error code",
        )
        error_class = error_class_for_status(status)
        return error_class(
            message,
            status_code=status,
            error_code=error_code,
            error_message=error_message,
            details=error.get("details"),
            hint=hint_for_status(status),
        )
