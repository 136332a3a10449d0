"""Protocols (interfaces) consumed by the operation facade.

The facade depends ONLY on :class:`ApiTransport` — never on ``httpx``
directly — so tests and alternative HTTP stacks can be plugged in
without touching the client.
"""

from __future__ import annotations

from collections.abc import Mapping
from os import PathLike
from typing import Any, Protocol


class ApiTransport(Protocol):
    """Contract for the HTTP backend behind the client.

    Any object that implements :meth:`execute` and :meth:`aclose` with the
    correct signatures satisfies this protocol structurally (no explicit
    inheritance required).
    """

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
        """Perform one request and return the decoded JSON body.

        Parameters
        ----------
        method:
            HTTP verb (``GET``, ``POST``, ``DELETE`` ...).
        path:
            Path relative to the configured base URL (e.g. ``/files``).
        json:
            Request body, serialised as JSON.
        params:
            Query parameters.  ``None`` values are dropped.
        data:
            Multipart form fields.
        files:
            Multipart file parts, field name to local path.  The
            transport opens and closes the files itself.
        headers:
            Extra per-request headers.

        Raises
        ------
        APIError
            Or one of its subclasses, for any non-2xx response.
        TransportError
            When no response was received at all, including when a file
            part cannot be read.
        """
        ...  # pragma: no cover

    async def aclose(self) -> None:
        """Release any pooled connections."""
        ...  # pragma: no cover
