"""Client configuration.

The library never reads the process environment: the API key and any
overrides are supplied by the caller.  Validation happens eagerly in
``__post_init__`` so that a bad configuration fails before a transport
(or a socket) is ever created.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from vidnavigator.exceptions import ConfigurationError
from vidnavigator.version import __version__

DEFAULT_BASE_URL = "https://api.vidnavigator.com/v1"

API_KEY_HEADER = "X-API-Key"
USER_AGENT = f"vidnavigator-python/{__version__}"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable settings shared by the transport and the facade."""

    api_key: str = field(repr=False)
    """Credential sent in the ``X-API-Key`` header.  Never logged."""

    base_url: str = DEFAULT_BASE_URL
    """Endpoint root; override for staging or a local mock server."""

    transport_options: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}),
    )
    """Keyword arguments passed through to ``httpx.AsyncClient``."""

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ConfigurationError(
                "An API key is required to use the VidNavigator client.",
                hint="Pass api_key=... when constructing VidNavigatorClient.",
            )
        if not self.base_url or not self.base_url.strip():
            raise ConfigurationError("base_url must not be empty.")
        # Freeze a private copy so later mutation by the caller has no effect.
        object.__setattr__(
            self,
            "transport_options",
            MappingProxyType(dict(self.transport_options)),
        )

    @property
    def default_headers(self) -> dict[str, str]:
        """Headers attached to every outgoing request."""
        return {
            API_KEY_HEADER: self.api_key,
            "User-Agent": USER_AGENT,
        }
