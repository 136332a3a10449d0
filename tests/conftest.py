"""Shared pytest fixtures and configuration for the vidnavigator test suite.

Guidelines
----------
* No internet access in any test.
* HTTP is mocked at the infra boundary with ``httpx.MockTransport``,
  or the whole transport is replaced by a fake :class:`ApiTransport`.
* Model tests must be pure — no side effects.
* Coroutines are driven with ``asyncio.run``; no async test plugin.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from vidnavigator.client import VidNavigatorClient

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def mock_http_client() -> Callable[[Handler], VidNavigatorClient]:
    """Factory for a real client whose HTTP layer is an ``httpx.MockTransport``."""

    def _build(handler: Handler) -> VidNavigatorClient:
        return VidNavigatorClient(
            api_key="test-key",
            base_url="https://api.test/v1",
            transport_options={"transport": httpx.MockTransport(handler)},
        )

    return _build
