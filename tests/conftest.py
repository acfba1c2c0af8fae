"""Shared fixtures for connector tests backed by ``httpx.MockTransport``."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest
import pytest_asyncio

from unsplash_connector.config import ConnectorSettings
from unsplash_connector.services.connector import UnsplashConnector

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def settings() -> ConnectorSettings:
    return ConnectorSettings(access_key="test-key", _env_file=None)


@pytest_asyncio.fixture
async def make_connector(settings: ConnectorSettings):
    clients: list[httpx.AsyncClient] = []

    def _factory(handler: Handler) -> tuple[UnsplashConnector, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport)
        clients.append(client)
        return UnsplashConnector(client, "test-key", settings=settings), transport

    yield _factory

    for client in clients:
        await client.aclose()
