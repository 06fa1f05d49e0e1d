"""
Fixtures for API endpoint tests.

The application is built by the real factory; storages are replaced by
AsyncMock instances placed on app.state before startup so no database is
opened.
"""

from collections.abc import Iterator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from arcade.api.dependencies import Storages
from arcade.app.factory import create_app
from arcade.persistence.repositories import ItemRepository, LinkRepository, PlayerRepository, RoomRepository


@pytest.fixture
def storages() -> Storages:
    return Storages(
        items=AsyncMock(spec=ItemRepository),
        links=AsyncMock(spec=LinkRepository),
        players=AsyncMock(spec=PlayerRepository),
        rooms=AsyncMock(spec=RoomRepository),
    )


@pytest.fixture
def app(storages):
    application = create_app()
    application.state.storages = storages
    return application


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
