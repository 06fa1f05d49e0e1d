"""
Fixtures for client tests.

The client talks to the real application through httpx.ASGITransport, with
AsyncMock storages on app.state, so requests and responses cross the full
HTTP stack without a network or a database.
"""

from collections.abc import AsyncIterator
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

from arcade.api.dependencies import Storages
from arcade.app.factory import create_app
from arcade.client import AssetClient
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


@pytest_asyncio.fixture
async def asset_client(app) -> AsyncIterator[AssetClient]:
    async with AssetClient("http://testserver", transport=httpx.ASGITransport(app=app)) as client:
        yield client
