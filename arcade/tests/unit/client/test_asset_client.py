"""
Tests for the asset client against the real application.

Each kind is driven through list/get/create/update/remove; storage errors
raised on the server come back as the same exception classes.
"""

import uuid
from datetime import UTC, datetime

import pytest

from arcade.exceptions import BadRequestError, InternalError, NotFoundError
from arcade.models.ids import LocationID
from arcade.models.item import Item, ItemChange, ItemFilter
from arcade.models.link import Link, LinkChange, LinkFilter
from arcade.models.player import Player, PlayerChange, PlayerFilter
from arcade.models.room import Room, RoomChange, RoomFilter

CREATED = datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=UTC)
UPDATED = datetime(2024, 5, 2, 8, 0, 0, tzinfo=UTC)


def make_room() -> Room:
    return Room(
        id=uuid.uuid4(),
        name="Nowhere",
        description="An empty place.",
        owner_id=uuid.uuid4(),
        parent_id=uuid.uuid4(),
        created=CREATED,
        updated=UPDATED,
    )


class TestRooms:
    @pytest.mark.asyncio
    async def test_list_sends_filter_and_returns_records(self, asset_client, storages):
        """Test that only set filter fields are sent and records are rebuilt from the envelope."""
        room = make_room()
        storages.rooms.list.return_value = [room]
        owner_id = uuid.uuid4()

        rooms = await asset_client.rooms.list(RoomFilter(owner_id=owner_id, limit=10, offset=20))

        assert rooms == [room]
        storages.rooms.list.assert_awaited_once_with(RoomFilter(owner_id=owner_id, limit=10, offset=20))

    @pytest.mark.asyncio
    async def test_list_empty_filter_uses_server_default(self, asset_client, storages):
        storages.rooms.list.return_value = []

        assert await asset_client.rooms.list(RoomFilter()) == []
        storages.rooms.list.assert_awaited_once_with(RoomFilter(limit=50))

    @pytest.mark.asyncio
    async def test_get(self, asset_client, storages):
        room = make_room()
        storages.rooms.get.return_value = room

        assert await asset_client.rooms.get(room.id) == room
        storages.rooms.get.assert_awaited_once_with(room.id)

    @pytest.mark.asyncio
    async def test_create_sends_change(self, asset_client, storages):
        room = make_room()
        storages.rooms.create.return_value = room
        change = RoomChange(name=room.name, description=room.description, owner_id=room.owner_id, parent_id=room.parent_id)

        assert await asset_client.rooms.create(change) == room
        storages.rooms.create.assert_awaited_once_with(change)

    @pytest.mark.asyncio
    async def test_update_sends_id_and_change(self, asset_client, storages):
        room = make_room()
        storages.rooms.update.return_value = room
        change = RoomChange(name="Attic", description="Dusty.", owner_id=room.owner_id, parent_id=room.parent_id)

        assert await asset_client.rooms.update(room.id, change) == room
        storages.rooms.update.assert_awaited_once_with(room.id, change)

    @pytest.mark.asyncio
    async def test_remove(self, asset_client, storages):
        room_id = uuid.uuid4()

        assert await asset_client.rooms.remove(room_id) is None
        storages.rooms.remove.assert_awaited_once_with(room_id)

    @pytest.mark.asyncio
    async def test_not_found_comes_back_as_not_found(self, asset_client, storages):
        storages.rooms.get.side_effect = NotFoundError("failed to get room: not found")

        with pytest.raises(NotFoundError) as exc_info:
            await asset_client.rooms.get(uuid.uuid4())

        assert exc_info.value.message == "failed to get room: not found: server error: failed to get room: not found"

    @pytest.mark.asyncio
    async def test_bad_request_comes_back_as_bad_request(self, asset_client, storages):
        storages.rooms.remove.side_effect = BadRequestError("failed to remove room: bad request: room in use")

        with pytest.raises(BadRequestError):
            await asset_client.rooms.remove(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_internal_comes_back_as_internal(self, asset_client, storages):
        storages.rooms.list.side_effect = InternalError("failed to list rooms: internal server error")

        with pytest.raises(InternalError) as exc_info:
            await asset_client.rooms.list(RoomFilter())

        assert exc_info.value.context.metadata["status"] == 500


class TestPlayers:
    @pytest.mark.asyncio
    async def test_create_and_list(self, asset_client, storages):
        player = Player(
            id=uuid.uuid4(),
            name="Ann",
            description="A wanderer.",
            home_id=uuid.uuid4(),
            location_id=uuid.uuid4(),
            created=CREATED,
            updated=UPDATED,
        )
        storages.players.create.return_value = player
        storages.players.list.return_value = [player]
        change = PlayerChange(
            name=player.name,
            description=player.description,
            home_id=player.home_id,
            location_id=player.location_id,
        )

        assert await asset_client.players.create(change) == player
        assert await asset_client.players.list(PlayerFilter(location_id=player.location_id)) == [player]
        storages.players.create.assert_awaited_once_with(change)
        storages.players.list.assert_awaited_once_with(PlayerFilter(location_id=player.location_id, limit=50))


class TestLinks:
    @pytest.mark.asyncio
    async def test_update_and_list_by_destination(self, asset_client, storages):
        link = Link(
            id=uuid.uuid4(),
            name="Door",
            description="A wooden door.",
            owner_id=uuid.uuid4(),
            location_id=uuid.uuid4(),
            destination_id=uuid.uuid4(),
            created=CREATED,
            updated=UPDATED,
        )
        storages.links.update.return_value = link
        storages.links.list.return_value = [link]
        change = LinkChange(
            name=link.name,
            description=link.description,
            owner_id=link.owner_id,
            location_id=link.location_id,
            destination_id=link.destination_id,
        )

        assert await asset_client.links.update(link.id, change) == link
        assert await asset_client.links.list(LinkFilter(destination_id=link.destination_id, limit=5)) == [link]
        storages.links.update.assert_awaited_once_with(link.id, change)
        storages.links.list.assert_awaited_once_with(LinkFilter(destination_id=link.destination_id, limit=5))


class TestItems:
    @pytest.mark.asyncio
    async def test_create_keeps_location(self, asset_client, storages):
        container_id = uuid.uuid4()
        item = Item(
            id=uuid.uuid4(),
            name="Coin",
            description="A gold coin.",
            owner_id=uuid.uuid4(),
            location=LocationID.item(container_id),
            created=CREATED,
            updated=UPDATED,
        )
        storages.items.create.return_value = item
        change = ItemChange(
            name=item.name,
            description=item.description,
            owner_id=item.owner_id,
            location=item.location,
        )

        assert await asset_client.items.create(change) == item
        storages.items.create.assert_awaited_once_with(change)

    @pytest.mark.asyncio
    async def test_list_by_location_sends_type(self, asset_client, storages):
        storages.items.list.return_value = []
        location = LocationID.player(uuid.uuid4())

        assert await asset_client.items.list(ItemFilter(location=location, offset=3)) == []
        storages.items.list.assert_awaited_once_with(ItemFilter(location=location, limit=50, offset=3))

    @pytest.mark.asyncio
    async def test_get_missing_item(self, asset_client, storages):
        storages.items.get.side_effect = NotFoundError("failed to get item: not found")

        with pytest.raises(NotFoundError):
            await asset_client.items.get(uuid.uuid4())
