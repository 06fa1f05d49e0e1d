"""
Tests for the item endpoints.

Items carry their location as an object naming both the id and the kind.
"""

import uuid
from datetime import UTC, datetime

from arcade.models.base import DEFAULT_FILTER_LIMIT
from arcade.models.ids import LocationID, LocationKind
from arcade.models.item import Item, ItemChange, ItemFilter


def make_item(location: LocationID) -> Item:
    stamp = datetime(2024, 5, 1, tzinfo=UTC)
    return Item(
        id=uuid.uuid4(),
        name="Lamp",
        description="A brass lamp.",
        owner_id=uuid.uuid4(),
        location=location,
        created=stamp,
        updated=stamp,
    )


def test_list_items_renders_location(client, storages):
    room_id = uuid.uuid4()
    item = make_item(LocationID.room(room_id))
    storages.items.list.return_value = [item]

    response = client.get("/v1/items")

    assert response.status_code == 200
    body = response.json()["items"][0]
    assert body["ownerID"] == str(item.owner_id)
    assert body["locationID"] == {"id": str(room_id), "type": "room"}


def test_list_items_by_location(client, storages):
    storages.items.list.return_value = []
    player_id = uuid.uuid4()

    response = client.get("/v1/items", params={"locationID": str(player_id), "locationType": "player"})

    assert response.status_code == 200
    expected = ItemFilter(location=LocationID.player(player_id), limit=DEFAULT_FILTER_LIMIT)
    storages.items.list.assert_awaited_once_with(expected)


def test_location_type_is_required_with_location(client, storages):
    response = client.get("/v1/items", params={"locationID": str(uuid.uuid4())})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "locationType required when locationID is set"
    storages.items.list.assert_not_awaited()


def test_unknown_location_type(client):
    response = client.get("/v1/items", params={"locationID": str(uuid.uuid4()), "locationType": "bag"})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "invalid locationType query parameter: 'bag'"


def test_create_item_in_room(client, storages):
    """Test that a room location in the body reaches storage as a room LocationID."""
    room_id = uuid.uuid4()
    item = make_item(LocationID.room(room_id))
    storages.items.create.return_value = item
    body = {
        "name": "Lamp",
        "description": "A brass lamp.",
        "ownerID": str(item.owner_id),
        "locationID": {"id": str(room_id), "type": "room"},
    }

    response = client.post("/v1/items", json=body)

    assert response.status_code == 201
    assert response.json()["item"]["locationID"] == {"id": str(room_id), "type": "room"}
    change = storages.items.create.await_args.args[0]
    assert change == ItemChange(
        name="Lamp", description="A brass lamp.", owner_id=item.owner_id, location=LocationID.room(room_id)
    )
    assert change.location.kind is LocationKind.ROOM


def test_create_item_with_unknown_location_type(client, storages):
    body = {
        "name": "Lamp",
        "description": "A brass lamp.",
        "ownerID": str(uuid.uuid4()),
        "locationID": {"id": str(uuid.uuid4()), "type": "pocket"},
    }

    response = client.post("/v1/items", json=body)

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "invalid locationID.type: 'pocket'"
    storages.items.create.assert_not_awaited()


def test_create_item_with_malformed_location_id(client, storages):
    body = {
        "name": "Lamp",
        "description": "A brass lamp.",
        "ownerID": str(uuid.uuid4()),
        "locationID": {"id": "nowhere", "type": "item"},
    }

    response = client.post("/v1/items", json=body)

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "invalid locationID.id: 'nowhere'"


def test_create_item_location_type_is_case_insensitive(client, storages):
    """Test that a mixed-case location type in the body is accepted."""
    player_id = uuid.uuid4()
    storages.items.create.return_value = make_item(LocationID.player(player_id))
    body = {
        "name": "Lamp",
        "description": "A brass lamp.",
        "ownerID": str(uuid.uuid4()),
        "locationID": {"id": str(player_id), "type": "Player"},
    }

    response = client.post("/v1/items", json=body)

    assert response.status_code == 201
    change = storages.items.create.await_args.args[0]
    assert change.location == LocationID.player(player_id)
