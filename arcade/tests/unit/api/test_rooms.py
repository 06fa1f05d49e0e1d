"""
Tests for the room endpoints.

Covers request translation, the JSON envelopes and the mapping of storage
errors onto HTTP status codes.
"""

import uuid
from datetime import UTC, datetime

from arcade.exceptions import BadRequestError, InternalError, NotFoundError
from arcade.models.base import DEFAULT_FILTER_LIMIT
from arcade.models.room import Room, RoomChange, RoomFilter


def make_room(**overrides) -> Room:
    fields = {
        "id": uuid.uuid4(),
        "name": "Nowhere",
        "description": "An empty place.",
        "owner_id": uuid.uuid4(),
        "parent_id": uuid.uuid4(),
        "created": datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=UTC),
        "updated": datetime(2024, 5, 1, 12, 30, 45, tzinfo=UTC),
    }
    fields.update(overrides)
    return Room(**fields)


class TestListRooms:
    def test_returns_envelope(self, client, storages):
        """Test that rooms are listed under the rooms key with camelCase fields."""
        room = make_room()
        storages.rooms.list.return_value = [room]

        response = client.get("/v1/rooms")

        assert response.status_code == 200
        assert response.json() == {
            "rooms": [
                {
                    "id": str(room.id),
                    "name": "Nowhere",
                    "description": "An empty place.",
                    "ownerID": str(room.owner_id),
                    "parentID": str(room.parent_id),
                    "created": "2024-05-01T12:30:45.123",
                    "updated": "2024-05-01T12:30:45",
                }
            ]
        }
        storages.rooms.list.assert_awaited_once_with(RoomFilter(limit=DEFAULT_FILTER_LIMIT))

    def test_empty_list(self, client, storages):
        storages.rooms.list.return_value = []

        response = client.get("/v1/rooms")

        assert response.status_code == 200
        assert response.json() == {"rooms": []}

    def test_absent_limit_uses_default_page_size(self, client, storages):
        """Test that a request without a limit is paged at the default size."""
        storages.rooms.list.return_value = []

        client.get("/v1/rooms", params={"offset": "3"})

        filter_ = storages.rooms.list.await_args.args[0]
        assert filter_.limit == DEFAULT_FILTER_LIMIT
        assert filter_.offset == 3

    def test_query_parameters_build_filter(self, client, storages):
        storages.rooms.list.return_value = []
        owner = uuid.uuid4()

        response = client.get("/v1/rooms", params={"ownerID": str(owner), "limit": "10", "offset": "20"})

        assert response.status_code == 200
        storages.rooms.list.assert_awaited_once_with(RoomFilter(owner_id=owner, limit=10, offset=20))

    def test_malformed_owner_is_bad_request(self, client, storages):
        response = client.get("/v1/rooms", params={"ownerID": "nope"})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "invalid ownerID query parameter: 'nope'"
        storages.rooms.list.assert_not_awaited()

    def test_limit_out_of_range(self, client, storages):
        response = client.get("/v1/rooms", params={"limit": "101"})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "invalid limit query parameter: '101'"

    def test_zero_offset_is_rejected(self, client):
        response = client.get("/v1/rooms", params={"offset": "0"})

        assert response.status_code == 400

    def test_storage_failure_is_internal(self, client, storages):
        storages.rooms.list.side_effect = InternalError("failed to list rooms: internal server error: boom")

        response = client.get("/v1/rooms")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["type"] == "internal"
        assert error["message"] == "failed to list rooms: internal server error: boom"


class TestGetRoom:
    def test_found(self, client, storages):
        room = make_room()
        storages.rooms.get.return_value = room

        response = client.get(f"/v1/rooms/{room.id}")

        assert response.status_code == 200
        assert response.json()["room"]["id"] == str(room.id)
        storages.rooms.get.assert_awaited_once_with(room.id)

    def test_not_found(self, client, storages):
        storages.rooms.get.side_effect = NotFoundError("failed to get room: not found")

        response = client.get(f"/v1/rooms/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "failed to get room: not found"

    def test_malformed_id(self, client, storages):
        response = client.get("/v1/rooms/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "invalid room id, not a well formed uuid: 'not-a-uuid'"
        storages.rooms.get.assert_not_awaited()


class TestCreateRoom:
    def test_created(self, client, storages):
        room = make_room()
        storages.rooms.create.return_value = room
        body = {
            "name": room.name,
            "description": room.description,
            "ownerID": str(room.owner_id),
            "parentID": str(room.parent_id),
        }

        response = client.post("/v1/rooms", json=body)

        assert response.status_code == 201
        assert response.json()["room"]["ownerID"] == str(room.owner_id)
        storages.rooms.create.assert_awaited_once_with(
            RoomChange(name=room.name, description=room.description, owner_id=room.owner_id, parent_id=room.parent_id)
        )

    def test_empty_name_is_bad_request(self, client, storages):
        body = {"name": "", "description": "d", "ownerID": str(uuid.uuid4()), "parentID": str(uuid.uuid4())}

        response = client.post("/v1/rooms", json=body)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "empty room name"
        storages.rooms.create.assert_not_awaited()

    def test_malformed_owner(self, client, storages):
        body = {"name": "n", "description": "d", "ownerID": "x", "parentID": str(uuid.uuid4())}

        response = client.post("/v1/rooms", json=body)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "invalid ownerID: 'x'"

    def test_non_json_body(self, client, storages):
        response = client.post("/v1/rooms", content=b"not json", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "invalid body: a valid json encoded body is required"
        storages.rooms.create.assert_not_awaited()

    def test_reference_violation(self, client, storages):
        storages.rooms.create.side_effect = BadRequestError(
            "failed to create room: bad request: the given ownerID or parentID does not exist"
        )
        body = {"name": "n", "description": "d", "ownerID": str(uuid.uuid4()), "parentID": str(uuid.uuid4())}

        response = client.post("/v1/rooms", json=body)

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "bad_request"


class TestUpdateRoom:
    def test_updated(self, client, storages):
        room = make_room(name="Somewhere")
        storages.rooms.update.return_value = room
        body = {
            "name": "Somewhere",
            "description": room.description,
            "ownerID": str(room.owner_id),
            "parentID": str(room.parent_id),
        }

        response = client.put(f"/v1/rooms/{room.id}", json=body)

        assert response.status_code == 200
        assert response.json()["room"]["name"] == "Somewhere"
        args = storages.rooms.update.await_args.args
        assert args[0] == room.id
        assert args[1].name == "Somewhere"

    def test_not_found(self, client, storages):
        storages.rooms.update.side_effect = NotFoundError("failed to update room: not found")
        body = {"name": "n", "description": "d", "ownerID": str(uuid.uuid4()), "parentID": str(uuid.uuid4())}

        response = client.put(f"/v1/rooms/{uuid.uuid4()}", json=body)

        assert response.status_code == 404


class TestRemoveRoom:
    def test_removed(self, client, storages):
        room_id = uuid.uuid4()
        storages.rooms.remove.return_value = None

        response = client.delete(f"/v1/rooms/{room_id}")

        assert response.status_code == 200
        assert response.json() == {}
        storages.rooms.remove.assert_awaited_once_with(room_id)

    def test_not_found(self, client, storages):
        storages.rooms.remove.side_effect = NotFoundError("failed to remove room: not found")

        response = client.delete(f"/v1/rooms/{uuid.uuid4()}")

        assert response.status_code == 404
