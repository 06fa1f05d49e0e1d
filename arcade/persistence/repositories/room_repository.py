"""
Room repository.

Rooms are owned by a player and nest inside a parent room.
"""

from collections.abc import Mapping
from typing import Any

from arcade.models.ids import PlayerID, RoomID
from arcade.models.room import Room, RoomChange, RoomFilter
from arcade.persistence.drivers.postgres import RoomDriver
from arcade.persistence.protocols import DatabaseProtocol, QueryDriverProtocol
from arcade.persistence.resource_storage import ResourceDescriptor, ResourceStorage
from arcade.persistence.row_decoding import column_id, column_text, column_timestamp


def decode_room(row: Mapping[str, Any]) -> Room:
    return Room(
        id=RoomID(column_id(row, "id")),
        name=column_text(row, "name"),
        description=column_text(row, "description"),
        owner_id=PlayerID(column_id(row, "owner_id")),
        parent_id=RoomID(column_id(row, "parent_id")),
        created=column_timestamp(row, "created"),
        updated=column_timestamp(row, "updated"),
    )


def encode_room_change(change: RoomChange) -> dict[str, Any]:
    return {
        "name": change.name,
        "description": change.description,
        "owner_id": change.owner_id,
        "parent_id": change.parent_id,
    }


def room_reference_violation(change: RoomChange) -> str:
    return (
        "the given ownerID or parentID does not exist: "
        f"ownerID '{change.owner_id}', parentID '{change.parent_id}'"
    )


ROOM_DESCRIPTOR: ResourceDescriptor[Room, RoomChange] = ResourceDescriptor(
    kind="room",
    plural="rooms",
    decode_row=decode_room,
    encode_change=encode_room_change,
    reference_violation=room_reference_violation,
)


class RoomRepository(ResourceStorage[Room, RoomFilter, RoomChange]):
    """Persistent storage of rooms."""

    def __init__(self, db: DatabaseProtocol, driver: QueryDriverProtocol[RoomFilter] | None = None) -> None:
        super().__init__(db, driver or RoomDriver(), ROOM_DESCRIPTOR)
