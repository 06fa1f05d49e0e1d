"""
Identifier types shared by all resource kinds.

Every identifier is a UUID. The nil UUID is never assigned by the database and
is used to mean "absent" in filters.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID

ItemID = NewType("ItemID", UUID)
LinkID = NewType("LinkID", UUID)
PlayerID = NewType("PlayerID", UUID)
RoomID = NewType("RoomID", UUID)

NIL_ID = UUID(int=0)


def is_nil(value: UUID | None) -> bool:
    return value is None or value == NIL_ID


def parse_id(value: object) -> UUID:
    """
    Coerce a value to uuid.UUID.

    Database drivers hand back their own UUID types (asyncpg returns
    pgproto UUIDs), so anything with a canonical string form is accepted.
    """
    if type(value) is UUID:
        return value
    if value is None:
        raise TypeError("identifier is null")
    return UUID(str(value))


class LocationKind(str, Enum):
    """The kind of thing an item can be located in."""

    ITEM = "item"
    PLAYER = "player"
    ROOM = "room"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LocationID:
    """Where an item is: exactly one of an item, a player, or a room."""

    kind: LocationKind
    id: UUID

    @classmethod
    def item(cls, item_id: UUID) -> "LocationID":
        return cls(LocationKind.ITEM, item_id)

    @classmethod
    def player(cls, player_id: UUID) -> "LocationID":
        return cls(LocationKind.PLAYER, player_id)

    @classmethod
    def room(cls, room_id: UUID) -> "LocationID":
        return cls(LocationKind.ROOM, room_id)

    def __str__(self) -> str:
        return f"{self.id} ({self.kind})"
