"""Room records, filters and change requests."""

from dataclasses import dataclass, field
from datetime import datetime

from .base import clamp_limit, clamp_offset, validate_change
from .ids import NIL_ID, PlayerID, RoomID


@dataclass(frozen=True)
class Room:
    id: RoomID
    name: str
    description: str
    owner_id: PlayerID
    parent_id: RoomID
    created: datetime
    updated: datetime


@dataclass(frozen=True)
class RoomFilter:
    """Restricts a room listing. Nil identifiers are not filtered on."""

    owner_id: PlayerID = field(default=PlayerID(NIL_ID))
    parent_id: RoomID = field(default=RoomID(NIL_ID))
    limit: int = 0
    offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "limit", clamp_limit(self.limit))
        object.__setattr__(self, "offset", clamp_offset(self.offset))


@dataclass(frozen=True)
class RoomChange:
    """The mutable fields of a room, used for both create and update."""

    name: str
    description: str
    owner_id: PlayerID
    parent_id: RoomID

    def __post_init__(self) -> None:
        validate_change("room", self.name, self.description)
