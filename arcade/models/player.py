"""Player records, filters and change requests."""

from dataclasses import dataclass, field
from datetime import datetime

from .base import clamp_limit, clamp_offset, validate_change
from .ids import NIL_ID, PlayerID, RoomID


@dataclass(frozen=True)
class Player:
    id: PlayerID
    name: str
    description: str
    home_id: RoomID
    location_id: RoomID
    created: datetime
    updated: datetime


@dataclass(frozen=True)
class PlayerFilter:
    """Restricts a player listing to a room, when location_id is set."""

    location_id: RoomID = field(default=RoomID(NIL_ID))
    limit: int = 0
    offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "limit", clamp_limit(self.limit))
        object.__setattr__(self, "offset", clamp_offset(self.offset))


@dataclass(frozen=True)
class PlayerChange:
    name: str
    description: str
    home_id: RoomID
    location_id: RoomID

    def __post_init__(self) -> None:
        validate_change("player", self.name, self.description)
