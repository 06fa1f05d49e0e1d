"""Link records, filters and change requests.

A link connects a location room to a destination room.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .base import clamp_limit, clamp_offset, validate_change
from .ids import NIL_ID, LinkID, PlayerID, RoomID


@dataclass(frozen=True)
class Link:
    id: LinkID
    name: str
    description: str
    owner_id: PlayerID
    location_id: RoomID
    destination_id: RoomID
    created: datetime
    updated: datetime


@dataclass(frozen=True)
class LinkFilter:
    owner_id: PlayerID = field(default=PlayerID(NIL_ID))
    location_id: RoomID = field(default=RoomID(NIL_ID))
    destination_id: RoomID = field(default=RoomID(NIL_ID))
    limit: int = 0
    offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "limit", clamp_limit(self.limit))
        object.__setattr__(self, "offset", clamp_offset(self.offset))


@dataclass(frozen=True)
class LinkChange:
    name: str
    description: str
    owner_id: PlayerID
    location_id: RoomID
    destination_id: RoomID

    def __post_init__(self) -> None:
        validate_change("link", self.name, self.description)
