"""
Item records, filters and change requests.

Unlike the other kinds an item's location is polymorphic: it may sit inside
another item, be carried by a player, or lie in a room. In memory this is
always a LocationID; the three-column persisted form never leaves the
persistence layer.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .base import clamp_limit, clamp_offset, validate_change
from .ids import NIL_ID, ItemID, LocationID, PlayerID


@dataclass(frozen=True)
class Item:
    id: ItemID
    name: str
    description: str
    owner_id: PlayerID
    location: LocationID
    created: datetime
    updated: datetime


@dataclass(frozen=True)
class ItemFilter:
    """
    Restricts an item listing.

    location is optional; when set, only items at that location (of that
    kind) are listed.
    """

    owner_id: PlayerID = field(default=PlayerID(NIL_ID))
    location: LocationID | None = None
    limit: int = 0
    offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "limit", clamp_limit(self.limit))
        object.__setattr__(self, "offset", clamp_offset(self.offset))


@dataclass(frozen=True)
class ItemChange:
    name: str
    description: str
    owner_id: PlayerID
    location: LocationID

    def __post_init__(self) -> None:
        validate_change("item", self.name, self.description)
