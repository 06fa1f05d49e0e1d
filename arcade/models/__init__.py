"""
Domain models for the arcade asset server.

Records are immutable, per-request values; the database is the system of
record.
"""

from .ids import NIL_ID, ItemID, LinkID, LocationID, LocationKind, PlayerID, RoomID
from .item import Item, ItemChange, ItemFilter
from .link import Link, LinkChange, LinkFilter
from .player import Player, PlayerChange, PlayerFilter
from .room import Room, RoomChange, RoomFilter

__all__ = [
    "NIL_ID",
    "ItemID",
    "LinkID",
    "PlayerID",
    "RoomID",
    "LocationID",
    "LocationKind",
    "Item",
    "ItemChange",
    "ItemFilter",
    "Link",
    "LinkChange",
    "LinkFilter",
    "Player",
    "PlayerChange",
    "PlayerFilter",
    "Room",
    "RoomChange",
    "RoomFilter",
]
