"""
JSON request and response models.

Field names on the wire are camelCase (ownerID, parentID, ...); the Python
attributes are snake_case with aliases.
"""

from .item import ItemEnvelope, ItemLocationModel, ItemModel, ItemRequest, ItemsEnvelope
from .link import LinkEnvelope, LinkModel, LinkRequest, LinksEnvelope
from .player import PlayerEnvelope, PlayerModel, PlayerRequest, PlayersEnvelope
from .room import RoomEnvelope, RoomModel, RoomRequest, RoomsEnvelope

__all__ = [
    "ItemEnvelope",
    "ItemLocationModel",
    "ItemModel",
    "ItemRequest",
    "ItemsEnvelope",
    "LinkEnvelope",
    "LinkModel",
    "LinkRequest",
    "LinksEnvelope",
    "PlayerEnvelope",
    "PlayerModel",
    "PlayerRequest",
    "PlayersEnvelope",
    "RoomEnvelope",
    "RoomModel",
    "RoomRequest",
    "RoomsEnvelope",
]
