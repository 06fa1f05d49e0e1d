"""
Concrete storages for each resource kind.

Each module pairs a ResourceDescriptor with its PostgreSQL driver.
"""

from .item_repository import ItemRepository
from .link_repository import LinkRepository
from .player_repository import PlayerRepository
from .room_repository import RoomRepository

__all__ = ["ItemRepository", "LinkRepository", "PlayerRepository", "RoomRepository"]
