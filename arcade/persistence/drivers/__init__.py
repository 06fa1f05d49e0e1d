"""Query drivers, one per resource kind and backend."""

from .postgres import ItemDriver, LinkDriver, PlayerDriver, PostgresDriver, RoomDriver, limit_and_offset

__all__ = ["ItemDriver", "LinkDriver", "PlayerDriver", "PostgresDriver", "RoomDriver", "limit_and_offset"]
