"""
Player repository.

Players have no owner; they have a home room and a current location room.
Player names are unique.
"""

from collections.abc import Mapping
from typing import Any

from arcade.models.ids import PlayerID, RoomID
from arcade.models.player import Player, PlayerChange, PlayerFilter
from arcade.persistence.drivers.postgres import PlayerDriver
from arcade.persistence.protocols import DatabaseProtocol, QueryDriverProtocol
from arcade.persistence.resource_storage import ResourceDescriptor, ResourceStorage
from arcade.persistence.row_decoding import column_id, column_text, column_timestamp


def decode_player(row: Mapping[str, Any]) -> Player:
    return Player(
        id=PlayerID(column_id(row, "id")),
        name=column_text(row, "name"),
        description=column_text(row, "description"),
        home_id=RoomID(column_id(row, "home_id")),
        location_id=RoomID(column_id(row, "location_id")),
        created=column_timestamp(row, "created"),
        updated=column_timestamp(row, "updated"),
    )


def encode_player_change(change: PlayerChange) -> dict[str, Any]:
    return {
        "name": change.name,
        "description": change.description,
        "home_id": change.home_id,
        "location_id": change.location_id,
    }


def player_reference_violation(change: PlayerChange) -> str:
    return (
        "the given homeID or locationID does not exist: "
        f"homeID '{change.home_id}', locationID '{change.location_id}'"
    )


PLAYER_DESCRIPTOR: ResourceDescriptor[Player, PlayerChange] = ResourceDescriptor(
    kind="player",
    plural="players",
    decode_row=decode_player,
    encode_change=encode_player_change,
    reference_violation=player_reference_violation,
)


class PlayerRepository(ResourceStorage[Player, PlayerFilter, PlayerChange]):
    """Persistent storage of players."""

    def __init__(self, db: DatabaseProtocol, driver: QueryDriverProtocol[PlayerFilter] | None = None) -> None:
        super().__init__(db, driver or PlayerDriver(), PLAYER_DESCRIPTOR)
