"""
Codec between an item's LocationID and its persisted columns.

An item row stores its location across three nullable foreign keys:
location_item_id, location_player_id and location_room_id. Exactly one
should be set. Rows where more than one is set are tolerated on read: the
winner is chosen by the fixed precedence player, room, item and the anomaly is
logged.
"""

from typing import Any
from uuid import UUID

from arcade.exceptions import MissingLocationError
from arcade.models.ids import LocationID, LocationKind, parse_id
from arcade.structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)

ITEM_COLUMN = "location_item_id"
PLAYER_COLUMN = "location_player_id"
ROOM_COLUMN = "location_room_id"

COLUMN_FOR_KIND = {
    LocationKind.ITEM: ITEM_COLUMN,
    LocationKind.PLAYER: PLAYER_COLUMN,
    LocationKind.ROOM: ROOM_COLUMN,
}


def encode(location: LocationID) -> tuple[UUID | None, UUID | None, UUID | None]:
    """
    Encode a location into (item column, player column, room column).

    Exactly one slot is populated; the other two are None.
    """
    item_col = location.id if location.kind is LocationKind.ITEM else None
    player_col = location.id if location.kind is LocationKind.PLAYER else None
    room_col = location.id if location.kind is LocationKind.ROOM else None
    if item_col is None and player_col is None and room_col is None:
        raise ValueError(f"unknown location kind: {location.kind!r}")
    return item_col, player_col, room_col


def encode_params(location: LocationID) -> dict[str, UUID | None]:
    """Encode a location as bind parameters keyed by column name."""
    item_col, player_col, room_col = encode(location)
    return {ITEM_COLUMN: item_col, PLAYER_COLUMN: player_col, ROOM_COLUMN: room_col}


def decode(item_col: Any, player_col: Any, room_col: Any, *, item_id: Any = None) -> LocationID:
    """
    Decode the three location columns of an item row.

    Args:
        item_col: location_item_id value, or None
        player_col: location_player_id value, or None
        room_col: location_room_id value, or None
        item_id: The row's id, used only for logging anomalies

    Returns:
        LocationID: The location, chosen by precedence player > room > item

    Raises:
        MissingLocationError: If all three columns are null
    """
    location: LocationID | None = None

    for kind, value in (
        (LocationKind.PLAYER, player_col),
        (LocationKind.ROOM, room_col),
        (LocationKind.ITEM, item_col),
    ):
        if value is None:
            continue
        if location is None:
            location = LocationID(kind, parse_id(value))
        else:
            logger.error(
                "invalid location for item",
                item_id=str(item_id),
                chosen_kind=location.kind.value,
                ignored_kind=kind.value,
                ignored_id=str(value),
            )

    if location is None:
        raise MissingLocationError(f"item {item_id} has no location")
    return location


def decode_row(row: Any, *, item_id: Any = None) -> LocationID:
    """Decode the location columns of a row mapping."""
    return decode(row[ITEM_COLUMN], row[PLAYER_COLUMN], row[ROOM_COLUMN], item_id=item_id)
