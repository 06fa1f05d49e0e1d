"""
Item repository.

Items are the only kind with a polymorphic location. The location is encoded
into its three nullable columns on write and decoded back on read by
arcade.persistence.location_codec.
"""

from collections.abc import Mapping
from typing import Any

from arcade.models.ids import ItemID, PlayerID
from arcade.models.item import Item, ItemChange, ItemFilter
from arcade.persistence import location_codec
from arcade.persistence.drivers.postgres import ItemDriver
from arcade.persistence.protocols import DatabaseProtocol, QueryDriverProtocol
from arcade.persistence.resource_storage import ResourceDescriptor, ResourceStorage
from arcade.persistence.row_decoding import column_id, column_text, column_timestamp


def decode_item(row: Mapping[str, Any]) -> Item:
    item_id = ItemID(column_id(row, "id"))
    return Item(
        id=item_id,
        name=column_text(row, "name"),
        description=column_text(row, "description"),
        owner_id=PlayerID(column_id(row, "owner_id")),
        location=location_codec.decode_row(row, item_id=item_id),
        created=column_timestamp(row, "created"),
        updated=column_timestamp(row, "updated"),
    )


def encode_item_change(change: ItemChange) -> dict[str, Any]:
    return {
        "name": change.name,
        "description": change.description,
        "owner_id": change.owner_id,
        **location_codec.encode_params(change.location),
    }


def item_reference_violation(change: ItemChange) -> str:
    return (
        "the given ownerID or locationID does not exist: "
        f"ownerID '{change.owner_id}', locationID '{change.location.id} ({change.location.kind})'"
    )


ITEM_DESCRIPTOR: ResourceDescriptor[Item, ItemChange] = ResourceDescriptor(
    kind="item",
    plural="items",
    decode_row=decode_item,
    encode_change=encode_item_change,
    reference_violation=item_reference_violation,
)


class ItemRepository(ResourceStorage[Item, ItemFilter, ItemChange]):
    """Persistent storage of items."""

    def __init__(self, db: DatabaseProtocol, driver: QueryDriverProtocol[ItemFilter] | None = None) -> None:
        super().__init__(db, driver or ItemDriver(), ITEM_DESCRIPTOR)
