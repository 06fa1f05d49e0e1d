"""
Link repository.

A link leads from its location room to its destination room.
"""

from collections.abc import Mapping
from typing import Any

from arcade.models.ids import LinkID, PlayerID, RoomID
from arcade.models.link import Link, LinkChange, LinkFilter
from arcade.persistence.drivers.postgres import LinkDriver
from arcade.persistence.protocols import DatabaseProtocol, QueryDriverProtocol
from arcade.persistence.resource_storage import ResourceDescriptor, ResourceStorage
from arcade.persistence.row_decoding import column_id, column_text, column_timestamp


def decode_link(row: Mapping[str, Any]) -> Link:
    return Link(
        id=LinkID(column_id(row, "id")),
        name=column_text(row, "name"),
        description=column_text(row, "description"),
        owner_id=PlayerID(column_id(row, "owner_id")),
        location_id=RoomID(column_id(row, "location_id")),
        destination_id=RoomID(column_id(row, "destination_id")),
        created=column_timestamp(row, "created"),
        updated=column_timestamp(row, "updated"),
    )


def encode_link_change(change: LinkChange) -> dict[str, Any]:
    return {
        "name": change.name,
        "description": change.description,
        "owner_id": change.owner_id,
        "location_id": change.location_id,
        "destination_id": change.destination_id,
    }


def link_reference_violation(change: LinkChange) -> str:
    # Names all three references; the database does not say which one failed.
    return (
        "the given ownerID, locationID or destinationID does not exist: "
        f"ownerID '{change.owner_id}', locationID '{change.location_id}', "
        f"destinationID '{change.destination_id}'"
    )


LINK_DESCRIPTOR: ResourceDescriptor[Link, LinkChange] = ResourceDescriptor(
    kind="link",
    plural="links",
    decode_row=decode_link,
    encode_change=encode_link_change,
    reference_violation=link_reference_violation,
)


class LinkRepository(ResourceStorage[Link, LinkFilter, LinkChange]):
    """Persistent storage of links."""

    def __init__(self, db: DatabaseProtocol, driver: QueryDriverProtocol[LinkFilter] | None = None) -> None:
        super().__init__(db, driver or LinkDriver(), LINK_DESCRIPTOR)
