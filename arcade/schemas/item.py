"""
Item request/response models.

An item's location is sent as an object naming both the id and the kind of
the containing thing: {"id": "<uuid>", "type": "item" | "player" | "room"}.
"""

from pydantic import Field

from arcade.exceptions import BadRequestError, create_error_context
from arcade.models.base import format_timestamp
from arcade.models.ids import ItemID, LocationID, LocationKind, PlayerID
from arcade.models.item import Item, ItemChange

from .base import APIModel, parse_body_id, received_id, received_timestamp, translate_change


def parse_location_kind(value: str) -> LocationKind:
    """Parse a location type case-insensitively; errors quote the value as sent."""
    try:
        return LocationKind(value.lower())
    except ValueError:
        raise BadRequestError(
            f"invalid locationID.type: '{value}'",
            context=create_error_context(operation="translate_request", metadata={"field": "locationID.type"}),
        ) from None


class ItemLocationModel(APIModel):
    id: str = ""
    type: str = ""

    def to_location(self) -> LocationID:
        kind = parse_location_kind(self.type)
        return LocationID(kind, parse_body_id("locationID.id", self.id))

    @classmethod
    def from_location(cls, location: LocationID) -> "ItemLocationModel":
        return cls(id=str(location.id), type=location.kind.value)

    def to_received_location(self) -> LocationID:
        try:
            kind = LocationKind(self.type.lower())
        except ValueError as e:
            raise ValueError(f"received invalid item locationID.type: '{self.type}'") from e
        return LocationID(kind, received_id("item", "locationID.id", self.id))


class ItemRequest(APIModel):
    name: str = ""
    description: str = ""
    owner_id: str = Field(default="", alias="ownerID")
    location: ItemLocationModel = Field(default_factory=ItemLocationModel, alias="locationID")

    def to_change(self) -> ItemChange:
        owner_id = parse_body_id("ownerID", self.owner_id)
        location = self.location.to_location()
        return translate_change(
            lambda: ItemChange(
                name=self.name,
                description=self.description,
                owner_id=PlayerID(owner_id),
                location=location,
            )
        )

    @classmethod
    def from_change(cls, change: ItemChange) -> "ItemRequest":
        return cls(
            name=change.name,
            description=change.description,
            owner_id=str(change.owner_id),
            location=ItemLocationModel.from_location(change.location),
        )


class ItemModel(APIModel):
    id: str
    name: str
    description: str
    owner_id: str = Field(alias="ownerID")
    location: ItemLocationModel = Field(alias="locationID")
    created: str
    updated: str

    @classmethod
    def from_record(cls, item: Item) -> "ItemModel":
        return cls(
            id=str(item.id),
            name=item.name,
            description=item.description,
            owner_id=str(item.owner_id),
            location=ItemLocationModel.from_location(item.location),
            created=format_timestamp(item.created),
            updated=format_timestamp(item.updated),
        )

    def to_record(self) -> Item:
        return Item(
            id=ItemID(received_id("item", "ID", self.id)),
            name=self.name,
            description=self.description,
            owner_id=PlayerID(received_id("item", "ownerID", self.owner_id)),
            location=self.location.to_received_location(),
            created=received_timestamp("item", "created", self.created),
            updated=received_timestamp("item", "updated", self.updated),
        )


class ItemEnvelope(APIModel):
    item: ItemModel


class ItemsEnvelope(APIModel):
    items: list[ItemModel]
