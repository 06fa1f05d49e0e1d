"""Link request/response models."""

from pydantic import Field

from arcade.models.base import format_timestamp
from arcade.models.ids import LinkID, PlayerID, RoomID
from arcade.models.link import Link, LinkChange

from .base import APIModel, parse_body_id, received_id, received_timestamp, translate_change


class LinkRequest(APIModel):
    name: str = ""
    description: str = ""
    owner_id: str = Field(default="", alias="ownerID")
    location_id: str = Field(default="", alias="locationID")
    destination_id: str = Field(default="", alias="destinationID")

    def to_change(self) -> LinkChange:
        owner_id = parse_body_id("ownerID", self.owner_id)
        location_id = parse_body_id("locationID", self.location_id)
        destination_id = parse_body_id("destinationID", self.destination_id)
        return translate_change(
            lambda: LinkChange(
                name=self.name,
                description=self.description,
                owner_id=PlayerID(owner_id),
                location_id=RoomID(location_id),
                destination_id=RoomID(destination_id),
            )
        )

    @classmethod
    def from_change(cls, change: LinkChange) -> "LinkRequest":
        return cls(
            name=change.name,
            description=change.description,
            owner_id=str(change.owner_id),
            location_id=str(change.location_id),
            destination_id=str(change.destination_id),
        )


class LinkModel(APIModel):
    id: str
    name: str
    description: str
    owner_id: str = Field(alias="ownerID")
    location_id: str = Field(alias="locationID")
    destination_id: str = Field(alias="destinationID")
    created: str
    updated: str

    @classmethod
    def from_record(cls, link: Link) -> "LinkModel":
        return cls(
            id=str(link.id),
            name=link.name,
            description=link.description,
            owner_id=str(link.owner_id),
            location_id=str(link.location_id),
            destination_id=str(link.destination_id),
            created=format_timestamp(link.created),
            updated=format_timestamp(link.updated),
        )

    def to_record(self) -> Link:
        return Link(
            id=LinkID(received_id("link", "ID", self.id)),
            name=self.name,
            description=self.description,
            owner_id=PlayerID(received_id("link", "ownerID", self.owner_id)),
            location_id=RoomID(received_id("link", "locationID", self.location_id)),
            destination_id=RoomID(received_id("link", "destinationID", self.destination_id)),
            created=received_timestamp("link", "created", self.created),
            updated=received_timestamp("link", "updated", self.updated),
        )


class LinkEnvelope(APIModel):
    link: LinkModel


class LinksEnvelope(APIModel):
    links: list[LinkModel]
