"""Room request/response models."""

from pydantic import Field

from arcade.models.base import format_timestamp
from arcade.models.ids import PlayerID, RoomID
from arcade.models.room import Room, RoomChange

from .base import APIModel, parse_body_id, received_id, received_timestamp, translate_change


class RoomRequest(APIModel):
    name: str = ""
    description: str = ""
    owner_id: str = Field(default="", alias="ownerID")
    parent_id: str = Field(default="", alias="parentID")

    def to_change(self) -> RoomChange:
        owner_id = parse_body_id("ownerID", self.owner_id)
        parent_id = parse_body_id("parentID", self.parent_id)
        return translate_change(
            lambda: RoomChange(
                name=self.name,
                description=self.description,
                owner_id=PlayerID(owner_id),
                parent_id=RoomID(parent_id),
            )
        )

    @classmethod
    def from_change(cls, change: RoomChange) -> "RoomRequest":
        return cls(
            name=change.name,
            description=change.description,
            owner_id=str(change.owner_id),
            parent_id=str(change.parent_id),
        )


class RoomModel(APIModel):
    id: str
    name: str
    description: str
    owner_id: str = Field(alias="ownerID")
    parent_id: str = Field(alias="parentID")
    created: str
    updated: str

    @classmethod
    def from_record(cls, room: Room) -> "RoomModel":
        return cls(
            id=str(room.id),
            name=room.name,
            description=room.description,
            owner_id=str(room.owner_id),
            parent_id=str(room.parent_id),
            created=format_timestamp(room.created),
            updated=format_timestamp(room.updated),
        )

    def to_record(self) -> Room:
        """
        Translate a received room into a record.

        Raises:
            ValueError: If an identifier or timestamp is malformed
        """
        return Room(
            id=RoomID(received_id("room", "ID", self.id)),
            name=self.name,
            description=self.description,
            owner_id=PlayerID(received_id("room", "ownerID", self.owner_id)),
            parent_id=RoomID(received_id("room", "parentID", self.parent_id)),
            created=received_timestamp("room", "created", self.created),
            updated=received_timestamp("room", "updated", self.updated),
        )


class RoomEnvelope(APIModel):
    room: RoomModel


class RoomsEnvelope(APIModel):
    rooms: list[RoomModel]
