"""Player request/response models."""

from pydantic import Field

from arcade.models.base import format_timestamp
from arcade.models.ids import PlayerID, RoomID
from arcade.models.player import Player, PlayerChange

from .base import APIModel, parse_body_id, received_id, received_timestamp, translate_change


class PlayerRequest(APIModel):
    name: str = ""
    description: str = ""
    home_id: str = Field(default="", alias="homeID")
    location_id: str = Field(default="", alias="locationID")

    def to_change(self) -> PlayerChange:
        home_id = parse_body_id("homeID", self.home_id)
        location_id = parse_body_id("locationID", self.location_id)
        return translate_change(
            lambda: PlayerChange(
                name=self.name,
                description=self.description,
                home_id=RoomID(home_id),
                location_id=RoomID(location_id),
            )
        )

    @classmethod
    def from_change(cls, change: PlayerChange) -> "PlayerRequest":
        return cls(
            name=change.name,
            description=change.description,
            home_id=str(change.home_id),
            location_id=str(change.location_id),
        )


class PlayerModel(APIModel):
    id: str
    name: str
    description: str
    home_id: str = Field(alias="homeID")
    location_id: str = Field(alias="locationID")
    created: str
    updated: str

    @classmethod
    def from_record(cls, player: Player) -> "PlayerModel":
        return cls(
            id=str(player.id),
            name=player.name,
            description=player.description,
            home_id=str(player.home_id),
            location_id=str(player.location_id),
            created=format_timestamp(player.created),
            updated=format_timestamp(player.updated),
        )

    def to_record(self) -> Player:
        return Player(
            id=PlayerID(received_id("player", "ID", self.id)),
            name=self.name,
            description=self.description,
            home_id=RoomID(received_id("player", "homeID", self.home_id)),
            location_id=RoomID(received_id("player", "locationID", self.location_id)),
            created=received_timestamp("player", "created", self.created),
            updated=received_timestamp("player", "updated", self.updated),
        )


class PlayerEnvelope(APIModel):
    player: PlayerModel


class PlayersEnvelope(APIModel):
    players: list[PlayerModel]
