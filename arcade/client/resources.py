"""
Per-kind routes and the generic resource client.

A ResourceRoute names the collection path, the JSON models and how a filter
becomes query parameters. ResourceClient turns list/get/create/update/remove
calls into requests on that route and translates the envelopes it gets back
into records.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel

from arcade.error_types import ErrorKind
from arcade.exceptions import InternalError, create_error_context, failure_message
from arcade.models.ids import is_nil
from arcade.models.item import ItemFilter
from arcade.models.link import LinkFilter
from arcade.models.player import PlayerFilter
from arcade.models.room import RoomFilter
from arcade.schemas.item import ItemEnvelope, ItemRequest, ItemsEnvelope
from arcade.schemas.link import LinkEnvelope, LinkRequest, LinksEnvelope
from arcade.schemas.player import PlayerEnvelope, PlayerRequest, PlayersEnvelope
from arcade.schemas.room import RoomEnvelope, RoomRequest, RoomsEnvelope

if TYPE_CHECKING:
    from .client import AssetClient

RecordT = TypeVar("RecordT")
FilterT = TypeVar("FilterT")
ChangeT = TypeVar("ChangeT")


@dataclass(frozen=True)
class ResourceRoute(Generic[RecordT, FilterT, ChangeT]):
    kind: str
    path: str
    request: Any
    envelope: type[BaseModel]
    list_envelope: type[BaseModel]
    params: Callable[[FilterT], dict[str, str]]

    @property
    def plural(self) -> str:
        return f"{self.kind}s"


def page_params(limit: int, offset: int) -> dict[str, str]:
    params: dict[str, str] = {}
    if offset > 0:
        params["offset"] = str(offset)
    if limit > 0:
        params["limit"] = str(limit)
    return params


def add_id(params: dict[str, str], name: str, value: UUID) -> None:
    if not is_nil(value):
        params[name] = str(value)


def room_params(filter_: RoomFilter) -> dict[str, str]:
    params: dict[str, str] = {}
    add_id(params, "ownerID", filter_.owner_id)
    add_id(params, "parentID", filter_.parent_id)
    params.update(page_params(filter_.limit, filter_.offset))
    return params


def player_params(filter_: PlayerFilter) -> dict[str, str]:
    params: dict[str, str] = {}
    add_id(params, "locationID", filter_.location_id)
    params.update(page_params(filter_.limit, filter_.offset))
    return params


def link_params(filter_: LinkFilter) -> dict[str, str]:
    params: dict[str, str] = {}
    add_id(params, "ownerID", filter_.owner_id)
    add_id(params, "locationID", filter_.location_id)
    add_id(params, "destinationID", filter_.destination_id)
    params.update(page_params(filter_.limit, filter_.offset))
    return params


def item_params(filter_: ItemFilter) -> dict[str, str]:
    params: dict[str, str] = {}
    add_id(params, "ownerID", filter_.owner_id)
    if filter_.location is not None:
        params["locationID"] = str(filter_.location.id)
        params["locationType"] = filter_.location.kind.value
    params.update(page_params(filter_.limit, filter_.offset))
    return params


ROOM_ROUTE = ResourceRoute(
    kind="room",
    path="/v1/rooms",
    request=RoomRequest,
    envelope=RoomEnvelope,
    list_envelope=RoomsEnvelope,
    params=room_params,
)
PLAYER_ROUTE = ResourceRoute(
    kind="player",
    path="/v1/players",
    request=PlayerRequest,
    envelope=PlayerEnvelope,
    list_envelope=PlayersEnvelope,
    params=player_params,
)
LINK_ROUTE = ResourceRoute(
    kind="link",
    path="/v1/links",
    request=LinkRequest,
    envelope=LinkEnvelope,
    list_envelope=LinksEnvelope,
    params=link_params,
)
ITEM_ROUTE = ResourceRoute(
    kind="item",
    path="/v1/items",
    request=ItemRequest,
    envelope=ItemEnvelope,
    list_envelope=ItemsEnvelope,
    params=item_params,
)


class ResourceClient(Generic[RecordT, FilterT, ChangeT]):
    """List, get, create, update and remove one kind of record over HTTP."""

    def __init__(self, client: "AssetClient", route: ResourceRoute[RecordT, FilterT, ChangeT]) -> None:
        self._client = client
        self.route = route

    async def list(self, filter_: FilterT) -> list[RecordT]:
        fail_msg = f"failed to list {self.route.plural}"
        response = await self._client.send("GET", self.route.path, fail_msg, params=self.route.params(filter_))
        envelope = self._decode(self.route.list_envelope, response.content, fail_msg)
        return [self._record(model, fail_msg) for model in getattr(envelope, self.route.plural)]

    async def get(self, record_id: UUID) -> RecordT:
        fail_msg = f"failed to get {self.route.kind}"
        response = await self._client.send("GET", f"{self.route.path}/{record_id}", fail_msg)
        return self._single(response.content, fail_msg)

    async def create(self, change: ChangeT) -> RecordT:
        fail_msg = f"failed to create {self.route.kind}"
        response = await self._client.send("POST", self.route.path, fail_msg, json=self._body(change))
        return self._single(response.content, fail_msg)

    async def update(self, record_id: UUID, change: ChangeT) -> RecordT:
        fail_msg = f"failed to update {self.route.kind}"
        response = await self._client.send(
            "PUT", f"{self.route.path}/{record_id}", fail_msg, json=self._body(change)
        )
        return self._single(response.content, fail_msg)

    async def remove(self, record_id: UUID) -> None:
        fail_msg = f"failed to remove {self.route.kind}"
        await self._client.send("DELETE", f"{self.route.path}/{record_id}", fail_msg)

    def _body(self, change: ChangeT) -> dict[str, Any]:
        return self.route.request.from_change(change).model_dump(by_alias=True)

    def _single(self, content: bytes, fail_msg: str) -> RecordT:
        envelope = self._decode(self.route.envelope, content, fail_msg)
        return self._record(getattr(envelope, self.route.kind), fail_msg)

    def _decode(self, envelope_type: type[BaseModel], content: bytes, fail_msg: str) -> BaseModel:
        # pydantic's ValidationError is a ValueError, malformed JSON included
        try:
            return envelope_type.model_validate_json(content)
        except ValueError as e:
            raise self._invalid_response(fail_msg, e) from e

    def _record(self, model: Any, fail_msg: str) -> RecordT:
        try:
            return model.to_record()
        except ValueError as e:
            raise self._invalid_response(fail_msg, e) from e

    def _invalid_response(self, fail_msg: str, error: ValueError) -> InternalError:
        return InternalError(
            failure_message(fail_msg, ErrorKind.INTERNAL, str(error)),
            context=create_error_context(resource=self.route.kind, operation="decode_response"),
        )
