"""
Query-string parsing into storage filters.

Malformed values are rejected with a bad request before storage is called.
Limit must be in 1..100 and offset at least 1 when given.
"""

from uuid import UUID

from fastapi import Query

from arcade.exceptions import BadRequestError, create_error_context
from arcade.models.base import DEFAULT_FILTER_LIMIT, MAX_FILTER_LIMIT
from arcade.models.ids import NIL_ID, LocationID, LocationKind, PlayerID, RoomID
from arcade.models.item import ItemFilter
from arcade.models.link import LinkFilter
from arcade.models.player import PlayerFilter
from arcade.models.room import RoomFilter


def _bad_query(message: str, parameter: str) -> BadRequestError:
    context = create_error_context(operation="parse_filter", metadata={"parameter": parameter})
    return BadRequestError(message, context=context)


def _invalid(parameter: str, value: str) -> BadRequestError:
    return _bad_query(f"invalid {parameter} query parameter: '{value}'", parameter)


def parse_query_id(parameter: str, value: str | None) -> UUID:
    if value is None:
        return NIL_ID
    try:
        return UUID(value)
    except ValueError:
        raise _invalid(parameter, value) from None


def parse_limit(value: str | None) -> int:
    if value is None:
        return DEFAULT_FILTER_LIMIT
    try:
        limit = int(value)
    except ValueError:
        raise _invalid("limit", value) from None
    if limit <= 0 or limit > MAX_FILTER_LIMIT:
        raise _invalid("limit", value)
    return limit


def parse_offset(value: str | None) -> int:
    if value is None:
        return 0
    try:
        offset = int(value)
    except ValueError:
        raise _invalid("offset", value) from None
    if offset <= 0:
        raise _invalid("offset", value)
    return offset


def room_filter(
    owner_id: str | None = Query(None, alias="ownerID"),
    parent_id: str | None = Query(None, alias="parentID"),
    limit: str | None = Query(None),
    offset: str | None = Query(None),
) -> RoomFilter:
    return RoomFilter(
        owner_id=PlayerID(parse_query_id("ownerID", owner_id)),
        parent_id=RoomID(parse_query_id("parentID", parent_id)),
        limit=parse_limit(limit),
        offset=parse_offset(offset),
    )


def player_filter(
    location_id: str | None = Query(None, alias="locationID"),
    limit: str | None = Query(None),
    offset: str | None = Query(None),
) -> PlayerFilter:
    return PlayerFilter(
        location_id=RoomID(parse_query_id("locationID", location_id)),
        limit=parse_limit(limit),
        offset=parse_offset(offset),
    )


def link_filter(
    owner_id: str | None = Query(None, alias="ownerID"),
    location_id: str | None = Query(None, alias="locationID"),
    destination_id: str | None = Query(None, alias="destinationID"),
    limit: str | None = Query(None),
    offset: str | None = Query(None),
) -> LinkFilter:
    return LinkFilter(
        owner_id=PlayerID(parse_query_id("ownerID", owner_id)),
        location_id=RoomID(parse_query_id("locationID", location_id)),
        destination_id=RoomID(parse_query_id("destinationID", destination_id)),
        limit=parse_limit(limit),
        offset=parse_offset(offset),
    )


def item_filter(
    owner_id: str | None = Query(None, alias="ownerID"),
    location_id: str | None = Query(None, alias="locationID"),
    location_type: str | None = Query(None, alias="locationType"),
    limit: str | None = Query(None),
    offset: str | None = Query(None),
) -> ItemFilter:
    location: LocationID | None = None
    if location_id is not None:
        location_uuid = parse_query_id("locationID", location_id)
        if location_type is None:
            raise _bad_query("locationType required when locationID is set", "locationType")
        try:
            kind = LocationKind(location_type.lower())
        except ValueError:
            raise _invalid("locationType", location_type) from None
        location = LocationID(kind, location_uuid)

    return ItemFilter(
        owner_id=PlayerID(parse_query_id("ownerID", owner_id)),
        location=location,
        limit=parse_limit(limit),
        offset=parse_offset(offset),
    )
