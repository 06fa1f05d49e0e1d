"""
Room API endpoints.

Routes under /v1/rooms translate HTTP requests into room storage calls.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from arcade.models.room import RoomFilter
from arcade.persistence.repositories import RoomRepository
from arcade.schemas.room import RoomEnvelope, RoomModel, RoomRequest, RoomsEnvelope
from arcade.structured_logging.enhanced_logging_config import get_logger

from .dependencies import get_room_storage, parse_path_id
from .filters import room_filter

logger = get_logger(__name__)

room_router = APIRouter(prefix="/v1/rooms", tags=["rooms"])

logger.info("Rooms API router initialized", prefix="/v1/rooms")


@room_router.get("", response_model=RoomsEnvelope)
async def list_rooms(
    filter_: RoomFilter = Depends(room_filter),
    storage: RoomRepository = Depends(get_room_storage),
) -> RoomsEnvelope:
    rooms = await storage.list(filter_)
    return RoomsEnvelope(rooms=[RoomModel.from_record(r) for r in rooms])


@room_router.get("/{room_id}", response_model=RoomEnvelope)
async def get_room(room_id: str, storage: RoomRepository = Depends(get_room_storage)) -> RoomEnvelope:
    room = await storage.get(parse_path_id("room", room_id))
    return RoomEnvelope(room=RoomModel.from_record(room))


@room_router.post("", response_model=RoomEnvelope, status_code=status.HTTP_201_CREATED)
async def create_room(
    request: RoomRequest = Body(...),
    storage: RoomRepository = Depends(get_room_storage),
) -> RoomEnvelope:
    room = await storage.create(request.to_change())
    return RoomEnvelope(room=RoomModel.from_record(room))


@room_router.put("/{room_id}", response_model=RoomEnvelope)
async def update_room(
    room_id: str,
    request: RoomRequest = Body(...),
    storage: RoomRepository = Depends(get_room_storage),
) -> RoomEnvelope:
    parsed_id = parse_path_id("room", room_id)
    room = await storage.update(parsed_id, request.to_change())
    return RoomEnvelope(room=RoomModel.from_record(room))


@room_router.delete("/{room_id}")
async def remove_room(room_id: str, storage: RoomRepository = Depends(get_room_storage)) -> dict[str, Any]:
    await storage.remove(parse_path_id("room", room_id))
    return {}
