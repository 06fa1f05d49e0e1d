"""
Item API endpoints.

Routes under /v1/items translate HTTP requests into item storage calls.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from arcade.models.item import ItemFilter
from arcade.persistence.repositories import ItemRepository
from arcade.schemas.item import ItemEnvelope, ItemModel, ItemRequest, ItemsEnvelope
from arcade.structured_logging.enhanced_logging_config import get_logger

from .dependencies import get_item_storage, parse_path_id
from .filters import item_filter

logger = get_logger(__name__)

item_router = APIRouter(prefix="/v1/items", tags=["items"])

logger.info("Items API router initialized", prefix="/v1/items")


@item_router.get("", response_model=ItemsEnvelope)
async def list_items(
    filter_: ItemFilter = Depends(item_filter),
    storage: ItemRepository = Depends(get_item_storage),
) -> ItemsEnvelope:
    items = await storage.list(filter_)
    return ItemsEnvelope(items=[ItemModel.from_record(r) for r in items])


@item_router.get("/{item_id}", response_model=ItemEnvelope)
async def get_item(item_id: str, storage: ItemRepository = Depends(get_item_storage)) -> ItemEnvelope:
    item = await storage.get(parse_path_id("item", item_id))
    return ItemEnvelope(item=ItemModel.from_record(item))


@item_router.post("", response_model=ItemEnvelope, status_code=status.HTTP_201_CREATED)
async def create_item(
    request: ItemRequest = Body(...),
    storage: ItemRepository = Depends(get_item_storage),
) -> ItemEnvelope:
    item = await storage.create(request.to_change())
    return ItemEnvelope(item=ItemModel.from_record(item))


@item_router.put("/{item_id}", response_model=ItemEnvelope)
async def update_item(
    item_id: str,
    request: ItemRequest = Body(...),
    storage: ItemRepository = Depends(get_item_storage),
) -> ItemEnvelope:
    parsed_id = parse_path_id("item", item_id)
    item = await storage.update(parsed_id, request.to_change())
    return ItemEnvelope(item=ItemModel.from_record(item))


@item_router.delete("/{item_id}")
async def remove_item(item_id: str, storage: ItemRepository = Depends(get_item_storage)) -> dict[str, Any]:
    await storage.remove(parse_path_id("item", item_id))
    return {}
