"""
Link API endpoints.

Routes under /v1/links translate HTTP requests into link storage calls.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from arcade.models.link import LinkFilter
from arcade.persistence.repositories import LinkRepository
from arcade.schemas.link import LinkEnvelope, LinkModel, LinkRequest, LinksEnvelope
from arcade.structured_logging.enhanced_logging_config import get_logger

from .dependencies import get_link_storage, parse_path_id
from .filters import link_filter

logger = get_logger(__name__)

link_router = APIRouter(prefix="/v1/links", tags=["links"])

logger.info("Links API router initialized", prefix="/v1/links")


@link_router.get("", response_model=LinksEnvelope)
async def list_links(
    filter_: LinkFilter = Depends(link_filter),
    storage: LinkRepository = Depends(get_link_storage),
) -> LinksEnvelope:
    links = await storage.list(filter_)
    return LinksEnvelope(links=[LinkModel.from_record(r) for r in links])


@link_router.get("/{link_id}", response_model=LinkEnvelope)
async def get_link(link_id: str, storage: LinkRepository = Depends(get_link_storage)) -> LinkEnvelope:
    link = await storage.get(parse_path_id("link", link_id))
    return LinkEnvelope(link=LinkModel.from_record(link))


@link_router.post("", response_model=LinkEnvelope, status_code=status.HTTP_201_CREATED)
async def create_link(
    request: LinkRequest = Body(...),
    storage: LinkRepository = Depends(get_link_storage),
) -> LinkEnvelope:
    link = await storage.create(request.to_change())
    return LinkEnvelope(link=LinkModel.from_record(link))


@link_router.put("/{link_id}", response_model=LinkEnvelope)
async def update_link(
    link_id: str,
    request: LinkRequest = Body(...),
    storage: LinkRepository = Depends(get_link_storage),
) -> LinkEnvelope:
    parsed_id = parse_path_id("link", link_id)
    link = await storage.update(parsed_id, request.to_change())
    return LinkEnvelope(link=LinkModel.from_record(link))


@link_router.delete("/{link_id}")
async def remove_link(link_id: str, storage: LinkRepository = Depends(get_link_storage)) -> dict[str, Any]:
    await storage.remove(parse_path_id("link", link_id))
    return {}
