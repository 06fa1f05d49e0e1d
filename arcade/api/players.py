"""
Player API endpoints.

Routes under /v1/players translate HTTP requests into player storage calls.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from arcade.models.player import PlayerFilter
from arcade.persistence.repositories import PlayerRepository
from arcade.schemas.player import PlayerEnvelope, PlayerModel, PlayerRequest, PlayersEnvelope
from arcade.structured_logging.enhanced_logging_config import get_logger

from .dependencies import get_player_storage, parse_path_id
from .filters import player_filter

logger = get_logger(__name__)

player_router = APIRouter(prefix="/v1/players", tags=["players"])

logger.info("Players API router initialized", prefix="/v1/players")


@player_router.get("", response_model=PlayersEnvelope)
async def list_players(
    filter_: PlayerFilter = Depends(player_filter),
    storage: PlayerRepository = Depends(get_player_storage),
) -> PlayersEnvelope:
    players = await storage.list(filter_)
    return PlayersEnvelope(players=[PlayerModel.from_record(r) for r in players])


@player_router.get("/{player_id}", response_model=PlayerEnvelope)
async def get_player(player_id: str, storage: PlayerRepository = Depends(get_player_storage)) -> PlayerEnvelope:
    player = await storage.get(parse_path_id("player", player_id))
    return PlayerEnvelope(player=PlayerModel.from_record(player))


@player_router.post("", response_model=PlayerEnvelope, status_code=status.HTTP_201_CREATED)
async def create_player(
    request: PlayerRequest = Body(...),
    storage: PlayerRepository = Depends(get_player_storage),
) -> PlayerEnvelope:
    player = await storage.create(request.to_change())
    return PlayerEnvelope(player=PlayerModel.from_record(player))


@player_router.put("/{player_id}", response_model=PlayerEnvelope)
async def update_player(
    player_id: str,
    request: PlayerRequest = Body(...),
    storage: PlayerRepository = Depends(get_player_storage),
) -> PlayerEnvelope:
    parsed_id = parse_path_id("player", player_id)
    player = await storage.update(parsed_id, request.to_change())
    return PlayerEnvelope(player=PlayerModel.from_record(player))


@player_router.delete("/{player_id}")
async def remove_player(player_id: str, storage: PlayerRepository = Depends(get_player_storage)) -> dict[str, Any]:
    await storage.remove(parse_path_id("player", player_id))
    return {}
