"""
Dependency providers for the API routers.

Storages are created in the application lifespan and kept on app.state;
tests may place fakes there instead.
"""

from dataclasses import dataclass
from uuid import UUID

from fastapi import Request

from arcade.exceptions import BadRequestError, create_error_context
from arcade.persistence.repositories import ItemRepository, LinkRepository, PlayerRepository, RoomRepository
from arcade.structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class Storages:
    """The storage for each resource kind."""

    items: ItemRepository
    links: LinkRepository
    players: PlayerRepository
    rooms: RoomRepository


def get_storages(request: Request) -> Storages:
    """
    Get the storages from application state.

    Raises:
        RuntimeError: If the lifespan has not set up storage
    """
    storages = getattr(request.app.state, "storages", None)
    if storages is None:
        raise RuntimeError("Storages not found in app.state - ensure they are initialized in lifespan context")
    return storages


def get_item_storage(request: Request) -> ItemRepository:
    return get_storages(request).items


def get_link_storage(request: Request) -> LinkRepository:
    return get_storages(request).links


def get_player_storage(request: Request) -> PlayerRepository:
    return get_storages(request).players


def get_room_storage(request: Request) -> RoomRepository:
    return get_storages(request).rooms


def parse_path_id(kind: str, value: str) -> UUID:
    """
    Parse the identifier in a resource path.

    Raises:
        BadRequestError: If the value is not a well formed UUID
    """
    try:
        return UUID(value)
    except ValueError:
        raise BadRequestError(
            f"invalid {kind} id, not a well formed uuid: '{value}'",
            context=create_error_context(resource=kind, operation="parse_path_id"),
        ) from None
