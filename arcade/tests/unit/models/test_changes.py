"""
Unit tests for change requests.

Name and description bounds are validated when a change is built, before
anything can reach the database.
"""

from uuid import uuid4

import pytest

from arcade.error_types import ErrorKind
from arcade.exceptions import InvalidArgumentError
from arcade.models.base import MAX_DESCRIPTION_LEN, MAX_NAME_LEN
from arcade.models.ids import LocationID
from arcade.models.item import ItemChange
from arcade.models.link import LinkChange
from arcade.models.player import PlayerChange
from arcade.models.room import RoomChange


def _room(name="Hall", description="A long hall."):
    return RoomChange(name=name, description=description, owner_id=uuid4(), parent_id=uuid4())


def test_valid_change():
    change = _room()

    assert change.name == "Hall"
    assert change.description == "A long hall."


def test_boundary_lengths_accepted():
    change = _room(name="n" * MAX_NAME_LEN, description="d" * MAX_DESCRIPTION_LEN)

    assert len(change.name) == MAX_NAME_LEN


@pytest.mark.parametrize(
    ("name", "description", "message"),
    [
        ("", "desc", "empty room name"),
        ("n" * (MAX_NAME_LEN + 1), "desc", "room name exceeds maximum length"),
        ("name", "", "empty room description"),
        ("name", "d" * (MAX_DESCRIPTION_LEN + 1), "room description exceeds maximum length"),
    ],
)
def test_invalid_room_change(name, description, message):
    """Test that out-of-bounds names and descriptions raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError) as exc_info:
        _room(name=name, description=description)

    assert exc_info.value.message == message
    assert exc_info.value.kind is ErrorKind.INVALID_ARGUMENT


def test_each_kind_names_itself_in_validation_errors():
    with pytest.raises(InvalidArgumentError, match="empty player name"):
        PlayerChange(name="", description="d", home_id=uuid4(), location_id=uuid4())
    with pytest.raises(InvalidArgumentError, match="empty link name"):
        LinkChange(name="", description="d", owner_id=uuid4(), location_id=uuid4(), destination_id=uuid4())
    with pytest.raises(InvalidArgumentError, match="empty item description"):
        ItemChange(name="Lamp", description="", owner_id=uuid4(), location=LocationID.room(uuid4()))
