"""
PostgreSQL query drivers.

List queries are built as literal SQL from a filter: predicates are joined in
a fixed order, absent (nil) identifiers are skipped, and pagination is
appended last. The remaining queries are fixed templates with named binds.
"""

from uuid import UUID

from asyncpg.exceptions import ForeignKeyViolationError, UniqueViolationError

from arcade.models.ids import is_nil
from arcade.models.item import ItemFilter
from arcade.models.link import LinkFilter
from arcade.models.player import PlayerFilter
from arcade.models.room import RoomFilter
from arcade.persistence.location_codec import COLUMN_FOR_KIND

FOREIGN_KEY_VIOLATION = ForeignKeyViolationError.sqlstate
UNIQUE_VIOLATION = UniqueViolationError.sqlstate

UTC_NOW = "(now() AT TIME ZONE 'utc')"


def limit_and_offset(limit: int, offset: int) -> str:
    """Render the pagination clause; zero values are omitted."""
    clause = ""
    if limit > 0:
        clause += f" LIMIT {limit}"
    if offset > 0:
        clause += f" OFFSET {offset}"
    return clause


def where(predicates: list[tuple[str, UUID | None]]) -> str:
    """Render equality predicates, skipping nil identifiers."""
    clause = ""
    cmd = "WHERE"
    for column, value in predicates:
        if is_nil(value):
            continue
        clause += f" {cmd} {column} = '{value}'"
        cmd = "AND"
    return clause


def _sqlstate(err: BaseException) -> str | None:
    """Find the SQLSTATE anywhere on the exception chain."""
    seen: set[int] = set()
    pending: list[BaseException | None] = [err]
    while pending:
        current = pending.pop(0)
        if current is None or id(current) in seen:
            continue
        seen.add(id(current))
        code = getattr(current, "sqlstate", None) or getattr(current, "pgcode", None)
        if isinstance(code, str):
            return code
        pending.extend([getattr(current, "orig", None), current.__cause__, current.__context__])
    return None


class PostgresDriver:
    """Error classification shared by every PostgreSQL driver."""

    table = ""
    columns: tuple[str, ...] = ()
    writable: tuple[str, ...] = ()

    def is_foreign_key_violation(self, err: BaseException) -> bool:
        return _sqlstate(err) == FOREIGN_KEY_VIOLATION

    def is_unique_violation(self, err: BaseException) -> bool:
        return _sqlstate(err) == UNIQUE_VIOLATION

    @property
    def select(self) -> str:
        return f"SELECT {', '.join(self.columns)} FROM {self.table}"

    @property
    def returning(self) -> str:
        return f"RETURNING {', '.join(self.columns)}"

    def get_query(self) -> str:
        return f"{self.select} WHERE id = :id"

    def create_query(self) -> str:
        names = ", ".join(self.writable)
        binds = ", ".join(f":{c}" for c in self.writable)
        return f"INSERT INTO {self.table} ({names}) VALUES ({binds}) {self.returning}"

    def update_query(self) -> str:
        assignments = ", ".join(f"{c} = :{c}" for c in self.writable)
        return f"UPDATE {self.table} SET {assignments}, updated = {UTC_NOW} WHERE id = :id {self.returning}"

    def remove_query(self) -> str:
        return f"DELETE FROM {self.table} WHERE id = :id"


class RoomDriver(PostgresDriver):
    table = "rooms"
    columns = ("id", "name", "description", "owner_id", "parent_id", "created", "updated")
    writable = ("name", "description", "owner_id", "parent_id")

    def list_query(self, filter_: RoomFilter) -> str:
        predicates = [("owner_id", filter_.owner_id), ("parent_id", filter_.parent_id)]
        return self.select + where(predicates) + limit_and_offset(filter_.limit, filter_.offset)


class PlayerDriver(PostgresDriver):
    table = "players"
    columns = ("id", "name", "description", "home_id", "location_id", "created", "updated")
    writable = ("name", "description", "home_id", "location_id")

    def list_query(self, filter_: PlayerFilter) -> str:
        predicates = [("location_id", filter_.location_id)]
        return self.select + where(predicates) + limit_and_offset(filter_.limit, filter_.offset)


class LinkDriver(PostgresDriver):
    table = "links"
    columns = ("id", "name", "description", "owner_id", "location_id", "destination_id", "created", "updated")
    writable = ("name", "description", "owner_id", "location_id", "destination_id")

    def list_query(self, filter_: LinkFilter) -> str:
        predicates = [
            ("owner_id", filter_.owner_id),
            ("location_id", filter_.location_id),
            ("destination_id", filter_.destination_id),
        ]
        return self.select + where(predicates) + limit_and_offset(filter_.limit, filter_.offset)


class ItemDriver(PostgresDriver):
    table = "items"
    columns = (
        "id",
        "name",
        "description",
        "owner_id",
        "location_item_id",
        "location_player_id",
        "location_room_id",
        "created",
        "updated",
    )
    writable = ("name", "description", "owner_id", "location_item_id", "location_player_id", "location_room_id")

    def list_query(self, filter_: ItemFilter) -> str:
        predicates: list[tuple[str, UUID | None]] = [("owner_id", filter_.owner_id)]
        if filter_.location is not None:
            predicates.append((COLUMN_FOR_KIND[filter_.location.kind], filter_.location.id))
        return self.select + where(predicates) + limit_and_offset(filter_.limit, filter_.offset)
