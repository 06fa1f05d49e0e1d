"""
Generic resource storage.

A single ResourceStorage implements list/get/create/update/remove for every
resource kind. What differs per kind (row decoding, change encoding and the
wording of reference-violation errors) lives in a ResourceDescriptor; the SQL
and the backend error classification come from the injected query driver.

Every backend failure is classified into the arcade error taxonomy:

    NotFound    no row matched get, update or remove by id
    BadRequest  a referenced record does not exist, or the name is taken
    Internal    anything else, including undecodable rows
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from arcade.exceptions import (
    BadRequestError,
    ErrorContext,
    InternalError,
    NotFoundError,
    create_error_context,
    failure_message,
)
from arcade.persistence.protocols import DatabaseProtocol, QueryDriverProtocol, RowsProtocol
from arcade.structured_logging.enhanced_logging_config import get_logger
from arcade.utils.error_logging import log_and_raise

logger = get_logger(__name__)

RecordT = TypeVar("RecordT")
FilterT = TypeVar("FilterT")
ChangeT = TypeVar("ChangeT")

# Failures raised by the database client itself.
BACKEND_ERRORS = (SQLAlchemyError, OSError)

# Failures raised while turning a row into a record.
DECODE_ERRORS = (KeyError, TypeError, ValueError)


@dataclass(frozen=True)
class ResourceDescriptor(Generic[RecordT, ChangeT]):
    """
    Everything the generic storage needs to know about one resource kind.

    Attributes:
        kind: Singular name used in messages, e.g. "room"
        plural: Plural name used in messages, e.g. "rooms"
        decode_row: Builds a record from a result row
        encode_change: Builds the bind parameters for create and update
        reference_violation: Describes the referenced ids of a change that
            failed a foreign-key constraint
    """

    kind: str
    plural: str
    decode_row: Callable[[Mapping[str, Any]], RecordT]
    encode_change: Callable[[ChangeT], dict[str, Any]]
    reference_violation: Callable[[ChangeT], str]

    @property
    def id_field(self) -> str:
        return f"{self.kind}_id"


class ResourceStorage(Generic[RecordT, FilterT, ChangeT]):
    """
    CRUD storage for one resource kind.

    Instances hold no mutable state; all state lives in the database, so a
    single instance is shared by concurrent requests.
    """

    def __init__(
        self,
        db: DatabaseProtocol,
        driver: QueryDriverProtocol[FilterT],
        descriptor: ResourceDescriptor[RecordT, ChangeT],
    ) -> None:
        self._db = db
        self._driver = driver
        self._descriptor = descriptor
        self._logger = get_logger(f"{__name__}.{descriptor.kind}")

    def _context(self, operation: str, **metadata: Any) -> ErrorContext:
        context = create_error_context(resource=self._descriptor.kind, operation=operation)
        context.metadata.update({k: str(v) for k, v in metadata.items()})
        return context

    def _raise(
        self,
        exception_class: type[BadRequestError] | type[NotFoundError] | type[InternalError],
        fail_msg: str,
        context: ErrorContext,
        detail: Any = None,
        cause: BaseException | None = None,
    ) -> NoReturn:
        log_and_raise(
            exception_class,
            failure_message(fail_msg, exception_class.kind, detail),
            context=context,
            logger_name=f"{__name__}.{self._descriptor.kind}",
            cause=cause,
        )

    def _decode(self, row: Mapping[str, Any], fail_msg: str, context: ErrorContext) -> RecordT:
        try:
            return self._descriptor.decode_row(row)
        except DECODE_ERRORS as e:
            self._raise(InternalError, fail_msg, context, e, cause=e)

    async def list(self, filter_: FilterT) -> list[RecordT]:
        """
        List records matching the filter, in database order.

        A row that cannot be decoded fails the whole call; partial results are
        never returned.
        """
        fail_msg = f"failed to list {self._descriptor.plural}"
        context = self._context("list", filter=filter_)
        self._logger.info(f"list {self._descriptor.plural}", filter=str(filter_))

        try:
            rows = await self._db.query(self._driver.list_query(filter_))
        except BACKEND_ERRORS as e:
            self._raise(InternalError, fail_msg, context, e, cause=e)

        try:
            records: list[RecordT] = []
            async for row in rows:
                records.append(self._descriptor.decode_row(row))
        except (*BACKEND_ERRORS, *DECODE_ERRORS) as e:
            self._raise(InternalError, fail_msg, context, e, cause=e)
        finally:
            await self._close_rows(rows)

        return records

    async def _close_rows(self, rows: RowsProtocol) -> None:
        try:
            await rows.close()
        except BACKEND_ERRORS as e:
            self._logger.error("failed to close rows of list query", error=str(e), error_type=type(e).__name__)

    async def get(self, record_id: UUID) -> RecordT:
        """Get a record by id."""
        fail_msg = f"failed to get {self._descriptor.kind}"
        context = self._context("get", id=record_id)
        self._logger.info(f"get {self._descriptor.kind}", **{self._descriptor.id_field: str(record_id)})

        try:
            row = await self._db.query_row(self._driver.get_query(), {"id": record_id})
        except BACKEND_ERRORS as e:
            self._raise(InternalError, fail_msg, context, e, cause=e)

        if row is None:
            self._raise(NotFoundError, fail_msg, context)

        return self._decode(row, fail_msg, context)

    async def create(self, change: ChangeT) -> RecordT:
        """Create a record; the database assigns its id and timestamps."""
        fail_msg = f"failed to create {self._descriptor.kind}"
        context = self._context("create", name=getattr(change, "name", ""))
        self._logger.info(f"create {self._descriptor.kind}", name=getattr(change, "name", None))

        params = self._descriptor.encode_change(change)
        try:
            row = await self._db.query_row(self._driver.create_query(), params)
        except BACKEND_ERRORS as e:
            self._raise_write_error(e, change, fail_msg, context)

        if row is None:
            self._raise(InternalError, fail_msg, context, "no row returned")

        record = self._decode(row, fail_msg, context)
        self._logger.info(f"created {self._descriptor.kind}", **{self._descriptor.id_field: str(row.get("id"))})
        return record

    async def update(self, record_id: UUID, change: ChangeT) -> RecordT:
        """Replace the mutable fields of a record and re-stamp its updated time."""
        fail_msg = f"failed to update {self._descriptor.kind}"
        context = self._context("update", id=record_id)
        self._logger.info(f"update {self._descriptor.kind}", **{self._descriptor.id_field: str(record_id)})

        params = {"id": record_id, **self._descriptor.encode_change(change)}
        try:
            row = await self._db.query_row(self._driver.update_query(), params)
        except BACKEND_ERRORS as e:
            self._raise_write_error(e, change, fail_msg, context)

        # An update matching no row returns nothing rather than a constraint error.
        if row is None:
            self._raise(NotFoundError, fail_msg, context)

        return self._decode(row, fail_msg, context)

    async def remove(self, record_id: UUID) -> None:
        """Delete a record by id."""
        fail_msg = f"failed to remove {self._descriptor.kind}"
        context = self._context("remove", id=record_id)
        self._logger.info(f"remove {self._descriptor.kind}", **{self._descriptor.id_field: str(record_id)})

        try:
            count = await self._db.execute(self._driver.remove_query(), {"id": record_id})
        except BACKEND_ERRORS as e:
            self._raise(InternalError, fail_msg, context, e, cause=e)

        if count == 0:
            self._raise(NotFoundError, fail_msg, context)

    def _raise_write_error(self, err: BaseException, change: ChangeT, fail_msg: str, context: ErrorContext) -> NoReturn:
        if self._driver.is_foreign_key_violation(err):
            self._raise(BadRequestError, fail_msg, context, self._descriptor.reference_violation(change), cause=err)
        if self._driver.is_unique_violation(err):
            name = getattr(change, "name", "")
            self._raise(BadRequestError, fail_msg, context, f"{self._descriptor.kind} name '{name}' already exists", cause=err)
        self._raise(InternalError, fail_msg, context, err, cause=err)

