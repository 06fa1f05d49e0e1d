"""
Unit tests for the arcade exception hierarchy.
"""

from arcade.error_types import ErrorKind
from arcade.exceptions import (
    ArcadeError,
    BadRequestError,
    ErrorContext,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    create_error_context,
    failure_message,
)


class TestErrorContext:
    def test_defaults(self):
        context = ErrorContext()

        assert context.resource is None
        assert context.operation is None
        assert context.metadata == {}
        assert context.timestamp.tzinfo is not None

    def test_to_dict(self):
        context = create_error_context(resource="room", operation="get", metadata={"id": "abc"})

        data = context.to_dict()

        assert data["resource"] == "room"
        assert data["operation"] == "get"
        assert data["metadata"] == {"id": "abc"}
        assert isinstance(data["timestamp"], str)


class TestArcadeError:
    def test_kinds(self):
        """Test that each subclass carries its error kind."""
        assert NotFoundError.kind is ErrorKind.NOT_FOUND
        assert BadRequestError.kind is ErrorKind.BAD_REQUEST
        assert InvalidArgumentError.kind is ErrorKind.INVALID_ARGUMENT
        assert InternalError.kind is ErrorKind.INTERNAL
        assert ArcadeError.kind is ErrorKind.INTERNAL

    def test_message_and_defaults(self):
        err = NotFoundError("failed to get room: not found")

        assert str(err) == "failed to get room: not found"
        assert err.message == "failed to get room: not found"
        assert err.user_friendly == err.message
        assert err.details == {}
        assert err.already_logged is False

    def test_mark_logged(self):
        err = InternalError("boom")
        err.mark_logged()
        assert err.already_logged is True

    def test_to_dict(self):
        err = BadRequestError("bad", context=create_error_context(resource="link"), details={"a": 1})

        data = err.to_dict()

        assert data["error_type"] == "BadRequestError"
        assert data["kind"] == "bad request"
        assert data["details"] == {"a": 1}
        assert data["context"]["resource"] == "link"


class TestFailureMessage:
    def test_without_detail(self):
        assert failure_message("failed to get room", ErrorKind.NOT_FOUND) == "failed to get room: not found"

    def test_with_detail(self):
        assert (
            failure_message("failed to list rooms", ErrorKind.INTERNAL, "connection refused")
            == "failed to list rooms: internal server error: connection refused"
        )

    def test_empty_detail_is_omitted(self):
        assert failure_message("failed to remove player", ErrorKind.NOT_FOUND, "") == "failed to remove player: not found"

    def test_exception_detail_uses_its_text(self):
        message = failure_message("failed to create item", ErrorKind.INTERNAL, ValueError("bad uuid"))
        assert message == "failed to create item: internal server error: bad uuid"
