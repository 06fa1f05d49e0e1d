"""
HTTP transport for the asset API client.

Only 200 and 201 count as success. Any other status is read back as the
server's error body and raised as the ArcadeError subclass for that status,
so a caller sees the same taxonomy whether it talks to storage directly or
over HTTP.
"""

from typing import Any

import httpx
from pydantic import ValidationError

from arcade.error_types import ErrorKind
from arcade.exceptions import (
    ArcadeError,
    BadRequestError,
    InternalError,
    NotFoundError,
    create_error_context,
    failure_message,
)
from arcade.schemas.base import APIModel
from arcade.structured_logging.enhanced_logging_config import get_logger

from .resources import ITEM_ROUTE, LINK_ROUTE, PLAYER_ROUTE, ROOM_ROUTE, ResourceClient

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0

SUCCESS_STATUS_CODES = frozenset({200, 201})

STATUS_ERRORS: dict[int, type[ArcadeError]] = {
    404: NotFoundError,
    400: BadRequestError,
}


class ResponseError(APIModel):
    """The status and detail fields of a server error body."""

    status: int
    detail: str


def error_for_status(status: int) -> type[ArcadeError]:
    return STATUS_ERRORS.get(status, InternalError)


class AssetClient:
    """
    Client for the asset API.

    Args:
        base_url: Scheme, host and port of the server, e.g. "http://localhost:8080"
        timeout: Request timeout in seconds; zero, negative or None keeps the default
        insecure: Skip TLS certificate verification
        transport: httpx transport to send requests through instead of the network
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        insecure: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout and timeout > 0 else DEFAULT_TIMEOUT
        self.insecure = insecure
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            verify=not insecure,
            transport=transport,
        )

        self.items = ResourceClient(self, ITEM_ROUTE)
        self.links = ResourceClient(self, LINK_ROUTE)
        self.players = ResourceClient(self, PLAYER_ROUTE)
        self.rooms = ResourceClient(self, ROOM_ROUTE)

    async def __aenter__(self) -> "AssetClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def send(
        self,
        method: str,
        path: str,
        fail_msg: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Send one request and return the response when it succeeded.

        Raises:
            NotFoundError: The server answered 404
            BadRequestError: The server answered 400
            InternalError: Any other status, or the request never completed
        """
        logger.debug("sending request", method=method, url=f"{self.base_url}{path}")

        try:
            response = await self._http.request(method, path, params=params, json=json)
        except httpx.HTTPError as e:
            raise InternalError(
                failure_message(fail_msg, ErrorKind.INTERNAL, str(e) or type(e).__name__),
                context=create_error_context(operation="send", metadata={"method": method, "path": path}),
            ) from e

        if response.status_code in SUCCESS_STATUS_CODES:
            return response
        raise self._response_error(response, method, path, fail_msg)

    def _response_error(self, response: httpx.Response, method: str, path: str, fail_msg: str) -> ArcadeError:
        context = create_error_context(
            operation="send",
            metadata={"method": method, "path": path, "status": response.status_code},
        )
        try:
            body = ResponseError.model_validate_json(response.content)
        except ValidationError:
            error_class = error_for_status(response.status_code)
            detail = f"{response.status_code}, {response.reason_phrase}"
            return error_class(failure_message(fail_msg, error_class.kind, detail), context=context)

        error_class = error_for_status(body.status)
        return error_class(
            failure_message(fail_msg, error_class.kind, f"server error: {body.detail}"),
            context=context,
            details={"status": body.status},
        )
