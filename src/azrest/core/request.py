"""Request builders: accumulate parameters, then materialize one HTTP request."""

from __future__ import annotations

import copy
import logging
from collections.abc import Generator, Iterable, Iterator
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Self
from urllib.parse import quote

from azure.core.rest import HttpRequest

from azrest.core.exceptions import DeserializationError, HttpStatusError, InvalidUrlError
from azrest.core.paging import Pageable
from azrest.core.response import Response
from azrest.core.serialization import JSON, deserialize_body, format_datetime_value, serialize_body

if TYPE_CHECKING:
    from azrest.core.client import BaseClient

logger = logging.getLogger(__name__)

CONTENT_TYPE_HEADER = "Content-Type"
ERROR_CODE_HEADER = "x-ms-error-code"


def format_value(value: Any) -> str:
    """Render an option value the way it appears in a query string or header."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_datetime_value(value)
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(entry) for entry in value)
    return str(value)


def path_segment(value: str, name: str) -> str:
    """Quote a required single-segment path parameter.

    Raises:
        InvalidUrlError: If the parameter is empty.
    """
    if not value:
        raise InvalidUrlError(f"Required path parameter {name!r} is empty")
    return quote(value, safe="")


def path_segments(value: str, name: str) -> str:
    """Quote a required multi-segment path parameter (``dir/sub/file``)."""
    stripped = value.strip("/")
    if not stripped:
        raise InvalidUrlError(f"Required path parameter {name!r} is empty")
    return quote(stripped, safe="/")


def decode_error_body(body: bytes, error_model: type | None, wire_format: str) -> Any | None:
    """Decode an error body into ``error_model``; ``None`` if it does not fit."""
    if error_model is None or not body.strip():
        return None
    try:
        return deserialize_body(error_model, body, wire_format)
    except DeserializationError as exc:
        logger.debug(
            "[decode_error_body] undecodable error body; model:%s;reason:%s", error_model.__name__, exc
        )
        return None


def _error_code_of(model: Any) -> str | None:
    """``code`` of a storage error, or ``error.code`` of an ODATA error envelope."""
    code = getattr(model, "code", None)
    if code is None:
        code = getattr(getattr(model, "error", None), "code", None)
    return code if isinstance(code, str) else None


async def raise_for_status(
    http_response: Any,
    expected: tuple[int, ...],
    error_model: type | None = None,
    error_wire_format: str = JSON,
) -> None:
    """Raise ``HttpStatusError`` for a response whose status is not ``expected``.

    The ``x-ms-error-code`` header wins; otherwise the code comes from the body
    decoded as ``error_model``, which is attached to the error as ``model``.
    """
    body = await http_response.read()
    model = decode_error_body(body, error_model, error_wire_format)
    error_code = http_response.headers.get(ERROR_CODE_HEADER) or _error_code_of(model)
    logger.warning(
        "[raise_for_status] unexpected status; status:%d;expected:%s;error_code:%s",
        http_response.status_code,
        expected,
        error_code,
    )
    raise HttpStatusError(http_response, expected, error_code=error_code, model=model)


class RequestBuilder:
    """Base for every per-operation builder.

    Subclasses fix the HTTP method, the accepted statuses with their body
    models, and the ordered names of the optional query parameters and headers.
    Optional values are set through chained setters; an unset option never
    reaches the wire.

    Finalize with ``await builder.send()`` for the ``Response`` wrapper, or
    ``await builder`` for the decoded body.
    """

    method: ClassVar[str] = "GET"
    query_names: ClassVar[tuple[str, ...]] = ()
    header_names: ClassVar[tuple[str, ...]] = ()
    responses: ClassVar[dict[int, type | None]] = {200: None}
    wire_format: ClassVar[str] = JSON
    content_type: ClassVar[str | None] = None
    response_class: ClassVar[type[Response]] = Response
    error_model: ClassVar[type | None] = None
    error_wire_format: ClassVar[str] = JSON

    def __init__(self, client: BaseClient) -> None:
        self._client = client
        self._options: dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> Self:
        self._options[name] = value
        return self

    def clone(self) -> Self:
        """Return an independent copy sharing only the client context."""
        other = copy.copy(self)
        for name, value in vars(self).items():
            if name != "_client":
                setattr(other, name, copy.deepcopy(value))
        return other

    # ------------------------------------------------------------------
    # Per-operation hooks
    # ------------------------------------------------------------------

    def _path(self) -> str:
        raise NotImplementedError

    def _fixed_query(self) -> list[tuple[str, str]]:
        """Resource marker and protocol version, always first in the query."""
        return []

    def _fixed_headers(self) -> dict[str, str]:
        return {}

    def _extra_headers(self) -> dict[str, str]:
        """Headers whose names depend on caller values (e.g. user metadata)."""
        return {}

    def _body(self) -> Any:
        """The request model, raw bytes, or ``None`` for an empty body."""
        return None

    # ------------------------------------------------------------------
    # Materialization
    # ------------------------------------------------------------------

    def _set_options(self, names: Iterable[str]) -> Iterator[tuple[str, str]]:
        for name in names:
            value = self._options.get(name)
            if value is None or (isinstance(value, (list, tuple)) and not value):
                continue
            yield name, format_value(value)

    def _encoded_body(self) -> bytes | None:
        body = self._body()
        if body is None or isinstance(body, bytes):
            return body
        if self.content_type is None:
            raise TypeError(f"{type(self).__name__} declares no content type for its body")
        return serialize_body(body, self.content_type)

    def build_request(self) -> HttpRequest:
        """Build the unauthenticated HTTP request for the current parameters.

        Raises:
            InvalidUrlError: If the endpoint or a path parameter is invalid.
        """
        query = [*self._fixed_query(), *self._set_options(self.query_names)]
        url = self._client.url(self._path(), query)
        headers = {
            **self._fixed_headers(),
            **dict(self._set_options(self.header_names)),
            **self._extra_headers(),
        }
        content = self._encoded_body()
        if content is not None and self.content_type is not None:
            headers[CONTENT_TYPE_HEADER] = self.content_type
        return HttpRequest(self.method, url, headers=headers, content=content)

    async def _dispatch(self, request: HttpRequest) -> Response:
        await self._client.authorize(request)
        http_response = await self._client.send(request)
        status = http_response.status_code
        if status not in self.responses:
            await raise_for_status(
                http_response, tuple(self.responses), self.error_model, self.error_wire_format
            )
        body_type = self.responses[status]
        wire_format = self.wire_format if body_type is not None else None
        return self.response_class(http_response, body_type, wire_format)

    async def send(self) -> Response:
        """Build, authorize and send the request.

        Raises:
            InvalidUrlError: If the URL cannot be built.
            AuthenticationError: If no token can be acquired.
            HttpStatusError: If the service answers with an unaccepted status.
        """
        return await self._dispatch(self.build_request())

    async def _into_body(self) -> Any:
        response = await self.send()
        return await response.into_body()

    def __await__(self) -> Generator[Any, None, Any]:
        return self._into_body().__await__()


class PagedRequestBuilder(RequestBuilder):
    """Builder for list operations whose responses carry a continuation token.

    The first request carries every filter option. Follow-up requests are
    built from the continuation token alone, resolved against the endpoint,
    with only the Authorization header added.
    """

    continuation_field: ClassVar[str] = "next_link"
    items_field: ClassVar[str] = "value"

    def _continuation_request(self, token: str) -> HttpRequest:
        return HttpRequest(self.method, self._client.continuation_url(token))

    def _page_items(self, page: Any) -> list[Any]:
        return getattr(page, self.items_field)  # type: ignore[no-any-return]

    def pages(self) -> Pageable:
        """Start a fresh page sequence from page one."""
        snapshot = self.clone()

        async def get_page(continuation: str | None) -> Any:
            if continuation is None:
                request = snapshot.build_request()
            else:
                request = snapshot._continuation_request(continuation)
            response = await snapshot._dispatch(request)
            return await response.into_body()

        return Pageable(
            get_page,
            lambda page: getattr(page, snapshot.continuation_field),
            snapshot._page_items,
        )

    def items(self) -> Any:
        """Iterate the items of every page of a fresh sequence."""
        return self.pages().items()
