"""Typed, lazy access to a raw transport response."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from azrest.core.exceptions import HeaderError
from azrest.core.serialization import BINARY, RFC1123, deserialize_body, parse_datetime_value

logger = logging.getLogger(__name__)

METADATA_HEADER_PREFIX = "x-ms-meta-"


class Response:
    """Wraps the raw response of a single operation.

    Header accessors parse on demand and raise ``HeaderError`` when the header
    is absent or malformed. Reading and decoding the body is a separate,
    awaited step so callers only pay for it when they need the model.
    """

    def __init__(
        self,
        http_response: Any,
        body_type: type | None = None,
        wire_format: str | None = None,
    ) -> None:
        self._raw = http_response
        self._body_type = body_type
        self._wire_format = wire_format

    @property
    def raw(self) -> Any:
        """The untouched transport response."""
        return self._raw

    @property
    def status_code(self) -> int:
        return int(self._raw.status_code)

    @property
    def headers(self) -> Any:
        return self._raw.headers

    # ------------------------------------------------------------------
    # Header accessors
    # ------------------------------------------------------------------

    def header(self, name: str) -> str:
        """Return a header as a string.

        Raises:
            HeaderError: If the header is absent.
        """
        value = self._raw.headers.get(name)
        if value is None:
            raise HeaderError(name, "is missing from the response")
        return str(value)

    def header_int(self, name: str) -> int:
        value = self.header(name)
        try:
            return int(value)
        except ValueError:
            raise HeaderError(name, f"is not an integer: {value!r}") from None

    def header_bool(self, name: str) -> bool:
        value = self.header(name).strip().lower()
        if value not in ("true", "false"):
            raise HeaderError(name, f"is not a boolean: {value!r}")
        return value == "true"

    def header_datetime(self, name: str) -> datetime:
        """Return an RFC 1123 date header (``Date``, ``Last-Modified``) as a datetime."""
        value = self.header(name)
        try:
            return parse_datetime_value(value, RFC1123)
        except ValueError:
            raise HeaderError(name, f"is not an RFC 1123 date: {value!r}") from None

    def metadata(self) -> dict[str, str]:
        """Collect user metadata from ``x-ms-meta-*`` headers (empty when none are set)."""
        return {
            key[len(METADATA_HEADER_PREFIX) :]: value
            for key, value in self._raw.headers.items()
            if key.lower().startswith(METADATA_HEADER_PREFIX)
        }

    def request_id(self) -> str:
        return self.header("x-ms-request-id")

    def version(self) -> str:
        return self.header("x-ms-version")

    def date(self) -> datetime:
        return self.header_datetime("date")

    def etag(self) -> str:
        return self.header("etag")

    def last_modified(self) -> datetime:
        return self.header_datetime("last-modified")

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    async def read(self) -> bytes:
        """Read the whole body into memory."""
        return await self._raw.read()  # type: ignore[no-any-return]

    async def into_body(self) -> Any:
        """Read and decode the body into the model declared for this status.

        Returns ``None`` for statuses that carry no body and raw bytes for
        binary downloads.

        Raises:
            DeserializationError: If the body does not match the declared schema.
        """
        if self._wire_format is None:
            return None
        body = await self.read()
        if self._wire_format == BINARY or self._body_type is None:
            return body
        logger.debug(
            "[into_body] decoding body; model:%s;format:%s;size:%d",
            self._body_type.__name__,
            self._wire_format,
            len(body),
        )
        return deserialize_body(self._body_type, body, self._wire_format)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} status={self.status_code}>"
