"""Builder bases shared by the management groups operations."""

from __future__ import annotations

from typing import Self
from urllib.parse import parse_qs, urlsplit

from azure.core.rest import HttpRequest

from azrest.core.client import encode_query
from azrest.core.request import PagedRequestBuilder, RequestBuilder
from azrest.core.serialization import JSON_CONTENT_TYPE
from azrest.managementgroups.models import ErrorResponse

API_VERSION = "2020-05-01"
API_VERSION_PARAM = "api-version"
PROVIDER_PATH = "/providers/Microsoft.Management"
CACHE_CONTROL_HEADER = "cache-control"


class ManagementRequest(RequestBuilder):
    """JSON operation carrying the ``api-version`` query parameter."""

    content_type = JSON_CONTENT_TYPE
    error_model = ErrorResponse

    def _fixed_query(self) -> list[tuple[str, str]]:
        return [(API_VERSION_PARAM, API_VERSION)]


class ManagementPagedRequest(ManagementRequest, PagedRequestBuilder):
    """Paged JSON operation following ``nextLink``.

    ``nextLink`` normally embeds the ``api-version``; it is appended only when
    the link lacks it.
    """

    def _continuation_request(self, token: str) -> HttpRequest:
        url = self._client.continuation_url(token)
        query = urlsplit(url).query
        if API_VERSION_PARAM not in parse_qs(query):
            separator = "&" if query else "?"
            url = f"{url}{separator}{encode_query([(API_VERSION_PARAM, API_VERSION)])}"
        return HttpRequest(self.method, url)


class CacheControlOption:
    """Adds the ``cache-control`` header setter to a builder."""

    def cache_control(self, cache_control: str) -> Self:
        """Indicates that the request shouldn't utilize any caches (e.g. ``no-cache``)."""
        return self._set(CACHE_CONTROL_HEADER, cache_control)  # type: ignore[attr-defined, no-any-return]
