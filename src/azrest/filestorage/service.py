"""Account-level file service operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from azrest.filestorage._base import StoragePagedRequest, StorageRequest
from azrest.filestorage.models import (
    ListSharesInclude,
    ListSharesResponse,
    StorageServiceProperties,
)

if TYPE_CHECKING:
    from azrest.core.client import BaseClient


class GetServiceProperties(StorageRequest):
    """Get the account's metrics and CORS settings."""

    restype = "service"
    comp = "properties"
    responses = {200: StorageServiceProperties}

    def _path(self) -> str:
        return "/"


class SetServiceProperties(StorageRequest):
    method = "PUT"
    restype = "service"
    comp = "properties"
    responses = {202: None}

    def __init__(self, client: BaseClient, storage_service_properties: StorageServiceProperties) -> None:
        super().__init__(client)
        self.storage_service_properties = storage_service_properties

    def _path(self) -> str:
        return "/"

    def _body(self) -> StorageServiceProperties:
        return self.storage_service_properties


class ListSharesSegment(StoragePagedRequest):
    """List the shares of the account, one segment per page."""

    comp = "list"
    query_names = ("prefix", "marker", "maxresults", "include", "timeout")
    responses = {200: ListSharesResponse}
    items_field = "share_items"

    def _path(self) -> str:
        return "/"

    def prefix(self, prefix: str) -> Self:
        """Only shares whose name starts with ``prefix``."""
        return self._set("prefix", prefix)

    def marker(self, marker: str) -> Self:
        """Resume from the ``NextMarker`` of an earlier listing."""
        return self._set("marker", marker)

    def maxresults(self, maxresults: int) -> Self:
        """Maximum shares per page (the service caps it at 5000)."""
        return self._set("maxresults", maxresults)

    def include(self, include: list[ListSharesInclude]) -> Self:
        return self._set("include", list(include))


class ServiceOperations:
    def __init__(self, client: BaseClient) -> None:
        self._client = client

    def get_properties(self) -> GetServiceProperties:
        return GetServiceProperties(self._client)

    def set_properties(self, storage_service_properties: StorageServiceProperties) -> SetServiceProperties:
        return SetServiceProperties(self._client, storage_service_properties)

    def list_shares_segment(self) -> ListSharesSegment:
        return ListSharesSegment(self._client)
