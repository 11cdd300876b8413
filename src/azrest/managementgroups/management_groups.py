"""Management group CRUD, listing and descendant enumeration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from azrest.core.request import path_segment
from azrest.managementgroups._base import (
    CACHE_CONTROL_HEADER,
    PROVIDER_PATH,
    CacheControlOption,
    ManagementPagedRequest,
    ManagementRequest,
)
from azrest.managementgroups.models import (
    AzureAsyncOperationResults,
    CreateManagementGroupRequest,
    DescendantListResult,
    ManagementGroup,
    ManagementGroupListResult,
    PatchManagementGroupRequest,
)

if TYPE_CHECKING:
    from azrest.core.client import BaseClient


def _group_path(group_id: str) -> str:
    return f"{PROVIDER_PATH}/managementGroups/{path_segment(group_id, 'group_id')}"


class ListManagementGroups(CacheControlOption, ManagementPagedRequest):
    """List management groups for the authenticated user."""

    query_names = ("$skiptoken",)
    header_names = (CACHE_CONTROL_HEADER,)
    responses = {200: ManagementGroupListResult}

    def _path(self) -> str:
        return f"{PROVIDER_PATH}/managementGroups"

    def skiptoken(self, skiptoken: str) -> Self:
        """Page continuation token from a previous partial result."""
        return self._set("$skiptoken", skiptoken)


class GetManagementGroup(CacheControlOption, ManagementRequest):
    """Get the details of a management group."""

    query_names = ("$expand", "$recurse", "$filter")
    header_names = (CACHE_CONTROL_HEADER,)
    responses = {200: ManagementGroup}

    def __init__(self, client: BaseClient, group_id: str) -> None:
        super().__init__(client)
        self.group_id = group_id

    def _path(self) -> str:
        return _group_path(self.group_id)

    def expand(self, expand: str) -> Self:
        """``children`` includes children in the payload; ``path`` includes the root path."""
        return self._set("$expand", expand)

    def recurse(self, recurse: bool) -> Self:
        """Include the entire hierarchy; requires ``expand("children")``."""
        return self._set("$recurse", recurse)

    def filter(self, filter: str) -> Self:
        """Exclude subscriptions, e.g. ``children.childType ne Subscription``."""
        return self._set("$filter", filter)


class CreateOrUpdateManagementGroup(CacheControlOption, ManagementRequest):
    """Create or update a management group.

    Only the first response is returned; a 202 carries the async operation
    record and polling is left to the caller.
    """

    method = "PUT"
    header_names = (CACHE_CONTROL_HEADER,)
    responses = {200: ManagementGroup, 202: AzureAsyncOperationResults}

    def __init__(
        self,
        client: BaseClient,
        group_id: str,
        create_management_group_request: CreateManagementGroupRequest,
    ) -> None:
        super().__init__(client)
        self.group_id = group_id
        self.create_management_group_request = create_management_group_request

    def _path(self) -> str:
        return _group_path(self.group_id)

    def _body(self) -> CreateManagementGroupRequest:
        return self.create_management_group_request


class UpdateManagementGroup(CacheControlOption, ManagementRequest):
    """Update a management group's display name or parent."""

    method = "PATCH"
    header_names = (CACHE_CONTROL_HEADER,)
    responses = {200: ManagementGroup}

    def __init__(
        self,
        client: BaseClient,
        group_id: str,
        patch_group_request: PatchManagementGroupRequest,
    ) -> None:
        super().__init__(client)
        self.group_id = group_id
        self.patch_group_request = patch_group_request

    def _path(self) -> str:
        return _group_path(self.group_id)

    def _body(self) -> PatchManagementGroupRequest:
        return self.patch_group_request


class DeleteManagementGroup(CacheControlOption, ManagementRequest):
    """Delete a management group; fails if it still has children."""

    method = "DELETE"
    header_names = (CACHE_CONTROL_HEADER,)
    responses = {202: AzureAsyncOperationResults, 204: None}

    def __init__(self, client: BaseClient, group_id: str) -> None:
        super().__init__(client)
        self.group_id = group_id

    def _path(self) -> str:
        return _group_path(self.group_id)


class GetDescendants(ManagementPagedRequest):
    """List all entities that descend from a management group."""

    query_names = ("$skiptoken", "$top")
    responses = {200: DescendantListResult}

    def __init__(self, client: BaseClient, group_id: str) -> None:
        super().__init__(client)
        self.group_id = group_id

    def _path(self) -> str:
        return f"{_group_path(self.group_id)}/descendants"

    def skiptoken(self, skiptoken: str) -> Self:
        return self._set("$skiptoken", skiptoken)

    def top(self, top: int) -> Self:
        """Maximum number of entities per page."""
        return self._set("$top", top)


class ManagementGroupsOperations:
    """Operations on management groups; see ``ManagementGroupsClient.management_groups``."""

    def __init__(self, client: BaseClient) -> None:
        self._client = client

    def list(self) -> ListManagementGroups:
        return ListManagementGroups(self._client)

    def get(self, group_id: str) -> GetManagementGroup:
        return GetManagementGroup(self._client, group_id)

    def create_or_update(
        self, group_id: str, create_management_group_request: CreateManagementGroupRequest
    ) -> CreateOrUpdateManagementGroup:
        return CreateOrUpdateManagementGroup(self._client, group_id, create_management_group_request)

    def update(
        self, group_id: str, patch_group_request: PatchManagementGroupRequest
    ) -> UpdateManagementGroup:
        return UpdateManagementGroup(self._client, group_id, patch_group_request)

    def delete(self, group_id: str) -> DeleteManagementGroup:
        return DeleteManagementGroup(self._client, group_id)

    def get_descendants(self, group_id: str) -> GetDescendants:
        return GetDescendants(self._client, group_id)
