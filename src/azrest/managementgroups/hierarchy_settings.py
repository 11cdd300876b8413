"""Hierarchy settings defined at the root management group level."""

from __future__ import annotations

from typing import TYPE_CHECKING

from azrest.core.request import path_segment
from azrest.managementgroups._base import PROVIDER_PATH, ManagementRequest
from azrest.managementgroups.models import (
    CreateOrUpdateSettingsRequest,
    HierarchySettings,
    HierarchySettingsList,
)

if TYPE_CHECKING:
    from azrest.core.client import BaseClient


class _SettingsRequest(ManagementRequest):
    def __init__(self, client: BaseClient, group_id: str) -> None:
        super().__init__(client)
        self.group_id = group_id

    def _path(self) -> str:
        return (
            f"{PROVIDER_PATH}/managementGroups/{path_segment(self.group_id, 'group_id')}"
            "/settings/default"
        )


class ListHierarchySettings(_SettingsRequest):
    """Get all the hierarchy settings of a root management group."""

    responses = {200: HierarchySettingsList}

    def _path(self) -> str:
        return (
            f"{PROVIDER_PATH}/managementGroups/{path_segment(self.group_id, 'group_id')}"
            "/settings"
        )


class GetHierarchySettings(_SettingsRequest):
    responses = {200: HierarchySettings}


class CreateOrUpdateHierarchySettings(_SettingsRequest):
    method = "PUT"
    responses = {200: HierarchySettings}

    def __init__(
        self, client: BaseClient, group_id: str, create_tenant_settings_request: CreateOrUpdateSettingsRequest
    ) -> None:
        super().__init__(client, group_id)
        self.create_tenant_settings_request = create_tenant_settings_request

    def _body(self) -> CreateOrUpdateSettingsRequest:
        return self.create_tenant_settings_request


class UpdateHierarchySettings(CreateOrUpdateHierarchySettings):
    method = "PATCH"


class DeleteHierarchySettings(_SettingsRequest):
    method = "DELETE"
    responses = {200: None}


class HierarchySettingsOperations:
    def __init__(self, client: BaseClient) -> None:
        self._client = client

    def list(self, group_id: str) -> ListHierarchySettings:
        return ListHierarchySettings(self._client, group_id)

    def get(self, group_id: str) -> GetHierarchySettings:
        return GetHierarchySettings(self._client, group_id)

    def create_or_update(
        self, group_id: str, create_tenant_settings_request: CreateOrUpdateSettingsRequest
    ) -> CreateOrUpdateHierarchySettings:
        return CreateOrUpdateHierarchySettings(self._client, group_id, create_tenant_settings_request)

    def update(
        self, group_id: str, create_tenant_settings_request: CreateOrUpdateSettingsRequest
    ) -> UpdateHierarchySettings:
        return UpdateHierarchySettings(self._client, group_id, create_tenant_settings_request)

    def delete(self, group_id: str) -> DeleteHierarchySettings:
        return DeleteHierarchySettings(self._client, group_id)
