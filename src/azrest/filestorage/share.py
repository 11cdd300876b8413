"""Operations on a single share."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from azrest.core.request import path_segment
from azrest.core.serialization import JSON, JSON_CONTENT_TYPE
from azrest.filestorage._base import MetadataOption, ShareSnapshotOption, StorageRequest
from azrest.filestorage.models import (
    DeleteSnapshotsOption,
    ShareAccessTier,
    SharePermission,
    ShareStats,
    SignedIdentifiers,
)

if TYPE_CHECKING:
    from azrest.core.client import BaseClient

FILE_PERMISSION_KEY_HEADER = "x-ms-file-permission-key"


class ShareRequest(StorageRequest):
    restype = "share"

    def __init__(self, client: BaseClient, share_name: str) -> None:
        super().__init__(client)
        self.share_name = share_name

    def _path(self) -> str:
        return f"/{path_segment(self.share_name, 'share_name')}"


class CreateShare(MetadataOption, ShareRequest):
    """Create a share; fails with 409 if it already exists."""

    method = "PUT"
    header_names = ("x-ms-share-quota", "x-ms-access-tier")
    responses = {201: None}

    def quota(self, quota: int) -> Self:
        """Maximum share size in GiB."""
        return self._set("x-ms-share-quota", quota)

    def access_tier(self, access_tier: ShareAccessTier) -> Self:
        return self._set("x-ms-access-tier", access_tier)


class GetShareProperties(ShareSnapshotOption, ShareRequest):
    """Share properties and metadata, returned in headers only."""

    query_names = ("sharesnapshot", "timeout")
    responses = {200: None}


class DeleteShare(ShareSnapshotOption, ShareRequest):
    method = "DELETE"
    query_names = ("sharesnapshot", "timeout")
    header_names = ("x-ms-delete-snapshots",)
    responses = {202: None}

    def delete_snapshots(self, delete_snapshots: DeleteSnapshotsOption) -> Self:
        """Also delete the share's snapshots; required when any exist."""
        return self._set("x-ms-delete-snapshots", delete_snapshots)


class CreateShareSnapshot(MetadataOption, ShareRequest):
    """Take a read-only snapshot; the id is in ``response.snapshot()``."""

    method = "PUT"
    comp = "snapshot"
    responses = {201: None}


class GetShareAccessPolicy(ShareRequest):
    comp = "acl"
    responses = {200: SignedIdentifiers}


class SetShareAccessPolicy(ShareRequest):
    method = "PUT"
    comp = "acl"
    responses = {200: None}

    def __init__(self, client: BaseClient, share_name: str, share_acl: SignedIdentifiers) -> None:
        super().__init__(client, share_name)
        self.share_acl = share_acl

    def _body(self) -> SignedIdentifiers:
        return self.share_acl


class CreateSharePermission(ShareRequest):
    """Store a security descriptor at share level; the key is in ``response.file_permission_key()``."""

    method = "PUT"
    comp = "filepermission"
    content_type = JSON_CONTENT_TYPE
    responses = {201: None}

    def __init__(self, client: BaseClient, share_name: str, share_permission: SharePermission) -> None:
        super().__init__(client, share_name)
        self.share_permission = share_permission

    def _body(self) -> SharePermission:
        return self.share_permission


class GetSharePermission(ShareRequest):
    comp = "filepermission"
    wire_format = JSON
    responses = {200: SharePermission}

    def __init__(self, client: BaseClient, share_name: str, file_permission_key: str) -> None:
        super().__init__(client, share_name)
        self.file_permission_key = file_permission_key

    def _fixed_headers(self) -> dict[str, str]:
        return {**super()._fixed_headers(), FILE_PERMISSION_KEY_HEADER: self.file_permission_key}


class GetShareStatistics(ShareRequest):
    comp = "stats"
    responses = {200: ShareStats}


class ShareOperations:
    """Operations bound to one share name."""

    def __init__(self, client: BaseClient, share_name: str) -> None:
        self._client = client
        self.share_name = share_name

    def create(self) -> CreateShare:
        return CreateShare(self._client, self.share_name)

    def get_properties(self) -> GetShareProperties:
        return GetShareProperties(self._client, self.share_name)

    def delete(self) -> DeleteShare:
        return DeleteShare(self._client, self.share_name)

    def create_snapshot(self) -> CreateShareSnapshot:
        return CreateShareSnapshot(self._client, self.share_name)

    def get_access_policy(self) -> GetShareAccessPolicy:
        return GetShareAccessPolicy(self._client, self.share_name)

    def set_access_policy(self, share_acl: SignedIdentifiers) -> SetShareAccessPolicy:
        return SetShareAccessPolicy(self._client, self.share_name, share_acl)

    def create_permission(self, share_permission: SharePermission) -> CreateSharePermission:
        return CreateSharePermission(self._client, self.share_name, share_permission)

    def get_permission(self, file_permission_key: str) -> GetSharePermission:
        return GetSharePermission(self._client, self.share_name, file_permission_key)

    def get_statistics(self) -> GetShareStatistics:
        return GetShareStatistics(self._client, self.share_name)
