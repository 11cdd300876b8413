"""Operations on a directory inside a share."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self
from urllib.parse import quote

from azrest.core.request import path_segment, path_segments
from azrest.filestorage._base import (
    SMB_HEADER_NAMES,
    MetadataOption,
    ShareSnapshotOption,
    SmbPropertiesOption,
    StoragePagedRequest,
    StorageRequest,
    smb_defaults,
)
from azrest.filestorage.models import ListFilesAndDirectoriesSegmentResponse

if TYPE_CHECKING:
    from azrest.core.client import BaseClient


class DirectoryRequest(StorageRequest):
    restype = "directory"

    def __init__(self, client: BaseClient, share_name: str, directory_path: str) -> None:
        super().__init__(client)
        self.share_name = share_name
        self.directory_path = directory_path

    def _path(self) -> str:
        return (
            f"/{path_segment(self.share_name, 'share_name')}"
            f"/{path_segments(self.directory_path, 'directory_path')}"
        )


class CreateDirectory(SmbPropertiesOption, MetadataOption, DirectoryRequest):
    method = "PUT"
    header_names = SMB_HEADER_NAMES
    responses = {201: None}

    def __init__(self, client: BaseClient, share_name: str, directory_path: str) -> None:
        super().__init__(client, share_name, directory_path)
        self._options.update(smb_defaults("Directory"))


class GetDirectoryProperties(ShareSnapshotOption, DirectoryRequest):
    query_names = ("sharesnapshot", "timeout")
    responses = {200: None}


class DeleteDirectory(DirectoryRequest):
    """Delete an empty directory."""

    method = "DELETE"
    responses = {202: None}


class ListFilesAndDirectoriesSegment(ShareSnapshotOption, StoragePagedRequest):
    """List the files and subdirectories directly under a directory.

    An empty directory path lists the share root.
    """

    restype = "directory"
    comp = "list"
    query_names = ("prefix", "sharesnapshot", "marker", "maxresults", "timeout")
    responses = {200: ListFilesAndDirectoriesSegmentResponse}

    def __init__(self, client: BaseClient, share_name: str, directory_path: str) -> None:
        super().__init__(client)
        self.share_name = share_name
        self.directory_path = directory_path

    def _path(self) -> str:
        path = f"/{path_segment(self.share_name, 'share_name')}"
        directory = self.directory_path.strip("/")
        return f"{path}/{quote(directory, safe='/')}" if directory else path

    def _page_items(self, page: ListFilesAndDirectoriesSegmentResponse) -> list[Any]:
        if page.segment is None:
            return []
        return [*page.segment.directory_items, *page.segment.file_items]

    def prefix(self, prefix: str) -> Self:
        return self._set("prefix", prefix)

    def marker(self, marker: str) -> Self:
        return self._set("marker", marker)

    def maxresults(self, maxresults: int) -> Self:
        return self._set("maxresults", maxresults)


class DirectoryOperations:
    """Operations bound to one directory path."""

    def __init__(self, client: BaseClient, share_name: str, directory_path: str) -> None:
        self._client = client
        self.share_name = share_name
        self.directory_path = directory_path

    def create(self) -> CreateDirectory:
        return CreateDirectory(self._client, self.share_name, self.directory_path)

    def get_properties(self) -> GetDirectoryProperties:
        return GetDirectoryProperties(self._client, self.share_name, self.directory_path)

    def delete(self) -> DeleteDirectory:
        return DeleteDirectory(self._client, self.share_name, self.directory_path)

    def list_files_and_directories_segment(self) -> ListFilesAndDirectoriesSegment:
        return ListFilesAndDirectoriesSegment(self._client, self.share_name, self.directory_path)
