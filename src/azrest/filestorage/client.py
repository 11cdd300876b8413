"""Client for the file storage data-plane API."""

from __future__ import annotations

from azrest.core.client import BaseClient
from azrest.filestorage.directory import DirectoryOperations
from azrest.filestorage.file import FileOperations
from azrest.filestorage.service import ServiceOperations
from azrest.filestorage.share import ShareOperations


class FileStorageClient(BaseClient):
    """Entry point for a storage account's file service.

    The endpoint is the account URL (``https://<account>.file.core.windows.net``)
    and has no default.

    Example:
        async with FileStorageClient(credential, account_url) as client:
            async for share in client.service.list_shares_segment().prefix("logs").items():
                print(share.name)
    """

    @property
    def service(self) -> ServiceOperations:
        return ServiceOperations(self)

    def share(self, share_name: str) -> ShareOperations:
        return ShareOperations(self, share_name)

    def directory(self, share_name: str, directory_path: str) -> DirectoryOperations:
        return DirectoryOperations(self, share_name, directory_path)

    def file(self, share_name: str, file_path: str) -> FileOperations:
        return FileOperations(self, share_name, file_path)
