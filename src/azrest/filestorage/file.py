"""Operations on a file inside a share."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from azrest.core.request import path_segment, path_segments
from azrest.core.serialization import BINARY
from azrest.filestorage._base import (
    SMB_HEADER_NAMES,
    MetadataOption,
    ShareSnapshotOption,
    SmbPropertiesOption,
    StorageRequest,
    smb_defaults,
)
from azrest.filestorage.models import FileRangeWrite, ShareFileRangeList

if TYPE_CHECKING:
    from azrest.core.client import BaseClient

RANGE_HEADER = "x-ms-range"


def byte_range(start: int, end: int) -> str:
    """Format an inclusive byte range as ``bytes=start-end``."""
    if start < 0 or end < start:
        raise ValueError(f"invalid byte range {start}-{end}")
    return f"bytes={start}-{end}"


class FileRequest(StorageRequest):
    def __init__(self, client: BaseClient, share_name: str, file_path: str) -> None:
        super().__init__(client)
        self.share_name = share_name
        self.file_path = file_path

    def _path(self) -> str:
        return (
            f"/{path_segment(self.share_name, 'share_name')}"
            f"/{path_segments(self.file_path, 'file_path')}"
        )


class RangeOption:
    def range(self, start: int, end: int) -> Self:
        """Restrict the operation to the inclusive byte range ``start``-``end``."""
        return self._set(RANGE_HEADER, byte_range(start, end))  # type: ignore[attr-defined, no-any-return]


class CreateFile(SmbPropertiesOption, MetadataOption, FileRequest):
    """Create a new file (or replace an existing one) of a fixed size, without content.

    Content is written afterwards with ``upload_range``.
    """

    method = "PUT"
    header_names = ("x-ms-content-type", *SMB_HEADER_NAMES)
    responses = {201: None}

    def __init__(self, client: BaseClient, share_name: str, file_path: str, content_length: int) -> None:
        super().__init__(client, share_name, file_path)
        self.content_length = content_length
        self._options.update(smb_defaults("None"))

    def _fixed_headers(self) -> dict[str, str]:
        return {
            **super()._fixed_headers(),
            "x-ms-content-length": str(self.content_length),
            "x-ms-type": "file",
        }

    def file_content_type(self, content_type: str) -> Self:
        """MIME type stored with the file and returned on download."""
        return self._set("x-ms-content-type", content_type)


class DownloadFile(RangeOption, FileRequest):
    """Read the file content; a range request answers 206."""

    header_names = (RANGE_HEADER,)
    wire_format = BINARY
    responses = {200: bytes, 206: bytes}


class GetFileProperties(ShareSnapshotOption, FileRequest):
    """Metadata and system properties of the file, in headers only."""

    method = "HEAD"
    query_names = ("sharesnapshot", "timeout")
    responses = {200: None}


class DeleteFile(FileRequest):
    method = "DELETE"
    responses = {202: None}


class UploadRange(FileRequest):
    """Write bytes into a range, or clear it.

    For ``FileRangeWrite.CLEAR`` the body must be empty.
    """

    method = "PUT"
    comp = "range"
    content_type = None
    responses = {201: None}

    def __init__(
        self,
        client: BaseClient,
        share_name: str,
        file_path: str,
        range: str,
        file_range_write: FileRangeWrite,
        body: bytes = b"",
    ) -> None:
        super().__init__(client, share_name, file_path)
        if file_range_write is FileRangeWrite.CLEAR and body:
            raise ValueError("a clear range request must not carry a body")
        self.range = range
        self.file_range_write = file_range_write
        self.body = body

    def _fixed_headers(self) -> dict[str, str]:
        return {
            **super()._fixed_headers(),
            RANGE_HEADER: self.range,
            "x-ms-write": self.file_range_write.value,
            "Content-Length": str(len(self.body)),
        }

    def _body(self) -> bytes:
        return self.body


class GetRangeList(RangeOption, ShareSnapshotOption, FileRequest):
    """List the valid ranges of the file."""

    comp = "rangelist"
    query_names = ("sharesnapshot", "timeout")
    header_names = (RANGE_HEADER,)
    responses = {200: ShareFileRangeList}


class FileOperations:
    """Operations bound to one file path."""

    def __init__(self, client: BaseClient, share_name: str, file_path: str) -> None:
        self._client = client
        self.share_name = share_name
        self.file_path = file_path

    def create(self, content_length: int) -> CreateFile:
        return CreateFile(self._client, self.share_name, self.file_path, content_length)

    def download(self) -> DownloadFile:
        return DownloadFile(self._client, self.share_name, self.file_path)

    def get_properties(self) -> GetFileProperties:
        return GetFileProperties(self._client, self.share_name, self.file_path)

    def delete(self) -> DeleteFile:
        return DeleteFile(self._client, self.share_name, self.file_path)

    def upload_range(
        self, range: str, file_range_write: FileRangeWrite, body: bytes = b""
    ) -> UploadRange:
        """Write or clear a byte range of the file.

        Args:
            range: Inclusive byte range, e.g. ``byte_range(0, 511)``.
            file_range_write: Whether to write ``body`` or clear the range.
            body: Exactly as many bytes as the range spans, or empty to clear.

        Raises:
            ValueError: If a clear request carries a body.
        """
        return UploadRange(self._client, self.share_name, self.file_path, range, file_range_write, body)

    def get_range_list(self) -> GetRangeList:
        return GetRangeList(self._client, self.share_name, self.file_path)
