"""Builder bases and response wrapper shared by the file storage operations."""

from __future__ import annotations

from typing import Any, ClassVar, Self

from azrest.core.request import PagedRequestBuilder, RequestBuilder
from azrest.core.response import METADATA_HEADER_PREFIX, Response
from azrest.core.serialization import XML, XML_CONTENT_TYPE
from azrest.filestorage.models import StorageError

FILE_SERVICE_VERSION = "2020-10-02"
VERSION_HEADER = "x-ms-version"
METADATA_OPTION = "metadata"


class FileStorageResponse(Response):
    """Response with typed accessors for file storage headers."""

    def share_quota(self) -> int:
        """Share size limit in GiB."""
        return self.header_int("x-ms-share-quota")

    def snapshot(self) -> str:
        """Snapshot id returned by ``create_snapshot``."""
        return self.header("x-ms-snapshot")

    def file_permission_key(self) -> str:
        return self.header("x-ms-file-permission-key")

    def content_length(self) -> int:
        return self.header_int("Content-Length")

    def content_range(self) -> str:
        return self.header("Content-Range")

    def file_type(self) -> str:
        """``File`` for files; ``Directory`` for directories."""
        return self.header("x-ms-type")


class StorageRequest(RequestBuilder):
    """XML operation carrying the ``x-ms-version`` header.

    ``restype`` and ``comp`` are the fixed resource markers placed first in
    the query string.
    """

    restype: ClassVar[str | None] = None
    comp: ClassVar[str | None] = None
    query_names = ("timeout",)
    wire_format = XML
    content_type = XML_CONTENT_TYPE
    response_class = FileStorageResponse
    error_model = StorageError
    error_wire_format = XML

    def _fixed_query(self) -> list[tuple[str, str]]:
        query: list[tuple[str, str]] = []
        if self.restype is not None:
            query.append(("restype", self.restype))
        if self.comp is not None:
            query.append(("comp", self.comp))
        return query

    def _fixed_headers(self) -> dict[str, str]:
        return {VERSION_HEADER: FILE_SERVICE_VERSION}

    def _extra_headers(self) -> dict[str, str]:
        metadata = self._options.get(METADATA_OPTION) or {}
        return {f"{METADATA_HEADER_PREFIX}{key}": value for key, value in metadata.items()}

    def timeout(self, timeout: int) -> Self:
        """Server-side timeout in seconds; a hint to the service, not a local deadline."""
        return self._set("timeout", timeout)


class StoragePagedRequest(StorageRequest, PagedRequestBuilder):
    """Listing whose envelope's ``NextMarker`` continues the sequence."""

    continuation_field = "next_marker"


class MetadataOption:
    """Adds the user metadata setter (``x-ms-meta-*`` headers) to a builder."""

    def metadata(self, metadata: dict[str, str]) -> Self:
        return self._set(METADATA_OPTION, dict(metadata))  # type: ignore[attr-defined, no-any-return]


class ShareSnapshotOption:
    def sharesnapshot(self, sharesnapshot: str) -> Self:
        """Address a share snapshot instead of the live share."""
        return self._set("sharesnapshot", sharesnapshot)  # type: ignore[attr-defined, no-any-return]


# SMB properties the service requires on create; callers may override them
FILE_PERMISSION_INHERIT = "inherit"
SMB_NOW = "now"


class SmbPropertiesOption:
    """Setters for the SMB headers sent when creating a directory or file."""

    def file_permission(self, file_permission: str) -> Self:
        """SDDL security descriptor; replaces any permission key."""
        self._set("x-ms-file-permission-key", None)  # type: ignore[attr-defined]
        return self._set("x-ms-file-permission", file_permission)  # type: ignore[attr-defined, no-any-return]

    def file_permission_key(self, file_permission_key: str) -> Self:
        """Key from ``share.create_permission``; replaces any inline permission."""
        self._set("x-ms-file-permission", None)  # type: ignore[attr-defined]
        return self._set("x-ms-file-permission-key", file_permission_key)  # type: ignore[attr-defined, no-any-return]

    def file_attributes(self, file_attributes: str) -> Self:
        """Pipe-separated attributes, e.g. ``ReadOnly|Hidden``."""
        return self._set("x-ms-file-attributes", file_attributes)  # type: ignore[attr-defined, no-any-return]

    def file_creation_time(self, file_creation_time: Any) -> Self:
        return self._set("x-ms-file-creation-time", file_creation_time)  # type: ignore[attr-defined, no-any-return]

    def file_last_write_time(self, file_last_write_time: Any) -> Self:
        return self._set("x-ms-file-last-write-time", file_last_write_time)  # type: ignore[attr-defined, no-any-return]


SMB_HEADER_NAMES = (
    "x-ms-file-permission",
    "x-ms-file-permission-key",
    "x-ms-file-attributes",
    "x-ms-file-creation-time",
    "x-ms-file-last-write-time",
)


def smb_defaults(file_attributes: str) -> dict[str, str]:
    return {
        "x-ms-file-permission": FILE_PERMISSION_INHERIT,
        "x-ms-file-attributes": file_attributes,
        "x-ms-file-creation-time": SMB_NOW,
        "x-ms-file-last-write-time": SMB_NOW,
    }
