"""Async client for the file storage API (x-ms-version 2020-10-02)."""

from azrest.filestorage._base import FILE_SERVICE_VERSION, FileStorageResponse
from azrest.filestorage.client import FileStorageClient
from azrest.filestorage.file import byte_range
from azrest.filestorage.models import (
    AccessPolicy,
    CorsRule,
    DeleteSnapshotsOption,
    FileRangeWrite,
    ListSharesInclude,
    Metrics,
    RetentionPolicy,
    ShareAccessTier,
    SharePermission,
    SignedIdentifier,
    SignedIdentifiers,
    StorageServiceProperties,
)

__all__ = [
    "FILE_SERVICE_VERSION",
    "AccessPolicy",
    "CorsRule",
    "DeleteSnapshotsOption",
    "FileRangeWrite",
    "FileStorageClient",
    "FileStorageResponse",
    "ListSharesInclude",
    "Metrics",
    "RetentionPolicy",
    "ShareAccessTier",
    "SharePermission",
    "SignedIdentifier",
    "SignedIdentifiers",
    "StorageServiceProperties",
    "byte_range",
]
