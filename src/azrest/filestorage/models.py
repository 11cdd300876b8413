"""Wire models for the file storage API.

Most bodies are XML; the share permission body is JSON. ``XML_ROOT`` names
the document element where it differs from the class name.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from azrest.core.serialization import RFC1123, wire, wire_list, wire_map

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ShareAccessTier(str, Enum):
    TRANSACTION_OPTIMIZED = "TransactionOptimized"
    HOT = "Hot"
    COOL = "Cool"


class ListSharesInclude(str, Enum):
    """Datasets to include in a share listing."""

    SNAPSHOTS = "snapshots"
    METADATA = "metadata"
    DELETED = "deleted"


class DeleteSnapshotsOption(str, Enum):
    INCLUDE = "include"


class FileRangeWrite(str, Enum):
    """``update`` writes the body into the range; ``clear`` frees it."""

    UPDATE = "update"
    CLEAR = "clear"


# ---------------------------------------------------------------------------
# Service properties
# ---------------------------------------------------------------------------


@dataclass
class RetentionPolicy:
    enabled: bool | None = wire("Enabled")
    days: int | None = wire("Days")


@dataclass
class Metrics:
    """Hour or minute metrics settings."""

    version: str | None = wire("Version")
    enabled: bool | None = wire("Enabled")
    include_apis: bool | None = wire("IncludeAPIs")
    retention_policy: RetentionPolicy | None = wire("RetentionPolicy")


@dataclass
class CorsRule:
    """A CORS rule; list-valued settings are comma-separated strings on the wire."""

    allowed_origins: str | None = wire("AllowedOrigins")
    allowed_methods: str | None = wire("AllowedMethods")
    allowed_headers: str | None = wire("AllowedHeaders")
    exposed_headers: str | None = wire("ExposedHeaders")
    max_age_in_seconds: int | None = wire("MaxAgeInSeconds")


@dataclass
class StorageServiceProperties:
    hour_metrics: Metrics | None = wire("HourMetrics")
    minute_metrics: Metrics | None = wire("MinuteMetrics")
    cors: list[CorsRule] = wire_list("Cors", item="CorsRule")


# ---------------------------------------------------------------------------
# Shares
# ---------------------------------------------------------------------------


@dataclass
class ShareProperties:
    last_modified: datetime | None = wire("Last-Modified", fmt=RFC1123)
    etag: str | None = wire("Etag")
    quota: int | None = wire("Quota")
    provisioned_iops: int | None = wire("ProvisionedIops")
    provisioned_ingress_mbps: int | None = wire("ProvisionedIngressMBps")
    provisioned_egress_mbps: int | None = wire("ProvisionedEgressMBps")
    next_allowed_quota_downgrade_time: datetime | None = wire(
        "NextAllowedQuotaDowngradeTime", fmt=RFC1123
    )
    deleted_time: datetime | None = wire("DeletedTime", fmt=RFC1123)
    remaining_retention_days: int | None = wire("RemainingRetentionDays")
    access_tier: str | None = wire("AccessTier")
    access_tier_change_time: datetime | None = wire("AccessTierChangeTime", fmt=RFC1123)
    access_tier_transition_state: str | None = wire("AccessTierTransitionState")
    lease_status: str | None = wire("LeaseStatus")
    lease_state: str | None = wire("LeaseState")
    lease_duration: str | None = wire("LeaseDuration")


@dataclass
class ShareItem:
    name: str | None = wire("Name")
    snapshot: str | None = wire("Snapshot")
    deleted: bool | None = wire("Deleted")
    version: str | None = wire("Version")
    properties: ShareProperties | None = wire("Properties")
    metadata: dict[str, str] = wire_map("Metadata")


@dataclass
class ListSharesResponse:
    """One page of a share listing; ``next_marker`` continues it."""

    XML_ROOT = "EnumerationResults"

    service_endpoint: str | None = wire("ServiceEndpoint", attribute=True)
    prefix: str | None = wire("Prefix")
    marker: str | None = wire("Marker")
    max_results: int | None = wire("MaxResults")
    share_items: list[ShareItem] = wire_list("Shares", item="Share")
    next_marker: str | None = wire("NextMarker")


@dataclass
class AccessPolicy:
    start: datetime | None = wire("Start")
    expiry: datetime | None = wire("Expiry")
    permission: str | None = wire("Permission")


@dataclass
class SignedIdentifier:
    id: str | None = wire("Id")
    access_policy: AccessPolicy | None = wire("AccessPolicy")


@dataclass
class SignedIdentifiers:
    """A share's stored access policies."""

    items: list[SignedIdentifier] = wire_list("SignedIdentifier")


@dataclass
class SharePermission:
    """Security descriptor in SDDL form (JSON body)."""

    permission: str | None = wire("permission")


@dataclass
class ShareStats:
    share_usage_bytes: int | None = wire("ShareUsageBytes")


# ---------------------------------------------------------------------------
# Directories and files
# ---------------------------------------------------------------------------


@dataclass
class FileProperty:
    content_length: int | None = wire("Content-Length")


@dataclass
class DirectoryItem:
    name: str | None = wire("Name")


@dataclass
class FileItem:
    name: str | None = wire("Name")
    properties: FileProperty | None = wire("Properties")


@dataclass
class FilesAndDirectoriesListSegment:
    directory_items: list[DirectoryItem] = wire_list("Directory")
    file_items: list[FileItem] = wire_list("File")


@dataclass
class ListFilesAndDirectoriesSegmentResponse:
    XML_ROOT = "EnumerationResults"

    service_endpoint: str | None = wire("ServiceEndpoint", attribute=True)
    share_name: str | None = wire("ShareName", attribute=True)
    share_snapshot: str | None = wire("ShareSnapshot", attribute=True)
    directory_path: str | None = wire("DirectoryPath", attribute=True)
    prefix: str | None = wire("Prefix")
    marker: str | None = wire("Marker")
    max_results: int | None = wire("MaxResults")
    segment: FilesAndDirectoriesListSegment | None = wire("Entries")
    next_marker: str | None = wire("NextMarker")


@dataclass
class FileRange:
    start: int | None = wire("Start")
    end: int | None = wire("End")


@dataclass
class ClearRange:
    start: int | None = wire("Start")
    end: int | None = wire("End")


@dataclass
class ShareFileRangeList:
    XML_ROOT = "Ranges"

    ranges: list[FileRange] = wire_list("Range")
    clear_ranges: list[ClearRange] = wire_list("ClearRange")


@dataclass
class StorageError:
    XML_ROOT = "Error"

    code: str | None = wire("Code")
    message: str | None = wire("Message")
