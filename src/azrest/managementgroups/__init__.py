"""Async client for the management groups API (api-version 2020-05-01)."""

from azrest.managementgroups._base import API_VERSION
from azrest.managementgroups.client import ManagementGroupsClient
from azrest.managementgroups.models import (
    CheckNameAvailabilityRequest,
    CheckNameAvailabilityType,
    CreateManagementGroupDetails,
    CreateManagementGroupProperties,
    CreateManagementGroupRequest,
    CreateOrUpdateSettingsProperties,
    CreateOrUpdateSettingsRequest,
    CreateParentGroupInfo,
    ManagementGroup,
    ManagementGroupChildType,
    NameAvailabilityReason,
    PatchManagementGroupRequest,
    Permissions,
    TenantBackfillStatus,
)

__all__ = [
    "API_VERSION",
    "CheckNameAvailabilityRequest",
    "CheckNameAvailabilityType",
    "CreateManagementGroupDetails",
    "CreateManagementGroupProperties",
    "CreateManagementGroupRequest",
    "CreateOrUpdateSettingsProperties",
    "CreateOrUpdateSettingsRequest",
    "CreateParentGroupInfo",
    "ManagementGroup",
    "ManagementGroupChildType",
    "ManagementGroupsClient",
    "NameAvailabilityReason",
    "PatchManagementGroupRequest",
    "Permissions",
    "TenantBackfillStatus",
]
