"""Wire models for the management groups API (JSON)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from azrest.core.serialization import wire, wire_list

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ManagementGroupChildType(str, Enum):
    """Type of a child entity in the hierarchy."""

    MANAGEMENT_GROUP = "Microsoft.Management/managementGroups"
    SUBSCRIPTION = "/subscriptions"


class CheckNameAvailabilityType(str, Enum):
    MANAGEMENT_GROUP = "Microsoft.Management/managementGroups"


class NameAvailabilityReason(str, Enum):
    """Why a name is unavailable."""

    INVALID = "Invalid"
    ALREADY_EXISTS = "AlreadyExists"


class Permissions(str, Enum):
    """Permission level a caller holds on an entity."""

    NO_ACCESS = "noaccess"
    VIEW = "view"
    EDIT = "edit"
    DELETE = "delete"


class TenantBackfillStatus(str, Enum):
    NOT_STARTED = "NotStarted"
    NOT_STARTED_BUT_GROUPS_EXIST = "NotStartedButGroupsExist"
    STARTED = "Started"
    FAILED = "Failed"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"


# ---------------------------------------------------------------------------
# Management groups
# ---------------------------------------------------------------------------


@dataclass
class ParentGroupInfo:
    id: str | None = wire("id")
    name: str | None = wire("name")
    display_name: str | None = wire("displayName")


@dataclass
class ManagementGroupPathElement:
    name: str | None = wire("name")
    display_name: str | None = wire("displayName")


@dataclass
class ManagementGroupDetails:
    version: float | None = wire("version")
    updated_time: datetime | None = wire("updatedTime")
    updated_by: str | None = wire("updatedBy")
    parent: ParentGroupInfo | None = wire("parent")
    path: list[ManagementGroupPathElement] = wire_list("path")


@dataclass
class ManagementGroupChildInfo:
    """A child (management group or subscription); children nest recursively."""

    type: ManagementGroupChildType | None = wire("type")
    id: str | None = wire("id")
    name: str | None = wire("name")
    display_name: str | None = wire("displayName")
    children: list[ManagementGroupChildInfo] = wire_list("children")


@dataclass
class ManagementGroupProperties:
    tenant_id: str | None = wire("tenantId")
    display_name: str | None = wire("displayName")
    details: ManagementGroupDetails | None = wire("details")
    children: list[ManagementGroupChildInfo] = wire_list("children")


@dataclass
class ManagementGroup:
    """The management group details."""

    id: str | None = wire("id")
    type: str | None = wire("type")
    name: str | None = wire("name")
    properties: ManagementGroupProperties | None = wire("properties")


@dataclass
class ManagementGroupInfoProperties:
    tenant_id: str | None = wire("tenantId")
    display_name: str | None = wire("displayName")


@dataclass
class ManagementGroupInfo:
    """Summary record returned by the list operation."""

    id: str | None = wire("id")
    type: str | None = wire("type")
    name: str | None = wire("name")
    properties: ManagementGroupInfoProperties | None = wire("properties")


@dataclass
class ManagementGroupListResult:
    value: list[ManagementGroupInfo] = wire_list("value")
    next_link: str | None = wire("nextLink")


@dataclass
class CreateParentGroupInfo:
    id: str | None = wire("id")
    name: str | None = wire("name")
    display_name: str | None = wire("displayName")


@dataclass
class CreateManagementGroupDetails:
    version: float | None = wire("version")
    updated_time: datetime | None = wire("updatedTime")
    updated_by: str | None = wire("updatedBy")
    parent: CreateParentGroupInfo | None = wire("parent")


@dataclass
class CreateManagementGroupChildInfo:
    type: ManagementGroupChildType | None = wire("type")
    id: str | None = wire("id")
    name: str | None = wire("name")
    display_name: str | None = wire("displayName")
    children: list[CreateManagementGroupChildInfo] = wire_list("children")


@dataclass
class CreateManagementGroupProperties:
    tenant_id: str | None = wire("tenantId")
    display_name: str | None = wire("displayName")
    details: CreateManagementGroupDetails | None = wire("details")
    children: list[CreateManagementGroupChildInfo] = wire_list("children")


@dataclass
class CreateManagementGroupRequest:
    """Body of a create-or-update management group request."""

    id: str | None = wire("id")
    type: str | None = wire("type")
    name: str | None = wire("name")
    properties: CreateManagementGroupProperties | None = wire("properties")


@dataclass
class PatchManagementGroupRequest:
    display_name: str | None = wire("displayName")
    parent_group_id: str | None = wire("parentGroupId")


@dataclass
class AzureAsyncOperationResults:
    """Accepted-status body of a long-running create or delete."""

    id: str | None = wire("id")
    type: str | None = wire("type")
    name: str | None = wire("name")
    status: str | None = wire("status")
    properties: ManagementGroupInfoProperties | None = wire("properties")


@dataclass
class OperationResults:
    id: str | None = wire("id")
    type: str | None = wire("type")
    name: str | None = wire("name")
    properties: ManagementGroupInfoProperties | None = wire("properties")


# ---------------------------------------------------------------------------
# Descendants and entities
# ---------------------------------------------------------------------------


@dataclass
class DescendantParentGroupInfo:
    id: str | None = wire("id")


@dataclass
class DescendantInfoProperties:
    display_name: str | None = wire("displayName")
    parent: DescendantParentGroupInfo | None = wire("parent")


@dataclass
class DescendantInfo:
    id: str | None = wire("id")
    type: str | None = wire("type")
    name: str | None = wire("name")
    properties: DescendantInfoProperties | None = wire("properties")


@dataclass
class DescendantListResult:
    value: list[DescendantInfo] = wire_list("value")
    next_link: str | None = wire("nextLink")


@dataclass
class EntityParentGroupInfo:
    id: str | None = wire("id")


@dataclass
class EntityInfoProperties:
    tenant_id: str | None = wire("tenantId")
    display_name: str | None = wire("displayName")
    parent: EntityParentGroupInfo | None = wire("parent")
    permissions: Permissions | None = wire("permissions")
    inherited_permissions: Permissions | None = wire("inheritedPermissions")
    number_of_descendants: int | None = wire("numberOfDescendants")
    number_of_children: int | None = wire("numberOfChildren")
    number_of_child_groups: int | None = wire("numberOfChildGroups")
    parent_display_name_chain: list[str] = wire_list("parentDisplayNameChain")
    parent_name_chain: list[str] = wire_list("parentNameChain")


@dataclass
class EntityInfo:
    id: str | None = wire("id")
    type: str | None = wire("type")
    name: str | None = wire("name")
    properties: EntityInfoProperties | None = wire("properties")


@dataclass
class EntityListResult:
    value: list[EntityInfo] = wire_list("value")
    count: int | None = wire("count")
    next_link: str | None = wire("nextLink")


@dataclass
class EntityHierarchyItemProperties:
    display_name: str | None = wire("displayName")
    permissions: Permissions | None = wire("permissions")
    children: list[EntityHierarchyItem] = wire_list("children")


@dataclass
class EntityHierarchyItem:
    id: str | None = wire("id")
    type: str | None = wire("type")
    name: str | None = wire("name")
    properties: EntityHierarchyItemProperties | None = wire("properties")


# ---------------------------------------------------------------------------
# Subscriptions
# ---------------------------------------------------------------------------


@dataclass
class SubscriptionUnderManagementGroupProperties:
    tenant: str | None = wire("tenant")
    display_name: str | None = wire("displayName")
    parent: DescendantParentGroupInfo | None = wire("parent")
    state: str | None = wire("state")


@dataclass
class SubscriptionUnderManagementGroup:
    id: str | None = wire("id")
    type: str | None = wire("type")
    name: str | None = wire("name")
    properties: SubscriptionUnderManagementGroupProperties | None = wire("properties")


@dataclass
class ListSubscriptionUnderManagementGroup:
    value: list[SubscriptionUnderManagementGroup] = wire_list("value")
    next_link: str | None = wire("nextLink")


# ---------------------------------------------------------------------------
# Hierarchy settings
# ---------------------------------------------------------------------------


@dataclass
class HierarchySettingsProperties:
    tenant_id: str | None = wire("tenantId")
    require_authorization_for_group_creation: bool | None = wire(
        "requireAuthorizationForGroupCreation"
    )
    default_management_group: str | None = wire("defaultManagementGroup")


@dataclass
class HierarchySettings:
    id: str | None = wire("id")
    type: str | None = wire("type")
    name: str | None = wire("name")
    properties: HierarchySettingsProperties | None = wire("properties")


@dataclass
class HierarchySettingsInfo:
    id: str | None = wire("id")
    type: str | None = wire("type")
    name: str | None = wire("name")
    properties: HierarchySettingsProperties | None = wire("properties")


@dataclass
class HierarchySettingsList:
    value: list[HierarchySettingsInfo] = wire_list("value")
    next_link: str | None = wire("nextLink")


@dataclass
class CreateOrUpdateSettingsProperties:
    require_authorization_for_group_creation: bool | None = wire(
        "requireAuthorizationForGroupCreation"
    )
    default_management_group: str | None = wire("defaultManagementGroup")


@dataclass
class CreateOrUpdateSettingsRequest:
    properties: CreateOrUpdateSettingsProperties | None = wire("properties")


# ---------------------------------------------------------------------------
# Operations, name availability, tenant backfill, errors
# ---------------------------------------------------------------------------


@dataclass
class OperationDisplayProperties:
    provider: str | None = wire("provider")
    resource: str | None = wire("resource")
    operation: str | None = wire("operation")
    description: str | None = wire("description")


@dataclass
class Operation:
    name: str | None = wire("name")
    display: OperationDisplayProperties | None = wire("display")


@dataclass
class OperationListResult:
    value: list[Operation] = wire_list("value")
    next_link: str | None = wire("nextLink")


@dataclass
class CheckNameAvailabilityRequest:
    name: str | None = wire("name")
    type: CheckNameAvailabilityType | None = wire("type")


@dataclass
class CheckNameAvailabilityResult:
    name_available: bool | None = wire("nameAvailable")
    reason: NameAvailabilityReason | None = wire("reason")
    message: str | None = wire("message")


@dataclass
class TenantBackfillStatusResult:
    tenant_id: str | None = wire("tenantId")
    status: TenantBackfillStatus | None = wire("status")


@dataclass
class ErrorDetails:
    code: str | None = wire("code")
    message: str | None = wire("message")
    details: str | None = wire("details")


@dataclass
class ErrorResponse:
    error: ErrorDetails | None = wire("error")
