"""Client for the management groups API."""

from __future__ import annotations

from azrest.core.client import BaseClient
from azrest.managementgroups.entities import EntitiesOperations
from azrest.managementgroups.hierarchy_settings import HierarchySettingsOperations
from azrest.managementgroups.management_groups import ManagementGroupsOperations
from azrest.managementgroups.models import CheckNameAvailabilityRequest
from azrest.managementgroups.operations import (
    CheckNameAvailability,
    GetTenantBackfillStatus,
    OperationsOperations,
    StartTenantBackfill,
)
from azrest.managementgroups.subscriptions import SubscriptionsOperations


class ManagementGroupsClient(BaseClient):
    """Entry point for management group, subscription and hierarchy operations.

    Example:
        async with ManagementGroupsClient(credential) as client:
            async for group in client.management_groups.list().items():
                print(group.name)
    """

    DEFAULT_ENDPOINT = "https://management.azure.com"

    @property
    def management_groups(self) -> ManagementGroupsOperations:
        return ManagementGroupsOperations(self)

    @property
    def subscriptions(self) -> SubscriptionsOperations:
        return SubscriptionsOperations(self)

    @property
    def hierarchy_settings(self) -> HierarchySettingsOperations:
        return HierarchySettingsOperations(self)

    @property
    def operations(self) -> OperationsOperations:
        return OperationsOperations(self)

    @property
    def entities(self) -> EntitiesOperations:
        return EntitiesOperations(self)

    def check_name_availability(
        self, check_name_availability_request: CheckNameAvailabilityRequest
    ) -> CheckNameAvailability:
        return CheckNameAvailability(self, check_name_availability_request)

    def start_tenant_backfill(self) -> StartTenantBackfill:
        return StartTenantBackfill(self)

    def tenant_backfill_status(self) -> GetTenantBackfillStatus:
        return GetTenantBackfillStatus(self)
