"""Provider-level operations: REST operation listing, name checks, tenant backfill."""

from __future__ import annotations

from typing import TYPE_CHECKING

from azrest.managementgroups._base import PROVIDER_PATH, ManagementPagedRequest, ManagementRequest
from azrest.managementgroups.models import (
    CheckNameAvailabilityRequest,
    CheckNameAvailabilityResult,
    OperationListResult,
    TenantBackfillStatusResult,
)

if TYPE_CHECKING:
    from azrest.core.client import BaseClient


class ListOperations(ManagementPagedRequest):
    """List all available REST API operations of the provider."""

    responses = {200: OperationListResult}

    def _path(self) -> str:
        return f"{PROVIDER_PATH}/operations"


class CheckNameAvailability(ManagementRequest):
    """Check whether a management group name is valid and available."""

    method = "POST"
    responses = {200: CheckNameAvailabilityResult}

    def __init__(
        self, client: BaseClient, check_name_availability_request: CheckNameAvailabilityRequest
    ) -> None:
        super().__init__(client)
        self.check_name_availability_request = check_name_availability_request

    def _path(self) -> str:
        return f"{PROVIDER_PATH}/checkNameAvailability"

    def _body(self) -> CheckNameAvailabilityRequest:
        return self.check_name_availability_request


class StartTenantBackfill(ManagementRequest):
    """Start backfilling subscriptions for the tenant."""

    method = "POST"
    responses = {200: TenantBackfillStatusResult}

    def _path(self) -> str:
        return f"{PROVIDER_PATH}/startTenantBackfill"


class GetTenantBackfillStatus(ManagementRequest):
    method = "POST"
    responses = {200: TenantBackfillStatusResult}

    def _path(self) -> str:
        return f"{PROVIDER_PATH}/tenantBackfillStatus"


class OperationsOperations:
    def __init__(self, client: BaseClient) -> None:
        self._client = client

    def list(self) -> ListOperations:
        return ListOperations(self._client)
