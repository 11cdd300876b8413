"""Subscription membership of management groups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from azrest.core.request import path_segment
from azrest.managementgroups._base import (
    CACHE_CONTROL_HEADER,
    PROVIDER_PATH,
    CacheControlOption,
    ManagementPagedRequest,
    ManagementRequest,
)
from azrest.managementgroups.models import (
    ListSubscriptionUnderManagementGroup,
    SubscriptionUnderManagementGroup,
)

if TYPE_CHECKING:
    from azrest.core.client import BaseClient


class _SubscriptionRequest(CacheControlOption, ManagementRequest):
    header_names = (CACHE_CONTROL_HEADER,)

    def __init__(self, client: BaseClient, group_id: str, subscription_id: str) -> None:
        super().__init__(client)
        self.group_id = group_id
        self.subscription_id = subscription_id

    def _path(self) -> str:
        return (
            f"{PROVIDER_PATH}/managementGroups/{path_segment(self.group_id, 'group_id')}"
            f"/subscriptions/{path_segment(self.subscription_id, 'subscription_id')}"
        )


class GetSubscription(_SubscriptionRequest):
    """Get the details of a subscription under a management group."""

    responses = {200: SubscriptionUnderManagementGroup}


class CreateSubscription(_SubscriptionRequest):
    """Associate an existing subscription with a management group."""

    method = "PUT"
    responses = {200: SubscriptionUnderManagementGroup}


class DeleteSubscription(_SubscriptionRequest):
    """De-associate a subscription from a management group."""

    method = "DELETE"
    responses = {200: None, 204: None}


class GetSubscriptionsUnderManagementGroup(ManagementPagedRequest):
    """List the subscriptions directly under a management group."""

    query_names = ("$skiptoken",)
    responses = {200: ListSubscriptionUnderManagementGroup}

    def __init__(self, client: BaseClient, group_id: str) -> None:
        super().__init__(client)
        self.group_id = group_id

    def _path(self) -> str:
        return f"{PROVIDER_PATH}/managementGroups/{path_segment(self.group_id, 'group_id')}/subscriptions"

    def skiptoken(self, skiptoken: str) -> Self:
        return self._set("$skiptoken", skiptoken)


class SubscriptionsOperations:
    def __init__(self, client: BaseClient) -> None:
        self._client = client

    def get_subscription(self, group_id: str, subscription_id: str) -> GetSubscription:
        return GetSubscription(self._client, group_id, subscription_id)

    def create(self, group_id: str, subscription_id: str) -> CreateSubscription:
        return CreateSubscription(self._client, group_id, subscription_id)

    def delete(self, group_id: str, subscription_id: str) -> DeleteSubscription:
        return DeleteSubscription(self._client, group_id, subscription_id)

    def get_subscriptions_under_management_group(
        self, group_id: str
    ) -> GetSubscriptionsUnderManagementGroup:
        return GetSubscriptionsUnderManagementGroup(self._client, group_id)
