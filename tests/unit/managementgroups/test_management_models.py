"""Unit tests for managementgroups/models.py: JSON shapes and enum handling."""

import json

import pytest

from azrest.core.exceptions import DeserializationError
from azrest.core.serialization import from_json, to_json
from azrest.managementgroups.models import (
    CheckNameAvailabilityResult,
    EntityHierarchyItem,
    EntityHierarchyItemProperties,
    HierarchySettings,
    HierarchySettingsProperties,
    ManagementGroupChildInfo,
    ManagementGroupChildType,
    Permissions,
    TenantBackfillStatus,
    TenantBackfillStatusResult,
)


class TestEnums:
    @pytest.mark.parametrize(
        ("member", "wire_value"),
        [
            (Permissions.NO_ACCESS, "noaccess"),
            (Permissions.VIEW, "view"),
            (ManagementGroupChildType.SUBSCRIPTION, "/subscriptions"),
            (TenantBackfillStatus.NOT_STARTED_BUT_GROUPS_EXIST, "NotStartedButGroupsExist"),
        ],
    )
    def test_wire_values(self, member: object, wire_value: str) -> None:
        assert member.value == wire_value  # type: ignore[attr-defined]

    def test_unknown_backfill_status_rejected(self) -> None:
        with pytest.raises(DeserializationError):
            from_json(TenantBackfillStatusResult, b'{"status": "Paused"}')

    def test_unknown_name_reason_rejected(self) -> None:
        with pytest.raises(DeserializationError):
            from_json(CheckNameAvailabilityResult, b'{"reason": "TooLong"}')


class TestRecursiveModels:
    def test_child_tree_round_trip(self) -> None:
        tree = ManagementGroupChildInfo(
            type=ManagementGroupChildType.MANAGEMENT_GROUP,
            name="root",
            children=[
                ManagementGroupChildInfo(type=ManagementGroupChildType.SUBSCRIPTION, name="sub-1"),
                ManagementGroupChildInfo(
                    name="leaf",
                    children=[ManagementGroupChildInfo(name="leaf-sub")],
                ),
            ],
        )
        assert from_json(ManagementGroupChildInfo, to_json(tree)) == tree

    def test_hierarchy_item_round_trip(self) -> None:
        item = EntityHierarchyItem(
            name="root",
            properties=EntityHierarchyItemProperties(
                permissions=Permissions.EDIT,
                children=[EntityHierarchyItem(name="child")],
            ),
        )
        assert from_json(EntityHierarchyItem, to_json(item)) == item


class TestSettings:
    def test_false_flag_is_kept(self) -> None:
        settings = HierarchySettings(
            properties=HierarchySettingsProperties(require_authorization_for_group_creation=False)
        )
        body = json.loads(to_json(settings))
        assert body == {"properties": {"requireAuthorizationForGroupCreation": False}}
        assert from_json(HierarchySettings, to_json(settings)) == settings
