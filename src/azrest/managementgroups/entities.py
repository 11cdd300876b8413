"""Entity (management group and subscription) search for the caller."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from azrest.managementgroups._base import (
    CACHE_CONTROL_HEADER,
    PROVIDER_PATH,
    CacheControlOption,
    ManagementPagedRequest,
)
from azrest.managementgroups.models import EntityListResult

if TYPE_CHECKING:
    from azrest.core.client import BaseClient

CONTENT_LENGTH_HEADER = "Content-Length"


class ListEntities(CacheControlOption, ManagementPagedRequest):
    """List all entities the caller can see.

    The request is a bodiless POST, so an explicit ``Content-Length: 0`` is
    sent.
    """

    method = "POST"
    query_names = (
        "$skiptoken",
        "$skip",
        "$top",
        "$select",
        "$search",
        "$filter",
        "$view",
        "groupName",
    )
    header_names = (CACHE_CONTROL_HEADER,)
    responses = {200: EntityListResult}

    def _path(self) -> str:
        return f"{PROVIDER_PATH}/getEntities"

    def _fixed_headers(self) -> dict[str, str]:
        return {CONTENT_LENGTH_HEADER: "0"}

    def skiptoken(self, skiptoken: str) -> Self:
        return self._set("$skiptoken", skiptoken)

    def skip(self, skip: int) -> Self:
        """Number of entities to skip when retrieving results."""
        return self._set("$skip", skip)

    def top(self, top: int) -> Self:
        return self._set("$top", top)

    def select(self, select: str) -> Self:
        """Comma-separated subset of fields to return, e.g. ``Name,DisplayName``."""
        return self._set("$select", select)

    def search(self, search: str) -> Self:
        """``AllowedParents``, ``AllowedChildren``, ``ParentAndFirstLevelChildren``,
        ``ParentOnly`` or ``ChildrenOnly``."""
        return self._set("$search", search)

    def filter(self, filter: str) -> Self:
        return self._set("$filter", filter)

    def view(self, view: str) -> Self:
        """``FullHierarchy``, ``GroupsOnly``, ``SubscriptionsOnly`` or ``Audit``."""
        return self._set("$view", view)

    def group_name(self, group_name: str) -> Self:
        """Management group the search is anchored on."""
        return self._set("groupName", group_name)


class EntitiesOperations:
    def __init__(self, client: BaseClient) -> None:
        self._client = client

    def list(self) -> ListEntities:
        return ListEntities(self._client)
