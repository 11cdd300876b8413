"""Integration tests against the live management groups and file storage APIs.

These tests require real Azure credentials and are skipped in CI/CD unless
the AZREST_CLIENT_ID environment variable is set.
"""

import os

import pytest

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.getenv("AZREST_CLIENT_ID"),
        reason="Real Azure credentials not available",
    ),
]


async def test_list_management_groups_real() -> None:
    """List the caller's management groups and check every page decodes."""
    from azrest.config import load_config, management_groups_client_from_config

    config = load_config()
    async with management_groups_client_from_config(config) as client:
        groups = [group async for group in client.management_groups.list().items()]

    assert isinstance(groups, list)


@pytest.mark.skipif(not os.getenv("AZREST_FILE_ENDPOINT"), reason="No file endpoint configured")
async def test_list_shares_real() -> None:
    """List the shares of the configured storage account."""
    from azrest.config import file_storage_client_from_config, load_config

    config = load_config()
    async with file_storage_client_from_config(config) as client:
        shares = [share async for share in client.service.list_shares_segment().maxresults(10).items()]

    assert isinstance(shares, list)
