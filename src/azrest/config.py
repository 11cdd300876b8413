"""Client configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from azrest.core.auth import AUTHORITY_BASE_URL, MsalClientSecretCredential
from azrest.core.pipeline import DEFAULT_RETRY_TOTAL
from azrest.filestorage.client import FileStorageClient
from azrest.managementgroups.client import ManagementGroupsClient

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ClientConfig:
    """Centralized client configuration.

    Required fields have no defaults and will cause a KeyError at startup
    if the corresponding environment variable is missing. Endpoints and
    pipeline settings have defaults but can be overridden via environment
    variables.
    """

    # Required: no defaults, fail at startup if missing
    client_id: str
    client_secret: str
    tenant_id: str

    # Endpoints and pipeline settings, overridable via env
    management_endpoint: str = ManagementGroupsClient.DEFAULT_ENDPOINT
    file_endpoint: str = ""
    authority_host: str = AUTHORITY_BASE_URL
    retry_total: int = DEFAULT_RETRY_TOTAL
    logging_enable: bool = False


def load_config() -> ClientConfig:
    """Construct a ClientConfig from environment variables.

    Required environment variables:
        AZREST_CLIENT_ID: Azure AD application (client) ID.
        AZREST_CLIENT_SECRET: Azure AD application client secret.
        AZREST_TENANT_ID: Azure AD tenant ID.

    Optional environment variables (with defaults):
        AZREST_MANAGEMENT_ENDPOINT: Management API endpoint (default: https://management.azure.com).
        AZREST_FILE_ENDPOINT: Storage account file endpoint (default: unset).
        AZREST_AUTHORITY_HOST: Token authority host (default: https://login.microsoftonline.com).
        AZREST_RETRY_TOTAL: Pipeline retry attempts (default: 3).
        AZREST_LOGGING_ENABLE: Log wire traces at DEBUG (default: false).

    Returns:
        Configured ClientConfig instance.
    """
    return ClientConfig(
        client_id=os.environ["AZREST_CLIENT_ID"],
        client_secret=os.environ["AZREST_CLIENT_SECRET"],
        tenant_id=os.environ["AZREST_TENANT_ID"],
        management_endpoint=os.environ.get(
            "AZREST_MANAGEMENT_ENDPOINT", ManagementGroupsClient.DEFAULT_ENDPOINT
        ),
        file_endpoint=os.environ.get("AZREST_FILE_ENDPOINT", ""),
        authority_host=os.environ.get("AZREST_AUTHORITY_HOST", AUTHORITY_BASE_URL),
        retry_total=int(os.environ.get("AZREST_RETRY_TOTAL", str(DEFAULT_RETRY_TOTAL))),
        logging_enable=os.environ.get("AZREST_LOGGING_ENABLE", "false").lower() in _TRUTHY,
    )


def credential_from_config(config: ClientConfig) -> MsalClientSecretCredential:
    """Construct a MsalClientSecretCredential from application configuration.

    Args:
        config: Client configuration instance.

    Returns:
        Configured MsalClientSecretCredential instance.
    """
    return MsalClientSecretCredential(
        client_id=config.client_id,
        client_secret=config.client_secret,
        tenant_id=config.tenant_id,
        authority_host=config.authority_host,
    )


def management_groups_client_from_config(config: ClientConfig) -> ManagementGroupsClient:
    """Construct a ManagementGroupsClient from application configuration."""
    return ManagementGroupsClient(
        credential_from_config(config),
        config.management_endpoint,
        retry_total=config.retry_total,
        logging_enable=config.logging_enable,
    )


def file_storage_client_from_config(config: ClientConfig) -> FileStorageClient:
    """Construct a FileStorageClient from application configuration.

    Raises:
        ValueError: If no file endpoint is configured.
    """
    if not config.file_endpoint:
        raise ValueError("AZREST_FILE_ENDPOINT is not configured")
    return FileStorageClient(
        credential_from_config(config),
        config.file_endpoint,
        retry_total=config.retry_total,
        logging_enable=config.logging_enable,
    )
