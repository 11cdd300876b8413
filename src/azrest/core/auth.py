"""Async token credential backed by MSAL's client-credentials flow."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import msal
from azure.core.credentials import AccessToken

from azrest.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

AUTHORITY_BASE_URL = "https://login.microsoftonline.com"
DEFAULT_SCOPE_SUFFIX = ".default"


def _to_msal_scopes(scopes: tuple[str, ...]) -> list[str]:
    """Split space-joined scope strings and map resource URIs to ``/.default`` scopes."""
    result: list[str] = []
    for scope in scopes:
        for part in scope.split():
            result.append(f"{part}{DEFAULT_SCOPE_SUFFIX}" if part.endswith("/") else part)
    return result


class MsalClientSecretCredential:
    """``AsyncTokenCredential`` for a confidential client (client id + secret)."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        tenant_id: str,
        authority_host: str = AUTHORITY_BASE_URL,
    ) -> None:
        """Initialise the MSAL confidential client application.

        Args:
            client_id: Azure AD application (client) ID.
            client_secret: Azure AD application client secret.
            tenant_id: Azure AD tenant ID.
            authority_host: Login authority host.
        """
        authority = f"{authority_host.rstrip('/')}/{tenant_id}"
        self._app = msal.ConfidentialClientApplication(
            client_id=client_id,
            client_credential=client_secret,
            authority=authority,
        )

    async def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        """Acquire a bearer token using the client credentials flow.

        MSAL is synchronous, so the call runs on a worker thread.

        Returns:
            AccessToken with the token string and its expiry (epoch seconds).

        Raises:
            AuthenticationError: If MSAL cannot acquire a token.
        """
        msal_scopes = _to_msal_scopes(scopes)
        result: dict[str, Any] = (
            await asyncio.to_thread(self._app.acquire_token_for_client, scopes=msal_scopes) or {}
        )
        if "access_token" not in result:
            error = result.get("error", "unknown_error")
            description = result.get("error_description", "No description provided")
            logger.error("[get_token] MSAL token acquisition failed; error:%s", error)
            raise AuthenticationError(f"Token acquisition failed: {error}: {description}")
        expires_on = int(time.time()) + int(result.get("expires_in", 0))
        return AccessToken(str(result["access_token"]), expires_on)

    async def close(self) -> None:
        """Nothing to release; present for ``AsyncTokenCredential`` compatibility."""

    async def __aenter__(self) -> MsalClientSecretCredential:
        return self

    async def __aexit__(self, *exc_details: Any) -> None:
        await self.close()
