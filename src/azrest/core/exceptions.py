"""Error taxonomy shared by every generated operation.

All errors derive from the azure-core exception family so application code can
classify failures the same way it does for any other Azure SDK:

- ``InvalidUrlError``: the endpoint or a path parameter does not form a valid URL.
- ``AuthenticationError``: the credential could not produce a bearer token.
- ``ServiceRequestError`` / ``ServiceResponseError``: transport failures raised
  by the pipeline, re-exported untouched.
- ``HttpStatusError``: the service answered with an unexpected status code.
- ``DeserializationError``: the body does not match the expected schema.
- ``HeaderError``: a typed header accessor found the header missing or malformed.
"""

from __future__ import annotations

from typing import Any

from azure.core.exceptions import (
    AzureError,
    ClientAuthenticationError,
    DecodeError,
    HttpResponseError,
    ServiceRequestError,
    ServiceResponseError,
)

__all__ = [
    "AuthenticationError",
    "AzureError",
    "DeserializationError",
    "HeaderError",
    "HttpStatusError",
    "InvalidUrlError",
    "ServiceRequestError",
    "ServiceResponseError",
]


class InvalidUrlError(AzureError):
    """Raised when an endpoint, path parameter or continuation link is not a valid URL."""


class AuthenticationError(ClientAuthenticationError):
    """Raised when the credential fails to issue a bearer token."""


class HttpStatusError(HttpResponseError):
    """Raised when an operation receives a status code it does not accept.

    The raw transport response stays reachable through ``response`` so callers
    can inspect the failure themselves; ``model`` holds the decoded error body
    when the operation declares an error model and the body fits it.
    """

    def __init__(
        self,
        response: Any,
        expected: tuple[int, ...] = (),
        error_code: str | None = None,
        message: str | None = None,
        model: Any | None = None,
    ) -> None:
        status = getattr(response, "status_code", None)
        detail = message or f"Operation returned unexpected status {status}"
        if expected:
            detail = f"{detail} (expected {', '.join(str(code) for code in expected)})"
        super().__init__(message=detail, response=response, model=model)
        self.expected = expected
        self.error_code = error_code


class DeserializationError(DecodeError):
    """Raised when a response body cannot be decoded into the declared model."""


class HeaderError(AzureError):
    """Raised when a typed header accessor cannot produce a value."""

    def __init__(self, header_name: str, reason: str) -> None:
        super().__init__(f"Header {header_name!r} {reason}")
        self.header_name = header_name
        self.reason = reason
