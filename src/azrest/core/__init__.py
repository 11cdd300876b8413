"""Generic request/response/pagination pattern shared by every generated operation."""

from azrest.core.auth import MsalClientSecretCredential
from azrest.core.client import BaseClient
from azrest.core.exceptions import (
    AuthenticationError,
    DeserializationError,
    HeaderError,
    HttpStatusError,
    InvalidUrlError,
    ServiceRequestError,
    ServiceResponseError,
)
from azrest.core.paging import Pageable
from azrest.core.request import PagedRequestBuilder, RequestBuilder
from azrest.core.response import Response

__all__ = [
    "AuthenticationError",
    "BaseClient",
    "DeserializationError",
    "HeaderError",
    "HttpStatusError",
    "InvalidUrlError",
    "MsalClientSecretCredential",
    "PagedRequestBuilder",
    "Pageable",
    "RequestBuilder",
    "Response",
    "ServiceRequestError",
    "ServiceResponseError",
]
