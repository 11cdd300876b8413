"""Immutable connection context shared by every request builder."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, urlencode, urljoin, urlsplit

from azure.core.exceptions import AzureError

from azrest.core.exceptions import AuthenticationError, InvalidUrlError
from azrest.core.pipeline import DEFAULT_RETRY_TOTAL, build_pipeline

if TYPE_CHECKING:
    from azure.core.credentials_async import AsyncTokenCredential
    from azure.core.rest import HttpRequest

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"

# Characters left unescaped in query values ($-prefixed OData names, comma lists, timestamps)
_QUERY_SAFE = "$,:"


def encode_query(pairs: Iterable[tuple[str, str]]) -> str:
    """Encode ordered query pairs into a query string."""
    return urlencode(list(pairs), quote_via=quote, safe=_QUERY_SAFE)


def _check_url(url: str) -> str:
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidUrlError(f"Invalid URL: {url!r}")
    return url


class BaseClient:
    """Holds the endpoint, credential, scopes and pipeline for one service.

    The context is read-only after construction and safe to share between
    concurrently running operations.
    """

    DEFAULT_ENDPOINT = ""

    def __init__(
        self,
        credential: AsyncTokenCredential,
        endpoint: str | None = None,
        scopes: Sequence[str] | None = None,
        *,
        pipeline: Any = None,
        transport: Any = None,
        retry_total: int = DEFAULT_RETRY_TOTAL,
        logging_enable: bool = False,
    ) -> None:
        """Initialise the client context.

        Args:
            credential: Async token credential used for every request.
            endpoint: Service endpoint; defaults to ``DEFAULT_ENDPOINT``.
            scopes: Authorization scopes; defaults to ``["<endpoint>/"]``.
            pipeline: Pre-built pipeline (mainly for tests); built from
                ``transport``, ``retry_total`` and ``logging_enable`` otherwise.
            transport: Async transport for the default pipeline.
            retry_total: Retry attempts for the default pipeline.
            logging_enable: Enable wire tracing in the default pipeline.

        Raises:
            ValueError: If no endpoint is given and the client has no default.
        """
        endpoint = endpoint or self.DEFAULT_ENDPOINT
        if not endpoint:
            raise ValueError("endpoint is required")
        self._endpoint = endpoint.rstrip("/")
        self._credential = credential
        self._scopes = tuple(scopes) if scopes else (f"{self._endpoint}/",)
        self._pipeline = pipeline or build_pipeline(
            transport=transport,
            retry_total=retry_total,
            logging_enable=logging_enable,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def scopes(self) -> tuple[str, ...]:
        return self._scopes

    @property
    def credential(self) -> AsyncTokenCredential:
        return self._credential

    def url(self, path: str, query: Iterable[tuple[str, str]] = ()) -> str:
        """Join the endpoint with a path and an ordered query.

        Raises:
            InvalidUrlError: If the endpoint does not form a valid URL.
        """
        url = _check_url(f"{self._endpoint}{path}")
        encoded = encode_query(query)
        return f"{url}?{encoded}" if encoded else url

    def continuation_url(self, token: str) -> str:
        """Resolve a continuation token against the endpoint root.

        Relative tokens are joined onto the endpoint's scheme and host; absolute
        tokens are used as-is.

        Raises:
            InvalidUrlError: If the token does not resolve to a valid URL.
        """
        parts = urlsplit(_check_url(self._endpoint))
        return _check_url(urljoin(f"{parts.scheme}://{parts.netloc}/", token))

    async def authorize(self, request: HttpRequest) -> None:
        """Acquire a bearer token for the joined scopes and attach it to the request.

        Raises:
            AuthenticationError: If the credential cannot issue a token.
        """
        scope = " ".join(self._scopes)
        try:
            token = await self._credential.get_token(scope)
        except AzureError:
            raise
        except Exception as exc:
            logger.error("[authorize] token acquisition failed; scope:%s", scope)
            raise AuthenticationError(f"Token acquisition failed for scope {scope!r}: {exc}") from exc
        request.headers[AUTHORIZATION_HEADER] = f"Bearer {token.token}"

    async def send(self, request: HttpRequest) -> Any:
        """Run a request through the shared pipeline and return the raw response.

        Transport failures (``ServiceRequestError``/``ServiceResponseError``)
        propagate from the pipeline unchanged.
        """
        logger.debug(
            "[send] dispatching request; method:%s;url:%s",
            request.method,
            request.url.split("?", 1)[0],
        )
        pipeline_response = await self._pipeline.run(request, stream=False)
        return pipeline_response.http_response

    async def close(self) -> None:
        await self._pipeline.__aexit__()

    async def __aenter__(self) -> BaseClient:
        await self._pipeline.__aenter__()
        return self

    async def __aexit__(self, *exc_details: Any) -> None:
        await self._pipeline.__aexit__(*exc_details)
