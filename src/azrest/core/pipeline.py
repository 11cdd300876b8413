"""Factory for the shared azure-core transport pipeline."""

from __future__ import annotations

from typing import Any

from azure.core.pipeline import AsyncPipeline
from azure.core.pipeline.policies import (
    AsyncRetryPolicy,
    HeadersPolicy,
    HttpLoggingPolicy,
    NetworkTraceLoggingPolicy,
    UserAgentPolicy,
)
from azure.core.pipeline.transport import AioHttpTransport

from azrest import __version__

# Retry defaults
DEFAULT_RETRY_TOTAL = 3

SDK_MONIKER = f"azrest/{__version__}"


def build_pipeline(
    transport: Any = None,
    retry_total: int = DEFAULT_RETRY_TOTAL,
    logging_enable: bool = False,
) -> AsyncPipeline:
    """Assemble the async pipeline every operation is sent through.

    Retries, connection pooling and TLS all live here (azure-core and aiohttp);
    the generated operations never retry on their own.

    Args:
        transport: Async transport to use; defaults to an aiohttp transport.
        retry_total: Total retry attempts for transient failures.
        logging_enable: Log full request/response wire traces at DEBUG.

    Returns:
        Configured AsyncPipeline.
    """
    policies = [
        HeadersPolicy(),
        UserAgentPolicy(sdk_moniker=SDK_MONIKER),
        AsyncRetryPolicy(retry_total=retry_total),
        NetworkTraceLoggingPolicy(logging_enable=logging_enable),
        HttpLoggingPolicy(),
    ]
    return AsyncPipeline(transport or AioHttpTransport(), policies=policies)
