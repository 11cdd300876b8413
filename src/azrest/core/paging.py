"""Continuation-driven lazy sequence of typed pages."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

from azure.core.async_paging import AsyncPageIterator

logger = logging.getLogger(__name__)


class Pageable(AsyncPageIterator):
    """Forward-only async iterator over the pages of a list operation.

    The first fetch is issued without a continuation token. Each decoded page
    yields the token for the next fetch; an absent (or empty) token ends the
    sequence. A failed fetch raises out of the iteration and ends it, while
    pages already yielded stay valid. Once exhausted the sequence cannot be
    restarted; call the list operation again for a fresh one.
    """

    def __init__(
        self,
        get_page: Callable[[str | None], Awaitable[Any]],
        continuation_of: Callable[[Any], str | None],
        items_of: Callable[[Any], list[Any]] | None = None,
    ) -> None:
        """Initialise the pageable.

        Args:
            get_page: Fetches and decodes one page; receives ``None`` for the
                first page and the previous page's token afterwards.
            continuation_of: Extracts the continuation token from a page.
            items_of: Extracts the items of a page, used by ``items()``.
        """
        self._get_page = get_page
        self._continuation_of = continuation_of
        self._items_of = items_of
        self.pages_fetched = 0
        self._failed = False
        super().__init__(get_next=self._fetch, extract_data=self._extract)

    async def __anext__(self) -> Any:
        if self._failed:
            raise StopAsyncIteration("Pageable ended by a failed fetch")
        return await super().__anext__()

    async def _fetch(self, continuation: str | None) -> Any:
        logger.debug(
            "[pageable] fetching page; page:%d;has_continuation:%s",
            self.pages_fetched + 1,
            continuation is not None,
        )
        try:
            page = await self._get_page(continuation)
        except Exception:
            self._failed = True
            logger.warning("[pageable] page fetch failed; page:%d", self.pages_fetched + 1)
            raise
        self.pages_fetched += 1
        return page

    async def _extract(self, page: Any) -> tuple[str | None, Any]:
        return self._continuation_of(page) or None, page

    async def items(self) -> AsyncIterator[Any]:
        """Iterate the items of every remaining page, in page order."""
        if self._items_of is None:
            raise TypeError("this pageable has no item extractor")
        async for page in self:
            for item in self._items_of(page):
                yield item
