"""Unit tests for core/paging.py: continuation-driven page iteration."""

from types import SimpleNamespace
from typing import Any

import pytest

from azrest.core.paging import Pageable

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _page(items: list[str], next_link: str | None) -> SimpleNamespace:
    return SimpleNamespace(value=items, next_link=next_link)


def _make_pageable(pages: dict[str | None, Any], calls: list[str | None]) -> Pageable:
    """Pageable over a token -> page table, recording the tokens it is asked for."""

    async def get_page(continuation: str | None) -> Any:
        calls.append(continuation)
        page = pages[continuation]
        if isinstance(page, Exception):
            raise page
        return page

    return Pageable(get_page, lambda page: page.next_link, lambda page: page.value)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestPageable:
    async def test_terminates_when_continuation_is_absent(self) -> None:
        calls: list[str | None] = []
        pageable = _make_pageable(
            {None: _page(["a"], "t1"), "t1": _page(["b"], "t2"), "t2": _page(["c"], None)},
            calls,
        )
        pages = [page async for page in pageable]
        assert [page.value for page in pages] == [["a"], ["b"], ["c"]]
        assert calls == [None, "t1", "t2"]
        assert pageable.pages_fetched == 3

    async def test_empty_continuation_ends_sequence(self) -> None:
        calls: list[str | None] = []
        pageable = _make_pageable({None: _page(["a"], "")}, calls)
        pages = [page async for page in pageable]
        assert len(pages) == 1
        assert calls == [None]

    async def test_items_flattens_pages_in_order(self) -> None:
        calls: list[str | None] = []
        pageable = _make_pageable({None: _page(["a", "b"], "t1"), "t1": _page(["c"], None)}, calls)
        assert [item async for item in pageable.items()] == ["a", "b", "c"]

    async def test_failed_fetch_ends_sequence_after_earlier_pages(self) -> None:
        calls: list[str | None] = []
        pageable = _make_pageable({None: _page(["a"], "t1"), "t1": RuntimeError("boom")}, calls)
        seen: list[Any] = []
        with pytest.raises(RuntimeError, match="boom"):
            async for page in pageable:
                seen.append(page)
        assert [page.value for page in seen] == [["a"]]
        assert pageable.pages_fetched == 1

        assert [page async for page in pageable] == []
        assert calls == [None, "t1"]

    async def test_failed_first_fetch_is_not_retried(self) -> None:
        calls: list[str | None] = []
        pageable = _make_pageable({None: RuntimeError("boom")}, calls)
        with pytest.raises(RuntimeError, match="boom"):
            await pageable.__anext__()
        with pytest.raises(StopAsyncIteration):
            await pageable.__anext__()
        assert [item async for item in pageable.items()] == []
        assert calls == [None]
        assert pageable.pages_fetched == 0

    async def test_not_restartable_once_consumed(self) -> None:
        calls: list[str | None] = []
        pageable = _make_pageable({None: _page(["a"], None)}, calls)
        first = [page async for page in pageable]
        second = [page async for page in pageable]
        assert len(first) == 1
        assert second == []
        assert calls == [None]

    async def test_items_without_extractor_raises(self) -> None:
        async def get_page(continuation: str | None) -> Any:
            return _page([], None)

        pageable = Pageable(get_page, lambda page: page.next_link)
        with pytest.raises(TypeError, match="no item extractor"):
            async for _ in pageable.items():
                pass
