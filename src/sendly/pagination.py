"""Lazy offset-based auto-pagination."""

from __future__ import annotations

from typing import AsyncIterator, Awaitable, Callable, Generic, List, TypeVar

from .models import OffsetListResult

T = TypeVar("T")

PageFetcher = Callable[[int, int], Awaitable[OffsetListResult]]


class AsyncPager(Generic[T]):
    """Iterates every item across pages, holding only the current page.

    Each ``async for`` starts again from ``start_offset``.
    """

    def __init__(self, fetch_page: PageFetcher, *, page_size: int, start_offset: int = 0) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._fetch_page = fetch_page
        self._page_size = page_size
        self._start_offset = start_offset

    def __aiter__(self) -> AsyncIterator[T]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[T]:
        offset = self._start_offset
        while True:
            page = await self._fetch_page(self._page_size, offset)
            for item in page:
                yield item
            if not page.has_more or page.is_empty:
                break
            offset += self._page_size

    async def to_list(self) -> List[T]:
        return [item async for item in self]


__all__ = ["AsyncPager", "PageFetcher"]
