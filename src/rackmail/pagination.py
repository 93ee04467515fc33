"""Offset-cursor pagination over listing endpoints."""

from __future__ import annotations

import logging
from typing import AsyncIterator, Awaitable, Callable, Generic, TypeVar

from .models import PageEnvelope, PageOptions

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50

PageT = TypeVar("PageT", bound=PageEnvelope)


class Paginator(Generic[PageT]):
    """Fetches pages one at a time until the reported total is covered.

    ``fetch_page`` is called with the current options. After each page the
    items are appended to ``items`` and, unless ``total <= size + offset``
    for that page, ``options.offset`` advances to ``size + offset``.

    A fetch error stops the loop and propagates; whatever was collected
    before it remains in ``items``. There is no cap on the number of pages.
    """

    def __init__(
        self,
        fetch_page: Callable[[PageOptions], Awaitable[PageT]],
        options: PageOptions | None = None,
        default_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if options is None:
            options = PageOptions()
        if not options.size:
            options.size = default_size
        self.options = options
        self._fetch_page = fetch_page
        self.items: list = []
        self.pages_fetched = 0

    async def pages(self) -> AsyncIterator[PageT]:
        """Yield each page as it is fetched, accumulating its items."""
        while True:
            page = await self._fetch_page(self.options)
            self.pages_fetched += 1
            self.items.extend(page.items)
            logger.debug(
                "Fetched page %d: offset=%d size=%d total=%d",
                self.pages_fetched,
                page.offset,
                page.size,
                page.total,
            )
            yield page

            if page.is_last:
                break
            self.options.offset = page.size + page.offset

    async def collect(self) -> list:
        """Fetch every page and return all items in order."""
        async for _ in self.pages():
            pass
        return self.items
