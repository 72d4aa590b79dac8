"""Paginated comic collection: incremental, de-duplicated catalog browsing."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from comics_lite.domain.comic import DEFAULT_PAGE_SIZE, CatalogItem, Paging
from comics_lite.domain.errors import CatalogError
from comics_lite.ports.catalog_client import CatalogClient

logger = logging.getLogger(__name__)

Listener = Callable[["PaginatedComicCollection"], None]


class PaginatedComicCollection:
    """
    Growing, append-only list of catalog comics plus a filtered view.

    State machine: Idle -> Fetching -> Idle. At most one page fetch is in
    flight; ``fetch_next_page()`` while fetching is a no-op.

    - Items are de-duplicated by id, server order preserved
    - ``cursor_offset`` advances by the number of items the server returned,
      not by how many survived de-duplication
    - An empty page marks the end of the collection until ``reset()``
    - A failed page leaves items untouched and is kept in ``last_error``;
      calling ``fetch_next_page()`` again retries the same offset

    All methods must be called from the event loop that owns the collection.
    Results of a fetch started before ``reset()`` are discarded.
    """

    def __init__(self, catalog_client: CatalogClient, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        Paging(offset=0, limit=page_size).validate()

        self._client = catalog_client
        self._page_size = page_size
        self._items: list[CatalogItem] = []
        self._seen_ids: set[int] = set()
        self._filtered: list[CatalogItem] = []
        self._cursor_offset = 0
        self._query = ""
        self._is_fetching = False
        self._reached_end = False
        self._last_error: CatalogError | None = None
        self._generation = 0
        self._page_task: asyncio.Task[None] | None = None
        self._listeners: list[Listener] = []

    # ==========================================================================
    # Observable state
    # ==========================================================================

    @property
    def items(self) -> list[CatalogItem]:
        return list(self._items)

    @property
    def filtered(self) -> list[CatalogItem]:
        return list(self._filtered)

    @property
    def cursor_offset(self) -> int:
        return self._cursor_offset

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def query(self) -> str:
        return self._query

    @property
    def is_fetching(self) -> bool:
        return self._is_fetching

    @property
    def reached_end(self) -> bool:
        return self._reached_end

    @property
    def last_error(self) -> CatalogError | None:
        return self._last_error

    @property
    def error_message(self) -> str | None:
        return self._last_error.message if self._last_error else None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback invoked after every state change.

        Returns:
            A callable that unregisters the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ==========================================================================
    # Commands
    # ==========================================================================

    def fetch_next_page(self) -> asyncio.Task[None] | None:
        """
        Start loading the page at ``cursor_offset``.

        Returns:
            The task running the fetch, or None when a fetch is already in
            flight or the end of the collection was reached

        Raises:
            RuntimeError: If called outside a running event loop
        """
        if self._is_fetching or self._reached_end:
            return None

        loop = asyncio.get_running_loop()
        self._is_fetching = True
        # Task first: a set guard always has a task that will clear it
        self._page_task = loop.create_task(self._load_page(self._generation, self._cursor_offset))
        self._notify()
        return self._page_task

    def reset(self) -> None:
        """Drop every item and rewind the cursor. An in-flight fetch is abandoned."""
        self._generation += 1
        if self._page_task is not None and not self._page_task.done():
            self._page_task.cancel()
        self._page_task = None

        self._items.clear()
        self._seen_ids.clear()
        self._cursor_offset = 0
        self._is_fetching = False
        self._reached_end = False
        self._last_error = None
        self._refilter()
        self._notify()

    def refresh(self) -> asyncio.Task[None] | None:
        """Pull-to-refresh: reset and load the first page again."""
        self.reset()
        return self.fetch_next_page()

    def apply_query(self, query: str) -> None:
        """Recompute the filtered view from in-memory items. Never hits the network."""
        self._query = query
        self._refilter()
        self._notify()

    # ==========================================================================
    # Completion handlers
    # ==========================================================================

    async def _load_page(self, generation: int, offset: int) -> None:
        try:
            page = await self._client.fetch_page(offset=offset, limit=self._page_size)
        except CatalogError as exc:
            if generation != self._generation:
                logger.debug("Discarding stale page failure", extra={"offset": offset})
                return
            logger.warning(
                "Page fetch failed",
                extra={"offset": offset, "error_code": exc.error_code, "error_message": exc.message},
            )
            self._last_error = exc
            self._is_fetching = False
            self._notify()
            return
        except Exception:
            if generation == self._generation:
                self._is_fetching = False
                self._notify()
            raise

        if generation != self._generation:
            logger.debug("Discarding stale page", extra={"offset": offset, "count": len(page)})
            return

        self._append_page(page)

    def _append_page(self, page: list[CatalogItem]) -> None:
        self._is_fetching = False
        self._last_error = None

        if not page:
            self._reached_end = True
        else:
            self._cursor_offset += len(page)
            for item in page:
                if item.id in self._seen_ids:
                    continue
                self._seen_ids.add(item.id)
                self._items.append(item)
            self._refilter()

        self._notify()

    def _refilter(self) -> None:
        if not self._query:
            self._filtered = list(self._items)
            return

        needle = self._query.lower()
        self._filtered = [item for item in self._items if needle in item.title.lower()]

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
