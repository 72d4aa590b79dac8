"""Load comic detail use case: concurrent fan-out over related resources."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Any, AsyncIterator

from comics_lite.domain.comic import CatalogItem
from comics_lite.domain.detail import DetailBundle, FetchState, SubFetch, SubFetchKind
from comics_lite.domain.errors import CatalogError
from comics_lite.ports.catalog_client import CatalogClient

logger = logging.getLogger(__name__)

CREATOR_ERROR_MESSAGE = "Error fetching creator details"


class LoadComicDetail:
    """
    Use case for building the detail view of one comic.

    Responsibilities:
    - Launch the creator fetch and one fetch per variant URI, all at once
    - Emit a snapshot immediately, then one per completed sub-fetch
    - Isolate sub-fetch failures: a failed creator leaves ``creator`` empty,
      a failed variant is left out of ``variants``; neither aborts the rest
    - Mark the last snapshot ``settled`` once every sub-fetch has finished

    Each ``load()`` call owns its own tasks. Closing the iterator early
    cancels whatever is still running for that call only.
    """

    def __init__(self, catalog_client: CatalogClient) -> None:
        self._client = catalog_client

    async def load(self, item: CatalogItem) -> AsyncIterator[DetailBundle]:
        """
        Stream DetailBundle snapshots for ``item``.

        A comic with no creator URI and no variant URIs yields a single,
        already settled snapshot.

        Yields:
            DetailBundle snapshots, the last one with ``settled=True``
        """
        launches = self._plan(item)
        bundle = DetailBundle(
            primary=item,
            fetch_states=MappingProxyType({uri: SubFetch(kind) for uri, kind in launches.items()}),
            settled=not launches,
        )
        yield bundle

        if not launches:
            return

        tasks = {
            asyncio.create_task(self._fetch(uri, kind)): (uri, kind)
            for uri, kind in launches.items()
        }
        pending: set[asyncio.Task[Any]] = set(tasks)
        try:
            while pending:
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                # Every outcome in the batch is retrieved before any of them is raised
                unexpected = [
                    exc
                    for exc in (task.exception() for task in done)
                    if exc is not None and not isinstance(exc, CatalogError)
                ]
                if unexpected:
                    raise unexpected[0]
                for task in done:
                    uri, kind = tasks[task]
                    bundle = self._apply(bundle, uri, kind, task)
                bundle = replace(bundle, settled=not pending)
                yield bundle
        finally:
            if pending:
                logger.debug(
                    "Abandoning detail sub-fetches",
                    extra={"comic_id": item.id, "pending": len(pending)},
                )
            for task in pending:
                if not task.done():
                    task.cancel()
                elif not task.cancelled():
                    task.exception()

    async def settle(self, item: CatalogItem) -> DetailBundle:
        """Run the fan-out to completion and return the settled snapshot."""
        bundle = DetailBundle(primary=item)
        async for bundle in self.load(item):
            pass
        return bundle

    @staticmethod
    def _plan(item: CatalogItem) -> dict[str, SubFetchKind]:
        launches: dict[str, SubFetchKind] = {}
        if item.creators_collection_uri:
            launches[item.creators_collection_uri] = SubFetchKind.CREATOR
        for uri in item.related_resource_uris:
            launches.setdefault(uri, SubFetchKind.VARIANT)
        return launches

    async def _fetch(self, uri: str, kind: SubFetchKind) -> Any:
        if kind is SubFetchKind.CREATOR:
            return await self._client.fetch_creator(uri)
        return await self._client.fetch_variants(uri)

    def _apply(
        self,
        bundle: DetailBundle,
        uri: str,
        kind: SubFetchKind,
        task: asyncio.Task[Any],
    ) -> DetailBundle:
        exc = task.exception()
        if isinstance(exc, CatalogError):
            logger.warning(
                "Detail sub-fetch failed",
                extra={
                    "comic_id": bundle.primary.id,
                    "kind": kind.value,
                    "uri": uri,
                    "error_code": exc.error_code,
                    "error_message": exc.message,
                },
            )
            bundle = bundle.with_fetch_state(uri, SubFetch(kind, FetchState.FAILED, exc.message))
            if kind is SubFetchKind.CREATOR:
                bundle = replace(bundle, creator_error=CREATOR_ERROR_MESSAGE)
            return bundle

        bundle = bundle.with_fetch_state(uri, SubFetch(kind, FetchState.LOADED))
        if kind is SubFetchKind.CREATOR:
            return replace(bundle, creator=task.result())
        return replace(bundle, variants=bundle.variants + tuple(task.result()))
