from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from comics_lite.domain.comic import CatalogItem, CreatorInfo

T = TypeVar("T")

# Turns a decoded JSON document into a domain value. Raises pydantic
# ValidationError on shape mismatch, or a CatalogError of its own.
ResourceDecoder = Callable[[Any], T]


class CatalogClient(ABC):
    """
    Port for the remote comics catalog.

    Contract:
        - One HTTP GET per call, no retries
        - Non-2xx -> ServerError(status)
        - Transport failure -> NetworkError
        - JSON shape mismatch -> DecodeError
        - Malformed URL -> InvalidURLError (before dispatch)
        - Single-entity fetches never return None: empty results -> ServerError(empty_result)
    """

    @abstractmethod
    async def fetch_page(self, offset: int, limit: int) -> list[CatalogItem]:
        """Fetch one catalog listing page, in server order."""
        ...

    @abstractmethod
    async def fetch_resource(self, resource_uri: str, decode_as: ResourceDecoder[T]) -> T:
        """Fetch a server-provided sub-resource URI and decode it with ``decode_as``."""
        ...

    @abstractmethod
    async def fetch_comic(self, comic_id: int) -> CatalogItem:
        """Fetch a single comic by id."""
        ...

    @abstractmethod
    async def fetch_creator(self, resource_uri: str) -> CreatorInfo:
        """Fetch a creator collection URI; the first creator is the one returned."""
        ...

    @abstractmethod
    async def fetch_variants(self, resource_uri: str) -> list[CatalogItem]:
        """Fetch a variant URI; returns every comic it lists."""
        ...
