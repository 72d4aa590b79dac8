"""httpx implementation of CatalogClient."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
import pydantic

from comics_lite.adapters.marvel_payloads import (
    decode_listing,
    decode_single_comic,
    decode_single_creator,
)
from comics_lite.adapters.signed_request_builder import SignedRequestBuilder
from comics_lite.domain.comic import CatalogItem, CreatorInfo
from comics_lite.domain.errors import DecodeError, NetworkError, ServerError
from comics_lite.ports.catalog_client import CatalogClient, ResourceDecoder

logger = logging.getLogger(__name__)

T = TypeVar("T")

MARVEL_COMICS_URL = "https://gateway.marvel.com/v1/public/comics"


class HttpxCatalogClient(CatalogClient):
    """
    Catalog client over an injected ``httpx.AsyncClient``.

    - Issues exactly one GET per call (no retries)
    - Maps transport, status and decoding failures to CatalogError subclasses
    - Never owns the AsyncClient: the caller opens and closes it
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        request_builder: SignedRequestBuilder,
        base_url: str = MARVEL_COMICS_URL,
    ) -> None:
        self._http = http_client
        self._requests = request_builder
        self._base_url = base_url

    async def fetch_page(self, offset: int, limit: int) -> list[CatalogItem]:
        url = self._requests.build_list_url(self._base_url, offset=offset, limit=limit)
        document = await self._get_json(url)
        return self._decode(url, document, decode_listing)

    async def fetch_resource(self, resource_uri: str, decode_as: ResourceDecoder[T]) -> T:
        url = self._requests.build_resource_url(resource_uri)
        document = await self._get_json(url)
        return self._decode(url, document, decode_as)

    async def fetch_comic(self, comic_id: int) -> CatalogItem:
        return await self.fetch_resource(
            f"{self._base_url.rstrip('/')}/{comic_id}", decode_single_comic
        )

    async def fetch_creator(self, resource_uri: str) -> CreatorInfo:
        return await self.fetch_resource(resource_uri, decode_single_creator)

    async def fetch_variants(self, resource_uri: str) -> list[CatalogItem]:
        return await self.fetch_resource(resource_uri, decode_listing)

    async def _get_json(self, url: httpx.URL) -> Any:
        try:
            response = await self._http.get(url)
        except httpx.TransportError as exc:
            logger.warning(
                "Catalog request failed",
                extra={"url": _redacted(url), "error_type": type(exc).__name__},
            )
            raise NetworkError(
                f"Could not reach the catalog: {exc}", url=_redacted(url)
            ) from exc

        if not response.is_success:
            raise ServerError(response.status_code, url=_redacted(url))

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError("Catalog response is not valid JSON", url=_redacted(url)) from exc

    @staticmethod
    def _decode(url: httpx.URL, document: Any, decode_as: ResourceDecoder[T]) -> T:
        try:
            return decode_as(document)
        except pydantic.ValidationError as exc:
            raise DecodeError(
                "Catalog response does not match the expected shape",
                url=_redacted(url),
                errors=exc.error_count(),
            ) from exc


def _redacted(url: httpx.URL) -> str:
    # Auth parameters stay out of logs and error payloads
    return str(url.copy_with(query=None))
