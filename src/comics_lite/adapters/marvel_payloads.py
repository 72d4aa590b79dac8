"""Wire models for Marvel API responses and their decoders.

Every endpoint wraps its entities as ``{"data": {"results": [...]}}``.
Pydantic models describe that shape; the decoders validate a JSON
document and map it to domain entities. A shape mismatch surfaces as
``pydantic.ValidationError``, which the catalog client turns into
``DecodeError``.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from comics_lite.domain.comic import CatalogItem, CreatorInfo, Thumbnail
from comics_lite.domain.errors import ServerError

EntityT = TypeVar("EntityT")


class ThumbnailPayload(BaseModel):
    path: str
    extension: str

    def to_domain(self) -> Thumbnail:
        return Thumbnail(base_path=self.path, extension=self.extension)


class ResourceSummaryPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resource_uri: str | None = Field(default=None, alias="resourceURI")
    name: str | None = None


class CreatorListPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    available: int | None = None
    collection_uri: str | None = Field(default=None, alias="collectionURI")
    items: list[ResourceSummaryPayload] | None = None


class ComicPayload(BaseModel):
    id: int
    title: str
    description: str | None = None
    thumbnail: ThumbnailPayload
    variants: list[ResourceSummaryPayload] | None = None
    creators: CreatorListPayload | None = None

    def to_domain(self) -> CatalogItem:
        variants = self.variants or []
        return CatalogItem(
            id=self.id,
            title=self.title,
            description=self.description or "",
            thumbnail=self.thumbnail.to_domain(),
            related_resource_uris=tuple(v.resource_uri for v in variants if v.resource_uri),
            creators_collection_uri=(self.creators.collection_uri or "") if self.creators else "",
        )


class CreatorPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    full_name: str = Field(alias="fullName")
    thumbnail: ThumbnailPayload

    def to_domain(self) -> CreatorInfo:
        return CreatorInfo(
            id=self.id,
            full_name=self.full_name,
            thumbnail=self.thumbnail.to_domain(),
        )


class DataContainer(BaseModel, Generic[EntityT]):
    results: list[EntityT]


class Envelope(BaseModel, Generic[EntityT]):
    data: DataContainer[EntityT]


# ==============================================================================
# Decoders
# ==============================================================================


def decode_listing(document: Any) -> list[CatalogItem]:
    """Listing page or variant collection: every result, in server order."""
    envelope = Envelope[ComicPayload].model_validate(document)
    return [comic.to_domain() for comic in envelope.data.results]


def decode_single_comic(document: Any) -> CatalogItem:
    """Single-entity comic endpoint: first result.

    Raises:
        ServerError: If the results array is empty
    """
    envelope = Envelope[ComicPayload].model_validate(document)
    if not envelope.data.results:
        raise ServerError.empty_result_error(entity="comic")
    return envelope.data.results[0].to_domain()


def decode_single_creator(document: Any) -> CreatorInfo:
    """Single-entity creator endpoint: first result.

    Raises:
        ServerError: If the results array is empty
    """
    envelope = Envelope[CreatorPayload].model_validate(document)
    if not envelope.data.results:
        raise ServerError.empty_result_error(entity="creator")
    return envelope.data.results[0].to_domain()
