from __future__ import annotations

from comics_lite.domain.comic import CatalogItem, CreatorInfo
from comics_lite.domain.detail import DetailBundle
from comics_lite.domain.favorite import FavoriteComic
from comics_lite.entrypoints.http.dtos.comics import (
    ComicDetailResponseDTO,
    ComicResponseDTO,
    ComicsPageResponseDTO,
    CreatorResponseDTO,
    SubFetchResponseDTO,
)
from comics_lite.entrypoints.http.dtos.favorites import (
    FavoriteDTO,
    FavoritesResponseDTO,
    FavoriteUpsertDTO,
)


class ComicMapper:
    """Maps between REST DTOs and domain models for comics and favorites."""

    @staticmethod
    def to_comic_response(item: CatalogItem) -> ComicResponseDTO:
        """
        Converts a domain CatalogItem to its REST DTO.

        The thumbnail is exposed as its resolved https URL.
        """
        return ComicResponseDTO(
            id=item.id,
            title=item.title,
            description=item.description,
            thumbnail_url=item.thumbnail.resolved_url,
            variant_uris=list(item.related_resource_uris),
            creators_uri=item.creators_collection_uri or None,
        )

    @staticmethod
    def to_creator_response(creator: CreatorInfo) -> CreatorResponseDTO:
        return CreatorResponseDTO(
            id=creator.id,
            full_name=creator.full_name,
            thumbnail_url=creator.thumbnail.resolved_url,
        )

    @staticmethod
    def to_page_response(
        items: list[CatalogItem], offset: int, limit: int
    ) -> ComicsPageResponseDTO:
        """Page of comics plus the offset of the next page (server-side count)."""
        return ComicsPageResponseDTO(
            comics=[ComicMapper.to_comic_response(item) for item in items],
            offset=offset,
            limit=limit,
            next_offset=offset + len(items),
        )

    @staticmethod
    def to_detail_response(bundle: DetailBundle) -> ComicDetailResponseDTO:
        return ComicDetailResponseDTO(
            comic=ComicMapper.to_comic_response(bundle.primary),
            creator=ComicMapper.to_creator_response(bundle.creator) if bundle.creator else None,
            creator_error=bundle.creator_error,
            variants=[ComicMapper.to_comic_response(item) for item in bundle.variants],
            sub_fetches=[
                SubFetchResponseDTO(
                    uri=uri,
                    kind=sub.kind.value,
                    state=sub.state.value,
                    error=sub.error,
                )
                for uri, sub in bundle.fetch_states.items()
            ],
        )

    @staticmethod
    def to_favorite(comic_id: int, dto: FavoriteUpsertDTO) -> FavoriteComic:
        return FavoriteComic(
            id=comic_id,
            title=dto.title,
            description=dto.description,
            thumbnail_url=dto.thumbnail_url,
        )

    @staticmethod
    def to_favorite_response(favorite: FavoriteComic) -> FavoriteDTO:
        return FavoriteDTO(
            id=favorite.id,
            title=favorite.title,
            description=favorite.description,
            thumbnail_url=favorite.thumbnail_url,
        )

    @staticmethod
    def to_favorites_response(favorites: list[FavoriteComic]) -> FavoritesResponseDTO:
        return FavoritesResponseDTO(
            favorites=[ComicMapper.to_favorite_response(favorite) for favorite in favorites],
            total=len(favorites),
        )
