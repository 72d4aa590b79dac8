from fastapi import APIRouter, Depends, Response, status

from comics_lite.domain.errors import NotFoundError
from comics_lite.entrypoints.http.dependencies import get_manage_favorites_use_case
from comics_lite.entrypoints.http.dtos.favorites import (
    FavoriteDTO,
    FavoritesResponseDTO,
    FavoriteUpsertDTO,
)
from comics_lite.entrypoints.http.error_responses import ErrorResponse
from comics_lite.entrypoints.http.mappers.comic_mapper import ComicMapper
from comics_lite.use_cases.manage_favorites import ManageFavorites

router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.get("", response_model=FavoritesResponseDTO, summary="List favorite comics")
def list_favorites(
    use_case: ManageFavorites = Depends(get_manage_favorites_use_case),
) -> FavoritesResponseDTO:
    return ComicMapper.to_favorites_response(use_case.list())


@router.get(
    "/{comic_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Check whether a comic is a favorite",
    responses={404: {"model": ErrorResponse}},
)
def check_favorite(
    comic_id: int,
    use_case: ManageFavorites = Depends(get_manage_favorites_use_case),
) -> Response:
    if not use_case.is_favorite(comic_id):
        raise NotFoundError(resource="Favorite", identifier=str(comic_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{comic_id}",
    response_model=FavoriteDTO,
    summary="Add or update a favorite comic",
    responses={422: {"model": ErrorResponse}},
)
def upsert_favorite(
    comic_id: int,
    body: FavoriteUpsertDTO,
    use_case: ManageFavorites = Depends(get_manage_favorites_use_case),
) -> FavoriteDTO:
    favorite = ComicMapper.to_favorite(comic_id, body)
    use_case.save(favorite)
    return ComicMapper.to_favorite_response(favorite)


@router.delete(
    "/{comic_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a favorite comic",
    responses={404: {"model": ErrorResponse}},
)
def delete_favorite(
    comic_id: int,
    use_case: ManageFavorites = Depends(get_manage_favorites_use_case),
) -> Response:
    use_case.remove(comic_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
