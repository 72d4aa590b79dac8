from typing import Annotated

from fastapi import APIRouter, Depends, Query

from comics_lite.domain.comic import Paging
from comics_lite.entrypoints.http.dependencies import (
    get_catalog_client,
    get_load_comic_detail_use_case,
)
from comics_lite.entrypoints.http.dtos.comics import (
    ComicDetailResponseDTO,
    ComicsPageQueryDTO,
    ComicsPageResponseDTO,
)
from comics_lite.entrypoints.http.error_responses import ErrorResponse
from comics_lite.entrypoints.http.mappers.comic_mapper import ComicMapper
from comics_lite.ports.catalog_client import CatalogClient
from comics_lite.use_cases.load_comic_detail import LoadComicDetail

router = APIRouter(tags=["Comics"])

UPSTREAM_ERRORS = {
    502: {"model": ErrorResponse, "description": "Catalog returned an error or malformed data"},
    503: {"model": ErrorResponse, "description": "Catalog unreachable"},
}


@router.get(
    "/comics",
    response_model=ComicsPageResponseDTO,
    summary="Browse the comics catalog",
    description="""
    One page of the remote catalog, in server order.

    ## Pagination
    - Default limit: 20
    - Max limit: 100
    - `next_offset` is `offset` plus the number of comics the catalog returned
    """,
    responses={422: {"model": ErrorResponse}, **UPSTREAM_ERRORS},
)
async def get_comics(
    query: Annotated[ComicsPageQueryDTO, Query()],
    catalog_client: CatalogClient = Depends(get_catalog_client),
) -> ComicsPageResponseDTO:
    """Parse → validate → fetch → map → return."""
    Paging(offset=query.offset, limit=query.limit).validate()
    items = await catalog_client.fetch_page(offset=query.offset, limit=query.limit)
    return ComicMapper.to_page_response(items, offset=query.offset, limit=query.limit)


@router.get(
    "/comics/{comic_id}",
    response_model=ComicDetailResponseDTO,
    summary="Comic detail with creator and variants",
    description="""
    Fetches the comic, then its creator and every variant concurrently.

    A failed creator or variant fetch does not fail the request: it shows up
    in `sub_fetches` with `state="failed"`.
    """,
    responses={404: {"model": ErrorResponse}, **UPSTREAM_ERRORS},
)
async def get_comic_detail(
    comic_id: int,
    catalog_client: CatalogClient = Depends(get_catalog_client),
    use_case: LoadComicDetail = Depends(get_load_comic_detail_use_case),
) -> ComicDetailResponseDTO:
    item = await catalog_client.fetch_comic(comic_id)
    bundle = await use_case.settle(item)
    return ComicMapper.to_detail_response(bundle)
