from pydantic import BaseModel, Field

from comics_lite.domain.comic import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class ComicResponseDTO(BaseModel):
    id: int
    title: str
    description: str
    thumbnail_url: str
    variant_uris: list[str]
    creators_uri: str | None


class CreatorResponseDTO(BaseModel):
    id: int
    full_name: str
    thumbnail_url: str


class SubFetchResponseDTO(BaseModel):
    uri: str
    kind: str
    state: str
    error: str | None = None


class ComicsPageQueryDTO(BaseModel):
    """Query parameters for one catalog page. Ranges are checked by ``Paging.validate()``."""

    offset: int = Field(
        default=0,
        description="Server-side position of the first comic",
        examples=[0],
    )
    limit: int = Field(
        default=DEFAULT_PAGE_SIZE,
        description=f"Maximum number of comics to return (1 to {MAX_PAGE_SIZE})",
        examples=[DEFAULT_PAGE_SIZE],
    )


class ComicsPageResponseDTO(BaseModel):
    comics: list[ComicResponseDTO]
    offset: int
    limit: int
    next_offset: int


class ComicDetailResponseDTO(BaseModel):
    comic: ComicResponseDTO
    creator: CreatorResponseDTO | None
    creator_error: str | None
    variants: list[ComicResponseDTO]
    sub_fetches: list[SubFetchResponseDTO]
