from pydantic import BaseModel, ConfigDict, Field


class FavoriteDTO(BaseModel):
    id: int
    title: str
    description: str
    thumbnail_url: str


class FavoriteUpsertDTO(BaseModel):
    """Body for PUT /v1/favorites/{comic_id}."""

    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    thumbnail_url: str = ""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Amazing Spider-Man (2018) #1",
                "description": "",
                "thumbnail_url": "https://i.annihil.us/u/prod/marvel/i/mg/6/10/5b6b3e0e1c3a5.jpg",
            }
        }
    )


class FavoritesResponseDTO(BaseModel):
    favorites: list[FavoriteDTO]
    total: int
