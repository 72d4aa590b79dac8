"""Tests for comic, detail and favorite domain entities."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from comics_lite.domain.comic import (
    CatalogItem,
    Paging,
    PagingValidationError,
    Thumbnail,
    upgrade_to_https,
)
from comics_lite.domain.detail import DetailBundle, FetchState, SubFetch, SubFetchKind
from comics_lite.domain.favorite import FavoriteComic


# ==============================================================================
# Thumbnail
# ==============================================================================


def test_thumbnail_resolved_url_upgrades_scheme() -> None:
    thumbnail = Thumbnail(base_path="http://i.annihil.us/u/prod/marvel/i/mg/c/e0/abc", extension="jpg")

    assert thumbnail.resolved_url == "https://i.annihil.us/u/prod/marvel/i/mg/c/e0/abc.jpg"


def test_thumbnail_resolved_url_keeps_https() -> None:
    thumbnail = Thumbnail(base_path="https://example.com/image", extension="png")

    assert thumbnail.resolved_url == "https://example.com/image.png"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("http://gateway.marvel.com/v1/public/comics/1", "https://gateway.marvel.com/v1/public/comics/1"),
        ("https://gateway.marvel.com/v1", "https://gateway.marvel.com/v1"),
        ("HTTP://gateway.marvel.com/v1/public/comics/1", "https://gateway.marvel.com/v1/public/comics/1"),
        ("ftp://example.com/http:", "ftp://example.com/http:"),
        ("", ""),
    ],
)
def test_upgrade_to_https(url: str, expected: str) -> None:
    assert upgrade_to_https(url) == expected


# ==============================================================================
# Paging
# ==============================================================================


def test_paging_defaults_are_valid() -> None:
    paging = Paging()

    paging.validate()

    assert (paging.offset, paging.limit) == (0, 20)


@pytest.mark.parametrize(
    ("offset", "limit", "field", "message"),
    [
        (-1, 20, "offset", "offset must be >= 0"),
        (0, 0, "limit", "limit must be > 0"),
        (0, 101, "limit", "limit must be <= 100"),
    ],
)
def test_paging_rejects_invalid_values(offset: int, limit: int, field: str, message: str) -> None:
    with pytest.raises(PagingValidationError) as exc_info:
        Paging(offset=offset, limit=limit).validate()

    assert exc_info.value.message == "Invalid paging parameters"
    assert exc_info.value.errors == [{"field": field, "message": message, "code": "OUT_OF_RANGE"}]


def test_paging_reports_every_invalid_field() -> None:
    with pytest.raises(PagingValidationError) as exc_info:
        Paging(offset=-5, limit=500).validate()

    assert exc_info.value.to_dict()["errors"] == [
        {"field": "offset", "message": "offset must be >= 0", "code": "OUT_OF_RANGE"},
        {"field": "limit", "message": "limit must be <= 100", "code": "OUT_OF_RANGE"},
    ]


# ==============================================================================
# CatalogItem / FavoriteComic
# ==============================================================================


def test_catalog_items_are_immutable() -> None:
    item = CatalogItem(id=1, title="X-Men #1")

    with pytest.raises(AttributeError):
        item.title = "Other"  # type: ignore[misc]


def test_favorite_from_item_stores_resolved_thumbnail() -> None:
    item = CatalogItem(
        id=7,
        title="Hulk #7",
        description="Smash",
        thumbnail=Thumbnail("http://example.com/hulk", "jpg"),
        related_resource_uris=("http://gateway.marvel.com/v1/public/comics/8",),
    )

    favorite = FavoriteComic.from_item(item)

    assert favorite == FavoriteComic(
        id=7,
        title="Hulk #7",
        description="Smash",
        thumbnail_url="https://example.com/hulk.jpg",
    )


# ==============================================================================
# DetailBundle
# ==============================================================================


def test_detail_bundle_tracks_pending_and_failed() -> None:
    bundle = DetailBundle(
        primary=CatalogItem(id=1, title="X"),
        fetch_states=MappingProxyType(
            {
                "a": SubFetch(SubFetchKind.VARIANT),
                "b": SubFetch(SubFetchKind.VARIANT, FetchState.FAILED, "boom"),
                "c": SubFetch(SubFetchKind.CREATOR, FetchState.LOADED),
            }
        ),
    )

    assert bundle.pending_count == 1
    assert bundle.failed_uris == ["b"]


def test_with_fetch_state_returns_new_bundle() -> None:
    bundle = DetailBundle(
        primary=CatalogItem(id=1, title="X"),
        fetch_states=MappingProxyType({"a": SubFetch(SubFetchKind.VARIANT)}),
    )

    updated = bundle.with_fetch_state("a", SubFetch(SubFetchKind.VARIANT, FetchState.LOADED))

    assert bundle.fetch_states["a"].state is FetchState.PENDING
    assert updated.fetch_states["a"].state is FetchState.LOADED
