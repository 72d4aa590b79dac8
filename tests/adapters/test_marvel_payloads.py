from __future__ import annotations

import pydantic
import pytest

from comics_lite.adapters.marvel_payloads import (
    decode_listing,
    decode_single_comic,
    decode_single_creator,
)
from comics_lite.domain.comic import CatalogItem, Thumbnail
from comics_lite.domain.errors import ServerError


def test_decode_listing_tolerates_missing_optional_sections() -> None:
    document = {
        "data": {
            "results": [
                {
                    "id": 1,
                    "title": "Bare Comic",
                    "thumbnail": {"path": "http://example.com/bare", "extension": "gif"},
                }
            ]
        }
    }

    assert decode_listing(document) == [
        CatalogItem(
            id=1,
            title="Bare Comic",
            description="",
            thumbnail=Thumbnail("http://example.com/bare", "gif"),
            related_resource_uris=(),
            creators_collection_uri="",
        )
    ]


def test_decode_listing_skips_variant_summaries_without_uri() -> None:
    document = {
        "data": {
            "results": [
                {
                    "id": 1,
                    "title": "Comic",
                    "description": "Text",
                    "thumbnail": {"path": "p", "extension": "jpg"},
                    "variants": [
                        {"resourceURI": "http://gateway.marvel.com/v1/public/comics/2", "name": "A"},
                        {"name": "No URI"},
                        {"resourceURI": "http://gateway.marvel.com/v1/public/comics/3", "name": "B"},
                    ],
                    "creators": {"available": 0, "items": []},
                }
            ]
        }
    }

    (item,) = decode_listing(document)

    assert item.description == "Text"
    assert item.related_resource_uris == (
        "http://gateway.marvel.com/v1/public/comics/2",
        "http://gateway.marvel.com/v1/public/comics/3",
    )
    assert item.creators_collection_uri == ""


def test_decode_listing_rejects_wrong_shape() -> None:
    with pytest.raises(pydantic.ValidationError):
        decode_listing({"data": {"results": "nope"}})


def test_single_entity_decoders_reject_empty_results() -> None:
    empty = {"data": {"results": []}}

    with pytest.raises(ServerError) as comic_error:
        decode_single_comic(empty)
    with pytest.raises(ServerError) as creator_error:
        decode_single_creator(empty)

    assert comic_error.value.empty_result is True
    assert creator_error.value.empty_result is True


def test_decode_single_creator_maps_full_name() -> None:
    document = {
        "data": {
            "results": [
                {"id": 9, "fullName": "Steve Ditko", "thumbnail": {"path": "p", "extension": "jpg"}}
            ]
        }
    }

    creator = decode_single_creator(document)

    assert creator.full_name == "Steve Ditko"
    assert creator.id == 9
