"""
Test suite for the /v1/comics routes.

- Query parameters are validated before the catalog is called
- The route delegates to the injected CatalogClient
- Detail responses carry the settled fan-out, including partial failures
- Catalog errors map to structured upstream error responses
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from comics_lite.domain.comic import CatalogItem, CreatorInfo, Thumbnail
from comics_lite.domain.errors import NetworkError, ServerError
from comics_lite.entrypoints.http.dependencies import get_catalog_client
from comics_lite.entrypoints.http.exception_handlers import register_exception_handlers
from comics_lite.entrypoints.http.routes.comics import router
from comics_lite.ports.catalog_client import CatalogClient

CREATORS_URI = "https://gateway.marvel.com/v1/public/comics/1689/creators"
VARIANT_URI = "https://gateway.marvel.com/v1/public/comics/1690"


@pytest.fixture
def catalog_client() -> AsyncMock:
    return AsyncMock(spec=CatalogClient)


@pytest.fixture
def app(catalog_client: AsyncMock) -> FastAPI:
    """Create a test FastAPI app with the comics router and a fake catalog."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_catalog_client] = lambda: catalog_client
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def comic() -> CatalogItem:
    return CatalogItem(
        id=1689,
        title="Avengers (1963) #1",
        description="Earth's mightiest heroes",
        thumbnail=Thumbnail(base_path="http://i.annihil.us/u/prod/marvel/i/mg/1/20/avengers", extension="jpg"),
        related_resource_uris=(VARIANT_URI,),
        creators_collection_uri=CREATORS_URI,
    )


# ==============================================================================
# GET /v1/comics
# ==============================================================================


def test_list_comics_uses_default_paging(client: TestClient, catalog_client: AsyncMock, comic: CatalogItem) -> None:
    catalog_client.fetch_page.return_value = [comic]

    response = client.get("/v1/comics")

    assert response.status_code == 200
    catalog_client.fetch_page.assert_awaited_once_with(offset=0, limit=20)
    data = response.json()
    assert data["offset"] == 0
    assert data["limit"] == 20
    assert data["next_offset"] == 1
    assert data["comics"] == [
        {
            "id": 1689,
            "title": "Avengers (1963) #1",
            "description": "Earth's mightiest heroes",
            "thumbnail_url": "https://i.annihil.us/u/prod/marvel/i/mg/1/20/avengers.jpg",
            "variant_uris": [VARIANT_URI],
            "creators_uri": CREATORS_URI,
        }
    ]


def test_list_comics_next_offset_counts_server_items(client: TestClient, catalog_client: AsyncMock) -> None:
    catalog_client.fetch_page.return_value = [
        CatalogItem(id=1, title="A"),
        CatalogItem(id=1, title="A"),
        CatalogItem(id=2, title="B"),
    ]

    response = client.get("/v1/comics", params={"offset": 40, "limit": 3})

    assert response.status_code == 200
    catalog_client.fetch_page.assert_awaited_once_with(offset=40, limit=3)
    assert response.json()["next_offset"] == 43


@pytest.mark.parametrize(
    ("params", "field"),
    [
        ({"offset": -1}, "offset"),
        ({"limit": 0}, "limit"),
        ({"limit": 101}, "limit"),
    ],
)
def test_list_comics_rejects_out_of_range_paging(
    client: TestClient, catalog_client: AsyncMock, params: dict, field: str
) -> None:
    response = client.get("/v1/comics", params=params)

    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Invalid paging parameters"
    assert data["code"] == "VALIDATION_ERROR"
    assert [error["field"] for error in data["errors"]] == [field]
    assert data["errors"][0]["code"] == "OUT_OF_RANGE"
    catalog_client.fetch_page.assert_not_awaited()


def test_list_comics_reports_every_invalid_paging_field(client: TestClient, catalog_client: AsyncMock) -> None:
    response = client.get("/v1/comics", params={"offset": -1, "limit": 500})

    assert response.status_code == 422
    assert [error["field"] for error in response.json()["errors"]] == ["offset", "limit"]
    catalog_client.fetch_page.assert_not_awaited()


def test_list_comics_rejects_non_integer_paging(client: TestClient, catalog_client: AsyncMock) -> None:
    response = client.get("/v1/comics", params={"limit": "twenty"})

    assert response.status_code == 422
    assert response.json()["detail"] == "Invalid request parameters"
    assert response.json()["errors"][0]["field"] == "limit"
    catalog_client.fetch_page.assert_not_awaited()


def test_list_comics_network_error_returns_503(client: TestClient, catalog_client: AsyncMock) -> None:
    catalog_client.fetch_page.side_effect = NetworkError("Could not reach the catalog")

    response = client.get("/v1/comics")

    assert response.status_code == 503
    assert response.json() == {"detail": "Could not reach the catalog", "code": "NETWORK_ERROR"}


def test_list_comics_server_error_returns_502(client: TestClient, catalog_client: AsyncMock) -> None:
    catalog_client.fetch_page.side_effect = ServerError(500)

    response = client.get("/v1/comics")

    assert response.status_code == 502
    assert response.json()["code"] == "SERVER_ERROR"


# ==============================================================================
# GET /v1/comics/{comic_id}
# ==============================================================================


def test_comic_detail_includes_creator_and_variants(
    client: TestClient, catalog_client: AsyncMock, comic: CatalogItem
) -> None:
    catalog_client.fetch_comic.return_value = comic
    catalog_client.fetch_creator.return_value = CreatorInfo(
        id=30, full_name="Stan Lee", thumbnail=Thumbnail(base_path="https://x/stan", extension="png")
    )
    catalog_client.fetch_variants.return_value = [CatalogItem(id=1690, title="Avengers (1963) #1 (Variant)")]

    response = client.get("/v1/comics/1689")

    assert response.status_code == 200
    catalog_client.fetch_comic.assert_awaited_once_with(1689)
    catalog_client.fetch_creator.assert_awaited_once_with(CREATORS_URI)
    catalog_client.fetch_variants.assert_awaited_once_with(VARIANT_URI)

    data = response.json()
    assert data["comic"]["id"] == 1689
    assert data["creator"] == {"id": 30, "full_name": "Stan Lee", "thumbnail_url": "https://x/stan.png"}
    assert data["creator_error"] is None
    assert [variant["id"] for variant in data["variants"]] == [1690]
    assert {sub["uri"]: sub["state"] for sub in data["sub_fetches"]} == {
        CREATORS_URI: "loaded",
        VARIANT_URI: "loaded",
    }


def test_comic_detail_tolerates_failed_creator(
    client: TestClient, catalog_client: AsyncMock, comic: CatalogItem
) -> None:
    catalog_client.fetch_comic.return_value = comic
    catalog_client.fetch_creator.side_effect = ServerError.empty_result_error(entity="creator")
    catalog_client.fetch_variants.return_value = [CatalogItem(id=1690, title="Variant")]

    response = client.get("/v1/comics/1689")

    assert response.status_code == 200
    data = response.json()
    assert data["creator"] is None
    assert data["creator_error"] == "Error fetching creator details"
    assert [variant["id"] for variant in data["variants"]] == [1690]
    creator_fetch = next(sub for sub in data["sub_fetches"] if sub["kind"] == "creator")
    assert creator_fetch["state"] == "failed"
    assert creator_fetch["error"] == "Catalog returned an empty result for a single-entity request"


def test_comic_detail_without_related_resources(client: TestClient, catalog_client: AsyncMock) -> None:
    catalog_client.fetch_comic.return_value = CatalogItem(id=5, title="One-shot")

    response = client.get("/v1/comics/5")

    assert response.status_code == 200
    data = response.json()
    assert data["variants"] == []
    assert data["sub_fetches"] == []
    catalog_client.fetch_creator.assert_not_awaited()
    catalog_client.fetch_variants.assert_not_awaited()


def test_comic_detail_unknown_comic_returns_404(client: TestClient, catalog_client: AsyncMock) -> None:
    catalog_client.fetch_comic.side_effect = ServerError(404)

    response = client.get("/v1/comics/999999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Catalog responded with HTTP 404"


def test_comic_detail_rejects_non_integer_id(client: TestClient, catalog_client: AsyncMock) -> None:
    response = client.get("/v1/comics/abc")

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "comic_id"
    catalog_client.fetch_comic.assert_not_awaited()
