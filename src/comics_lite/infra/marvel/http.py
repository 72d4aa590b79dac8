from __future__ import annotations

import httpx

from comics_lite.adapters.httpx_catalog_client import HttpxCatalogClient
from comics_lite.adapters.md5_request_signer import Md5RequestSigner
from comics_lite.adapters.signed_request_builder import SignedRequestBuilder
from comics_lite.infra.marvel.config import MarvelCredentials

# The catalog is slow on cold pages; connects should still fail fast
DEFAULT_TIMEOUT = httpx.Timeout(15.0, connect=5.0)


def build_http_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """AsyncClient for catalog traffic. The caller owns (and closes) it."""
    return httpx.AsyncClient(
        timeout=DEFAULT_TIMEOUT,
        headers={"Accept": "application/json"},
        transport=transport,
    )


def build_catalog_client(
    http_client: httpx.AsyncClient, credentials: MarvelCredentials
) -> HttpxCatalogClient:
    """Wire the signed request builder and MD5 signer into a catalog client."""
    request_builder = SignedRequestBuilder(
        public_key=credentials.public_key,
        private_key=credentials.private_key,
        signer=Md5RequestSigner(),
    )
    return HttpxCatalogClient(http_client=http_client, request_builder=request_builder)
