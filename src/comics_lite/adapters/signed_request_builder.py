"""Authenticated URL construction for the catalog API."""

from __future__ import annotations

import time
from typing import Callable

import httpx

from comics_lite.domain.comic import upgrade_to_https
from comics_lite.domain.errors import InvalidURLError
from comics_lite.ports.request_signer import RequestSigner


class SignedRequestBuilder:
    """
    Builds signed catalog URLs.

    - Every call reads the clock again: timestamps are never reused across requests
    - Auth parameters are ``apikey``, ``ts`` and ``hash``
    - Sub-resource URIs handed out by the API are upgraded to https
    - Existing query parameters on a URI are kept, auth parameters are merged in
    """

    def __init__(
        self,
        public_key: str,
        private_key: str,
        signer: RequestSigner,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Args:
            public_key: Public API key (sent as ``apikey``)
            private_key: Private API secret (only used for signing)
            signer: Signing primitive
            clock: Seconds since epoch; injectable for tests
        """
        self._public_key = public_key
        self._private_key = private_key
        self._signer = signer
        self._clock = clock

    def build_list_url(self, base_url: str, offset: int, limit: int) -> httpx.URL:
        """
        Signed URL for one listing page.

        Raises:
            InvalidURLError: If ``base_url`` is not an absolute http(s) URL
        """
        url = self._parse(base_url)
        params = self._auth_params()
        params["offset"] = str(offset)
        params["limit"] = str(limit)
        return url.copy_merge_params(params)

    def build_resource_url(self, resource_uri: str) -> httpx.URL:
        """
        Signed URL for a sub-resource URI returned by a previous response.

        Raises:
            InvalidURLError: If ``resource_uri`` is not an absolute http(s) URL
        """
        url = self._parse(upgrade_to_https(resource_uri.strip()))
        return url.copy_merge_params(self._auth_params())

    def _auth_params(self) -> dict[str, str]:
        timestamp = str(self._clock())
        return {
            "apikey": self._public_key,
            "ts": timestamp,
            "hash": self._signer.sign(timestamp, self._private_key, self._public_key),
        }

    @staticmethod
    def _parse(raw: str) -> httpx.URL:
        try:
            url = httpx.URL(raw)
        except (httpx.InvalidURL, TypeError) as exc:
            raise InvalidURLError(raw) from exc

        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURLError(raw)
        return url
