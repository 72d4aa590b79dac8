from __future__ import annotations

from abc import ABC, abstractmethod


class RequestSigner(ABC):
    """
    Port for the catalog's request-signing primitive.

    Contract:
        - Pure: the same inputs always produce the same token
        - Callers supply a fresh timestamp for every request
    """

    @abstractmethod
    def sign(self, timestamp: str, private_key: str, public_key: str) -> str:
        """
        Compute the signature token over ``timestamp ++ private_key ++ public_key``.

        Args:
            timestamp: Seconds since epoch, string-formatted
            private_key: Private API secret (never sent over the wire)
            public_key: Public API key sent as ``apikey``

        Returns:
            Token sent as the ``hash`` query parameter
        """
        ...
