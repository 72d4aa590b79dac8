from __future__ import annotations

import hashlib

from comics_lite.ports.request_signer import RequestSigner


class Md5RequestSigner(RequestSigner):
    """Marvel API signature: lowercase hex MD5 of ``ts + private_key + public_key``."""

    def sign(self, timestamp: str, private_key: str, public_key: str) -> str:
        payload = f"{timestamp}{private_key}{public_key}".encode("utf-8")
        return hashlib.md5(payload).hexdigest()
