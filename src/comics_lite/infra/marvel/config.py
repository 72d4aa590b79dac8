from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MarvelCredentials:
    public_key: str
    private_key: str

    def __repr__(self) -> str:
        return f"MarvelCredentials(public_key={self.public_key!r}, private_key='***')"


def marvel_credentials() -> MarvelCredentials:
    public_key = os.getenv("MARVEL_PUBLIC_KEY")
    private_key = os.getenv("MARVEL_PRIVATE_KEY")

    missing = [
        name
        for name, value in (("MARVEL_PUBLIC_KEY", public_key), ("MARVEL_PRIVATE_KEY", private_key))
        if not value
    ]
    if missing:
        raise RuntimeError(f"Missing environment variables: {', '.join(missing)}")

    return MarvelCredentials(public_key=public_key or "", private_key=private_key or "")
