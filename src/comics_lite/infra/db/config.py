from __future__ import annotations

import os

# Favorites live next to the app unless a server database is configured
DEFAULT_DATABASE_URL = "sqlite:///comics_lite.db"


def database_url() -> str:
    return os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL
