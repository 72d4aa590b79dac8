from comics_lite.infra.db.models.base import Base
from comics_lite.infra.db.models.favorite import FavoriteRow

__all__ = ["Base", "FavoriteRow"]
