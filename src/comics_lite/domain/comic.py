from __future__ import annotations

from dataclasses import dataclass, field

from comics_lite.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def upgrade_to_https(url: str) -> str:
    """Rewrite a plain ``http:`` scheme to ``https:``; other URLs pass through."""
    if url[:5].lower() == "http:":
        return "https:" + url[len("http:") :]
    return url


@dataclass(frozen=True, slots=True)
class Thumbnail:
    base_path: str
    extension: str

    @property
    def resolved_url(self) -> str:
        return f"{upgrade_to_https(self.base_path)}.{self.extension}"


@dataclass(frozen=True)
class CatalogItem:
    """A comic as listed by the catalog. Identity is ``id``."""

    id: int
    title: str
    description: str = ""
    thumbnail: Thumbnail = field(default_factory=lambda: Thumbnail("", "jpg"))
    related_resource_uris: tuple[str, ...] = ()
    creators_collection_uri: str = ""


@dataclass(frozen=True)
class CreatorInfo:
    id: int
    full_name: str
    thumbnail: Thumbnail


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = DEFAULT_PAGE_SIZE

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        errors: list[dict[str, str]] = []
        if self.offset < 0:
            errors.append({"field": "offset", "message": "offset must be >= 0", "code": "OUT_OF_RANGE"})
        if self.limit <= 0:
            errors.append({"field": "limit", "message": "limit must be > 0", "code": "OUT_OF_RANGE"})
        # The catalog rejects larger pages
        elif self.limit > MAX_PAGE_SIZE:
            errors.append(
                {"field": "limit", "message": f"limit must be <= {MAX_PAGE_SIZE}", "code": "OUT_OF_RANGE"}
            )

        if errors:
            raise PagingValidationError("Invalid paging parameters", errors=errors)
