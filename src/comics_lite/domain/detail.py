from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from comics_lite.domain.comic import CatalogItem, CreatorInfo


class FetchState(str, Enum):
    PENDING = "pending"
    LOADED = "loaded"
    FAILED = "failed"


class SubFetchKind(str, Enum):
    CREATOR = "creator"
    VARIANT = "variant"


@dataclass(frozen=True, slots=True)
class SubFetch:
    """State of one related-resource fetch launched for a detail view."""

    kind: SubFetchKind
    state: FetchState = FetchState.PENDING
    error: str | None = None


@dataclass(frozen=True)
class DetailBundle:
    """
    Immutable snapshot of a comic detail view.

    - ``variants`` holds only successfully resolved items (never error stubs)
    - ``creator`` is None while pending, when absent, or when its fetch failed
    - ``settled`` becomes True once every launched sub-fetch has finished
    """

    primary: CatalogItem
    creator: CreatorInfo | None = None
    variants: tuple[CatalogItem, ...] = ()
    fetch_states: Mapping[str, SubFetch] = field(default_factory=lambda: MappingProxyType({}))
    creator_error: str | None = None
    settled: bool = False

    @property
    def pending_count(self) -> int:
        return sum(1 for sub in self.fetch_states.values() if sub.state is FetchState.PENDING)

    @property
    def failed_uris(self) -> list[str]:
        return [uri for uri, sub in self.fetch_states.items() if sub.state is FetchState.FAILED]

    def with_fetch_state(self, uri: str, sub_fetch: SubFetch) -> DetailBundle:
        states = dict(self.fetch_states)
        states[uri] = sub_fetch
        return replace(self, fetch_states=MappingProxyType(states))
