"""
Entity List Cache

Process-local list of venues or events, loaded wholesale from the query repo
and appended to on successful creation. It is never a source of truth: the
only invalidation is a full reload (`replace`) or an explicit `invalidate`.
"""

from typing import Any, Callable, Generic, Iterable, List, TypeVar

from src.service.catalog.domain.entity.event_entity import Event
from src.service.catalog.domain.entity.venue_entity import Venue


_T = TypeVar('_T')


class EntityListCache(Generic[_T]):
    def __init__(self, *, sort_key: Callable[[_T], Any]) -> None:
        self._sort_key = sort_key
        self._items: List[_T] = []
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def items(self) -> List[_T]:
        return sorted(self._items, key=self._sort_key)

    def replace(self, entities: Iterable[_T]) -> None:
        self._items = list(entities)
        self._loaded = True

    def append(self, entity: _T) -> None:
        self._items.append(entity)

    def invalidate(self) -> None:
        self._items = []
        self._loaded = False

    def __len__(self) -> int:
        return len(self._items)


def venue_sort_key(venue: Venue) -> Any:
    return venue.name


def event_sort_key(event: Event) -> Any:
    return event.start_date


def venue_list_cache() -> EntityListCache[Venue]:
    return EntityListCache(sort_key=venue_sort_key)


def event_list_cache() -> EntityListCache[Event]:
    return EntityListCache(sort_key=event_sort_key)
