"""Member discovery and lookup for enumeration types.

Members are found by scanning the public attributes declared directly on a
concrete enumeration class; authors never register them by hand.

Usage:
    from smartenum.registry import from_name, get_all

    for color in get_all(Color):
        print(color.id, color.name)

    red = from_name(Color, "red")
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar

from smartenum.config import get_settings
from smartenum.exceptions import DuplicateMemberError, NotFoundError
from smartenum.logging import get_logger

if TYPE_CHECKING:
    from smartenum.enumeration import Enumeration

T = TypeVar("T", bound="Enumeration")

logger = get_logger(__name__)


class InstanceRegistry:
    """Discovers the declared members of enumeration types.

    Scans are optionally memoized per type (``Settings.cache_discovery``).
    The cache is filled under a lock with a second check inside it, so any
    number of threads asking for the same type at once store one tuple.
    """

    def __init__(self) -> None:
        self._cache: dict[type, tuple[Any, ...]] = {}
        self._lock = threading.Lock()

    def scan(self, cls: type[T]) -> tuple[T, ...]:
        """Collect the members declared on ``cls`` itself, in declaration order.

        Inherited attributes are not visited, so a subclass of a concrete
        enumeration does not pick up its parent's members. A member bound to
        more than one attribute name is reported once.

        Raises:
            DuplicateMemberError: If two distinct members share an id or a
                (case-insensitive) name and duplicate checking is enabled.
        """
        settings = get_settings()
        members: list[T] = []
        seen_ids: set[int] = set()
        seen_names: set[str] = set()

        for attr_name, value in vars(cls).items():
            if attr_name.startswith("_") or not isinstance(value, cls):
                continue
            if any(value is existing for existing in members):
                continue

            if settings.check_duplicates:
                folded = value.name.casefold()
                if value.id in seen_ids:
                    logger.error(
                        "Duplicate id %r declared on %s", value.id, cls.__qualname__
                    )
                    raise DuplicateMemberError(cls, "id", value.id)
                if folded in seen_names:
                    logger.error(
                        "Duplicate name %r declared on %s",
                        value.name,
                        cls.__qualname__,
                    )
                    raise DuplicateMemberError(cls, "name", value.name)
                seen_ids.add(value.id)
                seen_names.add(folded)

            members.append(value)

        logger.debug("Discovered %d member(s) on %s", len(members), cls.__qualname__)
        return tuple(members)

    def members(self, cls: type[T]) -> tuple[T, ...]:
        """Return the members of ``cls``, memoized when caching is enabled."""
        if not get_settings().cache_discovery:
            return self.scan(cls)

        cached = self._cache.get(cls)
        if cached is not None:
            return cached

        with self._lock:
            # Double-check after acquiring lock
            cached = self._cache.get(cls)
            if cached is None:
                cached = self.scan(cls)
                self._cache[cls] = cached
        return cached

    def invalidate(self, cls: type | None = None) -> None:
        """Forget memoized scans for ``cls``, or for every type when omitted."""
        with self._lock:
            if cls is None:
                self._cache.clear()
            else:
                self._cache.pop(cls, None)

    def get_all(self, cls: type[T]) -> Iterator[T]:
        """Iterate over every member of ``cls``. Each call starts a fresh pass."""
        yield from self.members(cls)

    def _find(self, cls: type[T], predicate: Callable[[T], bool]) -> T | None:
        for item in self.get_all(cls):
            if predicate(item):
                return item
        return None

    def try_from_id(self, cls: type[T], id: int) -> T | None:
        """Return the member with ``id``, or None. A bool is never an id."""
        if isinstance(id, bool):
            return None
        return self._find(cls, lambda item: item.id == id)

    def try_from_name(self, cls: type[T], name: str) -> T | None:
        """Return the member whose name matches ``name`` ignoring case, or None."""
        folded = name.casefold()
        return self._find(cls, lambda item: item.name.casefold() == folded)

    def try_from_hidden_value(self, cls: type[T], value: str) -> T | None:
        """Return the member whose hidden value matches ignoring case, or None.

        Members without a hidden value never match.
        """
        folded = value.casefold()
        return self._find(
            cls,
            lambda item: item.hidden_value is not None
            and item.hidden_value.casefold() == folded,
        )

    def from_id(self, cls: type[T], id: int) -> T:
        """Return the member with ``id``.

        Raises:
            NotFoundError: If no member has that id, or ``id`` is a bool.
        """
        item = self.try_from_id(cls, id)
        if item is None:
            raise NotFoundError(cls, "id", id)
        return item

    def from_name(self, cls: type[T], name: str) -> T:
        """Return the member named ``name`` (case-insensitive).

        Raises:
            NotFoundError: If no member has that name.
        """
        item = self.try_from_name(cls, name)
        if item is None:
            raise NotFoundError(cls, "name", name)
        return item

    def from_hidden_value(self, cls: type[T], value: str) -> T:
        """Return the member whose hidden value is ``value`` (case-insensitive).

        Raises:
            NotFoundError: If no member carries that hidden value.
        """
        item = self.try_from_hidden_value(cls, value)
        if item is None:
            raise NotFoundError(cls, "hidden value", value)
        return item

    def is_defined(self, cls: type, key: int | str) -> bool:
        """Check whether ``key`` (an id or a name) identifies a member of ``cls``."""
        if isinstance(key, str):
            return self.try_from_name(cls, key) is not None
        return self.try_from_id(cls, key) is not None


# Process-wide registry used by Enumeration and the module-level helpers
registry = InstanceRegistry()


def get_all(cls: type[T]) -> Iterator[T]:
    """Iterate over every member declared on ``cls``."""
    return registry.get_all(cls)


def from_id(cls: type[T], id: int) -> T:
    """Look up a member of ``cls`` by id."""
    return registry.from_id(cls, id)


def from_name(cls: type[T], name: str) -> T:
    """Look up a member of ``cls`` by name, ignoring case."""
    return registry.from_name(cls, name)


def from_hidden_value(cls: type[T], value: str) -> T:
    """Look up a member of ``cls`` by hidden value, ignoring case."""
    return registry.from_hidden_value(cls, value)


__all__ = [
    "InstanceRegistry",
    "from_hidden_value",
    "from_id",
    "from_name",
    "get_all",
    "registry",
]
