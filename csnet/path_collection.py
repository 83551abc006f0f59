"""An ordered collection of paths with search, sort and filter."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

P = TypeVar("P")


class PathCollection(Generic[P]):
    """Ordered paths; the first path is the preferred one."""

    def __init__(self, paths: Iterable[P] = ()) -> None:
        self._paths: list[P] = list(paths)

    def append(self, path: P) -> None:
        """Add a path at the end."""
        self._paths.append(path)

    def find(self, predicate: Callable[[P], bool]) -> P | None:
        """Return the first path for which ``predicate`` holds, or None."""
        return next((path for path in self._paths if predicate(path)), None)

    def pop(self) -> P | None:
        """Remove and return the first path, or None when empty."""
        if not self._paths:
            return None
        return self._paths.pop(0)

    def first(self) -> P | None:
        """Return the first path without removing it, or None when empty."""
        return self._paths[0] if self._paths else None

    def sort(self, key: Callable[[P], Any], ascending: bool = True) -> None:
        """Sort the paths in place by ``key``; the sort is stable."""
        self._paths.sort(key=key, reverse=not ascending)

    def filter(self, predicate: Callable[[P], bool]) -> None:
        """Keep only the paths for which ``predicate`` holds."""
        self._paths = [path for path in self._paths if predicate(path)]

    def as_list(self) -> list[P]:
        """Return the paths as a new list."""
        return list(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[P]:
        return iter(self._paths)

    def __repr__(self) -> str:
        return f"PathCollection({self._paths!r})"