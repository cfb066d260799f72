"""Helpers for ordered collections of embedded records."""

from typing import Callable, TypeVar

T = TypeVar("T")


def index_of(items: list[T], predicate: Callable[[T], bool]) -> int | None:
    """Return the index of the first item matching ``predicate``, or None."""
    for index, item in enumerate(items):
        if predicate(item):
            return index
    return None


def pop_first(items: list[T], predicate: Callable[[T], bool]) -> T | None:
    """Remove and return the first matching item; None leaves ``items`` untouched."""
    index = index_of(items, predicate)
    if index is None:
        return None
    return items.pop(index)
