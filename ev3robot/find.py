"""Locating exactly one item among candidates."""

from __future__ import annotations

from typing import Iterable, TypeVar

_T = TypeVar("_T")


class FindError(Exception):
    """Raised when a search does not yield exactly one result."""


class NotFoundError(FindError):
    """Raised when nothing was found."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class FoundMultipleError(FindError):
    """Raised when more than one candidate was found."""

    def __init__(self, message: str = "found multiple") -> None:
        super().__init__(message)


def find_in(iterable: Iterable[_T]) -> _T:
    """Return the only item of ``iterable``.

    At most two items are consumed from the iterable.
    """
    iterator = iter(iterable)
    try:
        found = next(iterator)
    except StopIteration:
        raise NotFoundError() from None
    for _ in iterator:
        raise FoundMultipleError()
    return found