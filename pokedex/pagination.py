import math
from typing import Sequence, TypeVar

from pokedex import config

T = TypeVar("T")


def total_pages(length: int, page_size: int) -> int:
    """Number of pages for a collection; an empty collection still has one page."""
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    return max(1, math.ceil(length / page_size))


def visible_slice(collection: Sequence[T], page: int, page_size: int) -> list[T]:
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    # Pages are 1-based; a page below 1 must not wrap around to the end
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(collection[start:start + page_size])


class Pager:
    """A 1-based page cursor over an in-memory collection."""

    def __init__(self, collection: Sequence[T], page_size: int = config.PAGE_SIZE):
        self._collection = collection
        self.page_size = page_size
        self.total_pages = total_pages(len(collection), page_size)
        self.page = 1

    def go_to(self, page: int) -> bool:
        # Out-of-range transitions are no-ops
        if page < 1 or page > self.total_pages:
            return False
        self.page = page
        return True

    def next(self) -> bool:
        return self.go_to(self.page + 1)

    def previous(self) -> bool:
        return self.go_to(self.page - 1)

    @property
    def visible(self) -> list[T]:
        return visible_slice(self._collection, self.page, self.page_size)
