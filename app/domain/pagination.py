"""Page/size state machine shared by list views.

Two flavours are provided:

- ``Paginator`` slices an already-loaded collection (client-side pagination).
- ``ServerPaginator`` holds no data and derives ``offset``/``limit`` for a
  paged query against an external source (server-side pagination).

Neither raises on bad input: out-of-range pages and non-positive page sizes
are clamped. ``total_pages`` is re-derived on every read and never drops
below 1, so an empty collection is "page 1 of 1".
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
ELLIPSIS = "..."


def total_pages_for(total_items: int, page_size: int) -> int:
    """Number of pages needed for ``total_items``, floored at 1."""
    return max(1, math.ceil(max(total_items, 0) / max(page_size, 1)))


def page_numbers(
    current_page: int, total_pages: int, max_visible: int = 7
) -> list[int | str]:
    """Page buttons to display, with ``"..."`` standing in for skipped runs.

    Small paginations list every page. Larger ones always show the first and
    last page plus the neighbours of ``current_page``.
    """
    if total_pages <= max_visible:
        return list(range(1, total_pages + 1))

    pages: list[int | str] = [1]
    if current_page > 3:
        pages.append(ELLIPSIS)

    start = max(2, current_page - 1)
    end = min(total_pages - 1, current_page + 1)
    pages.extend(range(start, end + 1))

    if current_page < total_pages - 2:
        pages.append(ELLIPSIS)
    pages.append(total_pages)
    return pages


def item_range(current_page: int, page_size: int, total_items: int) -> tuple[int, int]:
    """1-based ``(first, last)`` item numbers shown on ``current_page``."""
    if total_items <= 0:
        return 0, 0
    start = (current_page - 1) * page_size + 1
    end = min(current_page * page_size, total_items)
    return start, end


class _PageState(ABC):
    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE, initial_page: int = 1):
        self._page_size = max(page_size, 1)
        self._current_page = 1
        self.set_page(initial_page)

    @property
    @abstractmethod
    def total_items(self) -> int: ...

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        return total_pages_for(self.total_items, self._page_size)

    @property
    def current_page(self) -> int:
        # The source may have shrunk since the page was last set.
        return min(self._current_page, self.total_pages)

    @property
    def pages(self) -> list[int | str]:
        return page_numbers(self.current_page, self.total_pages)

    @property
    def item_range(self) -> tuple[int, int]:
        return item_range(self.current_page, self._page_size, self.total_items)

    def set_page(self, page: int) -> None:
        self._current_page = max(1, min(page, self.total_pages))

    def set_page_size(self, size: int) -> None:
        self._page_size = max(size, 1)
        self._current_page = 1

    def next_page(self) -> None:
        self.set_page(self.current_page + 1)

    def previous_page(self) -> None:
        self.set_page(self.current_page - 1)

    def go_to_first_page(self) -> None:
        self.set_page(1)

    def go_to_last_page(self) -> None:
        self.set_page(self.total_pages)

    def _clamp(self) -> None:
        self._current_page = self.current_page


class Paginator(_PageState, Generic[T]):
    """Client-side pagination over an in-memory collection.

    The collection is snapshotted on construction and on ``set_items``;
    the caller's sequence is never mutated or retained.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        page_size: int = DEFAULT_PAGE_SIZE,
        initial_page: int = 1,
    ):
        self._items: tuple[T, ...] = tuple(items)
        super().__init__(page_size=page_size, initial_page=initial_page)

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def total_items(self) -> int:
        return len(self._items)

    @property
    def paginated_data(self) -> list[T]:
        start = (self.current_page - 1) * self._page_size
        return list(self._items[start : start + self._page_size])

    def set_items(self, items: Iterable[T]) -> None:
        """Replace the source collection, pulling the page back into range."""
        self._items = tuple(items)
        self._clamp()


class ServerPaginator(_PageState):
    """Server-side pagination: derives ``offset``/``limit`` from a reported count."""

    def __init__(
        self,
        total_items: int,
        page_size: int = DEFAULT_PAGE_SIZE,
        initial_page: int = 1,
    ):
        self._total_items = max(total_items, 0)
        super().__init__(page_size=page_size, initial_page=initial_page)

    @property
    def total_items(self) -> int:
        return self._total_items

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self._page_size

    @property
    def limit(self) -> int:
        return self._page_size

    def set_total_items(self, total_items: int) -> None:
        """Record a new count reported by the data source."""
        self._total_items = max(total_items, 0)
        self._clamp()


def paginate(items: Sequence[T], page: int, page_size: int) -> Paginator[T]:
    """Build a ``Paginator`` positioned on ``page`` (clamped)."""
    return Paginator(items, page_size=page_size, initial_page=page)
