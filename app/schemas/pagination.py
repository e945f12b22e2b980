from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel

from app.domain.pagination import Paginator, ServerPaginator

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic paginated response schema.

    ``page`` is the page actually served: requests past the last page are
    clamped, so it can differ from the requested one.
    """

    items: list[T]
    total: int
    page: int
    page_size: int
    total_pages: int
    pages: list[int | str]
    start_item: int
    end_item: int

    @classmethod
    def from_paginator(
        cls, items: Sequence[T], paginator: Paginator | ServerPaginator
    ) -> "PaginatedResponse[T]":
        start_item, end_item = paginator.item_range
        return cls(
            items=list(items),
            total=paginator.total_items,
            page=paginator.current_page,
            page_size=paginator.page_size,
            total_pages=paginator.total_pages,
            pages=paginator.pages,
            start_item=start_item,
            end_item=end_item,
        )
