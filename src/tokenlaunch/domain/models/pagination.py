"""Page envelope handed over by the data-access layer."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PaginationMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: int = 1
    limit: int = 0
    total: int = 0
    total_pages: int = Field(0, alias="totalPages")
    has_next_page: bool = Field(False, alias="hasNextPage")
    has_previous_page: bool = Field(False, alias="hasPreviousPage")


class Page(BaseModel, Generic[T]):
    """One page of raw indexer records. ``data`` is left as-is; parsers validate each item."""

    data: list[T] = []
    meta: PaginationMeta = PaginationMeta()


def page_records(page: "Page | list | None") -> list:
    """Records of a Page, a bare list, or nothing."""
    if page is None:
        return []
    if isinstance(page, Page):
        return list(page.data)
    return list(page)
