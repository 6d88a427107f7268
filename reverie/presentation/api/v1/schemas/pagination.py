from typing import Generic, TypeVar

from pydantic import BaseModel

from reverie.domain.pagination import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, Page

T = TypeVar("T")


class PageQuery(BaseModel):
    """
    Pagination query parameters.

    Bounds are checked by Page so that a bad page answers with the same
    validation error body as every other domain validation failure.
    """

    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE

    def to_page(self) -> Page:
        return Page.new(self.page, self.size)


class PagedResponse(BaseModel, Generic[T]):
    """Paged data response"""

    page: int
    data: list[T]
