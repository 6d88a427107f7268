"""
Pagination engine.

``Page`` is a request for one page of results, ``Paged`` the response
envelope. Storage adapters bound their queries with ``Page.offset()`` and
``Page.size`` and wrap the rows with ``to_paged``; ``get_page`` slices a
complete in-memory sequence.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from reverie.domain.exceptions import InvalidPageError

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 100


@dataclass(frozen=True)
class Page:
    """Pagination request: 1-based page number and page size, both positive"""

    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if self.page < 1 or self.size < 1:
            raise InvalidPageError(self.page, self.size)

    @classmethod
    def new(cls, page: int, size: int) -> "Page":
        """Build a page request (raises InvalidPageError)"""
        return cls(page=page, size=size)

    @property
    def number(self) -> int:
        return self.page

    def offset(self) -> int:
        """Number of rows to skip before this page"""
        if self.page <= 1:
            return 0
        return (self.page - 1) * self.size


@dataclass
class Paged(Generic[T]):
    """Paged data response: resolved page number plus the rows of that page"""

    page: int = DEFAULT_PAGE
    data: list[T] = field(default_factory=list)


def to_paged(data: Sequence[T], page: Page) -> Paged[T]:
    """
    Wrap rows that were already limited to ``page.size``.

    A longer sequence means the caller mis-bounded its query; that is a
    programming error, not a user-facing one.
    """
    if len(data) > page.size:
        raise AssertionError(
            f"to_paged received {len(data)} rows for a page of size {page.size}"
        )
    return Paged(page=page.page, data=list(data))


def get_page(data: Sequence[T], page: Page) -> Paged[T]:
    """
    Return the requested page of a complete sequence.

    Short sequences (fewer items than a page) come back whole as page 1.
    A page number past the end is clamped to the last non-empty page.
    """
    if len(data) < page.size:
        return Paged(page=1, data=list(data))

    last_page = -(-len(data) // page.size)
    number = min(page.page, last_page)
    offset = (number - 1) * page.size
    return Paged(page=number, data=list(data[offset : offset + page.size]))
