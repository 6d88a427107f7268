"""Tests for the pagination engine"""

import pytest

from reverie.domain.exceptions import InvalidPageError
from reverie.domain.pagination import (DEFAULT_PAGE, DEFAULT_PAGE_SIZE, Page,
                                       Paged, get_page, to_paged)


class TestPage:
    def test_defaults(self):
        page = Page()

        assert (page.page, page.size) == (DEFAULT_PAGE, DEFAULT_PAGE_SIZE) == (1, 100)

    @pytest.mark.parametrize("page,size", [(0, 10), (1, 0), (-1, 10), (3, -5)])
    def test_non_positive_values_are_rejected(self, page, size):
        with pytest.raises(InvalidPageError) as exc_info:
            Page.new(page, size)

        assert (exc_info.value.page, exc_info.value.size) == (page, size)

    @pytest.mark.parametrize("page,size,offset", [(1, 10, 0), (2, 10, 10), (5, 3, 12)])
    def test_offset(self, page, size, offset):
        assert Page(page, size).offset() == offset

    def test_number(self):
        assert Page(4, 2).number == 4


class TestToPaged:
    def test_wraps_bounded_rows(self):
        assert to_paged([1, 2], Page(3, 2)) == Paged(page=3, data=[1, 2])

    def test_oversized_rows_are_a_programming_error(self):
        with pytest.raises(AssertionError, match="3 rows for a page of size 2"):
            to_paged([1, 2, 3], Page(1, 2))


class TestGetPage:
    def test_clamps_to_last_page(self):
        """
        GIVEN 25 items and a request for page 10 of size 10
        WHEN the page is taken
        THEN the last page (3) with the final five items is returned.
        """
        assert get_page(list(range(1, 26)), Page(10, 10)) == Paged(3, [21, 22, 23, 24, 25])

    def test_middle_page(self):
        assert get_page(list(range(1, 26)), Page(2, 10)) == Paged(2, list(range(11, 21)))

    def test_short_sequence_is_page_one(self):
        data = ["a", "b", "c"]

        assert get_page(data, Page(7, 10)) == Paged(page=1, data=data)

    def test_empty_sequence(self):
        assert get_page([], Page(2, 10)) == Paged(page=1, data=[])

    def test_exact_multiple_never_returns_empty_page(self):
        data = list(range(20))

        assert get_page(data, Page(3, 10)) == Paged(2, list(range(10, 20)))

    def test_exactly_one_page(self):
        data = list(range(10))

        assert get_page(data, Page(1, 10)) == Paged(1, data)
        assert get_page(data, Page(4, 10)) == Paged(1, data)

    @pytest.mark.parametrize("length", range(0, 40, 7))
    @pytest.mark.parametrize("number", [1, 2, 5, 50])
    @pytest.mark.parametrize("size", [1, 3, 10])
    def test_properties(self, length, number, size):
        data = list(range(length))
        paged = get_page(data, Page(number, size))

        assert len(paged.data) <= size
        if data:
            assert paged.data
        if length < size:
            assert paged == Paged(1, data)
        assert paged.data == data[(paged.page - 1) * size : paged.page * size]
