"""Unit tests for the pagination value types and the query-parameter parser."""
from board.config import settings
from board.dependencies import PaginationParams
from board.schemas import Page, PageRequest, SortOrder


def test_page_request_offset():
    assert PageRequest(page=0, page_size=10).offset == 0
    assert PageRequest(page=3, page_size=10).offset == 30


def test_page_of_computes_page_count():
    request = PageRequest(page=0, page_size=3)
    assert Page.of([], 0, request).pages == 0
    assert Page.of([1, 2, 3], 3, request).pages == 1
    assert Page.of([1, 2, 3], 7, request).pages == 3


def test_page_map_keeps_metadata():
    page = Page.of(["a", "b"], 5, PageRequest(page=1, page_size=2))
    mapped = page.map(str.upper)
    assert mapped.items == ["A", "B"]
    assert (mapped.total, mapped.page, mapped.page_size, mapped.pages) == (5, 1, 2, 3)


def test_pagination_params_without_sort():
    params = PaginationParams(page=2, page_size=15, sort_by=None, sort_order="asc")
    request = params.to_page_request()
    assert request == PageRequest(page=2, page_size=15, sort=[])


def test_pagination_params_with_sort():
    params = PaginationParams(page=0, page_size=5, sort_by="title", sort_order="desc")
    assert params.to_page_request().sort == [SortOrder(field="title", direction="desc")]


def test_pagination_params_clamps_page_size():
    params = PaginationParams(page=0, page_size=settings.MAX_PAGE_SIZE + 50, sort_by=None, sort_order="asc")
    assert params.page_size == settings.MAX_PAGE_SIZE


def test_page_map_with_item_type():
    mapped = Page.of([1, 2], 2, PageRequest()).map(str, str)
    assert isinstance(mapped, Page[str])
    assert mapped.items == ["1", "2"]
