from typing import Literal

from fastapi import Query

from board.config import settings
from board.database import async_session
from board.schemas import PageRequest, SortOrder
from board.unit_of_work import SqlAlchemyUnitOfWork


def get_uow() -> SqlAlchemyUnitOfWork:
    """
    FastAPI dependency returning a fresh unit of work per request.

    The unit of work does not open a transaction by itself; each service
    function opens and closes its own scope.  Tests override this
    dependency to point at the test session factory.
    """
    return SqlAlchemyUnitOfWork(async_session)


class PaginationParams:
    """
    Reusable FastAPI dependency that parses pagination / sorting query
    parameters into a ``PageRequest``.

    Attributes
    ----------
    page:
        0-based page number.
    page_size:
        Number of items per page, clamped to ``settings.MAX_PAGE_SIZE``
        regardless of the value supplied by the caller.
    sort_by:
        Optional column name to sort by.  Unknown columns are ignored by
        the repository, which falls back to key order.
    sort_order:
        ``"asc"`` or ``"desc"``.
    """

    def __init__(
        self,
        page: int = Query(
            0,
            ge=0,
            description="Page number (0-based).",
        ),
        page_size: int = Query(
            settings.DEFAULT_PAGE_SIZE,
            ge=1,
            description="Number of items returned per page.",
        ),
        sort_by: str | None = Query(
            None,
            description="Column name to sort results by.",
        ),
        sort_order: Literal["asc", "desc"] = Query(
            "asc",
            description="Sort direction: 'asc' or 'desc'.",
        ),
    ) -> None:
        self.page = page
        self.page_size = min(page_size, settings.MAX_PAGE_SIZE)
        self.sort_by = sort_by
        self.sort_order = sort_order

    def to_page_request(self) -> PageRequest:
        sort = [SortOrder(field=self.sort_by, direction=self.sort_order)] if self.sort_by else []
        return PageRequest(page=self.page, page_size=self.page_size, sort=sort)
