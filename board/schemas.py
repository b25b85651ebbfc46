import math
from typing import Callable, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")
U = TypeVar("U")


# --- Post requests ---

class PostBase(BaseModel):
    title: str
    content: str


class CreatePostRequest(PostBase):
    pass


class UpdatePostRequest(PostBase):
    pass


# --- Post responses ---

class PostResponse(PostBase):
    post_id: int
    model_config = ConfigDict(from_attributes=True)


class CreatePostResponse(PostResponse):
    pass


class ReadPostResponse(PostResponse):
    pass


class UpdatePostResponse(PostResponse):
    pass


class DeletePostResponse(BaseModel):
    post_id: int
    model_config = ConfigDict(from_attributes=True)


# --- Pagination ---

class SortOrder(BaseModel):
    field: str
    direction: Literal["asc", "desc"] = "asc"


class PageRequest(BaseModel):
    page: int = Field(0, ge=0)
    page_size: int = Field(20, ge=1)
    sort: list[SortOrder] = []

    @property
    def offset(self) -> int:
        return self.page * self.page_size


class Page(BaseModel, Generic[T]):
    """
    One slice of an ordered result set plus the metadata needed to walk
    the rest of it.

    ``page`` is 0-based; ``pages`` is 0 when there are no items at all.
    """

    items: list[T]
    total: int
    page: int
    page_size: int
    pages: int

    # Store-level pages carry ORM instances.
    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def of(cls, items: list, total: int, request: PageRequest) -> "Page":
        return cls(
            items=items,
            total=total,
            page=request.page,
            page_size=request.page_size,
            pages=math.ceil(total / request.page_size) if total > 0 else 0,
        )

    def map(self, fn: Callable[[T], U], item_type: type[U] | None = None) -> "Page[U]":
        """
        Return a page with *fn* applied to every item and the same metadata.

        Pass *item_type* to get a ``Page[item_type]`` back instead of a bare
        ``Page``.
        """
        page_cls = Page[item_type] if item_type is not None else Page
        return page_cls(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            page_size=self.page_size,
            pages=self.pages,
        )
