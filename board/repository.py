"""
Post repository — the persistence contract the service layer depends on,
and its SQLAlchemy implementation.

The SQLAlchemy repository is bound to one ``AsyncSession`` for the life of
a single unit of work.  It flushes but never commits; committing and
rolling back belong to ``board.unit_of_work``.
"""
from abc import ABC, abstractmethod

from sqlalchemy import asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.models import Post
from board.schemas import Page, PageRequest

# Columns that are safe to sort by; guards against arbitrary attribute access.
SORTABLE_COLUMNS: frozenset[str] = frozenset({"post_id", "title", "content"})


class AbstractPostRepository(ABC):
    """Key-indexed store of posts."""

    @abstractmethod
    async def find_by_id(self, post_id: int) -> Post | None:
        """Return the post for *post_id*, or None.  Never raises for a miss."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """
        Insert *post* when it has no key yet, otherwise update the stored
        record with the same key.  Returns the persisted post with its key
        populated.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, post: Post) -> None:
        raise NotImplementedError

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page[Post]:
        """
        Return one page of posts.

        Default order is ascending ``post_id``.  Sort entries naming a
        column outside ``SORTABLE_COLUMNS`` are ignored.
        """
        raise NotImplementedError


def _order_by_clauses(page_request: PageRequest) -> list:
    clauses = []
    for order in page_request.sort:
        if order.field not in SORTABLE_COLUMNS:
            continue
        column = getattr(Post, order.field)
        clauses.append(desc(column) if order.direction == "desc" else asc(column))
    # Unique tie-breaker keeps consecutive pages disjoint.
    clauses.append(asc(Post.post_id))
    return clauses


class SqlAlchemyPostRepository(AbstractPostRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, post_id: int) -> Post | None:
        return await self.session.get(Post, post_id)

    async def save(self, post: Post) -> Post:
        if post.post_id is None:
            self.session.add(post)
        else:
            # Re-attaches a detached post; returns the session-owned instance.
            post = await self.session.merge(post)
        await self.session.flush()
        return post

    async def delete(self, post: Post) -> None:
        await self.session.delete(post)
        await self.session.flush()

    async def find_all(self, page_request: PageRequest) -> Page[Post]:
        """
        Two SQL statements per call:
        1. COUNT — total posts.
        2. SELECT with ORDER BY and LIMIT/OFFSET.
        """
        count_q = select(func.count()).select_from(Post)
        total: int = (await self.session.execute(count_q)).scalar_one()

        posts_q = (
            select(Post)
            .order_by(*_order_by_clauses(page_request))
            .offset(page_request.offset)
            .limit(page_request.page_size)
        )
        result = await self.session.execute(posts_q)
        return Page.of(list(result.scalars().all()), total, page_request)
