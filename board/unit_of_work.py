"""Unit of Work: one transaction scope plus the repository bound to it."""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from board.database import READ_ONLY_KEY
from board.repository import AbstractPostRepository, SqlAlchemyPostRepository


logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work.

    Callers open a scope with ``async with uow.transaction():`` and use
    ``uow.posts`` inside it.  A read-write scope commits when the block
    exits normally; any exception rolls it back and propagates.  A
    read-only scope never commits and rejects writes; closing it releases
    the underlying transaction without expiring what was loaded.
    """

    posts: AbstractPostRepository

    _active: bool = False

    @asynccontextmanager
    async def transaction(self, *, read_only: bool = False):
        if self._active:
            raise RuntimeError("Transaction already active on this unit of work")
        self._active = True
        try:
            await self._begin(read_only)
            try:
                yield self
            except BaseException:
                await self.rollback()
                raise
            if not read_only:
                await self.commit()
        finally:
            await self._close()
            self._active = False

    @abstractmethod
    async def _begin(self, read_only: bool):
        """Start a transaction and bind ``self.posts`` to it."""
        raise NotImplementedError

    @abstractmethod
    async def commit(self):
        raise NotImplementedError

    @abstractmethod
    async def rollback(self):
        raise NotImplementedError

    async def _close(self):
        """Release per-transaction resources."""


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """Unit of Work over an ``AsyncSession`` created fresh for each transaction."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    async def _begin(self, read_only: bool):
        self.session = self.session_factory()
        self.session.info[READ_ONLY_KEY] = read_only
        self.posts = SqlAlchemyPostRepository(self.session)
        if read_only and self.session.bind is not None and self.session.bind.dialect.name == "postgresql":
            # Lets the server skip write bookkeeping for this transaction.
            await self.session.execute(text("SET TRANSACTION READ ONLY"))

    async def commit(self):
        await self.session.commit()
        logger.debug("Committed transaction")

    async def rollback(self):
        await self.session.rollback()
        logger.debug("Rolled back transaction")

    async def _close(self):
        # close() ends any open DB transaction without expiring instances.
        if self.session is not None:
            await self.session.close()
            self.session = None
