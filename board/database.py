from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase, Session

from board.config import settings
from board.exceptions import ReadOnlyTransactionError
from board.middleware import install_query_counter

# Module-level engine variable allows tests to override with a test engine.
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
)

# Register the per-request SQL query counter on the production engine.
install_query_counter(engine)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


READ_ONLY_KEY = "read_only"


@event.listens_for(Session, "before_flush")
def _reject_read_only_flush(session, flush_context, instances):
    """
    Refuse to flush pending changes from a session marked read-only.

    The flag lives in ``session.info`` and is set by the unit of work when
    it opens a read-only transaction.  Autoflush goes through here too, so
    a stray mutation fails on the next query rather than at commit time.
    """
    if not session.info.get(READ_ONLY_KEY):
        return
    if session.new or session.dirty or session.deleted:
        raise ReadOnlyTransactionError("Cannot write inside a read-only transaction")
