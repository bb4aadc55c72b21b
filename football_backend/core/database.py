from sqlmodel import SQLModel, Session, create_engine
from sqlalchemy.ext.asyncio import create_async_engine

from football_backend.core.config import settings

# --- Engines ---
# SQLite connections are shared across the request threadpool
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

sync_engine = create_engine(settings.database_url, echo=settings.sql_echo, connect_args=connect_args)   # Sync (routes, seeding)
engine = create_async_engine(settings.resolved_async_database_url(), echo=settings.sql_echo, future=True)  # Async (table creation)


# --- Initialize DB tables ---
async def init_db():
    """Create tables asynchronously if they don't exist."""
    # Register every table with SQLModel.metadata before create_all
    from football_backend import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


# --- Sync session for seeding/scripts ---
def get_sync_session():
    return Session(sync_engine)


# --- DB session (used in routes) ---
def get_session():
    with Session(sync_engine) as session:
        yield session
