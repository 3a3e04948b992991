# shared/db.py
import os
import logging

from dotenv import load_dotenv
from sqlalchemy import Column, DateTime
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from sqlalchemy.sql import func

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./academy.db"

Base = declarative_base()

_engine = None
_session_factory = None


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


def get_engine():
    """Return the process-wide engine, creating it on first use."""
    global _engine, _session_factory
    if _engine is None:
        url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
        options = {}
        if url.startswith("sqlite"):
            # sqlite connections are bound to the event loop that opened them
            options["poolclass"] = NullPool
        _engine = create_async_engine(url, **options)
        _session_factory = async_sessionmaker(_engine, expire_on_commit=False, class_=AsyncSession)
        logger.info("Database engine initialised for %s", _engine.url.render_as_string(hide_password=True))
    return _engine


def get_session_factory():
    if _session_factory is None:
        get_engine()
    return _session_factory


async def dispose_engine():
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


async def get_db():
    async with get_session_factory()() as session:
        yield session


async def init_models():
    # Registers every model on Base.metadata before create_all
    import services.user_management.models  # noqa: F401
    import services.content_management.models  # noqa: F401
    import services.engagement.models  # noqa: F401
    import services.site_settings.models  # noqa: F401
    import services.site_content.models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
