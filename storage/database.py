"""SQLAlchemy engine, session factory and declarative base for the history store."""

from typing import Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from config.settings import settings


class Base(DeclarativeBase):
    pass


def build_engine(database_url: Optional[str] = None) -> Engine:
    url = database_url or settings.database_url
    if url.startswith("sqlite"):
        # In-memory SQLite must share one connection across threads
        if url in ("sqlite://", "sqlite:///:memory:"):
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create tables that do not exist yet."""
    # Imported for its side effect of registering the table on Base.metadata
    from storage import calculation_history  # noqa: F401

    Base.metadata.create_all(engine)
