"""Database engine and session management for TodoList."""
from contextlib import contextmanager
from typing import Generator, Optional
import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from todolist.config.settings import get_settings
from todolist.models import Base
from todolist.utils.logger import get_logger

logger = get_logger(__name__)


# Cascades on tasks/preferences only work with foreign keys switched on
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Configure SQLite connection."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_db_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create the process-wide database engine.

    Args:
        url: Database URL, defaults to the configured DB_URL
        echo: Whether to echo SQL, defaults to the configured DB_ECHO

    Returns:
        Engine: A new SQLAlchemy engine
    """
    settings = get_settings()
    url = url or settings.DB_URL
    echo = settings.DB_ECHO if echo is None else echo

    kwargs = {}
    if url.startswith("sqlite"):
        # The Streamlit script thread changes between reruns
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    logger.debug("Creating database engine", url=url)
    return create_engine(url, echo=echo, **kwargs)


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(engine)
    logger.info("Database initialized", url=str(engine.url))


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to the given engine."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


@contextmanager
def session_scope(factory: sessionmaker) -> Generator[Session, None, None]:
    """Provide a transactional scope around a series of operations."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
