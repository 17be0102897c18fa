from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from contextlib import contextmanager
import structlog

from app.core.config import get_settings
from app.db.tables import metadata

logger = structlog.get_logger()

_engine: Engine = None
SessionLocal = sessionmaker(autocommit=False, autoflush=False)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless this is on
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(url: str, **kwargs) -> Engine:
    """
    Create an engine for the given URL.
    PostgreSQL gets a connection pool:
    pool_size=5: maintain 5 connections ready
    max_overflow=10: allow 10 extra connections under load
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    kwargs.setdefault("pool_size", 5)
    kwargs.setdefault("max_overflow", 10)
    return create_engine(url, **kwargs)


def get_engine() -> Engine:
    """Get or create the process-wide engine (singleton pattern)"""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = make_engine(settings.sqlalchemy_url, echo=settings.debug)
    return _engine


@contextmanager
def get_db_session(engine: Engine = None):
    """
    Context manager for database sessions.
    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT * FROM students"))
    """
    session = SessionLocal(bind=engine or get_engine())
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def create_tables(engine: Engine = None) -> None:
    """Create any missing tables. Existing tables are left untouched."""
    metadata.create_all(engine or get_engine())
    logger.info("tables_ready")


def test_db_connection(engine: Engine = None) -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session(engine) as db:
            result = db.execute(text("SELECT 1 as test"))
            row = result.fetchone()
            return row[0] == 1
    except Exception as e:
        logger.warning("db_connection_failed", error=str(e))
        return False
