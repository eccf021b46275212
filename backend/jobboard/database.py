"""Database engine and per-request sessions.

One pooled engine is created per process. Each request borrows a session
through ``get_db`` and hands it back when the request finishes, whether the
route succeeded or raised.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from jobboard.config import get_settings

settings = get_settings()

# Largest value an integer primary key can hold on SQLite and MySQL BIGINT
MAX_ID = 2**63 - 1


def _build_engine():
    if settings.is_sqlite:
        engine = create_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
        )

        # SQLite only honours ON DELETE CASCADE with foreign keys switched on
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )


engine = _build_engine()

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

Base = declarative_base()


def get_db():
    """FastAPI dependency: yields a database session, then closes it."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
