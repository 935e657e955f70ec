from contextlib import contextmanager
from typing import Any, Generator, Optional

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from trading_journal.config import Settings, get_settings

Base = declarative_base()


def build_engine(
    database_url: str,
    *,
    pool_size: int = 10,
    max_overflow: int = 20,
    sslmode: Optional[str] = None,
) -> Engine:
    """Create an engine tuned for the backing store (SQLite or PostgreSQL)."""
    is_sqlite = database_url.startswith("sqlite")
    kwargs: dict[str, Any] = {"pool_pre_ping": True, "future": True}

    if is_sqlite:
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": 30,  # busy timeout while another writer holds the lock
        }
    else:
        kwargs["pool_size"] = pool_size
        kwargs["max_overflow"] = max_overflow
        if sslmode:
            kwargs["connect_args"] = {"sslmode": sslmode}

    engine = create_engine(database_url, **kwargs)

    if is_sqlite and ":memory:" not in database_url:
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA synchronous=NORMAL")
            cursor.close()

    return engine


class Database:
    """
    Connection pool and session factory for one store.

    Created once at application startup and disposed at shutdown; request
    handlers and services receive sessions from it instead of reaching for a
    module-level engine.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = sessionmaker(
            bind=engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            future=True,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Database":
        settings = settings or get_settings()
        engine = build_engine(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            sslmode=settings.database_sslmode,
        )
        return cls(engine)

    def session(self) -> Session:
        return self.session_factory()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """Provide a transactional scope for database operations."""
        session = self.session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_all(self) -> None:
        """Create database tables if they do not yet exist."""
        from trading_journal import models  # noqa: F401  # ensure model metadata is registered

        Base.metadata.create_all(bind=self.engine)

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        self.engine.dispose()
