import logging
import time
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tourbook.core.errors import PersistenceError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def _engine_kwargs(url: str, pool_size: int, pool_timeout: int) -> dict:
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # in-memory databases live and die with their one connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {
        "pool_pre_ping": True,   # test connection before use
        "pool_recycle": 1800,    # recycle every 30min
        "pool_size": pool_size,
        "max_overflow": 0,       # bounded: callers queue instead of opening more
        "pool_timeout": pool_timeout,
    }


class Database:
    """Persistence gateway: one engine + pool, one ORM session per unit of work.

    ``open()`` at startup, ``session()`` per request, ``close()`` at shutdown.
    """

    def __init__(self, url: str, pool_size: int = 10, pool_timeout: int = 30):
        self.url = url
        self.pool_size = pool_size
        self.pool_timeout = pool_timeout
        self.engine: Engine | None = None
        self._sessionmaker: sessionmaker | None = None

    @classmethod
    def from_settings(cls, settings) -> "Database":
        return cls(settings.DATABASE_URL, pool_size=settings.DB_POOL_SIZE, pool_timeout=settings.DB_POOL_TIMEOUT)

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self) -> "Database":
        if self.engine is None:
            self.engine = create_engine(self.url, **_engine_kwargs(self.url, self.pool_size, self.pool_timeout))
            self._sessionmaker = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
            logger.info("Database engine opened (%s)", self.engine.url.render_as_string(hide_password=True))
        return self

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database engine disposed")
        self.engine = None
        self._sessionmaker = None

    def create_all(self) -> None:
        """Create every table directly; migrations own the schema in deployment."""
        from tourbook.models import user, destination, tour_package, booking, payment, review  # noqa: F401
        Base.metadata.create_all(self.open().engine)

    def new_session(self) -> Session:
        """An unscoped session; the caller closes it."""
        if self._sessionmaker is None:
            raise RuntimeError("Database is not open")
        return self._sessionmaker()

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.new_session()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception("Database error: %s", e.__class__.__name__)
            raise PersistenceError() from e
        finally:
            db.close()


def get_db(request: Request) -> Iterator[Session]:
    with request.app.state.db.session() as db:
        yield db


def wait_for_db(url: str, timeout_s: int = 60, delay_s: int = 2) -> None:
    """Block until the database accepts connections, retrying on a fixed delay."""
    engine = create_engine(url, pool_pre_ping=True)
    start = time.time()
    logger.info("Waiting for database (timeout=%ss)", timeout_s)
    try:
        while True:
            try:
                with engine.connect() as conn:
                    conn.execute(text("SELECT 1"))
                logger.info("Database is ready.")
                return
            except SQLAlchemyError as e:
                if time.time() - start > timeout_s:
                    logger.error("Timed out waiting for database. Last error: %s", e)
                    raise
                logger.warning("Database not reachable yet, retrying in %ss", delay_s)
                time.sleep(delay_s)
    finally:
        engine.dispose()
