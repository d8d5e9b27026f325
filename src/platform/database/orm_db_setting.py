"""
SQLAlchemy engine and session management

This module provides:
1. Base: declarative base shared by all ORM models
2. Database: owns one engine + session maker (injected via the DI container)

Every write session commits before the context manager exits, so a value
returned to the caller has already been flushed to the database file.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA synchronous=FULL')
    cursor.close()


class Database:
    def __init__(self, db_url: str, *, echo: bool = False) -> None:
        self._db_url = db_url
        self._echo = echo
        self._engine: Engine | None = None
        self._session_maker: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        url = make_url(self._db_url)
        connect_args: dict[str, Any] = {}

        if url.get_backend_name() == 'sqlite':
            # Store calls arrive from FastAPI's threadpool; the store lock serializes them
            connect_args['check_same_thread'] = False
            if url.database and url.database != ':memory:':
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        engine = create_engine(url, echo=self._echo, connect_args=connect_args)
        if url.get_backend_name() == 'sqlite':
            event.listen(engine, 'connect', _set_sqlite_pragma)

        Logger.base.info(f'🔗 [DB] Engine created for {url.render_as_string(hide_password=True)}')
        return engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        if self._session_maker is None:
            self._session_maker = sessionmaker(self.engine, expire_on_commit=False)

        session = self._session_maker()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_db_and_tables(self) -> None:
        # Import models so their tables are registered on Base.metadata
        from src.service.concert_ticket.driven_adapter.model import (  # noqa: F401
            IdCounterModel,
            TicketModel,
        )

        Base.metadata.create_all(self.engine)
        Logger.base.info('🗄️  [DB] Tables created')

    def drop_db_and_tables(self) -> None:
        from src.service.concert_ticket.driven_adapter.model import (  # noqa: F401
            IdCounterModel,
            TicketModel,
        )

        Base.metadata.drop_all(self.engine)
        Logger.base.info('🧹 [DB] Tables dropped')

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_maker = None
