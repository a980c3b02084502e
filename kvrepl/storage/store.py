"""
Key-Value Store.

Ordered byte-string store on a single SQLite file, accessed through a
synchronous SQLAlchemy engine. This is the storage collaborator the shell
talks to: open-or-create, point lookup, durable upsert, forward iteration
and an idempotent close.

Engine failures are translated into BackendError with LevelDB-style
status wording so the shell can show them verbatim:

    IO error: unable to open database file
    Corruption: file is not a database
    NotFound:

Usage:
    store = KeyValueStore.open_or_create("./data.db")
    store.put(b"k", b"v")
    store.get(b"k")            # b"v"
    for key, value in store.iterate():
        ...
    store.close()
"""

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine, event, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import URL
from sqlalchemy.exc import DatabaseError, OperationalError, SQLAlchemyError

from kvrepl.core.config import get_app_config
from kvrepl.core.config_schema import StorageSchema
from kvrepl.core.exceptions import BackendError, NotFoundError
from kvrepl.core.logging import get_logger
from kvrepl.storage.models import Base, Record

logger = get_logger(__name__)


def _status_detail(exc: Exception) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc)


def translate_error(exc: Exception) -> BackendError:
    """Map an engine exception onto a BackendError with status wording."""
    detail = _status_detail(exc)
    if isinstance(exc, (OperationalError, sqlite3.OperationalError)):
        return BackendError(f"IO error: {detail}")
    if isinstance(exc, (DatabaseError, sqlite3.DatabaseError)):
        return BackendError(f"Corruption: {detail}")
    return BackendError(f"IO error: {detail}")


@contextmanager
def _backend_errors() -> Iterator[None]:
    try:
        yield
    except (SQLAlchemyError, sqlite3.Error) as e:
        raise translate_error(e) from e


class KeyValueStore:
    """
    Handle on one open store.

    Create instances with open_or_create(); the constructor only binds an
    already verified engine.
    """

    def __init__(self, path: str, engine: Engine, settings: StorageSchema) -> None:
        self.path = path
        self._engine: Engine | None = engine
        self._settings = settings

    @classmethod
    def open_or_create(cls, path: str, settings: StorageSchema | None = None) -> "KeyValueStore":
        """
        Open the store at path, creating it when absent.

        An existing write-ahead log next to the file is picked up by SQLite
        on first connect.

        Raises:
            BackendError: If the file cannot be opened or is not a store
        """
        if not path:
            raise BackendError("Invalid argument: empty path")

        settings = settings or get_app_config().storage
        # The path is passed as the database component, never parsed as a URL.
        with _backend_errors():
            engine = create_engine(URL.create("sqlite", database=path))
        event.listen(engine, "connect", _pragma_listener(settings))

        try:
            with _backend_errors():
                with engine.begin() as conn:
                    Base.metadata.create_all(conn)
        except BackendError:
            engine.dispose()
            raise

        logger.info("Store opened", extra={"path": path, "journal_mode": settings.journal_mode})
        return cls(path, engine, settings)

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def _require_engine(self) -> Engine:
        if self._engine is None:
            raise BackendError("IO error: store is closed")
        return self._engine

    def get(self, key: bytes) -> bytes:
        """
        Point lookup.

        Raises:
            NotFoundError: If the key is absent
            BackendError: If the engine fails
        """
        engine = self._require_engine()
        with _backend_errors():
            with engine.connect() as conn:
                value = conn.execute(
                    select(Record.value).where(Record.key == key)
                ).scalar_one_or_none()

        if value is None:
            raise NotFoundError()
        return value

    def put(self, key: bytes, value: bytes, sync: bool = True) -> None:
        """Insert or replace key. With sync the commit is fsynced before returning."""
        engine = self._require_engine()
        level = self._settings.synchronous if sync else "NORMAL"

        stmt = sqlite_insert(Record).values(key=key, value=value)
        stmt = stmt.on_conflict_do_update(
            index_elements=[Record.key],
            set_={"value": stmt.excluded.value},
        )

        with _backend_errors():
            with engine.connect() as conn:
                # Must run before the implicit BEGIN of the upsert.
                conn.exec_driver_sql(f"PRAGMA synchronous = {level}")
                conn.execute(stmt)
                conn.commit()

        logger.debug("Record written", extra={"key_size": len(key), "value_size": len(value), "sync": sync})

    def iterate(self) -> Iterator[tuple[bytes, bytes]]:
        """Yield every (key, value) pair in ascending bytewise key order."""
        engine = self._require_engine()
        with _backend_errors():
            with engine.connect() as conn:
                result = conn.execute(
                    select(Record.key, Record.value).order_by(Record.key)
                )
                for key, value in result:
                    yield key, value

    def close(self) -> None:
        """Release the engine. Calling close on a closed store does nothing."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        logger.info("Store closed", extra={"path": self.path})


def _pragma_listener(settings: StorageSchema) -> Any:
    """Build a connect listener applying the configured pragmas."""

    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute(f"PRAGMA busy_timeout = {int(settings.busy_timeout_ms)}")
            cursor.execute(f"PRAGMA journal_mode = {settings.journal_mode}")
        finally:
            cursor.close()

    return _on_connect
