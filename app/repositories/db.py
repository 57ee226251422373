"""DuckDB connection management and transactions."""

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()


def db_exists() -> bool:
    """Check if database file exists."""
    return Path(DB_PATH).exists()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if main tables already exist."""
    try:
        result = conn.execute("SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'voter'").fetchone()
        return result[0] > 0
    except duckdb.Error:
        return False


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def connect(path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Open a connection with tables in place. Use ':memory:' for a throwaway DB."""
    conn = duckdb.connect(path)
    init_tables(conn)
    logger.debug("DB connected: {}", path)
    return conn


def get_db() -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    if not hasattr(_local, "conn") or _local.conn is None:
        if not db_exists():
            logger.warning("DB not found: {}. Creating empty DB.", DB_PATH)
        _local.conn = connect(DB_PATH)
    return _local.conn


def close_db() -> None:
    """Close thread-local connection."""
    if hasattr(_local, "conn") and _local.conn:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")


class TransactionManager:
    """All-or-nothing writes on one connection, one writer at a time.

    Nested ``atomic()`` blocks join the outermost transaction. Reads go through
    ``snapshot()`` so they never see another caller's uncommitted writes.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        self._conn = conn
        self._lock = threading.RLock()
        self._depth = 0
        self._pending: list[Callable[[], None]] = []

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0

    @contextmanager
    def atomic(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Run the block in a transaction; roll everything back on any exception."""
        with self._lock:
            outermost = self._depth == 0
            if outermost:
                self._conn.execute("BEGIN TRANSACTION")
            self._depth += 1
            try:
                yield self._conn
            except BaseException:
                self._depth -= 1
                if outermost:
                    self._conn.execute("ROLLBACK")
                    dropped = len(self._pending)
                    self._pending.clear()
                    logger.debug("Transaction rolled back ({} pending callbacks dropped)", dropped)
                raise
            self._depth -= 1
            if outermost:
                callbacks, self._pending = self._pending, []
                try:
                    self._conn.execute("COMMIT")
                except duckdb.Error:
                    logger.error("Commit failed ({} pending callbacks dropped)", len(callbacks))
                    self._discard()
                    raise
                for callback in callbacks:
                    callback()

    def _discard(self) -> None:
        """Roll back whatever a failed COMMIT left open."""
        try:
            self._conn.execute("ROLLBACK")
        except duckdb.TransactionException:
            logger.debug("No open transaction after failed commit")

    @contextmanager
    def snapshot(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Hold the writer lock for a consistent read."""
        with self._lock:
            yield self._conn

    def on_commit(self, callback: Callable[[], None]) -> None:
        """Run callback after the current transaction commits (now, if none is open)."""
        with self._lock:
            if self._depth == 0:
                callback()
            else:
                self._pending.append(callback)
