"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool so request handlers running on
worker threads can check connections out concurrently.

The pool is owned by a `Database` object built at application startup and
handed to repositories explicitly; there is no module-level pool.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2 import pool

from config import (
    DATABASE_URL,
    DB_CONNECT_TIMEOUT,
    DB_POOL_MAX,
    DB_POOL_MIN,
)
from db.errors import DataAccessError
from utils.logger import get_logger

logger = get_logger(__name__)

PING_SENTINEL = 150


class Database:
    """Owns a psycopg2 connection pool and lends out connections."""

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN,
        max_conn: int = DB_POOL_MAX,
        connect_timeout: Optional[int] = DB_CONNECT_TIMEOUT,
        pool_factory=pool.ThreadedConnectionPool,
    ):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self.connect_timeout = connect_timeout
        self._pool_factory = pool_factory
        self._pool = None

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> None:
        """
        Initialize the connection pool.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        kwargs = {}
        if self.connect_timeout is not None:
            kwargs["connect_timeout"] = self.connect_timeout
        try:
            self._pool = self._pool_factory(self.min_conn, self.max_conn, self.dsn, **kwargs)
            logger.info(
                f"Database connection pool initialized ({self.min_conn}-{self.max_conn} connections)."
            )
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")

    @contextmanager
    def connection(self) -> Iterator:
        """
        Check a connection out of the pool for the duration of a block.

        The connection goes back to the pool when the block exits, whether
        it finishes, raises, or is cancelled.

        Raises:
            RuntimeError: If the pool has not been opened.
            DataAccessError: If the pool cannot hand out a connection.
        """
        if self._pool is None:
            raise RuntimeError("Database pool not initialized. Call open() first.")
        try:
            conn = self._pool.getconn()
        except (pool.PoolError, psycopg2.Error) as e:
            logger.error(f"Failed to get a connection from the pool: {e}")
            raise DataAccessError("database connection unavailable") from e
        try:
            yield conn
        finally:
            self._pool.putconn(conn)

    def ping(self) -> None:
        """
        Round-trip a sentinel value through the server to prove the pool works.

        Raises:
            DataAccessError: If the query fails or echoes the wrong value.
        """
        with self.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute("SELECT %s;", (PING_SENTINEL,))
                    row = cur.fetchone()
            except psycopg2.Error as e:
                logger.error(f"Database ping failed: {e}")
                raise DataAccessError("database ping failed") from e
        if row is None or row[0] != PING_SENTINEL:
            raise DataAccessError(f"database ping returned {row!r}")
        logger.info("Database ping succeeded.")
