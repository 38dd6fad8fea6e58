"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool so the async service layer can run
queries from worker threads. Callers that find every connection busy wait
for one to be released instead of failing.
"""

import threading
from contextlib import contextmanager

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MIN, DB_POOL_MAX
from db.errors import QueryError
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionPool:
    """A bounded set of live connections shared by all repositories."""

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN,
        max_conn: int = DB_POOL_MAX,
    ) -> None:
        """
        Open the pool.

        Args:
            dsn: libpq connection string or URL.
            min_conn: Minimum number of connections to keep open.
            max_conn: Maximum number of connections allowed.

        Raises:
            QueryError: If the database is unreachable.
        """
        try:
            self._pool = pool.ThreadedConnectionPool(min_conn, max_conn, dsn)
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise QueryError("could not connect to the database", e) from e
        self._slots = threading.BoundedSemaphore(max_conn)
        logger.info(f"Database connection pool initialized ({min_conn}-{max_conn} connections).")

    def get_connection(self):
        """
        Get a connection from the pool, waiting while all of them are in use.

        Returns:
            A psycopg2 connection object.

        Raises:
            QueryError: If the pool has been closed or a new connection fails.
        """
        if self._pool.closed:
            raise QueryError("connection pool is closed")
        self._slots.acquire()
        try:
            return self._pool.getconn()
        except (psycopg2.Error, pool.PoolError) as e:
            self._slots.release()
            logger.error(f"Failed to acquire a connection: {e}")
            raise QueryError("could not acquire a database connection", e) from e

    def release_connection(self, conn) -> None:
        """
        Return a connection back to the pool.

        Args:
            conn: The psycopg2 connection to release.
        """
        try:
            if not self._pool.closed:
                self._pool.putconn(conn)
        finally:
            self._slots.release()

    @contextmanager
    def connection(self):
        """Borrow a connection for the duration of a ``with`` block."""
        conn = self.get_connection()
        try:
            yield conn
        finally:
            self.release_connection(conn)

    @property
    def closed(self) -> bool:
        return self._pool.closed

    def close(self) -> None:
        """Close all connections in the pool."""
        if not self._pool.closed:
            self._pool.closeall()
            logger.info("Database connection pool closed.")
