"""
repositories/base.py
--------------------
Shared plumbing for repositories: borrow a pooled connection, run one
statement, commit or roll back, give the connection back.
"""

from typing import Any, Optional, Sequence

import psycopg2
from psycopg2 import extras

from db.errors import ConstraintViolation, QueryError
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseRepository:
    """Base class holding the pool every repository runs its queries on."""

    def __init__(self, pool):
        """
        Args:
            pool: A ``db.connection.ConnectionPool`` (or any object exposing
                ``get_connection()`` and ``release_connection(conn)``).
        """
        self.pool = pool

    def _fetch_one(self, sql: str, params: Sequence[Any], action: str,
                   commit: bool = False) -> Optional[dict]:
        """Run ``sql`` and return the first row as a dict, or None."""
        return self._execute(sql, params, action, commit=commit, many=False)

    def _fetch_all(self, sql: str, params: Sequence[Any], action: str) -> list[dict]:
        """Run ``sql`` and return every row as a dict."""
        return self._execute(sql, params, action, commit=False, many=True)

    def _execute(self, sql: str, params: Sequence[Any], action: str,
                 commit: bool, many: bool):
        """
        Execute a single statement on a borrowed connection.

        Args:
            sql: Statement with ``%s`` placeholders.
            params: Values for the placeholders, in order.
            action: Short description used in log and error messages.
            commit: Commit after executing (writes).
            many: Return all rows instead of the first one.

        Raises:
            ConstraintViolation: If the statement broke a table constraint.
            QueryError: For any other database failure.
        """
        conn = self.pool.get_connection()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, tuple(params))
                rows = cur.fetchall() if many else cur.fetchone()
            if commit:
                conn.commit()
            if many:
                return [dict(r) for r in rows]
            return dict(rows) if rows is not None else None
        except psycopg2.IntegrityError as e:
            self._rollback(conn)
            logger.error(f"Failed to {action}: {e}")
            raise ConstraintViolation(f"Failed to {action}", e) from e
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to {action}: {e}")
            raise QueryError(f"Failed to {action}", e) from e
        finally:
            self.pool.release_connection(conn)

    @staticmethod
    def _rollback(conn) -> None:
        if not conn.closed:
            conn.rollback()
