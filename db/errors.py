"""
db/errors.py
------------
Exceptions raised by the data-access layer.

A lookup that finds nothing is not an error: repositories return ``None``.
Everything that goes wrong while talking to PostgreSQL surfaces as a
``QueryError`` carrying the driver exception.
"""

from typing import Optional


class QueryError(Exception):
    """Malformed SQL, type mismatch or connectivity failure."""

    def __init__(self, message: str, original: Optional[BaseException] = None):
        super().__init__(message)
        self.original = original


class ConstraintViolation(QueryError):
    """A write was rejected by a table constraint (unique, foreign key, not null, check)."""
