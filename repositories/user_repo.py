"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from models.user import User
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository(BaseRepository):
    """Repository for reading and creating rows in the users table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, user: User) -> User:
        """
        Insert a new user.

        No duplicate check is done here: the unique index on ``email``
        rejects a second account for the same address.

        Args:
            user: The User to persist (``id`` is ignored).

        Returns:
            The stored User, with its generated ``id``.

        Raises:
            ConstraintViolation: If the email is already registered.
        """
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        row = self._fetch_one(
            sql, (user.name, user.email, user.password), "add user", commit=True
        )
        created = self._row_to_user(row)
        logger.info(f"Added user #{created.id}")
        return created

    # ── READ ──────────────────────────────────────────────

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by exact email.

        Returns:
            A User, or None if nobody registered with that email.
        """
        sql = "SELECT * FROM users WHERE email = %s;"
        row = self._fetch_one(sql, (email,), "fetch user by email")
        return self._row_to_user(row) if row else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a user by primary key.

        Returns:
            A User, or None if the id does not exist.
        """
        sql = "SELECT * FROM users WHERE id = %s;"
        row = self._fetch_one(sql, (user_id,), f"fetch user #{user_id}")
        return self._row_to_user(row) if row else None

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: dict) -> User:
        """Convert a database row to a User domain object."""
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )
