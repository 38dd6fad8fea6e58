"""
services/lightbnb_service.py
-----------------------------
Awaitable entry points for the web layer.

Each coroutine runs one repository call on a worker thread, so many
requests can be in flight at once while the shared pool hands out (and
queues for) connections. Failures are not retried: the repository has
already logged them, and they reach the caller as QueryError or
ConstraintViolation. Lookups that find nothing resolve to None.
"""

import asyncio
from typing import Mapping, Optional, Union

from config import DEFAULT_RESULT_LIMIT
from db.connection import ConnectionPool
from models.property import Property, PropertySearchOptions
from models.reservation import Reservation
from models.user import User
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository


class LightBnBService:
    """Users, reservations and properties, backed by one connection pool."""

    def __init__(self, pool: ConnectionPool):
        self.pool = pool
        self.user_repo = UserRepository(pool)
        self.reservation_repo = ReservationRepository(pool)
        self.property_repo = PropertyRepository(pool)

    # ── Users ─────────────────────────────────────────────

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return await asyncio.to_thread(self.user_repo.get_by_email, email)

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        return await asyncio.to_thread(self.user_repo.get_by_id, user_id)

    async def create_user(self, user: Union[User, Mapping]) -> User:
        """Register a user; a duplicate email raises ConstraintViolation."""
        if not isinstance(user, User):
            user = User.from_dict(user)
        return await asyncio.to_thread(self.user_repo.add, user)

    # ── Reservations ──────────────────────────────────────

    async def list_reservations_for_guest(
        self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT
    ) -> list[Reservation]:
        """Completed stays for a guest, most recent first."""
        return await asyncio.to_thread(
            self.reservation_repo.get_past_for_guest, guest_id, limit
        )

    # ── Properties ────────────────────────────────────────

    async def search_properties(
        self,
        options: Union[PropertySearchOptions, Mapping, None] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> list[Property]:
        """Filtered property search, cheapest first."""
        return await asyncio.to_thread(self.property_repo.search, options, limit)

    async def create_property(self, prop: Union[Property, Mapping]) -> Property:
        if not isinstance(prop, Property):
            prop = Property.from_dict(prop)
        return await asyncio.to_thread(self.property_repo.add, prop)

    def close(self) -> None:
        """Close the underlying pool."""
        self.pool.close()
