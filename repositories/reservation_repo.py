"""
repositories/reservation_repo.py
---------------------------------
Data access layer for reservations.
"""

from config import DEFAULT_RESULT_LIMIT
from models.reservation import Reservation
from repositories.base import BaseRepository


class ReservationRepository(BaseRepository):
    """Read-only queries over the reservations table."""

    def get_past_for_guest(
        self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT
    ) -> list[Reservation]:
        """
        List a guest's completed stays, most recent first.

        A stay is completed when its end date is before today. Each row carries
        the property's title, nightly cost and average review rating; the
        rating is None for properties nobody has reviewed yet.

        Args:
            guest_id: The guest's user id.
            limit: Maximum number of rows.

        Returns:
            List of Reservation objects ordered by start date descending.
        """
        sql = """
            SELECT reservations.id, reservations.guest_id, reservations.property_id,
                   reservations.start_date, reservations.end_date,
                   properties.title, properties.cost_per_night,
                   AVG(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = %s
              AND reservations.end_date < CURRENT_DATE
            GROUP BY properties.id, reservations.id
            ORDER BY reservations.start_date DESC
            LIMIT %s;
        """
        rows = self._fetch_all(
            sql, (guest_id, limit), f"fetch reservations for guest #{guest_id}"
        )
        return [self._row_to_reservation(r) for r in rows]

    @staticmethod
    def _row_to_reservation(row: dict) -> Reservation:
        """Convert a database row to a Reservation domain object."""
        rating = row["average_rating"]
        return Reservation(
            id=row["id"],
            guest_id=row["guest_id"],
            property_id=row["property_id"],
            start_date=row["start_date"],
            end_date=row["end_date"],
            title=row["title"],
            cost_per_night=row["cost_per_night"],
            average_rating=float(rating) if rating is not None else None,
        )
