"""
models/reservation.py
---------------------
Domain model for a guest's completed stay, joined with its property.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Reservation:
    """
    A reservation row as listed for a guest.

    Attributes:
        id: Reservation primary key.
        guest_id: The user who stayed.
        property_id: The property that was booked.
        start_date: First night.
        end_date: Check-out date.
        title: Title of the booked property.
        cost_per_night: Property's nightly cost in cents.
        average_rating: Mean review rating of the property, None if unreviewed.
    """
    id: int
    guest_id: int
    property_id: int
    start_date: date
    end_date: date
    title: str
    cost_per_night: int
    average_rating: Optional[float] = None
