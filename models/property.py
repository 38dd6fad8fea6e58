"""
models/property.py
------------------
Domain models for rental listings and the filters used to search them.
"""

from dataclasses import MISSING, dataclass, fields
from typing import Any, Mapping, Optional

from db.errors import QueryError
from utils.logger import get_logger

logger = get_logger(__name__)

CENTS_PER_UNIT = 100


def to_cents(amount: Any) -> int:
    """Convert a user-facing price (e.g. ``"49.99"`` or ``50``) to integer cents."""
    return int(round(float(amount) * CENTS_PER_UNIT))


def _to_int(value: Any) -> int:
    """Parse an integer that may arrive as ``"4"``, ``"4.0"`` or ``4.0``."""
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"expected a whole number, got {value!r}")
    return int(number)


@dataclass
class Property:
    """
    A rental listing.

    Attributes:
        id: Database primary key (None for new records).
        owner_id: User who lists the property.
        title: Listing headline.
        description: Free-text description, may be empty (NULL).
        thumbnail_photo_url: Small photo shown in search results.
        cover_photo_url: Large photo shown on the listing page.
        cost_per_night: Nightly cost in cents (price x 100).
        street, city, province, post_code, country: Address fields.
        parking_spaces: Number of parking spots.
        number_of_bathrooms: Number of bathrooms.
        number_of_bedrooms: Number of bedrooms.
        average_rating: Mean of the property's review ratings. Only set on rows
            returned by search, and None when the property has no reviews.
    """
    owner_id: int
    title: str
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    street: str
    city: str
    province: str
    post_code: str
    country: str
    description: Optional[str] = None
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    id: Optional[int] = None
    average_rating: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "Property":
        """
        Build a Property from a plain record, ignoring unknown keys.

        A missing required field becomes None, so the insert is rejected by
        the table's NOT NULL constraint rather than here.
        """
        kwargs = {}
        for f in fields(cls):
            if f.name in data:
                kwargs[f.name] = data[f.name]
            elif f.default is MISSING:
                kwargs[f.name] = None
        return cls(**kwargs)

    def __str__(self) -> str:
        return f"{self.title} ({self.city}) - {self.cost_per_night / CENTS_PER_UNIT:.2f}/night"


def _present(value: Any) -> bool:
    return value is not None and value != ""


@dataclass
class PropertySearchOptions:
    """
    Optional filters for property search. A field left as None is not applied.

    Attributes:
        city: Case-sensitive substring of the city name.
        owner_id: Only properties listed by this user.
        minimum_price_per_night: Lower price bound in currency units.
        maximum_price_per_night: Upper price bound in currency units.
            The price filter applies only when both bounds are set.
        minimum_rating: Lowest acceptable average review rating.
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[float] = None
    maximum_price_per_night: Optional[float] = None
    minimum_rating: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "PropertySearchOptions":
        """
        Build options from a plain record such as a parsed query string.

        Unknown keys are ignored and empty values (None or "") count as absent.
        Numeric fields given as strings are converted.

        Raises:
            QueryError: If a numeric field cannot be parsed; the parse error
                is chained as ``original``.
        """
        data = data or {}
        options = cls()
        try:
            if _present(data.get("city")):
                options.city = str(data["city"])
            if _present(data.get("owner_id")):
                options.owner_id = _to_int(data["owner_id"])
            for name in ("minimum_price_per_night", "maximum_price_per_night", "minimum_rating"):
                if _present(data.get(name)):
                    setattr(options, name, float(data[name]))
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid property search options {dict(data)!r}: {e}")
            raise QueryError("invalid property search options", e) from e
        return options

    def price_range_in_cents(self) -> Optional[tuple[int, int]]:
        """Return ``(min, max)`` in cents, or None unless both bounds are set."""
        if self.minimum_price_per_night is None or self.maximum_price_per_night is None:
            return None
        return to_cents(self.minimum_price_per_night), to_cents(self.maximum_price_per_night)
