"""
repositories/property_repo.py
------------------------------
Data access layer for rental listings.
All SQL queries related to the `properties` table live here.
"""

from typing import Mapping, Union

from config import DEFAULT_RESULT_LIMIT
from db.query_builder import FilterQuery
from models.property import Property, PropertySearchOptions
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)

# Column order for INSERT; matches the values tuple built in `add`.
INSERT_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)

SEARCH_BASE_SQL = """
    SELECT properties.*, AVG(property_reviews.rating) AS average_rating
    FROM properties
    LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
"""


class PropertyRepository(BaseRepository):
    """Repository for searching and creating rows in the properties table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Property) -> Property:
        """
        Insert a new property.

        Args:
            prop: The Property to persist. ``cost_per_night`` must already be in cents.

        Returns:
            The stored Property, with its generated ``id``.

        Raises:
            ConstraintViolation: If ``owner_id`` does not reference a user,
                or a required column is missing.
        """
        placeholders = ", ".join(["%s"] * len(INSERT_COLUMNS))
        sql = f"""
            INSERT INTO properties ({", ".join(INSERT_COLUMNS)})
            VALUES ({placeholders})
            RETURNING *;
        """
        values = tuple(getattr(prop, column) for column in INSERT_COLUMNS)
        row = self._fetch_one(sql, values, "add property", commit=True)
        created = self._row_to_property(row)
        logger.info(f"Added property #{created.id} for owner {created.owner_id}")
        return created

    # ── READ ──────────────────────────────────────────────

    def search(
        self,
        options: Union[PropertySearchOptions, Mapping, None] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> list[Property]:
        """
        Search properties, cheapest first.

        Args:
            options: Filters to apply; see PropertySearchOptions. A plain
                mapping is accepted and parsed with ``from_dict``.
            limit: Maximum number of rows.

        Returns:
            List of Property objects with ``average_rating`` filled in.
        """
        sql, params = self.build_search_query(options, limit)
        rows = self._fetch_all(sql, params, "search properties")
        return [self._row_to_property(r) for r in rows]

    @staticmethod
    def build_search_query(
        options: Union[PropertySearchOptions, Mapping, None] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> tuple[str, list]:
        """
        Build the property search statement and its parameters.

        Filters are applied in a fixed order: city, owner, price range, then
        minimum rating. The rating filter goes in HAVING because it tests the
        per-property average.
        """
        if not isinstance(options, PropertySearchOptions):
            options = PropertySearchOptions.from_dict(options)

        query = FilterQuery(SEARCH_BASE_SQL)

        if options.city is not None:
            query.where("properties.city LIKE %s", f"%{options.city}%")

        if options.owner_id is not None:
            query.where("properties.owner_id = %s", options.owner_id)

        price_range = options.price_range_in_cents()
        if price_range:
            query.where("properties.cost_per_night BETWEEN %s AND %s", *price_range)

        query.group_by("properties.id")

        if options.minimum_rating is not None:
            query.having("AVG(property_reviews.rating) >= %s", options.minimum_rating)

        query.order_by("properties.cost_per_night, properties.id").limit(limit)
        return query.build()

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_property(row: dict) -> Property:
        """Convert a database row to a Property domain object."""
        rating = row.get("average_rating")
        return Property(
            id=row["id"],
            owner_id=row["owner_id"],
            title=row["title"],
            description=row["description"],
            thumbnail_photo_url=row["thumbnail_photo_url"],
            cover_photo_url=row["cover_photo_url"],
            cost_per_night=row["cost_per_night"],
            street=row["street"],
            city=row["city"],
            province=row["province"],
            post_code=row["post_code"],
            country=row["country"],
            parking_spaces=row["parking_spaces"],
            number_of_bathrooms=row["number_of_bathrooms"],
            number_of_bedrooms=row["number_of_bedrooms"],
            average_rating=float(rating) if rating is not None else None,
        )
