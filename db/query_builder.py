"""
db/query_builder.py
-------------------
Builds SELECT statements whose WHERE/HAVING predicates depend on which
optional filters a caller supplied.

Every predicate is stored together with the values bound to it, so the
final statement and its parameter list are always assembled from the same
pairs. psycopg2 binds ``%s`` placeholders by position: the n-th placeholder
in the statement receives the n-th parameter.
"""

from dataclasses import dataclass
from typing import Any, Optional

PLACEHOLDER = "%s"


@dataclass(frozen=True)
class Clause:
    """A SQL fragment and the values for its placeholders, in order."""
    fragment: str
    values: tuple = ()

    def __post_init__(self) -> None:
        expected = self.fragment.count(PLACEHOLDER)
        if expected != len(self.values):
            raise ValueError(
                f"Clause {self.fragment!r} has {expected} placeholder(s) "
                f"but {len(self.values)} value(s) were given"
            )


class FilterQuery:
    """
    Assembles ``base WHERE ... GROUP BY ... HAVING ... ORDER BY ... LIMIT ...``.

    Usage::

        query = FilterQuery("SELECT * FROM properties")
        query.where("city LIKE %s", "%anc%")
        query.order_by("cost_per_night").limit(10)
        sql, params = query.build()
    """

    def __init__(self, base_sql: str):
        self.base_sql = base_sql.strip()
        self._where: list[Clause] = []
        self._having: list[Clause] = []
        self._group_by: Optional[str] = None
        self._order_by: Optional[str] = None
        self._limit: Optional[Clause] = None

    def where(self, fragment: str, *values: Any) -> "FilterQuery":
        """Add a predicate; all WHERE predicates are joined with AND."""
        self._where.append(Clause(fragment, values))
        return self

    def having(self, fragment: str, *values: Any) -> "FilterQuery":
        """Add a predicate on an aggregate, applied after grouping."""
        self._having.append(Clause(fragment, values))
        return self

    def group_by(self, expression: str) -> "FilterQuery":
        self._group_by = expression
        return self

    def order_by(self, expression: str) -> "FilterQuery":
        self._order_by = expression
        return self

    def limit(self, count: int) -> "FilterQuery":
        self._limit = Clause(f"LIMIT {PLACEHOLDER}", (count,))
        return self

    def build(self) -> tuple[str, list]:
        """
        Render the statement.

        Returns:
            ``(sql, params)`` where ``params`` lines up with the placeholders
            in ``sql`` from left to right.
        """
        parts = [self.base_sql]
        params: list = []

        if self._where:
            parts.append("WHERE " + " AND ".join(c.fragment for c in self._where))
            for clause in self._where:
                params.extend(clause.values)

        if self._group_by:
            parts.append(f"GROUP BY {self._group_by}")

        if self._having:
            parts.append("HAVING " + " AND ".join(c.fragment for c in self._having))
            for clause in self._having:
                params.extend(clause.values)

        if self._order_by:
            parts.append(f"ORDER BY {self._order_by}")

        if self._limit:
            parts.append(self._limit.fragment)
            params.extend(self._limit.values)

        return "\n".join(parts) + ";", params
