"""
Membership Backend — List Filter Conditions
=============================================

What:  A closed set of filter predicates for list endpoints, and the code
       that turns them into SQLAlchemy WHERE clauses.
Why:   Route handlers describe *what* to filter on; services own the column
       mapping and the SQL. Keeping the predicate a small tagged value lets
       services dispatch on the comparison kind instead of trusting shape.

Composition rules:
    - Each recognized, non-empty query parameter contributes exactly one
      Condition. Absent parameters contribute nothing (not a match-all).
    - A service conjoins all conditions with AND.
    - An empty sequence means "no filter": every row is returned.

Comparison kinds:
    EQUALS      column = value
    CONTAINS    case-insensitive substring match (LIKE metacharacters in the
                value are escaped)
    DATE_RANGE  column in [day 00:00 UTC, next day 00:00 UTC)
"""

import datetime as dt
import enum
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence

from sqlalchemy.sql.elements import ColumnElement


class Comparison(str, enum.Enum):
    EQUALS = "equals"
    CONTAINS = "contains"
    DATE_RANGE = "date_range"


@dataclass(frozen=True)
class Condition:
    """One filter predicate: `field` compared to `value` by `comparison`."""

    field: str
    comparison: Comparison
    value: Any

    @classmethod
    def equals(cls, field: str, value: Any) -> "Condition":
        return cls(field, Comparison.EQUALS, value)

    @classmethod
    def contains(cls, field: str, value: str) -> "Condition":
        return cls(field, Comparison.CONTAINS, value)

    @classmethod
    def on_day(cls, field: str, day: dt.date) -> "Condition":
        return cls(field, Comparison.DATE_RANGE, day)


def day_bounds(day: dt.date) -> tuple[dt.datetime, dt.datetime]:
    """Return the UTC [start, end) pair covering `day`."""
    start = dt.datetime.combine(day, dt.time.min, tzinfo=dt.timezone.utc)
    return start, start + dt.timedelta(days=1)


def to_clause(condition: Condition, column: Any) -> ColumnElement:
    """Translate a single condition against the given column."""
    if condition.comparison is Comparison.EQUALS:
        return column == condition.value
    if condition.comparison is Comparison.CONTAINS:
        return column.icontains(condition.value, autoescape=True)
    if condition.comparison is Comparison.DATE_RANGE:
        start, end = day_bounds(condition.value)
        return (column >= start) & (column < end)
    raise ValueError(f"Unsupported comparison '{condition.comparison}'")


def compose_filters(
    conditions: Sequence[Condition],
    columns: Mapping[str, Any],
) -> List[ColumnElement]:
    """
    Map every condition onto its column and return the clauses in order.

    Raises:
        ValueError: A condition names a field the service does not expose
                    for filtering.
    """
    clauses = []
    for condition in conditions:
        try:
            column = columns[condition.field]
        except KeyError:
            raise ValueError(f"Unsupported filter field '{condition.field}'") from None
        clauses.append(to_clause(condition, column))
    return clauses
