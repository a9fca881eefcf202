"""Life-domain categories and their static layout tables.

Every table here is keyed by ``Category`` and must cover every member.
The placer never branches on a specific category; it only looks values
up in these tables, so adding a category means adding one row to each.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """A life domain.  Values are the identifiers used by the task source."""

    WORK = "purple"
    LEARNING = "blue"
    RELATIONSHIPS = "yellow"
    HEALTH = "green"
    MAINTENANCE = "orange"
    URGENT = "red"


class UnknownCategoryError(ValueError):
    """Raised when an input document names a category that does not exist."""

    def __init__(self, value: object) -> None:
        self.value = value
        known = ", ".join(f"{c.name.lower()}/{c.value}" for c in Category)
        super().__init__(f"Unknown category {value!r} (known: {known})")


@dataclass(frozen=True)
class SearchPattern:
    """Where a category starts looking for space, and how far it looks.

    Anchors are ``"start"`` (row/column 0) or ``"mid"`` (half the axis).
    ``direction`` is ``"row"`` for row-major scanning, ``"col"`` for
    column-major.  The attempt budget is ``floor(axis * attempts_ratio)``
    where the axis is the canvas width for row scans and the canvas
    height for column scans.
    """

    row_anchor: str
    col_anchor: str
    direction: str
    attempts_ratio: float

    def start(self, columns: int, rows: int) -> tuple[int, int]:
        """Return the (row, col) the scan begins at."""
        row = rows // 2 if self.row_anchor == "mid" else 0
        col = columns // 2 if self.col_anchor == "mid" else 0
        return (row, col)

    def max_attempts(self, columns: int, rows: int) -> int:
        axis = columns if self.direction == "row" else rows
        return int(axis * self.attempts_ratio)


# ── Static tables ──────────────────────────────────────────────────

# Placement order: lower goes first.
PRIORITY: dict[Category, int] = {
    Category.URGENT: 1,
    Category.WORK: 2,
    Category.RELATIONSHIPS: 3,
    Category.LEARNING: 4,
    Category.HEALTH: 5,
    Category.MAINTENANCE: 6,
}

# Size bias applied to the target cell count.
IMPORTANCE_MULTIPLIER: dict[Category, float] = {
    Category.WORK: 1.2,
    Category.LEARNING: 1.1,
    Category.RELATIONSHIPS: 1.1,
    Category.HEALTH: 1.0,
    Category.MAINTENANCE: 0.9,
    Category.URGENT: 1.3,
}

# Categories in different groups must keep the minimum gap apart.
# ``None`` = no group (only plain non-overlap applies).
CONFLICT_GROUP: dict[Category, str | None] = {
    Category.WORK: "work",
    Category.LEARNING: None,
    Category.RELATIONSHIPS: "people",
    Category.HEALTH: None,
    Category.MAINTENANCE: None,
    Category.URGENT: None,
}

SEARCH_PATTERNS: dict[Category, SearchPattern] = {
    Category.WORK: SearchPattern("start", "start", "row", 0.4),
    Category.LEARNING: SearchPattern("start", "mid", "row", 0.4),
    Category.RELATIONSHIPS: SearchPattern("mid", "start", "row", 0.4),
    Category.HEALTH: SearchPattern("mid", "mid", "row", 0.4),
    Category.MAINTENANCE: SearchPattern("start", "start", "col", 0.4),
    Category.URGENT: SearchPattern("start", "start", "row", 0.3),
}

# One-letter codes for text dumps of the grid.
GRID_SYMBOL: dict[Category, str] = {
    Category.WORK: "W",
    Category.LEARNING: "L",
    Category.RELATIONSHIPS: "R",
    Category.HEALTH: "H",
    Category.MAINTENANCE: "M",
    Category.URGENT: "U",
}


def _check_tables() -> None:
    tables = {
        "PRIORITY": PRIORITY,
        "IMPORTANCE_MULTIPLIER": IMPORTANCE_MULTIPLIER,
        "CONFLICT_GROUP": CONFLICT_GROUP,
        "SEARCH_PATTERNS": SEARCH_PATTERNS,
        "GRID_SYMBOL": GRID_SYMBOL,
    }
    for name, table in tables.items():
        missing = [c.name for c in Category if c not in table]
        if missing:
            raise RuntimeError(f"{name} has no entry for {', '.join(missing)}")
    if len(set(PRIORITY.values())) != len(PRIORITY):
        raise RuntimeError("PRIORITY must be a total order")


_check_tables()


# ── Lookups ────────────────────────────────────────────────────────


def parse_category(value: Category | str) -> Category:
    """Resolve a category from a member, its value, or its name.

    ``"purple"``, ``"work"`` and ``"WORK"`` all resolve to
    ``Category.WORK``.
    """
    if isinstance(value, Category):
        return value
    if isinstance(value, str):
        key = value.strip()
        try:
            return Category(key.lower())
        except ValueError:
            pass
        try:
            return Category[key.upper()]
        except KeyError:
            pass
    raise UnknownCategoryError(value)


def categories_in_priority_order() -> list[Category]:
    """All categories, highest placement priority first."""
    return sorted(Category, key=lambda c: PRIORITY[c])
