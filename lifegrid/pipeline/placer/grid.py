"""Occupancy grid — records which category owns each canvas cell.

The grid is created fresh for every composition and owned by that one
pass.  Cells are stored in a flat list indexed ``row * columns + col``;
``None`` marks a free cell, otherwise the owning ``Category``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from lifegrid.pipeline.categories import Category, GRID_SYMBOL


FREE_SYMBOL = "."


@dataclass(frozen=True)
class GridCell:
    occupied: bool
    owner: Category | None = None


class OccupancyGrid:
    """A dense ``rows × columns`` grid of cell owners."""

    def __init__(self, columns: int, rows: int) -> None:
        if columns <= 0 or rows <= 0:
            raise ValueError(f"grid must be non-empty, got {columns}×{rows}")
        self.columns = columns
        self.rows = rows
        self._owners: list[Category | None] = [None] * (columns * rows)

    # ── Cell queries ───────────────────────────────────────────────

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def owner(self, row: int, col: int) -> Category | None:
        """Owner of a cell; out-of-bounds cells report ``None``."""
        if not self.in_bounds(row, col):
            return None
        return self._owners[row * self.columns + col]

    def is_free(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            return False
        return self._owners[row * self.columns + col] is None

    def cell(self, row: int, col: int) -> GridCell:
        owner = self.owner(row, col)
        return GridCell(occupied=owner is not None, owner=owner)

    def rect_in_bounds(self, row: int, col: int, width: int, height: int) -> bool:
        return (row >= 0 and col >= 0
                and row + height <= self.rows
                and col + width <= self.columns)

    def rect_is_free(self, row: int, col: int, width: int, height: int) -> bool:
        """True if the whole footprint is inside the grid and unoccupied."""
        if not self.rect_in_bounds(row, col, width, height):
            return False
        owners = self._owners
        for r in range(row, row + height):
            base = r * self.columns
            for c in range(col + base, col + width + base):
                if owners[c] is not None:
                    return False
        return True

    def occupied_cells(self) -> Iterator[tuple[int, int, Category]]:
        """Yield ``(row, col, owner)`` for every occupied cell, row-major."""
        for idx, owner in enumerate(self._owners):
            if owner is not None:
                yield (idx // self.columns, idx % self.columns, owner)

    def count_occupied(self) -> int:
        return sum(1 for o in self._owners if o is not None)

    # ── Cell mutation ──────────────────────────────────────────────

    def mark_rect(
        self, row: int, col: int, width: int, height: int,
        category: Category,
    ) -> None:
        """Give every cell of the footprint to ``category``.

        Raises ValueError if the footprint leaves the grid or touches an
        occupied cell; the grid is unchanged in that case.
        """
        if not self.rect_is_free(row, col, width, height):
            raise ValueError(
                f"cannot mark {width}×{height} at ({row}, {col}) for "
                f"{category.name}: out of bounds or occupied")
        for r in range(row, row + height):
            base = r * self.columns
            for c in range(col, col + width):
                self._owners[base + c] = category

    # ── Debug output ───────────────────────────────────────────────

    def to_text(self) -> str:
        """One line per row, one symbol per cell (``.`` = free)."""
        lines = []
        for r in range(self.rows):
            base = r * self.columns
            lines.append("".join(
                GRID_SYMBOL[o] if o is not None else FREE_SYMBOL
                for o in self._owners[base:base + self.columns]
            ))
        return "\n".join(lines)
