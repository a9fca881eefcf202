"""Candidate origins for each allocator phase.

Each generator lazily yields 0-indexed ``(row, col)`` origins whose
footprint lies inside its search area.  The allocator consumes them in
order until one validates, so the three phases share one code path.
"""

from __future__ import annotations

from typing import Iterator

from lifegrid.pipeline.categories import SearchPattern


def preferred_candidates(
    pattern: SearchPattern,
    columns: int, rows: int,
    width: int, height: int,
) -> Iterator[tuple[int, int]]:
    """Bounded scan from the category's anchor quadrant.

    Rows run from the anchor row to ``anchor + attempts`` (inclusive),
    columns likewise, both cut off where the footprint would leave the
    canvas.  Row patterns scan row-major, column patterns column-major.
    """
    start_row, start_col = pattern.start(columns, rows)
    attempts = pattern.max_attempts(columns, rows)
    last_row = min(rows - height, start_row + attempts)
    last_col = min(columns - width, start_col + attempts)

    if pattern.direction == "col":
        for col in range(start_col, last_col + 1):
            for row in range(start_row, last_row + 1):
                yield (row, col)
    else:
        for row in range(start_row, last_row + 1):
            for col in range(start_col, last_col + 1):
                yield (row, col)


def priority_zone_candidates(
    columns: int, rows: int,
    width: int, height: int,
    ratio: float,
) -> Iterator[tuple[int, int]]:
    """Exhaustive row-major scan of the top-left ``ratio × ratio`` zone."""
    zone_rows = int(rows * ratio)
    zone_cols = int(columns * ratio)
    for row in range(0, zone_rows - height + 1):
        for col in range(0, zone_cols - width + 1):
            yield (row, col)


def full_grid_candidates(
    columns: int, rows: int,
    width: int, height: int,
) -> Iterator[tuple[int, int]]:
    """Every origin on the canvas, row-major from the top-left corner."""
    for row in range(0, rows - height + 1):
        for col in range(0, columns - width + 1):
            yield (row, col)
