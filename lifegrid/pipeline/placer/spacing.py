"""Minimum-gap checks between a candidate block and placed blocks."""

from __future__ import annotations

from lifegrid.pipeline.categories import Category, CONFLICT_GROUP

from .grid import OccupancyGrid


def conflicts(candidate: Category, other: Category) -> bool:
    """Whether ``other`` must keep the minimum gap from ``candidate``.

    Applies to blocks of the same category, and to two categories that
    both belong to a conflict group when the groups differ.  Every other
    pairing only needs to avoid overlapping.
    """
    if candidate is other:
        return True
    group_a = CONFLICT_GROUP[candidate]
    group_b = CONFLICT_GROUP[other]
    return group_a is not None and group_b is not None and group_a != group_b


def axis_separation(lo: int, size: int, index: int) -> int:
    """Free cells strictly between ``index`` and the span ``[lo, lo+size)``.

    Zero when the index falls inside the span or right next to it.
    """
    if index < lo:
        return lo - index - 1
    hi = lo + size - 1
    if index > hi:
        return index - hi - 1
    return 0


def has_enough_spacing(
    grid: OccupancyGrid,
    row: int, col: int,
    width: int, height: int,
    category: Category,
    gap: int,
) -> bool:
    """Check the footprint expanded by ``gap`` for conflicting owners.

    A conflicting cell rejects the candidate when it sits closer than
    ``gap`` free cells to the footprint, measured as the larger of the
    row and column separations.
    """
    if gap <= 0:
        return True
    r0 = max(0, row - gap)
    r1 = min(grid.rows - 1, row + height - 1 + gap)
    c0 = max(0, col - gap)
    c1 = min(grid.columns - 1, col + width - 1 + gap)

    for r in range(r0, r1 + 1):
        for c in range(c0, c1 + 1):
            owner = grid.owner(r, c)
            if owner is None or not conflicts(category, owner):
                continue
            row_sep = axis_separation(row, height, r)
            col_sep = axis_separation(col, width, c)
            if max(row_sep, col_sep) < gap:
                return False
    return True
