"""Grid allocator — finds a valid origin for one block.

Phases, in order:

  1. **Preferred**      the category's own anchor quadrant and scan
                         direction, with a bounded attempt budget.
  2. **Priority zone**  the top-left 70 % × 70 % of the canvas.
  3. **Full grid**      every origin on the canvas.

A candidate is accepted when its footprint is inside the canvas, every
footprint cell is free, and the spacing check passes.  When all phases
run dry the block cannot be placed and the caller drops it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from lifegrid.pipeline.categories import Category, SEARCH_PATTERNS
from lifegrid.pipeline.config import LAYOUT_RULES, LayoutRules
from lifegrid.pipeline.sizing import Dimensions

from .grid import OccupancyGrid
from .models import SearchPhase
from .search import (
    preferred_candidates, priority_zone_candidates, full_grid_candidates,
)
from .spacing import has_enough_spacing


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Allocation:
    """A 0-indexed origin and the phase that found it."""

    row: int
    col: int
    phase: SearchPhase


class GridAllocator:
    """Searches an ``OccupancyGrid`` for room and claims it."""

    def __init__(self, grid: OccupancyGrid, rules: LayoutRules = LAYOUT_RULES) -> None:
        self.grid = grid
        self.rules = rules

    def _phases(
        self, category: Category, dims: Dimensions,
    ) -> Iterator[tuple[SearchPhase, Iterator[tuple[int, int]]]]:
        g = self.grid
        yield SearchPhase.PREFERRED, preferred_candidates(
            SEARCH_PATTERNS[category], g.columns, g.rows,
            dims.width, dims.height,
        )
        yield SearchPhase.PRIORITY_ZONE, priority_zone_candidates(
            g.columns, g.rows, dims.width, dims.height,
            self.rules.priority_zone_ratio,
        )
        yield SearchPhase.FULL_GRID, full_grid_candidates(
            g.columns, g.rows, dims.width, dims.height,
        )

    def accepts(
        self, row: int, col: int, dims: Dimensions, category: Category,
    ) -> bool:
        """Whether ``category`` could be placed at ``(row, col)`` right now."""
        if not self.grid.rect_is_free(row, col, dims.width, dims.height):
            return False
        return has_enough_spacing(
            self.grid, row, col, dims.width, dims.height,
            category, self.rules.gap_for(category),
        )

    def find_position(
        self,
        category: Category,
        dims: Dimensions,
    ) -> Allocation | None:
        """First valid origin across all phases, or None.  Never mutates."""
        if dims.width > self.grid.columns or dims.height > self.grid.rows:
            log.debug("%s: %d×%d block exceeds the %d×%d grid",
                      category.name, dims.width, dims.height,
                      self.grid.columns, self.grid.rows)
            return None

        for phase, candidates in self._phases(category, dims):
            tried = 0
            for row, col in candidates:
                tried += 1
                if self.accepts(row, col, dims, category):
                    return Allocation(row=row, col=col, phase=phase)
            log.debug("%s: %s phase exhausted after %d candidate(s)",
                      category.name, phase.value, tried)
        return None

    def allocate(
        self,
        category: Category,
        dims: Dimensions,
    ) -> Allocation | None:
        """Find a position and mark the footprint as owned by ``category``."""
        found = self.find_position(category, dims)
        if found is not None:
            self.grid.mark_rect(found.row, found.col,
                                dims.width, dims.height, category)
        return found
