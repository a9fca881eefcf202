"""Placer output dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from lifegrid.pipeline.categories import Category
from lifegrid.pipeline.config import CanvasConfig
from lifegrid.pipeline.sizing import CategoryMetrics, Dimensions


class SearchPhase(str, Enum):
    """Allocator phases, tried in declaration order."""

    PREFERRED = "preferred"
    PRIORITY_ZONE = "priority_zone"
    FULL_GRID = "full_grid"
    FAILED = "failed"


# ── Output dataclasses ─────────────────────────────────────────────


@dataclass(frozen=True)
class PlacedRectangle:
    """A category block with a resolved grid position.

    ``origin_row`` / ``origin_col`` are 1-indexed, matching CSS grid
    line numbers; ``row_span`` / ``col_span`` give the 0-indexed
    half-open cell ranges the block covers.
    """

    category: Category
    origin_row: int
    origin_col: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def row_span(self) -> range:
        return range(self.origin_row - 1, self.origin_row - 1 + self.height)

    @property
    def col_span(self) -> range:
        return range(self.origin_col - 1, self.origin_col - 1 + self.width)

    def grid_area_css(self) -> str:
        """``grid-area`` value: row-start / col-start / row-end / col-end."""
        return (f"{self.origin_row} / {self.origin_col} / "
                f"{self.origin_row + self.height} / {self.origin_col + self.width}")


@dataclass(frozen=True)
class PlacementFailure:
    """A category that was dropped because no valid position existed."""

    category: Category
    width: int
    height: int
    reason: str


@dataclass(frozen=True)
class CategoryPlan:
    """Everything computed for a category before it is placed."""

    category: Category
    metrics: CategoryMetrics
    score: float
    dimensions: Dimensions


@dataclass
class LayoutResult:
    """Complete composition, ready for the renderer."""

    canvas: CanvasConfig
    placements: list[PlacedRectangle]
    failures: list[PlacementFailure] = field(default_factory=list)
    plans: list[CategoryPlan] = field(default_factory=list)
    phases: dict[Category, SearchPhase] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return len(self.failures) == 0

    @property
    def dropped(self) -> list[Category]:
        return [f.category for f in self.failures]

    def placement_for(self, category: Category) -> PlacedRectangle | None:
        return next((p for p in self.placements if p.category is category), None)

    def phase_for(self, category: Category) -> SearchPhase | None:
        """The phase that placed ``category`` (FAILED if dropped)."""
        return self.phases.get(category)
