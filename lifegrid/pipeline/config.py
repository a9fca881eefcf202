"""Shared layout constants for the composition pipeline.

These values describe how importance is scored, how scores become block
sizes, and how far apart conflicting blocks must stay.  Both the
**sizing** stage (which turns item collections into block dimensions)
and the **placer** (which packs blocks into the canvas) read their
parameters from this single source of truth.

Change a value here and both stages will stay in sync automatically.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .categories import Category, UnknownCategoryError, parse_category


class ConfigurationError(ValueError):
    """Raised when canvas or layout configuration cannot produce a layout."""


@dataclass(frozen=True)
class LayoutRules:
    """Scoring weights, sizing rules and spacing for the composition.

    All lengths are in whole grid cells.
    """

    score_weights: tuple[float, float, float, float, float] = (
        0.25, 0.25, 0.20, 0.20, 0.10,
    )
    """Weights for item count, total duration, mean intensity, urgent
    count and emotional weight, in that order.  Must sum to 1.0."""

    score_scale: float = 100.0
    """Multiplier applied to the weighted sum."""

    count_norm: int = 10
    """Item count that contributes a full unit to the count factor."""

    duration_norm_minutes: int = 480
    """Total duration (one working day) that contributes a full unit."""

    urgent_norm: int = 5
    """Urgent item count that contributes a full unit."""

    max_score: float = 100.0
    """Score treated as "the whole canvas" by the size mapper."""

    aspect_ratio: float = 1.2
    """Preferred width/height ratio: slightly wider than tall."""

    min_block: int = 2
    """Smallest width or height of any block."""

    edge_margin: int = 2
    """Cells kept free between a block's maximum size and the canvas size."""

    min_area: int = 4
    """Smallest block area the size mapper grows towards."""

    min_gap: int = 2
    """Uniform minimum gap between conflicting blocks."""

    gap_overrides: tuple[tuple[str, int], ...] = ()
    """Per-category gaps as ``(category value, gap)`` pairs."""

    priority_zone_ratio: float = 0.7
    """Fraction of each canvas axis searched by the priority-zone phase."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def weights_total(self) -> float:
        return sum(self.score_weights)

    def gap_for(self, category: Category) -> int:
        """Minimum gap a block of ``category`` keeps from conflicting blocks."""
        for value, gap in self.gap_overrides:
            if parse_category(value) is category:
                return gap
        return self.min_gap

    def validate(self) -> None:
        """Raise ConfigurationError if the rules are internally inconsistent."""
        if len(self.score_weights) != 5:
            raise ConfigurationError(
                f"score_weights needs 5 entries, got {len(self.score_weights)}")
        if any(w < 0 for w in self.score_weights):
            raise ConfigurationError("score_weights must be non-negative")
        if not math.isclose(self.weights_total, 1.0, abs_tol=1e-9):
            raise ConfigurationError(
                f"score_weights must sum to 1.0, got {self.weights_total:.6f}")
        for name in ("count_norm", "duration_norm_minutes", "urgent_norm",
                     "max_score", "score_scale", "aspect_ratio"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive")
        if self.min_block < 1 or self.edge_margin < 0:
            raise ConfigurationError("min_block must be >= 1 and edge_margin >= 0")
        if self.min_gap < 0 or any(gap < 0 for _, gap in self.gap_overrides):
            raise ConfigurationError("gaps must be non-negative")
        for value, _ in self.gap_overrides:
            try:
                parse_category(value)
            except UnknownCategoryError as e:
                raise ConfigurationError(f"gap_overrides: {e}") from e
        if not 0 < self.priority_zone_ratio <= 1:
            raise ConfigurationError("priority_zone_ratio must be in (0, 1]")


# Module-level singleton, importable everywhere.
LAYOUT_RULES = LayoutRules()


@dataclass(frozen=True)
class CanvasConfig:
    """The fixed-size grid blocks are packed into."""

    columns: int
    rows: int
    name: str | None = None

    @property
    def total_cells(self) -> int:
        return self.columns * self.rows

    def max_block_width(self, rules: LayoutRules = LAYOUT_RULES) -> int:
        return self.columns - rules.edge_margin

    def max_block_height(self, rules: LayoutRules = LAYOUT_RULES) -> int:
        return self.rows - rules.edge_margin

    def validate(self, rules: LayoutRules = LAYOUT_RULES) -> None:
        """Fail fast when no minimum-size block could ever be produced.

        A block needs ``min_block`` cells per axis and the size mapper
        keeps ``edge_margin`` cells clear, so each axis must be at least
        ``min_block + edge_margin`` (4 with the reference rules).
        """
        for axis in ("columns", "rows"):
            value = getattr(self, axis)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"canvas {axis} must be an integer, got {value!r}")
        smallest = rules.min_block + rules.edge_margin
        if self.columns < smallest or self.rows < smallest:
            raise ConfigurationError(
                f"canvas {self.columns}×{self.rows} is too small: each axis "
                f"needs at least {smallest} cells for a "
                f"{rules.min_block}×{rules.min_block} block")


CANVAS_PRESETS: dict[str, CanvasConfig] = {
    "day": CanvasConfig(columns=16, rows=12, name="day"),
    "week": CanvasConfig(columns=20, rows=16, name="week"),
    "month": CanvasConfig(columns=24, rows=20, name="month"),
}


def canvas_for_preset(name: str) -> CanvasConfig:
    """Return the named canvas preset (``day``, ``week`` or ``month``)."""
    try:
        canvas = CANVAS_PRESETS[name.strip().lower()]
    except KeyError:
        known = ", ".join(CANVAS_PRESETS)
        raise ConfigurationError(
            f"Unknown canvas preset {name!r} (known: {known})") from None
    canvas.validate()
    return canvas
