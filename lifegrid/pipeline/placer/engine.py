"""Main composition engine — score, size, order and place every category."""

from __future__ import annotations

import logging

from lifegrid.pipeline.categories import (
    Category, PRIORITY, categories_in_priority_order,
)
from lifegrid.pipeline.config import (
    LAYOUT_RULES, CanvasConfig, LayoutRules, canvas_for_preset,
)
from lifegrid.pipeline.sizing import score_items, size_for_category
from lifegrid.pipeline.tasks import Item, bucket_tasks

from .allocator import GridAllocator
from .grid import OccupancyGrid
from .models import (
    CategoryPlan, LayoutResult, PlacedRectangle, PlacementFailure, SearchPhase,
)


log = logging.getLogger(__name__)


def plan_categories(
    items: dict[Category, list[Item]],
    canvas: CanvasConfig,
    rules: LayoutRules = LAYOUT_RULES,
) -> list[CategoryPlan]:
    """Score and size every non-empty category, in placement order.

    Placement order is the fixed priority table first, then descending
    score.  Categories are visited through the priority table so the
    input mapping's iteration order never matters.
    """
    plans: list[CategoryPlan] = []
    for category in categories_in_priority_order():
        cat_items = items.get(category) or []
        if not cat_items:
            continue
        metrics, score = score_items(cat_items, rules)
        dims = size_for_category(category, score, canvas, rules)
        plans.append(CategoryPlan(
            category=category, metrics=metrics, score=score, dimensions=dims,
        ))
        log.debug("%s: %d item(s) score=%.2f -> %d×%d",
                  category.name, metrics.item_count, score,
                  dims.width, dims.height)

    plans.sort(key=lambda p: (PRIORITY[p.category], -p.score))
    return plans


def compose_layout(
    items: dict[Category, list[Item]],
    canvas: CanvasConfig,
    rules: LayoutRules = LAYOUT_RULES,
) -> LayoutResult:
    """Place one block per non-empty category on a fresh grid.

    Parameters
    ----------
    items : dict[Category, list[Item]]
        Item buckets from the task source.  Empty buckets are ignored.
    canvas : CanvasConfig
        Grid size to pack into.
    rules : LayoutRules
        Scoring, sizing and spacing rules (default ``LAYOUT_RULES``).

    Returns
    -------
    LayoutResult
        Placements in placement order, plus a failure entry for every
        category that could not be placed anywhere.

    Raises
    ------
    ConfigurationError
        If the canvas or rules cannot produce a valid layout.
    """
    rules.validate()
    canvas.validate(rules)

    plans = plan_categories(items, canvas, rules)
    grid = OccupancyGrid(canvas.columns, canvas.rows)
    allocator = GridAllocator(grid, rules)

    placements: list[PlacedRectangle] = []
    failures: list[PlacementFailure] = []
    phases: dict[Category, SearchPhase] = {}

    for plan in plans:
        dims = plan.dimensions
        found = allocator.allocate(plan.category, dims)

        if found is None:
            reason = (
                f"no valid position for a {dims.width}×{dims.height} block "
                f"on the {canvas.columns}×{canvas.rows} canvas "
                f"({grid.count_occupied()} of {canvas.total_cells} cells taken)"
            )
            failures.append(PlacementFailure(
                category=plan.category,
                width=dims.width, height=dims.height,
                reason=reason,
            ))
            phases[plan.category] = SearchPhase.FAILED
            log.warning("Dropped %s: %s", plan.category.name, reason)
            continue

        placements.append(PlacedRectangle(
            category=plan.category,
            origin_row=found.row + 1,
            origin_col=found.col + 1,
            width=dims.width,
            height=dims.height,
        ))
        phases[plan.category] = found.phase
        log.info("Placed %s %d×%d at row %d col %d (%s)",
                 plan.category.name, dims.width, dims.height,
                 found.row + 1, found.col + 1, found.phase.value)

    if log.isEnabledFor(logging.DEBUG):
        log.debug("Final grid:\n%s", grid.to_text())

    return LayoutResult(
        canvas=canvas,
        placements=placements,
        failures=failures,
        plans=plans,
        phases=phases,
    )


def compose_from_tasks(
    tasks: list[dict],
    preset: str = "day",
    rules: LayoutRules = LAYOUT_RULES,
) -> LayoutResult:
    """Bucket raw task records and compose them on a named canvas preset."""
    return compose_layout(bucket_tasks(tasks), canvas_for_preset(preset), rules)
