"""Footprint geometry and whole-layout verification.

Footprints are axis-aligned boxes in cell coordinates: a block at
1-indexed origin (r, c) with size w×h covers ``x ∈ [c-1, c-1+w]`` and
``y ∈ [r-1, r-1+h]``.
"""

from __future__ import annotations

from shapely.geometry import Polygon, box as shapely_box

from lifegrid.pipeline.config import LAYOUT_RULES, CanvasConfig, LayoutRules

from .models import LayoutResult, PlacedRectangle
from .spacing import conflicts


def footprint_box(rect: PlacedRectangle) -> Polygon:
    x0 = rect.origin_col - 1
    y0 = rect.origin_row - 1
    return shapely_box(x0, y0, x0 + rect.width, y0 + rect.height)


def canvas_box(canvas: CanvasConfig) -> Polygon:
    return shapely_box(0, 0, canvas.columns, canvas.rows)


def footprints_overlap(a: PlacedRectangle, b: PlacedRectangle) -> bool:
    """True if the two footprints share at least one cell.

    Blocks that only touch along an edge do not overlap.
    """
    return footprint_box(a).intersection(footprint_box(b)).area > 0


def rect_inside_canvas(rect: PlacedRectangle, canvas: CanvasConfig) -> bool:
    return canvas_box(canvas).covers(footprint_box(rect))


def footprint_gap(a: PlacedRectangle, b: PlacedRectangle) -> int:
    """Free cells between two footprints (Chebyshev), -1 if they overlap.

    Blocks that touch edge-to-edge or corner-to-corner have gap 0.
    """
    row_gap = max(b.row_span.start - a.row_span.stop,
                  a.row_span.start - b.row_span.stop)
    col_gap = max(b.col_span.start - a.col_span.stop,
                  a.col_span.start - b.col_span.stop)
    if row_gap < 0 and col_gap < 0:
        return -1
    return max(row_gap, col_gap)


def validate_layout(
    result: LayoutResult,
    rules: LayoutRules = LAYOUT_RULES,
) -> list[str]:
    """Check a finished layout.  Returns error messages (empty = valid)."""
    errors: list[str] = []
    rects = result.placements

    # ── Every footprint inside the canvas ──
    for rect in rects:
        if not rect_inside_canvas(rect, result.canvas):
            errors.append(
                f"{rect.category.name} at ({rect.origin_row}, {rect.origin_col}) "
                f"size {rect.width}×{rect.height} leaves the "
                f"{result.canvas.columns}×{result.canvas.rows} canvas")

    # ── Pairwise: no overlap, conflict spacing ──
    for i in range(len(rects)):
        a = rects[i]
        for j in range(i + 1, len(rects)):
            b = rects[j]
            if footprints_overlap(a, b):
                errors.append(f"{a.category.name} overlaps {b.category.name}")
                continue
            if conflicts(a.category, b.category):
                # b was placed after a, so b's gap is the one enforced
                required = rules.gap_for(b.category)
                gap = footprint_gap(a, b)
                if gap < required:
                    errors.append(
                        f"{a.category.name} and {b.category.name} are {gap} "
                        f"cell(s) apart, need {required}")

    # ── One block per category ──
    seen = set()
    for rect in rects:
        if rect.category in seen:
            errors.append(f"{rect.category.name} placed more than once")
        seen.add(rect.category)

    return errors
