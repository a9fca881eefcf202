"""Layout serialization — JSON conversion."""

from __future__ import annotations

from lifegrid.pipeline.categories import parse_category
from lifegrid.pipeline.config import CanvasConfig

from .models import LayoutResult, PlacedRectangle, PlacementFailure


def layout_to_dict(result: LayoutResult) -> dict:
    """Serialize a LayoutResult to a JSON-safe dict."""
    return {
        "canvas": {
            "columns": result.canvas.columns,
            "rows": result.canvas.rows,
            **({"name": result.canvas.name} if result.canvas.name else {}),
        },
        "placements": [
            {
                "category": p.category.value,
                "row": p.origin_row,
                "column": p.origin_col,
                "width": p.width,
                "height": p.height,
            }
            for p in result.placements
        ],
        "failures": [
            {
                "category": f.category.value,
                "width": f.width,
                "height": f.height,
                "reason": f.reason,
            }
            for f in result.failures
        ],
    }


def parse_layout(data: dict) -> LayoutResult:
    """Parse a layout dict back into a LayoutResult.

    Only canvas, placements and failures round-trip; plans and phases
    are diagnostics of the pass that produced the layout.
    """
    canvas_data = data["canvas"]
    canvas = CanvasConfig(
        columns=int(canvas_data["columns"]),
        rows=int(canvas_data["rows"]),
        name=canvas_data.get("name"),
    )

    placements = [
        PlacedRectangle(
            category=parse_category(p["category"]),
            origin_row=int(p["row"]),
            origin_col=int(p["column"]),
            width=int(p["width"]),
            height=int(p["height"]),
        )
        for p in data.get("placements", [])
    ]

    failures = [
        PlacementFailure(
            category=parse_category(f["category"]),
            width=int(f["width"]),
            height=int(f["height"]),
            reason=f.get("reason", ""),
        )
        for f in data.get("failures", [])
    ]

    return LayoutResult(canvas=canvas, placements=placements, failures=failures)
