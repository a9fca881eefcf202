"""Placer — packs one block per category into the canvas.

Submodules:
  models        Output dataclasses (PlacedRectangle, PlacementFailure, LayoutResult).
  grid          Occupancy grid (free/owned cells).
  spacing       Minimum-gap checks between conflicting categories.
  search        Candidate origins for each search phase.
  allocator     Phase-by-phase search for a valid origin.
  engine        Main composition algorithm (score, size, order, place).
  geometry      Footprint helpers and whole-layout verification.
  serialization JSON conversion (layout_to_dict, parse_layout).
"""

from .models import (
    PlacedRectangle, PlacementFailure, CategoryPlan, LayoutResult, SearchPhase,
)
from .grid import OccupancyGrid, GridCell
from .allocator import GridAllocator, Allocation
from .engine import compose_layout, compose_from_tasks, plan_categories
from .serialization import layout_to_dict, parse_layout
from .geometry import footprint_gap, footprints_overlap, rect_inside_canvas, validate_layout

__all__ = [
    # Models
    "PlacedRectangle", "PlacementFailure", "CategoryPlan", "LayoutResult",
    "SearchPhase",
    # Grid / allocator
    "OccupancyGrid", "GridCell", "GridAllocator", "Allocation",
    # Engine
    "compose_layout", "compose_from_tasks", "plan_categories",
    # Serialization
    "layout_to_dict", "parse_layout",
    # Geometry (used by tests)
    "footprint_gap", "footprints_overlap", "rect_inside_canvas", "validate_layout",
]
