"""Sizing — from a category's items to the block it should occupy.

Submodules:
  metrics     CategoryMetrics aggregation and the weighted importance score.
  dimensions  Score → (width, height) in grid cells.
"""

from .metrics import CategoryMetrics, compute_metrics, importance_score, score_items
from .dimensions import Dimensions, map_dimensions, size_for_category, target_cells

__all__ = [
    "CategoryMetrics", "compute_metrics", "importance_score", "score_items",
    "Dimensions", "map_dimensions", "size_for_category", "target_cells",
]
