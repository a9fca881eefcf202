"""Tasks — the items the composition is computed from.

Submodules:
  models   Item dataclass and the stress-level → intensity mapping.
  parsing  JSON conversion (parse_items, bucket_tasks, parse_tasks_document).
"""

from .models import Item, INTENSITY_LEVELS, intensity_for_level
from .parsing import parse_items, bucket_tasks, parse_tasks_document

__all__ = [
    # Models
    "Item", "INTENSITY_LEVELS", "intensity_for_level",
    # Parsing
    "parse_items", "bucket_tasks", "parse_tasks_document",
]
