"""Importance scoring — reduce a category's items to one scalar.

The score is a weighted sum of five normalised factors:

  1. **Item count**       ``count / 10``
  2. **Total duration**   ``minutes / 480`` (one working day)
  3. **Mean intensity**   average item intensity, already in [0, 1]
  4. **Urgent count**     ``urgent / 5``
  5. **Emotional weight** secondary intensity aggregate

scaled by ``score_scale`` (100).  A category with a day of work, five
urgent items and full intensity lands around 100; the score itself is
unbounded above.
"""

from __future__ import annotations

from dataclasses import dataclass

from lifegrid.pipeline.config import LAYOUT_RULES, LayoutRules
from lifegrid.pipeline.tasks.models import Item


@dataclass(frozen=True)
class CategoryMetrics:
    """Aggregates of one category's items, computed fresh per call."""

    item_count: int
    total_duration: int         # minutes
    mean_intensity: float
    urgent_count: int
    emotional_weight: float


def compute_metrics(items: list[Item]) -> CategoryMetrics:
    """Aggregate a non-empty item list.

    Raises
    ------
    ValueError
        If ``items`` is empty.  Empty categories are filtered out before
        scoring; reaching here with none is a caller bug.
    """
    if not items:
        raise ValueError("Cannot score a category with no items")
    n = len(items)
    mean_intensity = sum(it.intensity for it in items) / n
    return CategoryMetrics(
        item_count=n,
        total_duration=sum(it.duration_minutes for it in items),
        mean_intensity=mean_intensity,
        urgent_count=sum(1 for it in items if it.is_urgent),
        emotional_weight=mean_intensity,
    )


def importance_score(
    metrics: CategoryMetrics,
    rules: LayoutRules = LAYOUT_RULES,
) -> float:
    """Weighted importance score, >= 0."""
    w_count, w_time, w_intensity, w_urgent, w_emotion = rules.score_weights
    weighted = (
        (metrics.item_count / rules.count_norm) * w_count
        + (metrics.total_duration / rules.duration_norm_minutes) * w_time
        + metrics.mean_intensity * w_intensity
        + (metrics.urgent_count / rules.urgent_norm) * w_urgent
        + metrics.emotional_weight * w_emotion
    )
    return weighted * rules.score_scale


def score_items(
    items: list[Item],
    rules: LayoutRules = LAYOUT_RULES,
) -> tuple[CategoryMetrics, float]:
    metrics = compute_metrics(items)
    return metrics, importance_score(metrics, rules)
