"""Input parsing — convert raw dicts/JSON into per-category item buckets."""

from __future__ import annotations

import logging

from lifegrid.pipeline.categories import (
    Category, categories_in_priority_order, parse_category,
)

from .models import Item, URGENT_PRIORITIES, intensity_for_level


log = logging.getLogger(__name__)


def parse_items(data: dict) -> dict[Category, list[Item]]:
    """Parse an ``{"items": {...}}`` document into item buckets.

    Format:
        {"items": {"work": [{"duration_minutes": 60, "is_urgent": true,
                              "intensity": 0.8}]}}

    Category keys may be names (``"work"``) or values (``"purple"``).
    """
    buckets: dict[Category, list[Item]] = {}
    for key, raw_items in data["items"].items():
        category = parse_category(key)
        bucket = buckets.setdefault(category, [])
        for raw in raw_items:
            bucket.append(_parse_item(raw))
    return _in_priority_order(buckets)


def _parse_item(raw: dict) -> Item:
    if raw.get("intensity") is not None:
        intensity = float(raw["intensity"])
    else:
        intensity = intensity_for_level(raw.get("level"))
    return Item(
        duration_minutes=int(raw.get("duration_minutes") or 0),
        is_urgent=bool(raw.get("is_urgent")),
        intensity=intensity,
    )


def bucket_tasks(tasks: list[dict]) -> dict[Category, list[Item]]:
    """Group raw task records by life domain.

    Each record uses the task store's field names::

        {"lifeDomain": "purple", "priority": "high", "estimatedTime": 45,
         "emotionalProfile": {"stressLevel": "medium"}}

    Records without a ``lifeDomain`` are skipped.  A task is urgent when
    its priority is ``"high"`` or it lives in the urgent domain.
    """
    buckets: dict[Category, list[Item]] = {}
    skipped = 0
    for task in tasks:
        domain = task.get("lifeDomain")
        if not domain:
            skipped += 1
            continue
        category = parse_category(domain)
        priority = str(task.get("priority") or "").lower()
        profile = task.get("emotionalProfile") or {}
        buckets.setdefault(category, []).append(Item(
            duration_minutes=int(task.get("estimatedTime") or 0),
            is_urgent=priority in URGENT_PRIORITIES or category is Category.URGENT,
            intensity=intensity_for_level(profile.get("stressLevel")),
        ))
    if skipped:
        log.debug("Skipped %d task(s) without a lifeDomain", skipped)
    return _in_priority_order(buckets)


def parse_tasks_document(data: dict) -> dict[Category, list[Item]]:
    """Parse either an ``"items"`` document or a ``"tasks"`` export."""
    if "items" in data:
        return parse_items(data)
    if "tasks" in data:
        return bucket_tasks(data["tasks"])
    raise ValueError("Input document needs an 'items' or 'tasks' key")


def _in_priority_order(
    buckets: dict[Category, list[Item]],
) -> dict[Category, list[Item]]:
    return {c: buckets[c] for c in categories_in_priority_order() if c in buckets}
