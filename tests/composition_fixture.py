"""Composition test fixtures — hardcoded item buckets for the scenarios.

  - scenario_a:  WORK (5 items, 3 urgent, intensity 0.8) vs HEALTH (1 item)
  - scenario_b:  a single URGENT bucket large enough to hit the width clamp
  - six_light:   one low-intensity 30-minute item in every category
  - uniform():   helper for building n identical items
"""

from __future__ import annotations

from lifegrid.pipeline.categories import Category
from lifegrid.pipeline.tasks import Item


def uniform(n: int, duration: int = 30, urgent: int = 0,
            intensity: float = 0.5) -> list[Item]:
    """``n`` items, the first ``urgent`` of them flagged urgent."""
    return [
        Item(duration_minutes=duration, is_urgent=i < urgent, intensity=intensity)
        for i in range(n)
    ]


def scenario_a() -> dict[Category, list[Item]]:
    return {
        Category.WORK: uniform(5, duration=15, urgent=3, intensity=0.8),
        Category.HEALTH: uniform(1, duration=30, urgent=0, intensity=0.2),
    }


def scenario_b() -> dict[Category, list[Item]]:
    return {Category.URGENT: uniform(20, duration=480, urgent=20, intensity=1.0)}


def six_light() -> dict[Category, list[Item]]:
    return {c: uniform(1, duration=30, intensity=0.2) for c in Category}


SAMPLE_TASKS = [
    {"title": "Ship release", "lifeDomain": "purple", "priority": "high",
     "estimatedTime": 120, "emotionalProfile": {"stressLevel": "high"}},
    {"title": "Review PRs", "lifeDomain": "purple", "priority": "medium",
     "estimatedTime": 45},
    {"title": "Call mum", "lifeDomain": "yellow", "priority": "low",
     "estimatedTime": 30, "emotionalProfile": {"stressLevel": "low"}},
    {"title": "Pay rent", "lifeDomain": "red", "priority": "medium",
     "estimatedTime": 10, "emotionalProfile": {"stressLevel": "overwhelming"}},
    {"title": "Groceries", "lifeDomain": "orange", "priority": "low",
     "estimatedTime": 60},
    {"title": "Untriaged note", "priority": "low", "estimatedTime": 5},
]
