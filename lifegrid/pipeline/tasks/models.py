"""Item dataclass and the qualitative-intensity mapping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """One unit of work as the composition engine sees it.

    Items are read-only inputs; nothing downstream mutates them.
    """

    duration_minutes: int
    is_urgent: bool = False
    intensity: float = 0.5      # 0..1, see INTENSITY_LEVELS

    def __post_init__(self) -> None:
        if self.duration_minutes < 0:
            raise ValueError(
                f"duration_minutes must be >= 0, got {self.duration_minutes}")
        if not 0.0 <= self.intensity <= 1.0:
            raise ValueError(
                f"intensity must be within [0, 1], got {self.intensity}")


# Stress level reported by the task source -> continuous intensity.
INTENSITY_LEVELS: dict[str, float] = {
    "overwhelming": 1.0,
    "high": 0.8,
    "medium": 0.5,
    "low": 0.2,
}

DEFAULT_INTENSITY = 0.5

# Task priorities that count as urgent.
URGENT_PRIORITIES = frozenset({"high"})


def intensity_for_level(level: str | None) -> float:
    """Map a qualitative stress level to an intensity in [0, 1].

    Missing or unrecognised levels fall back to ``DEFAULT_INTENSITY``.
    """
    if not level:
        return DEFAULT_INTENSITY
    return INTENSITY_LEVELS.get(level.strip().lower(), DEFAULT_INTENSITY)
