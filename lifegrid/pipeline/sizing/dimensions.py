"""Size mapping — turn an importance score into block dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass

from lifegrid.pipeline.categories import Category, IMPORTANCE_MULTIPLIER
from lifegrid.pipeline.config import LAYOUT_RULES, CanvasConfig, LayoutRules


@dataclass(frozen=True)
class Dimensions:
    """Block size in whole grid cells."""

    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def target_cells(
    score: float,
    canvas: CanvasConfig,
    multiplier: float = 1.0,
    rules: LayoutRules = LAYOUT_RULES,
) -> int:
    """Number of cells the block would ideally cover.

    The score is read as a proportion of ``max_score`` (clamped to 0..1),
    applied to the whole canvas, then biased by the category multiplier.
    """
    proportion = min(1.0, max(0.0, score / rules.max_score))
    base = math.floor(canvas.total_cells * proportion)
    return math.floor(base * multiplier)


def _fit_cells(cells: int, canvas: CanvasConfig, rules: LayoutRules) -> Dimensions:
    max_w = canvas.max_block_width(rules)
    max_h = canvas.max_block_height(rules)

    width = _clamp(math.floor(math.sqrt(cells * rules.aspect_ratio)),
                   rules.min_block, max_w)
    height = _clamp(math.floor(cells / width), rules.min_block, max_h)

    while width * height < rules.min_area and width < max_w and height < max_h:
        if width < height:
            width += 1
        else:
            height += 1

    return Dimensions(width=width, height=height)


def map_dimensions(
    score: float,
    canvas: CanvasConfig,
    multiplier: float = 1.0,
    rules: LayoutRules = LAYOUT_RULES,
) -> Dimensions:
    """Width and height for a block of the given score.

    Width follows the preferred aspect ratio, height fills the target
    area, and both stay within ``min_block .. canvas - edge_margin``.
    If the block is still below ``min_area`` the smaller side grows one
    cell at a time until the area is met or a canvas bound is reached.

    Flooring the height loses up to ``width - 1`` cells, so a wider block
    for a larger target can come out smaller than the block for a lower
    target.  The result is the largest block any target up to ``cells``
    produces (ties keep the block for ``cells`` itself), which makes the
    area non-decreasing in the score.
    """
    cells = target_cells(score, canvas, multiplier, rules)
    best = _fit_cells(cells, canvas, rules)
    for lower in range(cells - 1, -1, -1):
        dims = _fit_cells(lower, canvas, rules)
        if dims.area > best.area:
            best = dims
    return best


def size_for_category(
    category: Category,
    score: float,
    canvas: CanvasConfig,
    rules: LayoutRules = LAYOUT_RULES,
) -> Dimensions:
    return map_dimensions(score, canvas, IMPORTANCE_MULTIPLIER[category], rules)
