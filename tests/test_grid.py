"""Tests for the occupancy grid, spacing validator, search phases and allocator.

Validates:
  - Grid marking, overlap rejection and text dumps
  - Conflict-group rules and Chebyshev gap measurement
  - Candidate generators cover exactly their search areas, in order
  - The allocator walks phases in order and never mutates on lookup
"""

from __future__ import annotations

import unittest

from lifegrid.pipeline.categories import Category, SEARCH_PATTERNS
from lifegrid.pipeline.placer import GridAllocator, OccupancyGrid, SearchPhase
from lifegrid.pipeline.placer.search import (
    preferred_candidates, priority_zone_candidates, full_grid_candidates,
)
from lifegrid.pipeline.placer.spacing import (
    axis_separation, conflicts, has_enough_spacing,
)
from lifegrid.pipeline.sizing import Dimensions


class TestOccupancyGrid(unittest.TestCase):

    def setUp(self):
        self.grid = OccupancyGrid(columns=6, rows=4)

    def test_starts_empty(self):
        self.assertEqual(self.grid.count_occupied(), 0)
        self.assertTrue(self.grid.rect_is_free(0, 0, 6, 4))

    def test_mark_rect_sets_owner(self):
        self.grid.mark_rect(1, 2, 3, 2, Category.WORK)
        self.assertEqual(self.grid.count_occupied(), 6)
        self.assertIs(self.grid.owner(1, 2), Category.WORK)
        self.assertIs(self.grid.owner(2, 4), Category.WORK)
        self.assertIsNone(self.grid.owner(0, 2))
        cell = self.grid.cell(2, 3)
        self.assertTrue(cell.occupied)
        self.assertIs(cell.owner, Category.WORK)

    def test_overlap_rejected(self):
        self.grid.mark_rect(0, 0, 3, 3, Category.WORK)
        with self.assertRaises(ValueError):
            self.grid.mark_rect(2, 2, 2, 2, Category.HEALTH)
        # Failed mark leaves the grid untouched
        self.assertIsNone(self.grid.owner(2, 3))

    def test_out_of_bounds_rejected(self):
        with self.assertRaises(ValueError):
            self.grid.mark_rect(3, 0, 2, 2, Category.HEALTH)
        self.assertFalse(self.grid.rect_in_bounds(0, 5, 2, 1))
        self.assertFalse(self.grid.is_free(-1, 0))

    def test_to_text(self):
        self.grid.mark_rect(0, 0, 2, 1, Category.URGENT)
        self.grid.mark_rect(3, 4, 2, 1, Category.MAINTENANCE)
        self.assertEqual(self.grid.to_text(), "UU....\n......\n......\n....MM")

    def test_occupied_cells_row_major(self):
        self.grid.mark_rect(1, 0, 1, 1, Category.HEALTH)
        self.grid.mark_rect(0, 5, 1, 1, Category.WORK)
        cells = list(self.grid.occupied_cells())
        self.assertEqual(cells, [(0, 5, Category.WORK), (1, 0, Category.HEALTH)])


class TestSpacing(unittest.TestCase):

    def setUp(self):
        self.grid = OccupancyGrid(columns=10, rows=10)
        self.grid.mark_rect(0, 0, 3, 3, Category.WORK)

    def test_conflict_groups(self):
        self.assertTrue(conflicts(Category.WORK, Category.RELATIONSHIPS))
        self.assertTrue(conflicts(Category.RELATIONSHIPS, Category.WORK))
        self.assertTrue(conflicts(Category.HEALTH, Category.HEALTH))
        self.assertFalse(conflicts(Category.WORK, Category.HEALTH))
        self.assertFalse(conflicts(Category.LEARNING, Category.MAINTENANCE))

    def test_axis_separation(self):
        self.assertEqual(axis_separation(4, 2, 2), 1)
        self.assertEqual(axis_separation(4, 2, 3), 0)
        self.assertEqual(axis_separation(4, 2, 5), 0)
        self.assertEqual(axis_separation(4, 2, 8), 2)

    def test_conflicting_neighbour_too_close(self):
        self.assertFalse(has_enough_spacing(
            self.grid, 0, 4, 2, 2, Category.RELATIONSHIPS, gap=2))

    def test_conflicting_neighbour_far_enough(self):
        self.assertTrue(has_enough_spacing(
            self.grid, 0, 5, 2, 2, Category.RELATIONSHIPS, gap=2))
        self.assertTrue(has_enough_spacing(
            self.grid, 5, 0, 2, 2, Category.RELATIONSHIPS, gap=2))

    def test_diagonal_distance(self):
        self.assertFalse(has_enough_spacing(
            self.grid, 4, 4, 2, 2, Category.RELATIONSHIPS, gap=2))
        self.assertTrue(has_enough_spacing(
            self.grid, 5, 4, 2, 2, Category.RELATIONSHIPS, gap=2))

    def test_non_conflicting_may_touch(self):
        self.assertTrue(has_enough_spacing(
            self.grid, 0, 3, 2, 2, Category.HEALTH, gap=2))

    def test_same_category_spaced(self):
        self.assertFalse(has_enough_spacing(
            self.grid, 0, 4, 2, 2, Category.WORK, gap=2))

    def test_zero_gap_always_accepts(self):
        self.assertTrue(has_enough_spacing(
            self.grid, 0, 3, 2, 2, Category.RELATIONSHIPS, gap=0))


class TestSearchPhases(unittest.TestCase):

    def test_urgent_preferred_is_bounded(self):
        cands = list(preferred_candidates(
            SEARCH_PATTERNS[Category.URGENT], 16, 12, 5, 4))
        # floor(16 * 0.3) = 4 attempts -> rows 0..4, cols 0..4
        self.assertEqual(len(cands), 25)
        self.assertEqual(cands[:2], [(0, 0), (0, 1)])
        self.assertEqual(cands[-1], (4, 4))

    def test_maintenance_scans_by_column(self):
        cands = list(preferred_candidates(
            SEARCH_PATTERNS[Category.MAINTENANCE], 16, 12, 4, 4))
        self.assertEqual(cands[:2], [(0, 0), (1, 0)])
        self.assertEqual(cands[-1], (4, 4))

    def test_learning_starts_mid_column(self):
        cands = list(preferred_candidates(
            SEARCH_PATTERNS[Category.LEARNING], 16, 12, 4, 5))
        self.assertEqual(cands[0], (0, 8))
        self.assertTrue(all(c + 4 <= 16 for _, c in cands))

    def test_health_starts_mid_canvas(self):
        cands = list(preferred_candidates(
            SEARCH_PATTERNS[Category.HEALTH], 16, 12, 4, 4))
        self.assertEqual(cands[0], (6, 8))
        self.assertTrue(all(r + 4 <= 12 for r, _ in cands))

    def test_priority_zone_footprints_inside_zone(self):
        cands = list(priority_zone_candidates(16, 12, 4, 4, 0.7))
        # zone is 8 rows × 11 cols -> 5 × 8 origins
        self.assertEqual(len(cands), 40)
        for r, c in cands:
            self.assertLessEqual(r + 4, 8)
            self.assertLessEqual(c + 4, 11)

    def test_priority_zone_too_small(self):
        self.assertEqual(list(priority_zone_candidates(4, 4, 3, 3, 0.7)), [])

    def test_full_grid_row_major_from_origin(self):
        cands = list(full_grid_candidates(4, 4, 2, 2))
        self.assertEqual(len(cands), 9)
        self.assertEqual(cands[:4], [(0, 0), (0, 1), (0, 2), (1, 0)])
        self.assertEqual(cands[-1], (2, 2))

    def test_full_grid_block_too_big(self):
        self.assertEqual(list(full_grid_candidates(4, 4, 5, 2)), [])


class TestGridAllocator(unittest.TestCase):

    def setUp(self):
        self.grid = OccupancyGrid(columns=16, rows=12)
        self.alloc = GridAllocator(self.grid)

    def test_find_position_does_not_mutate(self):
        found = self.alloc.find_position(Category.WORK, Dimensions(5, 4))
        self.assertEqual((found.row, found.col), (0, 0))
        self.assertIs(found.phase, SearchPhase.PREFERRED)
        self.assertEqual(self.grid.count_occupied(), 0)

    def test_allocate_marks_footprint(self):
        found = self.alloc.allocate(Category.WORK, Dimensions(5, 4))
        self.assertIsNotNone(found)
        self.assertEqual(self.grid.count_occupied(), 20)
        self.assertIs(self.grid.owner(3, 4), Category.WORK)

    def test_falls_back_to_priority_zone(self):
        # Fill the whole preferred window of URGENT (rows 0..7, cols 0..8)
        self.grid.mark_rect(0, 0, 9, 8, Category.HEALTH)
        found = self.alloc.find_position(Category.URGENT, Dimensions(2, 2))
        self.assertIs(found.phase, SearchPhase.PRIORITY_ZONE)
        self.assertEqual((found.row, found.col), (0, 9))

    def test_falls_back_to_full_grid(self):
        self.grid.mark_rect(0, 0, 16, 8, Category.HEALTH)
        found = self.alloc.find_position(Category.URGENT, Dimensions(4, 3))
        self.assertIs(found.phase, SearchPhase.FULL_GRID)
        # first free rows from the top, not a row below earlier blocks
        self.assertEqual((found.row, found.col), (8, 0))

    def test_full_grid_takes_topmost_hole(self):
        # Two 4×3 holes: top-right (rows 0..2) and bottom-left (rows 9..11)
        self.grid.mark_rect(0, 0, 12, 9, Category.HEALTH)
        self.grid.mark_rect(3, 12, 4, 9, Category.HEALTH)
        self.grid.mark_rect(9, 4, 8, 3, Category.HEALTH)
        found = self.alloc.find_position(Category.URGENT, Dimensions(4, 3))
        self.assertIs(found.phase, SearchPhase.FULL_GRID)
        self.assertEqual((found.row, found.col), (0, 12))

    def test_no_room_returns_none(self):
        self.grid.mark_rect(0, 0, 16, 12, Category.HEALTH)
        self.assertIsNone(self.alloc.allocate(Category.URGENT, Dimensions(2, 2)))

    def test_oversized_block_returns_none(self):
        self.assertIsNone(self.alloc.find_position(Category.WORK, Dimensions(17, 2)))

    def test_spacing_respected(self):
        self.alloc.allocate(Category.WORK, Dimensions(5, 4))
        found = self.alloc.allocate(Category.RELATIONSHIPS, Dimensions(4, 5))
        # RELATIONSHIPS starts at (6, 0): rows 6..10, two free rows below WORK
        self.assertEqual((found.row, found.col), (6, 0))


if __name__ == "__main__":
    unittest.main()
