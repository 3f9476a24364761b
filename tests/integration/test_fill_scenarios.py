"""
Integration tests for whole-region Wang fills.

Covers the basic single-cell scenarios (match, no match, explicit constraint
overriding a neighbor) and larger fills on orthogonal and staggered maps.
"""

import random

import pytest

from editor.algorithms.wang_brush import WangBrush
from editor.algorithms.wang_filler import CellInfo, ConstraintGrid, WangFiller
from wang.core.tile_layer import TileLayer
from wang.core.topology import StaggeredTopology
from wang.core.wang_id import WangId
from wang.core.wang_set import generate_complete_set
from wang.core.wang_validator import WangValidator


def full_region(width, height):
    return {(x, y) for y in range(height) for x in range(width)}


# =============================================================================
# Single Cell Scenarios
# =============================================================================

class TestSingleCellScenarios:
    """A single cell below a fixed neighbor in the edge_wang_set fixture."""

    def test_neighbor_selects_only_compatible_tile(self, edge_wang_set):
        """North neighbor with bottom edge 1 forces top edge 1."""
        for seed in range(20):
            layer = TileLayer.from_rows([[10], [None]])
            filler = WangFiller(edge_wang_set, rng=random.Random(seed))
            result = filler.fill_region(layer, layer, {(0, 1)})

            assert result.placed == {(0, 1): 1}
            assert result.unresolved == set()
            assert layer.cell_at((0, 1)) == 1

    def test_unknown_neighbor_color_is_unresolved(self, edge_wang_set):
        """North neighbor with bottom edge 3: no tile has top edge 3."""
        layer = TileLayer.from_rows([[12], [None]])
        result = WangFiller(edge_wang_set).fill_region(layer, layer, {(0, 1)})

        assert result.placed == {}
        assert result.unresolved == {(0, 1)}
        assert layer.cell_at((0, 1)) is None

    def test_explicit_constraint_beats_neighbor(self, edge_wang_set):
        """Grid asks for top edge 2 while the neighbor implies 1."""
        layer = TileLayer.from_rows([[10], [None]])
        grid = ConstraintGrid()
        grid.set((0, 1), CellInfo(WangId.from_edges(top=2), WangId.from_edges(top=15)))

        result = WangFiller(edge_wang_set).fill_region(layer, layer, {(0, 1)}, grid)

        assert result.placed == {(0, 1): 2}
        assert result.is_valid


# =============================================================================
# Larger Fills
# =============================================================================

class TestLargeFills:
    """Whole-map fills with complete sets."""

    @pytest.mark.parametrize("wang_type", ["corner", "edge"])
    def test_complete_set_fill_has_no_mismatches(self, wang_type):
        wang_set = generate_complete_set("terrain", wang_type, 3)
        layer = TileLayer(20, 15)

        result = WangFiller(wang_set, rng=random.Random(99)).fill_region(layer, layer, full_region(20, 15))

        assert result.is_valid
        assert len(result.placed) == 300
        assert WangValidator(wang_set).find_mismatched_cells(layer) == set()

    @pytest.mark.parametrize("axis,index", [("x", "odd"), ("y", "odd"), ("y", "even")])
    def test_staggered_fill_has_no_mismatches(self, axis, index):
        wang_set = generate_complete_set("terrain", "corner", 3)
        topology = StaggeredTopology(axis, index)
        layer = TileLayer(12, 12)

        filler = WangFiller(wang_set, topology, random.Random(5))
        result = filler.fill_region(layer, layer, full_region(12, 12))

        assert result.is_valid
        assert WangValidator(wang_set, topology).find_mismatched_cells(layer) == set()

    def test_same_seed_same_result(self, corner_wang_set):
        def run(seed):
            layer = TileLayer(10, 10)
            WangFiller(corner_wang_set, rng=random.Random(seed)).fill_region(layer, layer, full_region(10, 10))
            return layer.to_rows()

        assert run(17) == run(17)

    def test_fill_hole_matches_surroundings(self, corner_wang_set):
        layer = TileLayer(8, 8)
        WangFiller(corner_wang_set, rng=random.Random(1)).fill_region(layer, layer, full_region(8, 8))

        hole = {(x, y) for y in range(2, 6) for x in range(2, 6)}
        for point in hole:
            layer.set_cell(point, None)

        result = WangFiller(corner_wang_set, rng=random.Random(2)).fill_region(layer, layer, hole)

        assert result.is_valid
        assert WangValidator(corner_wang_set).find_mismatched_cells(layer) == set()

    def test_random_strokes_keep_map_valid(self, corner_wang_set):
        rng = random.Random(31)
        layer = TileLayer(10, 10)
        WangFiller(corner_wang_set, rng=rng).fill_region(layer, layer, full_region(10, 10))

        brush = WangBrush(corner_wang_set, rng=rng)
        for _ in range(25):
            brush.set_color(rng.randint(1, 2))
            brush.set_paint_target((rng.randrange(10), rng.randrange(10)), rng.randrange(8))
            assert brush.paint(layer).is_valid

        assert WangValidator(corner_wang_set).find_mismatched_cells(layer) == set()
