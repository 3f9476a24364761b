"""
Unit tests for WangValidator.
"""

from wang.core.tile_layer import TileLayer
from wang.core.wang_id import BOTTOM, BOTTOM_RIGHT, RIGHT, TOP, TOP_LEFT, WangId
from wang.core.wang_validator import WangValidator


def tile_for(wang_set, wang_id):
    return wang_set.find_matching_wang_tiles(wang_id)[0][0].tile_id


class TestWangValidator:
    """Tests for finding broken transitions."""

    def test_uniform_layer_is_valid(self, corner_wang_set, grass_layer):
        validator = WangValidator(corner_wang_set)
        assert validator.find_mismatched_cells(grass_layer) == set()

    def test_corner_mismatch_detected(self, corner_wang_set, grass_layer):
        water = tile_for(corner_wang_set, WangId.from_corners(2, 2, 2, 2))
        grass_layer.set_cell((2, 2), water)

        validator = WangValidator(corner_wang_set)
        mismatched = validator.find_mismatched_cells(grass_layer)

        # The painted cell and all 8 cells around it disagree
        assert len(mismatched) == 9
        assert validator.mismatched_slots(grass_layer, (2, 2)) == list(range(8))

    def test_mismatch_directions(self, corner_wang_set, grass_layer):
        validator = WangValidator(corner_wang_set)
        water_corner = tile_for(corner_wang_set, WangId.from_corners(1, 2, 1, 1))
        grass_layer.set_cell((2, 2), water_corner)

        assert validator.mismatched_slots(grass_layer, (2, 2)) == [RIGHT, BOTTOM_RIGHT, BOTTOM]
        assert validator.mismatched_slots(grass_layer, (3, 3)) == [TOP_LEFT]

    def test_empty_neighbors_never_mismatch(self, corner_wang_set):
        water = tile_for(corner_wang_set, WangId.from_corners(2, 2, 2, 2))
        layer = TileLayer(3, 3)
        layer.set_cell((1, 1), water)
        assert WangValidator(corner_wang_set).find_mismatched_cells(layer) == set()

    def test_foreign_tiles_never_mismatch(self, corner_wang_set, grass_layer):
        grass_layer.set_cell((2, 2), 500)
        validator = WangValidator(corner_wang_set)
        assert validator.mismatched_slots(grass_layer, (2, 2)) == []
        assert validator.find_mismatched_cells(grass_layer) == set()

    def test_region_limits_check(self, edge_wang_set):
        layer = TileLayer.from_rows([[12], [1]])
        validator = WangValidator(edge_wang_set)

        assert validator.mismatched_slots(layer, (0, 1)) == [TOP]
        assert validator.mismatched_slots(layer, (0, 0)) == [BOTTOM]
        assert validator.find_mismatched_cells(layer, region=[(0, 1)]) == {(0, 1)}
