"""
Unit tests for TileLayer.
"""

import pytest

from wang.core.tile_layer import TileLayer


class TestBoundedLayer:
    """Tests for layers with a fixed size."""

    def test_set_and_get(self):
        layer = TileLayer(3, 2)
        layer.set_cell((2, 1), 7)
        assert layer.cell_at((2, 1)) == 7
        assert layer.cell_at((0, 0)) is None

    def test_set_none_clears_cell(self):
        layer = TileLayer(3, 2)
        layer.set_cell((1, 1), 4)
        layer.set_cell((1, 1), None)
        assert layer.cell_at((1, 1)) is None
        assert len(layer) == 0

    def test_out_of_bounds_write_raises(self):
        layer = TileLayer(3, 2)
        with pytest.raises(ValueError, match="outside layer bounds"):
            layer.set_cell((3, 0), 1)

    def test_out_of_bounds_read_is_empty(self):
        assert TileLayer(3, 2).cell_at((-1, 0)) is None

    def test_contains(self):
        layer = TileLayer(3, 2)
        assert layer.contains((0, 0))
        assert layer.contains((2, 1))
        assert not layer.contains((2, 2))
        assert not layer.contains((-1, 1))

    def test_from_rows_and_to_rows(self):
        rows = [[1, None, 3], [None, 5, None]]
        layer = TileLayer.from_rows(rows)
        assert (layer.width, layer.height) == (3, 2)
        assert layer.to_rows() == rows
        assert layer.region() == {(0, 0), (2, 0), (1, 1)}

    def test_copy_is_independent(self):
        layer = TileLayer.from_rows([[1, 2]])
        copy = layer.copy()
        copy.set_cell((0, 0), 9)
        assert layer.cell_at((0, 0)) == 1
        assert copy.width == 2

    def test_only_width_raises(self):
        with pytest.raises(ValueError):
            TileLayer(3, None)

    def test_set_cells(self):
        layer = TileLayer(2, 2)
        layer.set_cells([((0, 0), 1), ((1, 1), 2)])
        assert layer.to_rows() == [[1, None], [None, 2]]


class TestInfiniteLayer:
    """Tests for unbounded layers."""

    def test_any_point_is_contained(self):
        layer = TileLayer()
        assert layer.is_infinite
        assert layer.contains((-100, 5000))

    def test_bounding_rect(self):
        layer = TileLayer()
        assert layer.bounding_rect() is None
        layer.set_cell((-2, 3), 1)
        layer.set_cell((4, -1), 2)
        assert layer.bounding_rect() == (-2, -1, 7, 5)

    def test_to_rows_raises(self):
        with pytest.raises(ValueError):
            TileLayer().to_rows()

    def test_from_rows_unbounded(self):
        layer = TileLayer.from_rows([[1]], bounded=False)
        assert layer.is_infinite
        assert layer.cell_at((0, 0)) == 1

    def test_repr(self):
        assert repr(TileLayer()) == "TileLayer(infinite, cells=0)"
        assert repr(TileLayer(2, 3)) == "TileLayer(2x3, cells=0)"
