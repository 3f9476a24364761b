"""Shared pytest fixtures for Wang fill tests."""

import pytest

from wang.core.tile_layer import TileLayer
from wang.core.wang_id import WangId
from wang.core.wang_set import WangSet, generate_complete_set


@pytest.fixture
def edge_wang_set():
    """
    Small edge set with three colours.

    Tiles 1 and 2 are the fill candidates (top edge 1 and 2). Tiles 10 and 12
    only exist to be placed above a filled cell (bottom edge 1 and 3).
    """
    wang_set = WangSet("edges", "edge")
    wang_set.add_color("Grass")
    wang_set.add_color("Sand")
    wang_set.add_color("Water")
    wang_set.add_tile(1, WangId.from_edges(top=1))
    wang_set.add_tile(2, WangId.from_edges(top=2))
    wang_set.add_tile(10, WangId.from_edges(bottom=1))
    wang_set.add_tile(12, WangId.from_edges(bottom=3))
    return wang_set


@pytest.fixture
def corner_wang_set():
    """Complete two-colour corner set (16 tiles, ids 0-15)."""
    return generate_complete_set("terrain", "corner", 2)


@pytest.fixture
def complete_edge_wang_set():
    """Complete two-colour edge set (16 tiles, ids 0-15)."""
    return generate_complete_set("paths", "edge", 2)


@pytest.fixture
def grass_layer(corner_wang_set):
    """5x5 layer filled with the all-colour-1 corner tile."""
    grass = corner_wang_set.find_matching_wang_tiles(WangId.from_corners(1, 1, 1, 1))[0][0]
    return TileLayer.from_rows([[grass.tile_id] * 5 for _ in range(5)])
