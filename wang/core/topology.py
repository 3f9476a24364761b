"""
Wang Fill - Grid Topologies

Neighbor lookup for orthogonal and staggered (isometric/hexagonal) maps.
The fill algorithm only ever asks a topology for the neighbor of a cell in
the direction of one of the 8 Wang slots.
"""

from __future__ import annotations

from typing import Protocol

from .constants import (
    NUM_INDEXES,
    STAGGER_AXIS_X,
    STAGGER_AXIS_Y,
    STAGGER_INDEX_EVEN,
    STAGGER_INDEX_ODD,
)
from .wang_id import BOTTOM, LEFT, RIGHT, TOP

Point = tuple[int, int]

# Offsets for slots 0-7 (top, top-right, right, ... top-left)
AROUND_TILE_POINTS: tuple[Point, ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


def _check_index(index: int) -> None:
    if not 0 <= index < NUM_INDEXES:
        raise ValueError(f"No neighbor defined for Wang index {index}")


class Topology(Protocol):
    """Neighbor lookup in the direction of a Wang slot."""

    def neighbor(self, point: Point, index: int) -> Point:
        """Return the cell across slot `index` of the cell at `point`."""
        ...


class OrthogonalTopology:
    """Square grid: every slot maps to a fixed offset."""

    def neighbor(self, point: Point, index: int) -> Point:
        _check_index(index)
        dx, dy = AROUND_TILE_POINTS[index]
        return point[0] + dx, point[1] + dy

    def __repr__(self) -> str:
        return "OrthogonalTopology()"


class StaggeredTopology:
    """
    Staggered grid where every other row (or column) is shifted by half a tile.

    Tiles are diamonds, so the Wang edges face the four diagonal screen
    directions: top -> top_right, right -> bottom_right, bottom -> bottom_left,
    left -> top_left. Corner neighbors are reached by two half-steps across
    the edges on either side of the corner.
    """

    def __init__(self, stagger_axis: str = STAGGER_AXIS_Y, stagger_index: str = STAGGER_INDEX_ODD):
        if stagger_axis not in (STAGGER_AXIS_X, STAGGER_AXIS_Y):
            raise ValueError(f"Unknown stagger axis: {stagger_axis!r}")
        if stagger_index not in (STAGGER_INDEX_ODD, STAGGER_INDEX_EVEN):
            raise ValueError(f"Unknown stagger index: {stagger_index!r}")

        self.stagger_axis = stagger_axis
        self.stagger_index = stagger_index
        self._index_bit = 1 if stagger_index == STAGGER_INDEX_EVEN else 0

    def _is_shifted(self, point: Point) -> bool:
        x, y = point
        coordinate = x if self.stagger_axis == STAGGER_AXIS_X else y
        return bool((coordinate & 1) ^ self._index_bit)

    def top_left(self, point: Point) -> Point:
        x, y = point
        if self.stagger_axis == STAGGER_AXIS_Y:
            return (x, y - 1) if self._is_shifted(point) else (x - 1, y - 1)
        return (x - 1, y) if self._is_shifted(point) else (x - 1, y - 1)

    def top_right(self, point: Point) -> Point:
        x, y = point
        if self.stagger_axis == STAGGER_AXIS_Y:
            return (x + 1, y - 1) if self._is_shifted(point) else (x, y - 1)
        return (x + 1, y) if self._is_shifted(point) else (x + 1, y - 1)

    def bottom_left(self, point: Point) -> Point:
        x, y = point
        if self.stagger_axis == STAGGER_AXIS_Y:
            return (x, y + 1) if self._is_shifted(point) else (x - 1, y + 1)
        return (x - 1, y + 1) if self._is_shifted(point) else (x - 1, y)

    def bottom_right(self, point: Point) -> Point:
        x, y = point
        if self.stagger_axis == STAGGER_AXIS_Y:
            return (x + 1, y + 1) if self._is_shifted(point) else (x, y + 1)
        return (x + 1, y + 1) if self._is_shifted(point) else (x + 1, y)

    def neighbor(self, point: Point, index: int) -> Point:
        _check_index(index)
        if index == TOP:
            return self.top_right(point)
        if index == RIGHT:
            return self.bottom_right(point)
        if index == BOTTOM:
            return self.bottom_left(point)
        if index == LEFT:
            return self.top_left(point)

        # Corner: step across the preceding edge, then the following one
        previous_edge = (index - 1) % NUM_INDEXES
        next_edge = (index + 1) % NUM_INDEXES
        return self.neighbor(self.neighbor(point, previous_edge), next_edge)

    def __repr__(self) -> str:
        return f"StaggeredTopology(stagger_axis={self.stagger_axis!r}, stagger_index={self.stagger_index!r})"
