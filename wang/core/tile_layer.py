"""
Wang Fill - Tile Layer

Sparse cell store used for map content, working layers, and brush stamps.
"""

from __future__ import annotations

from typing import Iterable

Point = tuple[int, int]


class TileLayer:
    """
    Sparse grid of tile ids indexed by (x, y).

    A layer with width and height set is bounded; points outside the bounds
    are never occupied. A layer without bounds is infinite.
    """

    def __init__(self, width: int | None = None, height: int | None = None):
        if (width is None) != (height is None):
            raise ValueError("Width and height must both be set or both be None")
        if width is not None and (width < 0 or height < 0):
            raise ValueError(f"Invalid layer size: {width}x{height}")

        self.width = width
        self.height = height
        self._cells: dict[Point, int] = {}

    @classmethod
    def from_rows(cls, rows: list[list[int | None]], bounded: bool = True) -> TileLayer:
        """
        Create a layer from row-major tile lists.

        Args:
            rows: rows[y][x] tile ids, None for empty cells
            bounded: Whether the layer's bounds are the size of rows

        Returns:
            New TileLayer
        """
        height = len(rows)
        width = len(rows[0]) if rows else 0
        layer = cls(width, height) if bounded else cls()
        for y, row in enumerate(rows):
            for x, tile in enumerate(row):
                if tile is not None:
                    layer.set_cell((x, y), tile)
        return layer

    @property
    def is_infinite(self) -> bool:
        return self.width is None

    def contains(self, point: Point) -> bool:
        """Check whether a point is inside the layer bounds."""
        if self.width is None or self.height is None:
            return True
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, point: Point) -> int | None:
        """Get the tile at a point, or None if empty or out of bounds."""
        return self._cells.get(point)

    def set_cell(self, point: Point, tile: int | None) -> None:
        """
        Place a tile at a point (None clears the cell).

        Raises:
            ValueError: If the point is outside a bounded layer
        """
        if not self.contains(point):
            raise ValueError(f"Point {point} outside layer bounds {self.width}x{self.height}")
        if tile is None:
            self._cells.pop(point, None)
        else:
            self._cells[point] = tile

    def set_cells(self, cells: Iterable[tuple[Point, int | None]]) -> None:
        for point, tile in cells:
            self.set_cell(point, tile)

    def region(self) -> set[Point]:
        """All occupied points."""
        return set(self._cells)

    def bounding_rect(self) -> tuple[int, int, int, int] | None:
        """(x, y, width, height) of the occupied cells, or None if empty."""
        if not self._cells:
            return None
        xs = [x for x, _ in self._cells]
        ys = [y for _, y in self._cells]
        return min(xs), min(ys), max(xs) - min(xs) + 1, max(ys) - min(ys) + 1

    def to_rows(self) -> list[list[int | None]]:
        """Row-major copy of a bounded layer."""
        if self.width is None or self.height is None:
            raise ValueError("Cannot convert an infinite layer to rows")
        return [
            [self._cells.get((x, y)) for x in range(self.width)]
            for y in range(self.height)
        ]

    def copy(self) -> TileLayer:
        layer = TileLayer(self.width, self.height)
        layer._cells = dict(self._cells)
        return layer

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        size = "infinite" if self.is_infinite else f"{self.width}x{self.height}"
        return f"TileLayer({size}, cells={len(self._cells)})"
