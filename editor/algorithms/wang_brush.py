"""
Wang Fill - Wang Brush

Turns a brush stroke (a colour painted on a corner, an edge, or a whole
tile) into explicit Wang constraints, and fills the affected cells so the
result connects with the surrounding map.

Pointer handling lives in the editor front end; this module starts from a
paint point and a Wang slot.
"""

from __future__ import annotations

import random
from enum import Enum

from wang.core.constants import INDEX_MASK, NUM_CORNERS, NUM_EDGES, NUM_INDEXES
from wang.core.tile_layer import Point, TileLayer
from wang.core.topology import OrthogonalTopology, Topology
from wang.core.wang_id import (
    BOTTOM,
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    LEFT,
    RIGHT,
    TOP,
    TOP_LEFT,
    TOP_RIGHT,
    WangId,
)
from wang.core.wang_set import WangSet

from .wang_filler import CellInfo, ConstraintGrid, FillResult, WangFiller


class BrushMode(Enum):
    """What part of a tile the current colour is painted on."""

    IDLE = "idle"
    PAINT_CORNER = "corner"
    PAINT_EDGE = "edge"
    PAINT_EDGE_AND_CORNER = "edge_and_corner"


# Direction from a cell to the cell whose top-left corner is its given corner
_VERTEX_DIRECTIONS = {
    TOP_RIGHT: RIGHT,
    BOTTOM_RIGHT: BOTTOM_RIGHT,
    BOTTOM_LEFT: BOTTOM,
}


class WangBrush:
    """
    Builds Wang constraints for brush strokes and previews their fill.

    Usage:
        brush = WangBrush(wang_set)
        brush.set_color(1)
        brush.set_paint_target((4, 2), TOP_LEFT)
        result = brush.paint(layer)
    """

    def __init__(
        self,
        wang_set: WangSet | None = None,
        topology: Topology | None = None,
        rng: random.Random | None = None,
    ):
        self.topology = topology if topology is not None else OrthogonalTopology()
        self.rng = rng if rng is not None else random.Random()
        self.wang_set: WangSet | None = None
        self.color: int = 0
        self.mode: BrushMode = BrushMode.IDLE
        self.paint_point: Point | None = None
        self.wang_index: int = TOP
        self.tile_mode: bool = False
        self.invalid_tiles: set[Point] = set()
        self.stamp: TileLayer = TileLayer()

        if wang_set is not None:
            self.set_wang_set(wang_set)

    def set_wang_set(self, wang_set: WangSet | None) -> None:
        """Switch Wang sets; the colour is cleared and the brush goes idle."""
        self.wang_set = wang_set
        self.color = 0
        self.mode = BrushMode.IDLE
        self.invalid_tiles = set()

    def set_color(self, color: int) -> None:
        """
        Select the colour to paint and derive the brush mode from it.

        Colours only used on corners paint corners, colours only used on
        edges paint edges, anything else paints both.
        """
        self.color = color

        used_as_edge = used_as_corner = False
        if self.wang_set is not None and 0 < color <= self.wang_set.color_count:
            used_as_edge, used_as_corner = self.wang_set.color_usage(color)

        if used_as_edge == used_as_corner:
            self.mode = BrushMode.PAINT_EDGE_AND_CORNER
        elif used_as_edge:
            self.mode = BrushMode.PAINT_EDGE
        else:
            self.mode = BrushMode.PAINT_CORNER

    def set_paint_target(self, point: Point, index: int = TOP_LEFT) -> None:
        """
        Set the cell and slot the brush is over.

        Args:
            point: Cell under the brush
            index: Wang slot (0-7) being painted; ignored in tile mode
        """
        if not 0 <= index < NUM_INDEXES:
            raise ValueError(f"Wang index out of range: {index}")
        self.paint_point = point
        self.wang_index = index

    # -------------------------------------------------------------------------
    # Constraint construction
    # -------------------------------------------------------------------------

    def build_constraints(self, layer: TileLayer) -> tuple[ConstraintGrid, set[Point]]:
        """
        Build the constraint grid and region for the current stroke.

        Desired ids start from the Wang ids of the cells currently on the
        layer, so untouched slots are kept where possible.

        Returns:
            (constraints, region); both empty when the brush is idle
        """
        grid = ConstraintGrid()
        region: set[Point] = set()

        if self.wang_set is None or self.mode == BrushMode.IDLE or self.paint_point is None:
            return grid, region

        if self.tile_mode:
            self._build_tile_constraints(layer, grid, region)
            return grid, region

        mode = self.mode
        if mode == BrushMode.PAINT_EDGE_AND_CORNER:
            is_corner = WangId.is_corner(self.wang_index)
            mode = BrushMode.PAINT_CORNER if is_corner else BrushMode.PAINT_EDGE

        if mode == BrushMode.PAINT_CORNER:
            self._build_corner_constraints(layer, grid, region)
        elif WangId.is_corner(self.wang_index):
            pass  # Edge painting has no meaning for a corner slot
        else:
            self._build_edge_constraints(layer, grid, region)

        return grid, region

    def _current_wang_id(self, layer: TileLayer, point: Point) -> WangId:
        return self.wang_set.wang_id_of_tile(layer.cell_at(point))

    def _vertex_tile(self) -> Point:
        """Cell whose top-left corner is the corner being painted."""
        # Top-left and edge slots paint the paint point's own top-left corner
        direction = _VERTEX_DIRECTIONS.get(self.wang_index)
        if direction is None:
            return self.paint_point
        return self.topology.neighbor(self.paint_point, direction)

    def _build_corner_constraints(
        self, layer: TileLayer, grid: ConstraintGrid, region: set[Point]
    ) -> None:
        vertex = self._vertex_tile()

        # The four cells sharing the vertex, each with the corner touching it
        around_vertex = (
            (self.topology.neighbor(vertex, TOP), BOTTOM_LEFT),
            (vertex, TOP_LEFT),
            (self.topology.neighbor(vertex, LEFT), TOP_RIGHT),
            (self.topology.neighbor(vertex, TOP_LEFT), BOTTOM_RIGHT),
        )

        for point, corner_index in around_vertex:
            region.add(point)
            desired = self._current_wang_id(layer, point).with_index_color(corner_index, self.color)
            mask = WangId().with_index_color(corner_index, INDEX_MASK)
            grid.set(point, CellInfo(desired, mask))

    def _build_edge_constraints(
        self, layer: TileLayer, grid: ConstraintGrid, region: set[Point]
    ) -> None:
        point = self.paint_point
        across = self.topology.neighbor(point, self.wang_index)
        opposite = WangId.opposite_index(self.wang_index)

        for cell, index in ((point, self.wang_index), (across, opposite)):
            region.add(cell)
            desired = self._current_wang_id(layer, cell).with_index_color(index, self.color)
            mask = WangId().with_index_color(index, INDEX_MASK)
            grid.set(cell, CellInfo(desired, mask))

    def _build_tile_constraints(
        self, layer: TileLayer, grid: ConstraintGrid, region: set[Point]
    ) -> None:
        point = self.paint_point
        desired = self._current_wang_id(layer, point)
        mask = WangId()

        if self.mode == BrushMode.PAINT_CORNER:
            for corner in range(NUM_CORNERS):
                desired = desired.with_corner_color(corner, self.color)
                mask = mask.with_corner_color(corner, INDEX_MASK)
        elif self.mode == BrushMode.PAINT_EDGE:
            for edge in range(NUM_EDGES):
                desired = desired.with_edge_color(edge, self.color)
                mask = mask.with_edge_color(edge, INDEX_MASK)
        else:
            for index in range(NUM_INDEXES):
                desired = desired.with_index_color(index, self.color)
                mask = mask.with_index_color(index, INDEX_MASK)

        region.add(point)
        grid.set(point, CellInfo(desired, mask))

        paints_edges = self.mode in (BrushMode.PAINT_EDGE, BrushMode.PAINT_EDGE_AND_CORNER)
        paints_corners = self.mode in (BrushMode.PAINT_CORNER, BrushMode.PAINT_EDGE_AND_CORNER)

        for direction in range(NUM_INDEXES):
            is_corner = WangId.is_corner(direction)
            if self.mode == BrushMode.PAINT_EDGE and is_corner:
                continue

            adjacent = self.topology.neighbor(point, direction)
            adjacent_desired = self._current_wang_id(layer, adjacent)
            adjacent_mask = WangId()

            # The side or corner facing the painted tile
            if is_corner or paints_edges:
                index = WangId.opposite_index(direction)
                adjacent_desired = adjacent_desired.with_index_color(index, self.color)
                adjacent_mask = adjacent_mask.with_index_color(index, INDEX_MASK)

            # The corners touching the painted tile
            if not is_corner and paints_corners:
                for index in ((direction + 3) % NUM_INDEXES, (direction + 5) % NUM_INDEXES):
                    adjacent_desired = adjacent_desired.with_index_color(index, self.color)
                    adjacent_mask = adjacent_mask.with_index_color(index, INDEX_MASK)

            region.add(adjacent)
            grid.set(adjacent, CellInfo(adjacent_desired, adjacent_mask))

    # -------------------------------------------------------------------------
    # Fill
    # -------------------------------------------------------------------------

    def preview(self, layer: TileLayer) -> FillResult:
        """
        Fill the current stroke into a fresh stamp layer.

        The stamp is kept in `self.stamp` and unresolved cells in
        `self.invalid_tiles`.
        """
        self.stamp = TileLayer()
        self.invalid_tiles = set()

        grid, region = self.build_constraints(layer)
        if not region:
            return FillResult()

        filler = WangFiller(self.wang_set, self.topology, self.rng)
        result = filler.fill_region(self.stamp, layer, region, grid)
        self.invalid_tiles = set(result.unresolved)
        return result

    def paint(self, layer: TileLayer) -> FillResult:
        """
        Preview the stroke and write the placed tiles into the layer.

        Cells outside a bounded layer are dropped. Unresolved cells keep
        their current tile.

        Returns:
            The FillResult of the preview
        """
        result = self.preview(layer)
        for point, tile in result.placed.items():
            if layer.contains(point):
                layer.set_cell(point, tile)
        return result

    def capture_hover_color(self, layer: TileLayer) -> int | None:
        """
        Pick up the colour under the brush as the new brush colour.

        Returns:
            The captured colour, or None if nothing changed
        """
        if self.wang_set is None or self.paint_point is None:
            return None

        wang_id = self._current_wang_id(layer, self.paint_point)
        new_color = wang_id.index_color(self.wang_index)
        if new_color and new_color != self.color:
            self.set_color(new_color)
            return new_color
        return None

    def status_info(self) -> str:
        """Status bar text for the current paint target."""
        if self.paint_point is None:
            return ""

        x, y = self.paint_point
        info = f"{x}, {y}"
        if self.wang_set is not None and 0 < self.color <= self.wang_set.color_count:
            info += f" [{self.wang_set.color_at(self.color).name}]"
        if self.invalid_tiles:
            info += " (Missing Wang tile transition)"
        return info
