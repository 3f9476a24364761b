"""
Wang Tile Neighbor Validator

Finds placed Wang tiles that disagree with a neighbor on a shared edge or
corner colour.
"""

from __future__ import annotations

from typing import Iterable

from .constants import NUM_INDEXES
from .tile_layer import Point, TileLayer
from .topology import OrthogonalTopology, Topology
from .wang_id import shared_slots
from .wang_set import WangSet


class WangValidator:
    """
    Validates placed tiles against the colours of their neighbors.

    This allows the editor to highlight cells where a transition is broken,
    for example after manual painting over auto-filled tiles.
    """

    def __init__(self, wang_set: WangSet, topology: Topology | None = None):
        self.wang_set = wang_set
        self.topology = topology if topology is not None else OrthogonalTopology()

    def mismatched_slots(self, layer: TileLayer, point: Point) -> list[int]:
        """
        List the directions in which a cell disagrees with its neighbor.

        Slots with colour 0 on either side never conflict, so empty cells and
        tiles outside the Wang set are always valid.

        Returns:
            Sorted list of direction indexes with a conflict
        """
        wang_id = self.wang_set.wang_id_of_tile(layer.cell_at(point))
        if not wang_id:
            return []

        mismatched = []
        for direction in range(NUM_INDEXES):
            neighbor = self.topology.neighbor(point, direction)
            if not layer.contains(neighbor):
                continue
            neighbor_id = self.wang_set.wang_id_of_tile(layer.cell_at(neighbor))
            if not neighbor_id:
                continue

            for own_slot, neighbor_slot in shared_slots(direction):
                own_color = wang_id.index_color(own_slot)
                neighbor_color = neighbor_id.index_color(neighbor_slot)
                if own_color and neighbor_color and own_color != neighbor_color:
                    mismatched.append(direction)
                    break

        return mismatched

    def find_mismatched_cells(
        self, layer: TileLayer, region: Iterable[Point] | None = None
    ) -> set[Point]:
        """
        Find all cells with at least one mismatched neighbor.

        Args:
            layer: Layer to check
            region: Points to check, or None for every occupied cell

        Returns:
            Set of (x, y) points with invalid neighbors
        """
        points = layer.region() if region is None else region
        return {point for point in points if self.mismatched_slots(layer, point)}
