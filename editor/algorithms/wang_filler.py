"""
Wang Fill - Wang Filler Algorithm

Resolves every cell of a region to a Wang tile whose edge and corner
colours agree with its already-placed neighbors, using greedy constraint
propagation ordered by how many resolved neighbors each cell has.
"""

from __future__ import annotations

import heapq
import random
from dataclasses import dataclass, field
from typing import Callable, Iterable

from wang.core.constants import INDEX_MASK, NUM_INDEXES
from wang.core.random_picker import RandomPicker
from wang.core.tile_layer import Point, TileLayer
from wang.core.topology import OrthogonalTopology, Topology
from wang.core.wang_id import WangId, shared_slots
from wang.core.wang_set import WangSet, WangTile

EMPTY_WANG_ID = WangId()


@dataclass(frozen=True)
class CellInfo:
    """
    Desired Wang id for one cell.

    Slots set in `mask` are hard constraints. Non-zero slots of `desired`
    outside the mask are soft preferences: candidates matching more of them
    win over the others.
    """

    desired: WangId = EMPTY_WANG_ID
    mask: WangId = EMPTY_WANG_ID

    def constrained_id(self) -> WangId:
        """The desired colours on masked slots only."""
        return WangId(int(self.desired) & int(self.mask.mask()))

    def is_empty(self) -> bool:
        return not self.desired and not self.mask


class ConstraintGrid:
    """Sparse mapping from (x, y) to CellInfo."""

    def __init__(self):
        self._cells: dict[Point, CellInfo] = {}

    def get(self, point: Point) -> CellInfo:
        """Get the cell info at a point (empty info if unset)."""
        return self._cells.get(point, CellInfo())

    def set(self, point: Point, info: CellInfo) -> None:
        if info.is_empty():
            self._cells.pop(point, None)
        else:
            self._cells[point] = info

    def points(self) -> set[Point]:
        return set(self._cells)

    def items(self):
        return self._cells.items()

    def __contains__(self, point: object) -> bool:
        return point in self._cells

    def __len__(self) -> int:
        return len(self._cells)


@dataclass
class FillResult:
    """Tiles placed by a fill, and the cells no tile could be found for."""

    placed: dict[Point, int] = field(default_factory=dict)
    unresolved: set[Point] = field(default_factory=set)

    def tile_at(self, point: Point) -> int | None:
        return self.placed.get(point)

    @property
    def is_valid(self) -> bool:
        return not self.unresolved

    @property
    def points(self) -> set[Point]:
        return set(self.placed) | self.unresolved

    def report(self, limit: int = 10) -> str:
        """Human-readable summary of the fill."""
        lines = [f"Placed {len(self.placed)} tile(s), {len(self.unresolved)} unresolved"]

        ordered = sorted(self.unresolved, key=lambda p: (p[1], p[0]))
        for x, y in ordered[:limit]:
            lines.append(f"  Missing Wang tile transition at ({x}, {y})")

        if len(ordered) > limit:
            lines.append(f"  ... and {len(ordered) - limit} more")

        return "\n".join(lines)


class WangFiller:
    """
    Chooses Wang tiles for cells based on their surroundings.

    Algorithm:
        1. Count, for every cell in the region, the neighbors that already
           carry colour information (fixed cells outside the region)
        2. Repeatedly take the cell with the most resolved neighbors
           (ties broken in row-major order)
        3. Derive its desired Wang id: explicit constraints first, then the
           facing colours of resolved neighbors on slots not yet fixed
        4. Pick a compatible tile by weight, or record the cell as unresolved
        5. Bump the neighbor counts of the cells around a placed tile
    """

    def __init__(
        self,
        wang_set: WangSet,
        topology: Topology | None = None,
        rng: random.Random | None = None,
        debug: bool = False,
    ):
        self.wang_set = wang_set
        self.topology = topology if topology is not None else OrthogonalTopology()
        self.rng = rng if rng is not None else random.Random()
        self.debug = debug

    def find_fitting_cell(
        self,
        back: TileLayer,
        front: TileLayer,
        region: Iterable[Point],
        point: Point,
    ) -> int | None:
        """
        Find a tile that fits the surroundings of a single cell.

        Neighbors inside `region` are read from `front`, all others from
        `back`.

        Args:
            back: Existing map content
            front: Layer holding cells already chosen inside the region
            region: Points being edited
            point: Cell to find a tile for

        Returns:
            Tile id, or None if no tile in the Wang set fits
        """
        region = set(region)

        def neighbor_wang_id(neighbor: Point) -> WangId:
            if neighbor in region:
                return self.wang_set.wang_id_of_tile(front.cell_at(neighbor))
            return self._back_wang_id(back, neighbor)

        info = self._info_from_surroundings(point, CellInfo(), neighbor_wang_id)
        return self._pick_tile(info)

    def fill_region(
        self,
        target: TileLayer,
        back: TileLayer,
        region: Iterable[Point],
        constraints: ConstraintGrid | None = None,
        fallback: int | None = None,
    ) -> FillResult:
        """
        Fill a region of the target layer with Wang tiles.

        Args:
            target: Layer receiving the chosen tiles (may be `back` itself)
            back: Existing map content around and under the region
            region: Points to fill
            constraints: Explicit desired Wang ids per point, or None to fill
                         using only the surroundings
            fallback: Tile written to cells that cannot be resolved
                      (None clears them)

        Returns:
            FillResult with placed tiles and unresolved points

        Raises:
            ValueError: If a region point lies outside a bounded target layer
        """
        region = set(region)
        grid = constraints if constraints is not None else ConstraintGrid()

        outside = [point for point in region if not target.contains(point)]
        if outside:
            raise ValueError(f"Region point {min(outside)} outside target layer bounds")

        result = FillResult()
        visited: set[Point] = set()

        def neighbor_wang_id(neighbor: Point) -> WangId:
            if neighbor in region:
                tile = result.placed.get(neighbor)
                if tile is not None:
                    return self.wang_set.wang_id_of_tile(tile)
                if neighbor in visited:
                    return EMPTY_WANG_ID
                return grid.get(neighbor).constrained_id()
            return self._back_wang_id(back, neighbor)

        counts = {
            point: self._count_fixed_neighbors(back, region, point)
            for point in region
        }
        heap = [(-count, point[1], point[0]) for point, count in counts.items()]
        heapq.heapify(heap)

        while heap:
            negative_count, y, x = heapq.heappop(heap)
            point = (x, y)
            if point in visited or -negative_count != counts[point]:
                continue  # Stale entry
            visited.add(point)

            info = self._info_from_surroundings(point, grid.get(point), neighbor_wang_id)
            tile = self._pick_tile(info)

            if tile is None:
                result.unresolved.add(point)
                target.set_cell(point, fallback)
                if self.debug:
                    print(f"Wang fill: no tile for {point} (desired={info.desired}, mask={info.mask})")
                continue

            result.placed[point] = tile
            target.set_cell(point, tile)
            if self.debug:
                print(f"Wang fill: {point} -> tile {tile}")

            for direction in range(NUM_INDEXES):
                neighbor = self.topology.neighbor(point, direction)
                if neighbor in region and neighbor not in visited:
                    counts[neighbor] += 1
                    heapq.heappush(heap, (-counts[neighbor], neighbor[1], neighbor[0]))

        return result

    def _back_wang_id(self, back: TileLayer, point: Point) -> WangId:
        """Wang id of a fixed cell, empty when outside a bounded map."""
        if not back.contains(point):
            return EMPTY_WANG_ID
        return self.wang_set.wang_id_of_tile(back.cell_at(point))

    def _count_fixed_neighbors(self, back: TileLayer, region: set[Point], point: Point) -> int:
        count = 0
        for direction in range(NUM_INDEXES):
            neighbor = self.topology.neighbor(point, direction)
            if neighbor not in region and self._back_wang_id(back, neighbor):
                count += 1
        return count

    def _info_from_surroundings(
        self,
        point: Point,
        info: CellInfo,
        neighbor_wang_id: Callable[[Point], WangId],
    ) -> CellInfo:
        """
        Combine a cell's explicit constraints with its neighbors' colours.

        A neighbor's colour is copied onto the facing slot unless that slot
        is already masked, so explicit constraints always take precedence.
        """
        desired = info.desired
        mask = info.mask.mask()

        for direction in range(NUM_INDEXES):
            neighbor_id = neighbor_wang_id(self.topology.neighbor(point, direction))
            if not neighbor_id:
                continue

            for own_slot, neighbor_slot in shared_slots(direction):
                color = neighbor_id.index_color(neighbor_slot)
                if not color or mask.index_color(own_slot):
                    continue
                desired = desired.with_index_color(own_slot, color)
                mask = mask.with_index_color(own_slot, INDEX_MASK)

        return CellInfo(desired, mask)

    def _pick_tile(self, info: CellInfo) -> int | None:
        """Pick a weighted tile among the best compatible candidates."""
        entries = self.wang_set.compatible_entries(info.desired, info.mask)
        if not entries:
            return None

        picker: RandomPicker[int] = RandomPicker(self.rng)
        for wang_tile, weight in self._preferred_entries(entries, info):
            picker.add(wang_tile.tile_id, weight)
        return picker.pick()

    @staticmethod
    def _preferred_entries(
        entries: list[tuple[WangTile, float]], info: CellInfo
    ) -> list[tuple[WangTile, float]]:
        """Keep the entries that differ from the fewest soft preferences."""
        preferences = [
            (index, color)
            for index, color in enumerate(info.desired.colors())
            if color and not info.mask.index_color(index)
        ]
        if not preferences:
            return entries

        penalties = [
            sum(1 for index, color in preferences if wang_tile.wang_id.index_color(index) != color)
            for wang_tile, _ in entries
        ]
        lowest = min(penalties)
        return [entry for entry, penalty in zip(entries, penalties) if penalty == lowest]
