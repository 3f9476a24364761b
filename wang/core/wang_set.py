"""
Wang Fill - Wang Set

Tile catalog for one colouring scheme: the Wang colours, the tiles labelled
with them, and an index used to look up candidate tiles quickly.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product

from .constants import (
    DEFAULT_COLORS,
    MAX_COLOR_COUNT,
    NUM_INDEXES,
    WANG_TYPE_CORNER,
    WANG_TYPE_EDGE,
    WANG_TYPE_MIXED,
    WANG_TYPES,
)
from .wang_id import WangId

EMPTY_WANG_ID = WangId()


@dataclass(frozen=True)
class WangColor:
    """A named colour that tile edges and corners can be labelled with."""

    name: str
    color: tuple[int, int, int]
    probability: float = 1.0


@dataclass(frozen=True)
class WangTile:
    """A tile together with its Wang id and its own selection probability."""

    tile_id: int
    wang_id: WangId
    probability: float = 1.0


class WangSet:
    """
    Catalog of Wang tiles for a single colouring scheme.

    Tiles are kept in insertion order. An index maps (is_corner, color) to
    the positions of the tiles using that colour in that role, so candidate
    queries only scan tiles that can possibly match.
    """

    def __init__(self, name: str = "", wang_type: str = WANG_TYPE_MIXED):
        if wang_type not in WANG_TYPES:
            raise ValueError(f"Unknown Wang set type: {wang_type!r}")

        self.name = name
        self.type = wang_type
        self._colors: list[WangColor] = []
        self._tiles: list[WangTile] = []
        self._weights: list[float] = []
        self._wang_ids_by_tile: dict[int, WangId] = {}
        self._index: dict[tuple[bool, int], list[int]] = {}

    # -------------------------------------------------------------------------
    # Colours
    # -------------------------------------------------------------------------

    @property
    def color_count(self) -> int:
        return len(self._colors)

    @property
    def colors(self) -> list[WangColor]:
        return list(self._colors)

    def add_color(
        self,
        name: str,
        color: tuple[int, int, int] | None = None,
        probability: float = 1.0,
    ) -> int:
        """
        Add a Wang colour.

        Args:
            name: Display name of the colour
            color: RGB tuple, or None to use the next default colour
            probability: Selection factor for tiles using this colour

        Returns:
            The colour's index (1-based; 0 means "no colour")

        Raises:
            ValueError: If the set already has the maximum number of colours
                        or the probability is negative
        """
        if len(self._colors) >= MAX_COLOR_COUNT:
            raise ValueError(f"Wang set cannot have more than {MAX_COLOR_COUNT} colors")
        if probability < 0:
            raise ValueError(f"Color probability must not be negative: {probability}")

        if color is None:
            color = DEFAULT_COLORS[len(self._colors) % len(DEFAULT_COLORS)]

        self._colors.append(WangColor(name, color, probability))
        return len(self._colors)

    def color_at(self, index: int) -> WangColor:
        """Get a colour by its 1-based index."""
        if not 1 <= index <= len(self._colors):
            raise ValueError(f"No Wang color at index {index}")
        return self._colors[index - 1]

    def color_usage(self, color: int) -> tuple[bool, bool]:
        """
        Find out how a colour is used by the tiles in this set.

        Returns:
            (used_as_edge, used_as_corner)
        """
        used_as_edge = bool(self._index.get((False, color)))
        used_as_corner = bool(self._index.get((True, color)))
        return used_as_edge, used_as_corner

    # -------------------------------------------------------------------------
    # Tiles
    # -------------------------------------------------------------------------

    @property
    def wang_tiles(self) -> list[WangTile]:
        return list(self._tiles)

    def add_tile(self, tile_id: int, wang_id: WangId, probability: float = 1.0) -> WangTile:
        """
        Add a tile to the catalog.

        Args:
            tile_id: Tile reference as stored in tile layers
            wang_id: The tile's edge and corner colours
            probability: Tile selection factor (0 keeps the tile as a
                         last-resort candidate)

        Returns:
            The new catalog entry

        Raises:
            ValueError: If the Wang id uses unknown colours or slots not
                        allowed by the set type, or probability is negative
        """
        if probability < 0:
            raise ValueError(f"Tile probability must not be negative: {probability}")

        for index, color in enumerate(wang_id.colors()):
            if color > len(self._colors):
                raise ValueError(
                    f"Tile {tile_id} uses color {color} but set has {len(self._colors)} colors"
                )
            if not color:
                continue
            is_corner = WangId.is_corner(index)
            if self.type == WANG_TYPE_CORNER and not is_corner:
                raise ValueError(f"Tile {tile_id} has edge colors in a corner set")
            if self.type == WANG_TYPE_EDGE and is_corner:
                raise ValueError(f"Tile {tile_id} has corner colors in an edge set")

        wang_tile = WangTile(tile_id, wang_id, probability)
        position = len(self._tiles)
        self._tiles.append(wang_tile)
        self._weights.append(self.tile_weight(wang_tile))

        # First listing of a tile defines its Wang id
        self._wang_ids_by_tile.setdefault(tile_id, wang_id)

        roles = set()
        for index, color in enumerate(wang_id.colors()):
            if color:
                roles.add((WangId.is_corner(index), color))
        for key in sorted(roles):
            self._index.setdefault(key, []).append(position)

        return wang_tile

    def tile_weight(self, wang_tile: WangTile) -> float:
        """Tile probability multiplied by the probability of each colour it uses."""
        weight = wang_tile.probability
        for color in wang_tile.wang_id.colors():
            if color:
                weight *= self.color_at(color).probability
        return weight

    def wang_id_of_tile(self, tile_id: int | None) -> WangId:
        """
        Get the Wang id recorded for a tile.

        Returns:
            The tile's Wang id, or the empty id for empty cells and tiles
            that are not part of this set
        """
        if tile_id is None:
            return EMPTY_WANG_ID
        return self._wang_ids_by_tile.get(tile_id, EMPTY_WANG_ID)

    # -------------------------------------------------------------------------
    # Candidate lookup
    # -------------------------------------------------------------------------

    def compatible_entries(self, desired: WangId, mask: WangId) -> list[tuple[WangTile, float]]:
        """
        Find all tiles whose Wang id matches the desired id on masked slots.

        Args:
            desired: Required colours
            mask: Slots that must match (non-zero slots are selected)

        Returns:
            List of (wang_tile, weight) in catalog order
        """
        candidates = self._candidate_positions(desired, mask)
        return [
            (self._tiles[position], self._weights[position])
            for position in candidates
            if self._tiles[position].wang_id.matches(desired, mask)
        ]

    def find_matching_wang_tiles(self, wang_id: WangId) -> list[tuple[WangTile, float]]:
        """Find tiles matching every non-zero slot of a Wang id."""
        return self.compatible_entries(wang_id, wang_id.mask())

    def _candidate_positions(self, desired: WangId, mask: WangId) -> list[int] | range:
        """Smallest index bucket covering a masked colour, or all positions."""
        best: list[int] | None = None
        for index in range(NUM_INDEXES):
            if not mask.index_color(index):
                continue
            color = desired.index_color(index)
            if not color:
                continue
            bucket = self._index.get((WangId.is_corner(index), color), [])
            if best is None or len(bucket) < len(best):
                best = bucket
                if not best:
                    break

        if best is None:
            return range(len(self._tiles))
        return best

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, tile_id: object) -> bool:
        return tile_id in self._wang_ids_by_tile

    def __repr__(self) -> str:
        return (
            f"WangSet({self.name!r}, type={self.type!r}, "
            f"colors={len(self._colors)}, tiles={len(self._tiles)})"
        )


def generate_complete_set(
    name: str,
    wang_type: str,
    color_count: int,
    first_tile_id: int = 0,
) -> WangSet:
    """
    Build a corner or edge Wang set containing every colour combination.

    Tile ids are assigned sequentially, so a set with n colours holds
    n**4 tiles.

    Args:
        name: Name of the set
        wang_type: "corner" or "edge"
        color_count: Number of colours (1-15)
        first_tile_id: Tile id of the first generated tile

    Returns:
        The complete WangSet
    """
    if wang_type not in (WANG_TYPE_CORNER, WANG_TYPE_EDGE):
        raise ValueError(f"Can only generate corner or edge sets, not {wang_type!r}")

    wang_set = WangSet(name, wang_type)
    for i in range(color_count):
        wang_set.add_color(f"Color {i + 1}")

    offset = 1 if wang_type == WANG_TYPE_CORNER else 0
    tile_id = first_tile_id
    for combination in product(range(1, color_count + 1), repeat=4):
        wang_id = EMPTY_WANG_ID
        for position, color in enumerate(combination):
            wang_id = wang_id.with_index_color(position * 2 + offset, color)
        wang_set.add_tile(tile_id, wang_id)
        tile_id += 1

    return wang_set
