"""
Wang Fill - Wang Id

Packed per-slot colour encoding of a tile's edge and corner labels.

Slots are numbered clockwise starting at the top edge:

    7 0 1        TOP_LEFT     TOP     TOP_RIGHT
    6 . 2        LEFT                 RIGHT
    5 4 3        BOTTOM_LEFT  BOTTOM  BOTTOM_RIGHT

Even slots are edges, odd slots are corners. Each slot holds a 4-bit colour
where 0 means "no constraint".
"""

from __future__ import annotations

from typing import Iterable

from .constants import BITS_PER_INDEX, FULL_MASK, INDEX_MASK, NUM_INDEXES

# Slot indexes
TOP = 0
TOP_RIGHT = 1
RIGHT = 2
BOTTOM_RIGHT = 3
BOTTOM = 4
BOTTOM_LEFT = 5
LEFT = 6
TOP_LEFT = 7

EDGE_INDEXES = (TOP, RIGHT, BOTTOM, LEFT)
CORNER_INDEXES = (TOP_RIGHT, BOTTOM_RIGHT, BOTTOM_LEFT, TOP_LEFT)

INDEX_NAMES = (
    "top",
    "top_right",
    "right",
    "bottom_right",
    "bottom",
    "bottom_left",
    "left",
    "top_left",
)

# Tile-local 3x3 grid to slot index, indexed as _GRID_INDEXES[y][x]
_GRID_INDEXES = (
    (TOP_LEFT, TOP, TOP_RIGHT),
    (LEFT, None, RIGHT),
    (BOTTOM_LEFT, BOTTOM, BOTTOM_RIGHT),
)


def _check_index(index: int) -> None:
    if not 0 <= index < NUM_INDEXES:
        raise ValueError(f"Wang index out of range: {index}")


def shared_slots(index: int) -> tuple[tuple[int, int], ...]:
    """
    Slots shared with the neighbor across slot `index`.

    A neighbor across an edge shares that edge and the two corners at its
    ends; a diagonal neighbor only shares the corner.

    Args:
        index: Direction of the neighbor (0-7)

    Returns:
        Tuple of (own_slot, neighbor_slot) pairs
    """
    _check_index(index)
    opposite = (index + 4) % NUM_INDEXES
    if index % 2 == 1:
        return ((index, opposite),)
    return (
        (index, opposite),
        ((index + 1) % NUM_INDEXES, (index + 3) % NUM_INDEXES),
        ((index + 7) % NUM_INDEXES, (index + 5) % NUM_INDEXES),
    )


def _check_color(color: int) -> None:
    if not 0 <= color <= INDEX_MASK:
        raise ValueError(f"Wang color out of range: {color}")


class WangId:
    """
    Immutable colour assignment for the 8 slots around a tile.

    Also used as a mask: a non-zero slot in a mask marks that slot as
    constrained.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        if not 0 <= value <= FULL_MASK:
            raise ValueError(f"Wang id out of range: {value:#x}")
        self._value = value

    @classmethod
    def from_colors(cls, colors: Iterable[int]) -> WangId:
        """
        Build a Wang id from per-slot colours.

        Args:
            colors: Up to 8 colours in slot order (missing slots are 0)

        Returns:
            The packed Wang id
        """
        value = 0
        for index, color in enumerate(colors):
            _check_index(index)
            _check_color(color)
            value |= color << (index * BITS_PER_INDEX)
        return cls(value)

    @classmethod
    def from_edges(cls, top: int = 0, right: int = 0, bottom: int = 0, left: int = 0) -> WangId:
        """Build a Wang id with only edge colours set."""
        return cls.from_colors((top, 0, right, 0, bottom, 0, left, 0))

    @classmethod
    def from_corners(
        cls,
        top_right: int = 0,
        bottom_right: int = 0,
        bottom_left: int = 0,
        top_left: int = 0,
    ) -> WangId:
        """Build a Wang id with only corner colours set."""
        return cls.from_colors((0, top_right, 0, bottom_right, 0, bottom_left, 0, top_left))

    # -------------------------------------------------------------------------
    # Slot access
    # -------------------------------------------------------------------------

    def index_color(self, index: int) -> int:
        """Get the colour at a slot index (0-7)."""
        _check_index(index)
        return (self._value >> (index * BITS_PER_INDEX)) & INDEX_MASK

    def with_index_color(self, index: int, color: int) -> WangId:
        """Return a copy with the colour at a slot index replaced."""
        _check_index(index)
        _check_color(color)
        shift = index * BITS_PER_INDEX
        value = (self._value & ~(INDEX_MASK << shift)) | (color << shift)
        return WangId(value)

    def edge_color(self, edge: int) -> int:
        """Get the colour of edge 0-3 (top, right, bottom, left)."""
        return self.index_color(edge * 2)

    def corner_color(self, corner: int) -> int:
        """Get the colour of corner 0-3 (top-right, bottom-right, bottom-left, top-left)."""
        return self.index_color(corner * 2 + 1)

    def with_edge_color(self, edge: int, color: int) -> WangId:
        return self.with_index_color(edge * 2, color)

    def with_corner_color(self, corner: int, color: int) -> WangId:
        return self.with_index_color(corner * 2 + 1, color)

    def colors(self) -> tuple[int, ...]:
        """All 8 slot colours in slot order."""
        return tuple(self.index_color(i) for i in range(NUM_INDEXES))

    # -------------------------------------------------------------------------
    # Masks and matching
    # -------------------------------------------------------------------------

    def mask(self) -> WangId:
        """Mask with every non-zero slot fully set."""
        value = 0
        for index in range(NUM_INDEXES):
            shift = index * BITS_PER_INDEX
            if (self._value >> shift) & INDEX_MASK:
                value |= INDEX_MASK << shift
        return WangId(value)

    def merged_over(self, base: WangId) -> WangId:
        """
        Compose this id over a base id.

        Every non-zero slot of this id replaces the base's slot; zero slots
        keep the base colour.
        """
        own_mask = self.mask()._value
        return WangId((base._value & ~own_mask) | self._value)

    def matches(self, other: WangId, mask: WangId) -> bool:
        """
        Check whether two ids agree on every slot selected by a mask.

        Args:
            other: Wang id to compare against
            mask: Slots to compare (any non-zero slot counts as selected)

        Returns:
            True if the ids have equal colours on all masked slots
        """
        full_mask = mask.mask()._value
        return (self._value ^ other._value) & full_mask == 0

    def has_wildcards(self) -> bool:
        """True if any slot is 0 (unconstrained)."""
        return any(color == 0 for color in self.colors())

    def is_empty(self) -> bool:
        return self._value == 0

    def has_corner_colors(self) -> bool:
        return any(self.index_color(i) for i in CORNER_INDEXES)

    def has_edge_colors(self) -> bool:
        return any(self.index_color(i) for i in EDGE_INDEXES)

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def rotated(self, rotations: int = 1) -> WangId:
        """Rotate clockwise by 90 degrees per step."""
        colors = self.colors()
        shift = (rotations % 4) * 2
        return WangId.from_colors(colors[(i - shift) % NUM_INDEXES] for i in range(NUM_INDEXES))

    def flipped_horizontally(self) -> WangId:
        """Mirror left and right."""
        colors = self.colors()
        return WangId.from_colors(colors[(NUM_INDEXES - i) % NUM_INDEXES] for i in range(NUM_INDEXES))

    def flipped_vertically(self) -> WangId:
        """Mirror top and bottom."""
        colors = self.colors()
        return WangId.from_colors(colors[(4 - i) % NUM_INDEXES] for i in range(NUM_INDEXES))

    # -------------------------------------------------------------------------
    # Slot index helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def opposite_index(index: int) -> int:
        """Slot on the far side of the tile (top <-> bottom, top-left <-> bottom-right)."""
        _check_index(index)
        return (index + 4) % NUM_INDEXES

    @staticmethod
    def next_index(index: int) -> int:
        _check_index(index)
        return (index + 1) % NUM_INDEXES

    @staticmethod
    def previous_index(index: int) -> int:
        _check_index(index)
        return (index + NUM_INDEXES - 1) % NUM_INDEXES

    @staticmethod
    def is_corner(index: int) -> bool:
        _check_index(index)
        return index % 2 == 1

    @staticmethod
    def index_by_grid(x: int, y: int) -> int | None:
        """
        Slot index for a position in a tile-local 3x3 grid.

        Args:
            x: Column 0-2 (left to right)
            y: Row 0-2 (top to bottom)

        Returns:
            Slot index, or None for the centre
        """
        if not (0 <= x <= 2 and 0 <= y <= 2):
            raise ValueError(f"Grid position out of range: ({x}, {y})")
        return _GRID_INDEXES[y][x]

    # -------------------------------------------------------------------------
    # Value protocol
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WangId):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"WangId({','.join(str(c) for c in self.colors())})"
