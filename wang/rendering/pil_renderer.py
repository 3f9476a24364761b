"""
Wang Fill - PIL Renderer

PIL-based rendering of Wang tile layers as colour diagrams, used to
inspect fill results. Each cell is drawn as a 3x3 grid where the outer
squares show the colours of the matching Wang slots.
"""

from typing import Iterable

try:
    from PIL import Image, ImageDraw
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.constants import (
    COLOR_EMPTY_CELL,
    COLOR_UNCOLORED_SLOT,
    INVALID_OVERLAY_COLOR,
    RENDER_CELL_SIZE,
)
from ..core.tile_layer import Point, TileLayer
from ..core.wang_id import WangId
from ..core.wang_set import WangSet


def _render_bounds(
    layer: TileLayer, points: Iterable[Point] | None
) -> tuple[int, int, int, int]:
    """(x, y, width, height) of the cells to draw."""
    if points is not None:
        points = list(points)
        if points:
            xs = [x for x, _ in points]
            ys = [y for _, y in points]
            return min(xs), min(ys), max(xs) - min(xs) + 1, max(ys) - min(ys) + 1
        return 0, 0, 1, 1

    if not layer.is_infinite:
        return 0, 0, max(layer.width, 1), max(layer.height, 1)

    rect = layer.bounding_rect()
    return rect if rect is not None else (0, 0, 1, 1)


def _slot_fill(wang_set: WangSet, color: int) -> tuple[int, int, int, int]:
    if not color:
        return COLOR_UNCOLORED_SLOT
    r, g, b = wang_set.color_at(color).color
    return (r, g, b, 255)


def render_layer_to_image(
    layer: TileLayer,
    wang_set: WangSet,
    points: Iterable[Point] | None = None,
    cell_size: int = RENDER_CELL_SIZE,
    invalid: Iterable[Point] | None = None,
) -> Image.Image:
    """
    Render a tile layer to a PIL Image.

    Args:
        layer: Layer to draw
        wang_set: Wang set giving the tile colours
        points: Cells to include (their bounding box is drawn). Defaults to
                the layer bounds, or the occupied cells of an infinite layer.
        cell_size: Size of one cell in pixels (multiple of 3 looks best)
        invalid: Cells to mark with the invalid overlay

    Returns:
        PIL RGBA Image
    """
    invalid = set(invalid) if invalid is not None else set()
    origin_x, origin_y, width, height = _render_bounds(layer, points)

    img = Image.new("RGBA", (width * cell_size, height * cell_size), COLOR_EMPTY_CELL)
    draw = ImageDraw.Draw(img)
    part = cell_size / 3

    for row in range(height):
        for col in range(width):
            point = (origin_x + col, origin_y + row)
            tile = layer.cell_at(point)
            if tile is None:
                continue

            wang_id = wang_set.wang_id_of_tile(tile)
            base_x = col * cell_size
            base_y = row * cell_size

            for grid_y in range(3):
                for grid_x in range(3):
                    index = WangId.index_by_grid(grid_x, grid_y)
                    color = wang_id.index_color(index) if index is not None else 0
                    left = base_x + round(grid_x * part)
                    top = base_y + round(grid_y * part)
                    right = base_x + round((grid_x + 1) * part) - 1
                    bottom = base_y + round((grid_y + 1) * part) - 1
                    draw.rectangle([left, top, right, bottom], fill=_slot_fill(wang_set, color))

    # Mark cells that could not be filled
    if invalid:
        overlay = Image.new("RGBA", img.size, (0, 0, 0, 0))
        overlay_draw = ImageDraw.Draw(overlay)
        for x, y in invalid:
            col = x - origin_x
            row = y - origin_y
            if 0 <= col < width and 0 <= row < height:
                overlay_draw.rectangle(
                    [
                        col * cell_size,
                        row * cell_size,
                        (col + 1) * cell_size - 1,
                        (row + 1) * cell_size - 1,
                    ],
                    fill=INVALID_OVERLAY_COLOR,
                )
        img = Image.alpha_composite(img, overlay)

    return img


def render_fill_result_to_image(
    result,
    wang_set: WangSet,
    cell_size: int = RENDER_CELL_SIZE,
) -> Image.Image:
    """
    Render the cells covered by a fill result, marking unresolved cells.

    Args:
        result: FillResult from WangFiller.fill_region
        wang_set: Wang set used for the fill
        cell_size: Size of one cell in pixels

    Returns:
        PIL RGBA Image
    """
    layer = TileLayer()
    layer.set_cells(result.placed.items())
    return render_layer_to_image(
        layer,
        wang_set,
        points=result.points,
        cell_size=cell_size,
        invalid=result.unresolved,
    )
