#!/usr/bin/env python3
"""
Wang Fill - Demo

Fills a rectangular area with tiles from a generated Wang set, optionally
paints random brush strokes on top, and saves the result as a PNG diagram.
"""

import argparse
import random
import sys

from editor.algorithms.wang_brush import WangBrush
from editor.algorithms.wang_filler import WangFiller
from wang.core.constants import (
    NUM_INDEXES,
    RENDER_CELL_SIZE,
    STAGGER_AXIS_X,
    STAGGER_AXIS_Y,
    WANG_TYPE_CORNER,
    WANG_TYPE_EDGE,
)
from wang.core.tile_layer import TileLayer
from wang.core.topology import OrthogonalTopology, StaggeredTopology
from wang.core.wang_set import generate_complete_set
from wang.core.wang_validator import WangValidator
from wang.rendering.pil_renderer import render_layer_to_image


def main():
    parser = argparse.ArgumentParser(
        description="Fill an area with Wang tiles and render it as a PNG",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Fill a 16x12 map with a two-colour corner set:
    python tools/wang_demo.py wang.png

  Three-colour edge set, 20 random strokes, fixed seed:
    python tools/wang_demo.py wang.png --type edge --colors 3 --strokes 20 --seed 7
        """,
    )
    parser.add_argument("output", help="Output PNG file")
    parser.add_argument("--width", type=int, default=16, help="Map width in cells (default: 16)")
    parser.add_argument("--height", type=int, default=12, help="Map height in cells (default: 12)")
    parser.add_argument(
        "--type",
        choices=[WANG_TYPE_CORNER, WANG_TYPE_EDGE],
        default=WANG_TYPE_CORNER,
        help="Wang set type (default: corner)",
    )
    parser.add_argument("--colors", type=int, default=2, help="Number of Wang colors (default: 2)")
    parser.add_argument("--strokes", type=int, default=0, help="Random brush strokes to paint")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible output")
    parser.add_argument(
        "--stagger",
        choices=[STAGGER_AXIS_X, STAGGER_AXIS_Y],
        help="Use a staggered topology along this axis",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=RENDER_CELL_SIZE,
        help=f"Cell size in pixels (default: {RENDER_CELL_SIZE})",
    )

    args = parser.parse_args()

    if not 1 <= args.colors <= 15:
        print("Error: --colors must be between 1 and 15")
        sys.exit(1)
    if args.width <= 0 or args.height <= 0:
        print("Error: --width and --height must be positive")
        sys.exit(1)

    rng = random.Random(args.seed)
    topology = StaggeredTopology(args.stagger) if args.stagger else OrthogonalTopology()
    wang_set = generate_complete_set("demo", args.type, args.colors)

    layer = TileLayer(args.width, args.height)
    region = {(x, y) for y in range(args.height) for x in range(args.width)}

    filler = WangFiller(wang_set, topology, rng)
    result = filler.fill_region(layer, layer, region)
    print(result.report())

    if args.strokes:
        brush = WangBrush(wang_set, topology, rng)
        unresolved = 0
        for _ in range(args.strokes):
            brush.set_color(rng.randint(1, args.colors))
            point = (rng.randrange(args.width), rng.randrange(args.height))
            brush.set_paint_target(point, rng.randrange(NUM_INDEXES))
            stroke = brush.paint(layer)
            unresolved += len(stroke.unresolved)
        print(f"Painted {args.strokes} stroke(s), {unresolved} unresolved cell(s)")

    mismatched = WangValidator(wang_set, topology).find_mismatched_cells(layer)
    print(f"Mismatched cells: {len(mismatched)}")

    img = render_layer_to_image(layer, wang_set, cell_size=args.cell_size, invalid=mismatched)
    img.save(args.output)
    print(f"Saved: {args.output} ({img.width}x{img.height})")


if __name__ == "__main__":
    main()
