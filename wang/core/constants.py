"""
Wang Fill - Constants

Configuration constants for Wang ids, catalogs, and debug rendering.
"""

# Wang id layout
NUM_INDEXES = 8
NUM_EDGES = 4
NUM_CORNERS = 4
BITS_PER_INDEX = 4
INDEX_MASK = 0xF  # Bits of a single slot
FULL_MASK = (1 << (BITS_PER_INDEX * NUM_INDEXES)) - 1

# Colour 0 means "no constraint", so usable colours are 1..15
MAX_COLOR_COUNT = INDEX_MASK

# Wang set types
WANG_TYPE_CORNER = "corner"
WANG_TYPE_EDGE = "edge"
WANG_TYPE_MIXED = "mixed"
WANG_TYPES = (WANG_TYPE_CORNER, WANG_TYPE_EDGE, WANG_TYPE_MIXED)

# Staggered topology parameters
STAGGER_AXIS_X = "x"
STAGGER_AXIS_Y = "y"
STAGGER_INDEX_ODD = "odd"
STAGGER_INDEX_EVEN = "even"

# Debug rendering
RENDER_CELL_SIZE = 24
COLOR_EMPTY_CELL = (48, 48, 48, 255)
COLOR_UNCOLORED_SLOT = (96, 96, 96, 255)
INVALID_OVERLAY_COLOR = (255, 0, 0, 64)

# Colours handed out when a Wang colour is added without one
DEFAULT_COLORS = [
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 119, 0),
    (0, 233, 255),
    (255, 0, 216),
    (233, 255, 0),
    (128, 64, 0),
    (0, 255, 161),
    (160, 0, 255),
    (255, 216, 0),
    (0, 161, 255),
    (255, 161, 0),
    (110, 255, 0),
    (255, 255, 255),
]
