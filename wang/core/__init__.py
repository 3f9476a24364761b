"""
Core Wang tile functionality.

This package contains the adjacency id value type, the tile catalog,
the weighted picker, tile layers, and grid topologies.
"""

from .wang_id import WangId
from .wang_set import WangColor, WangSet, WangTile, generate_complete_set
from .random_picker import RandomPicker
from .tile_layer import TileLayer
from .topology import OrthogonalTopology, StaggeredTopology, Topology
from .wang_validator import WangValidator

__all__ = [
    "WangId",
    "WangColor",
    "WangSet",
    "WangTile",
    "generate_complete_set",
    "RandomPicker",
    "TileLayer",
    "OrthogonalTopology",
    "StaggeredTopology",
    "Topology",
    "WangValidator",
]
