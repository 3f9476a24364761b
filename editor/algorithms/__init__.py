"""
Wang Fill - Editor Algorithms

Contains algorithmic tools for the editor (Wang region fill, Wang brush).
"""

from .wang_filler import CellInfo, ConstraintGrid, FillResult, WangFiller
from .wang_brush import BrushMode, WangBrush

__all__ = [
    "CellInfo",
    "ConstraintGrid",
    "FillResult",
    "WangFiller",
    "BrushMode",
    "WangBrush",
]
