"""
Core package for detecting target shapes in character grids.
"""

from .errors import MalformedGridError, OutOfBoundsError, Outcome, ShapeDefinitionError, SnapperError
from .grid import Coordinate, Grid, SnapperImage
from .matching.engine import Scan, TargetScanner, attempt_scan, scan_window
from .matching.shape import TargetShape, attempt_target

__all__ = [
    "Coordinate",
    "Grid",
    "MalformedGridError",
    "OutOfBoundsError",
    "Outcome",
    "Scan",
    "ShapeDefinitionError",
    "SnapperError",
    "SnapperImage",
    "TargetScanner",
    "TargetShape",
    "attempt_scan",
    "attempt_target",
    "scan_window",
]
