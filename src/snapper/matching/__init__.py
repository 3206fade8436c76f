"""
Matching subpackage exposes target shapes and window scans.
"""

from .engine import Scan, TargetScanner, attempt_scan, scan_window
from .shape import (
    ShapeLike,
    TargetShape,
    attempt_target,
    global_centroid,
    local_centroid,
    occupied_coordinates,
    trim_grid,
)

__all__ = [
    "Scan",
    "ShapeLike",
    "TargetScanner",
    "TargetShape",
    "attempt_scan",
    "attempt_target",
    "global_centroid",
    "local_centroid",
    "occupied_coordinates",
    "scan_window",
    "trim_grid",
]
