"""
IO helpers for loading text grids consumed by the scanning routines.
"""

from .grid_loader import load_grid, load_snapper_image, load_target

__all__ = ["load_grid", "load_snapper_image", "load_target"]
