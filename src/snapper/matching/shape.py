from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, FrozenSet, List, Protocol, Tuple, Union

import numpy as np

from ..errors import Outcome, ShapeDefinitionError
from ..grid import Coordinate, Grid

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
GridLoader = Callable[[Union[str, Path]], Grid]


class ShapeLike(Protocol):
    """
    Anything exposing a named character grid that can be scanned for.
    """

    @property
    def name(self) -> str: ...

    @property
    def grid(self) -> Grid: ...


def trim_grid(grid: Grid, blank_character: str) -> Grid:
    """
    Crop ``grid`` to the smallest box holding every non-blank cell.

    A grid made only of blanks trims to an empty 0x0 grid.
    """
    occupied = grid.as_array() != blank_character
    if not occupied.any():
        return Grid([], 0, 0)
    rows = np.flatnonzero(occupied.any(axis=1))
    cols = np.flatnonzero(occupied.any(axis=0))
    top, left = int(rows[0]), int(cols[0])
    return grid.window(top, left, int(rows[-1]) - top + 1, int(cols[-1]) - left + 1)


def occupied_coordinates(grid: Grid, blank_character: str) -> List[Cell]:
    """
    (row, col) of every non-blank cell, in row-major order.
    """
    positions = np.argwhere(grid.as_array() != blank_character)
    return [(int(row), int(col)) for row, col in positions]


def local_centroid(shape: ShapeLike) -> Coordinate:
    """
    Geometric centre of the shape's bounding box in its own coordinates.
    """
    return Coordinate((shape.grid.cols - 1) / 2.0, (shape.grid.rows - 1) / 2.0)


def global_centroid(shape: ShapeLike, horizontal_offset: int, vertical_offset: int) -> Coordinate:
    return local_centroid(shape).shifted(horizontal_offset, vertical_offset)


class TargetShape:
    """
    Target trimmed to its bounding box together with its occupied cells.
    """

    __slots__ = ("_name", "_grid", "_blank_character", "_ordered", "_internal", "_centroid")

    def __init__(self, name: str, grid: Grid, blank_character: str = " ") -> None:
        if not name:
            raise ValueError("target name must be a non-empty string")
        if len(blank_character) != 1:
            raise ValueError("blank_character must be a single character")

        trimmed = trim_grid(grid, blank_character)
        ordered = occupied_coordinates(trimmed, blank_character)
        if not ordered:
            raise ShapeDefinitionError(f"target {name!r} has no cells other than {blank_character!r}")

        self._name = name
        self._grid = trimmed
        self._blank_character = blank_character
        self._ordered = tuple(ordered)
        self._internal = frozenset(ordered)
        self._centroid = local_centroid(self)
        logger.debug(
            "Target %s trimmed from %dx%d to %dx%d with %d occupied cells",
            name,
            grid.rows,
            grid.cols,
            trimmed.rows,
            trimmed.cols,
            len(ordered),
        )

    @classmethod
    def from_text_file(
        cls,
        name: str,
        path: Union[str, Path],
        blank_character: str = " ",
        loader: GridLoader | None = None,
    ) -> TargetShape:
        if loader is None:
            from ..io import load_grid

            loader = load_grid
        return cls(name, loader(path), blank_character)

    @property
    def name(self) -> str:
        return self._name

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def blank_character(self) -> str:
        return self._blank_character

    @property
    def internal_coordinates(self) -> FrozenSet[Cell]:
        return self._internal

    @property
    def ordered_coordinates(self) -> Tuple[Cell, ...]:
        return self._ordered

    @property
    def local_centroid(self) -> Coordinate:
        return self._centroid

    def __repr__(self) -> str:
        return (
            f"TargetShape(name={self._name!r}, rows={self._grid.rows}, cols={self._grid.cols}, "
            f"occupied={len(self._ordered)})"
        )


def attempt_target(name: str, grid: Grid, blank_character: str = " ") -> Outcome[TargetShape]:
    """
    Build a target, returning the shape error instead of raising it.
    """
    try:
        return Outcome(value=TargetShape(name, grid, blank_character))
    except ShapeDefinitionError as exc:
        return Outcome(error=exc)


__all__ = [
    "ShapeLike",
    "TargetShape",
    "attempt_target",
    "global_centroid",
    "local_centroid",
    "occupied_coordinates",
    "trim_grid",
]
