from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from .errors import MalformedGridError, OutOfBoundsError


@dataclass(frozen=True, slots=True)
class Coordinate:
    """
    Real-valued (x, y) position. x runs along columns, y along rows.
    """

    x: float
    y: float

    def shifted(self, dx: float, dy: float) -> Coordinate:
        return Coordinate(self.x + dx, self.y + dy)


class Grid:
    """
    Immutable character grid backed by a flat row-major buffer.

    Every cell read goes through ``index`` so access outside the extents raises
    ``OutOfBoundsError`` instead of wrapping around like numpy negative indices.
    """

    __slots__ = ("_cells", "_rows", "_cols")

    def __init__(self, cells: Union[Sequence[str], np.ndarray], rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise MalformedGridError("grid extents must be >= 0")
        array = np.asarray(cells)
        if array.size == 0:
            array = np.empty(0, dtype="<U1")
        if array.dtype.kind != "U":
            raise MalformedGridError("grid cells must be characters")
        if array.size and np.any(np.char.str_len(array) != 1):
            raise MalformedGridError("every grid cell must hold exactly one character")
        if array.size != rows * cols:
            raise MalformedGridError(f"expected {rows * cols} cells for a {rows}x{cols} grid, got {array.size}")

        buffer = array.astype("<U1").reshape(-1)
        buffer.flags.writeable = False
        self._cells = buffer
        self._rows = rows
        self._cols = cols

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Grid:
        """
        Build a grid from equally long text rows.
        """
        rows = list(lines)
        if not rows:
            raise MalformedGridError("grid must contain at least one row")
        width = len(rows[0])
        if width == 0:
            raise MalformedGridError("grid rows must contain at least one character")
        for number, row in enumerate(rows):
            if len(row) != width:
                raise MalformedGridError(f"row {number} has {len(row)} characters, expected {width}")
        return cls([char for row in rows for char in row], len(rows), width)

    @classmethod
    def from_array(cls, array: np.ndarray) -> Grid:
        if array.ndim != 2:
            raise MalformedGridError("grid array must be two-dimensional")
        return cls(array.reshape(-1), int(array.shape[0]), int(array.shape[1]))

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    def index(self, row: int, col: int) -> int:
        """
        Row-major position of (row, col) in the flat buffer.
        """
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise OutOfBoundsError(f"cell ({row}, {col}) outside {self._rows}x{self._cols} grid")
        return row * self._cols + col

    def __getitem__(self, key: Tuple[int, int]) -> str:
        row, col = key
        return str(self._cells[self.index(row, col)])

    def as_array(self) -> np.ndarray:
        """
        Read-only (rows, cols) view of the buffer.
        """
        return self._cells.reshape(self._rows, self._cols)

    def window(self, row: int, col: int, rows: int, cols: int) -> Grid:
        """
        Copy the ``rows`` x ``cols`` block whose top-left cell is (row, col).
        """
        if rows < 0 or cols < 0:
            raise OutOfBoundsError("window extents must be >= 0")
        if row < 0 or col < 0 or row + rows > self._rows or col + cols > self._cols:
            raise OutOfBoundsError(
                f"{rows}x{cols} window at ({row}, {col}) exceeds {self._rows}x{self._cols} grid"
            )
        return Grid.from_array(self.as_array()[row : row + rows, col : col + cols])

    def to_lines(self) -> List[str]:
        return ["".join(row) for row in self.as_array()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash((self._rows, self._cols, "".join(self._cells.tolist())))

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"


@dataclass(frozen=True, slots=True)
class SnapperImage:
    """
    Named grid that targets are searched for in.
    """

    name: str
    grid: Grid

    @property
    def dimensions(self) -> str:
        return f"Grid Size (Rows x Cols = {self.grid.rows},{self.grid.cols})"


__all__ = ["Coordinate", "Grid", "SnapperImage"]
