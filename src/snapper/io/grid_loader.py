from __future__ import annotations

from pathlib import Path
from typing import Union

from ..grid import Grid, SnapperImage
from ..matching.shape import TargetShape

PathLike = Union[str, Path]


def load_grid(path: PathLike, encoding: str = "utf-8") -> Grid:
    """
    Read a text file into a character grid, one row per line.
    """
    grid_path = Path(path)
    if not grid_path.is_file():
        raise FileNotFoundError(f"Unable to load grid at {path}")
    return Grid.from_lines(grid_path.read_text(encoding=encoding).splitlines())


def load_snapper_image(name: str, path: PathLike, encoding: str = "utf-8") -> SnapperImage:
    return SnapperImage(name=name, grid=load_grid(path, encoding=encoding))


def load_target(name: str, path: PathLike, blank_character: str = " ", encoding: str = "utf-8") -> TargetShape:
    return TargetShape.from_text_file(
        name,
        path,
        blank_character,
        loader=lambda target_path: load_grid(target_path, encoding=encoding),
    )
