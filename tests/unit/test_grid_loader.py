from __future__ import annotations

from pathlib import Path

import pytest

from snapper import Coordinate, MalformedGridError, ShapeDefinitionError
from snapper.io import load_grid, load_snapper_image, load_target


def test_load_grid_reads_one_row_per_line(tmp_path: Path) -> None:
    path = tmp_path / "grid.txt"
    path.write_text("XX1XX\nX234X\n56789\n", encoding="utf-8")

    grid = load_grid(path)

    assert grid.shape == (3, 5)
    assert grid.to_lines() == ["XX1XX", "X234X", "56789"]
    assert grid[1, 2] == "3"


def test_load_grid_rejects_ragged_file(tmp_path: Path) -> None:
    path = tmp_path / "ragged.txt"
    path.write_text("XXXX\nXX\n", encoding="utf-8")

    with pytest.raises(MalformedGridError):
        load_grid(path)


def test_load_grid_rejects_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")

    with pytest.raises(MalformedGridError):
        load_grid(path)


def test_load_grid_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_grid(tmp_path / "missing.txt")


def test_load_snapper_image_and_target(tmp_path: Path) -> None:
    image_path = tmp_path / "image.txt"
    image_path.write_text("+  +\n ++ \n ++ \n", encoding="utf-8")
    target_path = tmp_path / "torpedo.txt"
    target_path.write_text("    \n ++ \n ++ \n    \n", encoding="utf-8")

    image = load_snapper_image("image", image_path)
    target = load_target("torpedo", target_path, " ")

    assert image.dimensions == "Grid Size (Rows x Cols = 3,4)"
    assert target.grid.to_lines() == ["++", "++"]
    assert target.local_centroid == Coordinate(0.5, 0.5)


def test_load_target_with_no_shape(tmp_path: Path) -> None:
    path = tmp_path / "blank.txt"
    path.write_text("...\n...\n", encoding="utf-8")

    with pytest.raises(ShapeDefinitionError):
        load_target("blank", path, ".")
