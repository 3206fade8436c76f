from __future__ import annotations

from pathlib import Path

import pytest

from snapper.datasets import load_snapper_dataset


def _write_dataset(root: Path) -> None:
    (root / "image").mkdir(parents=True)
    (root / "targets").mkdir()
    (root / "image" / "sector7.txt").write_text(
        "....\n.##.\n.##.\n....\n#..#\n", encoding="utf-8"
    )
    (root / "targets" / "Starship.txt").write_text("##\n##\n", encoding="utf-8")
    (root / "targets" / "NuclearTorpedo.txt").write_text("#..#\n", encoding="utf-8")


def test_load_snapper_dataset(tmp_path: Path) -> None:
    root = tmp_path / "dataset"
    _write_dataset(root)

    dataset = load_snapper_dataset(root=root, blank_character=".")

    assert dataset.root == root
    assert dataset.image.name == "sector7"
    assert dataset.image.grid.shape == (5, 4)
    assert [target.name for target in dataset.targets] == ["NuclearTorpedo", "Starship"]
    assert dataset.targets[0].internal_coordinates == frozenset({(0, 0), (0, 3)})


def test_load_snapper_dataset_requires_image_choice(tmp_path: Path) -> None:
    root = tmp_path / "dataset"
    _write_dataset(root)
    (root / "image" / "sector8.txt").write_text("....\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Multiple snapper images"):
        load_snapper_dataset(root=root, blank_character=".")

    dataset = load_snapper_dataset(root=root, image_name="sector8.txt", blank_character=".")
    assert dataset.image.grid.shape == (1, 4)


def test_load_snapper_dataset_missing_folders(tmp_path: Path) -> None:
    root = tmp_path / "dataset"
    (root / "image").mkdir(parents=True)

    with pytest.raises(FileNotFoundError, match="Targets directory"):
        load_snapper_dataset(root=root)


def test_load_snapper_dataset_without_targets(tmp_path: Path) -> None:
    root = tmp_path / "dataset"
    (root / "image").mkdir(parents=True)
    (root / "targets").mkdir()
    (root / "image" / "sector7.txt").write_text("#\n", encoding="utf-8")

    with pytest.raises(ValueError, match="No target files"):
        load_snapper_dataset(root=root)
