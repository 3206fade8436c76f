from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..grid import SnapperImage
from ..io import load_snapper_image, load_target
from ..matching.shape import TargetShape

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SnapperDataset:
    """
    Snapper image bundled with the targets to search it for.
    """

    image: SnapperImage
    targets: List[TargetShape]
    root: Path


def load_snapper_dataset(
    root: Path | str,
    image_name: str | None = None,
    blank_character: str = " ",
    suffix: str = ".txt",
) -> SnapperDataset:
    """
    Load a snapper dataset with standard folder layout.

    Expected directory structure:
        root/
            image/
            targets/

    Each file under targets/ becomes one target named after its file stem.
    """
    root_path = Path(root)
    image_dir = root_path / "image"
    targets_dir = root_path / "targets"

    if not image_dir.exists():
        raise FileNotFoundError(f"Image directory not found: {image_dir}")
    if not targets_dir.exists():
        raise FileNotFoundError(f"Targets directory not found: {targets_dir}")

    image_path = _resolve_image_path(image_dir, image_name)
    image = load_snapper_image(image_path.stem, image_path)

    target_paths = sorted(path for path in targets_dir.iterdir() if path.is_file() and path.suffix == suffix)
    if not target_paths:
        raise ValueError(f"No target files with suffix {suffix!r} found under {targets_dir}")
    targets = [load_target(path.stem, path, blank_character) for path in target_paths]

    logger.info(
        "Loaded snapper image %s (%dx%d) with %d targets",
        image.name,
        image.grid.rows,
        image.grid.cols,
        len(targets),
    )
    return SnapperDataset(image=image, targets=targets, root=root_path)


def _resolve_image_path(image_dir: Path, image_name: Optional[str]) -> Path:
    if image_name:
        image_path = image_dir / image_name
        if not image_path.exists():
            raise FileNotFoundError(f"Snapper image not found: {image_path}")
        return image_path

    candidates = [path for path in image_dir.iterdir() if path.is_file()]
    if len(candidates) == 1:
        return candidates[0]
    if not candidates:
        raise FileNotFoundError(f"No snapper image files found under {image_dir}")
    raise ValueError(f"Multiple snapper images found under {image_dir}. Specify which one with --image-name.")


__all__ = ["SnapperDataset", "load_snapper_dataset"]
