from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

import numpy as np

from ..errors import OutOfBoundsError, Outcome
from ..grid import Coordinate, Grid, SnapperImage
from .shape import TargetShape, global_centroid

logger = logging.getLogger(__name__)

Source = Union[Grid, SnapperImage]


@dataclass(frozen=True, slots=True)
class Scan:
    """
    Comparison of one window of a snapper image against a target.
    """

    target_name: str
    horizontal_offset: int
    vertical_offset: int
    minimum_confidence: float
    matches: int
    differences: int
    confidence: float
    target_found: bool
    global_centroid: Coordinate
    top_left_global_coordinate: Coordinate

    @property
    def compared(self) -> int:
        return self.matches + self.differences

    def summary(self) -> str:
        centroid = self.global_centroid
        certainty = _format_number(round(100 * round(self.confidence, 2), 2))
        position = f"Position {self.horizontal_offset},{self.vertical_offset} - {self.target_name}"
        coordinates = f"centroid co-ordinates [X,Y] {_format_number(centroid.x)},{_format_number(centroid.y)}"
        if self.target_found:
            return f"{position} found with {coordinates} with a certainty of {certainty}%!"
        return f"{position} NOT found with {coordinates} (certainty {certainty}%)."


def _format_number(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _validate_confidence(minimum_confidence: float) -> None:
    if not (0.0 <= minimum_confidence <= 1.0):
        raise ValueError("minimum_confidence must be between 0 and 1")


def scan_window(
    source: Grid,
    target: TargetShape,
    horizontal_offset: int,
    vertical_offset: int,
    minimum_confidence: float,
) -> Scan:
    """
    Compare the target-sized window at the given offset against the target.

    Only the target's occupied cells take part in the comparison.
    """
    _validate_confidence(minimum_confidence)
    shape = target.grid
    if (
        horizontal_offset < 0
        or vertical_offset < 0
        or vertical_offset + shape.rows > source.rows
        or horizontal_offset + shape.cols > source.cols
    ):
        raise OutOfBoundsError(
            f"{shape.rows}x{shape.cols} target {target.name!r} at offset "
            f"({horizontal_offset}, {vertical_offset}) exceeds {source.rows}x{source.cols} source grid"
        )

    window = source.window(vertical_offset, horizontal_offset, shape.rows, shape.cols)
    rows, cols = np.asarray(target.ordered_coordinates).T
    equal = window.as_array()[rows, cols] == shape.as_array()[rows, cols]
    matches = int(np.count_nonzero(equal))
    differences = int(equal.size) - matches
    confidence = matches / (matches + differences)

    result = Scan(
        target_name=target.name,
        horizontal_offset=horizontal_offset,
        vertical_offset=vertical_offset,
        minimum_confidence=minimum_confidence,
        matches=matches,
        differences=differences,
        confidence=confidence,
        target_found=confidence >= minimum_confidence,
        global_centroid=global_centroid(target, horizontal_offset, vertical_offset),
        top_left_global_coordinate=Coordinate(horizontal_offset, vertical_offset),
    )
    logger.debug(
        "Scanned %s at (%d, %d): %d/%d matched",
        target.name,
        horizontal_offset,
        vertical_offset,
        matches,
        result.compared,
    )
    return result


def attempt_scan(
    source: Grid,
    target: TargetShape,
    horizontal_offset: int,
    vertical_offset: int,
    minimum_confidence: float,
) -> Outcome[Scan]:
    """
    Same as ``scan_window`` but reports an out-of-bounds window as a value.
    """
    try:
        return Outcome(value=scan_window(source, target, horizontal_offset, vertical_offset, minimum_confidence))
    except OutOfBoundsError as exc:
        return Outcome(error=exc)


class TargetScanner:
    """
    Scans snapper images for targets at a fixed minimum confidence.
    """

    def __init__(self, minimum_confidence: float = 1.0) -> None:
        _validate_confidence(minimum_confidence)
        self.minimum_confidence = minimum_confidence

    def scan(
        self,
        source: Source,
        target: TargetShape,
        horizontal_offset: int,
        vertical_offset: int,
    ) -> Scan:
        return scan_window(_as_grid(source), target, horizontal_offset, vertical_offset, self.minimum_confidence)

    @staticmethod
    def valid_offsets(source: Source, target: TargetShape) -> Iterator[Tuple[int, int]]:
        """
        Yield every (horizontal, vertical) offset at which the target fits, row by row.
        """
        grid = _as_grid(source)
        for vertical in range(grid.rows - target.grid.rows + 1):
            for horizontal in range(grid.cols - target.grid.cols + 1):
                yield horizontal, vertical


def _as_grid(source: Source) -> Grid:
    if isinstance(source, SnapperImage):
        return source.grid
    return source


__all__ = ["Scan", "TargetScanner", "attempt_scan", "scan_window"]
