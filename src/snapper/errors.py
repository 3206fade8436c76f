"""
Error kinds raised by grid, shape and scan construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class SnapperError(Exception):
    """Base error for the snapper package."""


class ShapeDefinitionError(SnapperError, ValueError):
    """Target grid contains no occupied cell."""


class OutOfBoundsError(SnapperError, IndexError):
    """A cell or window lies outside the extents of a grid."""


class MalformedGridError(SnapperError, ValueError):
    """Grid input is empty, ragged or holds multi-character cells."""


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Either a constructed value or the error kind that prevented it.
    """

    value: Optional[T] = None
    error: Optional[SnapperError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = ["MalformedGridError", "OutOfBoundsError", "Outcome", "ShapeDefinitionError", "SnapperError"]
