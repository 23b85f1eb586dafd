"""Equirectangular projection from longitude/latitude to canvas pixels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """A geographic vertex, longitude first."""

    longitude: float
    latitude: float


@dataclass(frozen=True)
class CanvasSpace:
    """Addressable pixel extent of a canvas."""

    width: float
    height: float

    @classmethod
    def from_cells(cls, cols: int, rows: int) -> "CanvasSpace":
        """Pixel extent for a pane of ``cols`` x ``rows`` character cells.

        One braille cell holds 2 pixels across and 4 down.
        """
        return cls(width=float(cols) * 2 - 1, height=float(rows) * 4 - 5)


class GeoProjector:
    """Maps geographic coordinates into a :class:`CanvasSpace`.

    x grows eastward from the antimeridian, y grows southward from the
    north pole. Values past the east edge or north pole are clamped
    onto the canvas border.
    """

    def __init__(self, space: CanvasSpace):
        self.space = space

    def x(self, longitude: float) -> float:
        shifted = longitude + 180.0
        if shifted == 0.0:
            return 0.0
        if shifted > 360.0:
            return self.space.width
        return shifted * self.space.width / 360.0

    def y(self, latitude: float) -> float:
        shifted = latitude + 90.0
        if shifted == 0.0:
            return self.space.height
        if shifted > 180.0:
            return 0.0
        return self.space.height - shifted * self.space.height / 180.0

    def project(self, point: Point) -> Tuple[float, float]:
        return self.x(point.longitude), self.y(point.latitude)
