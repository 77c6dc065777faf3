"""Linear referencing along polylines.

A position on a line is addressed by its arc-length offset from the first
vertex (the "index"), the same convention used by length-indexed lines in
common geometry libraries. Only planar distances are used; callers pass
geometries in a single coordinate space.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from .schema import Point


class GeometryError(ValueError):
    """Raised when a geometry cannot be used for linear referencing."""


class LengthIndexedLine:
    """Polyline with precomputed cumulative arc lengths.

    Args:
        coords: Vertices of the line, at least two and not all identical.

    Raises:
        GeometryError: If the line has fewer than two vertices or zero length.
    """

    def __init__(self, coords: Sequence[Point]) -> None:
        if len(coords) < 2:
            raise GeometryError(f"Line needs at least two vertices, got {len(coords)}.")

        self._vertices = np.array([(point.x, point.y) for point in coords], dtype=np.float64)
        segment_lengths = np.hypot(*np.diff(self._vertices, axis=0).T)
        self._cumulative = np.concatenate(([0.0], np.cumsum(segment_lengths)))

        if not np.isfinite(self._cumulative[-1]):
            raise GeometryError("Line contains non-finite coordinates.")
        if self._cumulative[-1] <= 0.0:
            raise GeometryError("Line has zero length.")

    @property
    def start_index(self) -> float:
        return 0.0

    @property
    def end_index(self) -> float:
        return float(self._cumulative[-1])

    def extract_point(self, index: float) -> Point:
        """Return the point at arc-length `index`, clamped to the line's ends."""
        offset = min(max(index, self.start_index), self.end_index)
        # first vertex whose cumulative length reaches the offset
        segment = int(np.searchsorted(self._cumulative, offset, side="left"))
        if segment == 0:
            x, y = self._vertices[0]
            return Point(float(x), float(y))

        seg_start = self._cumulative[segment - 1]
        seg_length = self._cumulative[segment] - seg_start
        fraction = (offset - seg_start) / seg_length
        x, y = self._vertices[segment - 1] + fraction * (self._vertices[segment] - self._vertices[segment - 1])
        return Point(float(x), float(y))


def point_at(coords: Sequence[Point], index: float) -> Point:
    """Return the point at arc-length `index` along `coords`."""
    return LengthIndexedLine(coords).extract_point(index)
