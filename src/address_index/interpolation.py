"""House number interpolation along address interpolation lines.

Two tagging conventions exist:

- Old style: the line carries `first`, `last` and a parity (`odd`, `even`,
  `all`). The endpoints are separate house objects that are indexed on their
  own, so only the numbers strictly between them are generated. The start
  offset is corrected so generated numbers match the requested parity.
- New style: the line carries `first`, `last` and a numeric step. Numbers
  are generated from `first + 1` up to and including `last`.

The differing endpoint handling between the two styles is kept as is.

Ranges with `last <= first` or wider than `MAX_INTERPOLATION_WIDTH` are
treated as tagging noise and produce nothing.
"""
from __future__ import annotations

from typing import Sequence

from .linear_ref import LengthIndexedLine
from .schema import Point

MAX_INTERPOLATION_WIDTH = 1000

PARITY_STEPS = {"odd": 2, "even": 2, "all": 1}


def is_valid_range(first: int, last: int, max_width: int = MAX_INTERPOLATION_WIDTH) -> bool:
    return last > first and (last - first) <= max_width


def interpolate_old_style(
    first: int,
    last: int,
    parity: str,
    geometry: Sequence[Point],
    max_width: int = MAX_INTERPOLATION_WIDTH,
) -> dict[str, Point]:
    """Generate numbers strictly between `first` and `last` for a parity line.

    Args:
        first: Number at the start of the line.
        last: Number at the end of the line.
        parity: `odd`, `even` or `all`. Any other value behaves like `all`.
        geometry: Vertices of the interpolation line.
        max_width: Widest accepted range.

    Returns:
        House number to position mapping, in ascending number order.

    Raises:
        GeometryError: If the range is valid but the line is degenerate.
    """
    if not is_valid_range(first, last, max_width):
        return {}

    line = LengthIndexedLine(geometry)
    start, end = line.start_index, line.end_index
    lstep = (end - start) / (last - first)

    step = PARITY_STEPS.get(parity, 1)
    num = 1
    if parity == "odd" and first % 2 == 1:
        num += 1
    elif parity == "even" and first % 2 == 0:
        num += 1

    numbers: dict[str, Point] = {}
    while first + num < last:
        numbers[str(first + num)] = line.extract_point(start + lstep * num)
        num += step
    return numbers


def interpolate_new_style(
    first: int,
    last: int,
    step: int,
    geometry: Sequence[Point],
    max_width: int = MAX_INTERPOLATION_WIDTH,
) -> dict[str, Point]:
    """Generate numbers `first + 1, first + 1 + step, ...` up to `last` inclusive.

    Raises:
        GeometryError: If the range is valid but the line is degenerate.
    """
    if not is_valid_range(first, last, max_width):
        return {}

    line = LengthIndexedLine(geometry)
    start, end = line.start_index, line.end_index
    lstep = (end - start) / (last - first)
    step = max(step, 1)

    numbers: dict[str, Point] = {}
    num = 1
    while first + num <= last:
        numbers[str(first + num)] = line.extract_point(start + lstep * num)
        num += step
    return numbers
