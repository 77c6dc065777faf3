"""Expansion of one base document into per-house-number documents.

Usage
-----
result = AddressResult(base_doc)
result.add_housenumbers_from_string(base_doc.housenumber)
result.add_housenumbers_from_address(base_doc.address)
result.add_interpolation(interpolation)

if result.is_useful_for_index():
    documents = result.docs_with_housenumber()
"""
from __future__ import annotations

from typing import Mapping, Sequence

from .housenumbers import housenumbers_from_address, split_housenumbers
from .interpolation import MAX_INTERPOLATION_WIDTH, interpolate_new_style, interpolate_old_style
from .schema import AddressDocument, NewStyleInterpolation, OldStyleInterpolation, Point


class AddressResult:
    """A base document plus the house numbers attached to it and their positions.

    The number-to-position map keeps insertion order, so the documents produced
    by `docs_with_housenumber` are deterministic. Adding a number that is
    already present replaces its position.
    """

    def __init__(self, base_doc: AddressDocument, max_interpolation_width: int = MAX_INTERPOLATION_WIDTH) -> None:
        self._doc = base_doc
        self._housenumbers: dict[str, Point] = {}
        self._max_width = max_interpolation_width

    @property
    def base_doc(self) -> AddressDocument:
        return self._doc

    @property
    def housenumbers(self) -> dict[str, Point]:
        return dict(self._housenumbers)

    def is_useful_for_index(self) -> bool:
        return bool(self._housenumbers) or self._doc.is_useful_for_index()

    def docs_with_housenumber(self) -> list[AddressDocument]:
        """Return one document per house number, or the base document alone."""
        if not self._housenumbers:
            return [self._doc]

        return [
            self._doc.with_housenumber(housenumber, centroid)
            for housenumber, centroid in self._housenumbers.items()
        ]

    def add_housenumbers_from_string(self, raw: str | None) -> None:
        """Add house numbers from a single or `;`-delimited string.

        Every number is placed at the base document's centroid. Re-adding a
        number already present is harmless.
        """
        for housenumber in split_housenumbers(raw):
            self._housenumbers[housenumber] = self._doc.centroid

    def add_housenumbers_from_address(self, address: Mapping[str, str] | None) -> None:
        for housenumber in housenumbers_from_address(address):
            self._housenumbers[housenumber] = self._doc.centroid

    def add_interpolation_old_style(self, first: int, last: int, parity: str, geometry: Sequence[Point]) -> None:
        """Add numbers from a parity interpolation, excluding `first` and `last`."""
        self._housenumbers.update(interpolate_old_style(first, last, parity, geometry, self._max_width))

    def add_interpolation_new_style(self, first: int, last: int, step: int, geometry: Sequence[Point]) -> None:
        """Add numbers from a step interpolation, excluding `first` but including `last`."""
        self._housenumbers.update(interpolate_new_style(first, last, step, geometry, self._max_width))

    def add_interpolation(self, interpolation: OldStyleInterpolation | NewStyleInterpolation | None) -> None:
        if interpolation is None:
            return
        if isinstance(interpolation, OldStyleInterpolation):
            self.add_interpolation_old_style(
                interpolation.first, interpolation.last, interpolation.parity, interpolation.geometry
            )
        else:
            self.add_interpolation_new_style(
                interpolation.first, interpolation.last, interpolation.step, interpolation.geometry
            )
