from __future__ import annotations

import copy
from dataclasses import asdict, dataclass, field


@dataclass(frozen=True, slots=True)
class Point:
    """Coordinate pair in the record's coordinate space (lon/lat for OSM)."""

    x: float
    y: float


@dataclass(slots=True)
class AddressDocument:
    """Searchable address or POI document handed to the indexer."""

    place_id: int
    osm_type: str
    osm_id: int
    tag_key: str
    tag_value: str
    centroid: Point
    names: dict[str, str] = field(default_factory=dict)
    housenumber: str | None = None
    postcode: str | None = None
    address: dict[str, str] = field(default_factory=dict)
    country_code: str | None = None
    importance: float = 0.0
    extratags: dict[str, str] = field(default_factory=dict)

    def is_useful_for_index(self) -> bool:
        """Return whether this document is worth indexing on its own.

        `place=houses` objects only carry interpolation lines and never
        stand alone; anything else needs a house number or a name.
        """
        if self.tag_key == "place" and self.tag_value == "houses":
            return False
        if self.housenumber:
            return True
        return bool(self.names)

    def with_housenumber(self, housenumber: str, centroid: Point) -> AddressDocument:
        """Return an independent copy with house number and centroid replaced."""
        duplicate = copy.deepcopy(self)
        duplicate.housenumber = housenumber
        duplicate.centroid = centroid
        return duplicate

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class OldStyleInterpolation:
    """Parity-based interpolation line (`odd`, `even` or `all`)."""

    first: int
    last: int
    parity: str
    geometry: tuple[Point, ...]


@dataclass(frozen=True, slots=True)
class NewStyleInterpolation:
    """Step-based interpolation line; `last` is part of the range."""

    first: int
    last: int
    step: int
    geometry: tuple[Point, ...]
