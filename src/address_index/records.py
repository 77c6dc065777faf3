"""Conversion of raw address records into base documents and interpolation ranges.

A raw record is one JSON object per OSM object, for example::

    {
        "place_id": 1042, "osm_type": "W", "osm_id": 5523,
        "class": "place", "type": "houses",
        "name": {}, "housenumber": null,
        "address": {"street": "Hauptstraße", "city": "Berlin"},
        "centroid": [13.40, 52.52],
        "interpolation": {
            "startnumber": 10, "endnumber": 20, "interpolationtype": "even",
            "geometry": [[13.40, 52.52], [13.41, 52.52]]
        }
    }

An interpolation object with a `step` key is new style; one with
`interpolationtype` is old style.
"""
from __future__ import annotations

from .schema import AddressDocument, NewStyleInterpolation, OldStyleInterpolation, Point


class RecordError(ValueError):
    """Raised when a raw record lacks fields needed to build a document."""


def _require(record: dict, key: str):
    try:
        return record[key]
    except KeyError as exc:
        raise RecordError(f"Record is missing required field '{key}'.") from exc


def _point(raw) -> Point:
    try:
        x, y = raw
        return Point(float(x), float(y))
    except (TypeError, ValueError) as exc:
        raise RecordError(f"Invalid coordinate {raw!r}.") from exc


def _integer(raw) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise RecordError(f"Invalid integer {raw!r}.") from exc


def _optional_text(raw) -> str | None:
    if raw is None:
        return None
    return str(raw)


def _text_mapping(raw: dict | None) -> dict[str, str]:
    if not raw:
        return {}
    if not isinstance(raw, dict):
        raise RecordError(f"Expected an object, got {raw!r}.")
    return {str(key): str(value) for key, value in raw.items() if value is not None}


def document_from_record(record: dict) -> AddressDocument:
    """Build the base document for a raw record.

    Raises:
        RecordError: If identifiers, tags or centroid are missing or invalid.
    """
    try:
        importance = float(record.get("importance") or 0.0)
    except (TypeError, ValueError) as exc:
        raise RecordError(f"Invalid importance in record {record.get('place_id')!r}.") from exc

    return AddressDocument(
        place_id=_integer(_require(record, "place_id")),
        osm_type=str(_require(record, "osm_type")),
        osm_id=_integer(_require(record, "osm_id")),
        tag_key=str(_require(record, "class")),
        tag_value=str(_require(record, "type")),
        centroid=_point(_require(record, "centroid")),
        names=_text_mapping(record.get("name")),
        housenumber=_optional_text(record.get("housenumber")),
        postcode=_optional_text(record.get("postcode")),
        address=_text_mapping(record.get("address")),
        country_code=_optional_text(record.get("country_code")),
        importance=importance,
        extratags=_text_mapping(record.get("extratags")),
    )


def interpolation_from_record(record: dict) -> OldStyleInterpolation | NewStyleInterpolation | None:
    """Read the optional interpolation range of a raw record.

    Returns:
        The range, or `None` when the record has no interpolation.

    Raises:
        RecordError: If the interpolation object is incomplete.
    """
    raw = record.get("interpolation")
    if not raw:
        return None
    if not isinstance(raw, dict):
        raise RecordError(f"Interpolation of record {record.get('place_id')!r} is not an object.")

    first = _integer(_require(raw, "startnumber"))
    last = _integer(_require(raw, "endnumber"))
    coords = _require(raw, "geometry")
    if isinstance(coords, (str, dict)):
        raise RecordError(f"Invalid interpolation geometry {coords!r}.")
    try:
        geometry = tuple(_point(coord) for coord in coords)
    except TypeError as exc:
        raise RecordError(f"Invalid interpolation geometry {coords!r}.") from exc

    if "step" in raw:
        return NewStyleInterpolation(first=first, last=last, step=_integer(raw["step"]), geometry=geometry)
    return OldStyleInterpolation(
        first=first,
        last=last,
        parity=str(_require(raw, "interpolationtype")),
        geometry=geometry,
    )
