"""Shared pytest fixtures for address_index unit tests."""
from __future__ import annotations

import pytest

from address_index.schema import AddressDocument, Point


@pytest.fixture()
def base_doc() -> AddressDocument:
    return AddressDocument(
        place_id=1001,
        osm_type="N",
        osm_id=42,
        tag_key="building",
        tag_value="yes",
        centroid=Point(10.0, 20.0),
        names={},
        housenumber=None,
        postcode="10115",
        address={"street": "Hauptstraße", "city": "Berlin"},
        country_code="de",
    )


@pytest.fixture()
def houses_doc() -> AddressDocument:
    return AddressDocument(
        place_id=2002,
        osm_type="W",
        osm_id=77,
        tag_key="place",
        tag_value="houses",
        centroid=Point(5.0, 0.0),
        address={"street": "Hauptstraße"},
    )


@pytest.fixture()
def straight_line() -> tuple[Point, ...]:
    """Horizontal line of length 10 starting at the origin."""
    return (Point(0.0, 0.0), Point(10.0, 0.0))


@pytest.fixture()
def bent_line() -> tuple[Point, ...]:
    """L-shaped line: 3 units east, then 4 units north (length 7)."""
    return (Point(0.0, 0.0), Point(3.0, 0.0), Point(3.0, 4.0))


@pytest.fixture()
def building_record() -> dict:
    return {
        "place_id": 1001,
        "osm_type": "N",
        "osm_id": 42,
        "class": "building",
        "type": "yes",
        "name": {},
        "housenumber": "12;12A",
        "postcode": "10115",
        "address": {"street": "Hauptstraße", "city": "Berlin", "streetnumber": "14"},
        "country_code": "de",
        "centroid": [10.0, 20.0],
        "importance": 0.1,
    }


@pytest.fixture()
def interpolation_record() -> dict:
    return {
        "place_id": 2002,
        "osm_type": "W",
        "osm_id": 77,
        "class": "place",
        "type": "houses",
        "address": {"street": "Hauptstraße"},
        "centroid": [5.0, 0.0],
        "interpolation": {
            "startnumber": 10,
            "endnumber": 20,
            "interpolationtype": "even",
            "geometry": [[0.0, 0.0], [10.0, 0.0]],
        },
    }
