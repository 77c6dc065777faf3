"""Tests for records.py — raw record parsing."""
from __future__ import annotations

import pytest

from address_index.records import RecordError, document_from_record, interpolation_from_record
from address_index.schema import NewStyleInterpolation, OldStyleInterpolation, Point


class TestDocumentFromRecord:
    def test_fields_mapped(self, building_record):
        doc = document_from_record(building_record)
        assert doc.place_id == 1001
        assert doc.osm_type == "N"
        assert doc.tag_key == "building"
        assert doc.tag_value == "yes"
        assert doc.centroid == Point(10.0, 20.0)
        assert doc.housenumber == "12;12A"
        assert doc.address["street"] == "Hauptstraße"
        assert doc.importance == 0.1

    def test_optional_fields_default(self):
        doc = document_from_record(
            {"place_id": 1, "osm_type": "N", "osm_id": 2, "class": "shop", "type": "bakery", "centroid": [1, 2]}
        )
        assert doc.names == {}
        assert doc.address == {}
        assert doc.importance == 0.0

    def test_null_values_dropped_from_mappings(self, building_record):
        building_record["address"]["suburb"] = None
        doc = document_from_record(building_record)
        assert "suburb" not in doc.address

    @pytest.mark.parametrize("key", ["place_id", "osm_type", "osm_id", "class", "type", "centroid"])
    def test_missing_required_field(self, building_record, key):
        del building_record[key]
        with pytest.raises(RecordError, match=key):
            document_from_record(building_record)

    def test_invalid_centroid(self, building_record):
        building_record["centroid"] = [1.0]
        with pytest.raises(RecordError):
            document_from_record(building_record)

    def test_invalid_place_id(self, building_record):
        building_record["place_id"] = "abc"
        with pytest.raises(RecordError):
            document_from_record(building_record)


class TestInterpolationFromRecord:
    def test_absent_interpolation(self, building_record):
        assert interpolation_from_record(building_record) is None

    def test_old_style(self, interpolation_record):
        rng = interpolation_from_record(interpolation_record)
        assert isinstance(rng, OldStyleInterpolation)
        assert (rng.first, rng.last, rng.parity) == (10, 20, "even")
        assert rng.geometry == (Point(0.0, 0.0), Point(10.0, 0.0))

    def test_new_style(self, interpolation_record):
        raw = interpolation_record["interpolation"]
        del raw["interpolationtype"]
        raw["step"] = 2
        rng = interpolation_from_record(interpolation_record)
        assert isinstance(rng, NewStyleInterpolation)
        assert rng.step == 2

    def test_missing_type_and_step(self, interpolation_record):
        del interpolation_record["interpolation"]["interpolationtype"]
        with pytest.raises(RecordError, match="interpolationtype"):
            interpolation_from_record(interpolation_record)

    def test_non_numeric_bound(self, interpolation_record):
        interpolation_record["interpolation"]["startnumber"] = "ten"
        with pytest.raises(RecordError):
            interpolation_from_record(interpolation_record)

    def test_missing_geometry(self, interpolation_record):
        del interpolation_record["interpolation"]["geometry"]
        with pytest.raises(RecordError, match="geometry"):
            interpolation_from_record(interpolation_record)


class TestNonStringValues:
    def test_numeric_housenumber_becomes_text(self, building_record):
        building_record["housenumber"] = 12
        assert document_from_record(building_record).housenumber == "12"

    def test_numeric_postcode_becomes_text(self, building_record):
        building_record["postcode"] = 10115
        assert document_from_record(building_record).postcode == "10115"

    def test_null_housenumber_stays_none(self, building_record):
        building_record["housenumber"] = None
        assert document_from_record(building_record).housenumber is None

    def test_non_object_address(self, building_record):
        building_record["address"] = ["Hauptstraße"]
        with pytest.raises(RecordError):
            document_from_record(building_record)

    def test_non_object_interpolation(self, interpolation_record):
        interpolation_record["interpolation"] = [10, 20]
        with pytest.raises(RecordError, match="not an object"):
            interpolation_from_record(interpolation_record)

    @pytest.mark.parametrize("geometry", [5, "0 0, 10 0", {"type": "LineString"}])
    def test_non_sequence_geometry(self, interpolation_record, geometry):
        interpolation_record["interpolation"]["geometry"] = geometry
        with pytest.raises(RecordError, match="geometry"):
            interpolation_from_record(interpolation_record)
