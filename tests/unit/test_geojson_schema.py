"""Tests for the pydantic GeoJSON output schema."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from svg_plotter.models.geojson import GeoJSONFeatureCollection, validate_feature_collection

RING = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]


def _collection(*geometries: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "geometry": g, "properties": None} for g in geometries
        ],
    }


class TestValidGeoJSON:
    def test_empty_collection(self) -> None:
        result = validate_feature_collection({"type": "FeatureCollection", "features": []})
        assert isinstance(result, GeoJSONFeatureCollection)

    def test_every_geometry_type(self) -> None:
        data = _collection(
            {"type": "Point", "coordinates": [1.0, 2.0]},
            {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
            {"type": "Polygon", "coordinates": [RING]},
            {"type": "MultiPolygon", "coordinates": [[RING], [RING]]},
        )
        assert len(validate_feature_collection(data).features) == 4

    def test_empty_polygon(self) -> None:
        data = _collection({"type": "Polygon", "coordinates": []})
        assert validate_feature_collection(data).features[0].geometry.coordinates == []

    def test_id_and_properties(self) -> None:
        data = _collection({"type": "Point", "coordinates": [1.0, 2.0]})
        data["features"][0]["id"] = "a"
        data["features"][0]["properties"] = {"class": "x"}
        feature = validate_feature_collection(data).features[0]
        assert feature.id == "a"
        assert feature.properties == {"class": "x"}


class TestInvalidGeoJSON:
    @pytest.mark.parametrize(
        "geometry",
        [
            {"type": "Point", "coordinates": [1.0]},
            {"type": "LineString", "coordinates": [[0, 0]]},
            {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [0, 0]]]},
            {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1]]]},
            {"type": "Polygon", "coordinates": [[]]},
            {"type": "Circle", "coordinates": [0, 0]},
        ],
    )
    def test_rejected(self, geometry: dict[str, Any]) -> None:
        with pytest.raises(ValidationError):
            validate_feature_collection(_collection(geometry))

    def test_unknown_feature_key_rejected(self) -> None:
        data = _collection({"type": "Point", "coordinates": [1.0, 2.0]})
        data["features"][0]["style"] = {}
        with pytest.raises(ValidationError):
            validate_feature_collection(data)
