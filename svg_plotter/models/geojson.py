"""Pydantic GeoJSON schema for conversion output.

Validates the structure of the FeatureCollection a conversion returns:
geometry types, position arity, minimum vertex counts and ring
closure (RFC 7946 section 3.1).  The converter itself builds plain
dicts (see ``contracts``); this schema is the check applied to them by
the tests and by ``svg-plotter --validate``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Position = Annotated[list[float], Field(min_length=2, max_length=3)]
LinearRing = Annotated[list[Position], Field(min_length=4)]


def _check_closed(ring: list[list[float]]) -> list[list[float]]:
    if ring[0] != ring[-1]:
        msg = f"linear ring is not closed: first {ring[0]} != last {ring[-1]}"
        raise ValueError(msg)
    return ring


class PointGeometry(BaseModel):
    """GeoJSON ``Point``."""

    type: Literal["Point"]
    coordinates: Position


class LineStringGeometry(BaseModel):
    """GeoJSON ``LineString`` (at least two positions)."""

    type: Literal["LineString"]
    coordinates: Annotated[list[Position], Field(min_length=2)]


class PolygonGeometry(BaseModel):
    """GeoJSON ``Polygon``: exterior ring followed by any holes.

    An empty ``coordinates`` array is the empty Polygon a ``<polygon>``
    without points converts to.
    """

    type: Literal["Polygon"]
    coordinates: list[LinearRing]

    @field_validator("coordinates")
    @classmethod
    def _rings_closed(cls, rings: list[list[list[float]]]) -> list[list[list[float]]]:
        for ring in rings:
            _check_closed(ring)
        return rings


class MultiPolygonGeometry(BaseModel):
    """GeoJSON ``MultiPolygon``."""

    type: Literal["MultiPolygon"]
    coordinates: Annotated[list[Annotated[list[LinearRing], Field(min_length=1)]], Field(min_length=1)]

    @field_validator("coordinates")
    @classmethod
    def _rings_closed(
        cls, polygons: list[list[list[list[float]]]]
    ) -> list[list[list[list[float]]]]:
        for rings in polygons:
            for ring in rings:
                _check_closed(ring)
        return polygons


Geometry = Annotated[
    PointGeometry | LineStringGeometry | PolygonGeometry | MultiPolygonGeometry,
    Field(discriminator="type"),
]


class GeoJSONFeature(BaseModel):
    """GeoJSON ``Feature``; ``id`` is optional and absent when unmapped."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["Feature"]
    geometry: Geometry
    properties: dict[str, Any] | None
    id: str | int | None = None


class GeoJSONFeatureCollection(BaseModel):
    """GeoJSON ``FeatureCollection``."""

    type: Literal["FeatureCollection"]
    features: list[GeoJSONFeature] = Field(default_factory=list)


def validate_feature_collection(data: dict[str, Any]) -> GeoJSONFeatureCollection:
    """Validate a FeatureCollection dict against the schema.

    Raises:
        pydantic.ValidationError: If the document is structurally invalid.
    """
    return GeoJSONFeatureCollection.model_validate(data)
