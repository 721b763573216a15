"""Canonical GeoJSON payload contracts.

Every conversion output is a plain JSON-ready dict; these ``TypedDict``
definitions are the single source of truth for their keys.

Design notes:
- ``TypedDict`` was chosen over ``dataclass`` because the output is
  serialised straight to JSON.  TypedDicts need no conversion.
- ``Feature.id`` is ``NotRequired``: when no id is mapped the key is
  absent from the dict, not ``null``.  This is part of the wire format.
"""

from typing import Any, NotRequired, TypedDict

Position = list[float]
"""A ``[longitude, latitude]`` pair."""


class Geometry(TypedDict):
    """A GeoJSON geometry (``Point``, ``LineString``, ``Polygon``, ``MultiPolygon``)."""

    type: str
    coordinates: Any


class Feature(TypedDict):
    """A GeoJSON Feature produced by a shape transformer."""

    type: str
    geometry: Geometry
    properties: dict[str, Any] | None
    id: NotRequired[str | int]


class FeatureCollection(TypedDict):
    """The GeoJSON document returned by a conversion."""

    type: str
    features: list[Feature]


class ConversionPayload(TypedDict):
    """Serialised ``ConversionResult``."""

    geojson: FeatureCollection
    warnings: list[str]
