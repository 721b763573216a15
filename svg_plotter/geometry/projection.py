"""SVG user space to geographic coordinate projection.

The artboard is laid over a Web Mercator (EPSG:3857) map:

1. The point is normalised against the artboard so its centre sits at
   ``(0, 0)`` and the artboard width spans one unit.  The vertical axis
   is divided by the aspect ratio so both axes share the width's scale.
2. The offset is scaled by ``width / EARTH_CIRCUMFERENCE_M`` so the
   artboard width covers ``width`` metres at the equator.
3. The offset is rotated by ``bearing`` degrees (clockwise, y down).
4. It is added to ``center`` expressed in unit Mercator space, where
   the world square is ``[0, 1] x [0, 1]`` with ``y`` growing south.
5. The result is clamped to the world square and projected back to
   longitude / latitude with pyproj.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from svg_plotter.core.constants import (
    EARTH_CIRCUMFERENCE_M,
    GEOGRAPHIC_CRS,
    WEB_MERCATOR_CRS,
    WEB_MERCATOR_HALF_EXTENT_M,
)
from svg_plotter.geometry.curves import clamp
from svg_plotter.geometry.transforms import apply_transform
from svg_plotter.models.vector2 import Vector2

if TYPE_CHECKING:
    from pyproj import Transformer
    from svgelements import Matrix

    from svg_plotter.core.config import ConvertOptions, Coordinate
    from svg_plotter.models.svg_node import SVGMetaData

logger = logging.getLogger("svg_plotter.geometry.projection")

_WORLD_SIZE_M = 2 * WEB_MERCATOR_HALF_EXTENT_M


# ---------------------------------------------------------------------------
# Cached pyproj transformers
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def _to_mercator() -> Transformer:
    from pyproj import Transformer

    return Transformer.from_crs(GEOGRAPHIC_CRS, WEB_MERCATOR_CRS, always_xy=True)


@lru_cache(maxsize=1)
def _to_geographic() -> Transformer:
    from pyproj import Transformer

    return Transformer.from_crs(WEB_MERCATOR_CRS, GEOGRAPHIC_CRS, always_xy=True)


# ---------------------------------------------------------------------------
# Unit Mercator helpers
# ---------------------------------------------------------------------------


def lonlat_to_unit_mercator(longitude: float, latitude: float) -> Vector2:
    """Project a WGS 84 coordinate into the unit Mercator square."""
    x, y = _to_mercator().transform(longitude, latitude)
    return Vector2(x / _WORLD_SIZE_M + 0.5, 0.5 - y / _WORLD_SIZE_M)


def unit_mercator_to_lonlat(point: Vector2) -> tuple[float, float]:
    """Inverse of ``lonlat_to_unit_mercator``; returns ``(longitude, latitude)``."""
    x = (point.x - 0.5) * _WORLD_SIZE_M
    y = (0.5 - point.y) * _WORLD_SIZE_M
    longitude, latitude = _to_geographic().transform(x, y)
    return float(longitude), float(latitude)


# ---------------------------------------------------------------------------
# Projector
# ---------------------------------------------------------------------------


def svg_point_to_coordinate(
    point: Vector2,
    svg_meta: SVGMetaData,
    options: ConvertOptions,
    transform: Matrix | str | None = None,
) -> list[float]:
    """Project an SVG user-space point to ``[longitude, latitude]``.

    Args:
        point: Point in SVG user units, before ``transform``.
        svg_meta: Artboard the point is normalised against.
        options: Supplies ``center``, ``width``, ``bearing`` and
            ``coordinate_precision``.
        transform: Effective transform of the element owning the point.

    Returns:
        A two-element ``[longitude, latitude]`` list.  The artboard centre
        maps to ``options.center``.
    """
    mapped = apply_transform(point, transform)

    offset = Vector2(
        (mapped.x - svg_meta.x) / svg_meta.width - 0.5,
        ((mapped.y - svg_meta.y) / svg_meta.height - 0.5) / svg_meta.aspect,
    )
    offset = offset.multiply_by_scalar(options.width / EARTH_CIRCUMFERENCE_M)
    if options.bearing:
        offset = offset.rotate(options.bearing)

    unit = _center_in_unit_mercator(options.center).add(offset)
    unit = Vector2(clamp(unit.x, 0.0, 1.0), clamp(unit.y, 0.0, 1.0))

    longitude, latitude = unit_mercator_to_lonlat(unit)
    if options.coordinate_precision is not None:
        longitude = round(longitude, options.coordinate_precision)
        latitude = round(latitude, options.coordinate_precision)
    return [longitude, latitude]


def _center_in_unit_mercator(center: Coordinate) -> Vector2:
    return lonlat_to_unit_mercator(center.longitude, center.latitude)
