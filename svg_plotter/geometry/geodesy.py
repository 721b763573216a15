"""Great-circle helpers on a sphere.

Both functions use ``pyproj.Geod`` configured as a sphere of the given
radius, so distances agree with the haversine formula rather than the
WGS 84 ellipsoid.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from svg_plotter.core.config import Coordinate
from svg_plotter.core.constants import EARTH_RADIUS_M

if TYPE_CHECKING:
    from pyproj import Geod

logger = logging.getLogger("svg_plotter.geometry.geodesy")


@lru_cache(maxsize=8)
def _sphere(radius: float) -> Geod:
    from pyproj import Geod

    return Geod(a=radius, b=radius)


def haversine_distance(a: Coordinate, b: Coordinate, radius: float = EARTH_RADIUS_M) -> float:
    """Great-circle distance in metres between two coordinates."""
    _, _, distance = _sphere(radius).inv(a.longitude, a.latitude, b.longitude, b.latitude)
    return float(distance)


def offset_coordinate(
    origin: Coordinate,
    distance: float,
    bearing: float,
    radius: float = EARTH_RADIUS_M,
) -> Coordinate:
    """Coordinate reached by travelling ``distance`` metres from ``origin``.

    Args:
        origin: Starting coordinate.
        distance: Distance along the great circle in metres.
        bearing: Initial bearing in degrees clockwise from north.
        radius: Sphere radius in metres.
    """
    longitude, latitude, _ = _sphere(radius).fwd(
        origin.longitude, origin.latitude, bearing, distance
    )
    return Coordinate(longitude=float(longitude), latitude=float(latitude))
