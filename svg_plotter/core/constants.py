"""Shared conversion constants: single source of truth.

Centralises the sphere model, projection identifiers, option defaults
and the supported SVG element names.
"""

from __future__ import annotations

import math

# ---------------------------------------------------------------------------
# Sphere model
# ---------------------------------------------------------------------------

EARTH_RADIUS_M: float = 6_371_000.0
"""Mean Earth radius in metres."""

EARTH_CIRCUMFERENCE_M: float = 2 * math.pi * EARTH_RADIUS_M
"""Equatorial circumference of the ``EARTH_RADIUS_M`` sphere in metres."""

# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------

GEOGRAPHIC_CRS: str = "EPSG:4326"
WEB_MERCATOR_CRS: str = "EPSG:3857"

WEB_MERCATOR_HALF_EXTENT_M: float = math.pi * 6_378_137.0
"""Half the width of the EPSG:3857 square in metres (radius 6,378,137 m)."""

# ---------------------------------------------------------------------------
# Option defaults
# ---------------------------------------------------------------------------

DEFAULT_WIDTH_M: float = 1_000_000.0
DEFAULT_BEARING_DEG: float = 0.0
DEFAULT_SUBDIVIDE_THRESHOLD_DEG: float = 5.0

# ---------------------------------------------------------------------------
# SVG element names
# ---------------------------------------------------------------------------

TAG_SVG = "svg"
TAG_GROUP = "g"
TAG_LINE = "line"
TAG_RECT = "rect"
TAG_POLYLINE = "polyline"
TAG_POLYGON = "polygon"
TAG_CIRCLE = "circle"
TAG_ELLIPSE = "ellipse"
TAG_PATH = "path"
