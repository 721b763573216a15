"""Data models and schemas.

Defines the data structures used throughout the conversion:
- Vector2: immutable 2D point / vector
- SVGNode, SVGMetaData: the parsed document tree and its artboard
- Path commands: absolute commands parsed from a ``d`` attribute
- Contracts: GeoJSON TypedDicts for the output wire format
- GeoJSON schema: pydantic validation of conversion output
"""

from svg_plotter.models.path_commands import (
    ClosePath,
    CubicCurveTo,
    EllipticalArcTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
)
from svg_plotter.models.svg_node import SVGMetaData, SVGNode
from svg_plotter.models.vector2 import Vector2, VectorError

__all__ = [
    "ClosePath",
    "CubicCurveTo",
    "EllipticalArcTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "QuadraticCurveTo",
    "SVGMetaData",
    "SVGNode",
    "Vector2",
    "VectorError",
]
