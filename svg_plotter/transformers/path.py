"""``<path>``: interpret path commands into Points, LineStrings and Polygons.

The interpreter walks the absolute commands once, accumulating the open
subpath as projected positions:

- ``M`` flushes the open subpath (one position becomes a Point, two or
  more a LineString) and starts a new one.
- ``L``/``H``/``V`` append their end point.
- ``C``/``S``/``Q``/``T``/``A`` append their flattened curve.
- ``Z`` closes the subpath back to its first position and commits it
  as a ring.

Smooth curves reflect the previous curve's handle only when the
previous command was of the same family (``C``/``S`` or ``Q``/``T``).
That handle is threaded through the loop as an explicit value.

Reference: https://developer.mozilla.org/en-US/docs/Web/SVG/Tutorial/Paths
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from svg_plotter.geometry.composite import group_rings
from svg_plotter.geometry.curves import (
    draw_curve,
    point_on_cubic_bezier,
    point_on_elliptical_arc,
    point_on_quadratic_bezier,
)
from svg_plotter.models.path_commands import (
    ClosePath,
    CubicCurveTo,
    EllipticalArcTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
)
from svg_plotter.parsing.path_data import parse_path_data
from svg_plotter.transformers._base import NodeContext, TransformerOutput, map_feature

if TYPE_CHECKING:
    from svg_plotter.models.contracts import Feature, Geometry, Position
    from svg_plotter.models.path_commands import PathCommand
    from svg_plotter.models.svg_node import SVGNode
    from svg_plotter.models.vector2 import Vector2

logger = logging.getLogger("svg_plotter.transformers.path")

_CUBIC_CODES = ("C", "S")
_QUADRATIC_CODES = ("Q", "T")


@dataclass(frozen=True, slots=True)
class CurveHandle:
    """The previous command's code and its last control point."""

    code: str | None = None
    control: Vector2 | None = None

    def reflect(self, origin: Vector2, family: tuple[str, ...]) -> Vector2:
        """First control point of a smooth curve starting at ``origin``."""
        if self.code in family and self.control is not None:
            return origin.add(origin.subtract(self.control))
        return origin


@dataclass(slots=True)
class ParsedPath:
    """Geometry collected from one ``d`` attribute, in projected positions."""

    points: list[Position] = field(default_factory=list)
    line_strings: list[list[Position]] = field(default_factory=list)
    polygons: list[list[Position]] = field(default_factory=list)

    def flush(self, subpath: list[Position]) -> None:
        if len(subpath) == 1:
            self.points.append(subpath[0])
        elif len(subpath) > 1:
            self.line_strings.append(subpath)


def interpret_path(commands: list[PathCommand], context: NodeContext) -> ParsedPath:
    """Run the path state machine over absolute ``commands``."""
    output = ParsedPath()
    subpath: list[Position] = []
    handle = CurveHandle()

    for command in commands:
        if isinstance(command, MoveTo):
            output.flush(subpath)
            subpath = [context.project(command.end)]
        elif isinstance(command, LineTo):
            subpath.append(context.project(command.end))
        elif isinstance(command, ClosePath):
            if subpath:
                subpath.append(subpath[0])
                output.polygons.append(subpath)
            subpath = []
        else:
            curve, handle = _flatten(command, handle, context.options.subdivide_threshold)
            subpath.extend(context.project_all(curve))
            continue
        handle = CurveHandle(code=command.code)

    output.flush(subpath)
    return output


def _flatten(
    command: CubicCurveTo | QuadraticCurveTo | EllipticalArcTo,
    handle: CurveHandle,
    threshold: float,
) -> tuple[list[Vector2], CurveHandle]:
    """Flatten a curve command; returns its points and the handle for the next command."""
    p0 = command.start
    if isinstance(command, CubicCurveTo):
        c1 = command.control1
        if c1 is None:
            c1 = handle.reflect(p0, _CUBIC_CODES)
        c2 = command.control2
        points = draw_curve(
            lambda t: point_on_cubic_bezier(p0, c1, c2, command.end, t), threshold
        )
        return points, CurveHandle(code=command.code, control=c2)

    if isinstance(command, QuadraticCurveTo):
        control = command.control
        if control is None:
            control = handle.reflect(p0, _QUADRATIC_CODES)
        points = draw_curve(
            lambda t: point_on_quadratic_bezier(p0, control, command.end, t), threshold
        )
        return points, CurveHandle(code=command.code, control=control)

    # y points down in SVG: rotation and sweep direction are mirrored
    rotation = -command.x_axis_rotation
    sweep = not command.sweep
    points = draw_curve(
        lambda t: point_on_elliptical_arc(
            p0, command.end, command.rx, command.ry, rotation, command.large_arc, sweep, t
        ),
        threshold,
    )
    return points, CurveHandle(code=command.code)


def transform_path(node: SVGNode, context: NodeContext) -> TransformerOutput:
    commands = parse_path_data(node.get("d") or "")
    parsed = interpret_path(commands, context)
    options = context.options

    geometries: list[Geometry] = [
        *({"type": "Point", "coordinates": p} for p in parsed.points),
        *({"type": "LineString", "coordinates": line} for line in parsed.line_strings),
    ]
    if options.composite_polygons and len(parsed.polygons) > 1:
        geometries.extend(group_rings(parsed.polygons))
    else:
        geometries.extend({"type": "Polygon", "coordinates": [ring]} for ring in parsed.polygons)

    features: list[Feature] = [map_feature(g, node, options) for g in geometries]
    logger.debug(
        "<path> %d command(s) -> points=%d lines=%d rings=%d",
        len(commands),
        len(parsed.points),
        len(parsed.line_strings),
        len(parsed.polygons),
    )
    return TransformerOutput(features=features)
