"""``<rect>``: a Polygon, with quarter-ellipse corners when rounded.

Corner radii follow SVG: a missing ``rx`` or ``ry`` takes the other's
value, and each is clamped to half of its side.

Reference: https://developer.mozilla.org/en-US/docs/Web/SVG/Element/rect
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svg_plotter.geometry.curves import clamp, draw_curve, point_on_ellipse
from svg_plotter.models.vector2 import Vector2
from svg_plotter.parsing.svg_document import number_attribute
from svg_plotter.transformers._base import NodeContext, TransformerOutput, map_feature

if TYPE_CHECKING:
    from svg_plotter.models.svg_node import SVGNode


def transform_rect(node: SVGNode, context: NodeContext) -> TransformerOutput:
    x = number_attribute(node, "x")
    y = number_attribute(node, "y")
    width = number_attribute(node, "width")
    height = number_attribute(node, "height")
    rx, ry = _corner_radii(node, width, height)

    if rx and ry:
        points = _rounded_outline(x, y, width, height, rx, ry, context)
        if ry * 2 >= height:
            # the last corner ends where the first one starts
            points[-1] = points[0]
        else:
            points.append(points[0])
    else:
        points = [
            Vector2(x, y),
            Vector2(x + width, y),
            Vector2(x + width, y + height),
            Vector2(x, y + height),
            Vector2(x, y),
        ]

    geometry = {"type": "Polygon", "coordinates": [context.project_all(points)]}
    return TransformerOutput(features=[map_feature(geometry, node, context.options)])


def _corner_radii(node: SVGNode, width: float, height: float) -> tuple[float, float]:
    has_rx = node.get("rx") is not None
    has_ry = node.get("ry") is not None
    rx = number_attribute(node, "rx")
    ry = number_attribute(node, "ry")
    if has_rx and not has_ry:
        ry = rx
    elif has_ry and not has_rx:
        rx = ry
    return clamp(rx, 0.0, width / 2), clamp(ry, 0.0, height / 2)


def _rounded_outline(
    x: float,
    y: float,
    width: float,
    height: float,
    rx: float,
    ry: float,
    context: NodeContext,
) -> list[Vector2]:
    threshold = context.options.subdivide_threshold

    def corner(center: Vector2, start: float, end: float) -> list[Vector2]:
        return draw_curve(lambda t: point_on_ellipse(center, rx, ry, t), threshold, start, end)

    top_left = corner(Vector2(x + rx, y + ry), 0.5, 0.75)
    top_right = corner(Vector2(x + width - rx, y + ry), 0.75, 1.0)
    bottom_right = corner(Vector2(x + width - rx, y + height - ry), 0.0, 0.25)
    bottom_left = corner(Vector2(x + rx, y + height - ry), 0.25, 0.5)

    # adjacent corners share an endpoint once a radius reaches half its side
    if rx * 2 >= width:
        top_right = top_right[1:]
        bottom_left = bottom_left[1:]
    if ry * 2 >= height:
        bottom_right = bottom_right[1:]

    return [*top_left, *top_right, *bottom_right, *bottom_left]
