"""``<circle>`` and ``<ellipse>``: the flattened outline as one Polygon.

References:
- https://developer.mozilla.org/en-US/docs/Web/SVG/Element/circle
- https://developer.mozilla.org/en-US/docs/Web/SVG/Element/ellipse
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from svg_plotter.geometry.curves import draw_curve, point_on_ellipse
from svg_plotter.models.vector2 import Vector2
from svg_plotter.parsing.svg_document import number_attribute
from svg_plotter.transformers._base import NodeContext, TransformerOutput, map_feature

if TYPE_CHECKING:
    from svg_plotter.models.svg_node import SVGNode

logger = logging.getLogger("svg_plotter.transformers.ellipse")


def transform_ellipse(node: SVGNode, context: NodeContext) -> TransformerOutput:
    center = Vector2(number_attribute(node, "cx"), number_attribute(node, "cy"))
    if node.get("r") is not None:
        rx = ry = number_attribute(node, "r")
    else:
        rx = number_attribute(node, "rx")
        ry = number_attribute(node, "ry")

    points = draw_curve(
        lambda t: point_on_ellipse(center, rx, ry, t),
        context.options.subdivide_threshold,
    )
    ring = context.project_all(points)
    # t=0 and t=1 coincide only up to float error
    ring[-1] = ring[0]
    logger.debug("<%s> flattened into %d position(s)", node.name, len(ring))

    geometry = {"type": "Polygon", "coordinates": [ring]}
    return TransformerOutput(features=[map_feature(geometry, node, context.options)])
