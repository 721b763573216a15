"""``<polyline>``: LineString, or a Point when only one pair is given.

Reference: https://developer.mozilla.org/en-US/docs/Web/SVG/Element/polyline
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svg_plotter.transformers._base import (
    NodeContext,
    TransformerOutput,
    map_feature,
    parse_points,
)

if TYPE_CHECKING:
    from svg_plotter.models.contracts import Geometry
    from svg_plotter.models.svg_node import SVGNode


def transform_polyline(node: SVGNode, context: NodeContext) -> TransformerOutput:
    positions = context.project_all(parse_points(node.get("points")))
    geometry: Geometry
    if len(positions) > 1:
        geometry = {"type": "LineString", "coordinates": positions}
    elif len(positions) == 1:
        geometry = {"type": "Point", "coordinates": positions[0]}
    else:
        return TransformerOutput()
    return TransformerOutput(features=[map_feature(geometry, node, context.options)])
