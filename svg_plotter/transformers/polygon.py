"""``<polygon>``: always one Polygon with a closed ring.

Reference: https://developer.mozilla.org/en-US/docs/Web/SVG/Element/polygon
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
    from svg_plotter.models.svg_node import SVGNode


def transform_polygon(node: SVGNode, context: NodeContext) -> TransformerOutput:
    ring = context.project_all(parse_points(node.get("points")))
    # no points: an empty geometry (RFC 7946 section 3.1), not an empty ring
    geometry = {"type": "Polygon", "coordinates": [ring + ring[:1]] if ring else []}
    return TransformerOutput(features=[map_feature(geometry, node, context.options)])
