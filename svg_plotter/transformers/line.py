"""``<line>``: two endpoints to a LineString.

Reference: https://developer.mozilla.org/en-US/docs/Web/SVG/Element/line
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svg_plotter.models.vector2 import Vector2
from svg_plotter.parsing.svg_document import number_attribute
from svg_plotter.transformers._base import NodeContext, TransformerOutput, map_feature

if TYPE_CHECKING:
    from svg_plotter.models.svg_node import SVGNode


def transform_line(node: SVGNode, context: NodeContext) -> TransformerOutput:
    start = Vector2(number_attribute(node, "x1"), number_attribute(node, "y1"))
    end = Vector2(number_attribute(node, "x2"), number_attribute(node, "y2"))
    geometry = {"type": "LineString", "coordinates": context.project_all((start, end))}
    return TransformerOutput(features=[map_feature(geometry, node, context.options)])
