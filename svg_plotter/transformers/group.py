"""``<g>`` and ``<svg>``: no geometry of their own.

The walker composes the group's ``transform`` into the context it
passes to each child, so the children are returned as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svg_plotter.transformers._base import NodeContext, TransformerOutput

if TYPE_CHECKING:
    from svg_plotter.models.svg_node import SVGNode


def transform_group(node: SVGNode, context: NodeContext) -> TransformerOutput:
    return TransformerOutput(children=node.children)
