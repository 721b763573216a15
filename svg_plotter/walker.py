"""Depth-first walk of an SVG tree, dispatching each node to its transformer.

Responsibilities:
- Classify each node by tag and dispatch it through the transformer table
- Compose each node's ``transform`` with its ancestors' and pass the
  result down to its children
- Collect features in document order (a node's own features before its
  children's)
- Turn unsupported tags and per-node validation failures into warnings;
  the offending subtree contributes nothing

The walker keeps no state between calls, so the same tree can be walked
any number of times.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from svg_plotter.core.exceptions import ValidationError
from svg_plotter.geometry.transforms import compose, parse_transform
from svg_plotter.transformers import ElementKind, NodeContext, get_transformer

if TYPE_CHECKING:
    from svg_plotter.models.contracts import Feature
    from svg_plotter.models.svg_node import SVGNode

logger = logging.getLogger("svg_plotter.walker")


@dataclass(slots=True)
class WalkResult:
    """Features and warnings gathered from a subtree, in document order."""

    features: list[Feature] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def extend(self, other: WalkResult) -> None:
        self.features.extend(other.features)
        self.warnings.extend(other.warnings)


def walk(node: SVGNode, context: NodeContext) -> WalkResult:
    """Convert ``node`` and its descendants.

    Args:
        node: Subtree root.
        context: Artboard, options and the transform inherited from the
            node's ancestors.

    Returns:
        The subtree's features and warnings.

    Raises:
        ContractError: Caller errors (e.g. from the curve flattener)
            propagate unchanged.
    """
    result = WalkResult()

    kind = ElementKind.from_tag(node.name)
    if kind is ElementKind.UNSUPPORTED:
        warning = f"Skipping unsupported node: {node.name}"
        logger.warning("Skipping unsupported node: %s", node.name)
        result.warnings.append(warning)
        return result

    try:
        node_context = NodeContext(
            svg_meta=context.svg_meta,
            options=context.options,
            transform=compose(context.transform, parse_transform(node.get("transform"))),
        )
        output = get_transformer(kind)(node, node_context)
    except ValidationError as exc:
        warning = f"Skipping invalid node: {node.name} ({exc.message})"
        logger.warning("Skipping invalid node: %s (%s)", node.name, exc.message)
        result.warnings.append(warning)
        return result

    logger.debug(
        "<%s> emitted %d feature(s), %d child(ren) to visit",
        node.name,
        len(output.features),
        len(output.children),
    )
    result.features.extend(output.features)
    for child in output.children:
        result.extend(walk(child, node_context))
    return result
