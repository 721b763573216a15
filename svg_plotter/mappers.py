"""Ready-made id and property mappers.

Both factories read SVG attributes of the node a feature was emitted
from, e.g.::

    options = ConvertOptions(
        id_mapper=attribute_id_mapper("id"),
        property_mapper=attribute_property_mapper("class", "data-name"),
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from svg_plotter.models.svg_node import SVGNode


def attribute_id_mapper(name: str = "id") -> Callable[[SVGNode], str | None]:
    """Map each feature's id to the node's ``name`` attribute (absent: no id)."""

    def mapper(node: SVGNode) -> str | None:
        return node.get(name)

    return mapper


def attribute_property_mapper(*names: str) -> Callable[[SVGNode], dict[str, Any] | None]:
    """Copy the listed attributes into feature properties.

    Returns ``None`` (``"properties": null``) when the node has none of them.
    """

    def mapper(node: SVGNode) -> dict[str, Any] | None:
        properties = {name: value for name in names if (value := node.get(name)) is not None}
        return properties or None

    return mapper
