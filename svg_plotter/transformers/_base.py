"""Shared types and helpers for the shape transformers.

Every transformer has the signature
``(node: SVGNode, context: NodeContext) -> TransformerOutput`` and is
pure: it reads the node and the context and returns features plus the
children the walker should descend into.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from svg_plotter.geometry.projection import svg_point_to_coordinate
from svg_plotter.models.vector2 import Vector2

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from svgelements import Matrix

    from svg_plotter.core.config import ConvertOptions
    from svg_plotter.models.contracts import Feature, Geometry, Position
    from svg_plotter.models.svg_node import SVGMetaData, SVGNode

_POINTS_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")


@dataclass(frozen=True, slots=True)
class NodeContext:
    """Everything a transformer needs besides the node itself.

    Attributes:
        svg_meta: Artboard of the document being converted.
        options: Conversion options.
        transform: Effective transform of the node (its own ``transform``
            composed with every ancestor's), or ``None``.
    """

    svg_meta: SVGMetaData
    options: ConvertOptions
    transform: Matrix | None = None

    def project(self, point: Vector2) -> Position:
        return svg_point_to_coordinate(point, self.svg_meta, self.options, self.transform)

    def project_all(self, points: Iterable[Vector2]) -> list[Position]:
        return [self.project(point) for point in points]


@dataclass(frozen=True, slots=True)
class TransformerOutput:
    """Features emitted by a node and the children to recurse into."""

    features: list[Feature] = field(default_factory=list)
    children: tuple[SVGNode, ...] = ()


if TYPE_CHECKING:
    Transformer = Callable[[SVGNode, NodeContext], TransformerOutput]


def create_feature(
    geometry: Geometry,
    feature_id: str | int | None = None,
    properties: dict[str, Any] | None = None,
) -> Feature:
    """Wrap ``geometry`` in a GeoJSON Feature.

    ``id`` is only present when ``feature_id`` is not ``None``.
    """
    feature: Feature = {"type": "Feature", "geometry": geometry, "properties": properties}
    if feature_id is not None:
        feature["id"] = feature_id
    return feature


def map_feature(geometry: Geometry, node: SVGNode, options: ConvertOptions) -> Feature:
    """Create a feature with id and properties taken from the option mappers."""
    feature_id = options.id_mapper(node) if options.id_mapper else None
    properties = options.property_mapper(node) if options.property_mapper else None
    return create_feature(geometry, feature_id, properties)


def parse_points(value: str | None) -> list[Vector2]:
    """Parse a ``points`` attribute into vectors; an odd trailing number is dropped."""
    if not value:
        return []
    numbers = [float(n) for n in _POINTS_NUMBER_RE.findall(value)]
    return [Vector2(numbers[i], numbers[i + 1]) for i in range(0, len(numbers) - 1, 2)]
