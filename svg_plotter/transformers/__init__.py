"""Shape transformers and their dispatch table.

Each supported SVG element kind maps to one transformer in
``_TRANSFORMER_REGISTRY``.  ``ElementKind.from_tag`` classifies a tag
name; anything outside the table is ``ElementKind.UNSUPPORTED`` and the
walker reports it instead of dispatching.

Usage::

    from svg_plotter.transformers import ElementKind, get_transformer

    kind = ElementKind.from_tag(node.name)
    output = get_transformer(kind)(node, context)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from svg_plotter.core.constants import (
    TAG_CIRCLE,
    TAG_ELLIPSE,
    TAG_GROUP,
    TAG_LINE,
    TAG_PATH,
    TAG_POLYGON,
    TAG_POLYLINE,
    TAG_RECT,
    TAG_SVG,
)
from svg_plotter.core.exceptions import ContractError
from svg_plotter.transformers._base import (
    NodeContext,
    TransformerOutput,
    create_feature,
    map_feature,
    parse_points,
)
from svg_plotter.transformers.ellipse import transform_ellipse
from svg_plotter.transformers.group import transform_group
from svg_plotter.transformers.line import transform_line
from svg_plotter.transformers.path import transform_path
from svg_plotter.transformers.polygon import transform_polygon
from svg_plotter.transformers.polyline import transform_polyline
from svg_plotter.transformers.rect import transform_rect

if TYPE_CHECKING:
    from svg_plotter.transformers._base import Transformer


class ElementKind(Enum):
    """The closed set of element kinds the converter understands."""

    SVG = TAG_SVG
    GROUP = TAG_GROUP
    LINE = TAG_LINE
    RECT = TAG_RECT
    POLYLINE = TAG_POLYLINE
    POLYGON = TAG_POLYGON
    CIRCLE = TAG_CIRCLE
    ELLIPSE = TAG_ELLIPSE
    PATH = TAG_PATH
    UNSUPPORTED = ""

    @classmethod
    def from_tag(cls, tag: str) -> ElementKind:
        """Classify a local tag name; unknown or empty tags are ``UNSUPPORTED``."""
        if not tag:
            return cls.UNSUPPORTED
        try:
            return cls(tag)
        except ValueError:
            return cls.UNSUPPORTED


_TRANSFORMER_REGISTRY: dict[ElementKind, Transformer] = {
    ElementKind.SVG: transform_group,
    ElementKind.GROUP: transform_group,
    ElementKind.LINE: transform_line,
    ElementKind.RECT: transform_rect,
    ElementKind.POLYLINE: transform_polyline,
    ElementKind.POLYGON: transform_polygon,
    ElementKind.CIRCLE: transform_ellipse,
    ElementKind.ELLIPSE: transform_ellipse,
    ElementKind.PATH: transform_path,
}


class UnsupportedElementError(ContractError):
    """Raised when a transformer is requested for ``ElementKind.UNSUPPORTED``."""

    default_stage = "dispatch"
    default_code = "ELEMENT_UNSUPPORTED"


def get_transformer(kind: ElementKind) -> Transformer:
    """Return the transformer registered for ``kind``.

    Raises:
        UnsupportedElementError: If ``kind`` has no transformer.
    """
    try:
        return _TRANSFORMER_REGISTRY[kind]
    except KeyError:
        msg = f"No transformer registered for element kind {kind.name}"
        raise UnsupportedElementError(msg) from None


def supported_tags() -> list[str]:
    """Tag names with a registered transformer, in registry order."""
    return [kind.value for kind in _TRANSFORMER_REGISTRY]


__all__ = [
    "ElementKind",
    "NodeContext",
    "TransformerOutput",
    "UnsupportedElementError",
    "create_feature",
    "get_transformer",
    "map_feature",
    "parse_points",
    "supported_tags",
]
