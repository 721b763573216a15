"""Public conversion entry points.

``convert_svg`` takes SVG markup; ``convert_svg_tree`` takes an already
parsed ``SVGNode`` tree.  Both return a ``ConversionResult`` holding the
GeoJSON FeatureCollection and the ordered list of non-fatal warnings.

Only a document without a usable artboard (``SvgMetadataError``) or
unparseable markup (``SvgParseError``) aborts a conversion; everything
else degrades per node.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from svg_plotter.core.config import ConvertOptions
from svg_plotter.parsing.svg_document import get_svg_metadata, parse_svg
from svg_plotter.transformers import NodeContext
from svg_plotter.walker import walk

if TYPE_CHECKING:
    from svg_plotter.models.contracts import ConversionPayload, Feature, FeatureCollection
    from svg_plotter.models.svg_node import SVGNode

logger = logging.getLogger("svg_plotter.converter")


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of one conversion.

    Attributes:
        geojson: The FeatureCollection; features in document order.
        warnings: Human-readable messages for skipped nodes, in document order.
    """

    geojson: FeatureCollection
    warnings: list[str] = field(default_factory=list)

    @property
    def features(self) -> list[Feature]:
        return self.geojson["features"]

    def to_dict(self) -> ConversionPayload:
        return {"geojson": self.geojson, "warnings": list(self.warnings)}


def convert_svg_tree(root: SVGNode, options: ConvertOptions | None = None) -> ConversionResult:
    """Convert a parsed SVG tree to GeoJSON.

    Args:
        root: The document's root ``<svg>`` node.
        options: Conversion options; defaults to ``ConvertOptions()``.

    Raises:
        SvgMetadataError: If the root defines no usable artboard.
        ContractError: If a caller precondition is violated.
    """
    options = options or ConvertOptions()
    svg_meta = get_svg_metadata(root)
    logger.info(
        "Converting SVG | artboard=%sx%s | center=(%s, %s) | width=%sm | bearing=%s",
        svg_meta.width,
        svg_meta.height,
        options.center.longitude,
        options.center.latitude,
        options.width,
        options.bearing,
    )

    walked = walk(root, NodeContext(svg_meta=svg_meta, options=options))

    logger.info(
        "Converted SVG | features=%d | warnings=%d",
        len(walked.features),
        len(walked.warnings),
    )
    return ConversionResult(
        geojson={"type": "FeatureCollection", "features": walked.features},
        warnings=walked.warnings,
    )


def convert_svg(markup: str | bytes, options: ConvertOptions | None = None) -> ConversionResult:
    """Parse SVG markup and convert it to GeoJSON.

    Raises:
        SvgParseError: If the markup cannot be parsed.
        SvgMetadataError: If the root defines no usable artboard.
    """
    return convert_svg_tree(parse_svg(markup), options)
