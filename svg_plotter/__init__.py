"""SVG to GeoJSON conversion.

Places an SVG drawing on the globe: every supported shape is flattened,
projected through Web Mercator around a chosen centre, width and
bearing, and emitted as a GeoJSON Feature.

Usage::

    from svg_plotter import ConvertOptions, Coordinate, convert_svg

    result = convert_svg(markup, ConvertOptions(center=Coordinate(-79.38, 43.65)))
    result.geojson   # FeatureCollection dict
    result.warnings  # skipped nodes
"""

from svg_plotter.converter import ConversionResult, convert_svg, convert_svg_tree
from svg_plotter.core.config import ConvertOptions, Coordinate

__version__ = "0.1.0"

__all__ = [
    "ConversionResult",
    "ConvertOptions",
    "Coordinate",
    "__version__",
    "convert_svg",
    "convert_svg_tree",
]
