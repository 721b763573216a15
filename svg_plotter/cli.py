"""``svg-plotter`` command line.

Converts one SVG file to GeoJSON.  Options start from the
``SVG_PLOTTER_*`` environment variables (``ConvertOptions.from_env``)
and are overridden by flags.

Exit codes:
    0  success (warnings for skipped nodes do not fail the run)
    1  invalid arguments, invalid configuration or unreadable input
    2  the conversion failed; the structured error is printed to stderr
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from svg_plotter import __version__
from svg_plotter.converter import convert_svg
from svg_plotter.core.config import ConvertOptions, parse_center
from svg_plotter.core.exceptions import SvgPlotterError
from svg_plotter.mappers import attribute_id_mapper, attribute_property_mapper

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("svg_plotter.cli")

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_CONVERSION_FAILED = 2


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="svg-plotter",
        description="Convert an SVG drawing into GeoJSON placed on the globe.",
    )
    parser.add_argument("svg_file", type=Path, help="SVG file to convert")
    parser.add_argument(
        "--center",
        metavar="LON,LAT",
        help="coordinate the artboard centre is placed on (default 0,0)",
    )
    parser.add_argument(
        "--width", type=float, metavar="METRES", help="real-world width of the artboard"
    )
    parser.add_argument(
        "--bearing", type=float, metavar="DEG", help="clockwise rotation around the centre"
    )
    parser.add_argument(
        "--subdivision-angle",
        type=float,
        metavar="DEG",
        dest="subdivide_threshold",
        help="maximum angular deviation when flattening curves",
    )
    parser.add_argument(
        "--precision", type=int, metavar="N", help="round coordinates to N decimal places"
    )
    parser.add_argument(
        "--composite-polygons",
        action="store_true",
        help="group nested rings of a path into polygons with holes",
    )
    parser.add_argument(
        "--id-attribute", metavar="NAME", help="SVG attribute used as the feature id"
    )
    parser.add_argument(
        "--property-attribute",
        metavar="NAME",
        action="append",
        default=[],
        help="SVG attribute copied into feature properties (repeatable)",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        help="output file, '-' for stdout (default: <svg_file stem>.geojson)",
    )
    parser.add_argument("--pretty", action="store_true", help="indent the GeoJSON output")
    parser.add_argument(
        "--validate", action="store_true", help="check the output against the GeoJSON schema"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="errors only")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> ConvertOptions:
    """Environment defaults overridden by the flags that were given.

    Raises:
        ConfigValidationError: If a value is out of range.
        ValueError: If an environment variable is not numeric.
    """
    overrides: dict[str, Any] = {}
    if args.center is not None:
        overrides["center"] = parse_center(args.center)
    for name in ("width", "bearing", "subdivide_threshold"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    if args.precision is not None:
        overrides["coordinate_precision"] = args.precision
    if args.composite_polygons:
        overrides["composite_polygons"] = True
    if args.id_attribute:
        overrides["id_mapper"] = attribute_id_mapper(args.id_attribute)
    if args.property_attribute:
        overrides["property_mapper"] = attribute_property_mapper(*args.property_attribute)
    return ConvertOptions.from_env().with_overrides(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = options_from_args(args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_USAGE

    try:
        content = args.svg_file.read_bytes()
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.svg_file, exc)
        return EXIT_USAGE

    try:
        result = convert_svg(content, options)
    except SvgPlotterError as exc:
        logger.error("Conversion of %s failed: %s", args.svg_file, exc.message)
        print(json.dumps(exc.to_error_dict()), file=sys.stderr)
        return EXIT_CONVERSION_FAILED

    if args.validate:
        from pydantic import ValidationError

        from svg_plotter.models.geojson import validate_feature_collection

        try:
            validate_feature_collection(dict(result.geojson))
        except ValidationError as exc:
            logger.error("Output failed GeoJSON validation: %s", exc)
            return EXIT_CONVERSION_FAILED

    text = json.dumps(result.geojson, indent=2 if args.pretty else None)
    if args.output == "-":
        sys.stdout.write(text + "\n")
    else:
        output = Path(args.output) if args.output else args.svg_file.with_suffix(".geojson")
        try:
            output.write_text(text + "\n", encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot write %s: %s", output, exc)
            return EXIT_USAGE
        logger.info("Wrote %d feature(s) to %s", len(result.features), output)

    if result.warnings:
        logger.info("%d node(s) skipped", len(result.warnings))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
