"""SVG markup parsing and artboard metadata.

Responsibilities:
- Parse SVG markup into an ``SVGNode`` tree with lxml (entities and
  network access disabled)
- Strip XML namespaces from tag and attribute names
- Derive the artboard (``SVGMetaData``) from ``viewBox`` or
  ``width``/``height`` on the root element
- Numeric attribute parsing shared by the shape transformers
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from svg_plotter.core.constants import TAG_SVG
from svg_plotter.core.exceptions import ValidationError
from svg_plotter.models.svg_node import SVGMetaData, SVGNode

if TYPE_CHECKING:
    from pathlib import Path

    from lxml.etree import _Element

logger = logging.getLogger("svg_plotter.parsing.svg_document")

_LEADING_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_LIST_SEPARATOR_RE = re.compile(r"[\s,]+")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SvgParseError(ValidationError):
    """Raised when SVG markup cannot be parsed."""

    default_stage = "parse_svg"
    default_code = "SVG_PARSE_FAILED"


class SvgMetadataError(SvgParseError):
    """Raised when the root element defines no usable artboard."""

    default_stage = "svg_metadata"
    default_code = "SVG_METADATA_MISSING"


class InvalidAttributeError(ValidationError, ValueError):
    """Raised when an element attribute holds an unparseable value."""

    default_stage = "parse_attribute"
    default_code = "SVG_ATTRIBUTE_INVALID"


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------


def parse_svg(content: str | bytes) -> SVGNode:
    """Parse SVG markup into an ``SVGNode`` tree.

    Comments, processing instructions and text content are dropped.

    Raises:
        SvgParseError: If the markup is empty, not well-formed XML, or its
            root element is not ``<svg>``.
    """
    from lxml import etree  # type: ignore[attr-defined]

    data = content.encode("utf-8") if isinstance(content, str) else content
    if not data.strip():
        msg = "SVG document is empty"
        raise SvgParseError(msg)

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    try:
        root: _Element = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"SVG document is not well-formed XML: {exc}"
        raise SvgParseError(msg) from exc

    node = _to_node(root)
    if node.name != TAG_SVG:
        msg = f"Root element must be <svg>, got <{node.name}>"
        raise SvgParseError(msg)
    logger.debug("Parsed SVG document with root <%s>", node.name)
    return node


def parse_svg_file(path: Path) -> SVGNode:
    """Read and parse an SVG file.

    Raises:
        SvgParseError: If the file cannot be read or parsed.
    """
    try:
        content = path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read SVG file {path}: {exc}"
        raise SvgParseError(msg) from exc
    return parse_svg(content)


def _to_node(element: _Element) -> SVGNode:
    from lxml import etree  # type: ignore[attr-defined]

    return SVGNode(
        name=etree.QName(element).localname,
        attributes={etree.QName(key).localname: value for key, value in element.attrib.items()},
        # comments and processing instructions have non-string tags
        children=tuple(_to_node(child) for child in element if isinstance(child.tag, str)),
    )


# ---------------------------------------------------------------------------
# Artboard
# ---------------------------------------------------------------------------


def get_svg_metadata(root: SVGNode) -> SVGMetaData:
    """Derive the artboard from the root element.

    ``viewBox`` wins when present: ``"min-x min-y width height"``.
    Otherwise ``width`` and ``height`` are used with the origin at
    ``x``/``y`` (default 0); unit suffixes such as ``px`` are ignored.

    Raises:
        SvgMetadataError: If neither source is present, a value is not
            numeric, or the resulting size is not positive.
    """
    view_box = root.get("viewBox")
    if view_box is not None and view_box.strip():
        parts = [p for p in _LIST_SEPARATOR_RE.split(view_box.strip()) if p]
        if len(parts) != 4:
            msg = f"viewBox must hold 4 numbers, got {view_box!r}"
            raise SvgMetadataError(msg)
        try:
            x, y, width, height = (float(p) for p in parts)
        except ValueError as exc:
            msg = f"viewBox must hold 4 numbers, got {view_box!r}"
            raise SvgMetadataError(msg) from exc
        source = "viewBox"
    else:
        width_raw = root.get("width")
        height_raw = root.get("height")
        if width_raw is None or height_raw is None:
            msg = "SVG root element has neither a viewBox nor width and height attributes"
            raise SvgMetadataError(msg)
        try:
            width = parse_length(width_raw)
            height = parse_length(height_raw)
            x = number_attribute(root, "x")
            y = number_attribute(root, "y")
        except InvalidAttributeError as exc:
            raise SvgMetadataError(exc.message) from exc
        source = "width/height"

    if width <= 0 or height <= 0:
        msg = f"SVG artboard must have a positive size, got {width} x {height} from {source}"
        raise SvgMetadataError(msg)

    meta = SVGMetaData(x=x, y=y, width=width, height=height)
    logger.debug("Artboard from %s: origin=(%s, %s) size=%s x %s", source, x, y, width, height)
    return meta


# ---------------------------------------------------------------------------
# Attribute values
# ---------------------------------------------------------------------------


def parse_length(value: str) -> float:
    """Parse the leading number of a length such as ``"100px"`` or ``"2.5e1"``.

    Raises:
        InvalidAttributeError: If the value does not start with a number.
    """
    match = _LEADING_NUMBER_RE.match(value)
    if match is None:
        msg = f"Expected a number, got {value!r}"
        raise InvalidAttributeError(msg)
    return float(match.group(1))


def number_attribute(node: SVGNode, name: str, default: float = 0.0) -> float:
    """Return a numeric attribute of ``node``, or ``default`` when absent.

    Raises:
        InvalidAttributeError: If the attribute is present but not numeric.
    """
    raw = node.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse_length(raw)
    except InvalidAttributeError as exc:
        msg = f"<{node.name}> attribute {name}={raw!r} is not a number"
        raise InvalidAttributeError(msg) from exc
