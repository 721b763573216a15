"""SVG ``transform`` attribute handling.

Transform lists (``translate(...) rotate(...) matrix(...)`` and so on)
are parsed by ``svgelements.Matrix``.  A node's effective transform is
its own transform list followed by every ancestor's, so a point is
mapped first by the innermost element and last by the outermost
``<g>``.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from svg_plotter.core.exceptions import ValidationError
from svg_plotter.models.vector2 import Vector2

if TYPE_CHECKING:
    from svgelements import Matrix

logger = logging.getLogger("svg_plotter.geometry.transforms")

_TRANSFORM_LIST_RE = re.compile(
    r"^\s*(?:(?:matrix|translate|scale|rotate|skewX|skewY)\s*\([^()]*\)\s*,?\s*)*$"
)


class TransformSyntaxError(ValidationError, ValueError):
    """Raised when a ``transform`` attribute cannot be parsed."""

    default_stage = "parse_transform"
    default_code = "TRANSFORM_SYNTAX_INVALID"


def parse_transform(value: str | None) -> Matrix | None:
    """Parse a transform list into an affine matrix.

    Returns ``None`` for a missing or blank attribute.

    Raises:
        TransformSyntaxError: If the transform list is malformed.
    """
    from svgelements import Matrix

    if value is None or not value.strip():
        return None
    if not _TRANSFORM_LIST_RE.match(value):
        msg = f"Invalid transform {value!r}"
        raise TransformSyntaxError(msg)
    try:
        matrix = Matrix(value)
    except (ValueError, IndexError, TypeError) as exc:
        msg = f"Invalid transform {value!r}: {exc}"
        raise TransformSyntaxError(msg) from exc
    logger.debug("Parsed transform %r -> %s", value, matrix)
    return matrix


def compose(parent: Matrix | None, child: Matrix | None) -> Matrix | None:
    """Return the transform applying ``child`` first and ``parent`` second."""
    if parent is None:
        return child
    if child is None:
        return parent
    # the left operand of a svgelements product applies first
    return child * parent


def apply_transform(point: Vector2, transform: Matrix | str | None) -> Vector2:
    """Map ``point`` through ``transform`` (a matrix or a transform list)."""
    matrix = parse_transform(transform) if isinstance(transform, str) else transform
    if matrix is None:
        return point
    mapped = matrix.point_in_matrix_space((point.x, point.y))
    return Vector2(float(mapped.x), float(mapped.y))
