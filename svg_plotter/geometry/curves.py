"""Parametric curve evaluation and adaptive flattening.

Every evaluator maps a parameter ``t`` in ``[0, 1]`` to a point on the
curve; ``t`` is clamped so curves never extrapolate past their
endpoints.  ``draw_curve`` turns any such evaluator into a polyline by
recursive bisection, subdividing only where the curve bends more than
the configured angular threshold.

References:
- SVG 1.1 Implementation Notes F.6 (elliptical arcs, endpoint to
  centre parameterisation):
  https://www.w3.org/TR/SVG11/implnote.html#ArcImplementationNotes
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from svg_plotter.core.exceptions import ContractError
from svg_plotter.models.vector2 import Vector2

if TYPE_CHECKING:
    from collections.abc import Callable

    Curve = Callable[[float], Vector2]

logger = logging.getLogger("svg_plotter.geometry.curves")

FULL_TURN_RAD = 2 * math.pi


class CurveError(ContractError, ValueError):
    """Raised when a curve is flattened with invalid arguments."""

    default_stage = "flatten_curve"
    default_code = "CURVE_ARGUMENT_INVALID"


# ---------------------------------------------------------------------------
# Scalar helpers
# ---------------------------------------------------------------------------


def clamp(n: float, minimum: float, maximum: float) -> float:
    return min(max(minimum, n), maximum)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


# ---------------------------------------------------------------------------
# Curve evaluators
# ---------------------------------------------------------------------------


def point_on_line(p0: Vector2, p1: Vector2, t: float) -> Vector2:
    t = clamp(t, 0, 1)
    return Vector2(lerp(p0.x, p1.x, t), lerp(p0.y, p1.y, t))


def point_on_ellipse(center: Vector2, rx: float, ry: float, t: float) -> Vector2:
    """Point at angle ``2 * pi * t``; ``t=0`` and ``t=1`` both land on ``center + (rx, 0)``."""
    theta = FULL_TURN_RAD * t
    return Vector2(center.x + rx * math.cos(theta), center.y + ry * math.sin(theta))


def point_on_cubic_bezier(
    p0: Vector2, p1: Vector2, p2: Vector2, p3: Vector2, t: float
) -> Vector2:
    """Bernstein form: ``(1-t)^3 p0 + 3(1-t)^2 t p1 + 3(1-t) t^2 p2 + t^3 p3``."""
    t = clamp(t, 0, 1)
    n = 1 - t
    b0 = n * n * n
    b1 = 3 * n * n * t
    b2 = 3 * n * t * t
    b3 = t * t * t
    return Vector2(
        b0 * p0.x + b1 * p1.x + b2 * p2.x + b3 * p3.x,
        b0 * p0.y + b1 * p1.y + b2 * p2.y + b3 * p3.y,
    )


def point_on_quadratic_bezier(p0: Vector2, p1: Vector2, p2: Vector2, t: float) -> Vector2:
    """Bernstein form: ``(1-t)^2 p0 + 2(1-t) t p1 + t^2 p2``."""
    t = clamp(t, 0, 1)
    n = 1 - t
    b0 = n * n
    b1 = 2 * n * t
    b2 = t * t
    return Vector2(
        b0 * p0.x + b1 * p1.x + b2 * p2.x,
        b0 * p0.y + b1 * p1.y + b2 * p2.y,
    )


def point_on_elliptical_arc(
    p0: Vector2,
    p1: Vector2,
    rx: float,
    ry: float,
    x_axis_rotation: float,
    large_arc: bool,
    sweep: bool,
    t: float,
) -> Vector2:
    """Evaluate an SVG elliptical arc given in endpoint parameterisation.

    Args:
        p0: Arc start point.
        p1: Arc end point.
        rx: X radius (sign ignored).
        ry: Y radius (sign ignored).
        x_axis_rotation: Rotation of the ellipse's x axis in degrees.
        large_arc: Choose the arc spanning more than 180 degrees.
        sweep: Choose the arc drawn in the positive-angle direction.
        t: Curve parameter, clamped to ``[0, 1]``.

    Returns:
        The point on the arc at ``t``. Identical endpoints return ``p0``;
        a zero radius degrades to the straight segment ``p0 -> p1``.
    """
    rx = abs(rx)
    ry = abs(ry)
    phi = math.radians(math.fmod(x_axis_rotation, 360))
    t = clamp(t, 0, 1)

    if p0 == p1:
        return p0
    if not rx or not ry:
        return point_on_line(p0, p1, t)

    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    # Step 1: midpoint offset in the ellipse's own frame
    dx = (p0.x - p1.x) * 0.5
    dy = (p0.y - p1.y) * 0.5
    local = Vector2(cos_phi * dx + sin_phi * dy, -sin_phi * dx + cos_phi * dy)

    # Radii too small to connect the endpoints are scaled up uniformly
    radii_check = local.x**2 / rx**2 + local.y**2 / ry**2
    if radii_check > 1:
        root = math.sqrt(radii_check)
        rx *= root
        ry *= root

    # Step 2: centre in the ellipse's frame
    numerator = rx**2 * ry**2 - rx**2 * local.y**2 - ry**2 * local.x**2
    denominator = rx**2 * local.y**2 + ry**2 * local.x**2
    radicand = max(numerator / denominator, 0.0)
    coefficient = (1 if large_arc != sweep else -1) * math.sqrt(radicand)
    local_center = Vector2(
        coefficient * (rx * local.y / ry),
        coefficient * -(ry * local.x / rx),
    )

    # Step 3: centre in user space
    center = Vector2(
        cos_phi * local_center.x - sin_phi * local_center.y + (p0.x + p1.x) / 2,
        sin_phi * local_center.x + cos_phi * local_center.y + (p0.y + p1.y) / 2,
    )

    # Step 4: start angle and sweep angle
    start_vector = Vector2(
        (local.x - local_center.x) / rx,
        (local.y - local_center.y) / ry,
    )
    end_vector = Vector2(
        (-local.x - local_center.x) / rx,
        (-local.y - local_center.y) / ry,
    )
    start_angle = Vector2.angle_between(Vector2(1, 0), start_vector)
    sweep_angle = Vector2.angle_between(start_vector, end_vector)
    if not sweep and sweep_angle > 0:
        sweep_angle -= FULL_TURN_RAD
    elif sweep and sweep_angle < 0:
        sweep_angle += FULL_TURN_RAD
    # fmod keeps the sign of the sweep direction
    sweep_angle = math.fmod(sweep_angle, FULL_TURN_RAD)

    angle = start_angle + sweep_angle * t
    ellipse_x = rx * math.cos(angle)
    ellipse_y = ry * math.sin(angle)
    return Vector2(
        cos_phi * ellipse_x - sin_phi * ellipse_y + center.x,
        sin_phi * ellipse_x + cos_phi * ellipse_y + center.y,
    )


# ---------------------------------------------------------------------------
# Adaptive flattening
# ---------------------------------------------------------------------------


def draw_curve(
    curve: Curve,
    subdivide_threshold: float,
    start: float = 0.0,
    end: float = 1.0,
) -> list[Vector2]:
    """Flatten ``curve`` over ``[start, end]`` into a polyline.

    The span is bisected while the angle between the chords
    ``start -> middle`` and ``start -> end`` exceeds
    ``subdivide_threshold`` degrees. The full span ``[0, 1]`` is always
    split at least once so closed curves, whose start and end coincide,
    still produce their interior points.

    Args:
        curve: Evaluator mapping ``t`` to a point.
        subdivide_threshold: Maximum accepted deviation in degrees (> 0).
        start: First parameter value, in ``[0, 1]``.
        end: Last parameter value, in ``[0, 1]``.

    Returns:
        Points beginning with ``curve(start)`` and ending with ``curve(end)``.

    Raises:
        CurveError: If the threshold is not positive or ``start``/``end``
            fall outside ``[0, 1]``.
    """
    if subdivide_threshold <= 0:
        msg = f"subdivide_threshold must be greater than zero, got {subdivide_threshold}"
        raise CurveError(msg)
    if not 0 <= start <= 1:
        msg = f"start must be between 0 and 1, got {start}"
        raise CurveError(msg)
    if not 0 <= end <= 1:
        msg = f"end must be between 0 and 1, got {end}"
        raise CurveError(msg)

    points = _subdivide(curve, subdivide_threshold, start, end)
    logger.debug("Flattened curve over [%s, %s] into %d point(s)", start, end, len(points))
    return points


def _subdivide(curve: Curve, threshold: float, start: float, end: float) -> list[Vector2]:
    middle = lerp(start, end, 0.5)
    start_point = curve(start)
    mid_point = curve(middle)
    end_point = curve(end)
    deviation = math.degrees(
        abs(
            Vector2.angle_between(
                mid_point.subtract(start_point),
                end_point.subtract(start_point),
            )
        )
    )
    if (start == 0 and end == 1) or deviation > threshold:
        return [
            *_subdivide(curve, threshold, start, middle),
            *_subdivide(curve, threshold, middle, end)[1:],
        ]
    return [start_point, end_point]
