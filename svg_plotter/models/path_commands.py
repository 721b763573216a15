"""Absolute SVG path commands.

The path data parser turns a ``d`` attribute into a list of these
commands.  All coordinates are absolute SVG user units.  Every drawing
command carries its ``start`` point (the current point before the
command) so curve evaluators never need to look back.

Smooth commands keep their code: an ``S`` is a ``CubicCurveTo`` whose
``control1`` is ``None`` and a ``T`` is a ``QuadraticCurveTo`` whose
``control`` is ``None``.  Reflecting the previous handle is the path
interpreter's job, because it depends on which command came before.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from svg_plotter.models.vector2 import Vector2


@dataclass(frozen=True, slots=True)
class MoveTo:
    """``M``: start a new subpath at ``end``."""

    end: Vector2
    code: Literal["M"] = "M"


@dataclass(frozen=True, slots=True)
class LineTo:
    """``L``, ``H`` or ``V``: straight segment to ``end``."""

    start: Vector2
    end: Vector2
    code: Literal["L", "H", "V"] = "L"


@dataclass(frozen=True, slots=True)
class CubicCurveTo:
    """``C`` or ``S``: cubic Bezier from ``start`` to ``end``."""

    start: Vector2
    control1: Vector2 | None
    control2: Vector2
    end: Vector2
    code: Literal["C", "S"] = "C"


@dataclass(frozen=True, slots=True)
class QuadraticCurveTo:
    """``Q`` or ``T``: quadratic Bezier from ``start`` to ``end``."""

    start: Vector2
    control: Vector2 | None
    end: Vector2
    code: Literal["Q", "T"] = "Q"


@dataclass(frozen=True, slots=True)
class EllipticalArcTo:
    """``A``: elliptical arc from ``start`` to ``end`` (SVG endpoint parameterisation)."""

    start: Vector2
    rx: float
    ry: float
    x_axis_rotation: float
    large_arc: bool
    sweep: bool
    end: Vector2
    code: Literal["A"] = "A"


@dataclass(frozen=True, slots=True)
class ClosePath:
    """``Z``: close the current subpath back to ``end`` (the subpath start)."""

    start: Vector2
    end: Vector2
    code: Literal["Z"] = "Z"


PathCommand = MoveTo | LineTo | CubicCurveTo | QuadraticCurveTo | EllipticalArcTo | ClosePath
