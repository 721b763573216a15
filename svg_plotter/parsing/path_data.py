"""SVG path data (``d`` attribute) parser.

Lexing is done by ``svgelements.SVGLexicalParser``, which calls back a
builder once per command.  The builder here converts every callback to
an absolute ``PathCommand``:

- All commands ``MmLlHhVvCcSsQqTtAaZz``, relative and absolute
- Implicit repetition (extra coordinate pairs after ``M`` are ``L``)
- Numbers without separators (``10-5``, ``1.5.5``) and scientific notation
- Packed arc flags (``a10 10 0 01 5 5``)

Each command records the current point it starts from.  Smooth curves
(``S``/``T``) keep their code and leave the reflected handle unset.
"""

from __future__ import annotations

import logging

from svg_plotter.core.exceptions import ValidationError
from svg_plotter.models.path_commands import (
    ClosePath,
    CubicCurveTo,
    EllipticalArcTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
)
from svg_plotter.models.vector2 import Vector2

logger = logging.getLogger("svg_plotter.parsing.path_data")


class PathDataError(ValidationError, ValueError):
    """Raised when a path ``d`` attribute is malformed."""

    default_stage = "parse_path_data"
    default_code = "PATH_DATA_INVALID"


class _CommandBuilder:
    """Receives lexer callbacks and collects absolute commands.

    The lexer resolves relative coordinate pairs against
    ``current_point`` itself; only ``h``/``v`` offsets arrive raw.
    """

    def __init__(self) -> None:
        self.commands: list[PathCommand] = []
        self.current_point: Vector2 | None = None
        self.subpath_start = Vector2()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _current(self, code: str) -> Vector2:
        if self.current_point is None:
            msg = f"Path data must begin with a move command, got {code!r}"
            raise ValueError(msg)
        return self.current_point

    def _point(self, coord: tuple[float, float] | str | None) -> Vector2:
        if coord is None:
            raise ValueError("missing coordinate pair")
        # inline close ("L z") targets the subpath start
        if isinstance(coord, str):
            return self.subpath_start
        return Vector2(float(coord[0]), float(coord[1]))

    def _advance(self, command: PathCommand) -> None:
        self.commands.append(command)
        self.current_point = command.end

    # ------------------------------------------------------------------
    # Lexer callbacks
    # ------------------------------------------------------------------

    def start(self) -> None:
        pass

    def end(self) -> None:
        pass

    def move(self, *points, relative: bool = False) -> None:
        for coord in points:
            end = self._point(coord)
            self._advance(MoveTo(end))
            self.subpath_start = end

    def line(self, *points, relative: bool = False) -> None:
        for coord in points:
            start = self._current("L")
            self._advance(LineTo(start, self._point(coord), "L"))

    def horizontal(self, *values, relative: bool = False) -> None:
        for value in values:
            start = self._current("H")
            if value is None:
                raise ValueError("H command is missing its coordinate")
            x = start.x + value if relative else value
            self._advance(LineTo(start, Vector2(float(x), start.y), "H"))

    def vertical(self, *values, relative: bool = False) -> None:
        for value in values:
            start = self._current("V")
            if value is None:
                raise ValueError("V command is missing its coordinate")
            y = start.y + value if relative else value
            self._advance(LineTo(start, Vector2(start.x, float(y)), "V"))

    def cubic(self, control1, control2, end, relative: bool = False) -> None:
        start = self._current("C")
        self._advance(
            CubicCurveTo(start, self._point(control1), self._point(control2), self._point(end), "C")
        )

    def smooth_cubic(self, control2, end, relative: bool = False) -> None:
        start = self._current("S")
        self._advance(CubicCurveTo(start, None, self._point(control2), self._point(end), "S"))

    def quad(self, control, end, relative: bool = False) -> None:
        start = self._current("Q")
        self._advance(QuadraticCurveTo(start, self._point(control), self._point(end), "Q"))

    def smooth_quad(self, *points, relative: bool = False) -> None:
        for coord in points:
            start = self._current("T")
            self._advance(QuadraticCurveTo(start, None, self._point(coord), "T"))

    def arc(self, rx, ry, rotation, large_arc, sweep, end, relative: bool = False) -> None:
        start = self._current("A")
        if None in (rx, ry, rotation):
            raise ValueError("A command is missing a radius or rotation")
        if large_arc is None or sweep is None:
            raise ValueError("arc flags must be 0 or 1")
        self._advance(
            EllipticalArcTo(
                start,
                float(rx),
                float(ry),
                float(rotation),
                bool(large_arc),
                bool(sweep),
                self._point(end),
            )
        )

    def closed(self, relative: bool = False) -> None:
        start = self._current("Z")
        self.commands.append(ClosePath(start, self.subpath_start))
        self.current_point = self.subpath_start


def parse_path_data(data: str) -> list[PathCommand]:
    """Parse a path ``d`` attribute into absolute commands.

    An empty string yields an empty list.

    Raises:
        PathDataError: If the data does not start with a move command,
            a command is missing arguments, or an unknown character is found.
    """
    from svgelements import SVGLexicalParser

    if not data.strip():
        return []

    builder = _CommandBuilder()
    lexer = SVGLexicalParser()
    try:
        lexer.parse(builder, data)
    except (ValueError, IndexError, TypeError) as exc:
        detail = str(exc) or "malformed command arguments"
        msg = f"Invalid path data near position {lexer.pos}: {detail}"
        raise PathDataError(msg) from exc

    # the lexer stops quietly at the first token it cannot read
    remainder = data[lexer.pos :].strip(" ,\t\n\r\f")
    if remainder:
        found = remainder[:10]
        msg = f"Expected a path command at position {lexer.pos}, found {found!r}"
        raise PathDataError(msg)

    logger.debug("Parsed path data into %d command(s)", len(builder.commands))
    return builder.commands
