"""Tests for the path data (``d`` attribute) parser."""

from __future__ import annotations

import pytest

from svg_plotter.models.path_commands import (
    ClosePath,
    CubicCurveTo,
    EllipticalArcTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
)
from svg_plotter.models.vector2 import Vector2
from svg_plotter.parsing.path_data import PathDataError, parse_path_data


class TestParsePathData:
    """Absolute command conversion."""

    def test_empty(self) -> None:
        assert parse_path_data("") == []
        assert parse_path_data("   ") == []

    def test_move_line_close(self) -> None:
        commands = parse_path_data("M 0 0 L 10 0 L 10 10 Z")
        assert commands == [
            MoveTo(Vector2(0, 0)),
            LineTo(Vector2(0, 0), Vector2(10, 0)),
            LineTo(Vector2(10, 0), Vector2(10, 10)),
            ClosePath(Vector2(10, 10), Vector2(0, 0)),
        ]

    def test_relative_commands(self) -> None:
        commands = parse_path_data("m 5 5 l 10 0 l 0 10 z")
        assert commands[0] == MoveTo(Vector2(5, 5))
        assert commands[1].end == Vector2(15, 5)
        assert commands[2].end == Vector2(15, 15)
        assert commands[3].end == Vector2(5, 5)

    def test_horizontal_and_vertical(self) -> None:
        commands = parse_path_data("M 1 2 H 5 V 7 h -1 v -2")
        assert [c.end for c in commands[1:]] == [
            Vector2(5, 2),
            Vector2(5, 7),
            Vector2(4, 7),
            Vector2(4, 5),
        ]
        assert [c.code for c in commands[1:]] == ["H", "V", "H", "V"]

    def test_implicit_line_to_after_move(self) -> None:
        commands = parse_path_data("M 0 0 10 0 10 10")
        assert isinstance(commands[1], LineTo)
        assert isinstance(commands[2], LineTo)
        assert commands[2].end == Vector2(10, 10)

    def test_implicit_relative_line_to_after_relative_move(self) -> None:
        commands = parse_path_data("m 1 1 2 2")
        assert commands[1] == LineTo(Vector2(1, 1), Vector2(3, 3))

    def test_implicit_repeat_of_curve(self) -> None:
        commands = parse_path_data("M0 0 C 1 1 2 2 3 3 4 4 5 5 6 6")
        assert [c.code for c in commands] == ["M", "C", "C"]
        assert commands[2].start == Vector2(3, 3)

    def test_compact_numbers(self) -> None:
        commands = parse_path_data("M10-5L1.5.5")
        assert commands[0].end == Vector2(10, -5)
        assert commands[1].end == Vector2(1.5, 0.5)

    def test_scientific_notation(self) -> None:
        commands = parse_path_data("M 1e2 2.5E-1")
        assert commands[0].end == Vector2(100, 0.25)

    def test_cubic_and_smooth(self) -> None:
        commands = parse_path_data("M 0 0 C 0 10 10 10 10 0 S 20 -10 20 0")
        cubic, smooth = commands[1], commands[2]
        assert cubic == CubicCurveTo(
            Vector2(0, 0), Vector2(0, 10), Vector2(10, 10), Vector2(10, 0), "C"
        )
        assert smooth == CubicCurveTo(
            Vector2(10, 0), None, Vector2(20, -10), Vector2(20, 0), "S"
        )

    def test_quadratic_and_smooth(self) -> None:
        commands = parse_path_data("M 0 0 q 5 10 10 0 t 10 0")
        assert commands[1] == QuadraticCurveTo(Vector2(0, 0), Vector2(5, 10), Vector2(10, 0), "Q")
        assert commands[2] == QuadraticCurveTo(Vector2(10, 0), None, Vector2(20, 0), "T")

    def test_arc(self) -> None:
        commands = parse_path_data("M 250 100 A 120 80 0 0 1 250 200")
        assert commands[1] == EllipticalArcTo(
            Vector2(250, 100), 120, 80, 0, False, True, Vector2(250, 200)
        )

    def test_packed_arc_flags(self) -> None:
        commands = parse_path_data("M0 0a10 10 0 015 5")
        arc = commands[1]
        assert isinstance(arc, EllipticalArcTo)
        assert (arc.large_arc, arc.sweep) == (False, True)
        assert arc.end == Vector2(5, 5)

    def test_close_resets_current_point(self) -> None:
        commands = parse_path_data("M 5 5 L 10 5 Z l 1 1")
        assert commands[-1] == LineTo(Vector2(5, 5), Vector2(6, 6))

    def test_second_subpath_close_returns_to_its_start(self) -> None:
        commands = parse_path_data("M 0 0 L 1 0 Z M 10 10 L 11 10 Z")
        assert commands[-1] == ClosePath(Vector2(11, 10), Vector2(10, 10))


class TestParsePathDataErrors:
    """Malformed path data."""

    @pytest.mark.parametrize(
        "data",
        [
            "L 10 10",
            "10 10",
            "M 0",
            "M 0 0 L 5",
            "M 0 0 X 5 5",
            "M 0 0 A 1 1 0 2 0 5 5",
            "M 0 0 Z 5 5",
        ],
    )
    def test_malformed_raises(self, data: str) -> None:
        with pytest.raises(PathDataError):
            parse_path_data(data)

    def test_error_mentions_position(self) -> None:
        with pytest.raises(PathDataError, match="position"):
            parse_path_data("M 0 0 L 5 x")

    def test_trailing_garbage_raises(self) -> None:
        with pytest.raises(PathDataError, match="position 12"):
            parse_path_data("M 0 0 L 5 5 ? 1")

    def test_lexer_failure_is_chained(self) -> None:
        with pytest.raises(PathDataError) as excinfo:
            parse_path_data("M 0 0 C 1 1 2 2")
        assert excinfo.value.code == "PATH_DATA_INVALID"
        assert excinfo.value.stage == "parse_path_data"
        assert isinstance(excinfo.value.__cause__, ValueError)


class TestParsePathDataLexerDetails:
    """Behaviour of the callback builder behind the lexer."""

    def test_relative_curve_controls_share_start(self) -> None:
        commands = parse_path_data("M 10 10 c 1 1 2 2 3 3")
        assert commands[1] == CubicCurveTo(
            Vector2(10, 10), Vector2(11, 11), Vector2(12, 12), Vector2(13, 13), "C"
        )

    def test_repeated_smooth_quads_chain(self) -> None:
        commands = parse_path_data("M 0 0 T 1 0 2 0")
        assert [c.code for c in commands] == ["M", "T", "T"]
        assert commands[2].start == Vector2(1, 0)

    def test_relative_arc_end(self) -> None:
        commands = parse_path_data("M 5 5 a 2 2 0 1 0 4 0")
        assert commands[1].end == Vector2(9, 5)
        assert commands[1].large_arc is True

    def test_relative_move_after_close_uses_subpath_start(self) -> None:
        commands = parse_path_data("M 5 5 L 9 5 Z m 1 1")
        assert commands[-1] == MoveTo(Vector2(6, 6))
