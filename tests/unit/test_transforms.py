"""Tests for SVG transform parsing, composition and application."""

from __future__ import annotations

import pytest

from svg_plotter.core.exceptions import ValidationError
from svg_plotter.geometry.transforms import (
    TransformSyntaxError,
    apply_transform,
    compose,
    parse_transform,
)
from svg_plotter.models.vector2 import Vector2


def _approx(v: Vector2, x: float, y: float) -> bool:
    return v.x == pytest.approx(x, abs=1e-9) and v.y == pytest.approx(y, abs=1e-9)


def _entries(m) -> tuple[float, ...]:
    return (m.a, m.b, m.c, m.d, m.e, m.f)


class TestParseTransform:
    """Transform list parsing via svgelements."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_is_none(self, value: str | None) -> None:
        assert parse_transform(value) is None

    def test_translate(self) -> None:
        assert _approx(apply_transform(Vector2(0, 0), parse_transform("translate(10,0)")), 10, 0)

    def test_scale(self) -> None:
        assert _approx(apply_transform(Vector2(3, 4), parse_transform("scale(2)")), 6, 8)

    def test_rotate_degrees(self) -> None:
        assert _approx(apply_transform(Vector2(1, 0), parse_transform("rotate(90)")), 0, 1)

    def test_matrix(self) -> None:
        matrix = parse_transform("matrix(1 0 0 1 5 6)")
        assert _approx(apply_transform(Vector2(0, 0), matrix), 5, 6)

    def test_list_applies_rightmost_first(self) -> None:
        """``translate(10) scale(2)`` scales first, then translates."""
        matrix = parse_transform("translate(10, 0) scale(2)")
        assert _approx(apply_transform(Vector2(1, 1), matrix), 12, 2)

    @pytest.mark.parametrize("value", ["translate(10", "skew(5)", "bogus", "scale(2) ;"])
    def test_malformed_raises(self, value: str) -> None:
        with pytest.raises(TransformSyntaxError):
            parse_transform(value)

    def test_error_is_validation_error(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_transform("nope(1)")
        assert exc_info.value.code == "TRANSFORM_SYNTAX_INVALID"


class TestCompose:
    """Parent and child transform composition."""

    def test_child_applies_before_parent(self) -> None:
        parent = parse_transform("translate(10, 0)")
        child = parse_transform("scale(2)")
        assert _approx(apply_transform(Vector2(1, 1), compose(parent, child)), 12, 2)

    def test_parent_rotation_rotates_child_translation(self) -> None:
        parent = parse_transform("rotate(90)")
        child = parse_transform("translate(5, 0)")
        assert _approx(apply_transform(Vector2(0, 0), compose(parent, child)), 0, 5)

    def test_missing_side_returns_other(self) -> None:
        m = parse_transform("translate(1, 2)")
        assert compose(None, m) is m
        assert compose(m, None) is m
        assert compose(None, None) is None

    def test_matches_matrix_product_entries(self) -> None:
        parent = parse_transform("translate(10, 0)")
        child = parse_transform("scale(2)")
        assert _entries(compose(parent, child)) == (2, 0, 0, 2, 10, 0)

    def test_operands_are_not_mutated(self) -> None:
        parent = parse_transform("translate(10, 0)")
        child = parse_transform("scale(2)")
        compose(parent, child)
        assert _entries(child) == (2, 0, 0, 2, 0, 0)
        assert _entries(parent) == (1, 0, 0, 1, 10, 0)


class TestApplyTransform:
    def test_none_is_identity(self) -> None:
        p = Vector2(3, 4)
        assert apply_transform(p, None) is p

    def test_accepts_string(self) -> None:
        assert _approx(apply_transform(Vector2(1, 1), "translate(-1, -1)"), 0, 0)
