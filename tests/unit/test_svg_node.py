"""Tests for the SVG node tree and artboard models."""

from __future__ import annotations

import dataclasses

import pytest

from svg_plotter.models.svg_node import SVGMetaData, SVGNode


class TestSVGNode:
    """Read-only element access."""

    def test_get_exact_and_case_insensitive(self) -> None:
        node = SVGNode("svg", {"viewbox": "0 0 1 1"})
        assert node.get("viewbox") == "0 0 1 1"
        assert node.get("viewBox") == "0 0 1 1"
        assert node.get("missing") is None
        assert node.get("missing", "x") == "x"

    def test_exact_match_wins(self) -> None:
        node = SVGNode("svg", {"viewbox": "a", "viewBox": "b"})
        assert node.get("viewBox") == "b"

    def test_attributes_are_read_only(self) -> None:
        node = SVGNode("rect", {"x": "1"})
        with pytest.raises(TypeError):
            node.attributes["x"] = "2"  # type: ignore[index]

    def test_input_dict_is_copied(self) -> None:
        attributes = {"x": "1"}
        node = SVGNode("rect", attributes)
        attributes["x"] = "2"
        assert node.get("x") == "1"

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            SVGNode("g").name = "svg"  # type: ignore[misc]

    def test_dict_round_trip(self) -> None:
        tree = SVGNode("svg", {"width": "10"}, (SVGNode("g", {}, (SVGNode("line"),)),))
        data = tree.to_dict()
        assert data["children"][0]["children"][0]["name"] == "line"
        assert SVGNode.from_dict(data) == tree

    def test_from_svgson_style_dict(self) -> None:
        node = SVGNode.from_dict(
            {"name": "rect", "type": "element", "value": "", "attributes": {"x": 5}}
        )
        assert node.get("x") == "5"
        assert node.children == ()

    @pytest.mark.parametrize(
        "data", [{"name": "g", "attributes": []}, {"name": "g", "children": {}}]
    )
    def test_from_dict_rejects_bad_types(self, data: dict[str, object]) -> None:
        with pytest.raises(TypeError):
            SVGNode.from_dict(data)


class TestSVGMetaData:
    def test_aspect(self) -> None:
        assert SVGMetaData(0, 0, 300, 150).aspect == 2
