"""Contract drift detection tests.

Verify that the dicts a conversion produces carry exactly the keys
declared by the ``TypedDict`` contracts in ``svg_plotter.models.contracts``.
"""

from __future__ import annotations

from pathlib import Path

from svg_plotter import ConvertOptions, convert_svg
from svg_plotter.mappers import attribute_id_mapper
from svg_plotter.models.contracts import ConversionPayload, Feature, FeatureCollection


def _required(cls: type) -> set[str]:
    return set(cls.__required_keys__)  # type: ignore[attr-defined]


class TestContractKeys:
    def test_feature_collection_keys(self, single_rect_svg: Path) -> None:
        geojson = convert_svg(single_rect_svg.read_bytes()).geojson
        assert set(geojson) == _required(FeatureCollection)

    def test_feature_keys_without_id(self, single_rect_svg: Path) -> None:
        feature = convert_svg(single_rect_svg.read_bytes()).features[0]
        assert set(feature) == _required(Feature)

    def test_feature_keys_with_id(self, mixed_shapes_svg: Path) -> None:
        options = ConvertOptions(id_mapper=attribute_id_mapper())
        feature = convert_svg(mixed_shapes_svg.read_bytes(), options).features[0]
        assert set(feature) == _required(Feature) | set(Feature.__optional_keys__)

    def test_payload_keys(self, single_rect_svg: Path) -> None:
        payload = convert_svg(single_rect_svg.read_bytes()).to_dict()
        assert set(payload) == _required(ConversionPayload)
