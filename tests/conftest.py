"""Shared pytest fixtures for the svg-plotter test suite."""

from pathlib import Path

import pytest

from svg_plotter.core.config import ConvertOptions
from svg_plotter.models.svg_node import SVGMetaData, SVGNode
from svg_plotter.transformers import NodeContext

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


# ---------------------------------------------------------------------------
# Sample SVG file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def single_rect_svg(data_dir: Path) -> Path:
    """A 100 x 100 viewBox holding one rect covering the artboard."""
    return data_dir / "single_rect.svg"


@pytest.fixture()
def mixed_shapes_svg(data_dir: Path) -> Path:
    """One of every supported shape plus an unsupported <defs> block."""
    return data_dir / "mixed_shapes.svg"


@pytest.fixture()
def no_metadata_svg(data_dir: Path) -> Path:
    """An <svg> root with neither viewBox nor width/height."""
    return data_dir / "no_metadata.svg"


@pytest.fixture()
def compound_path_svg(data_dir: Path) -> Path:
    """A single <path> drawing a square with a square hole."""
    return data_dir / "compound_path.svg"


@pytest.fixture()
def not_xml_svg(data_dir: Path) -> Path:
    """A file that is not XML."""
    return data_dir / "not_xml.svg"


# ---------------------------------------------------------------------------
# Conversion fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def square_meta() -> SVGMetaData:
    """A 100 x 100 artboard at the origin."""
    return SVGMetaData(x=0.0, y=0.0, width=100.0, height=100.0)


@pytest.fixture()
def default_options() -> ConvertOptions:
    return ConvertOptions()


@pytest.fixture()
def context(square_meta: SVGMetaData, default_options: ConvertOptions) -> NodeContext:
    """Transformer context for the square artboard with default options."""
    return NodeContext(svg_meta=square_meta, options=default_options)


@pytest.fixture()
def make_root():
    """Factory for <svg> root nodes; the viewBox defaults to 0 0 100 100."""

    def _make(*children: SVGNode, **attributes: str) -> SVGNode:
        attributes.setdefault("viewBox", "0 0 100 100")
        return SVGNode("svg", attributes, children)

    return _make
