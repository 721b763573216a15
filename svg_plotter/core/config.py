"""Conversion options.

All options have sensible defaults and are validated on construction,
so an invalid ``ConvertOptions`` can never reach the projector or the
curve flattener.  There is no process-wide default instance: every
conversion receives its own immutable options value.

Environment variables (``from_env()``) provide the base configuration
for the command-line wrapper; explicit flags override them.
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from svg_plotter.core.constants import (
    DEFAULT_BEARING_DEG,
    DEFAULT_SUBDIVIDE_THRESHOLD_DEG,
    DEFAULT_WIDTH_M,
)
from svg_plotter.core.exceptions import ContractError

if TYPE_CHECKING:
    from collections.abc import Callable

    from svg_plotter.models.svg_node import SVGNode

    FeatureIdMapper = Callable[[SVGNode], "str | int | None"]
    FeaturePropertyMapper = Callable[[SVGNode], "dict[str, Any] | None"]


class ConfigValidationError(ValueError, ContractError):
    """Raised when an option value is out of its valid range.

    Attributes:
        key: The option that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        ContractError.__init__(self, f"Invalid option {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A geographic coordinate in decimal degrees (WGS 84)."""

    longitude: float = 0.0
    latitude: float = 0.0


@dataclass(frozen=True, slots=True)
class ConvertOptions:
    """Immutable conversion options.

    Attributes:
        center: Geographic coordinate the artboard centre is placed on.
        width: Real-world width in metres the artboard width maps onto.
        bearing: Clockwise rotation in degrees around ``center``.
        subdivide_threshold: Maximum angular deviation in degrees accepted
            when flattening curves. Smaller values give smoother curves.
        id_mapper: Called with the source node for every emitted feature;
            its result becomes the feature ``id`` (``None`` omits it).
        property_mapper: Called with the source node for every emitted
            feature; its result becomes the feature ``properties``.
        coordinate_precision: Decimal places output positions are rounded
            to (``None`` keeps full precision).
        composite_polygons: Group nested closed rings of a single ``<path>``
            into polygons with holes instead of emitting one Polygon per ring.
    """

    center: Coordinate = field(default_factory=Coordinate)
    width: float = DEFAULT_WIDTH_M
    bearing: float = DEFAULT_BEARING_DEG
    subdivide_threshold: float = DEFAULT_SUBDIVIDE_THRESHOLD_DEG
    id_mapper: FeatureIdMapper | None = None
    property_mapper: FeaturePropertyMapper | None = None
    coordinate_precision: int | None = None
    composite_polygons: bool = False

    def __post_init__(self) -> None:
        _validate(self)

    def with_overrides(self, **changes: Any) -> ConvertOptions:
        """Return a validated copy with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls) -> ConvertOptions:
        """Load and validate options from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or
                ``SVG_PLOTTER_CENTER`` is not ``"lon,lat"``.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``SVG_PLOTTER_WIDTH_M=abc``).
        """
        precision_raw = os.getenv("SVG_PLOTTER_PRECISION", "")
        return cls(
            center=parse_center(os.getenv("SVG_PLOTTER_CENTER", "0,0")),
            width=float(os.getenv("SVG_PLOTTER_WIDTH_M", str(DEFAULT_WIDTH_M))),
            bearing=float(os.getenv("SVG_PLOTTER_BEARING_DEG", str(DEFAULT_BEARING_DEG))),
            subdivide_threshold=float(
                os.getenv(
                    "SVG_PLOTTER_SUBDIVIDE_THRESHOLD_DEG",
                    str(DEFAULT_SUBDIVIDE_THRESHOLD_DEG),
                )
            ),
            coordinate_precision=int(precision_raw) if precision_raw else None,
        )


def parse_center(value: str) -> Coordinate:
    """Parse a ``"longitude,latitude"`` string into a ``Coordinate``.

    Raises:
        ConfigValidationError: If the string is not two comma-separated numbers.
    """
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2:
        raise ConfigValidationError("center", value, "must be in the form 'longitude,latitude'")
    try:
        longitude, latitude = float(parts[0]), float(parts[1])
    except ValueError as exc:
        raise ConfigValidationError(
            "center", value, "must be in the form 'longitude,latitude'"
        ) from exc
    return Coordinate(longitude=longitude, latitude=latitude)


def _validate(options: ConvertOptions) -> None:
    """Validate option ranges.  Raises ``ConfigValidationError``."""
    if not options.width > 0:
        raise ConfigValidationError("width", options.width, "must be > 0 (metres)")

    if not options.subdivide_threshold > 0:
        raise ConfigValidationError(
            "subdivide_threshold",
            options.subdivide_threshold,
            "must be > 0 (degrees)",
        )

    if not -180.0 <= options.center.longitude <= 180.0:
        raise ConfigValidationError(
            "center.longitude",
            options.center.longitude,
            "must be between -180 and 180 (degrees)",
        )

    if not -90.0 <= options.center.latitude <= 90.0:
        raise ConfigValidationError(
            "center.latitude",
            options.center.latitude,
            "must be between -90 and 90 (degrees)",
        )

    if options.coordinate_precision is not None and options.coordinate_precision < 0:
        raise ConfigValidationError(
            "coordinate_precision",
            options.coordinate_precision,
            "must be >= 0 (decimal places)",
        )
