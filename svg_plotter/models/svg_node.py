"""Data model for a parsed SVG document.

An ``SVGNode`` is one element of the already-parsed markup tree: its
local tag name, its attributes in document order, and its child
elements.  The tree is read-only input; the converter never mutates or
clones it.

``SVGMetaData`` is the artboard (origin and size in SVG user units)
derived once from the root element.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class SVGNode:
    """A single SVG element.

    Attributes:
        name: Local tag name without namespace (e.g. ``"rect"``).
        attributes: Attribute values keyed by local attribute name, in
            document order.
        children: Child elements in document order.
    """

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple[SVGNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return an attribute value, matching the name case-insensitively.

        An exact match wins over a case-insensitive one, so ``viewBox``
        and ``viewbox`` both resolve.
        """
        if key in self.attributes:
            return self.attributes[key]
        lowered = key.lower()
        for name, value in self.attributes.items():
            if name.lower() == lowered:
                return value
        return default

    def to_dict(self) -> dict[str, object]:
        """Serialise the subtree to plain dicts (``name``/``attributes``/``children``)."""
        return {
            "name": self.name,
            "attributes": dict(self.attributes),
            "children": [child.to_dict() for child in self.children],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> SVGNode:
        """Deserialise a subtree produced by ``to_dict()`` or an svgson-style parser.

        Raises:
            TypeError: If field values have unexpected types.
        """
        attributes_raw = data.get("attributes", {})
        if not isinstance(attributes_raw, dict):
            msg = f"attributes must be a dict, got {type(attributes_raw).__name__}"
            raise TypeError(msg)
        children_raw = data.get("children", [])
        if not isinstance(children_raw, list):
            msg = f"children must be a list, got {type(children_raw).__name__}"
            raise TypeError(msg)
        return cls(
            name=str(data.get("name", "")),
            attributes={str(k): str(v) for k, v in attributes_raw.items()},
            children=tuple(cls.from_dict(child) for child in children_raw),
        )


@dataclass(frozen=True, slots=True)
class SVGMetaData:
    """The artboard: origin and size in SVG user units.

    Attributes:
        x: Left edge of the artboard.
        y: Top edge of the artboard.
        width: Artboard width (always > 0).
        height: Artboard height (always > 0).
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def aspect(self) -> float:
        """Width divided by height."""
        return self.width / self.height
