"""Group the closed rings of one ``<path>`` into polygons with holes.

A compound path such as the letter "O" is drawn as two rings; as
separate Polygons the hole would be filled.  Rings are nested by
containment (even-odd): a ring inside an odd number of other rings is a
hole of the smallest shell that contains it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svg_plotter.models.contracts import Geometry, Position

logger = logging.getLogger("svg_plotter.geometry.composite")

# 3 distinct positions + closure
MIN_RING_POSITIONS = 4


def group_rings(rings: list[list[Position]]) -> list[Geometry]:
    """Return the geometry for a set of closed rings.

    Returns:
        A single ``Polygon`` when every hole belongs to one shell, a single
        ``MultiPolygon`` when there are several shells, or one ``Polygon``
        per ring when a ring is too short to test for containment.
    """
    if not rings:
        return []
    if any(len(ring) < MIN_RING_POSITIONS for ring in rings):
        logger.debug("Degenerate ring present, emitting %d separate polygon(s)", len(rings))
        return [{"type": "Polygon", "coordinates": [ring]} for ring in rings]

    from shapely.geometry import Polygon

    shapes = [Polygon(ring) for ring in rings]
    order = sorted(range(len(rings)), key=lambda i: abs(shapes[i].area), reverse=True)

    # index of shell -> indices of its holes
    groups: dict[int, list[int]] = {}
    depth: dict[int, int] = {}
    parent: dict[int, int | None] = {}
    for position, index in enumerate(order):
        probe = shapes[index].representative_point()
        containers = [
            other
            for other in order[:position]
            if shapes[other].area and shapes[other].contains(probe)
        ]
        depth[index] = len(containers)
        # containers are sorted largest first, so the last one is innermost
        parent[index] = containers[-1] if containers else None
        if depth[index] % 2 == 0:
            groups[index] = []
        else:
            shell = parent[index]
            while shell is not None and depth[shell] % 2 == 1:
                shell = parent[shell]
            if shell is None:
                groups[index] = []
            else:
                groups[shell].append(index)

    polygons = [
        [rings[shell], *(rings[hole] for hole in holes)]
        for shell, holes in sorted(groups.items())
    ]
    logger.debug("Grouped %d ring(s) into %d polygon(s)", len(rings), len(polygons))
    if len(polygons) == 1:
        return [{"type": "Polygon", "coordinates": polygons[0]}]
    return [{"type": "MultiPolygon", "coordinates": polygons}]
