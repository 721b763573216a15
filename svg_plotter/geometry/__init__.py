"""Planar and geographic geometry.

- **curves**: parametric curve evaluators and adaptive flattening
- **transforms**: SVG ``transform`` lists as affine matrices (svgelements)
- **projection**: SVG user space to longitude / latitude (pyproj)
- **geodesy**: great-circle distance and offsets on a sphere (pyproj)
- **composite**: nesting closed rings into polygons with holes (shapely)
"""
