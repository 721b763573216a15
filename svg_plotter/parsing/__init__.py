"""SVG input parsing.

- **svg_document**: markup to ``SVGNode`` tree (lxml), artboard metadata
- **path_data**: ``d`` attribute to absolute path commands
"""
