"""Core utilities and shared infrastructure.

- config: Conversion options loading and validation
- constants: Sphere model, projection identifiers, defaults, tag names
- exceptions: Custom exception hierarchy
"""
