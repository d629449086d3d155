"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: CRS aliases, reserved property keys, GeoJSON type names
- exceptions: Custom exception hierarchy
"""
