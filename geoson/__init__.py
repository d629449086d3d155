"""GeoJSON import/export for local-frame geometry models.

Reads GeoJSON-style documents in WGS 84 or local East-North-Up
coordinates into a FeatureCollection of Point/Line/Path/Polygon
features (projected onto a tangent plane at the collection datum),
and writes such collections back out as GeoJSON.
"""

__version__ = "0.1.0"
