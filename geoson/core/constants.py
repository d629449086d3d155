"""Shared constants — single source of truth for format literals.

Centralises the CRS alias table, the reserved collection property keys
and the GeoJSON type names used by both the reader and the writer.
"""

from __future__ import annotations

from geoson.models.geodesy import CRS

# ---------------------------------------------------------------------------
# Coordinate reference systems
# ---------------------------------------------------------------------------

CRS_ALIASES: dict[str, CRS] = {
    "EPSG:4326": CRS.WGS,
    "WGS84": CRS.WGS,
    "WGS": CRS.WGS,
    "ENU": CRS.ENU,
    "ECEF": CRS.ENU,
}
"""Accepted ``properties.crs`` strings on import."""

CANONICAL_CRS_NAMES: dict[CRS, str] = {
    CRS.WGS: "EPSG:4326",
    CRS.ENU: "ENU",
}
"""The single string written back for each CRS on export."""

# ---------------------------------------------------------------------------
# Collection properties
# ---------------------------------------------------------------------------

PROP_CRS = "crs"
PROP_DATUM = "datum"
PROP_HEADING = "heading"

RESERVED_PROPERTY_KEYS = frozenset({PROP_CRS, PROP_DATUM, PROP_HEADING})
"""Top-level properties that are never treated as global attributes."""

# ---------------------------------------------------------------------------
# GeoJSON type names
# ---------------------------------------------------------------------------

TYPE_FEATURE_COLLECTION = "FeatureCollection"
TYPE_FEATURE = "Feature"
TYPE_POINT = "Point"
TYPE_LINE_STRING = "LineString"
TYPE_POLYGON = "Polygon"
TYPE_MULTI_POINT = "MultiPoint"
TYPE_MULTI_LINE_STRING = "MultiLineString"
TYPE_MULTI_POLYGON = "MultiPolygon"
TYPE_GEOMETRY_COLLECTION = "GeometryCollection"

# Coordinate count that makes a LineString a Line rather than a Path
LINE_POINT_COUNT = 2

# ---------------------------------------------------------------------------
# Serialization defaults
# ---------------------------------------------------------------------------

DEFAULT_JSON_INDENT = 2
DEFAULT_ENCODING = "utf-8"
