"""Data models and schemas.

Defines the data structures used by the reader and writer:
- Point, Line, Path, Polygon: The four geometry shapes (local metres)
- Feature, FeatureCollection: Imported/exported aggregates
- CRS, Datum, Euler, WGS, ENU: Geodesy value types
- CollectionProperties: Pydantic model for the document header
"""

from geoson.models.collection import Feature, FeatureCollection
from geoson.models.geodesy import CRS, ENU, WGS, Datum, Euler, ModelValidationError
from geoson.models.geometry import Geometry, Line, Path, Point, Polygon
from geoson.models.header import CollectionProperties

__all__ = [
    "CRS",
    "ENU",
    "WGS",
    "CollectionProperties",
    "Datum",
    "Euler",
    "Feature",
    "FeatureCollection",
    "Geometry",
    "Line",
    "ModelValidationError",
    "Path",
    "Point",
    "Polygon",
]
