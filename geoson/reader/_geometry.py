"""Classification of GeoJSON geometry objects into the four shapes.

One GeoJSON geometry can expand into several shapes (Multi* types and
GeometryCollection); each becomes its own Feature downstream.

Classification rules:
- ``Point`` → Point
- ``LineString`` → Line when it has exactly two positions, else Path
- ``Polygon`` → Polygon from the first (outer) ring; other rings dropped
- ``MultiPoint`` / ``MultiLineString`` / ``MultiPolygon`` → one shape per member
- ``GeometryCollection`` → members classified recursively and flattened
- anything else → no shapes (ignored, not an error)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from geoson.core.constants import (
    LINE_POINT_COUNT,
    TYPE_GEOMETRY_COLLECTION,
    TYPE_LINE_STRING,
    TYPE_MULTI_LINE_STRING,
    TYPE_MULTI_POINT,
    TYPE_MULTI_POLYGON,
    TYPE_POINT,
    TYPE_POLYGON,
)
from geoson.core.exceptions import GeoJsonValidationError
from geoson.models.geometry import Line, Path, Polygon

if TYPE_CHECKING:
    from geoson.models.geometry import Geometry, Point
    from geoson.transform import LocalFrame

logger = logging.getLogger("geoson.reader")


def parse_point(coords: object, frame: LocalFrame) -> Point:
    """Convert one position into a local Point."""
    return frame.to_local(coords)


def parse_line_string(coords: object, frame: LocalFrame) -> Line | Path:
    """Convert a LineString coordinate array into a Line (2 points) or Path."""
    points = tuple(frame.to_local(c) for c in _array(coords, f"{TYPE_LINE_STRING} coordinates"))
    if len(points) == LINE_POINT_COUNT:
        return Line(points[0], points[1])
    return Path(points)


def parse_polygon(coords: object, frame: LocalFrame) -> Polygon:
    """Convert a Polygon coordinate array using its outer ring only."""
    rings = _array(coords, f"{TYPE_POLYGON} coordinates")
    if not rings:
        return Polygon()
    outer = _array(rings[0], f"{TYPE_POLYGON} ring")
    return Polygon(tuple(frame.to_local(c) for c in outer))


def parse_geometry(geom: object, frame: LocalFrame) -> list[Geometry]:
    """Classify a GeoJSON geometry object into zero or more shapes.

    Raises:
        GeoJsonValidationError: If the object has no string ``type`` or
            lacks the member its type requires.
    """
    if not isinstance(geom, dict) or not isinstance(geom.get("type"), str):
        msg = "Geometry object has no string 'type' field"
        raise GeoJsonValidationError(msg)

    geom_type = geom["type"]
    out: list[Geometry] = []

    if geom_type == TYPE_POINT:
        out.append(parse_point(_member(geom, "coordinates"), frame))
    elif geom_type == TYPE_LINE_STRING:
        out.append(parse_line_string(_member(geom, "coordinates"), frame))
    elif geom_type == TYPE_POLYGON:
        out.append(parse_polygon(_member(geom, "coordinates"), frame))
    elif geom_type == TYPE_MULTI_POINT:
        for coords in _array(_member(geom, "coordinates"), f"{geom_type} coordinates"):
            out.append(parse_point(coords, frame))
    elif geom_type == TYPE_MULTI_LINE_STRING:
        for coords in _array(_member(geom, "coordinates"), f"{geom_type} coordinates"):
            out.append(parse_line_string(coords, frame))
    elif geom_type == TYPE_MULTI_POLYGON:
        for coords in _array(_member(geom, "coordinates"), f"{geom_type} coordinates"):
            out.append(parse_polygon(coords, frame))
    elif geom_type == TYPE_GEOMETRY_COLLECTION:
        for sub in _array(_member(geom, "geometries"), f"{geom_type} geometries"):
            out.extend(parse_geometry(sub, frame))
    else:
        logger.debug("Ignoring unsupported geometry type %r", geom_type)

    return out


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _member(geom: dict[str, Any], key: str) -> object:
    if key not in geom:
        msg = f"{geom['type']} geometry is missing '{key}'"
        raise GeoJsonValidationError(msg)
    return geom[key]


def _array(value: object, what: str) -> list[Any]:
    if not isinstance(value, list):
        msg = f"{what} must be an array, got {type(value).__name__}"
        raise GeoJsonValidationError(msg)
    return value
