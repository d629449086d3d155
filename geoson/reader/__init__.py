"""GeoJSON reader — composable import pipeline.

Reads a GeoJSON file and builds a FeatureCollection of local-frame
Point/Line/Path/Polygon features.

The pipeline is split into focused stages:
- **_document**: read the file, parse JSON, wrap Feature / bare geometry
- **_header**: validate ``properties.crs/datum/heading``, resolve the CRS
- **_geometry**: classify geometry objects into the four shapes
- **_properties**: coerce attribute values to text

Tolerated input (skipped, never raised):
- Features whose ``geometry`` is null or absent
- Geometry types other than the seven GeoJSON types

Everything else that is malformed raises before a FeatureCollection is
returned; there is no partial result.
"""

from __future__ import annotations

import logging
from pathlib import Path

from geoson.core.config import GeosonConfig
from geoson.core.exceptions import GeoJsonValidationError
from geoson.models.collection import Feature, FeatureCollection
from geoson.reader._document import load_document, normalize_document
from geoson.reader._geometry import (
    parse_geometry,
    parse_line_string,
    parse_point,
    parse_polygon,
)
from geoson.reader._header import build_datum, build_heading, parse_crs, parse_header
from geoson.reader._properties import parse_properties, value_to_text
from geoson.transform import LocalFrame

logger = logging.getLogger("geoson.reader")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "build_datum",
    "build_heading",
    "load_document",
    "normalize_document",
    "parse_crs",
    "parse_feature_collection",
    "parse_geometry",
    "parse_header",
    "parse_line_string",
    "parse_point",
    "parse_polygon",
    "parse_properties",
    "read_feature_collection",
    "value_to_text",
]


def read_feature_collection(
    path: Path | str, *, config: GeosonConfig | None = None
) -> FeatureCollection:
    """Read a GeoJSON file into a FeatureCollection.

    Args:
        path: Filesystem path to the GeoJSON file (str or pathlib.Path).
        config: Reader configuration (defaults to ``GeosonConfig()``).

    Returns:
        A FeatureCollection whose geometries are in local ENU metres.

    Raises:
        GeoJsonReadError: If the file cannot be read.
        GeoJsonParseError: If the file is not valid JSON.
        GeoJsonValidationError: If required fields are missing or malformed.
        UnknownCRSError: If ``properties.crs`` is not a recognised alias.
    """
    config = config or GeosonConfig()
    path = Path(path)

    logger.info("Reading GeoJSON file: %s", path.name)
    document = load_document(path, encoding=config.encoding)
    collection = parse_feature_collection(document)

    logger.info(
        "Read %d feature(s) from %s | crs=%s | datum=(%.6f, %.6f, %.2f)",
        len(collection.features),
        path.name,
        collection.crs.value,
        collection.datum.lat,
        collection.datum.lon,
        collection.datum.alt,
    )
    return collection


def parse_feature_collection(document: object) -> FeatureCollection:
    """Build a FeatureCollection from an already-parsed JSON document.

    ``document`` may be a FeatureCollection, a Feature or a bare geometry.
    """
    doc = normalize_document(document)

    # Step 1: header
    header = parse_header(doc.get("properties"))
    crs = parse_crs(header.crs)
    datum = build_datum(header, crs)
    heading = build_heading(header)
    global_properties = {key: value_to_text(value) for key, value in header.extras.items()}

    # Step 2: features
    raw_features = doc.get("features")
    if raw_features is None:
        raw_features = []
    if not isinstance(raw_features, list):
        msg = f"Top-level 'features' must be an array, got {type(raw_features).__name__}"
        raise GeoJsonValidationError(msg)

    frame = LocalFrame(datum, crs)
    features: list[Feature] = []
    for idx, raw in enumerate(raw_features):
        if not isinstance(raw, dict):
            msg = f"Feature at index {idx} must be an object, got {type(raw).__name__}"
            raise GeoJsonValidationError(msg)

        geometry = raw.get("geometry")
        if geometry is None:
            logger.debug("Skipping feature %d with null geometry", idx)
            continue

        props = parse_properties(raw.get("properties"))
        for shape in parse_geometry(geometry, frame):
            features.append(Feature(geometry=shape, properties=dict(props)))

    return FeatureCollection(
        crs=crs,
        datum=datum,
        heading=heading,
        features=tuple(features),
        global_properties=global_properties,
    )
