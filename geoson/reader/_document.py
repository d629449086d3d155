"""Loading and shape-normalising the raw JSON document.

Three top-level shapes are accepted and all become a FeatureCollection
dict:

- ``FeatureCollection`` — used as-is.
- ``Feature`` — wrapped as a one-feature collection.
- any other ``type`` — treated as a bare geometry and wrapped as a
  one-feature collection with no attributes.

When wrapping, the wrapped object's own ``properties`` member is lifted
to the collection so the ``crs``/``datum``/``heading`` header stays
reachable.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from geoson.core.constants import (
    DEFAULT_ENCODING,
    RESERVED_PROPERTY_KEYS,
    TYPE_FEATURE,
    TYPE_FEATURE_COLLECTION,
)
from geoson.core.exceptions import GeoJsonParseError, GeoJsonReadError, GeoJsonValidationError

if TYPE_CHECKING:
    from pathlib import Path


def load_document(path: Path, *, encoding: str = DEFAULT_ENCODING) -> dict[str, Any]:
    """Read ``path`` and return it normalised to a FeatureCollection dict.

    Raises:
        GeoJsonReadError: If the file cannot be opened or decoded.
        GeoJsonParseError: If the file is not valid JSON.
        GeoJsonValidationError: If the top level is not an object with a
            string ``type``.
    """
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read GeoJSON file '{path}': {exc}"
        raise GeoJsonReadError(msg) from exc

    try:
        document = json.loads(text)
    except ValueError as exc:
        # JSONDecodeError, or an integer literal past the int conversion limit
        msg = f"'{path.name}' is not valid JSON: {exc}"
        raise GeoJsonParseError(msg) from exc

    return normalize_document(document)


def normalize_document(document: object) -> dict[str, Any]:
    """Wrap a Feature or bare geometry into a FeatureCollection dict.

    Raises:
        GeoJsonValidationError: If ``document`` has no string ``type``.
    """
    if not isinstance(document, dict) or not isinstance(document.get("type"), str):
        msg = "Top-level object has no string 'type' field"
        raise GeoJsonValidationError(msg)

    doc_type = document["type"]
    if doc_type == TYPE_FEATURE_COLLECTION:
        return document

    if doc_type == TYPE_FEATURE:
        props = document.get("properties")
        feature = dict(document)
        if isinstance(props, dict):
            feature["properties"] = {
                k: v for k, v in props.items() if k not in RESERVED_PROPERTY_KEYS
            }
        return _collection([feature], props)

    # Bare geometry
    feature = {"type": TYPE_FEATURE, "geometry": document, "properties": {}}
    return _collection([feature], document.get("properties"))


def _collection(features: list[dict[str, Any]], properties: object) -> dict[str, Any]:
    collection: dict[str, Any] = {"type": TYPE_FEATURE_COLLECTION, "features": features}
    if properties is not None:
        collection["properties"] = properties
    return collection
