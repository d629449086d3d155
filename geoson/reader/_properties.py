"""Attribute coercion for feature and collection properties.

Every attribute value is stored as text: JSON strings pass through,
everything else (numbers, booleans, null, objects, arrays) is written
as compact JSON.
"""

from __future__ import annotations

import json

from geoson.core.exceptions import GeoJsonValidationError


def value_to_text(value: object) -> str:
    """Return ``value`` verbatim if it is a string, else its compact JSON text."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def parse_properties(props: object) -> dict[str, str]:
    """Coerce a GeoJSON ``properties`` member into a text-valued dict.

    ``None`` (JSON null or a missing member) yields an empty dict.

    Raises:
        GeoJsonValidationError: If ``props`` is neither null nor an object.
    """
    if props is None:
        return {}
    if not isinstance(props, dict):
        msg = f"Feature 'properties' must be an object or null, got {type(props).__name__}"
        raise GeoJsonValidationError(msg)
    return {str(key): value_to_text(value) for key, value in props.items()}
