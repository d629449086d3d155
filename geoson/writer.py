"""GeoJSON writer — serialise a FeatureCollection to disk.

Output layout::

    {
      "type": "FeatureCollection",
      "properties": {"crs": "EPSG:4326" | "ENU", "datum": [lat, lon, alt], "heading": yaw},
      "features": [{"type": "Feature", "properties": {...}, "geometry": {...}}, ...]
    }

Two deliberate asymmetries with the reader:
- ``global_properties`` are not written; only ``crs``, ``datum`` and
  ``heading`` appear at the top level.
- Coordinates are written as stored, in local metres
  (``[x, y, z]`` in the ``[lon, lat, alt]`` slots).  No inverse
  projection back to WGS 84 is applied, whatever the ``crs``.

Files are written atomically by default: the document is serialised to
a temporary file next to the destination and renamed over it only after
the write succeeded.  A symlinked destination is resolved first so the
link survives and its target is updated, and the output keeps the
existing file's permission bits (or gets ``0o666 & ~umask`` when new),
as a direct open would.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Any, assert_never

from geoson.core.config import GeosonConfig
from geoson.core.constants import (
    CANONICAL_CRS_NAMES,
    PROP_CRS,
    PROP_DATUM,
    PROP_HEADING,
    TYPE_FEATURE,
    TYPE_FEATURE_COLLECTION,
    TYPE_LINE_STRING,
    TYPE_POINT,
    TYPE_POLYGON,
)
from geoson.core.exceptions import GeoJsonWriteError
from geoson.models.geometry import Line, Path as PathGeometry, Point, Polygon

if TYPE_CHECKING:
    from geoson.models.collection import Feature, FeatureCollection
    from geoson.models.geodesy import CRS
    from geoson.models.geometry import Geometry

logger = logging.getLogger("geoson.writer")


# ---------------------------------------------------------------------------
# Document tree
# ---------------------------------------------------------------------------


def crs_to_string(crs: CRS) -> str:
    """Return the canonical ``properties.crs`` string for ``crs``."""
    return CANONICAL_CRS_NAMES[crs]


def geometry_to_json(geometry: Geometry) -> dict[str, Any]:
    """Turn a single geometry into its GeoJSON object."""
    if isinstance(geometry, Point):
        return {"type": TYPE_POINT, "coordinates": _coords(geometry)}
    if isinstance(geometry, Line):
        return {
            "type": TYPE_LINE_STRING,
            "coordinates": [_coords(geometry.start), _coords(geometry.end)],
        }
    if isinstance(geometry, PathGeometry):
        return {"type": TYPE_LINE_STRING, "coordinates": [_coords(p) for p in geometry.points]}
    if isinstance(geometry, Polygon):
        return {"type": TYPE_POLYGON, "coordinates": [[_coords(p) for p in geometry.points]]}
    assert_never(geometry)


def feature_to_json(feature: Feature) -> dict[str, Any]:
    """Turn one Feature into its GeoJSON object."""
    return {
        "type": TYPE_FEATURE,
        "properties": dict(feature.properties),
        "geometry": geometry_to_json(feature.geometry),
    }


def to_json(collection: FeatureCollection) -> dict[str, Any]:
    """Build the GeoJSON document tree for a FeatureCollection."""
    return {
        "type": TYPE_FEATURE_COLLECTION,
        "properties": {
            PROP_CRS: crs_to_string(collection.crs),
            PROP_DATUM: [collection.datum.lat, collection.datum.lon, collection.datum.alt],
            PROP_HEADING: collection.heading.yaw,
        },
        "features": [feature_to_json(f) for f in collection.features],
    }


def dumps(collection: FeatureCollection, *, indent: int = 2) -> str:
    """Serialise a FeatureCollection to pretty-printed GeoJSON text (with trailing newline).

    Raises:
        ValueError: If a coordinate, datum member or heading is NaN or
            infinite; JSON has no token for those.
    """
    text = json.dumps(to_json(collection), indent=indent, ensure_ascii=False, allow_nan=False)
    return text + "\n"


# ---------------------------------------------------------------------------
# File output
# ---------------------------------------------------------------------------


def write_feature_collection(
    collection: FeatureCollection,
    path: Path | str,
    *,
    config: GeosonConfig | None = None,
) -> Path:
    """Write a FeatureCollection to ``path`` as GeoJSON.

    Args:
        collection: The collection to write.
        path: Destination file path (str or pathlib.Path).
        config: Writer configuration (defaults to ``GeosonConfig()``).

    Returns:
        The destination path.

    Raises:
        GeoJsonWriteError: If the destination cannot be written.  With
            ``config.atomic_writes`` enabled (the default) the destination
            is left untouched on failure.
    """
    config = config or GeosonConfig()
    path = Path(path)

    try:
        text = dumps(collection, indent=config.indent)
    except (TypeError, ValueError) as exc:
        msg = f"Cannot serialise FeatureCollection for '{path}': {exc}"
        raise GeoJsonWriteError(msg) from exc

    if config.atomic_writes:
        _write_atomic(path, text, config.encoding)
    else:
        _write_in_place(path, text, config.encoding)

    logger.info(
        "Wrote %d feature(s) to %s | crs=%s",
        len(collection.features),
        path.name,
        crs_to_string(collection.crs),
    )
    return path


def _write_atomic(path: Path, text: str, encoding: str) -> None:
    # A symlinked destination is written through, not replaced
    try:
        target = path.resolve()
        mode = _output_mode(target)
    except (OSError, RuntimeError) as exc:
        msg = f"Cannot open for write: {path}: {exc}"
        raise GeoJsonWriteError(msg) from exc

    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            try:
                tmp.write(text)
                tmp.flush()
                os.fsync(tmp.fileno())
                os.chmod(tmp.name, mode)
            except BaseException:
                tmp.close()
                tmp_path.unlink(missing_ok=True)
                raise
    except (OSError, UnicodeEncodeError) as exc:
        msg = f"Cannot open for write: {path}: {exc}"
        raise GeoJsonWriteError(msg) from exc

    try:
        os.replace(tmp_path, target)
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        msg = f"Cannot replace {path}: {exc}"
        raise GeoJsonWriteError(msg) from exc


def _output_mode(target: Path) -> int:
    """Permission bits for the output: the existing file's, else ``0o666 & ~umask``."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_in_place(path: Path, text: str, encoding: str) -> None:
    try:
        path.write_text(text, encoding=encoding)
    except (OSError, UnicodeEncodeError) as exc:
        msg = f"Cannot open for write: {path}: {exc}"
        raise GeoJsonWriteError(msg) from exc


def _coords(point: Point) -> list[float]:
    return [point.x, point.y, point.z]
