"""Feature and FeatureCollection — the in-memory result of an import.

A FeatureCollection is built once per read (or handed to the writer)
and never mutated afterwards.  Multi-geometries from the source document
have already been flattened: every ``Feature`` holds exactly one of the
four geometry shapes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from geoson.models.geodesy import CRS, Datum, Euler
from geoson.models.geometry import Geometry, Line, Path, Point, Polygon


@dataclass(frozen=True, slots=True)
class Feature:
    """One geometry plus its attributes.

    Attributes:
        geometry: The feature's shape in local coordinates.
        properties: Attribute name to text value.  Non-string source
            values have already been serialised to JSON text.
    """

    geometry: Geometry
    properties: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class FeatureCollection:
    """Root aggregate of an import or export.

    Attributes:
        crs: Coordinate system the source document was expressed in.
        datum: Origin of the local frame.
        heading: Collection orientation; only ``yaw`` is meaningful.
        features: Flattened features in document order.
        global_properties: Top-level properties other than ``crs``,
            ``datum`` and ``heading``.  Read on import, not written on
            export.
    """

    crs: CRS = CRS.WGS
    datum: Datum = field(default_factory=Datum)
    heading: Euler = field(default_factory=Euler)
    features: tuple[Feature, ...] = ()
    global_properties: dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.features)

    def __str__(self) -> str:
        return self.describe()

    def describe(self) -> str:
        """Return a short multi-line summary of the header and feature shapes."""
        lines = [
            f"DATUM: {self.datum.lat}, {self.datum.lon}, {self.datum.alt}",
            f"HEADING: {self.heading.yaw}",
            f"FEATURES: {len(self.features)}",
        ]
        for feature in self.features:
            lines.append(f"  {_shape_label(feature.geometry)}")
            if feature.properties:
                lines.append(f"    PROPS:{len(feature.properties)}")
        return "\n".join(lines) + "\n"


def _shape_label(geometry: Geometry) -> str:
    if isinstance(geometry, Polygon):
        return "POLYGON"
    if isinstance(geometry, Line):
        return "LINE"
    if isinstance(geometry, Path):
        return "PATH"
    if isinstance(geometry, Point):
        return "POINT"
    msg = f"Unsupported geometry: {type(geometry).__name__}"
    raise TypeError(msg)
