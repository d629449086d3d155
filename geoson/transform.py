"""Coordinate transform between GeoJSON positions and the local frame.

GeoJSON positions are ``[lon, lat, alt]`` (longitude first) while
``Datum`` and ``WGS`` are latitude first; the swap happens in
``LocalFrame.to_local`` and nowhere else.

For ``CRS.ENU`` documents positions are already local metres and pass
through unchanged.  For ``CRS.WGS`` documents each position is
converted to Earth-centred Earth-fixed coordinates with pyproj
(EPSG:4979 → EPSG:4978) and rotated into the East-North-Up tangent
plane at the datum.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from geoson.core.exceptions import GeoJsonValidationError
from geoson.models.geodesy import CRS, ENU, WGS, Datum
from geoson.models.geometry import Point

if TYPE_CHECKING:
    from pyproj import Transformer

logger = logging.getLogger("geoson.transform")

# Geographic 3D (lon, lat, ellipsoidal height) and geocentric WGS 84
GEOGRAPHIC_3D_CRS = "EPSG:4979"
GEOCENTRIC_CRS = "EPSG:4978"

# Minimum members of a position (lon, lat); altitude is optional
MIN_POSITION_LENGTH = 2


class LocalFrame:
    """Converts document positions into local ``Point`` values.

    One frame is built per import; it owns its pyproj transformer so no
    state is shared between calls.
    """

    def __init__(self, datum: Datum, crs: CRS = CRS.WGS) -> None:
        self.datum = datum
        self.crs = crs
        self._to_ecef: Transformer | None = None
        self._origin: tuple[float, float, float] | None = None

    def to_local(self, coords: object) -> Point:
        """Convert one GeoJSON position to a local ``Point``.

        Raises:
            GeoJsonValidationError: If the position is malformed.
        """
        x, y, z = position_to_floats(coords)
        if self.crs is CRS.ENU:
            return Point(x, y, z)
        enu = self.wgs_to_enu(WGS(lat=y, lon=x, alt=z))
        return Point(enu.x, enu.y, enu.z)

    def wgs_to_enu(self, wgs: WGS) -> ENU:
        """Project a geodetic position onto the tangent plane at the datum."""
        ox, oy, oz = self._datum_ecef()
        px, py, pz = self._ecef(wgs.lon, wgs.lat, wgs.alt)
        dx, dy, dz = px - ox, py - oy, pz - oz

        lat = math.radians(self.datum.lat)
        lon = math.radians(self.datum.lon)
        sin_lat, cos_lat = math.sin(lat), math.cos(lat)
        sin_lon, cos_lon = math.sin(lon), math.cos(lon)

        east = -sin_lon * dx + cos_lon * dy
        north = -sin_lat * cos_lon * dx - sin_lat * sin_lon * dy + cos_lat * dz
        up = cos_lat * cos_lon * dx + cos_lat * sin_lon * dy + sin_lat * dz
        return ENU(east, north, up)

    # -- internals ---------------------------------------------------------

    def _ecef(self, lon: float, lat: float, alt: float) -> tuple[float, float, float]:
        if self._to_ecef is None:
            from pyproj import Transformer

            self._to_ecef = Transformer.from_crs(
                GEOGRAPHIC_3D_CRS, GEOCENTRIC_CRS, always_xy=True
            )
            logger.debug(
                "Local frame created | datum=(%.8f, %.8f, %.3f)",
                self.datum.lat,
                self.datum.lon,
                self.datum.alt,
            )
        x, y, z = self._to_ecef.transform(lon, lat, alt)
        return (x, y, z)

    def _datum_ecef(self) -> tuple[float, float, float]:
        if self._origin is None:
            self._origin = self._ecef(self.datum.lon, self.datum.lat, self.datum.alt)
        return self._origin


def to_local(coords: object, datum: Datum, crs: CRS = CRS.WGS) -> Point:
    """Convert a single GeoJSON position with a throwaway ``LocalFrame``."""
    return LocalFrame(datum, crs).to_local(coords)


def position_to_floats(coords: object) -> tuple[float, float, float]:
    """Validate a GeoJSON position and return ``(x, y, z)``.

    A missing third member becomes ``0.0``; members beyond the third are
    ignored.

    Raises:
        GeoJsonValidationError: If the position is not an array of at
            least two numbers.
    """
    if not isinstance(coords, list | tuple):
        msg = f"Malformed position: expected an array, got {type(coords).__name__}"
        raise GeoJsonValidationError(msg)
    if len(coords) < MIN_POSITION_LENGTH:
        msg = f"Malformed position {coords!r}: expected at least 2 numbers, got {len(coords)}"
        raise GeoJsonValidationError(msg)

    members = coords[:3]
    for value in members:
        if isinstance(value, bool) or not isinstance(value, int | float):
            msg = f"Malformed position {coords!r}: {value!r} is not a number"
            raise GeoJsonValidationError(msg)

    try:
        x = float(members[0])
        y = float(members[1])
        z = float(members[2]) if len(members) > 2 else 0.0
    except OverflowError as exc:
        msg = f"Malformed position: a member is too large for a float ({exc})"
        raise GeoJsonValidationError(msg) from exc
    return (x, y, z)
