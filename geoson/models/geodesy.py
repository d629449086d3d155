"""Geodesy value types shared by the reader, writer and transform.

- ``CRS``: Which coordinate system a document's positions are in
- ``Datum``: Origin of the local East-North-Up frame
- ``Euler``: Orientation of the collection (only yaw is populated)
- ``WGS``: A geodetic position, latitude first
- ``ENU``: A local position in metres

Design notes:
- All models are frozen dataclasses for immutability.
- ``Datum`` and ``WGS`` take latitude first; GeoJSON positions are
  longitude first, so callers swap axes when constructing them.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from geoson.core.exceptions import GeosonError, ValidationError

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ModelValidationError(ValueError, ValidationError):
    """Raised when a domain model is constructed with invalid field values.

    Attributes:
        model: Name of the model class that failed validation.
        field_name: The field that violated the invariant.
        value: The invalid value.
    """

    default_stage = "model_validation"
    default_code = "MODEL_VALIDATION_FAILED"

    def __init__(self, model: str, field_name: str, value: object, message: str) -> None:
        self.model = model
        self.field_name = field_name
        self.value = value
        formatted = f"{model}.{field_name}={value!r}: {message}"
        GeosonError.__init__(self, formatted)


def _check_range(model: str, name: str, value: float, lo: float, hi: float) -> None:
    if not lo <= value <= hi:
        raise ModelValidationError(model, name, value, f"must be between {lo} and {hi}")


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class CRS(enum.Enum):
    """Coordinate system of the positions in a document.

    Values:
        WGS: Geodetic longitude/latitude/altitude on WGS 84.
        ENU: Local East-North-Up metres relative to the datum.
    """

    WGS = "WGS"
    ENU = "ENU"


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Datum:
    """Reference point anchoring the local frame.

    Any numbers are accepted; an ENU document never projects through its
    datum.  ``check_geodetic`` enforces degree ranges where it does.

    Attributes:
        lat: Latitude in degrees.
        lon: Longitude in degrees.
        alt: Ellipsoidal height in metres.
    """

    lat: float = 0.0
    lon: float = 0.0
    alt: float = 0.0

    def check_geodetic(self) -> None:
        """Raise ``ModelValidationError`` unless lat/lon are valid WGS 84 degrees."""
        _check_range("Datum", "lat", self.lat, MIN_LATITUDE, MAX_LATITUDE)
        _check_range("Datum", "lon", self.lon, MIN_LONGITUDE, MAX_LONGITUDE)


@dataclass(frozen=True, slots=True)
class Euler:
    """Orientation angles in degrees."""

    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0


@dataclass(frozen=True, slots=True)
class WGS:
    """Geodetic position (latitude, longitude in degrees; altitude in metres)."""

    lat: float
    lon: float
    alt: float = 0.0


@dataclass(frozen=True, slots=True)
class ENU:
    """Local tangent-plane position in metres (+x east, +y north, +z up)."""

    x: float
    y: float
    z: float = 0.0
