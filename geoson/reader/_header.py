"""Validation of the collection header (``properties.crs/datum/heading``)."""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from geoson.core.constants import CRS_ALIASES
from geoson.core.exceptions import GeoJsonValidationError, UnknownCRSError
from geoson.models.geodesy import CRS, Datum, Euler, ModelValidationError
from geoson.models.header import CollectionProperties


def parse_header(properties: object) -> CollectionProperties:
    """Validate the top-level ``properties`` object.

    Raises:
        GeoJsonValidationError: If ``properties`` is missing or not an
            object, or if ``crs``, ``datum`` or ``heading`` is missing or
            has the wrong type.  The message names the offending field.
    """
    if not isinstance(properties, dict):
        msg = "Missing top-level 'properties' object"
        raise GeoJsonValidationError(msg)

    try:
        return CollectionProperties.model_validate(properties)
    except PydanticValidationError as exc:
        raise GeoJsonValidationError(_describe_first_error(exc)) from exc


def parse_crs(text: str) -> CRS:
    """Resolve a ``properties.crs`` alias.

    Raises:
        UnknownCRSError: If ``text`` is not one of the accepted aliases.
    """
    try:
        return CRS_ALIASES[text]
    except KeyError:
        accepted = ", ".join(sorted(CRS_ALIASES))
        msg = f"Unknown CRS string in 'properties.crs': {text!r} (accepted: {accepted})"
        raise UnknownCRSError(msg) from None


def build_datum(header: CollectionProperties, crs: CRS) -> Datum:
    """Build the datum from ``[lat, lon, alt]``.

    Only a WGS 84 document projects through its datum, so only then are
    latitude and longitude range-checked.

    Raises:
        GeoJsonValidationError: If a WGS 84 datum is out of range.
    """
    lat, lon, alt = header.datum
    datum = Datum(lat=lat, lon=lon, alt=alt)
    if crs is not CRS.WGS:
        return datum
    try:
        datum.check_geodetic()
    except ModelValidationError as exc:
        msg = f"Invalid 'properties.datum': {exc}"
        raise GeoJsonValidationError(msg) from exc
    return datum


def build_heading(header: CollectionProperties) -> Euler:
    """Heading keeps yaw only; roll and pitch are zero."""
    return Euler(roll=0.0, pitch=0.0, yaw=header.heading)


def _describe_first_error(exc: PydanticValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
    if error.get("type") == "missing":
        return f"'properties' missing required field '{field}'"
    detail = str(error.get("msg", "invalid value")).removeprefix("Value error, ")
    return f"Invalid 'properties.{field}': {detail}"
