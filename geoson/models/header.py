"""Pydantic model for the top-level ``properties`` of a GeoJSON document.

``crs``, ``datum`` and ``heading`` are required and strictly typed.
Any other key is kept as an extra field and later becomes a global
attribute of the FeatureCollection.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator

# Number of leading datum members used (lat, lon, alt)
DATUM_LENGTH = 3


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _to_float(value: float) -> float:
    # JSON integers are unbounded; pydantic only reports ValueError
    try:
        return float(value)
    except OverflowError as exc:
        msg = "number is too large for a float"
        raise ValueError(msg) from exc


class CollectionProperties(BaseModel):
    """Validated collection header.

    Attributes:
        crs: CRS alias string (resolved separately).
        datum: ``[lat, lon, alt]`` — the first three members of the source array.
        heading: Yaw in degrees.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    crs: StrictStr
    datum: list[float]
    heading: float

    @field_validator("datum", mode="before")
    @classmethod
    def _check_datum(cls, value: object) -> list[float]:
        if not isinstance(value, list):
            msg = f"must be an array of at least {DATUM_LENGTH} numbers"
            raise ValueError(msg)  # noqa: TRY004
        if len(value) < DATUM_LENGTH:
            msg = f"must have at least {DATUM_LENGTH} numbers, got {len(value)}"
            raise ValueError(msg)
        head = value[:DATUM_LENGTH]
        if not all(_is_number(v) for v in head):
            msg = f"first {DATUM_LENGTH} members must be numbers, got {head!r}"
            raise ValueError(msg)
        return [_to_float(v) for v in head]

    @field_validator("heading", mode="before")
    @classmethod
    def _check_heading(cls, value: object) -> float:
        if not _is_number(value):
            msg = f"must be a number, got {type(value).__name__}"
            raise ValueError(msg)
        return _to_float(value)  # type: ignore[arg-type]

    @property
    def extras(self) -> dict[str, object]:
        """Top-level properties other than ``crs``, ``datum`` and ``heading``."""
        return dict(self.model_extra or {})
