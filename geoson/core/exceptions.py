"""Unified exception taxonomy.

Every domain exception inherits from ``GeosonError`` and carries
structured context fields so callers can tell an unreadable file from a
malformed document without parsing messages.

Taxonomy categories
-------------------
- ``ValidationError``  — the input document violates the format.
- ``PermanentError``   — unrecoverable failures such as I/O errors.

Nothing in geoson is retried; the category only tells the caller whether
the input or the environment is at fault.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class GeosonError(Exception):
    """Base exception for all geoson errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred (``"read"``, ``"write"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"GEOJSON_PARSE_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(self, message: str = "", *, stage: str = "", code: str = "") -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeosonError):
    """Input or domain-model validation failure."""


class PermanentError(GeosonError):
    """Unrecoverable failure outside the document itself."""


# ---------------------------------------------------------------------------
# Reader / writer errors
# ---------------------------------------------------------------------------


class GeoJsonReadError(PermanentError):
    """Raised when a GeoJSON source file cannot be opened or read."""

    default_stage = "read"
    default_code = "GEOJSON_READ_FAILED"


class GeoJsonParseError(ValidationError):
    """Raised when a source file is not a usable JSON document."""

    default_stage = "read"
    default_code = "GEOJSON_PARSE_FAILED"


class GeoJsonValidationError(GeoJsonParseError):
    """Raised when a JSON document is missing or mistypes a required field."""

    default_code = "GEOJSON_VALIDATION_FAILED"


class UnknownCRSError(GeoJsonValidationError):
    """Raised when ``properties.crs`` is not a recognised alias."""

    default_code = "GEOJSON_CRS_UNKNOWN"


class GeoJsonWriteError(PermanentError):
    """Raised when a FeatureCollection cannot be written to disk."""

    default_stage = "write"
    default_code = "GEOJSON_WRITE_FAILED"
