"""Reader/writer configuration loaded from environment variables.

All values have defaults suitable for local use, so ``GeosonConfig()``
works without any environment set up.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range.  This catches bad configuration before a file is
    touched.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

from geoson.core.constants import DEFAULT_ENCODING, DEFAULT_JSON_INDENT
from geoson.core.exceptions import GeosonError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ConfigValidationError(GeosonError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        self.message = message
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class GeosonConfig:
    """Immutable reader/writer configuration.

    Attributes:
        indent: Indent width used when writing GeoJSON.
        encoding: Text encoding for reading and writing files.
        atomic_writes: Write through a temporary file and rename it over
            the destination only once serialization succeeded.  When
            disabled the destination is written in place and a failure
            mid-write can leave a partial file behind.
    """

    indent: int = DEFAULT_JSON_INDENT
    encoding: str = DEFAULT_ENCODING
    atomic_writes: bool = True

    @classmethod
    def from_env(cls) -> GeosonConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or not
                recognised.
            ValueError: If ``GEOSON_JSON_INDENT`` is not an integer.
        """
        config = cls(
            indent=int(os.getenv("GEOSON_JSON_INDENT", str(DEFAULT_JSON_INDENT))),
            encoding=os.getenv("GEOSON_ENCODING", DEFAULT_ENCODING),
            atomic_writes=_parse_bool(
                "GEOSON_ATOMIC_WRITES", os.getenv("GEOSON_ATOMIC_WRITES", "true")
            ),
        )
        _validate(config)
        return config


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (true/false, 1/0, yes/no, on/off)")


def _validate(config: GeosonConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.indent < 0:
        raise ConfigValidationError(
            "GEOSON_JSON_INDENT",
            config.indent,
            "must be >= 0",
        )

    if not config.encoding:
        raise ConfigValidationError(
            "GEOSON_ENCODING",
            config.encoding,
            "must not be empty",
        )

    try:
        codecs.lookup(config.encoding)
    except LookupError as exc:
        raise ConfigValidationError(
            "GEOSON_ENCODING",
            config.encoding,
            "is not a known text encoding",
        ) from exc
