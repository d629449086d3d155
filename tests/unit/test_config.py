"""Tests for reader/writer configuration.

Covers:
- Default values
- Loading from environment variables
- Type coercion (string env vars → int / bool fields)
- Fail-fast range validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from geoson.core.config import ConfigValidationError, GeosonConfig


class TestGeosonConfigDefaults:
    """Verify default configuration values."""

    def test_default_indent(self) -> None:
        cfg = GeosonConfig()
        assert cfg.indent == 2

    def test_default_encoding(self) -> None:
        cfg = GeosonConfig()
        assert cfg.encoding == "utf-8"

    def test_default_atomic_writes(self) -> None:
        cfg = GeosonConfig()
        assert cfg.atomic_writes is True


class TestGeosonConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        """All env vars are read and coerced to correct types."""
        env = {
            "GEOSON_JSON_INDENT": "4",
            "GEOSON_ENCODING": "latin-1",
            "GEOSON_ATOMIC_WRITES": "false",
        }
        with patch.dict(os.environ, env, clear=False):
            cfg = GeosonConfig.from_env()

        assert cfg.indent == 4
        assert cfg.encoding == "latin-1"
        assert cfg.atomic_writes is False

    def test_defaults_when_env_missing(self) -> None:
        """Missing environment variables fall back to defaults."""
        with patch.dict(os.environ, {}, clear=True):
            cfg = GeosonConfig.from_env()

        assert cfg == GeosonConfig()

    @pytest.mark.parametrize("raw", ["1", "TRUE", "yes", " on "])
    def test_truthy_atomic_writes(self, raw: str) -> None:
        with patch.dict(os.environ, {"GEOSON_ATOMIC_WRITES": raw}, clear=True):
            cfg = GeosonConfig.from_env()
        assert cfg.atomic_writes is True

    def test_frozen_immutability(self) -> None:
        """GeosonConfig is frozen (immutable)."""
        cfg = GeosonConfig()
        with pytest.raises(AttributeError):
            cfg.indent = 8  # type: ignore[misc]


class TestGeosonConfigValidation:
    """Fail-fast validation in from_env."""

    def test_negative_indent_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOSON_JSON_INDENT": "-1"}, clear=True),
            pytest.raises(ConfigValidationError, match="GEOSON_JSON_INDENT"),
        ):
            GeosonConfig.from_env()

    def test_zero_indent_accepted(self) -> None:
        with patch.dict(os.environ, {"GEOSON_JSON_INDENT": "0"}, clear=True):
            cfg = GeosonConfig.from_env()
        assert cfg.indent == 0

    def test_non_numeric_indent_raises_value_error(self) -> None:
        with (
            patch.dict(os.environ, {"GEOSON_JSON_INDENT": "two"}, clear=True),
            pytest.raises(ValueError),
        ):
            GeosonConfig.from_env()

    def test_unknown_encoding_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOSON_ENCODING": "not-a-codec"}, clear=True),
            pytest.raises(ConfigValidationError, match="known text encoding"),
        ):
            GeosonConfig.from_env()

    def test_empty_encoding_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOSON_ENCODING": ""}, clear=True),
            pytest.raises(ConfigValidationError, match="must not be empty"),
        ):
            GeosonConfig.from_env()

    def test_bad_boolean_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOSON_ATOMIC_WRITES": "maybe"}, clear=True),
            pytest.raises(ConfigValidationError) as exc_info,
        ):
            GeosonConfig.from_env()
        assert exc_info.value.key == "GEOSON_ATOMIC_WRITES"
        assert exc_info.value.value == "maybe"
