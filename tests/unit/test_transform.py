"""Tests for the coordinate transform.

Covers:
- ENU pass-through (no projection)
- WGS 84 → ENU projection, identity at the datum, axis directions
- Longitude-first axis order of GeoJSON positions
- Malformed position rejection
"""

from __future__ import annotations

import pytest

from geoson.core.exceptions import GeoJsonValidationError
from geoson.models.geodesy import CRS, WGS, Datum
from geoson.models.geometry import Point
from geoson.transform import LocalFrame, position_to_floats, to_local

# Metres per degree of latitude near 52°N (WGS 84 meridian arc)
_M_PER_DEG_LAT_52N = 111_267.0


class TestPositionToFloats:
    """Position validation and normalisation."""

    def test_three_members(self) -> None:
        assert position_to_floats([1, 2, 3]) == (1.0, 2.0, 3.0)

    def test_missing_altitude_defaults_to_zero(self) -> None:
        assert position_to_floats([1.5, 2.5]) == (1.5, 2.5, 0.0)

    def test_extra_members_ignored(self) -> None:
        assert position_to_floats([1, 2, 3, 99]) == (1.0, 2.0, 3.0)

    def test_tuple_accepted(self) -> None:
        assert position_to_floats((4, 5)) == (4.0, 5.0, 0.0)

    def test_not_an_array(self) -> None:
        with pytest.raises(GeoJsonValidationError, match="expected an array"):
            position_to_floats("1,2")

    def test_too_short(self) -> None:
        with pytest.raises(GeoJsonValidationError, match="at least 2"):
            position_to_floats([1.0])

    def test_non_numeric_member(self) -> None:
        with pytest.raises(GeoJsonValidationError, match="not a number"):
            position_to_floats([1.0, "2"])

    def test_boolean_member_rejected(self) -> None:
        with pytest.raises(GeoJsonValidationError):
            position_to_floats([True, 2.0])

    def test_integer_too_large_for_float(self) -> None:
        with pytest.raises(GeoJsonValidationError, match="too large"):
            position_to_floats([10**400, 0])


class TestEnuPassThrough:
    """ENU-tagged positions are stored unchanged."""

    def test_values_unchanged(self) -> None:
        frame = LocalFrame(Datum(52.0, 5.0, 10.0), CRS.ENU)
        assert frame.to_local([12.5, -3.0, 7.0]) == Point(12.5, -3.0, 7.0)

    def test_datum_is_ignored(self) -> None:
        a = to_local([1, 2, 3], Datum(0, 0, 0), CRS.ENU)
        b = to_local([1, 2, 3], Datum(45, 90, 1000), CRS.ENU)
        assert a == b == Point(1.0, 2.0, 3.0)


class TestWgsToEnu:
    """Geodetic positions are projected onto the datum's tangent plane."""

    def test_datum_maps_to_origin(self) -> None:
        datum = Datum(lat=52.0, lon=5.0, alt=10.0)
        p = to_local([5.0, 52.0, 10.0], datum)
        assert p.x == pytest.approx(0.0, abs=1e-6)
        assert p.y == pytest.approx(0.0, abs=1e-6)
        assert p.z == pytest.approx(0.0, abs=1e-6)

    def test_zero_datum_origin(self) -> None:
        p = to_local([0, 0, 0], Datum(0.0, 0.0, 0.0))
        assert p.as_tuple() == pytest.approx((0.0, 0.0, 0.0), abs=1e-6)

    def test_north_is_positive_y(self) -> None:
        datum = Datum(lat=52.0, lon=5.0)
        p = to_local([5.0, 52.001, 0.0], datum)
        assert p.x == pytest.approx(0.0, abs=1e-3)
        assert p.y == pytest.approx(0.001 * _M_PER_DEG_LAT_52N, rel=1e-3)

    def test_east_is_positive_x(self) -> None:
        datum = Datum(lat=0.0, lon=0.0)
        p = to_local([0.001, 0.0, 0.0], datum)
        assert p.x == pytest.approx(111.32, rel=1e-3)
        assert p.y == pytest.approx(0.0, abs=1e-3)

    def test_altitude_is_up(self) -> None:
        datum = Datum(lat=52.0, lon=5.0, alt=0.0)
        p = to_local([5.0, 52.0, 25.0], datum)
        assert p.z == pytest.approx(25.0, abs=1e-6)
        assert p.x == pytest.approx(0.0, abs=1e-6)

    def test_axis_order_is_longitude_first(self) -> None:
        """Swapping lon/lat in the input must not give the same point."""
        datum = Datum(lat=52.0, lon=5.0)
        frame = LocalFrame(datum, CRS.WGS)
        correct = frame.to_local([5.0, 52.0])
        swapped = frame.to_local([52.0, 5.0])
        assert correct.as_tuple() == pytest.approx((0.0, 0.0, 0.0), abs=1e-6)
        assert abs(swapped.x) > 1_000_000.0

    def test_wgs_to_enu_direct(self) -> None:
        frame = LocalFrame(Datum(10.0, 20.0, 0.0))
        enu = frame.wgs_to_enu(WGS(lat=10.0, lon=20.0, alt=5.0))
        assert (enu.x, enu.y, enu.z) == pytest.approx((0.0, 0.0, 5.0), abs=1e-6)

    def test_frame_is_reusable(self) -> None:
        frame = LocalFrame(Datum(52.0, 5.0), CRS.WGS)
        first = frame.to_local([5.001, 52.0])
        second = frame.to_local([5.001, 52.0])
        assert first == second
