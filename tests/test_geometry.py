"""Tests for geometry value types, accessors, conversions and normalization."""

from __future__ import annotations

import math

import pytest

from noesis.geometry import (
    Bounds,
    Coordinates,
    deg2rad,
    deg2rad_coordinates,
    lat,
    lng,
    normalize_bearing,
    normalize_lat,
    normalize_lng,
    north_east,
    rad2deg,
    rad2deg_coordinates,
    south_west,
)

_TOL = 1e-12


def _close(a: float, b: float, tol: float = _TOL) -> bool:
    return abs(a - b) < tol


# ---------------------------------------------------------------------------
# Value types and accessors
# ---------------------------------------------------------------------------


class TestCoordinates:
    def test_latitude_first(self) -> None:
        c = Coordinates(52.5, 13.4)
        assert c.lat == 52.5
        assert c.lng == 13.4

    def test_immutable(self) -> None:
        c = Coordinates(1.0, 2.0)
        with pytest.raises(AttributeError):
            c.lat = 5.0  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Coordinates(1.0, 2.0) == Coordinates(1.0, 2.0)
        assert Coordinates(1.0, 2.0) != Coordinates(2.0, 1.0)

    def test_as_tuple(self) -> None:
        assert Coordinates(1.0, 2.0).as_tuple() == (1.0, 2.0)

    def test_from_tuple(self) -> None:
        c = Coordinates.from_tuple([10, -20])
        assert c == Coordinates(10.0, -20.0)
        assert isinstance(c.lat, float)

    def test_accessors(self) -> None:
        c = Coordinates(-33.9, 151.2)
        assert lat(c) == -33.9
        assert lng(c) == 151.2


class TestBoundsAccessors:
    def test_corners(self, box: Bounds) -> None:
        assert north_east(box) == Coordinates(10.0, 10.0)
        assert south_west(box) == Coordinates(-10.0, -10.0)

    def test_immutable(self, box: Bounds) -> None:
        with pytest.raises(AttributeError):
            box.north_east = Coordinates(0.0, 0.0)  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------


class TestConversions:
    def test_deg2rad(self) -> None:
        assert _close(deg2rad(180), math.pi)
        assert _close(deg2rad(-90), -math.pi / 2)
        assert deg2rad(0) == 0.0

    def test_rad2deg(self) -> None:
        assert _close(rad2deg(math.pi), 180.0)
        assert _close(rad2deg(math.pi / 4), 45.0)

    def test_right_angle_is_exact(self) -> None:
        assert deg2rad(90) == math.pi / 2

    @pytest.mark.parametrize("x", [0.0, 1.0, -45.5, 179.999, 1e-9, 12345.678])
    def test_scalar_round_trip(self, x: float) -> None:
        assert math.isclose(deg2rad(rad2deg(x)), x, rel_tol=1e-12, abs_tol=1e-15)

    def test_coordinates_convert_each_field(self) -> None:
        c = deg2rad_coordinates(Coordinates(90.0, -180.0))
        assert c == Coordinates(deg2rad(90.0), deg2rad(-180.0))

    def test_coordinates_round_trip(self) -> None:
        original = Coordinates(0.5, -2.25)
        back = deg2rad_coordinates(rad2deg_coordinates(original))
        assert _close(back.lat, original.lat)
        assert _close(back.lng, original.lng)


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


class TestNormalizeLat:
    def test_clamps_above(self) -> None:
        assert normalize_lat(100) == 90.0

    def test_clamps_below(self) -> None:
        assert normalize_lat(-100) == -90.0

    def test_in_range_passes_through(self) -> None:
        assert normalize_lat(45) == 45.0
        assert isinstance(normalize_lat(45), float)

    def test_does_not_wrap(self) -> None:
        assert normalize_lat(270) == 90.0


class TestNormalizeLng:
    def test_antimeridian_is_positive(self) -> None:
        assert normalize_lng(180) == 180.0

    def test_negative_antimeridian_maps_to_positive(self) -> None:
        assert normalize_lng(-180) == 180.0

    def test_wraps_below(self) -> None:
        assert normalize_lng(-190) == 170.0

    def test_wraps_above(self) -> None:
        assert normalize_lng(190) == -170.0

    def test_in_range_passes_through(self) -> None:
        assert normalize_lng(13.5) == 13.5
        assert normalize_lng(-13.5) == -13.5
        assert isinstance(normalize_lng(10), float)

    def test_multiple_turns(self) -> None:
        assert normalize_lng(720 + 45) == 45.0
        assert normalize_lng(-720 - 45) == -45.0

    @pytest.mark.parametrize("x", [-1000.0, -540.0, -181.0, -0.5, 0.0, 359.0, 541.0, 1e5])
    def test_always_in_range(self, x: float) -> None:
        assert -180.0 <= normalize_lng(x) <= 180.0


class TestNormalizeBearing:
    def test_negative(self) -> None:
        assert normalize_bearing(-90) == 270.0

    def test_above_full_turn(self) -> None:
        assert normalize_bearing(450) == 90.0

    def test_full_turn_is_zero(self) -> None:
        assert normalize_bearing(360) == 0.0

    def test_very_negative(self) -> None:
        assert normalize_bearing(-3600 - 30) == 330.0

    @pytest.mark.parametrize("b", [-1e6 + 0.5, -725.0, -0.25, 0.0, 12.5, 359.5, 1e4 + 0.75])
    def test_always_in_range(self, b: float) -> None:
        assert 0.0 <= normalize_bearing(b) < 360.0

    @pytest.mark.parametrize("k", [-3, -1, 1, 2, 10])
    def test_periodic(self, k: int) -> None:
        assert normalize_bearing(45.0 + 360 * k) == normalize_bearing(45.0)
