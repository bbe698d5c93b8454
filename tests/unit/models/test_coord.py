"""
Unit tests for models.coord module.

Tests:
- Coord construction and immutability
- distance_to() haversine distance
  - Zero distance to itself
  - Known city pairs
  - Antipodal points (clamping)
  - Symmetry
  - Millimeter rounding
"""

from dataclasses import FrozenInstanceError

import pytest

from pingmole.models import Coord


class TestConstruction:
    """Coord construction."""

    def test_fields(self) -> None:
        coord = Coord(52.52, 13.405)
        assert coord.latitude == 52.52
        assert coord.longitude == 13.405

    def test_frozen(self) -> None:
        coord = Coord(0.0, 0.0)
        with pytest.raises(FrozenInstanceError):
            coord.latitude = 1.0  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Coord(1.0, 2.0) == Coord(1.0, 2.0)
        assert Coord(1.0, 2.0) != Coord(2.0, 1.0)


class TestDistanceTo:
    """distance_to() great-circle distance in kilometers."""

    def test_same_point_is_zero(self) -> None:
        coord = Coord(52.52, 13.405)
        assert coord.distance_to(coord) == 0.0

    def test_berlin_to_paris(self) -> None:
        berlin = Coord(52.52, 13.405)
        paris = Coord(48.8566, 2.3522)
        assert berlin.distance_to(paris) == pytest.approx(877.5, abs=1.0)

    def test_one_degree_of_longitude_on_equator(self) -> None:
        distance = Coord(0.0, 0.0).distance_to(Coord(0.0, 1.0))
        assert distance == pytest.approx(111.195, abs=0.001)

    def test_antipodal_points(self) -> None:
        distance = Coord(0.0, 0.0).distance_to(Coord(0.0, 180.0))
        assert distance == pytest.approx(20015.087, abs=0.001)

    def test_pole_to_pole(self) -> None:
        distance = Coord(90.0, 0.0).distance_to(Coord(-90.0, 0.0))
        assert distance == pytest.approx(20015.087, abs=0.001)

    def test_symmetric(self) -> None:
        a = Coord(40.7128, -74.0060)
        b = Coord(-33.8688, 151.2093)
        assert a.distance_to(b) == b.distance_to(a)

    def test_rounded_to_millimeters(self) -> None:
        distance = Coord(12.3456, 65.4321).distance_to(Coord(-7.891, 3.21))
        meters = distance * 1_000.0
        assert meters == pytest.approx(round(meters, 3), abs=1e-6)

    def test_deterministic(self) -> None:
        a = Coord(59.3293, 18.0686)
        b = Coord(35.6762, 139.6503)
        assert a.distance_to(b) == a.distance_to(b)
