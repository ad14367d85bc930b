import numpy as np
import pytest

from roadnet.data.geopoint import GeoPoint
from roadnet.data.segment import HIGHWAY_SPEEDS, SpeedKph, highway_speed, speed_kph_to_mps, travel_time


def test_distance_along_longitude():
    a = GeoPoint(49.0, 6.0)
    b = GeoPoint(49.0, 6.001)
    # 6.001 is 6.00099992752 in single precision
    assert a - b == pytest.approx(71.6898, abs=1e-3)
    assert b.distance(a) == a.distance(b)


def test_distance_along_latitude():
    # 49.01 is 49.0099983215 in single precision
    assert GeoPoint(49.0, 6.0) - GeoPoint(49.01, 6.0) == pytest.approx(1112.103, abs=1e-2)


def test_distance_combines_both_axes():
    a = GeoPoint(49.0, 6.0)
    b = GeoPoint(49.003, 6.004)
    assert a - b == pytest.approx(((0.003 * 111_229) ** 2 + (0.004 * 71_695) ** 2) ** 0.5, rel=1e-3)


def test_distance_to_itself():
    assert GeoPoint(49.2, 7.0) - GeoPoint(49.2, 7.0) == 0


def test_value_equality():
    assert GeoPoint(49.0, 6.0) == GeoPoint(49.0, 6.0)
    assert GeoPoint(49.0, 6.0) != GeoPoint(6.0, 49.0)


def test_shapely_point_order():
    point = GeoPoint(49.0, 6.5).point()
    assert point.x == 6.5
    assert point.y == 49.0


def test_speed_conversion():
    assert speed_kph_to_mps(SpeedKph(36.0)) == pytest.approx(10.0)
    assert speed_kph_to_mps(SpeedKph(30.0)) == float(np.float32(np.float32(1000) / np.float32(3600) * np.float32(30)))


def test_highway_speed():
    assert highway_speed("motorway") == pytest.approx(110 / 3.6)
    assert highway_speed("service") == pytest.approx(5 / 3.6)
    assert highway_speed("footway") is None
    assert len(HIGHWAY_SPEEDS) == 15


def test_travel_time_is_truncated():
    assert travel_time(71.6898, speed_kph_to_mps(SpeedKph(30))) == 8
    assert travel_time(4.0, speed_kph_to_mps(SpeedKph(110))) == 0


def single_precision_cost(a, b, speed_kph):
    f = np.float32
    d_lat = (f(a[0]) - f(b[0])) * f(111_229)
    d_lon = (f(a[1]) - f(b[1])) * f(71_695)
    distance = np.sqrt(d_lat * d_lat + d_lon * d_lon)
    return int(distance / (f(1000) / f(3600) * f(speed_kph)))


@pytest.mark.parametrize("category", ["motorway", "primary", "residential", "living_street", "service"])
def test_cost_is_computed_in_single_precision(category):
    rng = np.random.default_rng(49)
    speed_kph = HIGHWAY_SPEEDS[category]
    speed = highway_speed(category)
    for _ in range(2000):
        lat, lon = rng.uniform(49.1, 49.6), rng.uniform(6.3, 7.4)
        a = (lat, lon)
        b = (lat + rng.uniform(-0.002, 0.002), lon + rng.uniform(-0.002, 0.002))
        cost = travel_time(GeoPoint(*a) - GeoPoint(*b), speed)
        assert cost == single_precision_cost(a, b, speed_kph)
