import math

import pytest

from attendance_tracker.core.exceptions import ConfigurationError
from attendance_tracker.geo.proximity import distance_meters, is_within_radius
from attendance_tracker.offices.model import Office


def _office(**overrides) -> Office:
    values = dict(office_id=7, name="Head Office", address=None, latitude=12.9716, longitude=77.5946, radius_meters=200)
    values.update(overrides)
    return Office(**values)


def test_distance_is_zero_for_same_point():
    assert distance_meters(12.9716, 77.5946, 12.9716, 77.5946) == 0


def test_distance_is_symmetric():
    a = distance_meters(12.9716, 77.5946, 13.0827, 80.2707)
    b = distance_meters(13.0827, 80.2707, 12.9716, 77.5946)
    assert a == pytest.approx(b)


def test_one_degree_of_latitude_is_about_111_km():
    expected = 6_371_000 * math.pi / 180
    assert distance_meters(0.0, 0.0, 1.0, 0.0) == pytest.approx(expected, rel=1e-9)


def test_point_150m_north_is_inside_200m_fence():
    result = is_within_radius(12.9716 + 0.00135, 77.5946, _office())
    assert 140 < result.distance < 160
    assert result.in_range is True


def test_point_outside_fence():
    result = is_within_radius(12.9816, 77.5946, _office())
    assert result.distance > 1000
    assert result.in_range is False


def test_boundary_distance_counts_as_in_range():
    user_lat, user_lng = 12.9730, 77.5960
    exact = distance_meters(user_lat, user_lng, 12.9716, 77.5946)

    assert is_within_radius(user_lat, user_lng, _office(radius_meters=exact)).in_range is True


@pytest.mark.parametrize(
    "overrides",
    [{"radius_meters": None}, {"latitude": None}, {"longitude": None}],
)
def test_missing_fence_data_is_configuration_error(overrides):
    with pytest.raises(ConfigurationError):
        is_within_radius(12.9716, 77.5946, _office(**overrides))
