"""Tests for the adapter contract used by spatial indices"""

import hypothesis as hyp
from hypothesis import strategies as st
import pytest

from planegeom.geometry import NumericPoint, Point
from planegeom.spatial_index import Envelope, SpatialPoint, coordinates, generate_point, square_distance_between
from hypothesis_extra_strategies import gen_point


@pytest.mark.parametrize("point", [Point(1, 2), NumericPoint(1, 2)])
def test_points_satisfy_the_adapter_contract(point):
    assert isinstance(point, SpatialPoint)
    assert point.DIMENSIONS == 2
    assert coordinates(point) == (1, 2)


def test_non_points_do_not_satisfy_the_adapter_contract():
    assert not isinstance((1.0, 2.0), SpatialPoint)


def test_generate_point_builds_requested_type():
    p = generate_point(Point, lambda i: float(i * 10))
    assert isinstance(p, Point)
    assert p.as_tuple() == (0.0, 10.0)
    q = generate_point(NumericPoint, lambda i: i + 1)
    assert isinstance(q, NumericPoint)
    assert q.as_tuple() == (1, 2)


@hyp.given(a=gen_point(), b=gen_point())
def test_square_distance_between_agrees_with_point_method(a, b):
    assert square_distance_between(a, b) == pytest.approx(a.square_distance(b))


def test_envelope_of_points():
    env = Envelope.from_points([Point(1, 5), Point(-2, 3), NumericPoint(4, -1)])
    assert env.lower == Point(-2, -1)
    assert env.upper == Point(4, 5)
    assert env.contains_point(Point(0, 0))
    assert env.contains_point(Point(4, 5))
    assert not env.contains_point(Point(4.5, 0))


def test_envelope_distance_is_zero_inside_and_to_nearest_edge_outside():
    env = Envelope.from_points([Point(0, 0), Point(2, 2)])
    assert env.square_distance_to_point(Point(1, 1)) == 0.0
    assert env.square_distance_to_point(Point(5, 1)) == pytest.approx(9.0)
    assert env.square_distance_to_point(Point(-3, -4)) == pytest.approx(25.0)


def test_merged_envelope_covers_both():
    merged = Envelope.from_points([Point(0, 0), Point(1, 1)]).merged(Envelope.from_points([Point(3, -2), Point(4, 0)]))
    assert merged.lower == Point(0, -2)
    assert merged.upper == Point(4, 1)


def test_empty_envelope_is_error():
    with pytest.raises(ValueError):
        Envelope.from_points([])


@hyp.given(points=st.lists(gen_point(), min_size=1, max_size=20))
def test_envelope_contains_all_its_points(points):
    env = Envelope.from_points(points)
    assert all(env.contains_point(p) for p in points)
