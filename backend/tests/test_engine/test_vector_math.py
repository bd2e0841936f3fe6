"""Tests for the 2D vector helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from ductsketch.utils.geometry import (
    Point,
    angle_between,
    as_array,
    bbox,
    cross,
    distance,
    left_normal,
    normalize,
    signed_area,
)


def test_point_is_a_tuple():
    p = Point(3, 4)
    x, y = p
    assert (x, y) == (3, 4)
    assert p == (3, 4)


def test_distance_and_normalize():
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)
    n = normalize(Point(3, 4))
    assert n.x == pytest.approx(0.6)
    assert n.y == pytest.approx(0.8)


def test_normalize_zero_vector_stays_zero():
    assert normalize(Point(0, 0)) == Point(0.0, 0.0)


def test_cross_sign_follows_turn_direction():
    # Right then down: a clockwise turn on a y-down canvas
    assert cross(Point(1, 0), Point(0, 1)) > 0
    assert cross(Point(1, 0), Point(0, -1)) < 0
    assert cross(Point(1, 0), Point(2, 0)) == 0


def test_left_normal():
    assert left_normal(Point(1, 0)) == Point(0, 1)
    assert left_normal(Point(0, 1)) == Point(-1, 0)


def test_angle_between():
    assert angle_between(Point(1, 0), Point(0, 1)) == pytest.approx(math.pi / 2)
    assert angle_between(Point(1, 0), Point(-1, 0)) == pytest.approx(math.pi)
    assert angle_between(Point(1, 0), Point(0, 0)) == 0.0


def test_angle_between_clamps_rounding_noise():
    # Nearly parallel vectors whose cosine may round past 1.0
    a = Point(1e-8, 1.0)
    b = Point(1e-8 * 3, 3.0)
    assert angle_between(a, b) == pytest.approx(0.0, abs=1e-6)


def test_signed_area_and_bbox():
    pts = as_array([Point(0, 0), Point(10, 0), Point(10, 5), Point(0, 5)])
    assert abs(signed_area(pts)) == pytest.approx(50.0)
    assert signed_area(pts[::-1]) == pytest.approx(-signed_area(pts))
    assert bbox(pts) == (0.0, 0.0, 10.0, 5.0)
    assert bbox(np.empty((0, 2))) == (0.0, 0.0, 0.0, 0.0)
