"""Tests for overlay label placement."""

from __future__ import annotations

import math

import pytest

from ductsketch.canvas.labels import (
    angle_labels,
    centerline_labels,
    corner_angle,
    is_horizontal,
    midpoint_handles,
    segment_labels,
    segment_length,
)
from ductsketch.engine.shape import make_shape
from ductsketch.utils.geometry import Point
from tests.conftest import SQUARE


def test_is_horizontal():
    assert is_horizontal(Point(0, 0), Point(100, 10))
    assert not is_horizontal(Point(0, 0), Point(10, 100))
    # A perfect diagonal counts as vertical
    assert not is_horizontal(Point(0, 0), Point(50, 50))


def test_segment_labels_sit_beside_their_edges(square):
    labels = segment_labels(square)
    assert [label.text for label in labels] == ["100px"] * 4
    top, right = labels[0], labels[1]
    assert top.position == Point(50, -15)
    assert top.anchor == "bottom"
    assert right.position == Point(115, 50)
    assert right.anchor == "left"
    assert [label.index for label in labels] == [0, 1, 2, 3]


def test_bulged_segment_reports_arc_length():
    shape = make_shape(SQUARE, segment_depths=[50, 0, 0, 0])
    assert segment_length(shape, 0) == pytest.approx(50 * math.pi)
    assert segment_labels(shape)[0].text == "157px"


def test_square_angles(square):
    labels = angle_labels(square)
    assert [label.text for label in labels] == ["90.0°"] * 4
    first = labels[0]
    offset = 25 / math.sqrt(2)
    assert first.position.x == pytest.approx(offset)
    assert first.position.y == pytest.approx(offset)


def test_acute_corner_angle():
    shape = make_shape([(0, 0), (100, 0), (0, 100)])
    assert corner_angle(shape, 1) == pytest.approx(45.0)
    assert angle_labels(shape)[1].text == "45.0°"


def test_collapsed_vertex_has_no_angle():
    shape = make_shape([(0, 0), (0, 0), (100, 0), (100, 100)])
    assert corner_angle(shape, 0) is None
    assert corner_angle(shape, 1) is None
    assert len(angle_labels(shape)) == 2


def test_straight_through_vertex_has_no_angle_label():
    shape = make_shape([(0, 0), (50, 0), (100, 0), (100, 100)])
    assert corner_angle(shape, 1) == pytest.approx(180.0)
    assert 1 not in [label.index for label in angle_labels(shape)]


def test_centerline_labels_skip_short_segments():
    labels = centerline_labels([Point(0, 0), Point(5, 0), Point(5, 100)])
    assert len(labels) == 1
    assert labels[0].text == "100px"
    assert labels[0].position == Point(25, 50)
    assert labels[0].anchor == "left"
    assert labels[0].index == 1


def test_midpoint_handles(square):
    assert midpoint_handles(square) == [Point(50, 0), Point(100, 50), Point(50, 100), Point(0, 50)]
