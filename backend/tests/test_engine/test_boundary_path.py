"""Tests for the boundary path builder."""

from __future__ import annotations

import pytest

from ductsketch.engine.boundary_path import (
    ArcTo,
    LineTo,
    MoveTo,
    build_boundary_path,
    corner_sweep_clockwise,
)
from ductsketch.engine.shape import make_shape
from ductsketch.utils.geometry import Point
from tests.conftest import SQUARE, U_DUCT


def _approx_point(p: Point, x: float, y: float) -> bool:
    return p.x == pytest.approx(x, abs=1e-9) and p.y == pytest.approx(y, abs=1e-9)


class TestStraightPolygon:
    def test_square_is_move_plus_four_lines(self, square):
        path = build_boundary_path(square)
        assert path[0] == MoveTo(Point(0, 100))
        assert path[1:] == (
            LineTo(Point(0, 0)),
            LineTo(Point(100, 0)),
            LineTo(Point(100, 100)),
            LineTo(Point(0, 100)),
        )

    def test_fewer_than_two_vertices_is_empty(self):
        assert build_boundary_path(make_shape([])) == ()
        assert build_boundary_path(make_shape([(5, 5)])) == ()

    def test_two_vertices_still_draw(self):
        path = build_boundary_path(make_shape([(0, 0), (100, 0)]))
        assert path == (MoveTo(Point(100, 0)), LineTo(Point(0, 0)), LineTo(Point(100, 0)))


class TestRoundedCorners:
    def test_rounded_square_commands(self, rounded_square):
        path = build_boundary_path(rounded_square)
        assert len(path) == 1 + 4 * 2
        assert isinstance(path[0], MoveTo)
        assert _approx_point(path[0].point, 0, 90)

        # Vertex 0: line to the fillet start, then the fillet
        assert isinstance(path[1], LineTo)
        assert _approx_point(path[1].point, 0, 10)
        assert isinstance(path[2], ArcTo)
        assert path[2].kind == "corner"
        assert path[2].radius == pytest.approx(10.0)
        assert _approx_point(path[2].point, 10, 0)

    def test_path_starts_mid_edge_and_returns_there(self, rounded_square):
        path = build_boundary_path(rounded_square)
        assert _approx_point(path[-1].point, path[0].point.x, path[0].point.y)

    def test_convex_square_sweeps_clockwise(self, rounded_square):
        corner_arcs = [c for c in build_boundary_path(rounded_square) if isinstance(c, ArcTo)]
        assert len(corner_arcs) == 4
        assert all(c.sweep_clockwise for c in corner_arcs)

    def test_concave_corners_sweep_the_other_way(self):
        shape = make_shape(U_DUCT, corner_radii=[20] * len(U_DUCT))
        corner_arcs = [c for c in build_boundary_path(shape) if isinstance(c, ArcTo) and c.kind == "corner"]
        assert len(corner_arcs) == 8
        assert sum(1 for c in corner_arcs if not c.sweep_clockwise) == 2

    def test_corner_sweep_from_cross_product(self):
        # U_DUCT vertex 1 is convex, vertex 5 concave
        assert corner_sweep_clockwise(Point(200, 100), Point(200, 400), Point(900, 100)) is True
        assert corner_sweep_clockwise(Point(700, 250), Point(700, 400), Point(350, 250)) is False

    def test_zero_radius_means_no_corner_arcs(self):
        shape = make_shape(SQUARE, segment_depths=[20, 0, -15, 0])
        path = build_boundary_path(shape)
        arcs = [c for c in path if isinstance(c, ArcTo)]
        assert len(arcs) == 2
        assert all(c.kind == "bulge" for c in arcs)


class TestBulgedEdges:
    def test_bulge_replaces_line(self):
        shape = make_shape(SQUARE, segment_depths=[20, 0, 0, 0])
        path = build_boundary_path(shape)
        # Edge 0 (vertex 0 → 1) is drawn while arriving at vertex 1
        assert path[2] == ArcTo(Point(100, 0), 72.5, True, "bulge")
        assert isinstance(path[1], LineTo)

    def test_negative_bulge_sweeps_counter_clockwise(self):
        shape = make_shape(SQUARE, segment_depths=[0, -20, 0, 0])
        arc = build_boundary_path(shape)[3]
        assert isinstance(arc, ArcTo)
        assert arc.sweep_clockwise is False
        assert arc.radius == pytest.approx(72.5)

    def test_tiny_bulge_stays_straight(self):
        shape = make_shape(SQUARE, segment_depths=[0.05, 0, 0, 0])
        assert all(isinstance(c, (MoveTo, LineTo)) for c in build_boundary_path(shape))

    def test_oversized_bulge_degrades_without_error(self):
        shape = make_shape(SQUARE, segment_depths=[500, -500, 0, 0])
        path = build_boundary_path(shape)
        assert len(path) == 5
        assert sum(1 for c in path if isinstance(c, ArcTo)) == 2

    def test_bulge_uses_trimmed_chord_between_fillets(self):
        shape = make_shape(SQUARE, corner_radii=[10, 10, 10, 10], segment_depths=[20, 0, 0, 0])
        path = build_boundary_path(shape)
        bulge = next(c for c in path if isinstance(c, ArcTo) and c.kind == "bulge")
        # Chord from (10, 0) to (90, 0) is 80 long: r = (400 + 1600) / 40
        assert bulge.radius == pytest.approx(50.0)
        assert _approx_point(bulge.point, 90, 0)


def test_rebuilding_is_idempotent(u_duct):
    shape = make_shape(U_DUCT, corner_radii=[0, 30, 30, 0, 12, 12, 12, 12], segment_depths=[0, 40, 0, 0, 0, -25, 0, 0])
    first = build_boundary_path(shape)
    second = build_boundary_path(shape)
    assert first == second
    assert build_boundary_path(u_duct) == build_boundary_path(u_duct)
