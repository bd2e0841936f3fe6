"""Shared test fixtures."""

from __future__ import annotations

import pytest

from ductsketch.canvas.store import ShapeStore
from ductsketch.canvas.workspace import Workspace
from ductsketch.engine.shape import Shape, make_shape


# 100×100 square, clockwise on a y-down canvas
SQUARE = [(0, 0), (100, 0), (100, 100), (0, 100)]

# U-shaped duct: two legs joined by a top run; vertices 5 and 6 are concave
U_DUCT = [
    (200, 400), (200, 100), (900, 100), (900, 400),
    (700, 400), (700, 250), (350, 250), (350, 400),
]


@pytest.fixture
def square() -> Shape:
    return make_shape(SQUARE, shape_id="square")


@pytest.fixture
def rounded_square() -> Shape:
    return make_shape(SQUARE, corner_radii=[10, 10, 10, 10], shape_id="rounded")


@pytest.fixture
def u_duct() -> Shape:
    return make_shape(U_DUCT, shape_id="u-duct")


@pytest.fixture
def store() -> ShapeStore:
    return ShapeStore()


@pytest.fixture
def workspace() -> Workspace:
    return Workspace()
