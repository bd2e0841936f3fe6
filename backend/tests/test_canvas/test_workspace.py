"""Tests for pointer routing between selection and sketching."""

from __future__ import annotations

from ductsketch.canvas.store import ShapeStore
from ductsketch.canvas.workspace import Workspace
from ductsketch.engine.config import SketchConfig
from ductsketch.engine.sketch import SessionStatus
from ductsketch.utils.geometry import Point
from tests.conftest import SQUARE


def test_press_on_shape_selects_it(workspace):
    shape = workspace.store.add_shape(SQUARE, select=False)
    hit = workspace.pointer_down((50, 50))
    assert hit.id == shape.id
    assert workspace.store.selected_id == shape.id
    assert not workspace.session.is_drawing


def test_press_on_empty_canvas_starts_sketch(workspace):
    workspace.store.add_shape(SQUARE)
    assert workspace.pointer_down((400, 400)) is None
    assert workspace.store.selected_id is None
    assert workspace.session.is_drawing


def test_modifier_press_neither_selects_nor_sketches(workspace):
    assert workspace.pointer_down((400, 400), modifier_held=True) is None
    assert not workspace.session.is_drawing


def test_modifier_press_keeps_current_selection(workspace):
    shape = workspace.store.add_shape(SQUARE)
    other = workspace.store.add_shape([(200, 0), (300, 0), (300, 100), (200, 100)], select=False)
    assert workspace.pointer_down((400, 400), modifier_held=True) is None
    assert workspace.store.selected_id == shape.id
    assert workspace.pointer_down((250, 50), modifier_held=True) is None
    assert workspace.store.selected_id == shape.id
    assert other.id != shape.id


def test_drag_creates_selected_shape(workspace):
    workspace.pointer_down((400, 400))
    preview = workspace.pointer_move((700, 400))
    assert len(preview) == 4
    shape = workspace.pointer_up()
    assert shape.vertices == (Point(400, 325), Point(700, 325), Point(700, 475), Point(400, 475))
    assert shape.corner_radii == (0.0,) * 4
    assert workspace.store.selected_id == shape.id
    assert workspace.session.status is SessionStatus.COMMITTED


def test_click_without_drag_creates_nothing(workspace):
    workspace.pointer_down((400, 400))
    assert workspace.pointer_up() is None
    assert workspace.store.shapes() == []


def test_new_sketch_can_start_on_top_of_nothing_after_commit(workspace):
    workspace.pointer_down((400, 400))
    workspace.pointer_move((700, 400))
    first = workspace.pointer_up()
    # Inside the first pipe: selects instead of sketching
    assert workspace.pointer_down((500, 400)).id == first.id
    workspace.pointer_down((400, 800))
    workspace.pointer_move((400, 1100))
    assert workspace.pointer_up() is not None
    assert len(workspace.store.shapes()) == 2


def test_press_while_drawing_is_ignored(workspace):
    workspace.pointer_down((0, 0))
    workspace.pointer_move((300, 0))
    assert workspace.pointer_down((900, 900)) is None
    assert workspace.session.state.centerline == [Point(0, 0)]


def test_escape_and_modifier_cancel(workspace):
    workspace.pointer_down((0, 0))
    workspace.pointer_move((300, 0))
    workspace.cancel()
    assert workspace.pointer_up() is None

    workspace.pointer_down((0, 0))
    workspace.pointer_move((300, 0))
    workspace.set_modifier(True)
    assert workspace.session.status is SessionStatus.CANCELLED
    assert workspace.store.shapes() == []


def test_custom_store_and_thickness():
    store = ShapeStore()
    workspace = Workspace(store, SketchConfig(pipe_thickness=40))
    workspace.pointer_down((0, 0))
    workspace.pointer_move((0, 100))
    shape = workspace.pointer_up()
    assert store.get(shape.id) is shape
    assert {v.x for v in shape.vertices} == {-20.0, 20.0}
