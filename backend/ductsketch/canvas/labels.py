"""Label and handle placement for the editing overlay.

All measurements go through the engine's vector helpers and arc solver, so
labels always agree with the boundary that gets drawn.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Sequence

from ductsketch.engine.bulge_arc import arc_length
from ductsketch.engine.shape import Shape
from ductsketch.utils.geometry import Point, add, angle_between, distance, length, midpoint, normalize, scale, sub

# Offsets (canvas units) between a label and the thing it annotates
_SEGMENT_LABEL_OFFSET = 15.0
_PREVIEW_LABEL_OFFSET = 20.0
_ANGLE_LABEL_OFFSET = 25.0

# Preview segments shorter than this get no length label
_MIN_PREVIEW_LABEL_LENGTH = 10.0


@dataclass(frozen=True)
class Label:
    text: str
    position: Point
    # Which side of the text box sits on ``position``
    anchor: Literal["bottom", "left", "center"] = "center"
    index: int = 0


def is_horizontal(a: Point, b: Point) -> bool:
    return abs(a.y - b.y) < abs(a.x - b.x)


def segment_length(shape: Shape, index: int) -> float:
    """Drawn length of edge ``index``, following its bulge if it has one."""
    a, b = shape.edge(index)
    return arc_length(a, b, shape.segment_depths[index])


def corner_angle(shape: Shape, index: int) -> float | None:
    """Interior angle at vertex ``index`` in degrees, None if an edge is empty."""
    n = len(shape.vertices)
    p = shape.vertices[index]
    v_a = sub(shape.vertices[(index - 1) % n], p)
    v_b = sub(shape.vertices[(index + 1) % n], p)
    if length(v_a) == 0 or length(v_b) == 0:
        return None
    return math.degrees(angle_between(v_a, v_b))


def _length_label(a: Point, b: Point, text: str, offset: float, index: int) -> Label:
    mid = midpoint(a, b)
    if is_horizontal(a, b):
        return Label(text, Point(mid.x, mid.y - offset), "bottom", index)
    return Label(text, Point(mid.x + offset, mid.y), "left", index)


def segment_labels(shape: Shape) -> list[Label]:
    labels = []
    for i in range(len(shape.vertices)):
        a, b = shape.edge(i)
        text = f"{round(segment_length(shape, i))}px"
        labels.append(_length_label(a, b, text, _SEGMENT_LABEL_OFFSET, i))
    return labels


def angle_labels(shape: Shape) -> list[Label]:
    """One label per vertex, pushed out along the corner's bisector.

    Vertices with an empty edge or a straight-through corner (no bisector)
    get no label.
    """
    labels = []
    n = len(shape.vertices)
    for i, p in enumerate(shape.vertices):
        degrees = corner_angle(shape, i)
        if degrees is None:
            continue
        bisector = add(
            normalize(sub(shape.vertices[(i - 1) % n], p)),
            normalize(sub(shape.vertices[(i + 1) % n], p)),
        )
        if length(bisector) == 0:
            continue
        position = add(p, scale(normalize(bisector), _ANGLE_LABEL_OFFSET))
        labels.append(Label(f"{degrees:.1f}°", position, "center", i))
    return labels


def centerline_labels(centerline: Sequence[Point]) -> list[Label]:
    """Length labels for an in-progress sketch centerline."""
    labels = []
    for i in range(len(centerline) - 1):
        a, b = centerline[i], centerline[i + 1]
        seg = distance(a, b)
        if seg < _MIN_PREVIEW_LABEL_LENGTH:
            continue
        labels.append(_length_label(a, b, f"{round(seg)}px", _PREVIEW_LABEL_OFFSET, i))
    return labels


def midpoint_handles(shape: Shape) -> list[Point]:
    """Drag handle for each edge, at the chord midpoint."""
    return [midpoint(*shape.edge(i)) for i in range(len(shape.vertices))]
