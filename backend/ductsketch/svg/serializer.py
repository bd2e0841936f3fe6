"""Write SVG path data and documents from engine boundary paths."""

from __future__ import annotations

from typing import Any, Iterable

from ductsketch.engine.boundary_path import ArcTo, BoundaryPath, LineTo, MoveTo

SHAPE_STYLE = {
    "fill": "rgba(173, 216, 230, 0.5)",
    "stroke": "#D6D3D1",
    "stroke-width": "2",
}
SELECTED_STROKE = "#0284C7"


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def path_to_d(path: BoundaryPath, close: bool = True) -> str:
    """SVG ``d`` attribute for a boundary path ("" for an empty path).

    Arcs are always minor arcs (large-arc flag 0); sweep flag 1 is clockwise
    on the y-down SVG canvas.
    """
    parts: list[str] = []
    for cmd in path:
        x, y = _fmt(cmd.point.x), _fmt(cmd.point.y)
        if isinstance(cmd, MoveTo):
            parts.append(f"M {x} {y}")
        elif isinstance(cmd, LineTo):
            parts.append(f"L {x} {y}")
        elif isinstance(cmd, ArcTo):
            r = _fmt(cmd.radius)
            sweep = 1 if cmd.sweep_clockwise else 0
            parts.append(f"A {r} {r} 0 0 {sweep} {x} {y}")
    if parts and close:
        parts.append("Z")
    return " ".join(parts)


def shape_elements(
    paths: Iterable[tuple[str, BoundaryPath]],
    selected_id: str | None = None,
) -> list[dict[str, Any]]:
    """One ``<path>`` element dict per (shape id, boundary path)."""
    elements = []
    for shape_id, path in paths:
        d = path_to_d(path)
        if not d:
            continue
        attrs = {"tag": "path", "id": f"shape-{shape_id}", "d": d, **SHAPE_STYLE}
        if shape_id == selected_id:
            attrs["stroke"] = SELECTED_STROKE
        elements.append(attrs)
    return elements


def serialize_svg(
    elements: list[dict[str, Any]],
    viewbox: tuple[float, float, float, float] = (0.0, 0.0, 1200.0, 800.0),
    title: str = "",
) -> str:
    """Generate SVG markup from element definitions."""
    x, y, w, h = (_fmt(v) for v in viewbox)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{x} {y} {w} {h}" xmlns="http://www.w3.org/2000/svg">',
    ]

    if title:
        lines.append(f"  <title>{title}</title>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)
