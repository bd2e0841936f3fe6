"""
DuctSketch demo
Sketches a pipe from a scripted pointer stream, edits it, and writes an SVG.
Run from the repo root after `pip install -e .`.
"""
from ductsketch.canvas.labels import angle_labels, segment_labels
from ductsketch.canvas.workspace import Workspace
from ductsketch.engine.boundary_path import build_boundary_path
from ductsketch.svg.sampler import boundary_length
from ductsketch.svg.serializer import path_to_d, serialize_svg, shape_elements

# ============================================================
# STEP 1: Sketch a pipe (right, down, right)
# ============================================================
workspace = Workspace()
workspace.pointer_down((100, 100))
for pos in [(250, 104), (400, 98), (400, 300), (410, 450), (700, 460)]:
    preview = workspace.pointer_move(pos)
    print(f"pointer {pos} -> {len(preview or [])} preview points")

pipe = workspace.pointer_up()
print("=" * 60)
print(f"Committed pipe {pipe.id}: {len(pipe)} outline vertices")
print("=" * 60)

# ============================================================
# STEP 2: Round its corners and bulge one edge
# ============================================================
store = workspace.store
for i in range(len(pipe)):
    store.set_corner_radius(pipe.id, i, 30)
pipe = store.set_segment_depth(pipe.id, 0, 40)

for label in segment_labels(pipe):
    print(f"  edge {label.index}: {label.text}")
for label in angle_labels(pipe):
    print(f"  vertex {label.index}: {label.text}")

# ============================================================
# STEP 3: Export
# ============================================================
d = path_to_d(build_boundary_path(pipe))
print(f"\nBoundary length: {boundary_length(d):.1f}")

elements = shape_elements([(s.id, store.boundary_path(s.id)) for s in store.shapes()], store.selected_id)
with open("demo_sketch.svg", "w") as f:
    f.write(serialize_svg(elements, viewbox=(0, 0, 900, 700), title="DuctSketch demo"))
print("Wrote demo_sketch.svg")
