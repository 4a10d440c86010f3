from . import (
    Arc,
    COMPLETE,
    GappedArcs,
    Orientation,
    Point,
    RecordingCanvas,
    Segment,
    degrees,
    from_degrees,
    new_blocks,
    new_highlight,
)
from .__main__ import LayoutOptions, build_plot

CONTIGS = [
    ("chr1", 0, 248_956_422),
    ("chr2", 0, 242_193_529),
    ("chr3", 0, 198_295_559),
    ("chrX", 0, 156_040_895),
]

GENES = [
    ("gene1", "chr1", 1_000_000, 30_000_000, Orientation.FORWARD),
    ("gene2", "chrX", 5_000_000, 9_000_000, Orientation.REVERSE),
]


def run():
    contigs = [Segment(name, start, end) for name, start, end in CONTIGS]
    layout = GappedArcs(Arc(0.0, COMPLETE), contigs, from_degrees(2))
    print("Layout:")
    for feature, arc in layout.arcs():
        print(f"  {feature.name}: start={degrees(arc.theta):.3f} extent={degrees(arc.phi):.3f}")

    center = Point(0.0, 0.0)
    canvas = RecordingCanvas()
    blocks = new_blocks(contigs, layout, 80, 100)
    blocks.color = (70, 130, 180)
    blocks.draw_at(canvas, center)
    new_highlight((255, 0, 0), Arc(0.0, COMPLETE), 100, 104).draw_at(canvas, center)
    print(f"Recorded {len(canvas.actions)} canvas action(s)")

    plot, _, _ = build_plot(
        contigs,
        GENES,
        [(10.0, 40.0)],
        LayoutOptions(axis_degrees=90.0),
        title="Demo genome",
    )
    print(plot.to_tikz())


if __name__ == "__main__":
    run()
