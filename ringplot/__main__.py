import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from ringplot import (
    Arc,
    Axis,
    AxisLabel,
    CLOCKWISE,
    COUNTER_CLOCKWISE,
    GappedArcs,
    Highlight,
    LineStyle,
    Orientation,
    RingPlot,
    RingsError,
    Segment,
    StyledSegment,
    TextStyle,
    TickConfig,
    degrees,
    from_degrees,
    new_axis_track,
    new_blocks,
    new_highlight,
)
from ringplot.styles import BLACK, GRAY, LIGHT_GRAY

logger = logging.getLogger(__name__)

BLOCK_COLOR = (70, 130, 180)
GENE_COLORS = {
    Orientation.FORWARD: (178, 34, 34),
    Orientation.REVERSE: (34, 139, 34),
    Orientation.NOT_ORIENTED: (128, 128, 128),
}
HIGHLIGHT_COLOR = (255, 215, 0, 96)


@dataclass
class LayoutOptions:
    gap_degrees: float = 1.0
    start_degrees: float = 90.0
    span_degrees: float = 360.0
    clockwise: bool = True
    inner: float = 80.0
    outer: float = 100.0
    axis_degrees: Optional[float] = None
    axis_max: float = 100.0


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_contig(value: str) -> Segment:
    parts = value.split(":")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"contig must be NAME:START:END, got {value!r}")
    name, start, end = parts
    try:
        return Segment(name.strip(), float(start), float(end))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid contig coordinates in {value!r}") from exc


def _parse_gene(value: str) -> Tuple[str, str, float, float, Orientation]:
    parts = value.split(":")
    if len(parts) not in (4, 5):
        raise argparse.ArgumentTypeError(
            f"gene must be NAME:CONTIG:START:END[:+|-], got {value!r}"
        )
    strand = Orientation.NOT_ORIENTED
    if len(parts) == 5:
        strand = {"+": Orientation.FORWARD, "-": Orientation.REVERSE}.get(parts[4].strip())
        if strand is None:
            raise argparse.ArgumentTypeError(f"gene strand must be + or -, got {parts[4]!r}")
    try:
        return parts[0].strip(), parts[1].strip(), float(parts[2]), float(parts[3]), strand
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid gene coordinates in {value!r}") from exc


def _parse_span(value: str) -> Tuple[float, float]:
    try:
        start, end = (float(part) for part in value.split(":"))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"highlight must be START:END in degrees, got {value!r}") from exc
    return start, end


def build_plot(
    contigs: Sequence[Segment],
    genes: Sequence[Tuple[str, str, float, float, Orientation]],
    highlights: Sequence[Tuple[float, float]],
    options: LayoutOptions,
    title: Optional[str] = None,
) -> Tuple[RingPlot, GappedArcs, List[Segment]]:
    """Lay out ``contigs`` and assemble the rings of the picture."""

    direction = CLOCKWISE if options.clockwise else COUNTER_CLOCKWISE
    base = Arc(from_degrees(options.start_degrees), direction * from_degrees(options.span_degrees))
    layout = GappedArcs(base, contigs, from_degrees(options.gap_degrees))

    plot = RingPlot(title=title)
    for start, end in highlights:
        span = Arc(from_degrees(start), from_degrees(end - start))
        plot.add(new_highlight(HIGHLIGHT_COLOR, span, 0.0, options.outer))

    contig_ring = new_blocks(contigs, layout, options.inner, options.outer)
    contig_ring.color = BLOCK_COLOR
    contig_ring.line_style = LineStyle(color=BLACK, width=0.5)
    plot.add(contig_ring)

    by_name: Dict[str, Segment] = {contig.name: contig for contig in contigs}
    gene_features: List[Segment] = []
    for name, contig_name, start, end, strand in genes:
        contig = by_name.get(contig_name)
        if contig is None:
            raise RingsError(f"gene {name!r} refers to unknown contig {contig_name!r}")
        gene_features.append(
            StyledSegment(
                name,
                start,
                end,
                location=contig,
                orientation=strand,
                fill=GENE_COLORS[strand],
            )
        )
    if gene_features:
        width = options.outer - options.inner
        plot.add(
            new_blocks(
                gene_features,
                layout,
                options.inner - width * 0.6,
                options.inner - width * 0.1,
            )
        )

    if options.axis_degrees is not None:
        axis = Axis(
            angle=from_degrees(options.axis_degrees),
            label=AxisLabel(text="score", style=TextStyle(color=BLACK)),
            line_style=LineStyle(color=BLACK, width=0.5),
            tick=TickConfig(
                label=TextStyle(color=BLACK, size=5.0),
                line_style=LineStyle(color=BLACK, width=0.5),
                length=2.0,
            ),
            grid=LineStyle(color=LIGHT_GRAY, width=0.25),
        )
        plot.add(
            new_axis_track(
                axis,
                list(contigs),
                layout,
                options.outer + 5.0,
                options.outer + 30.0,
                0.0,
                options.axis_max,
            )
        )
        plot.add(
            Highlight(
                base=base,
                inner=options.outer + 5.0,
                outer=options.outer + 30.0,
                line_style=LineStyle(color=GRAY, width=0.25),
            )
        )

    return plot, layout, gene_features


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lay out genomic contigs on a ring diagram")
    parser.add_argument(
        "--contig",
        dest="contigs",
        action="append",
        type=_parse_contig,
        default=[],
        help="Contig as NAME:START:END; repeat for each contig, in drawing order",
    )
    parser.add_argument(
        "--gene",
        dest="genes",
        action="append",
        type=_parse_gene,
        default=[],
        help="Gene as NAME:CONTIG:START:END[:+|-], drawn on an inner ring",
    )
    parser.add_argument(
        "--highlight",
        dest="highlights",
        action="append",
        type=_parse_span,
        default=[],
        help="Highlighted span START:END in degrees",
    )
    parser.add_argument("--gap-degrees", type=float, default=1.0, help="Gap between contigs (default: 1)")
    parser.add_argument("--start-degrees", type=float, default=90.0, help="Angle of the first contig (default: 90)")
    parser.add_argument("--span-degrees", type=float, default=360.0, help="Span of the base arc (default: 360)")
    parser.add_argument(
        "--counter-clockwise",
        action="store_true",
        help="Lay contigs out counter-clockwise",
    )
    parser.add_argument("--inner", type=float, default=80.0, help="Inner radius in pt (default: 80)")
    parser.add_argument("--outer", type=float, default=100.0, help="Outer radius in pt (default: 100)")
    parser.add_argument("--axis-degrees", type=float, help="Draw a score axis at this angle")
    parser.add_argument("--axis-max", type=float, default=100.0, help="Upper bound of the score axis")
    parser.add_argument("--title", help="Caption printed above the diagram")
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document to the given path",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if not args.contigs:
        parser.error("at least one --contig is required")

    options = LayoutOptions(
        gap_degrees=args.gap_degrees,
        start_degrees=args.start_degrees,
        span_degrees=args.span_degrees,
        clockwise=not args.counter_clockwise,
        inner=args.inner,
        outer=args.outer,
        axis_degrees=args.axis_degrees,
        axis_max=args.axis_max,
    )

    try:
        plot, layout, genes = build_plot(args.contigs, args.genes, args.highlights, options, title=args.title)
    except RingsError as exc:
        logger.error("Layout failed: %s", exc)
        raise SystemExit(1) from exc

    logger.info("Laid out %d contig(s) and %d gene(s)", len(args.contigs), len(genes))

    print("Arcs (degrees):")
    for feature, arc in layout.arcs():
        print(f"  {feature.name}: start={degrees(arc.theta):.4f} extent={degrees(arc.phi):.4f}")
    for gene in genes:
        arc = layout.arc_of(gene.location, gene)
        print(f"  {gene.name}: start={degrees(arc.theta):.4f} extent={degrees(arc.phi):.4f}")

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        output_path.write_text(plot.to_tikz_document(), encoding="utf-8")
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
