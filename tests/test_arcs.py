from __future__ import annotations

import math

import pytest

from ringplot import (
    Arc,
    ArcOfer,
    ArcOverflowError,
    Arcer,
    CLOCKWISE,
    COMPLETE,
    GappedArcs,
    InvalidRangeError,
    NotFoundError,
    Orientation,
    RenderConfig,
    Segment,
    gap_count,
    get_render_config,
    set_render_config,
)


def _segments(*lengths):
    return [Segment(f"s{idx}", 0, length) for idx, length in enumerate(lengths)]


def test_arc_rejects_extent_beyond_complete_turn() -> None:
    with pytest.raises(InvalidRangeError):
        Arc(0.0, COMPLETE * 1.01)


def test_arc_closed_in_either_direction() -> None:
    assert Arc(0.0, COMPLETE).is_closed()
    assert Arc(1.0, CLOCKWISE * COMPLETE).is_closed()
    assert not Arc(0.0, math.pi).is_closed()


def test_arc_is_its_own_arcer() -> None:
    arc = Arc(0.5, 1.0)

    assert arc.arc() is arc
    assert arc.end == pytest.approx(1.5)
    assert isinstance(arc, Arcer)
    assert not isinstance(arc, ArcOfer)


@pytest.mark.parametrize("n, closed, expected", [(0, True, 0), (1, True, 1), (1, False, 0), (4, False, 3), (4, True, 4)])
def test_gap_count(n: int, closed: bool, expected: int) -> None:
    assert gap_count(n, closed) == expected


@pytest.mark.parametrize(
    "base",
    [
        Arc(0.0, COMPLETE),
        Arc(1.0, -COMPLETE),
        Arc(0.5, math.pi),
        Arc(-1.0, -2.0),
    ],
)
def test_extents_and_gaps_fill_the_base(base: Arc) -> None:
    features = _segments(10, 20, 30, 40, 5)
    gap = 0.01

    layout = GappedArcs(base, features, gap)

    extents = [abs(arc.phi) for _, arc in layout.arcs()]
    gaps = gap_count(len(features), base.is_closed())
    assert sum(extents) + gaps * gap == pytest.approx(abs(base.phi), abs=1e-9)
    for _, arc in layout.arcs():
        assert math.copysign(1.0, arc.phi) == math.copysign(1.0, base.phi)


def test_two_features_on_closed_ring() -> None:
    features = _segments(100, 100)
    gap = COMPLETE / 360

    layout = GappedArcs(Arc(0.0, COMPLETE), features, gap)

    first = layout.arc_of(None, features[0])
    second = layout.arc_of(None, features[1])
    extent = (COMPLETE - 2 * gap) / 2
    assert first.theta == 0.0
    assert first.phi == pytest.approx(extent)
    assert second.phi == pytest.approx(extent)
    assert second.theta == pytest.approx(extent + gap)


def test_single_feature_on_open_arc_takes_whole_span() -> None:
    (feature,) = _segments(1000)

    layout = GappedArcs(Arc(0.25, 1.5), [feature], 0.2)

    arc = layout.arc_of(None, feature)
    assert arc.theta == pytest.approx(0.25)
    assert arc.phi == pytest.approx(1.5)


def test_single_feature_on_closed_ring_reserves_one_gap() -> None:
    (feature,) = _segments(1000)

    layout = GappedArcs(Arc(0.0, COMPLETE), [feature], 0.2)

    assert layout.arc_of(None, feature).phi == pytest.approx(COMPLETE - 0.2)


def test_clockwise_layout_steps_backwards() -> None:
    features = _segments(1, 1)

    layout = GappedArcs(Arc(math.pi / 2, -math.pi), features, 0.0)

    first, second = (arc for _, arc in layout.arcs())
    assert first.theta == pytest.approx(math.pi / 2)
    assert first.phi == pytest.approx(-math.pi / 2)
    assert second.theta == pytest.approx(0.0, abs=1e-12)
    assert second.phi == pytest.approx(-math.pi / 2)


def test_closed_ring_starts_wrap_into_one_turn() -> None:
    features = _segments(1, 1)

    layout = GappedArcs(Arc(3 * math.pi / 2, COMPLETE), features, 0.0)

    starts = [arc.theta for _, arc in layout.arcs()]
    assert starts[0] == pytest.approx(3 * math.pi / 2)
    assert starts[1] == pytest.approx(math.pi / 2)
    assert all(0.0 <= start < COMPLETE for start in starts)


def test_gaps_exceeding_span_overflow() -> None:
    with pytest.raises(ArcOverflowError):
        GappedArcs(Arc(0.0, 0.1), _segments(1, 1, 1), 0.1)


def test_gaps_exactly_filling_ring_leave_no_budget() -> None:
    features = _segments(1, 2)

    layout = GappedArcs(Arc(0.0, COMPLETE), features, COMPLETE / 2)

    assert [arc.phi for _, arc in layout.arcs()] == pytest.approx([0.0, 0.0], abs=1e-12)


def test_inverted_feature_is_rejected() -> None:
    with pytest.raises(InvalidRangeError):
        GappedArcs(Arc(0.0, COMPLETE), [Segment("bad", 10, 5)], 0.0)


def test_negative_gap_is_rejected() -> None:
    with pytest.raises(InvalidRangeError):
        GappedArcs(Arc(0.0, COMPLETE), _segments(1), -0.1)


def test_empty_feature_set_gives_empty_lookup() -> None:
    layout = GappedArcs(Arc(0.0, COMPLETE), [], 0.1)

    assert len(layout) == 0
    assert layout.arcs() == []
    assert layout.arc() == Arc(0.0, COMPLETE)
    with pytest.raises(NotFoundError):
        layout.arc_of(None, Segment("missing", 0, 1))


def test_zero_length_features_keep_their_gaps() -> None:
    features = _segments(0, 10, 10)

    layout = GappedArcs(Arc(0.0, 1.0), features, 0.1)

    arcs = [arc for _, arc in layout.arcs()]
    assert [arc.phi for arc in arcs] == pytest.approx([0.0, 0.4, 0.4])
    assert [arc.theta for arc in arcs] == pytest.approx([0.0, 0.1, 0.6])


def test_all_zero_length_features_get_zero_extent() -> None:
    layout = GappedArcs(Arc(0.0, 1.0), _segments(0, 0), 0.1)

    assert [arc.phi for _, arc in layout.arcs()] == [0.0, 0.0]


def test_extents_follow_feature_lengths() -> None:
    layout = GappedArcs(Arc(0.0, COMPLETE), _segments(1, 2, 3, 4), 0.05)

    extents = [arc.phi for _, arc in layout.arcs()]
    assert extents == sorted(extents)
    assert extents[1] == pytest.approx(2 * extents[0])


def test_layout_keeps_caller_order() -> None:
    features = _segments(30, 10, 20)

    layout = GappedArcs(Arc(0.0, 1.0), features, 0.0)

    starts = [arc.theta for _, arc in layout.arcs()]
    assert [f for f, _ in layout.arcs()] == features
    assert starts == sorted(starts)


def test_lookup_is_idempotent() -> None:
    chrom = Segment("chr", 0, 100)
    gene = Segment("gene", 20, 30, location=chrom)
    layout = GappedArcs(Arc(0.0, COMPLETE), [chrom], 0.1)

    assert layout.arc_of(None, chrom) is layout.arc_of(None, chrom)
    assert layout.arc_of(chrom, gene) is layout.arc_of(chrom, gene)


def test_equal_features_are_distinct_blocks() -> None:
    first = Segment("dup", 0, 10)
    second = Segment("dup", 0, 10)

    layout = GappedArcs(Arc(0.0, 1.0), [first, second], 0.0)

    assert layout.arc_of(None, first).theta != layout.arc_of(None, second).theta


def test_location_arc_and_feature_sub_arc() -> None:
    chrom = Segment("chr", 0, 100)
    gene = Segment("gene", 25, 50, location=chrom)
    layout = GappedArcs(Arc(0.0, 1.0), [chrom], 0.0)

    assert layout.arc_of(chrom, None) == Arc(0.0, 1.0)
    assert layout.arc_of(chrom, chrom) == Arc(0.0, 1.0)
    sub = layout.arc_of(chrom, gene)
    assert sub.theta == pytest.approx(0.25)
    assert sub.phi == pytest.approx(0.25)
    assert layout.arc_of(gene, None) == sub


def test_reverse_location_measures_from_its_end() -> None:
    chrom = Segment("chr", 0, 100, orientation=Orientation.REVERSE)
    gene = Segment("gene", 25, 50, location=chrom)
    layout = GappedArcs(Arc(0.0, 1.0), [chrom], 0.0)

    sub = layout.arc_of(chrom, gene)

    assert sub.theta == pytest.approx(0.5)
    assert sub.phi == pytest.approx(0.25)


def test_nested_locations_resolve_through_parents() -> None:
    chrom = Segment("chr", 0, 100)
    gene = Segment("gene", 25, 50, location=chrom)
    exon = Segment("exon", 30, 40, location=gene)
    layout = GappedArcs(Arc(0.0, 1.0), [chrom], 0.0)

    arc = layout.arc_of(gene, exon)

    assert arc.theta == pytest.approx(0.30)
    assert arc.phi == pytest.approx(0.10)
    assert layout.arc_of(exon, None) == arc


def test_laid_out_feature_uses_its_own_arc() -> None:
    chrom = Segment("chr", 0, 100)
    genes = [Segment("a", 0, 10, location=chrom), Segment("b", 50, 80, location=chrom)]
    layout = GappedArcs(Arc(0.0, 1.0), genes, 0.1)

    assert layout.arc_of(chrom, genes[1]) is layout.arc_of(None, genes[1])
    with pytest.raises(NotFoundError):
        layout.arc_of(chrom, None)


def test_unknown_location_is_not_found() -> None:
    layout = GappedArcs(Arc(0.0, COMPLETE), _segments(10), 0.1)

    with pytest.raises(NotFoundError):
        layout.arc_of(Segment("elsewhere", 0, 10), None)
    with pytest.raises(LookupError):
        layout.arc_of(None, None)


def test_gapped_arcs_satisfies_arcofer() -> None:
    layout = GappedArcs(Arc(0.0, COMPLETE), _segments(10), 0.1)

    assert isinstance(layout, ArcOfer)
    assert _segments(1)[0] not in layout


def test_transient_sub_features_get_their_own_arcs() -> None:
    chrom = Segment("chr", 0, 1000)
    layout = GappedArcs(Arc(0.0, 1.0), [chrom], 0.0)

    for start in range(200):
        gene = Segment("g", start, start + 5, location=chrom)
        arc = layout.arc_of(chrom, gene)
        assert arc.theta == pytest.approx(start / 1000)
        assert arc.phi == pytest.approx(0.005)
        del gene


def test_closed_tolerance_follows_render_config() -> None:
    previous = get_render_config()
    try:
        set_render_config(RenderConfig(closed_tolerance=1e-3))
        assert Arc(0.0, COMPLETE - 1e-4).is_closed()
    finally:
        set_render_config(previous)

    assert not Arc(0.0, COMPLETE - 1e-4).is_closed()
