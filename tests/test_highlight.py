import pytest

from ringplot import (
    Arc,
    CLOCKWISE,
    COMPLETE,
    Highlight,
    InvalidRangeError,
    LineStyle,
    Point,
    RecordingCanvas,
    TikzCanvas,
    new_highlight,
    rectangular,
)


def test_full_turn_highlight_starts_outer_ring_as_new_subpath() -> None:
    highlight = new_highlight((200, 0, 0), Arc(0.5, COMPLETE), 50, 60)
    canvas = RecordingCanvas()

    highlight.draw_at(canvas, Point(0.0, 0.0))

    path = canvas.last("fill")[1]
    assert path.kinds() == ["move", "arc", "move", "arc", "close"]
    reanchor = path.components[2]
    end = rectangular(0.5 + COMPLETE, 60)
    assert (reanchor.x, reanchor.y) == pytest.approx((end.x, end.y))


@pytest.mark.parametrize("phi", [COMPLETE, CLOCKWISE * COMPLETE])
def test_full_turn_highlight_renders_without_seam(phi: float) -> None:
    highlight = new_highlight((200, 0, 0), Arc(0.0, phi), 50, 60)
    canvas = TikzCanvas()

    highlight.draw_at(canvas, Point(0.0, 0.0))

    (line,) = canvas.lines
    assert line.count("arc[") == 2
    assert "-- (" not in line
    assert line.endswith("-- cycle;")


def test_partial_highlight_joins_inner_and_outer_arcs() -> None:
    highlight = new_highlight((0, 0, 200), Arc(0.0, COMPLETE / 4), 50, 60)
    recording = RecordingCanvas()
    tikz = TikzCanvas()

    highlight.draw_at(recording, Point(0.0, 0.0))
    highlight.draw_at(tikz, Point(0.0, 0.0))

    assert recording.last("fill")[1].kinds() == ["move", "arc", "arc", "close"]
    assert "-- (" in tikz.lines[0]


def test_highlight_strokes_with_line_style() -> None:
    highlight = Highlight(base=Arc(0.0, 1.0), inner=1, outer=2, line_style=LineStyle(color=(0, 0, 0), width=1))
    canvas = RecordingCanvas()

    highlight.draw_at(canvas, Point(0.0, 0.0))

    assert [action[0] for action in canvas.actions] == ["line_style", "stroke"]


def test_invisible_highlight_draws_nothing() -> None:
    highlight = Highlight(base=Arc(0.0, 1.0), inner=1, outer=2, line_style=LineStyle(color=(0, 0, 0)))
    canvas = RecordingCanvas()

    highlight.draw_at(canvas, Point(0.0, 0.0))

    assert canvas.actions == []


def test_new_highlight_rejects_inverted_radii() -> None:
    with pytest.raises(InvalidRangeError):
        new_highlight((0, 0, 0), Arc(0.0, 1.0), 10, 5)


def test_highlight_exposes_its_arc() -> None:
    base = Arc(0.25, 0.5)
    highlight = new_highlight(None, base, 1, 2)

    assert highlight.arc() is base
    assert highlight.glyph_boxes()[0].width == 4
