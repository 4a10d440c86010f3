from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..arcs import Arc
from ..canvas import Canvas, Path
from ..geometry import Point, rectangular
from ..styles import Color, GlyphBox, LineStyle, square_glyph_box
from ..validate import validate_radii


@dataclass
class Highlight:
    """A single coloured band over a fixed arc."""

    base: Arc
    inner: float
    outer: float
    color: Optional[Color] = None
    line_style: LineStyle = field(default_factory=LineStyle)
    x: float = 0.0
    y: float = 0.0

    def path(self, center: Point) -> Path:
        path = Path()
        start = center + rectangular(self.base.theta, self.inner)
        path.move(start.x, start.y)
        path.arc(center.x, center.y, self.inner, self.base.theta, self.base.phi)
        if self.base.is_closed():
            # Start the outer ring as its own subpath so no radial seam joins the two circles.
            end = center + rectangular(self.base.end, self.outer)
            path.move(end.x, end.y)
        path.arc(center.x, center.y, self.outer, self.base.end, -self.base.phi)
        path.close()
        return path

    def draw_at(self, canvas: Canvas, center: Point) -> None:
        if self.color is None and not self.line_style.is_visible():
            return
        path = self.path(center)
        if self.color is not None:
            canvas.set_color(self.color)
            canvas.fill(path)
        if self.line_style.is_visible():
            canvas.set_line_style(self.line_style)
            canvas.stroke(path)

    def xy(self):
        return self.x, self.y

    def arc(self) -> Arc:
        return self.base

    def glyph_boxes(self) -> List[GlyphBox]:
        return [square_glyph_box(self.x, self.y, self.outer)]


def new_highlight(color: Optional[Color], base: Arc, inner: float, outer: float) -> Highlight:
    validate_radii(inner, outer)
    return Highlight(base=base, inner=inner, outer=outer, color=color)
