"""Composition of ring primitives into a single picture."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

from .canvas import Canvas
from .geometry import Point
from .styles import GlyphBox
from .tikz_canvas import TikzCanvas, generate_tikz_document

logger = logging.getLogger(__name__)


class Drawer(Protocol):
    def draw_at(self, canvas: Canvas, center: Point) -> None:
        ...

    def xy(self) -> Tuple[float, float]:
        ...

    def glyph_boxes(self) -> List[GlyphBox]:
        ...


@dataclass
class RingPlot:
    """Ordered collection of primitives drawn around their own ``(x, y)``.

    Items are drawn in insertion order, so later rings paint over earlier
    ones.
    """

    title: Optional[str] = None
    items: List[Drawer] = field(default_factory=list)

    def add(self, *items: Drawer) -> None:
        self.items.extend(items)

    def bounding_box(self) -> Tuple[float, float, float, float]:
        """Return ``(min_x, min_y, max_x, max_y)`` covering every glyph box."""

        bounds = [box.bounds for item in self.items for box in item.glyph_boxes()]
        if not bounds:
            return (0.0, 0.0, 0.0, 0.0)
        return (
            min(b[0] for b in bounds),
            min(b[1] for b in bounds),
            max(b[2] for b in bounds),
            max(b[3] for b in bounds),
        )

    def draw(self, canvas: Canvas) -> None:
        for item in self.items:
            x, y = item.xy()
            item.draw_at(canvas, Point(x, y))

    def to_tikz(self, precision: Optional[int] = None) -> str:
        canvas = TikzCanvas(precision=precision)
        self.draw(canvas)
        return canvas.code()

    def to_tikz_document(self, precision: Optional[int] = None) -> str:
        canvas = TikzCanvas(precision=precision)
        self.draw(canvas)
        logger.info("Rendered %d ring item(s) into %d TikZ command(s)", len(self.items), len(canvas.lines))
        return generate_tikz_document(canvas, caption=self.title)
