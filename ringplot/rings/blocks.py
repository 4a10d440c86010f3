"""Features rendered as annular blocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..arcs import Arc, Arcer, ArcOfer, GappedArcs
from ..canvas import Canvas, Path
from ..errors import RenderError
from ..features import Feature, FillColorer, LineStyler
from ..geometry import Angle, Point, rectangular
from ..styles import Color, GlyphBox, LineStyle, square_glyph_box
from ..validate import resolves_all, validate_features, validate_radii

logger = logging.getLogger(__name__)


@dataclass
class Blocks:
    """Render each feature as an annular sector between ``inner`` and ``outer``.

    ``color`` fills every block and ``line_style`` strokes it, unless the
    feature provides its own fill colour (:class:`FillColorer`) or line style
    (:class:`LineStyler`).
    """

    features: List[Feature]
    base: ArcOfer
    inner: float
    outer: float
    color: Optional[Color] = None
    line_style: LineStyle = field(default_factory=LineStyle)
    x: float = 0.0
    y: float = 0.0

    def draw_at(self, canvas: Canvas, center: Point) -> None:
        for feature in self.features:
            try:
                arc = self.base.arc_of(feature.location, feature)
            except LookupError as exc:
                raise RenderError(f"no arc for feature location: {exc}") from exc

            path = sector_path(center, arc, self.inner, self.outer)

            if isinstance(feature, FillColorer):
                fill = feature.fill_color()
            else:
                fill = self.color
            if fill is not None:
                canvas.set_color(fill)
                canvas.fill(path)

            if isinstance(feature, LineStyler):
                style = feature.line_style()
            else:
                style = self.line_style
            if style.is_visible():
                canvas.set_line_style(style)
                canvas.stroke(path)

    def xy(self):
        return self.x, self.y

    def arc(self) -> Arc:
        return self.base.arc()

    def arc_of(self, location: Optional[Feature], feature: Optional[Feature]) -> Arc:
        return self.base.arc_of(location, feature)

    def glyph_boxes(self) -> List[GlyphBox]:
        return [square_glyph_box(self.x, self.y, self.outer)]


def sector_path(center: Point, arc: Arc, inner: float, outer: float) -> Path:
    """Return the closed outline of the annular sector covering ``arc``."""

    path = Path()
    start = center + rectangular(arc.theta, inner)
    path.move(start.x, start.y)
    path.arc(center.x, center.y, inner, arc.theta, arc.phi)
    path.arc(center.x, center.y, outer, arc.end, -arc.phi)
    path.close()
    return path


def new_blocks(
    features: Sequence[Feature], base: ArcOfer, inner: float, outer: float
) -> Blocks:
    """Return a :class:`Blocks` after checking every feature can be rendered."""

    validate_radii(inner, outer)
    validate_features(features, base)
    logger.debug("Validated %d block feature(s)", len(features))
    return Blocks(features=list(features), base=base, inner=inner, outer=outer)


def new_gapped_blocks(
    features: Sequence[Feature], base: Arcer, inner: float, outer: float, gap: Angle
) -> Blocks:
    """Like :func:`new_blocks`, laying the features out over ``base`` when needed.

    A ``base`` that already reports an arc for every feature is reused as is.
    """

    validate_radii(inner, outer)
    if isinstance(base, ArcOfer) and resolves_all(base, features):
        layout: ArcOfer = base
    else:
        logger.info("Building gapped layout for %d feature(s)", len(features))
        layout = GappedArcs(base, features, gap)
    return new_blocks(features, layout, inner, outer)
