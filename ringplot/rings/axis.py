"""Radial value axis with ticks, tick labels and grid arcs."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..arcs import Arc, ArcOfer
from ..canvas import Canvas, Path
from ..errors import InvalidRangeError, RenderError
from ..features import Feature
from ..geometry import COMPLETE, Angle, Point, normalize, rectangular
from ..styles import GlyphBox, LineStyle, Marker, TextStyle, Tick, default_ticks, square_glyph_box
from ..validate import validate_radii

logger = logging.getLogger(__name__)

# (rotation, xalign, yalign) for text anchored at a given angle.
TextPlacement = Callable[[Angle], Tuple[Angle, float, float]]


def default_placement(angle: Angle) -> Tuple[Angle, float, float]:
    """Keep text parallel to the radius at ``angle`` and the right way up.

    Text on the right half of the circle reads outwards from its anchor;
    on the left half it is turned half a revolution and right aligned so
    it still extends outwards.
    """

    n = normalize(angle)
    if n <= COMPLETE / 4 or n > 3 * COMPLETE / 4:
        return n, 0.0, -0.5
    return n - COMPLETE / 2, -1.0, -0.5


@dataclass
class AxisLabel:
    text: str = ""
    style: TextStyle = field(default_factory=TextStyle)
    # Uses default_placement when unset.
    placement: Optional[TextPlacement] = None


@dataclass
class TickConfig:
    label: TextStyle = field(default_factory=TextStyle)
    line_style: LineStyle = field(default_factory=LineStyle)
    placement: Optional[TextPlacement] = None
    # Major tick length; minor ticks are half as long.
    length: float = 0.0
    marker: Marker = default_ticks


@dataclass
class Axis:
    """Radial axis of a ring of scored features."""

    angle: Angle = 0.0
    label: AxisLabel = field(default_factory=AxisLabel)
    line_style: LineStyle = field(default_factory=LineStyle)
    tick: TickConfig = field(default_factory=TickConfig)
    grid: LineStyle = field(default_factory=LineStyle)

    def draw_at(
        self,
        canvas: Canvas,
        center: Point,
        features: Sequence[Feature],
        base: ArcOfer,
        inner: float,
        outer: float,
        min_value: float,
        max_value: float,
    ) -> None:
        """Draw the axis for values in ``[min_value, max_value]`` between two radii.

        Grid arcs span every distinct location of ``features`` as reported
        by ``base``, so they line up with blocks drawn against the same base.
        """

        if not max_value > min_value:
            raise InvalidRangeError(f"invalid axis range [{min_value!r}, {max_value!r}]")
        scale = (outer - inner) / (max_value - min_value)

        def radius_of(value: float) -> float:
            return (value - min_value) * scale + inner

        marks: Optional[List[Tick]] = None

        if self.grid.is_visible():
            marks = self.tick.marker(min_value, max_value)
            canvas.set_line_style(self.grid)
            for loc in _distinct_locations(features):
                try:
                    arc = base.arc_of(loc, None)
                except LookupError as exc:
                    raise RenderError(f"no arc for feature location: {exc}") from exc
                for mark in marks:
                    if not min_value <= mark.value <= max_value:
                        continue
                    radius = radius_of(mark.value)
                    path = Path()
                    start = center + rectangular(arc.theta, radius)
                    path.move(start.x, start.y)
                    path.arc(center.x, center.y, radius, arc.theta, arc.phi)
                    canvas.stroke(path)

        if self.line_style.is_visible():
            path = Path()
            start = center + rectangular(self.angle, inner)
            end = center + rectangular(self.angle, outer)
            path.move(start.x, start.y)
            path.line(end.x, end.y)
            canvas.set_line_style(self.line_style)
            canvas.stroke(path)

        if self.tick.line_style.is_visible() and self.tick.length != 0:
            canvas.set_line_style(self.tick.line_style)
            if marks is None:
                marks = self.tick.marker(min_value, max_value)
            for mark in marks:
                if not min_value <= mark.value <= max_value:
                    continue
                length = self.tick.length / 2 if mark.is_minor() else self.tick.length
                off = rectangular(self.angle + COMPLETE / 4, length)
                at = center + rectangular(self.angle, radius_of(mark.value))
                path = Path()
                path.move(at.x, at.y)
                path.line(at.x + off.x, at.y + off.y)
                canvas.stroke(path)

                if mark.is_minor() or self.tick.label.color is None:
                    continue
                _place_text(
                    canvas,
                    self.tick.placement,
                    self.angle,
                    Point(at.x + 2 * off.x, at.y + 2 * off.y),
                    self.tick.label,
                    mark.label,
                )

        if self.label.text and self.label.style.color is not None:
            at = center + rectangular(self.angle, (inner + outer) / 2)
            _place_text(canvas, self.label.placement, self.angle, at, self.label.style, self.label.text)


def _distinct_locations(features: Sequence[Feature]) -> List[Feature]:
    seen: Dict[int, Feature] = {}
    for feature in features:
        loc = feature.location if feature.location is not None else feature
        seen.setdefault(id(loc), loc)
    return list(seen.values())


def _place_text(
    canvas: Canvas,
    placement: Optional[TextPlacement],
    angle: Angle,
    at: Point,
    style: TextStyle,
    text: str,
) -> None:
    rotation, xalign, yalign = (placement or default_placement)(angle)
    if rotation != 0:
        canvas.push()
        canvas.translate(at.x, at.y)
        canvas.rotate(rotation)
        canvas.translate(-at.x, -at.y)
        canvas.fill_text(style, at.x, at.y, xalign, yalign, text)
        canvas.pop()
    else:
        canvas.fill_text(style, at.x, at.y, xalign, yalign, text)


@dataclass
class AxisTrack:
    """An :class:`Axis` bound to the ring of features it measures."""

    axis: Axis
    features: List[Feature]
    base: ArcOfer
    inner: float
    outer: float
    min_value: float
    max_value: float
    x: float = 0.0
    y: float = 0.0

    def draw_at(self, canvas: Canvas, center: Point) -> None:
        self.axis.draw_at(
            canvas,
            center,
            self.features,
            self.base,
            self.inner,
            self.outer,
            self.min_value,
            self.max_value,
        )

    def xy(self):
        return self.x, self.y

    def arc(self) -> Arc:
        return self.base.arc()

    def arc_of(self, location: Optional[Feature], feature: Optional[Feature]) -> Arc:
        return self.base.arc_of(location, feature)

    def glyph_boxes(self) -> List[GlyphBox]:
        return [square_glyph_box(self.x, self.y, self.outer)]


def new_axis_track(
    axis: Axis,
    features: Sequence[Feature],
    base: ArcOfer,
    inner: float,
    outer: float,
    min_value: float,
    max_value: float,
) -> AxisTrack:
    """Return an :class:`AxisTrack` after checking the value range and locations."""

    validate_radii(inner, outer)
    if not (math.isfinite(min_value) and math.isfinite(max_value)) or max_value <= min_value:
        raise InvalidRangeError(f"invalid axis range [{min_value!r}, {max_value!r}]")
    for loc in _distinct_locations(features):
        base.arc_of(loc, None)
    logger.debug("Axis track validated over %d feature(s)", len(features))
    return AxisTrack(
        axis=axis,
        features=list(features),
        base=base,
        inner=inner,
        outer=outer,
        min_value=min_value,
        max_value=max_value,
    )
