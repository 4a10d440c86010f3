"""Colours, line and text styles, and axis tick marks."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union

# RGB or RGBA, each channel in 0..255.
Color = Union[Tuple[int, int, int], Tuple[int, int, int, int]]

BLACK: Color = (0, 0, 0)
GRAY: Color = (128, 128, 128)
LIGHT_GRAY: Color = (211, 211, 211)

SUGGESTED_TICKS = 3


@dataclass(frozen=True)
class LineStyle:
    """Stroke description. A style without colour or width draws nothing."""

    color: Optional[Color] = None
    width: float = 0.0
    dashes: Tuple[float, ...] = ()
    dash_offset: float = 0.0

    def is_visible(self) -> bool:
        return self.color is not None and self.width != 0


@dataclass(frozen=True)
class TextStyle:
    color: Optional[Color] = None
    font: str = ""
    size: float = 8.0


@dataclass(frozen=True)
class Tick:
    """A tick mark; ticks without a label are minor."""

    value: float
    label: str = ""

    def is_minor(self) -> bool:
        return self.label == ""


Marker = Callable[[float, float], List[Tick]]


def _format_tick(value: float) -> str:
    if value == 0.0:
        return "0"
    return f"{value:g}"


def default_ticks(min_value: float, max_value: float) -> List[Tick]:
    """Return labelled major ticks and unlabelled minor ticks for ``[min, max]``."""

    if max_value < min_value:
        raise ValueError("illegal tick range: max < min")
    if max_value == min_value:
        return [Tick(min_value, _format_tick(min_value))]

    span = max_value - min_value
    tens = 10.0 ** math.floor(math.log10(span))
    n = span / tens
    while n < SUGGESTED_TICKS:
        tens /= 10.0
        n = span / tens

    major_mult = int(n / SUGGESTED_TICKS)
    if major_mult == 7:
        major_mult = 6
    elif major_mult == 9:
        major_mult = 8
    major_delta = major_mult * tens

    ticks: List[Tick] = []
    majors = set()
    # Index based stepping keeps repeated additions from drifting off the grid.
    first = math.floor(min_value / major_delta)
    k = 0
    while True:
        value = (first + k) * major_delta
        if value > max_value:
            break
        if value >= min_value:
            ticks.append(Tick(value, _format_tick(value)))
            majors.add(round(value / tens, 9))
        k += 1

    if major_mult in (3, 6):
        minor_delta = major_delta / 3
    elif major_mult == 5:
        minor_delta = major_delta / 5
    else:
        minor_delta = major_delta / 2

    first = math.floor(min_value / minor_delta)
    k = 0
    while True:
        value = (first + k) * minor_delta
        if value > max_value:
            break
        if value >= min_value and round(value / tens, 9) not in majors:
            ticks.append(Tick(value))
        k += 1
    return ticks


@dataclass
class GlyphBox:
    """Liberal bounding square of a primitive, relative to its ``(x, y)``."""

    x: float
    y: float
    min_x: float
    min_y: float
    width: float
    height: float

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        left = self.x + self.min_x
        bottom = self.y + self.min_y
        return (left, bottom, left + self.width, bottom + self.height)


def square_glyph_box(x: float, y: float, outer: float) -> GlyphBox:
    return GlyphBox(x=x, y=y, min_x=-outer, min_y=-outer, width=2 * outer, height=2 * outer)


__all__ = [
    "Color",
    "BLACK",
    "GRAY",
    "LIGHT_GRAY",
    "LineStyle",
    "TextStyle",
    "Tick",
    "Marker",
    "default_ticks",
    "GlyphBox",
    "square_glyph_box",
]
