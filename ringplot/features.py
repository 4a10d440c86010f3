"""Feature contract consumed by the layout engine.

Features are read-only inputs. Any object exposing ``start``, ``end`` and
``location`` attributes can be laid out; ``orientation`` is optional. The
layout keys features by identity, so two equal-looking features are still
two distinct blocks.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from .styles import Color, LineStyle


class Orientation(enum.IntEnum):
    REVERSE = -1
    NOT_ORIENTED = 0
    FORWARD = 1


class Feature(Protocol):
    start: float
    end: float
    location: Optional["Feature"]


@runtime_checkable
class FillColorer(Protocol):
    """Feature capability overriding the fill colour of its block."""

    def fill_color(self) -> Optional[Color]:
        ...


@runtime_checkable
class LineStyler(Protocol):
    """Feature capability overriding the line style of its block."""

    def line_style(self) -> LineStyle:
        ...


def feature_length(feature: Feature) -> float:
    return feature.end - feature.start


def orientation_of(feature: object) -> Orientation:
    value = getattr(feature, "orientation", None)
    if value is None:
        return Orientation.NOT_ORIENTED
    return Orientation(value)


def _is_orientable(feature: object) -> bool:
    return getattr(feature, "orientation", None) is not None


def global_orientation(feature: Feature) -> Orientation:
    """Return the orientation of ``feature`` composed with its orientable ancestors."""

    value = int(orientation_of(feature))
    parent = feature.location
    while parent is not None and _is_orientable(parent):
        value *= int(orientation_of(parent))
        parent = parent.location
    return Orientation(value)


@dataclass(eq=False)
class Segment:
    """A named linear interval, optionally nested in a parent location."""

    name: str
    start: float
    end: float
    location: Optional[Feature] = None
    orientation: Orientation = Orientation.NOT_ORIENTED

    @property
    def length(self) -> float:
        return self.end - self.start

    def __repr__(self) -> str:
        return f"Segment({self.name!r}, {self.start!r}, {self.end!r})"


@dataclass(eq=False, repr=False)
class StyledSegment(Segment):
    """A segment carrying its own fill colour and line style."""

    fill: Optional[Color] = None
    stroke: LineStyle = LineStyle()

    def fill_color(self) -> Optional[Color]:
        return self.fill

    def line_style(self) -> LineStyle:
        return self.stroke


__all__ = [
    "Orientation",
    "Feature",
    "FillColorer",
    "LineStyler",
    "feature_length",
    "orientation_of",
    "global_orientation",
    "Segment",
    "StyledSegment",
]
