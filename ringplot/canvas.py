"""Drawing contract consumed by the ring primitives.

Ring primitives only build :class:`Path` objects and call the small set of
operations declared by :class:`Canvas`. :class:`RecordingCanvas` keeps every
call as a tuple, which is how rendered output is inspected without a real
backend.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, Tuple

from .geometry import Angle
from .styles import Color, LineStyle, TextStyle


@dataclass(frozen=True)
class PathComponent:
    kind: str  # "move", "line", "arc" or "close"
    x: float = 0.0
    y: float = 0.0
    radius: float = 0.0
    start: Angle = 0.0
    angle: Angle = 0.0


@dataclass
class Path:
    """Sequence of path construction operations."""

    components: List[PathComponent] = field(default_factory=list)

    def move(self, x: float, y: float) -> None:
        self.components.append(PathComponent("move", x, y))

    def line(self, x: float, y: float) -> None:
        self.components.append(PathComponent("line", x, y))

    def arc(self, cx: float, cy: float, radius: float, start: Angle, angle: Angle) -> None:
        """Add an arc centred on ``(cx, cy)`` sweeping ``angle`` from ``start``.

        A straight line joins the current point to the arc start.
        """

        self.components.append(PathComponent("arc", cx, cy, radius, start, angle))

    def close(self) -> None:
        self.components.append(PathComponent("close"))

    def kinds(self) -> List[str]:
        return [c.kind for c in self.components]

    def copy(self) -> "Path":
        return Path(list(self.components))

    def __len__(self) -> int:
        return len(self.components)


class Canvas(Protocol):
    def set_line_style(self, style: LineStyle) -> None:
        ...

    def set_color(self, color: Color) -> None:
        ...

    def fill(self, path: Path) -> None:
        ...

    def stroke(self, path: Path) -> None:
        ...

    def fill_text(
        self, style: TextStyle, x: float, y: float, xalign: float, yalign: float, text: str
    ) -> None:
        ...

    def push(self) -> None:
        ...

    def pop(self) -> None:
        ...

    def translate(self, x: float, y: float) -> None:
        ...

    def rotate(self, angle: Angle) -> None:
        ...


Action = Tuple[Any, ...]


class RecordingCanvas:
    """Canvas that records the calls it receives."""

    def __init__(self) -> None:
        self.actions: List[Action] = []

    def set_line_style(self, style: LineStyle) -> None:
        self.actions.append(("line_style", style))

    def set_color(self, color: Color) -> None:
        self.actions.append(("color", color))

    def fill(self, path: Path) -> None:
        self.actions.append(("fill", path.copy()))

    def stroke(self, path: Path) -> None:
        self.actions.append(("stroke", path.copy()))

    def fill_text(
        self, style: TextStyle, x: float, y: float, xalign: float, yalign: float, text: str
    ) -> None:
        self.actions.append(("text", style, x, y, xalign, yalign, text))

    def push(self) -> None:
        self.actions.append(("push",))

    def pop(self) -> None:
        self.actions.append(("pop",))

    def translate(self, x: float, y: float) -> None:
        self.actions.append(("translate", x, y))

    def rotate(self, angle: Angle) -> None:
        self.actions.append(("rotate", angle))

    def of_kind(self, kind: str) -> List[Action]:
        return [action for action in self.actions if action[0] == kind]

    def last(self, kind: str) -> Optional[Action]:
        matches = self.of_kind(kind)
        return matches[-1] if matches else None

    def reset(self) -> None:
        self.actions = []


__all__ = ["PathComponent", "Path", "Canvas", "RecordingCanvas", "Action"]
