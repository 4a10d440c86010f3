"""Canvas backend emitting TikZ drawing commands."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

import numpy as np

from .utils import format_float, latex_escape_keep_math
from ..canvas import Path
from ..config import get_render_config
from ..errors import UnsupportedTypeError
from ..geometry import Angle, degrees
from ..styles import BLACK, Color, LineStyle, TextStyle

logger = logging.getLogger(__name__)

# Distance under which the current point is treated as the start of the next arc.
JOIN_EPS = 1e-9

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{tikz}
\begin{document}
%s
%s
\end{document}
"""

_X_ANCHORS = ((-0.25, "west"), (-0.75, ""), (-math.inf, "east"))
_Y_ANCHORS = ((-0.25, "south"), (-0.75, ""), (-math.inf, "north"))


def _pick(value: float, table) -> str:
    for threshold, name in table:
        if value > threshold:
            return name
    return table[-1][1]


def text_anchor(xalign: float, yalign: float) -> str:
    """Return the TikZ node anchor matching an ``(xalign, yalign)`` pair.

    Alignments follow the canvas convention: 0 puts the anchor at the left
    (bottom) edge of the text, -0.5 at its centre and -1 at its right (top).
    """

    horizontal = _pick(xalign, _X_ANCHORS)
    vertical = _pick(yalign, _Y_ANCHORS)
    anchor = " ".join(part for part in (vertical, horizontal) if part)
    return anchor or "center"


def color_spec(color: Color) -> str:
    red, green, blue = (int(c) for c in color[:3])
    return f"{{rgb,255:red,{red};green,{green};blue,{blue}}}"


def _opacity(color: Color) -> Optional[float]:
    if len(color) == 4 and color[3] < 255:
        return color[3] / 255.0
    return None


class TikzCanvas:
    """Canvas producing the body of a ``tikzpicture``.

    Lengths are in points. Transforms are kept as a numpy affine matrix
    and applied to coordinates as they are written, so only rotations and
    translations are supported.
    """

    def __init__(self, precision: Optional[int] = None) -> None:
        self.precision = get_render_config().precision if precision is None else precision
        self.lines: List[str] = []
        self._matrix = np.identity(3)
        self._stack: List[Tuple[np.ndarray, Color, LineStyle]] = []
        self._color: Color = BLACK
        self._line_style = LineStyle(color=BLACK, width=1.0)

    # -- state ------------------------------------------------------------

    def set_color(self, color: Color) -> None:
        self._color = color

    def set_line_style(self, style: LineStyle) -> None:
        self._line_style = style

    def push(self) -> None:
        self._stack.append((self._matrix.copy(), self._color, self._line_style))

    def pop(self) -> None:
        if not self._stack:
            raise IndexError("pop from empty transform stack")
        self._matrix, self._color, self._line_style = self._stack.pop()

    def translate(self, x: float, y: float) -> None:
        step = np.identity(3)
        step[0, 2] = x
        step[1, 2] = y
        self._matrix = self._matrix @ step

    def rotate(self, angle: Angle) -> None:
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        step = np.array([[cos_a, -sin_a, 0.0], [sin_a, cos_a, 0.0], [0.0, 0.0, 1.0]])
        self._matrix = self._matrix @ step

    def _apply(self, x: float, y: float) -> Tuple[float, float]:
        px, py, _ = self._matrix @ np.array([x, y, 1.0])
        return float(px), float(py)

    def _rotation(self) -> Angle:
        return math.atan2(self._matrix[1, 0], self._matrix[0, 0])

    # -- drawing ----------------------------------------------------------

    def _num(self, value: float) -> str:
        return format_float(value, self.precision)

    def _coord(self, point: Tuple[float, float]) -> str:
        return f"({self._num(point[0])}pt, {self._num(point[1])}pt)"

    def path_code(self, path: Path) -> str:
        """Convert ``path`` into a TikZ path expression."""

        rotation = self._rotation()
        tokens: List[str] = []
        current: Optional[Tuple[float, float]] = None
        subpath_start: Optional[Tuple[float, float]] = None

        for comp in path.components:
            if comp.kind == "move":
                current = self._apply(comp.x, comp.y)
                subpath_start = current
                tokens.append(self._coord(current))
            elif comp.kind == "line":
                current = self._apply(comp.x, comp.y)
                tokens.append(f"-- {self._coord(current)}")
            elif comp.kind == "arc":
                cx, cy = self._apply(comp.x, comp.y)
                start = comp.start + rotation
                begin = (cx + comp.radius * math.cos(start), cy + comp.radius * math.sin(start))
                if current is None:
                    tokens.append(self._coord(begin))
                    subpath_start = begin
                elif math.hypot(begin[0] - current[0], begin[1] - current[1]) > JOIN_EPS:
                    tokens.append(f"-- {self._coord(begin)}")
                tokens.append(
                    f"arc[start angle={self._num(degrees(start))}, "
                    f"delta angle={self._num(degrees(comp.angle))}, "
                    f"radius={self._num(comp.radius)}pt]"
                )
                end = start + comp.angle
                current = (cx + comp.radius * math.cos(end), cy + comp.radius * math.sin(end))
            elif comp.kind == "close":
                tokens.append("-- cycle")
                current = subpath_start
            else:
                raise UnsupportedTypeError(f"unknown path component {comp.kind!r}")
        return " ".join(tokens)

    def fill(self, path: Path) -> None:
        if not path.components:
            return
        options = [f"fill={color_spec(self._color)}"]
        opacity = _opacity(self._color)
        if opacity is not None:
            options.append(f"fill opacity={self._num(opacity)}")
        self.lines.append(f"\\fill[{', '.join(options)}] {self.path_code(path)};")

    def stroke(self, path: Path) -> None:
        if not path.components:
            return
        style = self._line_style
        color = style.color if style.color is not None else BLACK
        options = [f"draw={color_spec(color)}", f"line width={self._num(style.width)}pt"]
        opacity = _opacity(color)
        if opacity is not None:
            options.append(f"draw opacity={self._num(opacity)}")
        if style.dashes:
            pattern = []
            for idx, length in enumerate(style.dashes):
                pattern.append(f"{'on' if idx % 2 == 0 else 'off'} {self._num(length)}pt")
            options.append(f"dash pattern={' '.join(pattern)}")
            if style.dash_offset:
                options.append(f"dash phase={self._num(style.dash_offset)}pt")
        self.lines.append(f"\\draw[{', '.join(options)}] {self.path_code(path)};")

    def fill_text(
        self, style: TextStyle, x: float, y: float, xalign: float, yalign: float, text: str
    ) -> None:
        color = style.color if style.color is not None else BLACK
        size = style.size or get_render_config().font_size
        options = [
            f"anchor={text_anchor(xalign, yalign)}",
            "inner sep=0pt",
            f"text={color_spec(color)}",
            f"font=\\fontsize{{{self._num(size)}}}{{{self._num(size * 1.2)}}}\\selectfont",
        ]
        rotation = degrees(self._rotation())
        if abs(rotation) > 1e-9:
            options.insert(1, f"rotate={self._num(rotation)}")
        at = self._coord(self._apply(x, y))
        self.lines.append(f"\\node[{', '.join(options)}] at {at} {{{latex_escape_keep_math(text)}}};")

    # -- output -----------------------------------------------------------

    def code(self) -> str:
        body = "\n".join(f"  {line}" for line in self.lines)
        return "\\begin{tikzpicture}\n" + body + ("\n" if body else "") + "\\end{tikzpicture}"


def generate_tikz_document(canvas: TikzCanvas, *, caption: Optional[str] = None) -> str:
    """Wrap the picture drawn on ``canvas`` in a standalone LaTeX document."""

    header = ""
    if caption:
        header = "\\noindent\\textbf{" + latex_escape_keep_math(caption.strip()) + "}\\par\\vspace{4pt}"
    logger.debug("Rendering standalone document with %d TikZ command(s)", len(canvas.lines))
    return standalone_tpl % (header, canvas.code())
