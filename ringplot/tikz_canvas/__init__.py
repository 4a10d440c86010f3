"""Canvas backend rendering ring primitives as TikZ."""

from .generator import TikzCanvas, color_spec, generate_tikz_document, text_anchor
from .utils import format_float, latex_escape_keep_math

__all__ = [
    "TikzCanvas",
    "color_spec",
    "generate_tikz_document",
    "text_anchor",
    "format_float",
    "latex_escape_keep_math",
]
