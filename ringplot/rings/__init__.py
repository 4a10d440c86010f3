"""Ring primitives drawn against a radial layout."""

from .axis import Axis, AxisLabel, AxisTrack, TextPlacement, TickConfig, default_placement, new_axis_track
from .blocks import Blocks, new_blocks, new_gapped_blocks, sector_path
from .highlight import Highlight, new_highlight

__all__ = [
    "Axis",
    "AxisLabel",
    "AxisTrack",
    "TextPlacement",
    "TickConfig",
    "default_placement",
    "new_axis_track",
    "Blocks",
    "new_blocks",
    "new_gapped_blocks",
    "sector_path",
    "Highlight",
    "new_highlight",
]
