from .arcs import Arc, Arcer, ArcOfer, GappedArcs, gap_count
from .canvas import Canvas, Path, PathComponent, RecordingCanvas
from .config import RenderConfig, get_render_config, set_render_config
from .errors import (
    ArcOverflowError,
    InvalidRangeError,
    NotFoundError,
    RenderError,
    RingsError,
    UnsupportedTypeError,
)
from .features import (
    Feature,
    FillColorer,
    LineStyler,
    Orientation,
    Segment,
    StyledSegment,
    feature_length,
    global_orientation,
)
from .geometry import CLOCKWISE, COMPLETE, COUNTER_CLOCKWISE, Angle, Point, degrees, from_degrees, normalize, rectangular
from .plot import RingPlot
from .rings import (
    Axis,
    AxisLabel,
    AxisTrack,
    Blocks,
    Highlight,
    TickConfig,
    default_placement,
    new_axis_track,
    new_blocks,
    new_gapped_blocks,
    new_highlight,
)
from .styles import Color, LineStyle, TextStyle, Tick, default_ticks
from .tikz_canvas import TikzCanvas, generate_tikz_document

__all__ = [
    'Arc',
    'Arcer',
    'ArcOfer',
    'GappedArcs',
    'gap_count',
    'Canvas',
    'Path',
    'PathComponent',
    'RecordingCanvas',
    'RenderConfig',
    'get_render_config',
    'set_render_config',
    'ArcOverflowError',
    'InvalidRangeError',
    'NotFoundError',
    'RenderError',
    'RingsError',
    'UnsupportedTypeError',
    'Feature',
    'FillColorer',
    'LineStyler',
    'Orientation',
    'Segment',
    'StyledSegment',
    'feature_length',
    'global_orientation',
    'CLOCKWISE',
    'COMPLETE',
    'COUNTER_CLOCKWISE',
    'Angle',
    'Point',
    'degrees',
    'from_degrees',
    'normalize',
    'rectangular',
    'RingPlot',
    'Axis',
    'AxisLabel',
    'AxisTrack',
    'Blocks',
    'Highlight',
    'TickConfig',
    'default_placement',
    'new_axis_track',
    'new_blocks',
    'new_gapped_blocks',
    'new_highlight',
    'Color',
    'LineStyle',
    'TextStyle',
    'Tick',
    'default_ticks',
    'TikzCanvas',
    'generate_tikz_document',
]
