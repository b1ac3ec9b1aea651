"""
dom2figma: convert rendered DOM elements into design tool node JSON.
"""

from .colors import color_to_hex, parse_color
from .converter import build_node, generate_figma_json
from .css import split_top_level
from .effects import parse_shadows
from .errors import CaptureError, Dom2FigmaError, SnapshotError
from .fills import resolve_fills
from .gradients import parse_linear_gradient
from .layout import infer_layout
from .snapshot import ElementSnapshot, StyledElement, load_snapshot

__version__ = "0.1.0"

__all__ = [
    "CaptureError",
    "Dom2FigmaError",
    "ElementSnapshot",
    "SnapshotError",
    "StyledElement",
    "build_node",
    "color_to_hex",
    "generate_figma_json",
    "infer_layout",
    "load_snapshot",
    "parse_color",
    "parse_linear_gradient",
    "parse_shadows",
    "resolve_fills",
    "split_top_level",
]
