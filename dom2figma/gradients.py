"""
linear-gradient() decoding.

Only the four axis-aligned angles get exact handles; every other angle
shares one fixed diagonal handle set.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .colors import find_color_token, looks_like_color, parse_color
from .css import parse_number, split_top_level
from .nodes import Color, GradientStop, Point

logger = logging.getLogger(__name__)

DEFAULT_ANGLE = 180.0
GRADIENT_FUNCTION = "linear-gradient("
STOP_POSITION_RE = re.compile(r"([\d.]+)%")

# Checked in this order; a later keyword overrides an earlier one.
DIRECTION_KEYWORDS = [
    ("top", 0.0),
    ("bottom", 180.0),
    ("left", 270.0),
    ("right", 90.0),
]

Handles = Tuple[Point, Point, Point]

HANDLES_TO_TOP: Handles = (Point(0.5, 1.0), Point(0.5, 0.0), Point(0.0, 1.0))
HANDLES_TO_BOTTOM: Handles = (Point(0.5, 0.0), Point(0.5, 1.0), Point(1.0, 0.0))
HANDLES_TO_RIGHT: Handles = (Point(0.0, 0.5), Point(1.0, 0.5), Point(0.0, 1.0))
HANDLES_TO_LEFT: Handles = (Point(1.0, 0.5), Point(0.0, 0.5), Point(1.0, 0.0))
HANDLES_DIAGONAL: Handles = (Point(0.0, 0.0), Point(1.0, 1.0), Point(1.0, 0.0))


@dataclass
class LinearGradient:
    angle: float
    stops: List[GradientStop]
    handles: Handles


def extract_linear_gradient(background_image: Optional[str]) -> Optional[str]:
    """Return the arguments of the first linear-gradient() in a background-image."""
    if not background_image:
        return None
    start = background_image.find(GRADIENT_FUNCTION)
    if start < 0:
        return None
    begin = start + len(GRADIENT_FUNCTION)
    depth = 1
    for idx in range(begin, len(background_image)):
        char = background_image[idx]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return background_image[begin:idx]
    return None


def direction_angle(direction: str) -> float:
    angle = DEFAULT_ANGLE
    for keyword, keyword_angle in DIRECTION_KEYWORDS:
        if keyword in direction:
            angle = keyword_angle
    return angle


def handles_for_angle(angle: float) -> Handles:
    normalized = angle % 360.0
    if abs(normalized - 90.0) < 1e-9:
        return HANDLES_TO_RIGHT
    if abs(normalized - 270.0) < 1e-9:
        return HANDLES_TO_LEFT
    if abs(normalized) < 1e-9:
        return HANDLES_TO_TOP
    if abs(normalized - 180.0) < 1e-9:
        return HANDLES_TO_BOTTOM
    return HANDLES_DIAGONAL


def parse_stop(entry: str, index: int, count: int) -> GradientStop:
    match = find_color_token(entry)
    if match:
        color = parse_color(match.group(0))
        remainder = entry[:match.start()] + entry[match.end():]
    else:
        color = Color(0.0, 0.0, 0.0, 1.0)
        remainder = entry

    position = index / (count - 1) if count > 1 else 0.0
    position_match = STOP_POSITION_RE.search(remainder)
    if position_match:
        parsed = parse_number(position_match.group(1))
        if parsed is not None:
            position = parsed / 100.0
    return GradientStop(position=min(1.0, max(0.0, position)), color=color)


def parse_linear_gradient(content: str) -> LinearGradient:
    """Decode the inside of ``linear-gradient(...)``.

    The first entry is read as a direction when it is an angle, a ``to ...``
    keyword or anything that is not a color; otherwise the default
    top-to-bottom direction applies and every entry is a stop.
    """
    parts = split_top_level(content)
    angle = DEFAULT_ANGLE
    stops = parts

    if parts:
        first = parts[0]
        if first.endswith("deg"):
            parsed = parse_number(first)
            angle = DEFAULT_ANGLE if parsed is None else parsed
            stops = parts[1:]
        elif "to " in first:
            angle = direction_angle(first)
            stops = parts[1:]
        elif not looks_like_color(first):
            logger.debug("Ignoring unsupported gradient direction %r", first)
            stops = parts[1:]

    gradient_stops = [parse_stop(entry, idx, len(stops)) for idx, entry in enumerate(stops)]
    return LinearGradient(angle=angle, stops=gradient_stops, handles=handles_for_angle(angle))
