"""
box-shadow / text-shadow decoding.
"""

import logging
from typing import List, Optional

from .colors import find_color_token, parse_color
from .css import parse_px_values, split_top_level
from .nodes import DROP_SHADOW, INNER_SHADOW, Color, Effect, Point

logger = logging.getLogger(__name__)

DEFAULT_SHADOW_COLOR = Color(0.0, 0.0, 0.0, 0.2)


def parse_shadow(entry: str, is_text: bool = False) -> Optional[Effect]:
    """Decode a single shadow layer, or None when it has no offsets."""
    match = find_color_token(entry)
    color = parse_color(match.group(0)) if match else DEFAULT_SHADOW_COLOR

    is_inset = "inset" in entry
    lengths = entry
    if match:
        lengths = lengths.replace(match.group(0), "", 1)
    lengths = lengths.replace("inset", "", 1).strip()

    numbers = parse_px_values(lengths)
    if len(numbers) < 2:
        logger.debug("Dropping shadow entry without offsets: %r", entry)
        return None

    blur = numbers[2] if len(numbers) > 2 else 0.0
    spread = numbers[3] if not is_text and len(numbers) > 3 else 0.0
    return Effect(
        type=INNER_SHADOW if is_inset else DROP_SHADOW,
        color=color,
        offset=Point(numbers[0], numbers[1]),
        radius=blur,
        spread=spread,
    )


def parse_shadows(value: Optional[str], is_text: bool = False) -> List[Effect]:
    """Decode a shadow list, keeping the source order of its layers.

    Text shadows never carry a spread.
    """
    if not value or value.strip() == "none":
        return []
    effects: List[Effect] = []
    for entry in split_top_level(value):
        effect = parse_shadow(entry, is_text=is_text)
        if effect is not None:
            effects.append(effect)
    return effects
