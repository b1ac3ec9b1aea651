"""
Background paint resolution.
"""

import logging
from typing import List, Optional

from .colors import parse_color
from .gradients import extract_linear_gradient, parse_linear_gradient
from .nodes import GradientPaint, Paint, SolidPaint

logger = logging.getLogger(__name__)


def resolve_fills(background_image: Optional[str], background_color: Optional[str]) -> List[Paint]:
    """Build the paint list for a box.

    The gradient (if any) comes first and the solid background color second.
    CSS paints the color underneath the image, so consumers that draw later
    paints on top will see the color over the gradient.
    """
    fills: List[Paint] = []

    content = extract_linear_gradient(background_image)
    if content is not None:
        gradient = parse_linear_gradient(content)
        if gradient.stops:
            fills.append(GradientPaint(stops=gradient.stops, handles=gradient.handles))
        else:
            logger.debug("linear-gradient without usable stops: %r", background_image)

    color = parse_color(background_color)
    if color.a > 0:
        fills.append(SolidPaint(color=color, opacity=color.a))

    return fills
