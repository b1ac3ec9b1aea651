"""
CSS color token decoding.

Computed styles report colors as rgb()/rgba() strings, but authored values and
shadow/gradient fragments also show up as hex. Everything is normalized to
channels in [0, 1].
"""

import re
from typing import Optional

from .nodes import Color, TRANSPARENT

NUMBER_TOKEN_RE = re.compile(r"(?:\d+(?:\.\d+)?|\.\d+)%?")
HEX_DIGITS_RE = re.compile(r"^[0-9a-fA-F]+$")

# Color tokens embedded in shadow entries and gradient stops.
COLOR_TOKEN_RE = re.compile(r"rgba?\([^)]*\)|#[a-fA-F0-9]{3,8}|hsla?\([^)]*\)", re.IGNORECASE)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def _channel(token: str, scale: float) -> float:
    if token.endswith("%"):
        return _clamp(float(token[:-1]) / 100.0)
    return _clamp(float(token) / scale)


def _parse_hex(digits: str) -> Color:
    if not HEX_DIGITS_RE.match(digits):
        return Color(0.0, 0.0, 0.0, 1.0)
    if len(digits) == 3:
        r, g, b = (int(d * 2, 16) for d in digits)
        return Color(r / 255.0, g / 255.0, b / 255.0, 1.0)
    if len(digits) in {6, 8}:
        r = int(digits[0:2], 16)
        g = int(digits[2:4], 16)
        b = int(digits[4:6], 16)
        a = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
        return Color(r / 255.0, g / 255.0, b / 255.0, a)
    return Color(0.0, 0.0, 0.0, 1.0)


def parse_color(value: Optional[str]) -> Color:
    """Decode a CSS color token. Never raises; unknown input is opaque black.

    hsl()/hsla() tokens are not converted: their numbers are read as raw RGB
    components like any other functional notation.
    """
    if not value:
        return TRANSPARENT
    value = value.strip()
    if value.lower() in {"", "transparent", "none"}:
        return TRANSPARENT

    if value.startswith("#"):
        return _parse_hex(value[1:])

    numbers = NUMBER_TOKEN_RE.findall(value)
    if len(numbers) < 3:
        return Color(0.0, 0.0, 0.0, 1.0)

    r = _channel(numbers[0], 255.0)
    g = _channel(numbers[1], 255.0)
    b = _channel(numbers[2], 255.0)
    a = _channel(numbers[3], 1.0) if len(numbers) >= 4 else 1.0
    return Color(r, g, b, a)


def find_color_token(value: str) -> Optional[re.Match]:
    """Locate the first rgb/rgba/hex/hsl/hsla token inside a larger value."""
    return COLOR_TOKEN_RE.search(value or "")


def looks_like_color(value: str) -> bool:
    lower = (value or "").lower()
    return "rgb" in lower or "#" in lower or "hsl" in lower


def color_to_hex(color: Color) -> str:
    return "#{:02x}{:02x}{:02x}".format(
        int(round(color.r * 255)),
        int(round(color.g * 255)),
        int(round(color.b * 255)),
    )
