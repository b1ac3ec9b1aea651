"""
Flexbox to auto layout inference.

Sizing is always "hug contents" (AUTO) on both axes; FIXED is never emitted.
"""

from typing import Mapping

from .css import parse_number
from .nodes import LayoutDescriptor, Padding

FLEX_DISPLAYS = {"flex", "inline-flex"}
VERTICAL_DIRECTIONS = {"column", "column-reverse"}

PRIMARY_AXIS_ALIGN = {
    "center": "CENTER",
    "space-between": "SPACE_BETWEEN",
    "flex-end": "MAX",
    "end": "MAX",
}

COUNTER_AXIS_ALIGN = {
    "center": "CENTER",
    "flex-end": "MAX",
    "end": "MAX",
}


def _px(style: Mapping[str, str], key: str) -> float:
    return parse_number(style.get(key), 0.0)


def infer_layout(style: Mapping[str, str], is_vector: bool = False) -> LayoutDescriptor:
    display = (style.get("display") or "").strip()
    if display not in FLEX_DISPLAYS or is_vector:
        return LayoutDescriptor(mode="NONE")

    direction = (style.get("flexDirection") or "").strip()
    justify = (style.get("justifyContent") or "").strip()
    align = (style.get("alignItems") or "").strip()

    return LayoutDescriptor(
        mode="VERTICAL" if direction in VERTICAL_DIRECTIONS else "HORIZONTAL",
        item_spacing=_px(style, "gap"),
        padding=Padding(
            top=_px(style, "paddingTop"),
            right=_px(style, "paddingRight"),
            bottom=_px(style, "paddingBottom"),
            left=_px(style, "paddingLeft"),
        ),
        primary_axis_align=PRIMARY_AXIS_ALIGN.get(justify, "MIN"),
        counter_axis_align=COUNTER_AXIS_ALIGN.get(align, "MIN"),
    )
