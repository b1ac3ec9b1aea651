"""
Element tree to design document conversion.

``generate_figma_json`` walks a snapshot depth first and turns every element
into a TEXT, VECTOR or FRAME node:

* an element whose only child node is a non-blank text run becomes TEXT,
* an ``<svg>`` becomes an opaque VECTOR leaf (its subtree is not visited),
* everything else becomes a FRAME carrying fills, stroke, radius, shadows
  and an auto layout descriptor inferred from flexbox.

The input is only read, never modified, and the output is deterministic for a
given snapshot.
"""

import json
import logging
from typing import List, Mapping, Optional

from .colors import find_color_token, parse_color
from .css import parse_number
from .effects import parse_shadows
from .fills import resolve_fills
from .layout import infer_layout
from .nodes import FrameNode, Node, Paint, SolidPaint, TextNode, VectorNode
from .snapshot import StyledElement

logger = logging.getLogger(__name__)

VECTOR_TAGS = {"svg"}

TAG_NAMES = {
    "button": "Button",
    "svg": "Icon",
    "img": "Image",
    "input": "Input",
}

CLASS_NAMES = [
    ("lucide", "Icon"),
    ("icon", "Icon"),
    ("badge", "Badge"),
]

BOLD_WEIGHT = 600
WEIGHT_KEYWORDS = {"bold": 700.0, "bolder": 700.0, "normal": 400.0, "lighter": 300.0}

TEXT_ALIGN = {"center": "CENTER", "right": "RIGHT", "end": "RIGHT"}

DEFAULT_FONT_SIZE = 16.0


def layer_name(element: StyledElement) -> str:
    """Pick a readable layer name: aria-label, then tag and class hints."""
    if element.aria_label:
        return element.aria_label

    tag = element.tag.lower()
    if tag in TAG_NAMES:
        return TAG_NAMES[tag]

    classes = set(element.classes or ())
    for class_name, name in CLASS_NAMES:
        if class_name in classes:
            return name

    if tag == "div":
        return "Frame"
    return tag[:1].upper() + tag[1:]


def is_vector_root(element: StyledElement) -> bool:
    return element.tag.lower() in VECTOR_TAGS


def is_text_leaf(element: StyledElement) -> bool:
    return bool(element.text and element.text.strip()) and not is_vector_root(element)


def font_family(value: Optional[str]) -> str:
    first = (value or "").split(",")[0]
    return first.replace('"', "").replace("'", "").strip()


def font_style_name(weight: Optional[str]) -> str:
    keyword = (weight or "").strip().lower()
    numeric = WEIGHT_KEYWORDS.get(keyword)
    if numeric is None:
        numeric = parse_number(keyword, 400.0)
    return "Bold" if numeric >= BOLD_WEIGHT else "Regular"


def _opacity(style: Mapping[str, str]) -> float:
    value = parse_number(style.get("opacity"), 1.0)
    return min(1.0, max(0.0, value))


def _is_visible(style: Mapping[str, str]) -> bool:
    return style.get("visibility") != "hidden" and style.get("display") != "none"


def _geometry(element: StyledElement):
    rect = element.rect
    return (
        float(rect.get("x", 0.0)),
        float(rect.get("y", 0.0)),
        max(0.0, float(rect.get("width", 0.0))),
        max(0.0, float(rect.get("height", 0.0))),
    )


def _strokes(style: Mapping[str, str]) -> List[Paint]:
    width = parse_number(style.get("borderWidth"), 0.0)
    if width <= 0:
        return []
    # per-side colors come back as a space separated list; the first one wins
    value = style.get("borderColor") or ""
    match = find_color_token(value)
    color = parse_color(match.group(0) if match else value)
    if color.a <= 0:
        return []
    return [SolidPaint(color=color)]


class FigmaTreeBuilder:
    """Builds the node tree for one conversion call."""

    def __init__(self):
        self.node_count = 0

    def build(self, element: StyledElement) -> Node:
        self.node_count += 1
        if is_text_leaf(element):
            return self.build_text(element)
        return self.build_frame(element)

    def build_text(self, element: StyledElement) -> TextNode:
        style = element.style
        x, y, width, height = _geometry(element)
        text = element.text or ""
        node = TextNode(
            name=text,
            x=x,
            y=y,
            width=width,
            height=height,
            opacity=_opacity(style),
            visible=_is_visible(style),
            characters=text,
            font_size=parse_number(style.get("fontSize"), DEFAULT_FONT_SIZE),
            font_family=font_family(style.get("fontFamily")),
            font_style=font_style_name(style.get("fontWeight")),
            text_align_horizontal=TEXT_ALIGN.get((style.get("textAlign") or "").strip(), "LEFT"),
            text_align_vertical="CENTER",
            fills=[SolidPaint(color=parse_color(style.get("color")))],
        )
        node.effects = parse_shadows(style.get("textShadow"), is_text=True)
        return node

    def build_frame(self, element: StyledElement) -> FrameNode:
        style = element.style
        x, y, width, height = _geometry(element)
        vector = is_vector_root(element)
        node_cls = VectorNode if vector else FrameNode

        node = node_cls(
            name=layer_name(element),
            x=x,
            y=y,
            width=width,
            height=height,
            opacity=_opacity(style),
            visible=_is_visible(style),
            fills=resolve_fills(style.get("backgroundImage"), style.get("backgroundColor")),
        )

        node.strokes = _strokes(style)
        if node.strokes:
            node.stroke_weight = parse_number(style.get("borderWidth"), 0.0)

        if style.get("borderRadius"):
            node.corner_radius = parse_number(style.get("borderRadius"))

        node.effects = parse_shadows(style.get("boxShadow"))
        node.layout = infer_layout(style, is_vector=vector)

        if vector:
            logger.debug("Keeping <%s> as an opaque vector leaf", element.tag)
            return node

        node.children = [self.build(child) for child in element.children]
        return node


def build_node(element: StyledElement) -> Node:
    builder = FigmaTreeBuilder()
    root = builder.build(element)
    logger.debug("Converted %d elements under <%s>", builder.node_count, element.tag)
    return root


def generate_figma_json(element: StyledElement) -> str:
    """Convert an element tree to the pretty-printed design document JSON."""
    return json.dumps(build_node(element).to_dict(), ensure_ascii=False, indent=2)
