"""
Design document node model.

Plain dataclasses that mirror the design tool's node schema. Every class
renders itself with ``to_dict()`` using the tool's field names, so the
converter only has to call ``json.dumps`` on the root.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class Color:
    r: float
    g: float
    b: float
    a: float = 1.0

    def to_dict(self) -> Dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}


TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class GradientStop:
    position: float
    color: Color

    def to_dict(self) -> Dict[str, Any]:
        return {"color": self.color.to_dict(), "position": self.position}


@dataclass
class SolidPaint:
    color: Color
    opacity: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": "SOLID", "color": self.color.to_dict()}
        if self.opacity is not None:
            out["opacity"] = self.opacity
        return out


@dataclass
class GradientPaint:
    stops: List[GradientStop]
    handles: Tuple[Point, Point, Point]
    opacity: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "GRADIENT_LINEAR",
            "gradientStops": [s.to_dict() for s in self.stops],
            "gradientHandlePositions": [h.to_dict() for h in self.handles],
            "opacity": self.opacity,
        }


Paint = Union[SolidPaint, GradientPaint]

DROP_SHADOW = "DROP_SHADOW"
INNER_SHADOW = "INNER_SHADOW"


@dataclass
class Effect:
    type: str
    color: Color
    offset: Point
    radius: float = 0.0
    spread: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "visible": True,
            "color": self.color.to_dict(),
            "blendMode": "NORMAL",
            "offset": self.offset.to_dict(),
            "radius": self.radius,
            "spread": self.spread,
        }


@dataclass
class Padding:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


@dataclass
class LayoutDescriptor:
    """Auto layout settings. Only ``mode`` is meaningful when mode is NONE."""

    mode: str = "NONE"
    item_spacing: float = 0.0
    padding: Padding = field(default_factory=Padding)
    primary_axis_align: str = "MIN"
    counter_axis_align: str = "MIN"
    primary_axis_sizing: str = "AUTO"
    counter_axis_sizing: str = "AUTO"

    def to_dict(self) -> Dict[str, Any]:
        if self.mode == "NONE":
            return {"layoutMode": "NONE"}
        return {
            "layoutMode": self.mode,
            "itemSpacing": self.item_spacing,
            "primaryAxisSizingMode": self.primary_axis_sizing,
            "counterAxisSizingMode": self.counter_axis_sizing,
            "paddingLeft": self.padding.left,
            "paddingRight": self.padding.right,
            "paddingTop": self.padding.top,
            "paddingBottom": self.padding.bottom,
            "primaryAxisAlignItems": self.primary_axis_align,
            "counterAxisAlignItems": self.counter_axis_align,
        }


@dataclass
class BaseNode:
    name: str
    x: float
    y: float
    width: float
    height: float
    opacity: float = 1.0
    visible: bool = True

    type = "RECTANGLE"

    def _common(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "visible": self.visible,
            "opacity": self.opacity,
        }


@dataclass
class FrameNode(BaseNode):
    fills: List[Paint] = field(default_factory=list)
    strokes: List[Paint] = field(default_factory=list)
    stroke_weight: Optional[float] = None
    corner_radius: Optional[float] = None
    effects: List[Effect] = field(default_factory=list)
    layout: LayoutDescriptor = field(default_factory=LayoutDescriptor)
    children: List["Node"] = field(default_factory=list)

    type = "FRAME"

    def to_dict(self) -> Dict[str, Any]:
        out = self._common()
        out["blendMode"] = "PASS_THROUGH"
        out["fills"] = [p.to_dict() for p in self.fills]
        if self.strokes:
            out["strokes"] = [p.to_dict() for p in self.strokes]
            out["strokeWeight"] = self.stroke_weight
        if self.corner_radius is not None:
            out["cornerRadius"] = self.corner_radius
        if self.effects:
            out["effects"] = [e.to_dict() for e in self.effects]
        out.update(self.layout.to_dict())
        out["children"] = [c.to_dict() for c in self.children]
        return out


@dataclass
class VectorNode(FrameNode):
    """Opaque stand-in for an embedded vector graphic; never has children."""

    type = "VECTOR"


@dataclass
class TextNode(BaseNode):
    characters: str = ""
    font_size: float = 0.0
    font_family: str = ""
    font_style: str = "Regular"
    text_align_horizontal: str = "LEFT"
    text_align_vertical: str = "CENTER"
    fills: List[Paint] = field(default_factory=list)
    effects: List[Effect] = field(default_factory=list)

    type = "TEXT"

    def to_dict(self) -> Dict[str, Any]:
        out = self._common()
        out.update({
            "characters": self.characters,
            "fills": [p.to_dict() for p in self.fills],
            "fontSize": self.font_size,
            "fontName": {"family": self.font_family, "style": self.font_style},
            "textAlignHorizontal": self.text_align_horizontal,
            "textAlignVertical": self.text_align_vertical,
        })
        if self.effects:
            out["effects"] = [e.to_dict() for e in self.effects]
        return out


Node = Union[FrameNode, VectorNode, TextNode]
