"""
Immutable element snapshots.

The converter reads elements through the small ``StyledElement`` protocol, so
it can run against anything that exposes geometry, a computed style mapping
and structural metadata. ``ElementSnapshot`` is the stock implementation:
the capture layer builds one from a live page, tests build them by hand, and
they round-trip through JSON files for offline conversion.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol, Sequence, Tuple, runtime_checkable

from .errors import SnapshotError

# Computed properties captured for every element (CSSStyleDeclaration names).
STYLE_PROPS = [
    "display",
    "flexDirection",
    "gap",
    "paddingTop",
    "paddingRight",
    "paddingBottom",
    "paddingLeft",
    "justifyContent",
    "alignItems",
    "backgroundColor",
    "backgroundImage",
    "borderWidth",
    "borderColor",
    "borderRadius",
    "boxShadow",
    "opacity",
    "visibility",
    "color",
    "fontFamily",
    "fontSize",
    "fontWeight",
    "textAlign",
    "textShadow",
]


@runtime_checkable
class StyledElement(Protocol):
    """What the converter needs to know about one rendered element."""

    @property
    def tag(self) -> str: ...
    @property
    def rect(self) -> Mapping[str, float]: ...
    @property
    def style(self) -> Mapping[str, str]: ...
    @property
    def aria_label(self) -> Optional[str]: ...
    @property
    def classes(self) -> Sequence[str]: ...
    @property
    def children(self) -> Sequence["StyledElement"]: ...
    @property
    def text(self) -> Optional[str]: ...


def _copy_mapping(values: Any, key: str, tag: str) -> Mapping[str, Any]:
    if values is None:
        return {}
    if not isinstance(values, Mapping):
        raise SnapshotError(f"{key} of <{tag}> must be an object, got {type(values).__name__}")
    return dict(values)


@dataclass(frozen=True)
class ElementSnapshot:
    """One element with its resolved styles, frozen at capture time.

    ``text`` is only set when the element's sole child node is a text run.
    """

    tag: str
    rect: Mapping[str, float] = field(default_factory=dict)
    style: Mapping[str, str] = field(default_factory=dict)
    aria_label: Optional[str] = None
    classes: Tuple[str, ...] = ()
    children: Tuple["ElementSnapshot", ...] = ()
    text: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ElementSnapshot":
        if not isinstance(data, Mapping):
            raise SnapshotError(f"Expected an element object, got {type(data).__name__}")
        tag = data.get("tag")
        if not tag or not isinstance(tag, str):
            raise SnapshotError("Element is missing its tag name")
        children = data.get("children") or []
        if not isinstance(children, list):
            raise SnapshotError(f"Children of <{tag}> must be a list")
        classes = data.get("classes") or []
        if isinstance(classes, str):
            classes = classes.split()
        text = data.get("text")
        if text is not None and not isinstance(text, str):
            raise SnapshotError(f"Text of <{tag}> must be a string")
        return cls(
            tag=tag.lower(),
            rect=_copy_mapping(data.get("rect"), "rect", tag),
            style=_copy_mapping(data.get("style"), "style", tag),
            aria_label=data.get("aria_label"),
            classes=tuple(classes),
            children=tuple(cls.from_dict(child) for child in children),
            text=text,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "rect": dict(self.rect),
            "style": dict(self.style),
            "aria_label": self.aria_label,
            "classes": list(self.classes),
            "text": self.text,
            "children": [child.to_dict() for child in self.children],
        }


def load_snapshot(path: Path) -> ElementSnapshot:
    path = Path(path)
    if not path.exists():
        raise SnapshotError(f"Snapshot file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot file {path} is not valid JSON: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SnapshotError(f"Snapshot file {path} could not be read: {exc}") from exc
    return ElementSnapshot.from_dict(data)


def write_snapshot(path: Path, snapshot: ElementSnapshot) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(snapshot.to_dict(), f, ensure_ascii=False, indent=2)
