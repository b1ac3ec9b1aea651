"""
Shared fixtures: synthetic element snapshots standing in for a rendered page.
"""

import pytest

from dom2figma.snapshot import ElementSnapshot

BASE_STYLE = {
    "display": "block",
    "flexDirection": "row",
    "gap": "normal",
    "paddingTop": "0px",
    "paddingRight": "0px",
    "paddingBottom": "0px",
    "paddingLeft": "0px",
    "justifyContent": "normal",
    "alignItems": "normal",
    "backgroundColor": "rgba(0, 0, 0, 0)",
    "backgroundImage": "none",
    "borderWidth": "0px",
    "borderColor": "rgb(0, 0, 0)",
    "borderRadius": "0px",
    "boxShadow": "none",
    "opacity": "1",
    "visibility": "visible",
    "color": "rgb(15, 23, 42)",
    "fontFamily": '"Inter", system-ui, sans-serif',
    "fontSize": "14px",
    "fontWeight": "400",
    "textAlign": "start",
    "textShadow": "none",
}


def make_element(tag="div", rect=None, children=(), text=None, aria_label=None, classes=(), **style):
    merged = dict(BASE_STYLE)
    merged.update(style)
    return ElementSnapshot(
        tag=tag,
        rect=rect or {"x": 0, "y": 0, "width": 100, "height": 40},
        style=merged,
        aria_label=aria_label,
        classes=tuple(classes),
        children=tuple(children),
        text=text,
    )


@pytest.fixture
def element():
    """Factory for snapshot elements on top of browser-default computed styles."""
    return make_element


@pytest.fixture
def button_tree():
    """A flex button with an icon and a label, as a docs page would render it."""
    icon = make_element(
        tag="svg",
        rect={"x": 16, "y": 12, "width": 16, "height": 16},
        classes=("lucide", "lucide-plus"),
        children=(make_element(tag="path", rect={"x": 18, "y": 14, "width": 12, "height": 12}),),
    )
    label = make_element(
        tag="span",
        rect={"x": 40, "y": 10, "width": 60, "height": 20},
        text="Continue",
        color="rgb(255, 255, 255)",
        fontWeight="600",
    )
    return make_element(
        tag="button",
        rect={"x": 0, "y": 0, "width": 116, "height": 40},
        children=(icon, label),
        display="inline-flex",
        gap="8px",
        paddingTop="10px",
        paddingRight="16px",
        paddingBottom="10px",
        paddingLeft="16px",
        justifyContent="center",
        alignItems="center",
        backgroundColor="rgb(37, 99, 235)",
        borderRadius="8px",
        boxShadow="rgba(0, 0, 0, 0.1) 0px 1px 3px 0px, rgba(0, 0, 0, 0.06) 0px 1px 2px -1px",
    )
