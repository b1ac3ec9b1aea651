"""
Tests for the element tree to design document conversion.
"""

import json

import pytest

from dom2figma.converter import (
    build_node,
    font_family,
    font_style_name,
    generate_figma_json,
    layer_name,
)
from dom2figma.nodes import Color, FrameNode, TextNode, VectorNode


class TestLayerName:
    """Tests for layer naming priority."""

    def test_aria_label_wins(self, element):
        assert layer_name(element(tag="button", aria_label="Close dialog")) == "Close dialog"

    @pytest.mark.parametrize(
        "tag,expected",
        [("button", "Button"), ("svg", "Icon"), ("img", "Image"), ("input", "Input")],
    )
    def test_tag_hints(self, element, tag, expected):
        assert layer_name(element(tag=tag, classes=("badge",))) == expected

    def test_class_hints(self, element):
        assert layer_name(element(tag="span", classes=("icon",))) == "Icon"
        assert layer_name(element(tag="span", classes=("badge", "badge-sm"))) == "Badge"

    def test_class_hint_needs_exact_class(self, element):
        assert layer_name(element(tag="span", classes=("badge-sm",))) == "Span"

    def test_generic_tags(self, element):
        assert layer_name(element(tag="div")) == "Frame"
        assert layer_name(element(tag="section")) == "Section"


class TestTypographyHelpers:
    """Tests for font helpers."""

    def test_first_family_without_quotes(self):
        assert font_family('"Inter", system-ui, sans-serif') == "Inter"
        assert font_family("'JetBrains Mono', monospace") == "JetBrains Mono"

    @pytest.mark.parametrize(
        "weight,expected",
        [("400", "Regular"), ("599", "Regular"), ("600", "Bold"), ("700", "Bold"), ("bold", "Bold"), ("", "Regular")],
    )
    def test_style_name(self, weight, expected):
        assert font_style_name(weight) == expected


class TestBuildNode:
    """Tests for node classification and assembly."""

    def test_text_leaf(self, element):
        node = build_node(element(
            tag="p",
            text="Hello",
            fontSize="18px",
            fontWeight="700",
            textAlign="center",
            textShadow="rgba(0, 0, 0, 0.5) 1px 1px 2px",
        ))
        assert isinstance(node, TextNode)
        assert node.characters == "Hello"
        assert node.name == "Hello"
        assert node.font_size == 18.0
        assert node.font_family == "Inter"
        assert node.font_style == "Bold"
        assert node.text_align_horizontal == "CENTER"
        assert node.text_align_vertical == "CENTER"
        assert len(node.fills) == 1
        assert node.effects[0].radius == 2.0
        assert node.effects[0].spread == 0.0

    def test_blank_text_is_not_a_text_leaf(self, element):
        node = build_node(element(tag="span", text="   "))
        assert isinstance(node, FrameNode)

    def test_svg_with_text_is_still_a_vector(self, element):
        node = build_node(element(tag="svg", text="label"))
        assert isinstance(node, VectorNode)

    def test_vector_subtree_is_not_visited(self, button_tree):
        root = build_node(button_tree)
        icon = root.children[0]
        assert isinstance(icon, VectorNode)
        assert icon.children == []
        assert icon.name == "Icon"
        assert icon.to_dict()["type"] == "VECTOR"

    def test_button_frame(self, button_tree):
        root = build_node(button_tree)
        assert isinstance(root, FrameNode)
        assert root.name == "Button"
        assert root.corner_radius == 8.0
        assert root.layout.mode == "HORIZONTAL"
        assert root.layout.item_spacing == 8.0
        assert root.layout.primary_axis_align == "CENTER"
        assert len(root.effects) == 2
        assert isinstance(root.children[1], TextNode)
        assert root.children[1].font_style == "Bold"

    def test_border_becomes_stroke(self, element):
        node = build_node(element(borderWidth="2px", borderColor="rgb(226, 232, 240)"))
        assert len(node.strokes) == 1
        assert node.stroke_weight == 2.0

    def test_per_side_border_colors_use_the_first_color(self, element):
        node = build_node(element(
            borderWidth="1px",
            borderColor="rgb(255, 0, 0) rgb(0, 0, 0) rgb(0, 0, 0) rgb(0, 0, 0)",
        ))
        assert len(node.strokes) == 1
        assert node.strokes[0].color == Color(1.0, 0.0, 0.0, 1.0)

    def test_transparent_first_side_drops_stroke(self, element):
        node = build_node(element(
            borderWidth="1px",
            borderColor="rgba(0, 0, 0, 0) rgb(0, 0, 0) rgb(0, 0, 0) rgb(0, 0, 0)",
        ))
        assert node.strokes == []

    def test_transparent_border_is_ignored(self, element):
        node = build_node(element(borderWidth="1px", borderColor="rgba(0, 0, 0, 0)"))
        assert node.strokes == []
        assert "strokes" not in node.to_dict()

    def test_hidden_elements(self, element):
        assert build_node(element(visibility="hidden")).visible is False
        assert build_node(element(display="none")).visible is False
        assert build_node(element()).visible is True

    def test_opacity_and_negative_geometry(self, element):
        node = build_node(element(rect={"x": -5, "y": 2, "width": -1, "height": 10}, opacity="0.4"))
        assert node.opacity == 0.4
        assert (node.x, node.y, node.width, node.height) == (-5.0, 2.0, 0.0, 10.0)

    def test_children_keep_dom_order(self, element):
        children = [element(tag=tag) for tag in ("header", "main", "footer")]
        root = build_node(element(children=children))
        assert [c.name for c in root.children] == ["Header", "Main", "Footer"]

    def test_input_is_not_mutated(self, button_tree):
        before = button_tree.to_dict()
        build_node(button_tree)
        assert button_tree.to_dict() == before


class TestGenerateFigmaJson:
    """Tests for the serialized document."""

    def test_document_shape(self, button_tree):
        document = json.loads(generate_figma_json(button_tree))
        assert document["type"] == "FRAME"
        assert document["blendMode"] == "PASS_THROUGH"
        assert document["layoutMode"] == "HORIZONTAL"
        assert document["primaryAxisSizingMode"] == "AUTO"
        assert document["paddingLeft"] == 16.0
        assert document["effects"][0]["type"] == "DROP_SHADOW"
        assert document["effects"][0]["blendMode"] == "NORMAL"
        text = document["children"][1]
        assert text["type"] == "TEXT"
        assert text["fontName"] == {"family": "Inter", "style": "Bold"}
        assert text["fills"][0]["color"] == {"r": 1.0, "g": 1.0, "b": 1.0, "a": 1.0}

    def test_block_frame_has_only_layout_mode(self, element):
        document = json.loads(generate_figma_json(element(gap="8px")))
        assert document["layoutMode"] == "NONE"
        assert "itemSpacing" not in document
        assert "primaryAxisAlignItems" not in document

    def test_deterministic(self, button_tree):
        assert generate_figma_json(button_tree) == generate_figma_json(button_tree)

    def test_pretty_printed(self, element):
        assert generate_figma_json(element()).startswith('{\n  "type": "FRAME"')

    def test_unicode_is_kept(self, element):
        assert "Größe" in generate_figma_json(element(tag="span", text="Größe"))
