"""
Tests for snapshot loading and the element protocol.
"""

import json

import pytest

from dom2figma.errors import SnapshotError
from dom2figma.snapshot import ElementSnapshot, StyledElement, load_snapshot, write_snapshot


class TestElementSnapshot:
    """Tests for ElementSnapshot."""

    def test_from_dict(self):
        snap = ElementSnapshot.from_dict({
            "tag": "DIV",
            "rect": {"x": 1, "y": 2, "width": 3, "height": 4},
            "style": {"display": "flex"},
            "classes": "card  card-lg",
            "children": [{"tag": "span", "text": "Hi"}],
        })
        assert snap.tag == "div"
        assert snap.classes == ("card", "card-lg")
        assert snap.children[0].text == "Hi"
        assert snap.aria_label is None

    def test_satisfies_protocol(self, element):
        assert isinstance(element(), StyledElement)

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"rect": {}},
            {"tag": ""},
            {"tag": "div", "children": {"tag": "span"}},
            {"tag": "div", "rect": [1, 2]},
            {"tag": "div", "style": "display: flex"},
            {"tag": "p", "text": 42},
            {"tag": "div", "children": [{"tag": "span", "style": [1]}]},
        ],
    )
    def test_malformed(self, data):
        with pytest.raises(SnapshotError):
            ElementSnapshot.from_dict(data)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"tag": "p", "text": "\xff\xfe"}')
        with pytest.raises(SnapshotError):
            load_snapshot(path)

    def test_directory_path(self, tmp_path):
        with pytest.raises(SnapshotError):
            load_snapshot(tmp_path)

    def test_file_round_trip(self, tmp_path, button_tree):
        path = tmp_path / "button.snapshot.json"
        write_snapshot(path, button_tree)
        assert load_snapshot(path) == button_tree

    def test_missing_file(self, tmp_path):
        with pytest.raises(SnapshotError):
            load_snapshot(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SnapshotError):
            load_snapshot(path)

    def test_written_file_is_plain_json(self, tmp_path, element):
        path = tmp_path / "snap.json"
        write_snapshot(path, element(tag="p", text="Hi"))
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["tag"] == "p"
        assert data["text"] == "Hi"
