"""Tests for layout file parsing."""

import json

import pytest

from model import (
    DrawerSpec,
    KnobSpec,
    LayoutValidationError,
    demo_layout,
    load_layout,
    parse_layout,
)


class TestParseLayout:
    """Test parse_layout() validation."""

    def test_minimal(self):
        layout = parse_layout({"drawers": [{"id": "faq"}]})
        assert layout.title == "cabinet"
        assert layout.drawers == [DrawerSpec(id="faq")]
        assert layout.knobs == []

    def test_full(self):
        layout = parse_layout({
            "title": "Help",
            "fragment": "#faq",
            "drawers": [
                {"id": "faq", "title": "FAQ", "states": ["closed", "open"], "knobs": ["k"]},
            ],
            "knobs": [{"id": "k", "label": "Toggle", "cycle": False}],
        })
        assert layout.title == "Help"
        assert layout.fragment == "faq"
        assert layout.drawers[0].states == ["closed", "open"]
        assert layout.knobs == [KnobSpec(id="k", label="Toggle", cycle=False)]
        assert layout.knob_ids == {"k"}

    def test_not_an_object(self):
        with pytest.raises(LayoutValidationError, match="JSON object"):
            parse_layout([])

    def test_unknown_keys(self):
        with pytest.raises(LayoutValidationError, match="unknown keys"):
            parse_layout({"drawers": [{"id": "a", "colour": "red"}]})

    def test_missing_id(self):
        with pytest.raises(LayoutValidationError, match="'id'"):
            parse_layout({"knobs": [{"label": "x"}]})

    def test_states_must_be_strings(self):
        with pytest.raises(LayoutValidationError, match="states"):
            parse_layout({"drawers": [{"id": "a", "states": ["open", 1]}]})

    def test_duplicate_ids(self):
        with pytest.raises(LayoutValidationError, match="Duplicate"):
            parse_layout({"drawers": [{"id": "a"}], "knobs": [{"id": "a"}]})

    def test_unknown_knob_reference(self):
        with pytest.raises(LayoutValidationError, match="unknown knobs"):
            parse_layout({"drawers": [{"id": "a", "knobs": ["ghost"]}]})

    def test_fragment_must_be_string(self):
        with pytest.raises(LayoutValidationError, match="fragment"):
            parse_layout({"fragment": 3})

    @pytest.mark.parametrize("key", ["drawers", "knobs"])
    @pytest.mark.parametrize("value", [None, 3, "a", {"id": "a"}])
    def test_sections_must_be_lists(self, key, value):
        with pytest.raises(LayoutValidationError, match=f"'{key}' must be a list"):
            parse_layout({key: value})


class TestDrawerSpec:
    """Test how drawer specs become element attributes and settings."""

    def test_to_attributes(self):
        spec = DrawerSpec(
            id="faq", init_state="closed", hash="faq", hash_state="open", knobs=["a", "b"]
        )
        assert spec.to_attributes() == {
            "id": "faq",
            "data-module": "drawer",
            "data-state": "closed",
            "data-hash": "faq",
            "data-hash-state": "open",
            "data-knob": "#a, #b",
        }

    def test_to_attributes_minimal(self):
        assert DrawerSpec(id="faq").to_attributes() == {"id": "faq", "data-module": "drawer"}

    def test_to_settings(self):
        spec = DrawerSpec(id="faq", states=["a", "b"], hidden_states=["a"])
        assert spec.to_settings() == {"states": ["a", "b"], "hidden_states": ["a"]}
        assert DrawerSpec(id="faq").to_settings() == {}

    def test_knob_to_settings(self):
        assert KnobSpec(id="k", accessibility=False).to_settings() == {
            "cycle": True,
            "accessibility": False,
        }


class TestLoadLayout:
    """Test reading layout files."""

    def test_load(self, tmp_path):
        path = tmp_path / "layout.json"
        path.write_text(json.dumps({"title": "From file", "drawers": [{"id": "a"}]}))
        assert load_layout(path).title == "From file"

    def test_missing_file(self, tmp_path):
        with pytest.raises(LayoutValidationError, match="Cannot read"):
            load_layout(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(LayoutValidationError, match="Invalid JSON"):
            load_layout(path)

    def test_demo_layout(self):
        layout = demo_layout()
        assert [d.id for d in layout.drawers] == ["about", "shipping", "stages"]
        assert layout.knob_ids == {"toggle-all", "stages-knob"}
