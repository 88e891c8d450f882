"""
Mode detection and whitelist configuration.
"""
import json

import pytest

from uicraft.core.exceptions import ConfigurationError
from uicraft.core.types import EDIT_THRESHOLD, Mode, detect_mode
from uicraft.core.whitelist import DEFAULT_WHITELIST, ComponentWhitelist, load_whitelist


class TestModeDetection:

    def test_empty_code_is_new(self):
        assert detect_mode("") is Mode.NEW
        assert detect_mode(None) is Mode.NEW

    def test_exactly_threshold_is_new(self):
        assert detect_mode("x" * EDIT_THRESHOLD) is Mode.NEW

    def test_one_over_threshold_is_edit(self):
        assert detect_mode("x" * (EDIT_THRESHOLD + 1)) is Mode.EDIT

    def test_whitespace_is_trimmed_before_measuring(self):
        padded = "   \n" + "x" * EDIT_THRESHOLD + "\n\t  "
        assert len(padded) > EDIT_THRESHOLD
        assert detect_mode(padded) is Mode.NEW

    def test_custom_threshold(self):
        assert detect_mode("abcdef", threshold=5) is Mode.EDIT
        assert detect_mode("abcde", threshold=5) is Mode.NEW


class TestWhitelist:

    def test_default_contents(self):
        assert DEFAULT_WHITELIST.layout == ("Container", "Row", "Column", "Sidebar", "Navbar")
        assert DEFAULT_WHITELIST.component_names() == [
            "Navbar", "Sidebar", "Button", "Card", "Input", "Table", "Chart",
        ]

    def test_to_json_roundtrips_shape(self):
        data = json.loads(DEFAULT_WHITELIST.to_json())
        assert data["layout"][0] == "Container"
        assert {"name": "Button", "props": ["label", "variant", "size"]} in data["components"]

    def test_load_default_when_no_path(self):
        assert load_whitelist(None) is DEFAULT_WHITELIST

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "whitelist.json"
        path.write_text(json.dumps({
            "layout": ["Grid"],
            "components": [{"name": "Badge", "props": ["text"]}],
        }), encoding="utf-8")

        whitelist = load_whitelist(path)

        assert isinstance(whitelist, ComponentWhitelist)
        assert whitelist.layout == ("Grid",)
        assert whitelist.component_names() == ["Badge"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_whitelist(tmp_path / "nope.json")

    @pytest.mark.parametrize("payload", [
        "[]",
        '{"layout": "Container"}',
        '{"components": [{"props": ["x"]}]}',
        '{"components": [{"name": "Card", "props": "title"}]}',
        "not json",
    ])
    def test_malformed_file(self, tmp_path, payload):
        path = tmp_path / "whitelist.json"
        path.write_text(payload, encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_whitelist(path)
