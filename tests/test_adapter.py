"""Tests for removing class/interface types before schema evaluation."""

from sdc_validator.linter.adapter import neutralize, normalize_empty_properties


def test_foreign_types_removed_from_copy():
    props = {
        "type": "object",
        "properties": {
            "url": {"type": ["string", "SomeClass"]},
            "attributes": {"type": "SomeInterface"},
            "label": {"type": "string"},
        },
    }

    adapted = neutralize(props, {"url": ["SomeClass"], "attributes": ["SomeInterface"]})

    assert adapted["properties"]["url"]["type"] == ["string"]
    assert adapted["properties"]["attributes"]["type"] == ["null"]
    assert adapted["properties"]["label"]["type"] == "string"
    # the input is left untouched
    assert props["properties"]["url"]["type"] == ["string", "SomeClass"]
    assert props["properties"]["attributes"]["type"] == "SomeInterface"


def test_props_without_class_types_pass_through():
    props = {"type": "object", "properties": {"size": {"type": "string", "enum": ["s", "m"]}}}
    assert neutralize(props, {}) == props


def test_empty_properties_become_mapping():
    assert normalize_empty_properties({"type": "object", "properties": []}) == {
        "type": "object",
        "properties": {},
    }
    adapted = neutralize({"type": "object", "properties": []}, {})
    assert adapted["properties"] == {}


def test_empty_mapping_is_preserved():
    adapted = neutralize({"type": "object", "properties": {}}, {})
    assert adapted == {"type": "object", "properties": {}}
