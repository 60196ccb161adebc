"""Tests for JSON Schema evaluation and diagnostic formatting."""

from sdc_validator.schema.evaluator import SchemaEvaluator, format_path, strip_schema_markers


def test_valid_definition(metadata_schema):
    definition = {
        "name": "Button",
        "props": {"type": "object", "properties": {"size": {"type": "string"}}},
        "slots": {},
    }
    assert SchemaEvaluator().evaluate(definition, metadata_schema) == []


def test_errors_are_prefixed_with_pointer(metadata_schema):
    definition = {"name": "Button", "status": "beta"}

    errors = SchemaEvaluator().evaluate(definition, metadata_schema)

    assert len(errors) == 1
    assert errors[0].startswith("[/status] ")
    assert "'beta' is not one of" in errors[0]


def test_root_errors_have_no_prefix(metadata_schema):
    errors = SchemaEvaluator().evaluate({"status": "stable"}, metadata_schema)
    assert errors == ["'name' is a required property"]


def test_unknown_type_is_reported(metadata_schema):
    definition = {
        "name": "Button",
        "props": {"type": "object", "properties": {"url": {"type": "SomeClass"}}},
    }

    errors = SchemaEvaluator().evaluate(definition, metadata_schema)

    assert len(errors) == 1
    assert errors[0].startswith("[/props/properties/url/type] ")


def test_schema_markers_never_produce_violations(metadata_schema):
    schema = dict(metadata_schema, additionalProperties=False)
    definition = {
        "$schema": "https://git.drupalcode.org/project/drupal/-/raw/HEAD/core/assets/schemas/v1/metadata.schema.json",
        "name": "Button",
    }
    assert SchemaEvaluator().evaluate(definition, schema) == []


def test_empty_sequence_counts_as_object(metadata_schema):
    definition = {"name": "Button", "props": {"type": "object", "properties": []}}
    assert SchemaEvaluator().evaluate(definition, metadata_schema) == []


def test_missing_schema_skips_evaluation():
    assert SchemaEvaluator().evaluate({"status": 1}, None) == []


def test_invalid_schema_is_a_single_diagnostic():
    errors = SchemaEvaluator().evaluate({"name": "Button"}, {"type": 12})
    assert len(errors) == 1
    assert errors[0].startswith("Schema validation error: ")


def test_unresolvable_reference_is_a_single_diagnostic():
    schema = {"properties": {"name": {"$ref": "#/definitions/missing"}}}
    errors = SchemaEvaluator().evaluate({"name": "Button"}, schema)
    assert len(errors) == 1
    assert errors[0].startswith("Schema validation error: ")


def test_strip_schema_markers_is_recursive():
    value = {"$schema": "x", "props": {"$schema": "y", "items": [{"$schema": "z", "a": 1}]}}
    assert strip_schema_markers(value) == {"props": {"items": [{"a": 1}]}}
    assert value["$schema"] == "x"


def test_format_path_escapes_tokens():
    assert format_path([]) == ""
    assert format_path(["props", "properties", "a/b", 0]) == "/props/properties/a~1b/0"
