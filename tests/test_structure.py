"""Tests for the structural component rules."""

from sdc_validator.linter.structure import (
    MISSING_SCHEMA_MESSAGE,
    StructuralValidator,
    component_id_for,
    has_schema,
)


def _definition(properties=None, slots=None, **extra):
    definition = {"name": "Card", **extra}
    if properties is not None:
        definition["props"] = {"type": "object", "properties": properties}
    if slots is not None:
        definition["slots"] = slots
    return definition


def test_collisions_listed_once_in_prop_order():
    definition = _definition(
        properties={"variant": {"type": "string"}, "size": {"type": "string"}, "label": {"type": "string"}},
        slots={"label": {}, "variant": {}, "footer": {}},
    )

    errors = StructuralValidator().check_collisions(definition, "card")

    assert errors == [
        'The component "card" declared [variant, label] both as a prop and as a slot. '
        'Make sure to use different names.'
    ]


def test_no_collision_when_names_differ():
    definition = _definition(properties={"size": {"type": "string"}}, slots={"content": {}})
    assert StructuralValidator().check_collisions(definition, "card") == []


def test_collision_check_tolerates_missing_sections():
    assert StructuralValidator().check_collisions({"name": "Card", "slots": None}, "card") == []


def test_props_without_type():
    errors = StructuralValidator().check_props_structure({"props": {"properties": {}}})
    assert errors == ["props must have a 'type' field"]


def test_object_props_without_properties():
    errors = StructuralValidator().check_props_structure({"props": {"type": "object"}})
    assert errors == [
        "props with type 'object' must have a 'properties' field (use 'properties: {}' if empty)"
    ]


def test_empty_properties_is_accepted():
    definition = {"props": {"type": "object", "properties": {}}}
    assert StructuralValidator().check_props_structure(definition) == []


def test_presence_lenient_and_strict():
    validator = StructuralValidator()
    definition = {"name": "Card"}

    assert validator.check_presence(definition, "card", enforce_schemas=False) == []
    assert validator.check_presence(definition, "card", enforce_schemas=True) == [
        MISSING_SCHEMA_MESSAGE.format(id="card")
    ]
    assert validator.check_presence({"props": {}}, "card", enforce_schemas=True) != []


def test_missing_schema_message_wording():
    message = MISSING_SCHEMA_MESSAGE.format(id="my_theme:card")
    assert message.startswith('The component "my_theme:card" does not provide schema information.')
    assert message.endswith('key is set to "true" in the theme info file.')


def test_non_string_types():
    definition = _definition(
        properties={
            "count": {"type": 42},
            "flags": {"type": ["string", True]},
            "label": {"type": "string"},
            "untyped": {"title": "Untyped"},
        }
    )

    errors = StructuralValidator().check_non_string_types(definition, "card")

    assert errors == ['The component "card" uses non-string types for properties: count, flags.']


def test_check_skips_type_rule_without_schema():
    validator = StructuralValidator()
    assert validator.check({"name": "Card"}, "card") == []
    assert len(validator.check({"name": "Card"}, "card", enforce_schemas=True)) == 1


def test_has_schema():
    assert not has_schema({})
    assert not has_schema({"props": None})
    assert not has_schema({"props": {}})
    assert has_schema({"props": {"type": "object"}})


def test_component_id_fallbacks():
    assert component_id_for({"id": "card", "machineName": "other"}, "dir") == "card"
    assert component_id_for({"machineName": "card"}, "dir") == "card"
    assert component_id_for({}, "dir") == "dir"
    assert component_id_for({}) == "unknown"


def test_null_properties_count_as_missing():
    errors = StructuralValidator().check_props_structure({"props": {"type": "object", "properties": None}})
    assert errors == [
        "props with type 'object' must have a 'properties' field (use 'properties: {}' if empty)"
    ]


def test_null_type_counts_as_missing():
    errors = StructuralValidator().check_props_structure({"props": {"type": None, "properties": {}}})
    assert errors == ["props must have a 'type' field"]
