"""Shared fixtures for the validator tests."""

import json
from pathlib import Path
from typing import Optional

import pytest
import yaml

from sdc_validator.config import ValidatorConfig
from sdc_validator.exceptions import SchemaFetchError
from sdc_validator.schema.transport import Transport


# Trimmed-down version of Drupal's core/assets/schemas/v1/metadata.schema.json
METADATA_SCHEMA = {
    "$schema": "http://json-schema.org/draft-04/schema#",
    "type": "object",
    "required": ["name"],
    "properties": {
        "name": {"type": "string"},
        "status": {"type": "string", "enum": ["experimental", "stable", "deprecated", "obsolete"]},
        "props": {"$ref": "#/definitions/propsDefinition"},
        "slots": {"type": "object"},
    },
    "definitions": {
        "propsDefinition": {
            "type": "object",
            "required": ["type", "properties"],
            "properties": {
                "type": {"type": "string", "enum": ["object"]},
                "properties": {
                    "type": "object",
                    "additionalProperties": {"$ref": "#/definitions/propDefinition"},
                },
            },
        },
        "propDefinition": {
            "type": "object",
            "properties": {"type": {"$ref": "#/definitions/typeDefinition"}},
        },
        "typeDefinition": {
            "anyOf": [
                {"$ref": "#/definitions/simpleTypes"},
                {
                    "type": "array",
                    "items": {"$ref": "#/definitions/simpleTypes"},
                    "minItems": 1,
                    "uniqueItems": True,
                },
            ]
        },
        "simpleTypes": {
            "enum": ["array", "boolean", "integer", "null", "number", "object", "string"]
        },
    },
}


class FakeTransport(Transport):
    """Transport returning a canned payload or failing."""

    def __init__(self, name: str, payload: Optional[bytes] = None):
        self.name = name
        self.payload = payload
        self.calls = []

    def fetch_bytes(self, url, timeout, user_agent):
        self.calls.append((url, timeout, user_agent))
        if self.payload is None:
            raise SchemaFetchError(f"{self.name} is offline")
        return self.payload


@pytest.fixture
def metadata_schema():
    return json.loads(json.dumps(METADATA_SCHEMA))


@pytest.fixture
def schema_bytes():
    return json.dumps(METADATA_SCHEMA).encode("utf-8")


@pytest.fixture
def config(tmp_path):
    return ValidatorConfig(cache_dir=str(tmp_path / "cache"))


@pytest.fixture
def write_component(tmp_path):
    """Write ``<root>/<name>/<name>.component.yml`` and return its path."""

    def _write(name: str, data, root: Optional[Path] = None) -> Path:
        directory = (root or tmp_path / "components") / name
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{name}.component.yml"
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write
