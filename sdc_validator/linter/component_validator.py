# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Validation of a single component definition.

Diagnostics come out in a fixed order: prop/slot collisions, props
structure, schema presence, non-string types, JSON Schema violations and
finally missing classes/interfaces.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..parsing.yaml_parser import YamlParser, decode_component, yaml_parser
from ..schema.evaluator import SchemaEvaluator, strip_schema_markers
from ..schema.provider import SchemaProvider
from .adapter import neutralize
from .report import ValidationResult
from .structure import StructuralValidator, component_id_for, has_schema
from .types import EnvironmentTypeRegistry, TypeRegistry, get_class_props

logger = logging.getLogger(__name__)


class ComponentValidator:
    """Sequences the structural rules, type adaptation and schema evaluation."""

    def __init__(
        self,
        schema_provider: Optional[SchemaProvider] = None,
        *,
        enforce_schemas: bool = False,
        type_registry: Optional[TypeRegistry] = None,
        evaluator: Optional[SchemaEvaluator] = None,
        structural: Optional[StructuralValidator] = None,
        parser: YamlParser = yaml_parser,
    ):
        self.schema_provider = schema_provider
        self.enforce_schemas = enforce_schemas
        self.type_registry = type_registry or EnvironmentTypeRegistry()
        self.evaluator = evaluator or SchemaEvaluator()
        self.structural = structural or StructuralValidator()
        self.parser = parser

    def _schema(self) -> Optional[dict]:
        if self.schema_provider is None:
            return None
        return self.schema_provider.resolve()

    def missing_class_errors(self, classes_per_prop: Dict[str, List[str]], component_id: str) -> List[str]:
        errors = []
        for prop_name, class_types in classes_per_prop.items():
            for class_name in class_types:
                if not self.type_registry.type_exists(class_name):
                    errors.append(
                        f'Unable to find class/interface "{class_name}" specified in the prop '
                        f'"{prop_name}" for the component "{component_id}".'
                    )
        return errors

    def validate_one(
        self,
        definition: Dict[str, Any],
        enforce_schemas: Optional[bool] = None,
        schema: Optional[dict] = None,
        component_id: Optional[str] = None,
    ) -> List[str]:
        """Validate a decoded component definition.

        Args:
            definition: Decoded ``.component.yml`` content; left untouched
            enforce_schemas: Require a props schema; defaults to the
                validator's mode
            schema: Metadata schema; ``None`` skips JSON Schema evaluation
            component_id: Identifier used in messages

        Returns:
            Ordered list of diagnostics, empty when the definition is valid
        """
        if enforce_schemas is None:
            enforce_schemas = self.enforce_schemas

        definition = strip_schema_markers(definition)
        component_id = component_id or component_id_for(definition)

        errors = self.structural.check_collisions(definition, component_id)
        errors.extend(self.structural.check_props_structure(definition))

        if not has_schema(definition):
            errors.extend(self.structural.check_presence(definition, component_id, enforce_schemas))
            return errors

        errors.extend(self.structural.check_non_string_types(definition, component_id))

        props_schema = definition['props']
        if not isinstance(props_schema, dict):
            # Not a mapping: leave it to the metadata schema to report.
            errors.extend(self.evaluator.evaluate(definition, schema))
            return errors

        classes_per_prop = get_class_props(props_schema)
        missing_classes = self.missing_class_errors(classes_per_prop, component_id)

        adapted = copy.copy(definition)
        adapted['props'] = neutralize(props_schema, classes_per_prop)
        errors.extend(self.evaluator.evaluate(adapted, schema))

        errors.extend(missing_classes)
        return errors

    def validate_file(self, file_path: Path) -> ValidationResult:
        """Decode and validate one file. Never raises."""
        result = ValidationResult(file_path)

        decoded = decode_component(file_path, self.parser)
        if not decoded.ok:
            result.parse_error = decoded.error
            return result

        definition = dict(decoded.definition)
        dir_name = Path(file_path).parent.name
        if definition.get('id') is None:
            definition['id'] = dir_name

        try:
            result.extend(
                self.validate_one(
                    definition,
                    schema=self._schema(),
                    component_id=component_id_for(definition, dir_name),
                )
            )
        except Exception as e:
            logger.debug(f"Validation of {file_path} failed", exc_info=True)
            result.add_error(f"Unexpected error during validation: {e}")
        return result
