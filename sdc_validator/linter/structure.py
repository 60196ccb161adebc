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


"""Structural rules for component definitions.

These mirror the checks Drupal's ``ComponentValidator`` performs before it
hands a definition to the JSON Schema validator.
"""

from typing import Any, Dict, List, Optional

from .types import normalize_types


MISSING_SCHEMA_MESSAGE = (
    'The component "{id}" does not provide schema information. Schema definitions are mandatory '
    'for components declared in modules. For components declared in themes, schema definitions '
    'are only mandatory if the "enforce_prop_schemas" key is set to "true" in the theme info file.'
)


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def prop_names(definition: Dict[str, Any]) -> List[str]:
    return [str(name) for name in _mapping(_mapping(definition.get('props')).get('properties'))]


def slot_names(definition: Dict[str, Any]) -> List[str]:
    return [str(name) for name in _mapping(definition.get('slots'))]


def has_schema(definition: Dict[str, Any]) -> bool:
    """Whether the definition declares a non-empty ``props`` schema."""
    return bool(definition.get('props'))


class StructuralValidator:
    """Rule engine for name collisions, schema presence and type strings."""

    def check_collisions(self, definition: Dict[str, Any], component_id: str) -> List[str]:
        slots = set(slot_names(definition))
        collisions = [name for name in prop_names(definition) if name in slots]
        if not collisions:
            return []
        return [
            f'The component "{component_id}" declared [{", ".join(collisions)}] both as a prop '
            f'and as a slot. Make sure to use different names.'
        ]

    def check_props_structure(self, definition: Dict[str, Any]) -> List[str]:
        props = definition.get('props')
        if not props or not isinstance(props, dict):
            return []
        if props.get('type') is None:
            return ["props must have a 'type' field"]
        if props['type'] == 'object' and props.get('properties') is None:
            return ["props with type 'object' must have a 'properties' field (use 'properties: {}' if empty)"]
        return []

    def check_presence(self, definition: Dict[str, Any], component_id: str, enforce_schemas: bool) -> List[str]:
        if has_schema(definition) or not enforce_schemas:
            return []
        return [MISSING_SCHEMA_MESSAGE.format(id=component_id)]

    def check_non_string_types(self, definition: Dict[str, Any], component_id: str) -> List[str]:
        properties = _mapping(_mapping(definition.get('props')).get('properties'))
        non_string_props = []
        for name, prop_def in properties.items():
            if not isinstance(prop_def, dict) or 'type' not in prop_def:
                continue
            if any(not isinstance(t, str) for t in normalize_types(prop_def['type'])):
                non_string_props.append(str(name))
        if not non_string_props:
            return []
        return [
            f'The component "{component_id}" uses non-string types for properties: '
            f'{", ".join(non_string_props)}.'
        ]

    def check(
        self,
        definition: Dict[str, Any],
        component_id: str,
        enforce_schemas: bool = False,
    ) -> List[str]:
        """Run every structural rule in order.

        The non-string type rule only runs when the definition has a schema.
        """
        errors = self.check_collisions(definition, component_id)
        errors.extend(self.check_props_structure(definition))
        errors.extend(self.check_presence(definition, component_id, enforce_schemas))
        if has_schema(definition):
            errors.extend(self.check_non_string_types(definition, component_id))
        return errors


def component_id_for(definition: Dict[str, Any], dir_name: Optional[str] = None) -> str:
    """Identifier used in messages: id, machineName, directory name, ``unknown``."""
    for key in ('id', 'machineName'):
        value = definition.get(key)
        if value not in (None, ''):
            return str(value)
    return dir_name or 'unknown'
