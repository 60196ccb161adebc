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


"""Adapts a component definition so generic JSON Schema validation accepts it.

JSON Schema only knows the seven standard types. Props typed with a PHP
class or interface name would be rejected by the metadata schema's ``type``
enum, so those names are removed here and checked separately against a
:class:`~.types.TypeRegistry`.
"""

import copy
from typing import Any, Dict, List

from .types import normalize_types


def normalize_empty_properties(props_schema: Dict[str, Any]) -> Dict[str, Any]:
    """Turn ``properties: []`` into ``properties: {}``."""
    if isinstance(props_schema, dict) and props_schema.get('properties') == []:
        props_schema = dict(props_schema)
        props_schema['properties'] = {}
    return props_schema


def neutralize(props_schema: Dict[str, Any], classes_per_prop: Dict[str, List[str]]) -> Dict[str, Any]:
    """Remove class/interface types from a copy of ``props_schema``.

    Args:
        props_schema: The ``props`` mapping of a component
        classes_per_prop: Class/interface names per prop, see
            :func:`~.types.get_class_props`

    Returns:
        A copy in which each prop listed in ``classes_per_prop`` keeps only its
        standard types, or ``["null"]`` when none remain
    """
    adapted = normalize_empty_properties(copy.deepcopy(props_schema))
    properties = adapted.get('properties')
    if not isinstance(properties, dict):
        return adapted

    for prop_name, class_types in classes_per_prop.items():
        prop_def = properties.get(prop_name)
        if not isinstance(prop_def, dict) or not class_types:
            continue
        types = [t for t in normalize_types(prop_def.get('type')) if t not in class_types]
        prop_def['type'] = types or ['null']
    return adapted
