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


"""Validation rules for Drupal single directory component metadata."""

from pathlib import Path
from typing import Iterable, List, Optional

from ..schema.provider import SchemaProvider
from .component_validator import ComponentValidator
from .report import ValidationResult
from .structure import StructuralValidator
from .types import EnvironmentTypeRegistry, TypeRegistry

__all__ = ['validate_files', 'ComponentValidator', 'StructuralValidator', 'ValidationResult']


def validate_files(
    file_paths: Iterable[Path],
    *,
    schema_provider: Optional[SchemaProvider] = None,
    enforce_schemas: bool = False,
    type_registry: Optional[TypeRegistry] = None,
) -> List[ValidationResult]:
    """Validate a list of component files.

    Args:
        file_paths: Component files, validated in the given order
        schema_provider: Resolves the metadata schema once for the whole batch
        enforce_schemas: Require every component to declare props
        type_registry: Lookup for class/interface prop types

    Returns:
        List of ValidationResult objects, one per file
    """
    validator = ComponentValidator(
        schema_provider,
        enforce_schemas=enforce_schemas,
        type_registry=type_registry or EnvironmentTypeRegistry(),
    )

    results = []
    for file_path in file_paths:
        try:
            result = validator.validate_file(file_path)
        except Exception as e:
            result = ValidationResult(file_path)
            result.add_error(f"Unexpected error during validation: {str(e)}")
        results.append(result)

    return results
