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


from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from jsonschema import validators
from jsonschema.exceptions import SchemaError, ValidationError

logger = logging.getLogger(__name__)


JsonPointer = str

SCHEMA_MARKER = "$schema"


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def format_path(path) -> JsonPointer:
    """Render a jsonschema error path as a JSON pointer ("" for the root)."""
    tokens = [_jp_escape(str(p)) for p in path]
    if not tokens:
        return ""
    return "/" + "/".join(tokens)


def format_error(error: ValidationError) -> str:
    path = format_path(error.absolute_path)
    if not path:
        return error.message
    return f"[{path}] {error.message}"


def strip_schema_markers(value: Any) -> Any:
    """Return a copy of ``value`` without any ``$schema`` key, at any depth."""
    if isinstance(value, dict):
        return {k: strip_schema_markers(v) for k, v in value.items() if k != SCHEMA_MARKER}
    if isinstance(value, list):
        return [strip_schema_markers(v) for v in value]
    return value


def _is_object(checker, instance) -> bool:
    # An empty sequence counts as an empty object.
    return isinstance(instance, dict) or (isinstance(instance, list) and not instance)


def _validator_class(schema: dict):
    base = validators.validator_for(schema, default=validators.Draft4Validator)
    type_checker = base.TYPE_CHECKER.redefine("object", _is_object)
    return validators.extend(base, type_checker=type_checker)


class SchemaEvaluator:
    """Runs generic JSON Schema validation and formats the violations."""

    def __init__(self):
        self._schema: Optional[dict] = None
        self._validator = None

    def _validator_for(self, schema: dict):
        if self._schema is not schema:
            cls = _validator_class(schema)
            cls.check_schema(schema)
            self._validator = cls(schema)
            self._schema = schema
        return self._validator

    def evaluate(self, definition: Dict[str, Any], schema: Optional[dict]) -> List[str]:
        """Validate ``definition`` against ``schema``.

        Args:
            definition: Component definition, already adapted for the schema
            schema: Metadata schema document; ``None`` skips evaluation

        Returns:
            One ``[<path>] <message>`` string per violation, or a single
            ``Schema validation error: ...`` string if the validator failed
        """
        if schema is None:
            return []

        instance = strip_schema_markers(definition)
        try:
            validator = self._validator_for(schema)
            return [format_error(error) for error in validator.iter_errors(instance)]
        except SchemaError as e:
            return [f"Schema validation error: {e.message}"]
        except Exception as e:
            logger.debug("Schema evaluation failed", exc_info=True)
            return [f"Schema validation error: {e}"]
