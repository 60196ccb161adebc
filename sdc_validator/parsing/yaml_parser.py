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


"""YAML decoder for ``*.component.yml`` files."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..exceptions import ComponentParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding one file: either a definition or an error message."""

    definition: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class YamlParser:
    """Safe YAML loader for component metadata."""

    def load_component(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """Load a component metadata file.

        Args:
            file_path: Path to the ``.component.yml`` file

        Returns:
            Parsed YAML content as dictionary (empty documents yield ``{}``)

        Raises:
            ComponentParseError: If the file cannot be read, parsed, or does
                not contain a mapping at its root
        """
        path = Path(file_path)

        if not path.is_file():
            raise ComponentParseError(f"Component file not found: {path}")

        try:
            logger.debug(f"Loading component file: {path}")
            content = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            raise ComponentParseError(f"Failed to read component file {path}: {exc}") from exc

        return self.load_component_from_string(content)

    def load_component_from_string(self, content: str) -> Dict[str, Any]:
        """Load component metadata from string content."""
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ComponentParseError(str(exc)) from exc

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ComponentParseError(
                f"Component metadata must be a mapping, got {type(data).__name__}"
            )

        return data


# Global parser instance
yaml_parser = YamlParser()


def decode_component(file_path: Union[str, Path], parser: YamlParser = yaml_parser) -> DecodeResult:
    """Decode a file without raising; failures are returned as ``DecodeResult.error``."""
    try:
        return DecodeResult(definition=parser.load_component(file_path))
    except ComponentParseError as exc:
        return DecodeResult(error=str(exc))
