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


"""Per-file validation results."""

from pathlib import Path
from typing import List, Optional


class ValidationResult:
    """Container for the diagnostics of a single component file."""

    def __init__(self, file_path: Path):
        """Initialize validation result.

        Args:
            file_path: Path to the file being validated
        """
        self.file_path = file_path
        self.errors: List[str] = []
        self.parse_error: Optional[str] = None

    def add_error(self, message: str):
        """Add a diagnostic message."""
        self.errors.append(message)

    def extend(self, messages: List[str]):
        self.errors.extend(messages)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors) or self.parse_error is not None

    def to_dict(self) -> dict:
        return {
            'file': str(self.file_path),
            'errors': list(self.errors),
            'parse_error': self.parse_error,
        }
