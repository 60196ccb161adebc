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


"""Configuration management for the SDC validator."""

import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .utils.logging_utils import configure_split_stream_logging, level_from_name

logger = logging.getLogger(__name__)


DEFAULT_SCHEMA_URL = (
    "https://git.drupalcode.org/project/drupal/-/raw/11.x/"
    "core/assets/schemas/v1/metadata.schema.json"
)

# Relative location of the schema inside a Drupal code base
SCHEMA_RELATIVE_PATH = "core/assets/schemas/v1/metadata.schema.json"

# Candidate Drupal roots, relative to the current working directory
SCHEMA_SEARCH_ROOTS: Tuple[str, ...] = ("web", "docroot", "")

CACHE_FILE_NAME = "metadata.schema.json"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, "").split(",") if item.strip()]


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


@dataclass
class ValidatorConfig:
    """Configuration class for a validation run."""
    log_level: str = "WARNING"
    print_level: str = "WARNING"
    enforce_schemas: bool = False

    # schema resolution
    schema_url: str = DEFAULT_SCHEMA_URL
    schema_path: Optional[str] = None
    cache_dir: str = field(default_factory=lambda: str(Path(tempfile.gettempdir()) / "sdc-validator"))
    cache_ttl: int = 24 * 60 * 60
    fetch_timeout: float = 10.0
    offline: bool = False

    # class/interface names treated as existing
    known_types: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        defaults = cls()
        return cls(
            log_level=os.getenv('SDC_VALIDATOR_LOG_LEVEL', defaults.log_level),
            print_level=os.getenv('SDC_VALIDATOR_PRINT_LEVEL', defaults.print_level),
            enforce_schemas=_env_flag('SDC_VALIDATOR_ENFORCE_SCHEMAS'),
            schema_url=os.getenv('SDC_VALIDATOR_SCHEMA_URL', defaults.schema_url),
            schema_path=os.getenv('SDC_VALIDATOR_SCHEMA_PATH') or None,
            cache_dir=os.getenv('SDC_VALIDATOR_CACHE_DIR', defaults.cache_dir),
            cache_ttl=_env_number('SDC_VALIDATOR_CACHE_TTL', defaults.cache_ttl, int),
            fetch_timeout=_env_number('SDC_VALIDATOR_FETCH_TIMEOUT', defaults.fetch_timeout, float),
            offline=_env_flag('SDC_VALIDATOR_OFFLINE'),
            known_types=_env_list('SDC_VALIDATOR_KNOWN_TYPES'),
        )

    @property
    def cache_file(self) -> Path:
        return Path(self.cache_dir) / CACHE_FILE_NAME

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = level_from_name(self.log_level)
        stderr_level = level_from_name(self.print_level)

        configure_split_stream_logging(level=level, stderr_level=stderr_level)

        return logging.getLogger('sdc_validator')
