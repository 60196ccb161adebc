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


"""Resolution of the component metadata JSON Schema.

Layers, first success wins:

1. an explicitly configured schema file
2. ``core/assets/schemas/v1/metadata.schema.json`` under a Drupal root
3. the local cache file, if younger than the cache TTL
4. a download from the canonical URL (primary transport, then fallback),
   written back to the cache

Failing every layer is not an error: :meth:`SchemaProvider.resolve` returns
``None`` and validation continues without the schema.
"""

import json
import logging
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from .. import __version__
from ..config import SCHEMA_RELATIVE_PATH, SCHEMA_SEARCH_ROOTS, ValidatorConfig
from ..exceptions import SchemaFetchError, SchemaResolutionError
from .transport import FileStorage, RequestsTransport, Transport, UrllibTransport

logger = logging.getLogger(__name__)

USER_AGENT = f"sdc-validator/{__version__} (+https://www.drupal.org/docs/develop/theming-drupal/using-single-directory-components)"

_UNRESOLVED = object()


def get_schema_candidates(cwd: Path, roots: Sequence[str] = SCHEMA_SEARCH_ROOTS) -> List[Path]:
    """Get the on-disk locations where a Drupal checkout keeps the schema.

    Args:
        cwd: Directory the candidate roots are relative to
        roots: Drupal web roots to try, in order

    Returns:
        Candidate schema paths
    """
    return [cwd / root / SCHEMA_RELATIVE_PATH if root else cwd / SCHEMA_RELATIVE_PATH for root in roots]


def parse_schema(raw: bytes, origin: str) -> dict:
    """Decode a schema document.

    Raises:
        SchemaResolutionError: If the bytes are not a JSON object
    """
    try:
        schema = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SchemaResolutionError(f"Invalid JSON in schema from {origin}: {e}") from e
    if not isinstance(schema, dict):
        raise SchemaResolutionError(f"Schema from {origin} is not a JSON object")
    return schema


class SchemaProvider:
    """Resolves the metadata schema once per run."""

    def __init__(
        self,
        config: Optional[ValidatorConfig] = None,
        *,
        transports: Optional[Sequence[Transport]] = None,
        storage: Optional[FileStorage] = None,
        cwd: Optional[Path] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.config = config or ValidatorConfig()
        self.transports = list(transports) if transports is not None else [RequestsTransport(), UrllibTransport()]
        self.storage = storage or FileStorage()
        self.cwd = cwd
        self.clock = clock
        self.source: Optional[str] = None
        self._schema = _UNRESOLVED

    def resolve(self) -> Optional[dict]:
        """Return the schema document, or ``None`` when it is unavailable."""
        if self._schema is _UNRESOLVED:
            self._schema = self._resolve()
            if self._schema is None:
                logger.warning(
                    "Metadata schema could not be resolved; only structural checks will run."
                )
            else:
                logger.info(f"Using metadata schema from {self.source}")
        return self._schema

    def _resolve(self) -> Optional[dict]:
        for path in self._local_paths():
            schema = self._load_local(path)
            if schema is not None:
                return schema

        schema = self._load_cache()
        if schema is not None:
            return schema

        if self.config.offline:
            logger.info("Offline mode, not downloading the metadata schema")
            return None

        return self._load_remote()

    def _local_paths(self) -> List[Path]:
        paths = []
        if self.config.schema_path:
            paths.append(Path(self.config.schema_path))
        paths.extend(get_schema_candidates(self.cwd or Path.cwd()))
        return paths

    def _load_local(self, path: Path) -> Optional[dict]:
        try:
            raw = self.storage.read_bytes(path)
        except OSError as e:
            logger.warning(f"Unable to read schema {path}: {e}")
            return None
        if raw is None:
            logger.debug(f"Schema not found at {path}")
            return None
        try:
            schema = parse_schema(raw, str(path))
        except SchemaResolutionError as e:
            logger.warning(str(e))
            return None
        self.source = str(path)
        return schema

    def _load_cache(self) -> Optional[dict]:
        cache_file = self.config.cache_file
        try:
            mtime = self.storage.modified_time(cache_file)
        except OSError as e:
            logger.warning(f"Unable to read schema cache {cache_file}: {e}")
            return None
        if mtime is None:
            return None

        age = self.clock() - mtime
        if age >= self.config.cache_ttl:
            logger.debug(f"Cached schema {cache_file} is stale ({int(age)}s old)")
            return None

        return self._load_local(cache_file)

    def _load_remote(self) -> Optional[dict]:
        url = self.config.schema_url
        raw = self._download(url)
        if raw is None:
            return None

        self._write_cache(raw)

        try:
            schema = parse_schema(raw, url)
        except SchemaResolutionError as e:
            logger.warning(str(e))
            return None
        self.source = url
        return schema

    def _download(self, url: str) -> Optional[bytes]:
        errors: Dict[str, str] = {}
        for transport in self.transports:
            try:
                logger.debug(f"Downloading schema from {url} via {transport.name}")
                return transport.fetch_bytes(url, self.config.fetch_timeout, USER_AGENT)
            except SchemaFetchError as e:
                errors[transport.name] = str(e)
                logger.debug(f"Transport {transport.name} failed: {e}")

        details = "; ".join(f"{name}: {message}" for name, message in errors.items())
        logger.warning(f"Unable to download the metadata schema ({details or 'no transport configured'})")
        return None

    def _write_cache(self, raw: bytes) -> None:
        cache_file = self.config.cache_file
        try:
            self.storage.ensure_directory(cache_file.parent)
            self.storage.write_bytes(cache_file, raw)
        except OSError as e:
            logger.warning(f"Unable to write schema cache {cache_file}: {e}")
