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


"""Transports and local storage used to resolve the metadata schema.

Network and file system access sit behind these small classes so the
resolution policy in :mod:`.provider` can be exercised without either.
"""

import logging
import urllib.error
import urllib.request
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import requests

from ..exceptions import SchemaFetchError

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Fetches raw bytes from a URL."""

    name: str = "transport"

    @abstractmethod
    def fetch_bytes(self, url: str, timeout: float, user_agent: str) -> bytes:
        """Download ``url``.

        Raises:
            SchemaFetchError: If the resource cannot be downloaded
        """


class RequestsTransport(Transport):
    """Primary transport built on ``requests``."""

    name = "requests"

    def __init__(self, session: Optional[requests.Session] = None):
        self._session = session

    def fetch_bytes(self, url: str, timeout: float, user_agent: str) -> bytes:
        getter = self._session.get if self._session is not None else requests.get
        try:
            response = getter(url, headers={"User-Agent": user_agent}, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise SchemaFetchError(f"Failed to fetch {url}: {exc}") from exc
        return response.content


class UrllibTransport(Transport):
    """Fallback transport using the standard library."""

    name = "urllib"

    def fetch_bytes(self, url: str, timeout: float, user_agent: str) -> bytes:
        req = urllib.request.Request(url, headers={"User-Agent": user_agent})
        try:
            with urllib.request.urlopen(req, timeout=timeout) as response:
                return response.read()
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise SchemaFetchError(f"Failed to fetch {url}: {exc}") from exc


class FileStorage:
    """Thin wrapper around the local file system."""

    def read_bytes(self, path: Path) -> Optional[bytes]:
        try:
            return Path(path).read_bytes()
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
            return None

    def write_bytes(self, path: Path, data: bytes) -> None:
        Path(path).write_bytes(data)

    def modified_time(self, path: Path) -> Optional[float]:
        try:
            return Path(path).stat().st_mtime
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
            return None

    def ensure_directory(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)
