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


"""Classification of prop types into JSON Schema types and class/interface names."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..config import SCHEMA_SEARCH_ROOTS

STANDARD_TYPES = frozenset(['array', 'boolean', 'integer', 'null', 'number', 'object', 'string'])

_PHP_CLASS_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\\[A-Za-z_][A-Za-z0-9_]*)*$")

# PSR-4 namespace prefixes autoloaded from Drupal core
PSR4_PREFIXES: Tuple[Tuple[str, str], ...] = (
    ("Drupal\\Core\\", "core/lib/Drupal/Core"),
    ("Drupal\\Component\\", "core/lib/Drupal/Component"),
)


def normalize_types(type_declaration: Any) -> List[Any]:
    """Return a prop's declared type(s) as a list.

    A missing declaration is treated as ``null``; a single value becomes a
    one-element list. Elements are returned as declared, strings or not.
    """
    if type_declaration is None:
        return ['null']
    if isinstance(type_declaration, (list, tuple)):
        return list(type_declaration)
    return [type_declaration]


@dataclass(frozen=True)
class TypeClassification:
    standard_types: Tuple[str, ...] = ()
    foreign_types: Tuple[str, ...] = ()


def classify(type_declaration: Any) -> TypeClassification:
    """Split a type declaration into standard types and class/interface names.

    Non-string elements are neither; they are reported by the non-string type
    rule instead.
    """
    standard: List[str] = []
    foreign: List[str] = []
    for type_name in normalize_types(type_declaration):
        if not isinstance(type_name, str):
            continue
        if type_name in STANDARD_TYPES:
            standard.append(type_name)
        elif type_name not in foreign:
            foreign.append(type_name)
    return TypeClassification(tuple(standard), tuple(foreign))


def get_class_props(props_schema: Dict[str, Any]) -> Dict[str, List[str]]:
    """Map each prop using class/interface types to those type names."""
    classes_per_prop: Dict[str, List[str]] = {}
    properties = props_schema.get('properties') if isinstance(props_schema, dict) else None
    if not isinstance(properties, dict):
        return classes_per_prop

    for prop_name, prop_def in properties.items():
        if not isinstance(prop_def, dict):
            continue
        foreign = classify(prop_def.get('type', 'null')).foreign_types
        if foreign:
            classes_per_prop[prop_name] = list(foreign)
    return classes_per_prop


class TypeRegistry(ABC):
    """Answers whether a class or interface name exists in the environment."""

    @abstractmethod
    def type_exists(self, name: str) -> bool:
        ...


class AllowListTypeRegistry(TypeRegistry):
    """Registry backed by a configured list of known names.

    PHP style names are compared without their leading backslash, so
    ``\\Drupal\\Core\\Url`` and ``Drupal\\Core\\Url`` are the same entry.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._names = {self._key(name) for name in names if name}

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lstrip('\\')

    def type_exists(self, name: str) -> bool:
        return self._key(name) in self._names


class Psr4TypeRegistry(TypeRegistry):
    """Registry that maps class names to Drupal core files by PSR-4 rules.

    ``Drupal\\Core\\Template\\Attribute`` exists when
    ``core/lib/Drupal/Core/Template/Attribute.php`` is present under one of
    the Drupal roots. Files are only checked for existence, never loaded.
    """

    def __init__(
        self,
        cwd: Optional[Path] = None,
        roots: Sequence[str] = SCHEMA_SEARCH_ROOTS,
        prefixes: Sequence[Tuple[str, str]] = PSR4_PREFIXES,
    ):
        self.cwd = cwd
        self.roots = tuple(roots)
        self.prefixes = tuple(prefixes)

    def candidate_files(self, name: str) -> List[Path]:
        class_name = name.strip().lstrip('\\')
        if not _PHP_CLASS_NAME.match(class_name):
            return []

        base = self.cwd or Path.cwd()
        files = []
        for prefix, directory in self.prefixes:
            if not class_name.startswith(prefix):
                continue
            relative = Path(directory, *class_name[len(prefix):].split('\\')).with_suffix('.php')
            files.extend(base / root / relative if root else base / relative for root in self.roots)
        return files

    def type_exists(self, name: str) -> bool:
        return any(path.is_file() for path in self.candidate_files(name))


class EnvironmentTypeRegistry(TypeRegistry):
    """Allow-list first, then Drupal core PSR-4 lookup. Results are memoized."""

    def __init__(self, known_types: Iterable[str] = (), cwd: Optional[Path] = None):
        self._registries: List[TypeRegistry] = [AllowListTypeRegistry(known_types), Psr4TypeRegistry(cwd)]
        self._seen: Dict[str, bool] = {}

    def type_exists(self, name: str) -> bool:
        if name not in self._seen:
            self._seen[name] = any(registry.type_exists(name) for registry in self._registries)
        return self._seen[name]
