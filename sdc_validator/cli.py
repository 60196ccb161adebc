#!/usr/bin/env python3
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


"""CLI entry point for validating ``*.component.yml`` files."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import ValidatorConfig
from .linter import ValidationResult, validate_files
from .linter.types import EnvironmentTypeRegistry
from .schema.provider import SchemaProvider

logger = logging.getLogger(__name__)

COMPONENT_SUFFIX = '.component.yml'

USAGE = (
    "Usage: validate-sdc [--enforce-schemas] [path1] [path2] ...\n"
    "Example: validate-sdc web/themes/custom/[theme_name]/components"
)


def find_component_files(paths: List[str], cwd: Optional[Path] = None) -> List[Path]:
    """Find all component metadata files in the given files and directories."""
    base = cwd or Path.cwd()
    component_files = []

    for path_str in paths:
        path = Path(path_str)
        if not path.is_absolute():
            path = base / path

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            if path.name.endswith(COMPONENT_SUFFIX):
                component_files.append(path)
            else:
                logger.warning(f"File is not a {COMPONENT_SUFFIX} file: {path}")
        elif path.is_dir():
            for root, _dirs, files in os.walk(path):
                for name in files:
                    if name.lower().endswith(COMPONENT_SUFFIX):
                        component_files.append(Path(root) / name)

    return sorted(set(component_files))


def _print_human(results: List[ValidationResult]) -> None:
    for result in results:
        if result.parse_error is not None:
            print(f"\n{result.file_path} - Parse error:")
            print(f"  • {result.parse_error}")
        elif result.errors:
            print(f"\n{result.file_path} has validation errors:")
            for error in result.errors:
                print(f"  • {error}")

    total = len(results)
    failed = sum(1 for r in results if r.has_errors)
    print("\n" + "=" * 60)
    if failed:
        print("✗ Validation failed!")
        print(f"  Total files checked: {total}")
        print(f"  Files with errors: {failed}")
    else:
        print(f"✓ All {total} component files are valid!")


def _print_json(results: List[ValidationResult]) -> None:
    output = {
        'files': len(results),
        'files_with_errors': sum(1 for r in results if r.has_errors),
        'errors': sum(len(r.errors) + (r.parse_error is not None) for r in results),
        'results': [r.to_dict() for r in results],
    }
    print(json.dumps(output, indent=2))


def _print_github_actions(results: List[ValidationResult]) -> None:
    for result in results:
        if result.parse_error is not None:
            print(f"::error file={result.file_path}::Parse error: {result.parse_error}")
        for error in result.errors:
            print(f"::error file={result.file_path}::{error}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='validate-sdc',
        description='Validate Drupal single directory component metadata files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        help='Component files or directories to search recursively',
    )
    parser.add_argument(
        '--enforce-schemas',
        action='store_true',
        default=None,
        help='Require every component to declare a props schema',
    )
    parser.add_argument(
        '--schema',
        dest='schema_path',
        default=None,
        help='Path to a local metadata.schema.json to use',
    )
    parser.add_argument(
        '--offline',
        action='store_true',
        default=None,
        help='Never download the metadata schema',
    )
    parser.add_argument(
        '--known-type',
        dest='known_types',
        action='append',
        default=[],
        metavar='NAME',
        help='Class/interface name to treat as existing (repeatable)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    return parser


def run(argv: Optional[List[str]] = None, config: Optional[ValidatorConfig] = None) -> int:
    """Run the validator and return the process exit status."""
    args = build_parser().parse_args(argv)
    config = config or ValidatorConfig.from_env()

    if args.enforce_schemas:
        config.enforce_schemas = True
    if args.schema_path:
        config.schema_path = args.schema_path
    if args.offline:
        config.offline = True
    config.known_types = list(config.known_types) + args.known_types

    if not args.paths:
        print(USAGE)
        return 1

    component_files = find_component_files(args.paths)
    if not component_files:
        print(f"No {COMPONENT_SUFFIX} files found in the specified paths.")
        return 0

    results = validate_files(
        component_files,
        schema_provider=SchemaProvider(config),
        enforce_schemas=config.enforce_schemas,
        type_registry=EnvironmentTypeRegistry(config.known_types),
    )

    if args.format == 'json':
        _print_json(results)
    elif args.format == 'github-actions':
        _print_github_actions(results)
    else:
        _print_human(results)

    return 1 if any(r.has_errors for r in results) else 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the validate-sdc command."""
    config = ValidatorConfig.from_env()
    config.set_logging()
    sys.exit(run(argv, config))


if __name__ == '__main__':
    main()
