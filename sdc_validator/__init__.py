"""Validator for Drupal single directory component (``*.component.yml``) files."""

__version__ = "1.0.0"

from .config import ValidatorConfig  # noqa: E402
from .linter import ComponentValidator, ValidationResult, validate_files  # noqa: E402
from .schema import SchemaProvider  # noqa: E402

__all__ = ['ComponentValidator', 'SchemaProvider', 'ValidationResult', 'ValidatorConfig', 'validate_files']
