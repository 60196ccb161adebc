"""Metadata schema resolution and evaluation.

This package does not depend on the linter rules so that schema handling can
be reused on its own.
"""

from .evaluator import SchemaEvaluator, format_error, strip_schema_markers
from .provider import SchemaProvider, get_schema_candidates, parse_schema
from .transport import FileStorage, RequestsTransport, Transport, UrllibTransport

__all__ = [
    'FileStorage',
    'RequestsTransport',
    'SchemaEvaluator',
    'SchemaProvider',
    'Transport',
    'UrllibTransport',
    'format_error',
    'get_schema_candidates',
    'parse_schema',
    'strip_schema_markers',
]
