"""Decoding of component metadata files."""

from .yaml_parser import DecodeResult, YamlParser, decode_component, yaml_parser

__all__ = ['DecodeResult', 'YamlParser', 'decode_component', 'yaml_parser']
