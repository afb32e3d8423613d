"""
XML loading and text conversion for configuration documents.

- xml_parser: lxml-backed file/string loading, direct-text extraction,
  plain-name child lookup
- values: non-raising typed conversions returning ParseResult
"""

from .xml_parser import (
    load_document,
    load_document_from_string,
    element_text,
    element_attributes,
    find_child,
    find_children,
    iter_children,
)
from .values import (
    ParseResult,
    parse_int,
    parse_long,
    parse_boolean,
    parse_string,
)

__all__ = [
    # XML loading
    'load_document',
    'load_document_from_string',
    'element_text',
    'element_attributes',
    'find_child',
    'find_children',
    'iter_children',
    # Value conversion
    'ParseResult',
    'parse_int',
    'parse_long',
    'parse_boolean',
    'parse_string',
]
