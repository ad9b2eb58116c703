"""
Schema module.

Converts canonical RAML type trees into JSON Schema trees.
"""

from __future__ import annotations

from .rewriter import (
    RequiredScope,
    SchemaRewriter,
    convert_date_type,
    convert_display_name,
    convert_file_type,
    convert_pattern_properties,
    convert_type,
    schema_form,
)

__all__ = [
    "RequiredScope",
    "SchemaRewriter",
    "schema_form",
    "convert_type",
    "convert_file_type",
    "convert_date_type",
    "convert_display_name",
    "convert_pattern_properties",
]
