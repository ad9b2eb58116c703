"""
RAML data type to JSON Schema converter.

Orchestrates the pipeline phases for one type:

1. Load the `types` context of the document (includes and libraries resolved)
2. Expand and canonicalize the requested type
3. Rewrite the canonical type into JSON Schema
4. Attach the root keywords
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..errors import InvalidRamlError, TypeNotFoundError
from .config import ConverterConfig
from .document import load_document
from .expansion import canonical_form, expanded_form
from .schema import SchemaRewriter

logger = logging.getLogger(__name__)


class Dt2JsConverter:
    """Converts RAML data types to JSON Schema."""

    def __init__(self, config: ConverterConfig | None = None):
        self.config = config or ConverterConfig()

    def set_base_path(self, path: str | Path) -> None:
        """Set the directory used as root for includes and libraries."""
        self.config.base_path = str(path)

    def load_context(self, raml_data: str) -> Any:
        """Load the named types declared by a RAML document."""
        return load_document(raml_data, self.config.base_path).types

    def convert(self, raml_data: str, type_name: str) -> dict[str, Any]:
        """
        Convert a RAML data type to JSON Schema.

        Args:
            raml_data: RAML document text
            type_name: Name of the type to convert, declared under `types`

        Returns:
            The JSON Schema of the type, with its `$schema` keyword

        Raises:
            InvalidRamlError: If the document declares no `types` mapping
            TypeNotFoundError: If type_name is not declared
        """
        document = load_document(raml_data, self.config.base_path)
        context = document.types
        if not isinstance(context, dict):
            raise InvalidRamlError()
        if type_name not in context:
            raise TypeNotFoundError(type_name)

        logger.debug("Converting type %s (%d types in context)", type_name, len(context))
        expanded = expanded_form(context[type_name], context, name=type_name, libraries=document.libraries)
        canonical = canonical_form(expanded)

        schema = SchemaRewriter().rewrite(canonical)
        return self.add_root_keywords(schema)

    def add_root_keywords(self, schema: dict[str, Any]) -> dict[str, Any]:
        """Add the JSON Schema root keywords."""
        schema["$schema"] = self.config.schema_uri
        return schema


def dt2js(raml_data: str, type_name: str, config: ConverterConfig | None = None) -> dict[str, Any]:
    """Convert the RAML data type type_name declared in raml_data to JSON Schema."""
    return Dt2JsConverter(config).convert(raml_data, type_name)
