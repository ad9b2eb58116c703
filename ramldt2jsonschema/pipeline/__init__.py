"""
Pipeline - RAML data type to JSON Schema converter.

This module converts RAML data types in distinct phases:

1. Phase 1 (Document): Build plain type trees from RAML text, resolving
   `!include` directives and library references
2. Phase 2 (Expansion): Resolve inheritance and type expressions into
   expanded, then canonical type trees
3. Phase 3 (Schema): Rewrite canonical type trees into JSON Schema
"""

from __future__ import annotations

from .config import ConverterConfig
from .converter import Dt2JsConverter, dt2js

__all__ = [
    "ConverterConfig",
    "Dt2JsConverter",
    "dt2js",
]
