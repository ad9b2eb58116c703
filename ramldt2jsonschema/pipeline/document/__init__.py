"""
Document module.

Turns RAML text into plain type trees: include resolution, library
extraction and tree building.
"""

from __future__ import annotations

from .builder import RamlDocument, TreeBuilder, compose, load_context, load_document
from .includes import IncludeKind, ResolvedInclude, resolve_include
from .libraries import LibraryTable, extract_libraries, library_or_value

__all__ = [
    "TreeBuilder",
    "compose",
    "load_context",
    "load_document",
    "RamlDocument",
    "IncludeKind",
    "ResolvedInclude",
    "resolve_include",
    "LibraryTable",
    "extract_libraries",
    "library_or_value",
]
