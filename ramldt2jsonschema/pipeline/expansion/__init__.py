"""
Expansion module.

Resolves RAML inheritance and type expressions into expanded and
canonical type trees.
"""

from __future__ import annotations

from .canonical import canonical_form
from .expander import TypeExpander, TypeExpressionParser, expanded_form

__all__ = [
    "TypeExpander",
    "TypeExpressionParser",
    "expanded_form",
    "canonical_form",
]
