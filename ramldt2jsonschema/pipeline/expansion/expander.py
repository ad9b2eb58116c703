"""
Expanded form of RAML type descriptions.

Resolves type expressions, named types, inheritance and default types so
that every node of the result carries a built-in `type`.
"""

from __future__ import annotations

import copy
import re
from functools import reduce
from typing import Any

from ...constants import BUILTIN_TYPES
from ...errors import ExpansionError
from ...utils import is_pattern_property
from ..document.libraries import LibraryTable, library_or_value

# Facets describing a union itself rather than each of its members
UNION_FACETS = frozenset({"displayName", "description", "example", "examples", "default", "required", "anyOf"})

# Narrowing a parent type to one of these child types is allowed
NARROWINGS = {("number", "integer")}

_TOKEN_PATTERN = re.compile(r"\s*(\[\]|[()|]|[^\s()|\[\]]+)")


class TypeExpressionParser:
    """Parses RAML type expressions such as `Person[] | nil` into type trees.

    Names are left as strings; arrays and unions become
    `{"type": "array", "items": ...}` and `{"type": "union", "anyOf": [...]}`.
    """

    def __init__(self, expression: str):
        self.expression = expression
        self.tokens = self._tokenize(expression)
        self.position = 0

    def _tokenize(self, expression: str) -> list[str]:
        tokens = []
        position = 0
        stripped = expression.rstrip()
        while position < len(stripped):
            match = _TOKEN_PATTERN.match(stripped, position)
            if match is None:
                raise ExpansionError(f"invalid type expression {self.expression!r}")
            tokens.append(match.group(1))
            position = match.end()
        return tokens

    def parse(self) -> Any:
        if not self.tokens:
            raise ExpansionError("empty type expression")
        result = self._parse_union()
        if self.position != len(self.tokens):
            raise ExpansionError(f"unexpected {self.tokens[self.position]!r} in type expression {self.expression!r}")
        return result

    def _peek(self) -> str | None:
        return self.tokens[self.position] if self.position < len(self.tokens) else None

    def _parse_union(self) -> Any:
        branches = [self._parse_postfix()]
        while self._peek() == "|":
            self.position += 1
            branches.append(self._parse_postfix())
        if len(branches) == 1:
            return branches[0]
        return {"type": "union", "anyOf": branches}

    def _parse_postfix(self) -> Any:
        node = self._parse_primary()
        while self._peek() == "[]":
            self.position += 1
            node = {"type": "array", "items": node}
        return node

    def _parse_primary(self) -> Any:
        token = self._peek()
        if token is None or token in ("|", "[]", ")"):
            raise ExpansionError(f"type name expected in type expression {self.expression!r}")
        self.position += 1
        if token != "(":
            return token
        node = self._parse_union()
        if self._peek() != ")":
            raise ExpansionError(f"unbalanced parentheses in type expression {self.expression!r}")
        self.position += 1
        return node


def default_type(facets: dict[str, Any]) -> str:
    """Built-in type implied by the facets of a node that declares no `type`."""
    if "properties" in facets:
        return "object"
    if "items" in facets:
        return "array"
    if "fileTypes" in facets:
        return "file"
    if "anyOf" in facets:
        return "union"
    return "string"


class TypeExpander:
    """Expands type trees against the named types of a document."""

    def __init__(self, context: dict[str, Any], libraries: LibraryTable | None = None):
        """
        Initialize the expander.

        Args:
            context: Mapping from type name to type tree, as declared under `types`
            libraries: Library table resolving `alias.TypeName` names in type expressions
        """
        self.context = context
        self.libraries = libraries or {}

    def expand(self, type_tree: Any, visiting: frozenset[str] = frozenset()) -> dict[str, Any]:
        """
        Expand a type tree.

        Args:
            type_tree: A type expression, a type tree, or None for the default type
            visiting: Named types currently being expanded

        Returns:
            A new tree whose nodes all declare a built-in type
        """
        if type_tree is None:
            return {"type": "string"}
        if isinstance(type_tree, str):
            return self._expand_expression(type_tree, visiting)
        if not isinstance(type_tree, dict):
            raise ExpansionError(f"{type_tree!r} is not a type description")

        facets = dict(type_tree)
        declared = facets.pop("type", None)
        if declared is None:
            base = {"type": default_type(facets)}
        elif isinstance(declared, list):
            if not declared:
                raise ExpansionError("empty list of parent types")
            base = reduce(self._merge, [self.expand(parent, visiting) for parent in declared])
        else:
            base = self.expand(declared, visiting)

        return self._merge(base, self._expand_facets(facets, visiting))

    def _expand_expression(self, expression: str, visiting: frozenset[str]) -> dict[str, Any]:
        parsed = TypeExpressionParser(expression).parse()
        if not isinstance(parsed, str):
            return self.expand(parsed, visiting)

        if parsed in BUILTIN_TYPES:
            return {"type": parsed}
        if parsed in self.context:
            target = self.context[parsed]
        else:
            target = library_or_value(self.libraries, parsed)
            if target == parsed:
                raise ExpansionError(f"unknown type {parsed}")
        if parsed in visiting:
            raise ExpansionError(f"type {parsed} is recursive")
        return self.expand(target, visiting | {parsed})

    def _expand_facets(self, facets: dict[str, Any], visiting: frozenset[str]) -> dict[str, Any]:
        expanded: dict[str, Any] = {}
        for key, value in facets.items():
            if key == "properties" and isinstance(value, dict):
                expanded[key] = self._expand_properties(value, visiting)
            elif key == "items":
                expanded[key] = self.expand(value, visiting)
            elif key == "anyOf" and isinstance(value, list):
                expanded[key] = [self.expand(branch, visiting) for branch in value]
            else:
                expanded[key] = copy.deepcopy(value)
        return expanded

    def _expand_properties(self, properties: dict[str, Any], visiting: frozenset[str]) -> dict[str, Any]:
        expanded: dict[str, Any] = {}
        for name, prop in properties.items():
            prop_tree = self.expand(prop, visiting)
            # `name?` declares an optional property
            if name.endswith("?") and not is_pattern_property(name):
                name = name[:-1]
                prop_tree.setdefault("required", False)
            expanded[name] = prop_tree
        return expanded

    def _merge(self, base: dict[str, Any], own: dict[str, Any]) -> dict[str, Any]:
        """Apply the facets of own on top of base, returning a new tree."""
        if base.get("type") == "union" and "type" not in own:
            return self._merge_into_union(base, own)

        result = copy.deepcopy(base)
        for key, value in own.items():
            if key == "type":
                result["type"] = self._combine_types(result.get("type"), value)
            elif key == "properties" and isinstance(value, dict) and isinstance(result.get("properties"), dict):
                merged = dict(result["properties"])
                for name, prop in value.items():
                    merged[name] = self._merge(merged[name], prop) if name in merged else prop
                result["properties"] = merged
            else:
                result[key] = copy.deepcopy(value)
        return result

    def _merge_into_union(self, union: dict[str, Any], own: dict[str, Any]) -> dict[str, Any]:
        result = copy.deepcopy(union)
        distributed = {key: value for key, value in own.items() if key not in UNION_FACETS}
        if distributed:
            result["anyOf"] = [self._merge(branch, distributed) for branch in result.get("anyOf", [])]
        for key, value in own.items():
            if key in UNION_FACETS:
                result[key] = copy.deepcopy(value)
        return result

    def _combine_types(self, parent: str | None, child: str) -> str:
        if parent is None or parent == "any" or parent == child:
            return child
        if child == "any":
            return parent
        if (parent, child) in NARROWINGS:
            return child
        raise ExpansionError(f"cannot combine types {parent} and {child}")


def expanded_form(
    type_tree: Any,
    context: dict[str, Any],
    name: str | None = None,
    libraries: LibraryTable | None = None,
) -> dict[str, Any]:
    """
    Compute the expanded form of a type.

    Args:
        type_tree: The type tree to expand
        context: Mapping from type name to type tree
        name: Name the type is declared under, to detect self references
        libraries: Library table of the document, for `alias.TypeName` names

    Returns:
        A new, fully expanded type tree

    Raises:
        ExpansionError: If the type cannot be expanded
    """
    visiting = frozenset({name}) if name else frozenset()
    return TypeExpander(context, libraries).expand(type_tree, visiting)
