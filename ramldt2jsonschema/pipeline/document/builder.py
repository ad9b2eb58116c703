"""
Document tree builder.

Walks the node graph composed by PyYAML and builds the plain nested
dict representation of a RAML document: `!include` directives are
resolved, scalar leaves are destringified and `alias.TypeName` leaves
are replaced by the library type they name.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import yaml

from ...constants import INCLUDE_TAG
from ...utils import destringify, set_path
from .includes import IncludeKind, resolve_include
from .libraries import LibraryTable, extract_libraries, library_or_value


def compose(text: str) -> yaml.Node | None:
    """Parse YAML text into a node graph without constructing Python objects."""
    return yaml.compose(text, Loader=yaml.SafeLoader)


class TreeBuilder:
    """Builds a type tree from a composed YAML document."""

    def __init__(self, base_path: str, libraries: LibraryTable | None = None):
        """
        Initialize the builder.

        Args:
            base_path: Directory used to resolve relative include locations
            libraries: Library table used to substitute `alias.TypeName` leaves
        """
        self.base_path = base_path
        self.libraries = libraries or {}

    def build(self, root: yaml.Node | None) -> dict[str, Any]:
        """Build the tree for a whole document."""
        tree: dict[str, Any] = {}
        if root is not None:
            self._visit(tree, [], root)
        return tree

    def _visit(self, tree: dict[str, Any], keys: list[str], node: yaml.Node) -> None:
        # Include detection comes first: included scalars must not be read as leaves
        if node.tag == INCLUDE_TAG:
            self._splice_include(tree, keys, node)
            return

        if isinstance(node, yaml.ScalarNode):
            set_path(tree, keys, self._leaf(node))
            return

        if isinstance(node, yaml.SequenceNode):
            set_path(tree, keys, [self._item(item) for item in node.value])
            return

        # Named examples collapse to a plain list of their values
        if keys and keys[-1] == "examples":
            set_path(tree, keys, [self._item(value) for _, value in node.value])
            return

        if not node.value:
            set_path(tree, keys, {})
            return

        for key_node, value_node in node.value:
            self._visit(tree, keys + [str(key_node.value)], value_node)

    def _leaf(self, node: yaml.ScalarNode) -> Any:
        if node.style is None and node.value == "":
            return None
        value = node.value
        # Double quotes keep a scalar as a string
        if node.style != '"':
            value = destringify(value)
        return library_or_value(self.libraries, value)

    def _item(self, node: yaml.Node) -> Any:
        """Build a single sequence item or example value."""
        holder: dict[str, Any] = {}
        self._visit(holder, ["item"], node)
        return holder.get("item")

    def _splice_include(self, tree: dict[str, Any], keys: list[str], node: yaml.Node) -> None:
        include = resolve_include(self.base_path, node.value)
        kind = include.kind

        if kind is IncludeKind.JSON:
            set_path(tree, keys, json.loads(include.content))
        elif kind is IncludeKind.YAML:
            # The included document is traversed in place of the directive
            included = compose(include.content)
            if included is not None:
                self._visit(tree, keys, included)
        else:
            set_path(tree, keys, include.content)


@dataclass
class RamlDocument:
    """A built document and the libraries it uses."""

    tree: dict[str, Any] = field(default_factory=dict)
    libraries: LibraryTable = field(default_factory=dict)

    @property
    def types(self) -> Any:
        return self.tree.get("types")


def load_document(raml_data: str, base_path: str = ".") -> RamlDocument:
    """
    Build a RAML document, resolving its includes and libraries.

    Args:
        raml_data: RAML document text
        base_path: Directory used to resolve includes and libraries

    Returns:
        RamlDocument holding the built tree and the library table
    """
    root = compose(raml_data)
    libraries = extract_libraries(root, base_path, TreeBuilder(base_path).build)
    tree = TreeBuilder(base_path, libraries).build(root)
    return RamlDocument(tree=tree, libraries=libraries)


def load_context(raml_data: str, base_path: str = ".") -> Any:
    """
    Load the named types declared by a RAML document.

    Returns:
        The tree found under the top-level `types` key, or None when absent
    """
    return load_document(raml_data, base_path).types
