"""
Library extraction for RAML `uses` declarations.

Every library listed under `uses` is loaded eagerly, built into a type
tree and flattened into a table mapping alias -> type name -> type tree.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from typing import Any

import yaml

from .includes import resolve_include

logger = logging.getLogger(__name__)

LibraryTable = dict[str, dict[str, Any]]


def find_mapping_value(node: yaml.Node | None, key: str) -> yaml.Node | None:
    """Return the value node stored under key in a mapping node."""
    if not isinstance(node, yaml.MappingNode):
        return None
    for key_node, value_node in node.value:
        if isinstance(key_node, yaml.ScalarNode) and key_node.value == key:
            return value_node
    return None


def extract_libraries(
    root: yaml.Node | None,
    base_path: str,
    build_tree: Callable[[yaml.Node | None], dict[str, Any]],
) -> LibraryTable:
    """
    Build the library table for a parsed document.

    Args:
        root: The composed root node of the document
        base_path: Directory library locations are resolved against
        build_tree: Builds the type tree of a library document, without libraries

    Returns:
        Mapping from library alias to the types that library declares
    """
    uses = find_mapping_value(root, "uses")
    if not isinstance(uses, yaml.MappingNode):
        return {}

    libraries: LibraryTable = {}
    for alias_node, location_node in uses.value:
        alias = alias_node.value
        include = resolve_include(base_path, location_node.value)
        library_root = yaml.compose(include.content, Loader=yaml.SafeLoader)

        library_tree = build_tree(library_root)
        libraries[alias] = flatten_library(library_tree)
        logger.debug("Loaded library %s from %s (%d types)", alias, include.location, len(libraries[alias]))

    return libraries


def flatten_library(library_tree: dict[str, Any]) -> dict[str, Any]:
    """Strip the section level (`types`, `annotationTypes`, ...) of a library tree."""
    flat: dict[str, Any] = {}
    for section in library_tree.values():
        if isinstance(section, dict):
            flat.update(section)
    return flat


def library_or_value(libraries: LibraryTable | None, value: Any) -> Any:
    """
    Resolve an `alias.TypeName` reference against the library table.

    Returns the referenced type tree on a match, the unchanged value otherwise.
    """
    if not isinstance(value, str) or not libraries:
        return value

    namespace = value.split(".")
    if len(namespace) != 2:
        return value

    alias, type_name = namespace
    library = libraries.get(alias)
    if library is None or type_name not in library:
        return value
    return copy.deepcopy(library[type_name])
