"""
Schema rewriter.

Rewrites a canonical RAML type tree into JSON Schema: types are renamed,
date types become patterned strings, files get media descriptors, unions
of arrays are hoisted, `/regex/` properties become patternProperties and
per-property `required` flags are aggregated on their object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...constants import (
    DATE_ONLY_PATTERN,
    DATETIME_ONLY_PATTERN,
    RFC2616,
    RFC2616_DATETIME_PATTERN,
    RFC3339,
    RFC3339_DATETIME_PATTERN,
    TIME_ONLY_PATTERN,
)
from ...utils import dedupe, is_pattern_property

RamlTree = dict[str, Any]
SchemaTree = dict[str, Any]

# Mappings from property name to type; they are not type nodes themselves
PROPERTY_MAPS = ("properties", "patternProperties")

DATE_PATTERNS = {
    "date-only": DATE_ONLY_PATTERN,
    "time-only": TIME_ONLY_PATTERN,
    "datetime-only": DATETIME_ONLY_PATTERN,
}


@dataclass
class RequiredScope:
    """Required-property bookkeeping for one object type."""

    props: set[str] = field(default_factory=set)  # Property names declared by the object
    reqs: list[str] = field(default_factory=list)  # Names reported required by the properties


def declared_type(data: dict[str, Any]) -> str | None:
    """Return the `type` facet of a node when it names a type."""
    value = data.get("type")
    return value if isinstance(value, str) and value else None


def convert_type(data: SchemaTree) -> SchemaTree:
    """Change a RAML type name to a valid JSON Schema type."""
    match data.get("type"):
        case "union":
            branches = data.get("anyOf")
            if (
                isinstance(branches, list)
                and branches
                and all(isinstance(branch, dict) and branch.get("type") == "array" for branch in branches)
            ):
                data["items"] = {"anyOf": [branch.get("items", {}) for branch in branches]}
                data["type"] = "array"
                del data["anyOf"]
            else:
                data["type"] = "object"
        case "nil":
            data["type"] = "null"
        case "file":
            data = convert_file_type(data)
    return data


def convert_file_type(data: SchemaTree) -> SchemaTree:
    """Change the RAML `file` type to a binary string."""
    data["type"] = "string"
    data["media"] = {"binaryEncoding": "binary"}
    file_types = data.pop("fileTypes", None)
    if file_types:
        data["media"]["anyOf"] = [{"mediaType": file_type} for file_type in file_types]
    return data


def convert_date_type(data: SchemaTree) -> SchemaTree:
    """Change RAML date types to strings constrained by a pattern."""
    raml_type = data.get("type")
    if raml_type in DATE_PATTERNS:
        data["type"] = "string"
        data["pattern"] = DATE_PATTERNS[raml_type]
    elif raml_type == "datetime":
        data["type"] = "string"
        date_format = data.pop("format", None)
        if date_format is None or str(date_format).lower() == RFC3339:
            data["pattern"] = RFC3339_DATETIME_PATTERN
        elif str(date_format).lower() == RFC2616:
            data["pattern"] = RFC2616_DATETIME_PATTERN
    return data


def convert_display_name(data: SchemaTree) -> SchemaTree:
    """Rename `displayName` to `title`."""
    data["title"] = data.pop("displayName")
    return data


def convert_pattern_properties(data: SchemaTree) -> SchemaTree:
    """Move `/regex/` properties to `patternProperties`."""
    properties = data["properties"]
    for key in list(properties):
        if is_pattern_property(key):
            data.setdefault("patternProperties", {})[key[1:-1]] = properties.pop(key)
    return data


class SchemaRewriter:
    """Rewrites canonical RAML type trees into JSON Schema trees."""

    def __init__(self):
        self.required_stack: list[RequiredScope] = []

    def rewrite(self, type_tree: RamlTree) -> SchemaTree:
        """
        Convert a canonical type tree to JSON Schema.

        The input tree is left untouched; a new tree is returned.
        """
        self.required_stack = []
        return self._schema_form(type_tree)

    def _schema_form(self, data: Any, prop: str | None = None) -> Any:
        if isinstance(data, list):
            return [self._schema_form(element) for element in data]
        if not isinstance(data, dict):
            return data

        data = dict(data)
        self._track_required(data, prop)
        data.pop("required", None)

        is_object = declared_type(data) == "object"
        if is_object:
            properties = data.get("properties")
            self.required_stack.append(RequiredScope(props=set(properties) if isinstance(properties, dict) else set()))

        # Children first, so they can report into the scope pushed above
        for key, value in list(data.items()):
            if key in PROPERTY_MAPS and isinstance(value, dict):
                data[key] = {name: self._schema_form(prop_tree, name) for name, prop_tree in value.items()}
            elif isinstance(value, (dict, list)):
                data[key] = self._schema_form(value, key)

        if is_object:
            reqs = dedupe(self.required_stack.pop().reqs)
            if reqs:
                data["required"] = reqs

        if declared_type(data):
            data = convert_type(data)
            data = convert_date_type(data)
        if isinstance(data.get("displayName"), str):
            data = convert_display_name(data)
        if isinstance(data.get("properties"), dict):
            data = convert_pattern_properties(data)
        return data

    def _track_required(self, data: dict[str, Any], prop: str | None) -> None:
        if not self.required_stack or not prop:
            return
        if declared_type(data) is None or data.get("required") is False:
            return

        scope = self.required_stack[-1]
        if prop in scope.props and not is_pattern_property(prop):
            scope.reqs.append(prop)


def schema_form(type_tree: RamlTree) -> SchemaTree:
    """Convert a canonical RAML type tree to a JSON Schema tree."""
    return SchemaRewriter().rewrite(type_tree)
