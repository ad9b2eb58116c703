"""
Utility functions for the RAML to JSON Schema converter.
"""

import math
import re
from typing import Any

# Decimal numbers as accepted by a RAML scalar, e.g. "42", "-1.5", ".5", "1e3"
_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_PATTERN_PROPERTY = re.compile(r"^/.*/$")


def destringify(value: str) -> Any:
    """Restore numbers and booleans that YAML scalars carry as strings.

    Examples:
        "42" -> 42
        "1.5" -> 1.5
        "1e3" -> 1000
        "true" -> True
        "hello" -> "hello"

    Args:
        value: The raw scalar text

    Returns:
        An int, float, bool or the unchanged string
    """
    text = value.strip()
    if _NUMBER_PATTERN.match(text):
        if re.fullmatch(r"[+-]?\d+", text):
            return int(text)
        number = float(text)
        if math.isfinite(number):
            # Integral values such as "1e3" or "1.0" read as ints
            return int(number) if number.is_integer() else number
    if value == "true":
        return True
    if value == "false":
        return False
    return value


def set_path(tree: dict[str, Any], keys: list[str], value: Any) -> None:
    """Write value at the nested location named by keys.

    Missing or non-mapping intermediate entries are replaced by empty dicts.
    An empty key path merges a mapping value into the tree itself.
    """
    if not keys:
        if isinstance(value, dict):
            tree.update(value)
        return

    node = tree
    for key in keys[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[keys[-1]] = value


def is_pattern_property(name: str) -> bool:
    """Check whether a property name is a `/regex/` pattern property."""
    return bool(_PATTERN_PROPERTY.match(name))


def dedupe(values: list[Any]) -> list[Any]:
    """Remove duplicates, keeping the first occurrence of each value."""
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen
