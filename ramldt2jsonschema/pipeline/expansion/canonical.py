"""
Canonical form of expanded RAML types.
"""

from __future__ import annotations

import copy
from typing import Any


def canonical_form(expanded: dict[str, Any]) -> dict[str, Any]:
    """
    Normalize an expanded type: nested unions are flattened and every
    property states whether it is required.

    The input is not modified.
    """
    return _canonicalize(expanded)


def _canonicalize(node: Any) -> Any:
    if not isinstance(node, dict):
        return copy.deepcopy(node)

    result: dict[str, Any] = {}
    for key, value in node.items():
        if key == "properties" and isinstance(value, dict):
            result[key] = {name: _canonical_property(prop) for name, prop in value.items()}
        elif key == "items":
            result[key] = _canonicalize(value)
        elif key == "anyOf" and isinstance(value, list):
            result[key] = _flatten_union([_canonicalize(branch) for branch in value])
        else:
            result[key] = copy.deepcopy(value)
    return result


def _canonical_property(prop: Any) -> Any:
    result = _canonicalize(prop)
    if isinstance(result, dict):
        result.setdefault("required", True)
    return result


def _flatten_union(branches: list[Any]) -> list[Any]:
    # Branches are canonical already, so one level of flattening suffices
    flat = []
    for branch in branches:
        if isinstance(branch, dict) and branch.get("type") == "union" and isinstance(branch.get("anyOf"), list):
            flat.extend(branch["anyOf"])
        else:
            flat.append(branch)
    return flat
