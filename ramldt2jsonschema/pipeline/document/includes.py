"""
Include resolver for RAML `!include` directives.

Fetches the content referenced by an include location, either from a
local file relative to the base path or from an HTTP(S) URL, and
classifies it as JSON, YAML/RAML or opaque text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from urllib.parse import urlparse

import requests

from ...constants import (
    JSON_CONTENT_TYPES,
    JSON_EXTENSIONS,
    RAML_CONTENT_TYPES,
    RAML_EXTENSIONS,
)

logger = logging.getLogger(__name__)


class IncludeKind(Enum):
    """How included content is spliced into the document tree."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"


@dataclass
class ResolvedInclude:
    """Content fetched for one include location."""

    location: str
    content: str
    content_type: str | None = None

    @property
    def kind(self) -> IncludeKind:
        extension = Path(urlparse(self.location).path).suffix.lower()
        if extension in JSON_EXTENSIONS or self.content_type in JSON_CONTENT_TYPES:
            return IncludeKind.JSON
        if extension in RAML_EXTENSIONS or self.content_type in RAML_CONTENT_TYPES:
            return IncludeKind.YAML
        return IncludeKind.TEXT


def is_remote(location: str) -> bool:
    """Check if a location is an HTTP(S) URL."""
    return urlparse(location).scheme in ("http", "https")


def resolve_include(base_path: str, location: str) -> ResolvedInclude:
    """
    Fetch the content referenced by an include location.

    Args:
        base_path: Directory relative locations are read from
        location: File path or HTTP(S) URL

    Returns:
        ResolvedInclude with the raw content and, for URLs, the declared content type

    Raises:
        OSError: If a local file cannot be read
        requests.RequestException: If the request fails or returns an error status
    """
    if is_remote(location):
        response = requests.get(location)
        response.raise_for_status()
        content_type = response.headers.get("content-type")
        if content_type is not None:
            content_type = content_type.split(";")[0].strip()
        logger.debug("Fetched include %s (%s)", location, content_type)
        return ResolvedInclude(location=location, content=response.text, content_type=content_type)

    path = Path(base_path) / location
    logger.debug("Reading include %s", path)
    return ResolvedInclude(location=location, content=path.read_text(encoding="utf-8"))
