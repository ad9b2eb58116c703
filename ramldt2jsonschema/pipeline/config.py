"""
Configuration for the conversion pipeline.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from ..constants import DEFAULT_DRAFT, SCHEMA_URI_TEMPLATE


@dataclass
class ConverterConfig:
    """Configuration options for RAML to JSON Schema conversion."""

    # Directory used to resolve relative `!include` and `uses` locations
    base_path: str = field(default_factory=os.getcwd)

    # JSON Schema draft announced by the `$schema` root keyword
    draft: str = DEFAULT_DRAFT

    @property
    def schema_uri(self) -> str:
        return SCHEMA_URI_TEMPLATE.format(draft=self.draft)

    @staticmethod
    def from_dict(d: dict) -> ConverterConfig:
        """Create a config from a dictionary."""
        config = ConverterConfig()
        for k, v in d.items():
            if hasattr(config, k) and k != "schema_uri":
                setattr(config, k, v)
        # Drafts given as numbers in JSON config files, e.g. 6 -> "06"
        config.draft = str(config.draft).zfill(2)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "base_path": self.base_path,
            "draft": self.draft,
        }
