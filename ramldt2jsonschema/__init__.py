"""RAML data types to JSON Schema

A Python package converting RAML 1.0 data type definitions into
JSON Schema documents, resolving `!include` directives and library
references along the way.
"""

__version__ = "1.0.0"

from .errors import Dt2JsError, ExpansionError, InvalidRamlError, TypeNotFoundError
from .pipeline import ConverterConfig, Dt2JsConverter, dt2js

__all__ = [
    "dt2js",
    "Dt2JsConverter",
    "ConverterConfig",
    "Dt2JsError",
    "InvalidRamlError",
    "TypeNotFoundError",
    "ExpansionError",
]
