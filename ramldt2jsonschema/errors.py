"""
Exceptions raised while converting RAML data types.

I/O, HTTP and parser errors are not wrapped: they propagate from
the library that raised them.
"""


class Dt2JsError(Exception):
    """Base class for conversion errors."""

    pass


class InvalidRamlError(Dt2JsError):
    """Raised when a document does not yield a `types` mapping."""

    def __init__(self, message: str = "Invalid RAML data"):
        super().__init__(message)


class TypeNotFoundError(Dt2JsError):
    """Raised when the requested type is not declared in the document."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"type {type_name} does not exist")


class ExpansionError(Dt2JsError):
    """Raised when a type description cannot be expanded.

    This can happen when:
    - A type expression names an unknown type
    - A type references itself
    - Inherited types are incompatible
    - A value is not a type description at all
    """

    pass
