"""
Constants shared by the RAML to JSON Schema conversion.
"""

DEFAULT_DRAFT = "06"
SCHEMA_URI_TEMPLATE = "http://json-schema.org/draft-{draft}/schema#"

RFC3339 = "rfc3339"
RFC2616 = "rfc2616"

DATE_ONLY_PATTERN = r"^(\d{4})-(\d{2})-(\d{2})$"
TIME_ONLY_PATTERN = r"^(\d{2})(:)(\d{2})(:)(\d{2})(\.\d+)?$"
DATETIME_ONLY_PATTERN = r"^(\d{4})-(\d{2})-(\d{2})T(\d{2})(:)(\d{2})(:)(\d{2})(\.\d+)?$"
RFC3339_DATETIME_PATTERN = (
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2})(:)(\d{2})(:)(\d{2})(\.\d+)?(Z|([+-])(\d{2})(:)?(\d{2}))$"
)
RFC2616_DATETIME_PATTERN = (
    r"^(?:(Sun|Mon|Tue|Wed|Thu|Fri|Sat),\s\d{2}\s(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
    r"\s\d{4}\s\d{2}:\d{2}:\d{2}\sGMT"
    r"|(Sunday|Monday|Tuesday|Wednesday|Thursday|Friday|Saturday),\s\d{2}-"
    r"(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)-\d{2}\s\d{2}:\d{2}:\d{2}\sGMT"
    r"|(Sun|Mon|Tue|Wed|Thu|Fri|Sat)\s(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
    r"\s(\d{2}| \d{1})\s\d{2}:\d{2}:\d{2}\s\d{4})$"
)

# YAML tag carried by RAML include directives
INCLUDE_TAG = "!include"

JSON_EXTENSIONS = (".json",)
RAML_EXTENSIONS = (".raml", ".yaml", ".yml")
JSON_CONTENT_TYPES = ("application/json",)
RAML_CONTENT_TYPES = (
    "application/raml+yaml",
    "text/yaml",
    "text/x-yaml",
    "application/yaml",
    "application/x-yaml",
)

BUILTIN_TYPES = frozenset(
    {
        "any",
        "string",
        "number",
        "integer",
        "boolean",
        "date-only",
        "time-only",
        "datetime-only",
        "datetime",
        "file",
        "nil",
        "object",
        "array",
        "union",
    }
)
