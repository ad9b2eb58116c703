"""
Tests for the RAML to JSON Schema rewriting rules.
"""

import copy
import unittest

from ramldt2jsonschema.constants import (
    DATE_ONLY_PATTERN,
    DATETIME_ONLY_PATTERN,
    RFC2616_DATETIME_PATTERN,
    RFC3339_DATETIME_PATTERN,
    TIME_ONLY_PATTERN,
)
from ramldt2jsonschema.pipeline.schema import (
    SchemaRewriter,
    convert_date_type,
    convert_type,
    schema_form,
)


class TestRequiredProperties(unittest.TestCase):
    def test_required_and_optional(self):
        schema = schema_form(
            {
                "type": "object",
                "properties": {
                    "a": {"type": "string", "required": True},
                    "b": {"type": "string", "required": False},
                },
            }
        )
        self.assertEqual(schema["required"], ["a"])
        self.assertEqual(schema["properties"], {"a": {"type": "string"}, "b": {"type": "string"}})

    def test_missing_required_flag_means_required(self):
        schema = schema_form({"type": "object", "properties": {"a": {"type": "string"}}})
        self.assertEqual(schema["required"], ["a"])

    def test_no_required_list_when_all_optional(self):
        schema = schema_form({"type": "object", "properties": {"a": {"type": "string", "required": False}}})
        self.assertNotIn("required", schema)

    def test_required_names_are_not_duplicated(self):
        schema = schema_form(
            {
                "type": "object",
                "properties": {"a": {"type": "string"}},
                "x-extra": {"a": {"type": "string"}},
            }
        )
        self.assertEqual(schema["required"], ["a"])

    def test_nested_objects_keep_their_own_scope(self):
        schema = schema_form(
            {
                "type": "object",
                "properties": {
                    "inner": {
                        "type": "object",
                        "properties": {
                            "x": {"type": "integer"},
                            "y": {"type": "integer", "required": False},
                        },
                    },
                    "z": {"type": "boolean", "required": False},
                },
            }
        )
        self.assertEqual(schema["required"], ["inner"])
        self.assertEqual(schema["properties"]["inner"]["required"], ["x"])

    def test_pattern_properties_are_never_required(self):
        schema = schema_form(
            {
                "type": "object",
                "properties": {
                    "/^[a-z]+$/": {"type": "string", "required": True},
                    "id": {"type": "integer", "required": True},
                },
            }
        )
        self.assertEqual(schema["required"], ["id"])

    def test_array_items_do_not_report_to_enclosing_object(self):
        schema = schema_form(
            {
                "type": "object",
                "properties": {"tags": {"type": "array", "items": {"type": "string"}, "required": False}},
            }
        )
        self.assertNotIn("required", schema)

    def test_stack_is_empty_after_rewrite(self):
        rewriter = SchemaRewriter()
        rewriter.rewrite({"type": "object", "properties": {"a": {"type": "object", "properties": {}}}})
        self.assertEqual(rewriter.required_stack, [])


class TestTypeConversion(unittest.TestCase):
    def test_union_of_arrays_is_hoisted(self):
        schema = schema_form(
            {
                "type": "union",
                "anyOf": [
                    {"type": "array", "items": {"type": "string"}},
                    {"type": "array", "items": {"type": "number"}},
                ],
            }
        )
        self.assertEqual(
            schema,
            {"type": "array", "items": {"anyOf": [{"type": "string"}, {"type": "number"}]}},
        )

    def test_heterogeneous_union_falls_back_to_object(self):
        schema = schema_form(
            {"type": "union", "anyOf": [{"type": "array", "items": {"type": "string"}}, {"type": "string"}]}
        )
        self.assertEqual(schema["type"], "object")

    def test_nil(self):
        self.assertEqual(schema_form({"type": "nil"}), {"type": "null"})

    def test_file_with_file_types(self):
        schema = schema_form({"type": "file", "fileTypes": ["image/png", "image/jpeg"]})
        self.assertEqual(
            schema,
            {
                "type": "string",
                "media": {
                    "binaryEncoding": "binary",
                    "anyOf": [{"mediaType": "image/png"}, {"mediaType": "image/jpeg"}],
                },
            },
        )

    def test_file_without_file_types(self):
        schema = schema_form({"type": "file", "maxLength": 1024})
        self.assertEqual(schema, {"type": "string", "media": {"binaryEncoding": "binary"}, "maxLength": 1024})

    def test_other_types_unchanged(self):
        for raml_type in ["string", "number", "integer", "boolean", "object", "array"]:
            self.assertEqual(convert_type({"type": raml_type})["type"], raml_type)


class TestDateTypes(unittest.TestCase):
    def test_date_family(self):
        self.assertEqual(schema_form({"type": "date-only"}), {"type": "string", "pattern": DATE_ONLY_PATTERN})
        self.assertEqual(schema_form({"type": "time-only"}), {"type": "string", "pattern": TIME_ONLY_PATTERN})
        self.assertEqual(
            schema_form({"type": "datetime-only"}),
            {"type": "string", "pattern": DATETIME_ONLY_PATTERN},
        )

    def test_datetime_defaults_to_rfc3339(self):
        self.assertEqual(schema_form({"type": "datetime"}), {"type": "string", "pattern": RFC3339_DATETIME_PATTERN})
        self.assertEqual(
            schema_form({"type": "datetime", "format": "RFC3339"}),
            {"type": "string", "pattern": RFC3339_DATETIME_PATTERN},
        )

    def test_datetime_rfc2616(self):
        schema = schema_form({"type": "datetime", "format": "Rfc2616"})
        self.assertEqual(schema, {"type": "string", "pattern": RFC2616_DATETIME_PATTERN})

    def test_conversion_is_stable(self):
        schema = schema_form({"type": "datetime", "format": "rfc2616"})
        again = convert_date_type(convert_type(copy.deepcopy(schema)))
        self.assertEqual(again, schema)
        self.assertNotIn("format", again)


class TestFacetConversion(unittest.TestCase):
    def test_display_name_becomes_title(self):
        schema = schema_form({"type": "string", "displayName": "Name"})
        self.assertEqual(schema, {"type": "string", "title": "Name"})

    def test_pattern_properties(self):
        schema = schema_form(
            {
                "type": "object",
                "properties": {"/^[a-z]+$/": {"type": "string", "required": True}, "id": {"type": "integer"}},
            }
        )
        self.assertEqual(schema["properties"], {"id": {"type": "integer"}})
        self.assertEqual(schema["patternProperties"], {"^[a-z]+$": {"type": "string"}})

    def test_nested_conversions(self):
        schema = schema_form(
            {
                "type": "object",
                "properties": {
                    "born": {"type": "date-only", "displayName": "Birthday"},
                    "partner": {"type": "nil", "required": False},
                },
            }
        )
        self.assertEqual(
            schema["properties"],
            {
                "born": {"type": "string", "pattern": DATE_ONLY_PATTERN, "title": "Birthday"},
                "partner": {"type": "null"},
            },
        )

    def test_scalars_pass_through(self):
        self.assertEqual(schema_form("string"), "string")
        self.assertEqual(schema_form(3), 3)

    def test_input_is_not_modified(self):
        tree = {
            "type": "object",
            "displayName": "Thing",
            "properties": {"/x/": {"type": "file", "fileTypes": ["a/b"]}, "d": {"type": "datetime"}},
        }
        before = copy.deepcopy(tree)
        schema_form(tree)
        self.assertEqual(tree, before)


class TestPropertyMaps(unittest.TestCase):
    def test_property_named_required_is_kept(self):
        schema = schema_form(
            {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "required": True},
                    "required": {"type": "boolean", "required": True},
                },
            }
        )
        self.assertEqual(schema["properties"], {"name": {"type": "string"}, "required": {"type": "boolean"}})
        self.assertEqual(schema["required"], ["name", "required"])

    def test_properties_named_like_facets(self):
        schema = schema_form(
            {
                "type": "object",
                "properties": {
                    "displayName": {"type": "string", "required": False},
                    "properties": {"type": "integer", "required": True},
                },
            }
        )
        self.assertEqual(
            schema["properties"],
            {"displayName": {"type": "string"}, "properties": {"type": "integer"}},
        )
        self.assertNotIn("title", schema)
        self.assertEqual(schema["required"], ["properties"])
