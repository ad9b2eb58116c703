from pathlib import Path

import pytest

from ramldt2jsonschema.pipeline.document import TreeBuilder, compose, extract_libraries, library_or_value
from ramldt2jsonschema.pipeline.document.libraries import find_mapping_value, flatten_library

TEST_DATA = Path(__file__).parent / "test_data"


def extract(text):
    return extract_libraries(compose(text), str(TEST_DATA), TreeBuilder(str(TEST_DATA)).build)


class TestExtractLibraries:
    def test_library_types_are_flattened(self):
        libraries = extract("uses:\n  common: libraries/common.raml\ntypes: {}\n")
        assert libraries == {
            "common": {
                "Email": {"type": "string", "pattern": "^.+@.+$"},
                "Stamp": {"type": "datetime", "format": "rfc2616"},
            }
        }

    def test_no_uses_section(self):
        assert extract("types:\n  A: string\n") == {}

    def test_not_a_mapping(self):
        assert extract("- a\n- b\n") == {}
        assert extract_libraries(None, ".", TreeBuilder(".").build) == {}

    def test_missing_library_propagates(self):
        with pytest.raises(FileNotFoundError):
            extract("uses:\n  gone: libraries/gone.raml\n")


class TestHelpers:
    def test_find_mapping_value(self):
        root = compose("a: 1\nuses:\n  lib: x.raml\n")
        assert find_mapping_value(root, "uses").value[0][0].value == "lib"
        assert find_mapping_value(root, "missing") is None

    def test_flatten_library_skips_scalar_sections(self):
        flat = flatten_library({"usage": "text", "types": {"A": "string"}, "annotationTypes": {"B": "nil"}})
        assert flat == {"A": "string", "B": "nil"}

    def test_library_or_value(self):
        libraries = {"lib": {"A": {"type": "string"}}}
        assert library_or_value(libraries, "lib.A") == {"type": "string"}
        assert library_or_value(libraries, "lib.B") == "lib.B"
        assert library_or_value(libraries, "A") == "A"
        assert library_or_value(libraries, 42) == 42
        assert library_or_value(None, "lib.A") == "lib.A"
