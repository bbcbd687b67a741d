"""
Unit tests for wire serialization of subdivisions.
"""

import json
import sys
import unittest
from pathlib import Path

# Add project root to path so we can import isosubdiv as a package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from isosubdiv import (
    SUBDIVISIONS,
    Code,
    InvalidValue,
    SubdivisionEncoder,
    deserialize,
    deserialize_code,
    lookup,
    serialize,
)


class TestSerialize(unittest.TestCase):
    """Test cases for writing the canonical wire form."""

    def test_subdivision_serializes_to_dash_form(self):
        self.assertEqual(serialize(lookup("US-AZ")), "US-AZ")
        self.assertEqual(serialize(Code.US_AZ), "US-AZ")

    def test_json_encoding(self):
        payload = {"code": Code.US_AZ, "subdivision": lookup("GB-ABC")}
        encoded = json.dumps(payload, cls=SubdivisionEncoder)
        self.assertEqual(json.loads(encoded), {"code": "US-AZ", "subdivision": "GB-ABC"})

    def test_serialize_rejects_other_types(self):
        with self.assertRaises(TypeError):
            serialize("US-AZ")

    def test_symmetry_for_every_member(self):
        for subdivision in SUBDIVISIONS:
            self.assertIs(deserialize(serialize(subdivision)), subdivision)
            self.assertIs(deserialize_code(serialize(subdivision.code)), subdivision.code)


class TestDeserialize(unittest.TestCase):
    """Test cases for reading the wire form back."""

    def test_valid_value(self):
        self.assertIs(deserialize_code("FR-75"), Code.FR_75)
        self.assertEqual(deserialize("US-AZ").name, "Arizona")

    def test_identifier_form_is_rejected(self):
        with self.assertRaises(InvalidValue) as ctx:
            deserialize("US_AZ")
        self.assertEqual(ctx.exception.value, "US_AZ")
        self.assertEqual(ctx.exception.expected, "an ISO 3166-1/3166-2 compliant subdivision code")
        self.assertIn("'US_AZ'", str(ctx.exception))
        self.assertIn("an ISO 3166-1/3166-2 compliant subdivision code", str(ctx.exception))

    def test_non_string_is_rejected(self):
        for value in (None, 42, {"code": "US-AZ"}, ["US-AZ"]):
            with self.subTest(value=value):
                with self.assertRaises(InvalidValue) as ctx:
                    deserialize_code(value)
                self.assertIn("invalid type", str(ctx.exception))

    def test_json_round_trip(self):
        encoded = json.dumps([lookup("US-NY"), lookup("FR-75")], cls=SubdivisionEncoder)
        self.assertEqual([deserialize(v) for v in json.loads(encoded)], [lookup("US-NY"), lookup("FR-75")])


if __name__ == "__main__":
    unittest.main()
