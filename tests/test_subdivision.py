"""
Unit tests for Code and Subdivision backed by the committed generated table.
"""

import importlib.util
import sys
import threading
import types
import unittest
from pathlib import Path
from unittest import mock

# Add project root to path so we can import isosubdiv as a package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from isosubdiv import SUBDIVISIONS, Code, InvalidCode, Subdivision, SubdivisionCodeParseError, for_country, lookup, parse
from isosubdiv.generate import render


def import_subdivision_module(table_source):
    """Import isosubdiv/subdivision.py against the given generated table source."""
    table = types.ModuleType("isosubdiv._table")
    exec(compile(table_source, "<generated>", "exec"), table.__dict__)
    spec = importlib.util.spec_from_file_location(
        "isosubdiv._subdivision_under_test", project_root / "isosubdiv" / "subdivision.py"
    )
    module = importlib.util.module_from_spec(spec)
    with mock.patch.dict(sys.modules, {"isosubdiv._table": table, spec.name: module}):
        spec.loader.exec_module(module)
    return module


class TestParse(unittest.TestCase):
    """Test cases for exact parsing of code strings."""

    def test_valid_codes(self):
        self.assertIs(parse("US-NY"), Code.US_NY)
        self.assertIs(parse("FR-75"), Code.FR_75)
        self.assertIs(parse("GB-ABC"), Code.GB_ABC)
        self.assertIs(Code.from_str("US-NY"), Code.US_NY)
        self.assertIs(Code("US-NY"), Code.US_NY)

    def test_invalid_codes(self):
        for value in ("fr-75", "FR_75", "invalid", "FR-7", "FR-750", " US-NY", "US-NY ", "US-", "", "US_NY"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidCode) as ctx:
                    parse(value)
                self.assertEqual(ctx.exception.value, value)

    def test_enum_lookup_raises_invalid_code(self):
        with self.assertRaises(InvalidCode):
            Code("us-ny")
        with self.assertRaises(InvalidCode):
            Code.from_str("us-ny")

    def test_non_string_is_rejected(self):
        with self.assertRaises(InvalidCode):
            parse(None)
        with self.assertRaises(InvalidCode):
            Code.from_str(42)

    def test_invalid_code_is_a_value_error(self):
        with self.assertRaises(ValueError):
            parse("invalid")
        self.assertTrue(issubclass(InvalidCode, SubdivisionCodeParseError))
        self.assertEqual(str(InvalidCode("x")), "invalid iso subdivision code string")


class TestCode(unittest.TestCase):
    """Test cases for rendering, ordering and totality of Code."""

    def test_canonical_rendering(self):
        self.assertEqual(str(Code.US_NY), "US-NY")
        self.assertEqual(f"{Code.GB_ABC}", "GB-ABC")
        self.assertEqual(Code.US_NY.country_code, "US")

    def test_round_trip_every_member(self):
        for code in Code:
            self.assertIs(parse(str(code)), code)

    def test_codes_are_unique_and_non_empty(self):
        values = [code.value for code in Code]
        self.assertTrue(all(values))
        self.assertEqual(len(values), len(set(values)))
        self.assertEqual(len(Code), len(SUBDIVISIONS))

    def test_ordinals_follow_declaration(self):
        self.assertEqual([code.ordinal for code in Code], list(range(len(Code))))

    def test_ordering_follows_declaration(self):
        members = list(Code)
        self.assertLess(members[0], members[1])
        self.assertGreater(members[-1], members[0])
        self.assertLessEqual(members[3], members[3])
        self.assertGreaterEqual(members[3], members[2])
        self.assertEqual(sorted(reversed(members)), members)

    def test_ordering_against_plain_str_raises(self):
        with self.assertRaises(TypeError):
            Code.US_NY < "AA"
        with self.assertRaises(TypeError):
            "AA" < Code.US_NY
        with self.assertRaises(TypeError):
            Code.US_NY >= "US-NY"
        with self.assertRaises(TypeError):
            sorted([Code.US_NY, "AA"])
        self.assertEqual(Code.US_NY, "US-NY")

    def test_equality_is_identity(self):
        self.assertEqual(Code.US_NY, parse("US-NY"))
        self.assertNotEqual(Code.US_NY, Code.US_AZ)
        self.assertEqual(len({Code.US_NY, parse("US-NY")}), 1)


class TestSubdivision(unittest.TestCase):
    """Test cases for the Subdivision accessors and lookups."""

    def test_accessors(self):
        arizona = Subdivision.parse("US-AZ")
        self.assertIs(arizona.code, Code.US_AZ)
        self.assertEqual(arizona.name, "Arizona")
        self.assertEqual(arizona.type, "State")
        self.assertEqual(arizona.country_code, "US")
        self.assertIsNone(arizona.parent)
        self.assertEqual(str(arizona), "US-AZ")

    def test_from_code_returns_shared_instance(self):
        self.assertIs(Subdivision.from_code(Code.US_NY), lookup("US-NY"))
        self.assertEqual(lookup("US-NY").name, "New York")

    def test_parent_lookup(self):
        paris = lookup("FR-75")
        self.assertEqual(paris.name, "Paris")
        self.assertIs(paris.parent_code, Code.FR_IDF)
        self.assertIs(paris.parent, lookup("FR-IDF"))

        armagh = lookup("GB-ABC")
        self.assertEqual(armagh.type, "District")
        self.assertIs(armagh.parent, lookup("GB-NIR"))

    def test_every_parent_resolves_within_country(self):
        for subdivision in SUBDIVISIONS:
            if subdivision.parent is not None:
                self.assertEqual(subdivision.parent.country_code, subdivision.country_code)

    def test_lookup_invalid(self):
        with self.assertRaises(InvalidCode):
            lookup("XX-NOPE")

    def test_for_country(self):
        us = for_country("US")
        self.assertIn(lookup("US-AZ"), us)
        self.assertTrue(all(s.country_code == "US" for s in us))
        self.assertEqual(us, sorted(us))
        self.assertEqual(for_country("ZZ"), [])

    def test_subdivision_is_immutable(self):
        with self.assertRaises(AttributeError):
            lookup("US-AZ").name = "Somewhere"

    def test_equality_and_ordering(self):
        self.assertEqual(Subdivision.parse("US-NY"), lookup("US-NY"))
        self.assertNotEqual(lookup("US-NY"), lookup("US-AZ"))
        first, second = SUBDIVISIONS[0], SUBDIVISIONS[1]
        self.assertLess(first, second)

    def test_concurrent_reads(self):
        results = []

        def read():
            results.append(all(parse(str(s.code)) is s.code for s in SUBDIVISIONS[:500]))

        threads = [threading.Thread(target=read) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertEqual(results, [True] * 4)


class TestEmptyTable(unittest.TestCase):
    """Test cases for the runtime module over a generated table with no members."""

    def setUp(self):
        self.module = import_subdivision_module(render([]))

    def test_module_loads(self):
        self.assertEqual(self.module.SUBDIVISIONS, ())
        self.assertEqual(len(self.module.Code), 0)

    def test_lookups_are_empty(self):
        self.assertEqual(self.module.for_country("US"), [])
        with self.assertRaises(InvalidCode):
            self.module.parse("US-NY")


if __name__ == "__main__":
    unittest.main()
