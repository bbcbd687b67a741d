"""
Unit tests for the dataset record models.
"""

import sys
import unittest
from pathlib import Path

# Add project root to path so we can import isosubdiv as a package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from isosubdiv.errors import DatasetError
from isosubdiv.models import CountryRecord, GeneratedVariant, SubdivisionRecord


class TestCountryRecord(unittest.TestCase):
    """Test cases for CountryRecord.from_dict."""

    def test_numeric_string_is_converted(self):
        record = CountryRecord.from_dict(
            {"alpha_2": "US", "alpha_3": "USA", "name": "United States", "numeric": "840", "flag": "🇺🇸"}
        )
        self.assertEqual(record, CountryRecord("US", "USA", "United States", 840))

    def test_numeric_int_is_accepted(self):
        record = CountryRecord.from_dict({"alpha_2": "AD", "alpha_3": "AND", "name": "Andorra", "numeric": 20})
        self.assertEqual(record.numeric, 20)

    def test_invalid_numeric_is_rejected(self):
        for numeric in ("abc", None, 70000, True):
            with self.subTest(numeric=numeric):
                with self.assertRaises(DatasetError):
                    CountryRecord.from_dict(
                        {"alpha_2": "US", "alpha_3": "USA", "name": "United States", "numeric": numeric}
                    )

    def test_missing_name_is_rejected(self):
        with self.assertRaises(DatasetError):
            CountryRecord.from_dict({"alpha_2": "US", "alpha_3": "USA", "numeric": "840"})


class TestSubdivisionRecord(unittest.TestCase):
    """Test cases for SubdivisionRecord.from_dict and parent resolution."""

    def test_from_dict_without_parent(self):
        record = SubdivisionRecord.from_dict({"code": "US-AZ", "name": "Arizona", "type": "State"})
        self.assertEqual(record.code, "US-AZ")
        self.assertEqual(record.name, "Arizona")
        self.assertEqual(record.type, "State")
        self.assertIsNone(record.parent)
        self.assertIsNone(record.parent_code())
        self.assertEqual(record.country_code, "US")

    def test_suffix_parent_is_resolved_within_country(self):
        record = SubdivisionRecord.from_dict(
            {"code": "FR-75", "name": "Paris", "type": "Metropolitan department", "parent": "IDF"}
        )
        self.assertEqual(record.parent_code(), "FR-IDF")

    def test_full_code_parent_is_kept(self):
        record = SubdivisionRecord.from_dict(
            {"code": "GB-ABC", "name": "Armagh City, Banbridge and Craigavon", "type": "District", "parent": "GB-NIR"}
        )
        self.assertEqual(record.parent_code(), "GB-NIR")

    def test_malformed_codes_are_rejected(self):
        for code in ("US_NY", "us-ny", "USNY", "US-ABCD", "USA-NY", "US-", ""):
            with self.subTest(code=code):
                with self.assertRaises(DatasetError):
                    SubdivisionRecord.from_dict({"code": code, "name": "Somewhere", "type": "State"})

    def test_missing_type_is_rejected(self):
        with self.assertRaises(DatasetError):
            SubdivisionRecord.from_dict({"code": "US-NY", "name": "New York"})

    def test_non_object_entry_is_rejected(self):
        with self.assertRaises(DatasetError):
            SubdivisionRecord.from_dict(["US-NY", "New York", "State"])


class TestGeneratedVariant(unittest.TestCase):
    """Test cases for deriving template variants from records."""

    def test_identifier_replaces_dash(self):
        record = SubdivisionRecord("GB-ABC", "Armagh City, Banbridge and Craigavon", "District", "GB-NIR")
        variant = GeneratedVariant.from_record(record)
        self.assertEqual(variant.code_identifier, "GB_ABC")
        self.assertEqual(variant.code, "GB-ABC")
        self.assertEqual(variant.parent, "GB-NIR")

    def test_identifier_keeps_digits(self):
        variant = GeneratedVariant.from_record(SubdivisionRecord("AD-02", "Canillo", "Parish"))
        self.assertEqual(variant.code_identifier, "AD_02")
        self.assertIsNone(variant.parent)


if __name__ == "__main__":
    unittest.main()
